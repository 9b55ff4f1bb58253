"""User Repository — rows of the user directory service.

Invariants:
    - get() returns None for an unknown id; update()/delete() return rows affected (0 if unknown)
    - Failed writes are rolled back before DatabaseError is raised
"""

import logging

from sqlalchemy import delete, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from accounts.core.errors import DatabaseError
from accounts.models.user import User
from accounts.schemas.user import UserPayload

logger = logging.getLogger(__name__)


class SqlUserRepository:

    def __init__(self, db: AsyncSession):
        self._db = db

    async def insert(self, payload: UserPayload) -> User:
        user = User(
            username=payload.username,
            first_name=payload.first_name,
            last_name=payload.last_name,
            email=payload.email,
            phone=payload.phone,
        )
        try:
            self._db.add(user)
            await self._db.commit()
            await self._db.refresh(user)
        except SQLAlchemyError as e:
            await self._db.rollback()
            logger.error(f"Unable to insert user: {e}")
            raise DatabaseError("Unable to insert user", "insert")
        logger.info("Inserted a single record", extra={"user_id": user.id})
        return user

    async def get(self, user_id: int) -> User | None:
        try:
            result = await self._db.execute(
                select(User).where(User.id == user_id),
            )
        except SQLAlchemyError as e:
            logger.error(f"Unable to fetch user {user_id}: {e}")
            raise DatabaseError("Unable to fetch user", "select")
        return result.scalar_one_or_none()

    async def update(self, user_id: int, payload: UserPayload) -> int:
        statement = (
            update(User)
            .where(User.id == user_id)
            .values(
                username=payload.username,
                first_name=payload.first_name,
                last_name=payload.last_name,
                email=payload.email,
                phone=payload.phone,
            )
        )
        return await self._execute_write(statement, user_id, "update")

    async def delete(self, user_id: int) -> int:
        statement = delete(User).where(User.id == user_id)
        return await self._execute_write(statement, user_id, "delete")

    async def _execute_write(self, statement, user_id: int, operation: str) -> int:
        try:
            result = await self._db.execute(statement)
            await self._db.commit()
        except SQLAlchemyError as e:
            await self._db.rollback()
            logger.error(f"Unable to {operation} user {user_id}: {e}")
            raise DatabaseError(f"Unable to {operation} user", operation)
        logger.info(
            f"Total rows/record affected {result.rowcount}",
            extra={"user_id": user_id},
        )
        return result.rowcount
