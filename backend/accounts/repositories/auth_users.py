"""Auth User Repository — account rows of the auth service.

Invariants:
    - insert() generates the UUID id before the INSERT
    - find_by_credentials() returns the first matching row or None; None is not an error
"""

import logging
import uuid

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from accounts.core.errors import DatabaseError
from accounts.models.auth_user import AuthUser
from accounts.schemas.auth import UserPayload

logger = logging.getLogger(__name__)


class SqlAuthUserRepository:

    def __init__(self, db: AsyncSession):
        self._db = db

    async def insert(self, payload: UserPayload) -> str:
        user = AuthUser(
            id=str(uuid.uuid4()),
            login=payload.login,
            password=payload.password,
            email=payload.email,
            first_name=payload.first_name,
            last_name=payload.last_name,
        )
        try:
            self._db.add(user)
            await self._db.commit()
        except SQLAlchemyError as e:
            await self._db.rollback()
            logger.error(f"Unable to insert user: {e}")
            raise DatabaseError("Unable to insert user", "insert")
        logger.info("Inserted a single record", extra={"user_id": user.id})
        return user.id

    async def find_by_credentials(
        self, login: str, password: str,
    ) -> AuthUser | None:
        query = select(AuthUser).where(
            AuthUser.login == login, AuthUser.password == password,
        )
        try:
            result = await self._db.execute(query)
        except SQLAlchemyError as e:
            logger.error(f"Unable to look up user: {e}")
            raise DatabaseError("Unable to look up user", "select")
        user = result.scalars().first()
        if user is None:
            logger.info("No rows were returned")
        return user
