"""User Directory Routes — CRUD over the users table.

Invariants:
    - {user_id} must parse as an integer, otherwise 400 Error (validation handler)
    - Unknown ids answer 404 Error on GET, PUT and DELETE
    - DELETE answers 204 with no body
"""

import logging

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from accounts.core.errors import ResourceNotFoundError
from accounts.core.repository_protocols import UserRepository
from accounts.infrastructure.database import get_db
from accounts.models.user import User
from accounts.repositories.users import SqlUserRepository
from accounts.schemas.user import UserPayload, UserResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/user", tags=["users"])


def get_user_repository(
    db: AsyncSession = Depends(get_db),
) -> UserRepository:
    return SqlUserRepository(db)


def _to_response(user: User) -> UserResponse:
    return UserResponse(
        id=user.id,
        username=user.username,
        first_name=user.first_name,
        last_name=user.last_name,
        email=user.email,
        phone=user.phone,
    )


@router.post("", response_model=UserResponse)
async def add_user(
    body: UserPayload, repo: UserRepository = Depends(get_user_repository),
):
    user = await repo.insert(body)
    return _to_response(user)


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: int, repo: UserRepository = Depends(get_user_repository),
):
    user = await repo.get(user_id)
    if user is None:
        raise ResourceNotFoundError("User", str(user_id))
    return _to_response(user)


@router.put("/{user_id}", response_model=UserResponse)
async def update_user(
    user_id: int,
    body: UserPayload,
    repo: UserRepository = Depends(get_user_repository),
):
    """Replace every field of an existing user."""
    if await repo.update(user_id, body) == 0:
        raise ResourceNotFoundError("User", str(user_id))
    return UserResponse(id=user_id, **body.model_dump())


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(
    user_id: int, repo: UserRepository = Depends(get_user_repository),
):
    if await repo.delete(user_id) == 0:
        raise ResourceNotFoundError("User", str(user_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
