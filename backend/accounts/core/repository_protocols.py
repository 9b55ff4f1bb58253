"""Boundary Protocols — persistence contracts the routes depend on.

Invariants:
    - Routes talk to persistence only through these Protocol types
    - Each method runs exactly one SQL statement
    - Implementations raise DatabaseError on failure, never return a zero value instead

Design Decisions:
    - Protocol over ABC: structural subtyping, tests can pass any object with the methods
"""

from typing import Protocol

from accounts.models.auth_user import AuthUser
from accounts.models.user import User
from accounts.schemas import auth as auth_schemas
from accounts.schemas import user as user_schemas


class AuthUserRepository(Protocol):
    """Contract for auth service account persistence."""
    async def insert(self, payload: auth_schemas.UserPayload) -> str: ...
    async def find_by_credentials(
        self, login: str, password: str,
    ) -> AuthUser | None: ...


class UserRepository(Protocol):
    """Contract for user directory persistence."""
    async def insert(self, payload: user_schemas.UserPayload) -> User: ...
    async def get(self, user_id: int) -> User | None: ...
    async def update(
        self, user_id: int, payload: user_schemas.UserPayload,
    ) -> int: ...
    async def delete(self, user_id: int) -> int: ...
