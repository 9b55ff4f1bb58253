"""Auth Routes — registration, login, cookie session lookup and logout.

Invariants:
    - Login creates a session only when the credentials match a stored user
    - The session cookie is HttpOnly and holds nothing but the opaque session id
    - GET /auth answers 401 without a cookie; with an unknown cookie it answers 200
      with empty X-* headers
    - Logout clears the cookie and forgets the session
"""

import logging

from fastapi import APIRouter, Depends, Request, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from accounts.config import get_settings
from accounts.core.errors import InvalidCredentialsError
from accounts.core.repository_protocols import AuthUserRepository
from accounts.core.session_store import SessionStore, SessionUser, get_session_store
from accounts.infrastructure.database import get_db
from accounts.repositories.auth_users import SqlAuthUserRepository
from accounts.schemas.auth import MessageResponse, UserInfo, UserPayload

logger = logging.getLogger(__name__)
router = APIRouter(tags=["auth"])

SIGNIN_MESSAGE = "Please go to login and provide Login/Password"


def get_auth_user_repository(
    db: AsyncSession = Depends(get_db),
) -> AuthUserRepository:
    return SqlAuthUserRepository(db)


def _cookie_name() -> str:
    return get_settings().session_cookie_name


def _header_value(value: str) -> str:
    """Carry UTF-8 bytes through Starlette's latin-1 header encoding."""
    return value.encode("utf-8").decode("latin-1")


@router.post("/register", status_code=status.HTTP_200_OK)
async def register(
    body: UserPayload,
    repo: AuthUserRepository = Depends(get_auth_user_repository),
):
    """Store a new account under a generated id."""
    await repo.insert(body)
    return Response(status_code=status.HTTP_200_OK)


@router.post("/login", response_model=UserInfo)
async def login(
    body: UserPayload,
    response: Response,
    repo: AuthUserRepository = Depends(get_auth_user_repository),
    sessions: SessionStore = Depends(get_session_store),
):
    """Check credentials, open a session and hand back the cookie."""
    user = await repo.find_by_credentials(body.login, body.password)
    if user is None:
        raise InvalidCredentialsError()

    session_id = sessions.create(SessionUser(
        id=user.id,
        login=user.login,
        email=user.email,
        first_name=user.first_name,
        last_name=user.last_name,
    ))
    response.set_cookie(_cookie_name(), session_id, httponly=True)
    logger.info("User logged in", extra={"user_id": user.id})
    return UserInfo(
        id=user.id,
        login=user.login,
        email=user.email,
        first_name=user.first_name,
        last_name=user.last_name,
    )


@router.get("/signin", response_model=MessageResponse)
async def signin():
    return MessageResponse(message=SIGNIN_MESSAGE)


@router.get("/auth")
async def auth(
    request: Request,
    sessions: SessionStore = Depends(get_session_store),
):
    """Echo the session's user as X-* headers for a fronting proxy."""
    session_id = request.cookies.get(_cookie_name())
    if session_id is None:
        return Response(status_code=status.HTTP_401_UNAUTHORIZED)

    user = sessions.get(session_id) or SessionUser()
    return Response(
        status_code=status.HTTP_200_OK,
        headers={
            "X-UserId": _header_value(user.id),
            "X-User": _header_value(user.login),
            "X-Email": _header_value(user.email),
            "X-First-Name": _header_value(user.first_name),
            "X-Last-Name": _header_value(user.last_name),
        },
    )


@router.get("/logout")
async def logout(
    request: Request,
    sessions: SessionStore = Depends(get_session_store),
):
    session_id = request.cookies.get(_cookie_name())
    if session_id is not None:
        sessions.discard(session_id)
    response = Response(status_code=status.HTTP_200_OK)
    response.delete_cookie(_cookie_name(), httponly=True)
    return response
