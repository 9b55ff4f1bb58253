"""API test fixtures — async DB + FastAPI test clients for both services.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use the test DB session
    - db_manager patched so readiness probes see the test engine
    - The auth app gets a fresh SessionStore per test

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for route tests
      (no PostgreSQL-specific features are exercised)
"""

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)

import accounts.infrastructure.database as db_module
from accounts.auth_main import app as auth_app
from accounts.core.session_store import SessionStore, get_session_store
from accounts.db.base import AuthBase, UserBase
from accounts.infrastructure.database import DatabaseSessionManager, get_db
from accounts.users_main import app as users_app


async def _make_engine(metadata):
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(metadata.create_all)
    return engine


def _override_db(app, engine):
    factory = async_sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False,
    )

    async def override_get_db():
        async with factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = engine
    fake_manager._session_factory = factory
    return fake_manager


@pytest.fixture
async def auth_engine():
    engine = await _make_engine(AuthBase.metadata)
    yield engine
    await engine.dispose()


@pytest.fixture
async def users_engine():
    engine = await _make_engine(UserBase.metadata)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_store():
    return SessionStore()


@pytest.fixture
async def auth_client(auth_engine, session_store):
    """Auth service client with DB and session store overridden."""
    fake_manager = _override_db(auth_app, auth_engine)
    auth_app.dependency_overrides[get_session_store] = lambda: session_store
    original_manager = db_module.db_manager
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=auth_app), base_url="http://test",
    ) as c:
        yield c

    auth_app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
async def users_db(users_engine):
    factory = async_sessionmaker(
        users_engine, class_=AsyncSession, expire_on_commit=False,
    )
    async with factory() as session:
        yield session


@pytest.fixture
async def users_client(users_engine):
    """User directory client with DB dependency overridden."""
    fake_manager = _override_db(users_app, users_engine)
    original_manager = db_module.db_manager
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=users_app), base_url="http://test",
    ) as c:
        yield c

    users_app.dependency_overrides.clear()
    db_module.db_manager = original_manager
