"""Database manager and repositories against in-memory SQLite.

Invariants:
    - create_tables() makes the users table usable
    - SQL failures surface as DatabaseError, not as zero values
"""

import pytest

from accounts.core.errors import DatabaseError
from accounts.db.base import UserBase
from accounts.infrastructure.database import DatabaseSessionManager
from accounts.repositories.users import SqlUserRepository
from accounts.schemas.user import UserPayload


@pytest.fixture
async def manager():
    mgr = DatabaseSessionManager("sqlite+aiosqlite:///:memory:")
    yield mgr
    await mgr.dispose()


async def test_health_check_succeeds_on_reachable_database(manager):
    assert await manager.health_check() is True


async def test_repository_round_trip_after_create_tables(manager):
    await manager.create_tables(UserBase.metadata)

    async with manager.session() as db:
        repo = SqlUserRepository(db)
        user = await repo.insert(UserPayload(username="frank", phone="1"))
        assert (await repo.get(user.id)).username == "frank"
        assert await repo.update(user.id, UserPayload(username="frankie")) == 1
        assert (await repo.get(user.id)).username == "frankie"
        assert await repo.delete(user.id) == 1
        assert await repo.get(user.id) is None


async def test_missing_table_raises_database_error(manager):
    async with manager.session() as db:
        with pytest.raises(DatabaseError) as exc_info:
            await SqlUserRepository(db).get(1)
    assert exc_info.value.http_status == 503
    assert exc_info.value.operation == "select"
