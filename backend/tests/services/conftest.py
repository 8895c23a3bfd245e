"""Service test fixtures — async DB, pinned clock, fresh cache, FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - Schema-qualified tables (core.*, academics.*, ...) are flattened for SQLite
      through schema_translate_map
    - get_db and get_clock overridden; app.state.cache replaced per test
      (ASGITransport does not run the lifespan)
    - db_manager patched so the readiness probe sees the test engine
"""

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)

from slate.api.dependencies import get_clock
from slate.db.base import Base, ALL_SCHEMAS
from slate.infrastructure.cache import TTLCache
from slate.infrastructure.database import get_db, DatabaseSessionManager
import slate.infrastructure.database as db_module
import slate.models  # noqa: F401
from slate.main import app
from tests.services.helpers import WallClock, sign_up


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False,
        execution_options={
            "schema_translate_map": {schema: None for schema in ALL_SCHEMAS},
        },
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
def wall_clock():
    return WallClock()


@pytest.fixture
def cache():
    return TTLCache()


@pytest.fixture
async def client(test_engine, test_session_factory, wall_clock, cache):
    """FastAPI test client with DB, clock and cache replaced."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_clock] = lambda: wall_clock
    app.state.cache = cache

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
async def user(client):
    return await sign_up(client)
