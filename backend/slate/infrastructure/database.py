"""Database Session Manager — async connection pool with automatic rollback and health checks.

Invariants:
    - Every session auto-rolls-back on exception (no partial commits leak)
    - Connection pool uses pool_pre_ping for stale connection detection
    - All SQLAlchemy exceptions mapped to PersistenceError (core/errors.py)

Design Decisions:
    - Singleton db_manager initialized on startup: FastAPI lifespan manages lifecycle
    - expire_on_commit=False: prevents lazy-load issues in async context
    - guarded() applies the same exception mapping inside services, so a failed
      statement surfaces as PersistenceError before the request session closes
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.exc import (
    IntegrityError, OperationalError, DBAPIError, SQLAlchemyError,
)
from sqlalchemy import text

from slate.core.errors import PersistenceError

logger = logging.getLogger(__name__)


@asynccontextmanager
async def guarded(db: AsyncSession, operation: str) -> AsyncGenerator[AsyncSession, None]:
    """Run a unit of work; on SQLAlchemy failure roll back and raise PersistenceError."""
    try:
        yield db
    except IntegrityError as e:
        await db.rollback()
        logger.error(f"DB integrity error during {operation}: {e}")
        raise PersistenceError("Integrity constraint violated", operation)
    except OperationalError as e:
        await db.rollback()
        logger.error(f"DB operational error during {operation}: {e}")
        raise PersistenceError("Connection or operational error", operation)
    except DBAPIError as e:
        await db.rollback()
        logger.error(f"DB driver error during {operation}: {e}")
        raise PersistenceError("Database driver error", operation)
    except SQLAlchemyError as e:
        await db.rollback()
        logger.error(f"SQLAlchemy error during {operation}: {e}")
        raise PersistenceError("Database operation failed", operation)


class DatabaseSessionManager:
    """Manages async database sessions with pooling, rollback, and health checks."""

    def __init__(
        self, database_url: str, pool_size: int = 20, max_overflow: int = 10,
    ):
        self.engine = create_async_engine(
            database_url,
            pool_size=pool_size,
            max_overflow=max_overflow,
            pool_pre_ping=True,
            pool_recycle=3600,
        )
        self._session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Provide session with auto-rollback on exception."""
        session = self._session_factory()
        try:
            async with guarded(session, "session"):
                yield session
        finally:
            await session.close()

    async def health_check(self) -> bool:
        """Check database connectivity (for readiness probes)."""
        try:
            async with self.session() as db:
                await db.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.error(f"DB health check failed: {e}")
            return False

    async def dispose(self) -> None:
        await self.engine.dispose()


# Singleton (initialized on startup)
db_manager: DatabaseSessionManager | None = None


def init_db(database_url: str, **kwargs) -> DatabaseSessionManager:
    global db_manager
    db_manager = DatabaseSessionManager(database_url, **kwargs)
    return db_manager


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency for database sessions."""
    if not db_manager:
        raise RuntimeError("Database not initialized")
    async with db_manager.session() as session:
        yield session
