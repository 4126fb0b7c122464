"""
SQLAlchemy async engine and session management

Database: owns one AsyncEngine plus its session factory and is provided as a
singleton by the DI container. Repositories receive `Database.session` as
their session_factory.
"""

from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from src.platform.config.core_setting import settings
from src.platform.logging.loguru_io import Logger


# Integer columns are int4 on PostgreSQL
MAX_INTEGER_ID = 2_147_483_647


class Base(DeclarativeBase):
    pass


def is_storable_id(value: int) -> bool:
    return 0 < value <= MAX_INTEGER_ID


def _engine_options(db_url: str) -> dict[str, Any]:
    # Pool sizing only applies to server databases (SQLite uses a static/null pool)
    if not db_url.startswith('postgresql'):
        return {}
    return {
        'pool_size': settings.DB_POOL_SIZE,
        'max_overflow': settings.DB_POOL_MAX_OVERFLOW,
        'pool_timeout': settings.DB_POOL_TIMEOUT,
        'pool_recycle': settings.DB_POOL_RECYCLE,
        'pool_pre_ping': settings.DB_POOL_PRE_PING,
    }


class Database:
    """Database class for managing async sessions following dependency-injector best practices"""

    def __init__(self, db_url: str) -> None:
        self._engine: AsyncEngine = create_async_engine(
            db_url,
            echo=False,
            **_engine_options(db_url),
        )
        self._session_factory = async_sessionmaker(
            self._engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @property
    def engine(self) -> AsyncEngine:
        return self._engine

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Context manager for database sessions"""
        async with self._session_factory() as session:
            try:
                yield session
            except Exception:
                Logger.base.warning('🔙 [DB] Session rollback because of exception')
                await session.rollback()
                raise

    async def create_db_and_tables(self) -> None:
        """Create database tables if they don't exist (local runs and tests; production uses Alembic)"""
        # Importing the models registers them on Base.metadata
        import src.service.lodging.driven_adapter.model  # noqa: F401

        async with self._engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all, checkfirst=True)
        Logger.base.info('🗄️  [DB] Tables ensured')

    async def dispose(self) -> None:
        await self._engine.dispose()
        Logger.base.info('🗄️  [DB] Engine disposed')
