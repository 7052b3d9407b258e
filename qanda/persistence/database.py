"""Async engine and session factory for PostgreSQL (asyncpg)."""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from qanda.config import Settings


def create_engine(settings: Settings) -> AsyncEngine:
    """Create the process-wide engine.

    SQL is echoed when ``settings.debug`` is set. Pooled connections are
    pinged before reuse so a restarted database does not fail the first
    request.

    Args:
        settings: Application settings

    Returns:
        Async engine
    """
    database = settings.database
    return create_async_engine(
        database.url,
        echo=settings.debug,
        pool_pre_ping=True,
        pool_size=database.pool_size,
        max_overflow=database.max_overflow,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create the factory behind the per-request session.

    Rows are mapped to immutable domain models as soon as they are read, so
    nothing relies on attribute expiry or autoflush.
    """
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)
