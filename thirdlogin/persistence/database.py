"""Async engine and session factory for the account tables."""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from thirdlogin.config import DatabaseSettings


def create_engine(settings: DatabaseSettings, echo: bool = False) -> AsyncEngine:
    """Create the asyncpg engine.

    Every provisioning unit of work checks out its own connection next to
    the request's lookup session, so the pool is sized from settings.

    Args:
        settings: Database URL and pool sizing
        echo: Log SQL statements

    Returns:
        Async engine
    """
    return create_async_engine(
        settings.url,
        echo=echo,
        pool_pre_ping=True,
        pool_size=settings.pool_size,
        max_overflow=settings.max_overflow,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create the session factory shared by lookups and units of work.

    Mappers copy rows into frozen domain models, so nothing needs to stay
    attached after commit.
    """
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)
