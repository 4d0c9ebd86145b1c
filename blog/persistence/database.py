"""Async engine and session factory for the comment store."""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from blog.config import Settings


def create_engine(settings: Settings) -> AsyncEngine:
    """Build the asyncpg engine.

    Connections are tagged with an application name so long-running thread
    queries can be spotted in ``pg_stat_activity``.
    """
    db = settings.database
    return create_async_engine(
        db.url,
        echo=settings.debug,
        pool_pre_ping=True,
        pool_size=db.pool_size,
        max_overflow=db.max_overflow,
        connect_args={"server_settings": {"application_name": "blog-comments"}},
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    # One session per request; the DI provider owns commit and rollback
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)
