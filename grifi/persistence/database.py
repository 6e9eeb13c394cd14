"""Async engine and sessions for the hosted PostgreSQL database.

The web app and this service share the database, so connections are
tagged with an application_name and queries are bounded by a statement
timeout.
"""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from grifi.config import Settings

APPLICATION_NAME = "grifi-api"


def create_engine(settings: Settings) -> AsyncEngine:
    """Create the async engine.

    Args:
        settings: Application settings

    Returns:
        Engine backed by asyncpg
    """
    database = settings.database
    return create_async_engine(
        settings.database_url,
        echo=settings.debug,
        pool_pre_ping=True,
        pool_size=database.pool_size,
        max_overflow=database.max_overflow,
        pool_recycle=database.pool_recycle_seconds,
        connect_args={
            "server_settings": {
                "application_name": APPLICATION_NAME,
                "statement_timeout": str(database.statement_timeout_ms),
            }
        },
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Session factory for request-scoped units of work.

    Repositories flush; the DI provider commits when the request ends.
    """
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)
