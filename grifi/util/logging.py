"""Standard library logging setup.

Application code logs through logfire. Uvicorn, SQLAlchemy, asyncpg and
Alembic use the standard library, so their records are forwarded to
logfire as well and end up next to the application's spans.
"""

import logging

import logfire

from grifi.config import Settings

# Per-library thresholds; SQL itself is traced by the SQLAlchemy instrumentation
_LIBRARY_LEVELS = {
    "sqlalchemy.engine": logging.WARNING,
    "asyncpg": logging.WARNING,
    "uvicorn.access": logging.WARNING,
    "alembic": logging.INFO,
}


def log_level(settings: Settings) -> int:
    """Root level for the environment."""
    if settings.debug:
        return logging.DEBUG
    if settings.environment == "test":
        return logging.WARNING
    return logging.INFO


def setup_logging(settings: Settings) -> None:
    """Forward standard library logging to logfire.

    Args:
        settings: Application settings
    """
    level = log_level(settings)
    logging.basicConfig(
        level=level,
        handlers=[logfire.LogfireLoggingHandler()],
        force=True,
    )
    for name, library_level in _LIBRARY_LEVELS.items():
        logging.getLogger(name).setLevel(max(level, library_level))

    logfire.info(
        "Logging configured",
        environment=settings.environment,
        level=logging.getLevelName(level),
    )
