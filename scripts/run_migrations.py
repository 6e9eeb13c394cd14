#!/usr/bin/env python3
"""Apply Alembic migrations for the Grifi tables, reporting failures to Logfire.

Usage:
    python scripts/run_migrations.py            # upgrade to head
    python scripts/run_migrations.py 3c1f0a9d2b7e
"""

import sys
import logfire
from alembic import command
from alembic.config import Config

from grifi.config import Settings
from grifi.util.logging import setup_logging
from grifi.util.observability import configure_logfire


def main(argv: list[str]) -> int:
    """Upgrade the database to the requested revision (default: head)."""
    settings = Settings()
    configure_logfire(settings)
    setup_logging(settings)

    target = argv[0] if argv else "head"

    with logfire.span("run_migrations", target=target, environment=settings.environment):
        try:
            config = Config("alembic.ini")
            # Keep the logfire handler installed by setup_logging
            config.attributes["configure_logger"] = False
            command.upgrade(config, target)
        except Exception as e:
            logfire.error(
                "Database migration failed",
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            # Fail the deploy rather than serve a half-migrated schema
            raise

    logfire.info("Database migrations completed", target=target)
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
