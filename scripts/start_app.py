#!/usr/bin/env python3
"""Start the FastAPI application with Logfire error tracking for startup errors."""

import sys
import logfire
import uvicorn

from grifi.config import Settings
from grifi.util.error import ConfigurationError
from grifi.util.logging import setup_logging
from grifi.util.observability import configure_logfire

_DEFAULT_JWT_SECRET = "CHANGE_ME_IN_PRODUCTION"


def check_settings(settings: Settings) -> None:
    """Refuse to start production with development defaults.

    Raises:
        ConfigurationError: If a required production setting is missing
    """
    if settings.environment != "production":
        return
    if settings.auth.jwt_secret == _DEFAULT_JWT_SECRET:
        raise ConfigurationError("AUTH__JWT_SECRET", "must be set in production")


def main() -> int:
    """Start the application and log any startup errors to Logfire."""
    settings = Settings()

    # Configure Logfire early to catch startup errors
    configure_logfire(settings)
    setup_logging(settings)

    try:
        check_settings(settings)
        logfire.info("Starting FastAPI application")

        uvicorn.run(
            "grifi.interface.api.app:create_app",
            factory=True,
            host="0.0.0.0",
            port=settings.port,
            log_level="info",
            log_config=None,  # Keep the logfire handler from setup_logging
        )

        return 0

    except Exception as e:
        logfire.error(
            "Application startup failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        # Re-raise so the container fails properly
        raise


if __name__ == "__main__":
    sys.exit(main())
