"""Logfire setup.

Services log through logfire directly:

    import logfire

    logfire.info("Collab request created", request_id=str(request.id))

    with logfire.span("collab_lifecycle.respond", request_id=str(request_id)):
        ...
"""

from typing import Any

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from grifi.config import Settings

SERVICE_NAME = "grifi-api"
SERVICE_VERSION = "0.1.0"


def should_send(settings: Settings) -> bool:
    """Whether to export to Logfire cloud.

    An explicit OBSERVABILITY__SEND_TO_LOGFIRE wins; otherwise export
    whenever a token is configured.
    """
    observability = settings.observability
    if observability.send_to_logfire is not None:
        return observability.send_to_logfire
    return bool(observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure logfire for the API process and the scripts.

    Args:
        settings: Application settings
    """
    send = should_send(settings)
    logfire.configure(
        service_name=SERVICE_NAME,
        service_version=f"{SERVICE_VERSION}+{settings.git_sha}",
        environment=settings.environment,
        send_to_logfire=send,
        token=settings.observability.logfire_token,
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )
    logfire.info(
        "Observability configured",
        environment=settings.environment,
        send_to_logfire=send,
    )


def _connection_attributes(connection: Any, attributes: dict[str, Any]) -> dict[str, Any]:
    """Span attributes for an HTTP request or the message stream websocket.

    Query strings are left out because the stream accepts its access
    token as ``?token=``.
    """
    result = {**attributes, "path": connection.url.path}
    method = getattr(connection, "method", None)
    result["transport"] = "http" if method else "websocket"
    if method:
        result["method"] = method
    if connection.client:
        result["client_host"] = connection.client.host
    return result


def instrument_fastapi(app: FastAPI) -> None:
    """Trace HTTP routes and the message stream.

    Args:
        app: FastAPI application instance
    """
    logfire.instrument_fastapi(
        app,
        capture_headers=False,  # Authorization and cookies carry access tokens
        request_attributes_mapper=_connection_attributes,
        excluded_urls="/health",
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace SQL issued by the repositories.

    Args:
        engine: SQLAlchemy async engine
    """
    logfire.instrument_sqlalchemy(engine=engine.sync_engine)
