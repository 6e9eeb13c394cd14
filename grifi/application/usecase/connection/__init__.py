"""Connection use cases."""

from grifi.application.usecase.connection.get_connection_status import (
    GetConnectionStatusRequest,
    GetConnectionStatusResponse,
    GetConnectionStatusUseCase,
)
from grifi.application.usecase.connection.list_connections import (
    ListConnectionsRequest,
    ListConnectionsResponse,
    ListConnectionsUseCase,
)

__all__ = [
    "GetConnectionStatusRequest",
    "GetConnectionStatusResponse",
    "GetConnectionStatusUseCase",
    "ListConnectionsRequest",
    "ListConnectionsResponse",
    "ListConnectionsUseCase",
]
