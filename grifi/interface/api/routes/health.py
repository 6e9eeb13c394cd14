"""Health check route."""

from datetime import datetime, timezone

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import BaseModel

from grifi.adapter.changefeed import MessageFeed
from grifi.config import Settings
from grifi.util.observability import SERVICE_VERSION

router = APIRouter(tags=["health"], route_class=DishkaRoute)


class HealthResponse(BaseModel):
    status: str
    timestamp: datetime
    version: str
    git_sha: str
    environment: str
    stream_subscribers: int  # Open /messages/stream connections on this process


@router.get("/health", response_model=HealthResponse)
async def health_check(
    settings: FromDishka[Settings], feed: FromDishka[MessageFeed]
) -> HealthResponse:
    """Liveness check. Does not touch the database."""
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(timezone.utc),
        version=SERVICE_VERSION,
        git_sha=settings.git_sha,
        environment=settings.environment,
        stream_subscribers=feed.subscriber_count(),
    )
