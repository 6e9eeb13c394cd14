"""Direct message routes."""

import asyncio
import contextlib
from uuid import UUID

import logfire
from dishka import AsyncContainer
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, WebSocket, WebSocketDisconnect, status
from pydantic import BaseModel, Field

from grifi.adapter.changefeed import MessageFeed, Subscription
from grifi.adapter.error import FeedClosedError
from grifi.application.usecase.chat import (
    GetConversationRequest,
    GetConversationResponse,
    GetConversationUseCase,
    MarkReadRequest,
    MarkReadResponse,
    MarkReadUseCase,
    SendMessageRequest,
    SendMessageResponse,
    SendMessageUseCase,
    to_message_item,
)
from grifi.config import AuthSettings
from grifi.domain.service import JWTService
from grifi.interface.api.viewer import Viewer, extract_token

router = APIRouter(prefix="/messages", tags=["messages"], route_class=DishkaRoute)


class SendMessageAPIRequest(BaseModel):
    """API request for sending a direct message."""

    content: str = Field(min_length=1, max_length=4000)
    client_id: str | None = Field(default=None, max_length=100)


@router.websocket("/stream")
async def message_stream(websocket: WebSocket) -> None:
    """Live feed of messages sent to or by the viewer.

    Authenticates with the same access token as HTTP routes, or a
    ``token`` query parameter for clients that cannot set headers.
    Each stored message is pushed as JSON; clients reconcile it with their
    optimistic copy by ``client_id``.
    """
    container: AsyncContainer = websocket.app.state.dishka_container
    auth_settings = await container.get(AuthSettings)
    feed = await container.get(MessageFeed)

    token = extract_token(
        websocket.headers, websocket.cookies, auth_settings
    ) or websocket.query_params.get("token")
    user_id = JWTService(auth_settings).get_user_id_from_token(token)
    if user_id is None:
        await websocket.close(code=status.WS_1008_POLICY_VIOLATION)
        return

    try:
        subscription = feed.subscribe(user_id)
    except FeedClosedError:
        await websocket.close(code=status.WS_1012_SERVICE_RESTART)
        return

    await websocket.accept()
    try:
        await forward_subscription(websocket, subscription)
    finally:
        logfire.info(
            "Message stream closed",
            user_id=str(user_id),
            dropped=subscription.dropped,
        )


async def forward_subscription(websocket: WebSocket, subscription: Subscription) -> None:
    """Push feed messages to the websocket until either side closes.

    A background task reads from the client only to notice the disconnect.
    Anything that task fails with, other than a disconnect, is re-raised here.
    """

    async def _watch_disconnect() -> None:
        try:
            while True:
                await websocket.receive_text()
        except WebSocketDisconnect:
            pass
        finally:
            subscription.close()

    watcher = asyncio.create_task(_watch_disconnect())
    try:
        async for message in subscription:
            await websocket.send_json(to_message_item(message).model_dump(mode="json"))
    except WebSocketDisconnect:
        pass
    finally:
        subscription.close()
        watcher.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await watcher


@router.get("/{partner_id}", response_model=GetConversationResponse)
async def get_conversation(
    partner_id: UUID,
    viewer: FromDishka[Viewer],
    use_case: FromDishka[GetConversationUseCase],
) -> GetConversationResponse:
    """Message history with a connected member, oldest first."""
    return await use_case.execute(
        GetConversationRequest(viewer_id=viewer.require(), partner_id=str(partner_id))
    )


@router.post(
    "/{partner_id}",
    response_model=SendMessageResponse,
    status_code=status.HTTP_201_CREATED,
)
async def send_message(
    partner_id: UUID,
    request: SendMessageAPIRequest,
    viewer: FromDishka[Viewer],
    use_case: FromDishka[SendMessageUseCase],
) -> SendMessageResponse:
    """Send a direct message.

    Only members with an accepted collaboration, or a brand and a creator
    with an approved campaign application, may message each other.

    Args:
        partner_id: Receiving member
        request: Message data
        viewer: Current viewer from DI
        use_case: Send message use case from DI

    Returns:
        The stored message, echoing client_id
    """
    return await use_case.execute(
        SendMessageRequest(
            sender_id=viewer.require(),
            receiver_id=str(partner_id),
            content=request.content,
            client_id=request.client_id,
        )
    )


@router.post("/{partner_id}/read", response_model=MarkReadResponse)
async def mark_read(
    partner_id: UUID,
    viewer: FromDishka[Viewer],
    use_case: FromDishka[MarkReadUseCase],
) -> MarkReadResponse:
    """Mark the partner's messages to the viewer as read."""
    return await use_case.execute(
        MarkReadRequest(viewer_id=viewer.require(), partner_id=str(partner_id))
    )
