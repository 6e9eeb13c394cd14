"""API tests for the collaboration request flow.

Requests go through the full FastAPI stack with in-memory repositories
shared across HTTP calls.
"""

from datetime import datetime, timezone
from uuid import uuid4

import pytest
import pytest_asyncio
from dishka.integrations.fastapi import FastapiProvider
from httpx import ASGITransport, AsyncClient

from grifi.config import Settings
from grifi.domain.model import Profile
from grifi.domain.repository import ProfileRepository
from grifi.domain.value import ProfileRole, UserId, Username
from grifi.interface.api.app import create_app
from grifi.interface.api.viewer import ViewerProvider
from grifi.util.jwt import create_token
from tests.di import build_api_container


@pytest_asyncio.fixture
async def api():
    """App client plus the shared container for seeding data."""
    container = build_api_container(ViewerProvider(), FastapiProvider())
    app_instance = create_app(container)
    transport = ASGITransport(app=app_instance)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client, container
    await container.close()


async def _member(container, username: str, role=ProfileRole.CREATOR):
    """Seed a profile and return (profile, auth headers)."""
    profile_repo = await container.get(ProfileRepository)
    profile = await profile_repo.save(
        Profile(
            id=UserId(uuid4()),
            username=Username(username),
            full_name=username.title(),
            role=role,
            created_at=datetime.now(timezone.utc),
        )
    )
    token = create_token(str(profile.id), Settings().auth)
    return profile, {"Authorization": f"Bearer {token}"}


class TestCollabRoutes:
    """Tests for /collabs routes."""

    @pytest.mark.asyncio
    async def test_request_accept_then_chat(self, api):
        # Arrange
        client, container = api
        sender, sender_auth = await _member(container, "sender")
        receiver, receiver_auth = await _member(container, "receiver")

        # Act - propose
        created = await client.post(
            "/collabs",
            json={"receiver_id": str(receiver.id), "message": "Let's collab"},
            headers=sender_auth,
        )
        request_id = created.json()["request"]["request_id"]

        # Chat stays closed until accepted
        closed = await client.post(
            f"/messages/{receiver.id}", json={"content": "hi"}, headers=sender_auth
        )
        status_before = await client.get(
            f"/connections/{receiver.id}", headers=sender_auth
        )

        accepted = await client.post(
            f"/collabs/{request_id}/accept", headers=receiver_auth
        )
        sent = await client.post(
            f"/messages/{receiver.id}",
            json={"content": "hi", "client_id": "tmp-1"},
            headers=sender_auth,
        )
        conversation = await client.get(f"/messages/{sender.id}", headers=receiver_auth)

        # Assert
        assert created.status_code == 201
        assert created.json()["request"]["status"] == "pending"
        assert closed.status_code == 403
        assert status_before.json()["status"] == "pending"
        assert status_before.json()["can_message"] is False
        assert accepted.status_code == 200
        assert accepted.json()["request"]["status"] == "accepted"
        assert sent.status_code == 201
        assert sent.json()["message"]["client_id"] == "tmp-1"
        assert [m["content"] for m in conversation.json()["messages"]] == ["hi"]

    @pytest.mark.asyncio
    async def test_second_response_conflicts(self, api):
        # Arrange
        client, container = api
        _, sender_auth = await _member(container, "sender")
        receiver, receiver_auth = await _member(container, "receiver")
        created = await client.post(
            "/collabs",
            json={"receiver_id": str(receiver.id), "message": "Hello"},
            headers=sender_auth,
        )
        request_id = created.json()["request"]["request_id"]
        await client.post(f"/collabs/{request_id}/reject", headers=receiver_auth)

        # Act
        response = await client.post(
            f"/collabs/{request_id}/accept", headers=receiver_auth
        )

        # Assert
        assert response.status_code == 409

    @pytest.mark.asyncio
    async def test_sender_cannot_accept(self, api):
        # Arrange
        client, container = api
        _, sender_auth = await _member(container, "sender")
        receiver, _ = await _member(container, "receiver")
        created = await client.post(
            "/collabs",
            json={"receiver_id": str(receiver.id), "message": "Hello"},
            headers=sender_auth,
        )
        request_id = created.json()["request"]["request_id"]

        # Act
        response = await client.post(
            f"/collabs/{request_id}/accept", headers=sender_auth
        )

        # Assert
        assert response.status_code == 403

    @pytest.mark.asyncio
    async def test_self_request_is_bad_request(self, api):
        client, container = api
        member, auth = await _member(container, "member")

        response = await client.post(
            "/collabs",
            json={"receiver_id": str(member.id), "message": "Me again"},
            headers=auth,
        )

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_anonymous_is_unauthorized(self, api):
        client, _ = api

        response = await client.get("/collabs/inbox")

        assert response.status_code == 401
        assert response.headers["www-authenticate"] == "Bearer"

    @pytest.mark.asyncio
    async def test_unknown_request_not_found(self, api):
        client, container = api
        _, auth = await _member(container, "member")

        response = await client.get(f"/collabs/{uuid4()}", headers=auth)

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_cookie_authentication(self, api):
        # Arrange
        client, container = api
        member, _ = await _member(container, "member")
        token = create_token(str(member.id), Settings().auth)

        # Act
        client.cookies.set("sb-access-token", token)
        response = await client.get("/collabs/inbox")

        # Assert
        assert response.status_code == 200
        assert response.json()["incoming_pending"] == []


class TestGuestInquiryRoute:
    """Tests for POST /profiles/{username}/inquiries."""

    @pytest.mark.asyncio
    async def test_guest_inquiry_reaches_inbox(self, api):
        # Arrange
        client, container = api
        _, creator_auth = await _member(container, "creator")

        # Act
        created = await client.post(
            "/profiles/creator/inquiries",
            json={"contact": "guest@example.com", "message": "Sponsor you?"},
        )
        inbox = await client.get("/collabs/inbox", headers=creator_auth)

        # Assert
        assert created.status_code == 201
        item = inbox.json()["incoming_pending"][0]
        assert item["is_guest"] is True
        assert item["message"] == "Sponsor you?"
        assert item["guest_contact"]["reply_url"] == "mailto:guest@example.com"

    @pytest.mark.asyncio
    async def test_guest_inquiry_without_contact_rejected(self, api):
        client, container = api
        await _member(container, "creator")

        response = await client.post(
            "/profiles/creator/inquiries", json={"message": "No contact"}
        )

        assert response.status_code == 400


class TestHealth:
    """Tests for the health check."""

    @pytest.mark.asyncio
    async def test_health(self, api):
        client, _ = api

        response = await client.get("/health")

        assert response.status_code == 200
        assert response.json()["stream_subscribers"] == 0
