"""Test configuration and fixtures."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

from grifi.domain.model import CollabRequest, Profile
from grifi.domain.repository import CollabRequestRepository, ProfileRepository
from grifi.domain.value import (
    CollabRequestId,
    ProfileRole,
    RequestKind,
    RequestStatus,
    UserId,
    Username,
)


async def make_profile(
    profile_repo: ProfileRepository,
    username: str | None = None,
    full_name: str | None = None,
    role: ProfileRole = ProfileRole.CREATOR,
) -> Profile:
    """Save a profile with a fresh id."""
    profile = Profile(
        id=UserId(uuid4()),
        username=Username(username) if username else None,
        full_name=full_name,
        role=role,
        created_at=datetime.now(timezone.utc),
    )
    return await profile_repo.save(profile)


async def make_request(
    request_repo: CollabRequestRepository,
    sender_id: UserId | None,
    receiver_id: UserId,
    status: RequestStatus = RequestStatus.PENDING,
    created_at: datetime | None = None,
    message: str = "Let's work together",
) -> CollabRequest:
    """Save a collaboration request directly, bypassing service checks."""
    request = CollabRequest(
        id=CollabRequestId(uuid4()),
        sender_id=sender_id,
        receiver_id=receiver_id,
        kind=RequestKind.COLLAB,
        status=status,
        message=message,
        created_at=created_at or datetime.now(timezone.utc),
    )
    return await request_repo.save(request)


def minutes_ago(minutes: int) -> datetime:
    return datetime.now(timezone.utc) - timedelta(minutes=minutes)
