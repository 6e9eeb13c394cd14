"""Unit tests for CollabRequestService."""

from uuid import uuid4

import pytest

from grifi.domain.error import (
    ConcurrencyConflictError,
    ContactRequiredError,
    NotFoundError,
    ValidationError,
)
from grifi.domain.model import (
    GuestInquiry,
    MemberInquiry,
    NewCollabRequest,
    encode_guest_message,
)
from grifi.domain.repository import CollabRequestRepository, ProfileRepository
from grifi.domain.service import CollabRequestService
from grifi.domain.value import (
    CollabRequestId,
    ContactHandle,
    RequestKind,
    RequestStatus,
    UserId,
)
from tests.conftest import make_profile, make_request, minutes_ago
from tests.harness import create_env_fixture

# Unit test fixture - everything in memory
unit_env = create_env_fixture()


class TestCreateMemberRequest:
    """Tests for create with a member inquiry."""

    @pytest.mark.asyncio
    async def test_create_stores_pending_request(self, unit_env):
        """New requests start pending with no response time."""
        # Arrange
        service = await unit_env.get(CollabRequestService)
        request_repo = await unit_env.get(CollabRequestRepository)
        profile_repo = await unit_env.get(ProfileRepository)
        sender = await make_profile(profile_repo, "sender")
        receiver = await make_profile(profile_repo, "receiver")

        # Act
        result = await service.create(
            NewCollabRequest(
                inquiry=MemberInquiry(sender_id=sender.id),
                receiver_id=receiver.id,
                kind=RequestKind.SPONSORSHIP,
                message="  Want to sponsor your next video?  ",
            )
        )

        # Assert
        assert result.status == RequestStatus.PENDING
        assert result.sender_id == sender.id
        assert result.receiver_id == receiver.id
        assert result.kind == RequestKind.SPONSORSHIP
        assert result.message == "Want to sponsor your next video?"
        assert result.responded_at is None
        assert await request_repo.find_by_id(result.id) == result

    @pytest.mark.asyncio
    async def test_repeat_requests_are_separate(self, unit_env):
        """Sending twice creates two requests."""
        # Arrange
        service = await unit_env.get(CollabRequestService)
        profile_repo = await unit_env.get(ProfileRepository)
        sender = await make_profile(profile_repo)
        receiver = await make_profile(profile_repo)
        new_request = NewCollabRequest(
            inquiry=MemberInquiry(sender_id=sender.id),
            receiver_id=receiver.id,
            message="Hello",
        )

        # Act
        first = await service.create(new_request)
        second = await service.create(new_request)

        # Assert
        assert first.id != second.id
        assert len(await service.list_by_receiver(receiver.id)) == 2

    @pytest.mark.asyncio
    async def test_self_request_rejected(self, unit_env):
        # Arrange
        service = await unit_env.get(CollabRequestService)
        profile_repo = await unit_env.get(ProfileRepository)
        member = await make_profile(profile_repo)

        # Act & Assert
        with pytest.raises(ValidationError):
            await service.create(
                NewCollabRequest(
                    inquiry=MemberInquiry(sender_id=member.id),
                    receiver_id=member.id,
                    message="Hello me",
                )
            )

    @pytest.mark.asyncio
    @pytest.mark.parametrize("message", ["", "   \n "])
    async def test_blank_message_rejected(self, unit_env, message):
        # Arrange
        service = await unit_env.get(CollabRequestService)
        profile_repo = await unit_env.get(ProfileRepository)
        receiver = await make_profile(profile_repo)

        # Act & Assert
        with pytest.raises(ValidationError):
            await service.create(
                NewCollabRequest(
                    inquiry=MemberInquiry(sender_id=UserId(uuid4())),
                    receiver_id=receiver.id,
                    message=message,
                )
            )

    @pytest.mark.asyncio
    async def test_too_long_message_rejected(self, unit_env):
        # Arrange
        service = await unit_env.get(CollabRequestService)
        profile_repo = await unit_env.get(ProfileRepository)
        receiver = await make_profile(profile_repo)

        # Act & Assert
        with pytest.raises(ValidationError):
            await service.create(
                NewCollabRequest(
                    inquiry=MemberInquiry(sender_id=UserId(uuid4())),
                    receiver_id=receiver.id,
                    message="x" * (service.max_message_length + 1),
                )
            )

    @pytest.mark.asyncio
    async def test_unknown_receiver_not_found(self, unit_env):
        # Arrange
        service = await unit_env.get(CollabRequestService)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await service.create(
                NewCollabRequest(
                    inquiry=MemberInquiry(sender_id=UserId(uuid4())),
                    receiver_id=UserId(uuid4()),
                    message="Hello",
                )
            )


class TestCreateGuestInquiry:
    """Tests for create with a guest inquiry."""

    @pytest.mark.asyncio
    async def test_guest_inquiry_keeps_contact(self, unit_env):
        # Arrange
        service = await unit_env.get(CollabRequestService)
        profile_repo = await unit_env.get(ProfileRepository)
        receiver = await make_profile(profile_repo, "creator")

        # Act
        result = await service.create(
            NewCollabRequest(
                inquiry=GuestInquiry(contact=ContactHandle("guest@example.com")),
                receiver_id=receiver.id,
                message="Interested in sponsorship",
            )
        )

        # Assert
        assert result.is_guest
        assert result.sender_id is None
        assert result.guest_contact == ContactHandle("guest@example.com")
        assert result.message == "Interested in sponsorship"

    @pytest.mark.asyncio
    async def test_guest_contact_recovered_from_message(self, unit_env):
        """Older clients embed the contact in the message text."""
        # Arrange
        service = await unit_env.get(CollabRequestService)
        profile_repo = await unit_env.get(ProfileRepository)
        receiver = await make_profile(profile_repo)
        text = encode_guest_message(ContactHandle("+1 555 010 9999"), "Call me")

        # Act
        result = await service.create(
            NewCollabRequest(
                inquiry=GuestInquiry(), receiver_id=receiver.id, message=text
            )
        )

        # Assert
        assert result.guest_contact == ContactHandle("+1 555 010 9999")
        assert result.message == "Call me"

    @pytest.mark.asyncio
    async def test_guest_without_contact_rejected(self, unit_env):
        # Arrange
        service = await unit_env.get(CollabRequestService)
        profile_repo = await unit_env.get(ProfileRepository)
        receiver = await make_profile(profile_repo)

        # Act & Assert
        with pytest.raises(ContactRequiredError):
            await service.create(
                NewCollabRequest(
                    inquiry=GuestInquiry(),
                    receiver_id=receiver.id,
                    message="No way to reach me",
                )
            )


class TestUpdateStatus:
    """Tests for the conditional status write."""

    @pytest.mark.asyncio
    async def test_writes_when_expected_status_matches(self, unit_env):
        # Arrange
        service = await unit_env.get(CollabRequestService)
        request_repo = await unit_env.get(CollabRequestRepository)
        request = await make_request(request_repo, UserId(uuid4()), UserId(uuid4()))

        # Act
        updated = await service.update_status(request.id, RequestStatus.ACCEPTED)

        # Assert
        assert updated.status == RequestStatus.ACCEPTED
        assert updated.responded_at is not None

    @pytest.mark.asyncio
    async def test_stale_expected_status_conflicts(self, unit_env):
        """A write based on an outdated read must not overwrite the newer status."""
        # Arrange
        service = await unit_env.get(CollabRequestService)
        request_repo = await unit_env.get(CollabRequestRepository)
        request = await make_request(request_repo, UserId(uuid4()), UserId(uuid4()))
        await service.update_status(request.id, RequestStatus.REJECTED)

        # Act & Assert
        with pytest.raises(ConcurrencyConflictError):
            await service.update_status(request.id, RequestStatus.ACCEPTED)

        stored = await request_repo.find_by_id(request.id)
        assert stored.status == RequestStatus.REJECTED

    @pytest.mark.asyncio
    async def test_missing_request_not_found(self, unit_env):
        service = await unit_env.get(CollabRequestService)

        with pytest.raises(NotFoundError):
            await service.update_status(
                CollabRequestId(uuid4()), RequestStatus.ACCEPTED
            )


class TestListRequests:
    """Tests for list_by_receiver and list_by_sender."""

    @pytest.mark.asyncio
    async def test_lists_newest_first_with_status_filter(self, unit_env):
        # Arrange
        service = await unit_env.get(CollabRequestService)
        request_repo = await unit_env.get(CollabRequestRepository)
        receiver = UserId(uuid4())
        old = await make_request(
            request_repo, UserId(uuid4()), receiver, created_at=minutes_ago(30)
        )
        new = await make_request(
            request_repo, UserId(uuid4()), receiver, created_at=minutes_ago(5)
        )
        await make_request(
            request_repo,
            UserId(uuid4()),
            receiver,
            status=RequestStatus.REJECTED,
            created_at=minutes_ago(1),
        )

        # Act
        pending = await service.list_by_receiver(receiver, RequestStatus.PENDING)
        everything = await service.list_by_receiver(receiver)

        # Assert
        assert [r.id for r in pending] == [new.id, old.id]
        assert len(everything) == 3

    @pytest.mark.asyncio
    async def test_list_by_sender_excludes_received(self, unit_env):
        # Arrange
        service = await unit_env.get(CollabRequestService)
        request_repo = await unit_env.get(CollabRequestRepository)
        me, other = UserId(uuid4()), UserId(uuid4())
        sent = await make_request(request_repo, me, other)
        await make_request(request_repo, other, me)

        # Act
        result = await service.list_by_sender(me)

        # Assert
        assert [r.id for r in result] == [sent.id]
