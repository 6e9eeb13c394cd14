"""Unit tests for CreateGuestInquiryUseCase."""

import pytest

from grifi.application.usecase.collab import (
    CreateGuestInquiryRequest,
    CreateGuestInquiryUseCase,
)
from grifi.domain.error import ContactRequiredError, NotFoundError, ValidationError
from grifi.domain.repository import ProfileRepository
from grifi.domain.value import ContactChannel, RequestStatus
from tests.conftest import make_profile
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestCreateGuestInquiryUseCase:
    """Tests for CreateGuestInquiryUseCase."""

    @pytest.mark.asyncio
    async def test_creates_inquiry_for_username(self, unit_env):
        # Arrange
        use_case = await unit_env.get(CreateGuestInquiryUseCase)
        profile_repo = await unit_env.get(ProfileRepository)
        creator = await make_profile(profile_repo, "jane.doe")

        # Act
        response = await use_case.execute(
            CreateGuestInquiryRequest(
                username="@Jane.Doe",
                contact="guest@example.com",
                message="Interested in sponsorship",
            )
        )

        # Assert
        item = response.request
        assert item.receiver_id == str(creator.id)
        assert item.sender_id is None
        assert item.status == RequestStatus.PENDING
        assert item.guest_contact.channel == ContactChannel.EMAIL
        assert item.guest_contact.reply_url == "mailto:guest@example.com"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("username", ["nobody", "not a username!"])
    async def test_unknown_username_not_found(self, unit_env, username):
        use_case = await unit_env.get(CreateGuestInquiryUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                CreateGuestInquiryRequest(
                    username=username, contact="guest@example.com", message="Hi"
                )
            )

    @pytest.mark.asyncio
    async def test_missing_contact_required(self, unit_env):
        # Arrange
        use_case = await unit_env.get(CreateGuestInquiryUseCase)
        profile_repo = await unit_env.get(ProfileRepository)
        await make_profile(profile_repo, "creator")

        # Act & Assert
        with pytest.raises(ContactRequiredError):
            await use_case.execute(
                CreateGuestInquiryRequest(username="creator", contact="  ", message="Hi")
            )

    @pytest.mark.asyncio
    async def test_invalid_contact_rejected(self, unit_env):
        # Arrange
        use_case = await unit_env.get(CreateGuestInquiryUseCase)
        profile_repo = await unit_env.get(ProfileRepository)
        await make_profile(profile_repo, "creator")

        # Act & Assert
        with pytest.raises(ValidationError):
            await use_case.execute(
                CreateGuestInquiryRequest(
                    username="creator", contact="call me maybe", message="Hi"
                )
            )
