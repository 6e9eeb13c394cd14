"""Unit tests for domain value types."""

import pytest
from pydantic import ValidationError

from grifi.domain.value import ContactChannel, ContactHandle, Username


class TestUsername:
    """Tests for Username value object."""

    def test_normalizes_case_and_leading_at(self):
        """Usernames are case-insensitive and may be typed with @."""
        assert Username("@Jane.Doe").root == "jane.doe"

    @pytest.mark.parametrize("value", ["a", "has space", "semi;colon", "x" * 41])
    def test_rejects_invalid_usernames(self, value):
        """Should reject usernames outside the allowed format."""
        with pytest.raises(ValidationError):
            Username(value)


class TestContactHandle:
    """Tests for ContactHandle value object."""

    def test_email_contact(self):
        """Email contacts are replied to by mail."""
        # Act
        contact = ContactHandle("  guest@example.com ")

        # Assert
        assert contact.root == "guest@example.com"
        assert contact.channel == ContactChannel.EMAIL
        assert contact.reply_url == "mailto:guest@example.com"

    def test_phone_contact(self):
        """Phone contacts are replied to on WhatsApp, digits only."""
        # Act
        contact = ContactHandle("+44 7700 900-123")

        # Assert
        assert contact.channel == ContactChannel.WHATSAPP
        assert contact.reply_url == "https://wa.me/447700900123"

    @pytest.mark.parametrize(
        "value",
        ["", "   ", "not a contact", "@example.com", "guest@localhost", "12", "a@b.c\nx"],
    )
    def test_rejects_invalid_contacts(self, value):
        """Should reject values that are neither email nor phone."""
        with pytest.raises(ValidationError):
            ContactHandle(value)

    def test_serializes_as_plain_string(self):
        """model_dump of a root value object is the primitive."""
        assert ContactHandle("guest@example.com").model_dump() == "guest@example.com"
