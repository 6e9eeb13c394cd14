"""Unit tests for guest inquiry encoding and request origin."""

from uuid import uuid4

from grifi.domain.model import (
    CollabRequest,
    GuestInquiry,
    MemberInquiry,
    NewCollabRequest,
    encode_guest_message,
    parse_guest_message,
)
from grifi.domain.value import CollabRequestId, ContactHandle, UserId


class TestGuestMessageFormat:
    """Tests for encode_guest_message and parse_guest_message."""

    def test_encode_matches_stored_format(self):
        """Encoded text uses the layout the web app writes."""
        text = encode_guest_message(
            ContactHandle("guest@example.com"), "Interested in sponsorship"
        )

        assert text == (
            "[GUEST ENQUIRY]\n"
            "Contact: guest@example.com\n"
            "\n"
            "Message:\n"
            "Interested in sponsorship"
        )

    def test_parse_recovers_contact_and_body(self):
        """Parsing an encoded message gives back contact and body."""
        body = "Line one\n\nMessage:\nline that looks like a separator"
        text = encode_guest_message(ContactHandle("+44 7700 900123"), body)

        parsed = parse_guest_message(text)

        assert parsed is not None
        assert parsed.contact.root == "+44 7700 900123"
        assert parsed.body == body

    def test_parse_plain_message_returns_none(self):
        """Member messages are not in the guest format."""
        assert parse_guest_message("Hi, want to collaborate?") is None
        assert parse_guest_message(None) is None
        assert parse_guest_message("") is None

    def test_parse_without_contact_line_returns_none(self):
        """A marker without a contact line is not a usable guest message."""
        assert parse_guest_message("[GUEST ENQUIRY]\n\nMessage:\nhello") is None

    def test_parse_with_invalid_contact_returns_none(self):
        """An unusable contact makes the whole message unparseable."""
        text = "[GUEST ENQUIRY]\nContact: nobody\n\nMessage:\nhello"

        assert parse_guest_message(text) is None


class TestRequestOrigin:
    """Tests for CollabRequest.inquiry and NewCollabRequest parsing."""

    def test_member_request_has_member_inquiry(self):
        sender_id = UserId(uuid4())
        request = CollabRequest(
            id=CollabRequestId(uuid4()),
            sender_id=sender_id,
            receiver_id=UserId(uuid4()),
            message="hello",
        )

        assert request.inquiry == MemberInquiry(sender_id=sender_id)
        assert not request.is_guest

    def test_guest_request_has_guest_inquiry(self):
        contact = ContactHandle("guest@example.com")
        request = CollabRequest(
            id=CollabRequestId(uuid4()),
            sender_id=None,
            receiver_id=UserId(uuid4()),
            message="hello",
            guest_contact=contact,
        )

        assert request.inquiry == GuestInquiry(contact=contact)
        assert request.is_guest
        assert request.partner_of(request.receiver_id) is None

    def test_new_request_discriminates_on_type(self):
        """Input payloads pick the inquiry variant by its type tag."""
        receiver_id = uuid4()

        new_request = NewCollabRequest.model_validate(
            {
                "inquiry": {"type": "guest", "contact": "guest@example.com"},
                "receiver_id": receiver_id,
                "message": "hello",
            }
        )

        assert isinstance(new_request.inquiry, GuestInquiry)
        assert new_request.inquiry.contact.root == "guest@example.com"

    def test_is_between_is_symmetric(self):
        a, b, c = UserId(uuid4()), UserId(uuid4()), UserId(uuid4())
        request = CollabRequest(
            id=CollabRequestId(uuid4()), sender_id=a, receiver_id=b, message="hi"
        )

        assert request.is_between(a, b)
        assert request.is_between(b, a)
        assert not request.is_between(a, c)
