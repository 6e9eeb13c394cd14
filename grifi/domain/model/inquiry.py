"""Who a collaboration request comes from.

A request is either a member inquiry (authenticated sender) or a guest
inquiry (anonymous visitor who leaves a contact handle). The tables shared
with the web app have no contact column, so guest inquiries are stored with
the contact embedded in the message text:

    [GUEST ENQUIRY]
    Contact: guest@example.com

    Message:
    Interested in sponsorship

``encode_guest_message`` and ``parse_guest_message`` convert between the two.
"""

from typing import Annotated, Literal, Union

from pydantic import Field

from grifi.domain.value import ContactHandle, UserId
from grifi.domain.value.common import ValueObject

GUEST_MARKER = "[GUEST ENQUIRY]"
_CONTACT_PREFIX = "Contact: "
_BODY_SEPARATOR = "\n\nMessage:\n"


class MemberInquiry(ValueObject):
    """Request sent by an authenticated member."""

    type: Literal["member"] = "member"
    sender_id: UserId


class GuestInquiry(ValueObject):
    """Request sent from a public profile by a visitor without an account."""

    type: Literal["guest"] = "guest"
    contact: ContactHandle | None = None


Inquiry = Annotated[Union[MemberInquiry, GuestInquiry], Field(discriminator="type")]


class GuestMessage(ValueObject):
    """Contact and body recovered from a stored guest message."""

    contact: ContactHandle
    body: str


def encode_guest_message(contact: ContactHandle, body: str) -> str:
    """Embed a guest contact handle in the stored message text."""
    return f"{GUEST_MARKER}\n{_CONTACT_PREFIX}{contact.root}{_BODY_SEPARATOR}{body}"


def parse_guest_message(text: str | None) -> GuestMessage | None:
    """Recover contact and body from a stored guest message.

    Returns None when the text is not in the guest format or the contact
    line is missing or invalid.
    """
    if not text or not text.startswith(GUEST_MARKER):
        return None

    header, sep, body = text.partition(_BODY_SEPARATOR)
    if not sep:
        return None

    contact_value = None
    for line in header.split("\n")[1:]:
        if line.startswith(_CONTACT_PREFIX):
            contact_value = line[len(_CONTACT_PREFIX) :]
            break
    if not contact_value:
        return None

    try:
        contact = ContactHandle(contact_value)
    except ValueError:
        return None
    return GuestMessage(contact=contact, body=body)
