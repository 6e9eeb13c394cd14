"""Domain model entities for Grifi."""

from grifi.domain.model.campaign import Campaign, CampaignApplication
from grifi.domain.model.collab_request import CollabRequest, NewCollabRequest
from grifi.domain.model.common import utc_now
from grifi.domain.model.inquiry import (
    GuestInquiry,
    GuestMessage,
    Inquiry,
    MemberInquiry,
    encode_guest_message,
    parse_guest_message,
)
from grifi.domain.model.message import ChatMessage
from grifi.domain.model.profile import Profile

__all__ = [
    "Campaign",
    "CampaignApplication",
    "ChatMessage",
    "CollabRequest",
    "GuestInquiry",
    "GuestMessage",
    "Inquiry",
    "MemberInquiry",
    "NewCollabRequest",
    "Profile",
    "encode_guest_message",
    "parse_guest_message",
    "utc_now",
]
