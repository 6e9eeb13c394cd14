"""Domain services."""

from .base import Service
from .campaign_service import CampaignService
from .chat_gate_service import ChatGateService
from .chat_service import ChatService, MessagePublisher
from .collab_request_service import CollabRequestService
from .connection_service import ConnectionService
from .jwt_service import JWTService
from .lifecycle_service import CollabLifecycleService
from .profile_service import ProfileService

__all__ = [
    "CampaignService",
    "ChatGateService",
    "ChatService",
    "CollabLifecycleService",
    "CollabRequestService",
    "ConnectionService",
    "JWTService",
    "MessagePublisher",
    "ProfileService",
    "Service",
]
