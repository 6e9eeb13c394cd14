"""Domain layer DI providers."""

from dishka import Scope, provide

from grifi.config import AuthSettings, ChatSettings, CollabSettings
from grifi.domain.repository import (
    CampaignApplicationRepository,
    CampaignRepository,
    CollabRequestRepository,
    MessageRepository,
    ProfileRepository,
)
from grifi.domain.service import (
    CampaignService,
    ChatGateService,
    ChatService,
    CollabLifecycleService,
    CollabRequestService,
    ConnectionService,
    JWTService,
    MessagePublisher,
    ProfileService,
)
from grifi.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_profile_service(self, profile_repository: ProfileRepository) -> ProfileService:
        """Provide profile domain service."""
        return ProfileService(profile_repository=profile_repository)

    @provide
    def get_collab_request_service(
        self,
        collab_request_repository: CollabRequestRepository,
        profile_service: ProfileService,
        collab_settings: CollabSettings,
    ) -> CollabRequestService:
        """Provide collaboration request domain service."""
        return CollabRequestService(
            collab_request_repository=collab_request_repository,
            profile_service=profile_service,
            max_message_length=collab_settings.max_message_length,
        )

    @provide
    def get_lifecycle_service(
        self, collab_request_service: CollabRequestService
    ) -> CollabLifecycleService:
        """Provide request lifecycle domain service."""
        return CollabLifecycleService(collab_request_service=collab_request_service)

    @provide
    def get_connection_service(
        self, collab_request_repository: CollabRequestRepository
    ) -> ConnectionService:
        """Provide connection view domain service."""
        return ConnectionService(collab_request_repository=collab_request_repository)

    @provide
    def get_chat_gate_service(
        self,
        collab_request_repository: CollabRequestRepository,
        application_repository: CampaignApplicationRepository,
    ) -> ChatGateService:
        """Provide chat gate domain service."""
        return ChatGateService(
            collab_request_repository=collab_request_repository,
            application_repository=application_repository,
        )

    @provide
    def get_chat_service(
        self,
        message_repository: MessageRepository,
        chat_gate_service: ChatGateService,
        publisher: MessagePublisher,
        chat_settings: ChatSettings,
    ) -> ChatService:
        """Provide chat domain service."""
        return ChatService(
            message_repository=message_repository,
            chat_gate_service=chat_gate_service,
            publisher=publisher,
            max_message_length=chat_settings.max_message_length,
            history_limit=chat_settings.history_limit,
        )

    @provide
    def get_campaign_service(
        self,
        campaign_repository: CampaignRepository,
        application_repository: CampaignApplicationRepository,
        profile_service: ProfileService,
    ) -> CampaignService:
        """Provide campaign domain service."""
        return CampaignService(
            campaign_repository=campaign_repository,
            application_repository=application_repository,
            profile_service=profile_service,
        )
