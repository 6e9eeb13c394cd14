"""Application layer DI providers."""

from dishka import Scope, provide

from grifi.application.usecase.campaign import (
    ApplyToCampaignUseCase,
    CloseCampaignUseCase,
    CreateCampaignUseCase,
    DecideApplicationUseCase,
    ListApplicationsUseCase,
    ListCampaignsUseCase,
)
from grifi.application.usecase.chat import (
    GetConversationUseCase,
    MarkReadUseCase,
    SendMessageUseCase,
)
from grifi.application.usecase.collab import (
    CreateCollabRequestUseCase,
    CreateGuestInquiryUseCase,
    GetCollabRequestUseCase,
    GetInboxUseCase,
    ListCollabRequestsUseCase,
    RespondToCollabRequestUseCase,
)
from grifi.application.usecase.connection import (
    GetConnectionStatusUseCase,
    ListConnectionsUseCase,
)
from grifi.domain.service import (
    CampaignService,
    ChatGateService,
    ChatService,
    CollabLifecycleService,
    CollabRequestService,
    ConnectionService,
    ProfileService,
)
from grifi.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    # Collaboration request use cases
    @provide
    def get_create_collab_request_use_case(
        self, collab_request_service: CollabRequestService
    ) -> CreateCollabRequestUseCase:
        """Provide create collaboration request use case."""
        return CreateCollabRequestUseCase(collab_request_service=collab_request_service)

    @provide
    def get_create_guest_inquiry_use_case(
        self,
        collab_request_service: CollabRequestService,
        profile_service: ProfileService,
    ) -> CreateGuestInquiryUseCase:
        """Provide create guest inquiry use case."""
        return CreateGuestInquiryUseCase(
            collab_request_service=collab_request_service,
            profile_service=profile_service,
        )

    @provide
    def get_collab_request_use_case(
        self,
        collab_request_service: CollabRequestService,
        profile_service: ProfileService,
    ) -> GetCollabRequestUseCase:
        """Provide get collaboration request use case."""
        return GetCollabRequestUseCase(
            collab_request_service=collab_request_service,
            profile_service=profile_service,
        )

    @provide
    def get_respond_to_collab_request_use_case(
        self, lifecycle_service: CollabLifecycleService
    ) -> RespondToCollabRequestUseCase:
        """Provide respond to collaboration request use case."""
        return RespondToCollabRequestUseCase(lifecycle_service=lifecycle_service)

    @provide
    def get_list_collab_requests_use_case(
        self, collab_request_service: CollabRequestService
    ) -> ListCollabRequestsUseCase:
        """Provide list collaboration requests use case."""
        return ListCollabRequestsUseCase(collab_request_service=collab_request_service)

    @provide
    def get_inbox_use_case(
        self,
        collab_request_service: CollabRequestService,
        profile_service: ProfileService,
    ) -> GetInboxUseCase:
        """Provide get inbox use case."""
        return GetInboxUseCase(
            collab_request_service=collab_request_service,
            profile_service=profile_service,
        )

    # Connection use cases
    @provide
    def get_connection_status_use_case(
        self,
        connection_service: ConnectionService,
        chat_gate_service: ChatGateService,
    ) -> GetConnectionStatusUseCase:
        """Provide get connection status use case."""
        return GetConnectionStatusUseCase(
            connection_service=connection_service,
            chat_gate_service=chat_gate_service,
        )

    @provide
    def get_list_connections_use_case(
        self, connection_service: ConnectionService
    ) -> ListConnectionsUseCase:
        """Provide list connections use case."""
        return ListConnectionsUseCase(connection_service=connection_service)

    # Chat use cases
    @provide
    def get_send_message_use_case(self, chat_service: ChatService) -> SendMessageUseCase:
        """Provide send message use case."""
        return SendMessageUseCase(chat_service=chat_service)

    @provide
    def get_conversation_use_case(
        self, chat_service: ChatService
    ) -> GetConversationUseCase:
        """Provide get conversation use case."""
        return GetConversationUseCase(chat_service=chat_service)

    @provide
    def get_mark_read_use_case(self, chat_service: ChatService) -> MarkReadUseCase:
        """Provide mark read use case."""
        return MarkReadUseCase(chat_service=chat_service)

    # Campaign use cases
    @provide
    def get_create_campaign_use_case(
        self, campaign_service: CampaignService
    ) -> CreateCampaignUseCase:
        """Provide create campaign use case."""
        return CreateCampaignUseCase(campaign_service=campaign_service)

    @provide
    def get_close_campaign_use_case(
        self, campaign_service: CampaignService
    ) -> CloseCampaignUseCase:
        """Provide close campaign use case."""
        return CloseCampaignUseCase(campaign_service=campaign_service)

    @provide
    def get_list_campaigns_use_case(
        self, campaign_service: CampaignService
    ) -> ListCampaignsUseCase:
        """Provide list campaigns use case."""
        return ListCampaignsUseCase(campaign_service=campaign_service)

    @provide
    def get_apply_to_campaign_use_case(
        self, campaign_service: CampaignService
    ) -> ApplyToCampaignUseCase:
        """Provide apply to campaign use case."""
        return ApplyToCampaignUseCase(campaign_service=campaign_service)

    @provide
    def get_decide_application_use_case(
        self, campaign_service: CampaignService
    ) -> DecideApplicationUseCase:
        """Provide decide application use case."""
        return DecideApplicationUseCase(campaign_service=campaign_service)

    @provide
    def get_list_applications_use_case(
        self, campaign_service: CampaignService
    ) -> ListApplicationsUseCase:
        """Provide list applications use case."""
        return ListApplicationsUseCase(campaign_service=campaign_service)
