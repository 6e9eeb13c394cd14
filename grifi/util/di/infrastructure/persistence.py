"""Persistence infrastructure providers."""

from collections.abc import AsyncGenerator, AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from grifi.adapter.changefeed import MessageOutbox
from grifi.config import Settings
from grifi.domain.repository import (
    CampaignApplicationRepository,
    CampaignRepository,
    CollabRequestRepository,
    MessageRepository,
    ProfileRepository,
)
from grifi.persistence.database import create_engine, create_session_factory
from grifi.persistence.repository import (
    PostgresCampaignApplicationRepository,
    PostgresCampaignRepository,
    PostgresCollabRequestRepository,
    PostgresMessageRepository,
    PostgresProfileRepository,
)
from grifi.util.di.base import ProviderBase
from grifi.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        """Provide database engine, disposed when the container closes."""
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        outbox: MessageOutbox,
    ) -> AsyncGenerator[AsyncSession, BaseException | None]:
        """Provide database session for request scope.

        Committed at the end of the request if no exception occurred,
        rolled back otherwise. Outgoing messages are dropped whenever the
        commit does not happen.
        """
        async with session_factory() as session:
            error = yield session
            if error is not None:
                logfire.warn("Session rollback", error=str(error))
                await session.rollback()
                outbox.discard()
                return
            try:
                await session.commit()
            except Exception as e:
                logfire.warn("Session commit failed", error=str(e))
                await session.rollback()
                outbox.discard()
                raise

    @provide(scope=Scope.REQUEST)
    def get_profile_repository(self, session: AsyncSession) -> ProfileRepository:
        """Provide Profile repository."""
        return PostgresProfileRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_collab_request_repository(
        self, session: AsyncSession
    ) -> CollabRequestRepository:
        """Provide CollabRequest repository."""
        return PostgresCollabRequestRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_message_repository(self, session: AsyncSession) -> MessageRepository:
        """Provide Message repository."""
        return PostgresMessageRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_campaign_repository(self, session: AsyncSession) -> CampaignRepository:
        """Provide Campaign repository."""
        return PostgresCampaignRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_campaign_application_repository(
        self, session: AsyncSession
    ) -> CampaignApplicationRepository:
        """Provide CampaignApplication repository."""
        return PostgresCampaignApplicationRepository(session)
