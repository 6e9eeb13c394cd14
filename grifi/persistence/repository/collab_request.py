"""PostgreSQL implementation of CollabRequest repository."""

from datetime import datetime
from typing import Optional

from sqlalchemy import and_, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from grifi.domain.model import CollabRequest
from grifi.domain.repository import CollabRequestRepository
from grifi.domain.value import CollabRequestId, RequestStatus, UserId
from grifi.persistence.mappers import collab_request_to_dict, row_to_collab_request
from grifi.persistence.tables import collab_requests_table

_t = collab_requests_table


def _pair_clause(a: UserId, b: UserId):
    return or_(
        and_(_t.c.sender_id == a, _t.c.receiver_id == b),
        and_(_t.c.sender_id == b, _t.c.receiver_id == a),
    )


def _status_clause(status: RequestStatus):
    # NULL status is a legacy pending row
    if status == RequestStatus.PENDING:
        return or_(_t.c.status == status.value, _t.c.status.is_(None))
    return _t.c.status == status.value


class PostgresCollabRequestRepository(CollabRequestRepository):
    """PostgreSQL implementation of CollabRequestRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def save(self, request: CollabRequest) -> CollabRequest:
        """Insert a new collaboration request.

        Args:
            request: Request to insert

        Returns:
            Saved request
        """
        stmt = _t.insert().values(**collab_request_to_dict(request))
        await self.session.execute(stmt)
        await self.session.flush()
        return request

    async def find_by_id(self, request_id: CollabRequestId) -> Optional[CollabRequest]:
        """Find a request by ID."""
        stmt = select(_t).where(_t.c.id == request_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_collab_request(dict(row)) if row else None

    async def update_status(
        self,
        request_id: CollabRequestId,
        new_status: RequestStatus,
        expected_status: RequestStatus,
        responded_at: datetime,
    ) -> Optional[CollabRequest]:
        """Conditionally change a request's status.

        A single UPDATE ... WHERE status = expected RETURNING statement, so
        the check and the write are atomic in the database.

        Args:
            request_id: Request to update
            new_status: Status to write
            expected_status: Status the request must currently have
            responded_at: Time of the transition

        Returns:
            Updated request, or None if missing or status changed meanwhile
        """
        stmt = (
            _t.update()
            .where(_t.c.id == request_id)
            .where(_status_clause(expected_status))
            .values(status=new_status.value, responded_at=responded_at)
            .returning(*_t.c)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        await self.session.flush()
        return row_to_collab_request(dict(row)) if row else None

    async def find_by_receiver(
        self,
        receiver_id: UserId,
        status: RequestStatus | None = None,
        limit: int = 50,
        offset: int = 0,
    ) -> list[CollabRequest]:
        """Find requests addressed to a user, newest first."""
        stmt = select(_t).where(_t.c.receiver_id == receiver_id)
        if status is not None:
            stmt = stmt.where(_status_clause(status))
        stmt = (
            stmt.order_by(_t.c.created_at.desc(), _t.c.id.desc())
            .limit(limit)
            .offset(offset)
        )

        result = await self.session.execute(stmt)
        return [row_to_collab_request(dict(row)) for row in result.mappings().all()]

    async def find_by_sender(
        self,
        sender_id: UserId,
        status: RequestStatus | None = None,
        limit: int = 50,
        offset: int = 0,
    ) -> list[CollabRequest]:
        """Find requests sent by a user, newest first."""
        stmt = select(_t).where(_t.c.sender_id == sender_id)
        if status is not None:
            stmt = stmt.where(_status_clause(status))
        stmt = (
            stmt.order_by(_t.c.created_at.desc(), _t.c.id.desc())
            .limit(limit)
            .offset(offset)
        )

        result = await self.session.execute(stmt)
        return [row_to_collab_request(dict(row)) for row in result.mappings().all()]

    async def find_between(self, a: UserId, b: UserId) -> list[CollabRequest]:
        """Find requests between exactly a and b, newest first."""
        stmt = (
            select(_t)
            .where(_pair_clause(a, b))
            .order_by(_t.c.created_at.desc(), _t.c.id.desc())
        )
        result = await self.session.execute(stmt)
        return [row_to_collab_request(dict(row)) for row in result.mappings().all()]

    async def exists_with_status_between(
        self, a: UserId, b: UserId, status: RequestStatus
    ) -> bool:
        """Check whether any request between a and b has the given status."""
        stmt = (
            select(func.count())
            .select_from(_t)
            .where(_pair_clause(a, b))
            .where(_status_clause(status))
        )
        result = await self.session.execute(stmt)
        return (result.scalar() or 0) > 0

    async def find_partner_ids(
        self, user_id: UserId, status: RequestStatus
    ) -> list[UserId]:
        """Find distinct counterparties of a user's requests with a status."""
        stmt = (
            select(_t.c.sender_id, _t.c.receiver_id)
            .where(or_(_t.c.sender_id == user_id, _t.c.receiver_id == user_id))
            .where(_t.c.sender_id.is_not(None))
            .where(_status_clause(status))
            .order_by(_t.c.created_at.desc())
        )
        result = await self.session.execute(stmt)

        partners: list[UserId] = []
        for row in result.all():
            partner = row.receiver_id if row.sender_id == user_id else row.sender_id
            if partner not in partners:
                partners.append(UserId(partner))
        return partners
