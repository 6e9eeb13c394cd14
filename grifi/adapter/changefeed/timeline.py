"""Client-side view of one conversation.

Merges optimistic local copies with messages arriving from the changefeed
and from history fetches. Each message appears once, keyed by its stored id;
a delivered message replaces the optimistic copy it confirms.
"""

from datetime import datetime, timezone
from itertools import count
from typing import Optional
from uuid import uuid4

from pydantic import BaseModel, ConfigDict

from grifi.domain.model import ChatMessage, utc_now
from grifi.domain.value import MessageId, UserId


class TimelineEntry(BaseModel):
    """A message in the timeline; pending entries are not yet confirmed."""

    model_config = ConfigDict(frozen=True)

    message: ChatMessage
    pending: bool = False
    seq: int


class ConversationTimeline:
    """Ordered, deduplicated message list for a conversation between two users."""

    def __init__(self, viewer_id: UserId, partner_id: UserId) -> None:
        self.viewer_id = viewer_id
        self.partner_id = partner_id
        self._entries: list[TimelineEntry] = []
        self._seq = count()

    @property
    def entries(self) -> list[TimelineEntry]:
        """Entries ordered by created_at, ties kept in arrival order."""
        return sorted(self._entries, key=_sort_key)

    @property
    def messages(self) -> list[ChatMessage]:
        return [entry.message for entry in self.entries]

    def add_optimistic(
        self,
        content: str,
        client_id: Optional[str] = None,
        created_at: Optional[datetime] = None,
    ) -> ChatMessage:
        """Append a local, unconfirmed copy of a message the viewer is sending.

        Args:
            content: Message text
            client_id: Local id echoed back by the server; generated if omitted
            created_at: Local send time

        Returns:
            The optimistic message
        """
        message = ChatMessage(
            id=MessageId(uuid4()),
            sender_id=self.viewer_id,
            receiver_id=self.partner_id,
            content=content,
            client_id=client_id or str(uuid4()),
            created_at=created_at or utc_now(),
        )
        self._entries.append(
            TimelineEntry(message=message, pending=True, seq=next(self._seq))
        )
        return message

    def discard_optimistic(self, client_id: str) -> bool:
        """Drop a pending entry whose send failed."""
        for i, entry in enumerate(self._entries):
            if entry.pending and entry.message.client_id == client_id:
                del self._entries[i]
                return True
        return False

    def apply_delivered(self, message: ChatMessage) -> bool:
        """Merge an authoritative message.

        Messages outside this conversation and ids already present are
        ignored. Otherwise the matching pending entry (same client_id, or
        same sender and content when there is no client_id) is replaced.

        Returns:
            True if the timeline changed
        """
        if not message.is_between(self.viewer_id, self.partner_id):
            return False
        if any(
            not e.pending and e.message.id == message.id for e in self._entries
        ):
            return False

        index = self._find_pending(message)
        if index is not None:
            self._entries[index] = TimelineEntry(
                message=message, pending=False, seq=self._entries[index].seq
            )
        else:
            self._entries.append(
                TimelineEntry(message=message, pending=False, seq=next(self._seq))
            )
        return True

    def apply_history(self, messages: list[ChatMessage]) -> None:
        """Merge a fetched page of history."""
        for message in messages:
            self.apply_delivered(message)

    def _find_pending(self, message: ChatMessage) -> Optional[int]:
        for i, entry in enumerate(self._entries):
            if not entry.pending:
                continue
            pending = entry.message
            if message.client_id and pending.client_id == message.client_id:
                return i
            if (
                not message.client_id
                and pending.sender_id == message.sender_id
                and pending.content == message.content
            ):
                return i
        return None


def _sort_key(entry: TimelineEntry) -> tuple[datetime, int]:
    # Naive timestamps are taken as UTC so they order against stored rows.
    created_at = entry.message.created_at
    if created_at.tzinfo is None:
        created_at = created_at.replace(tzinfo=timezone.utc)
    return created_at, entry.seq
