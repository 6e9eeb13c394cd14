"""Chat changefeed: live delivery and client-side reconciliation."""

from grifi.adapter.changefeed.feed import MessageFeed, Subscription
from grifi.adapter.changefeed.outbox import MessageOutbox
from grifi.adapter.changefeed.timeline import ConversationTimeline, TimelineEntry

__all__ = [
    "ConversationTimeline",
    "MessageFeed",
    "MessageOutbox",
    "Subscription",
    "TimelineEntry",
]
