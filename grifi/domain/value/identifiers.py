"""Strongly typed identifiers for Grifi domain entities."""

from typing import NewType
from uuid import UUID

# Identities are issued by the hosted auth platform
UserId = NewType("UserId", UUID)
CollabRequestId = NewType("CollabRequestId", UUID)
MessageId = NewType("MessageId", UUID)
CampaignId = NewType("CampaignId", UUID)
ApplicationId = NewType("ApplicationId", UUID)
