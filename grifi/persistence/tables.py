"""SQLAlchemy table definitions for Grifi.

Mirrors the tables the web app reads through the hosted platform, so both
sides agree on columns and enum values. Must match the Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    Enum,
    ForeignKey,
    Index,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

metadata = MetaData()

# ============================================================================
# PROFILES TABLE (one row per platform user)
# ============================================================================
profiles_table = Table(
    "profiles",
    metadata,
    Column("id", UUID, primary_key=True),  # Same as the auth user id
    Column("username", String(40), nullable=True, unique=True),
    Column("full_name", String(255), nullable=True),
    Column("avatar_url", Text, nullable=True),
    Column(
        "role",
        Enum("creator", "brand", name="profile_role", create_type=False),
        nullable=False,
        server_default="creator",
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# COLLAB_REQUESTS TABLE
# ============================================================================
collab_requests_table = Table(
    "collab_requests",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    # NULL sender = guest inquiry; contact is embedded in message
    Column(
        "sender_id", UUID, ForeignKey("profiles.id", ondelete="CASCADE"), nullable=True
    ),
    Column(
        "receiver_id",
        UUID,
        ForeignKey("profiles.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "type",
        Enum("collab", "sponsorship", name="request_type", create_type=False),
        nullable=False,
    ),
    Column(
        "status",
        Enum(
            "pending",
            "accepted",
            "rejected",
            "completed",
            name="request_status",
            create_type=False,
        ),
        nullable=True,  # Legacy rows may be NULL, read as pending
        server_default="pending",
    ),
    Column("message", Text, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("responded_at", TIMESTAMP(timezone=True), nullable=True),
    CheckConstraint(
        "sender_id IS NULL OR sender_id <> receiver_id",
        name="ck_collab_requests_not_self",
    ),
)

Index(
    "idx_collab_requests_receiver_status",
    collab_requests_table.c.receiver_id,
    collab_requests_table.c.status,
)
Index(
    "idx_collab_requests_sender_status",
    collab_requests_table.c.sender_id,
    collab_requests_table.c.status,
)
Index("idx_collab_requests_created_at", collab_requests_table.c.created_at.desc())

# ============================================================================
# MESSAGES TABLE (1:1 chat)
# ============================================================================
messages_table = Table(
    "messages",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column(
        "sender_id", UUID, ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "receiver_id",
        UUID,
        ForeignKey("profiles.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("content", Text, nullable=False),
    Column("read", Boolean, nullable=True, server_default="false"),
    Column("client_id", String(100), nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index(
    "idx_messages_pair_created_at",
    messages_table.c.sender_id,
    messages_table.c.receiver_id,
    messages_table.c.created_at,
)

# ============================================================================
# CAMPAIGNS TABLE
# ============================================================================
campaigns_table = Table(
    "campaigns",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column(
        "brand_id", UUID, ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False
    ),
    Column("title", String(200), nullable=False),
    Column("description", Text, nullable=True),
    Column("budget", String(100), nullable=True),
    Column(
        "status",
        Enum("open", "closed", name="campaign_status", create_type=False),
        nullable=False,
        server_default="open",
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_campaigns_brand_id", campaigns_table.c.brand_id)
Index("idx_campaigns_status_created_at", campaigns_table.c.status, campaigns_table.c.created_at.desc())

# ============================================================================
# CAMPAIGN_APPLICATIONS TABLE
# ============================================================================
campaign_applications_table = Table(
    "campaign_applications",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column(
        "campaign_id",
        UUID,
        ForeignKey("campaigns.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "brand_id", UUID, ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "influencer_id",
        UUID,
        ForeignKey("profiles.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("message", Text, nullable=True),
    Column(
        "status",
        Enum(
            "pending",
            "approved",
            "rejected",
            name="application_status",
            create_type=False,
        ),
        nullable=False,
        server_default="pending",
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("decided_at", TIMESTAMP(timezone=True), nullable=True),
    UniqueConstraint("campaign_id", "influencer_id", name="uq_application_per_campaign"),
)

Index("idx_campaign_applications_campaign_id", campaign_applications_table.c.campaign_id)
Index(
    "idx_campaign_applications_influencer_id",
    campaign_applications_table.c.influencer_id,
)
