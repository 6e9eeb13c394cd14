"""initial_schema

Create the schema for Grifi collaborations:
- Profiles (one per platform user; created by the hosted auth platform)
- Collab requests (member requests and guest inquiries)
- Messages (1:1 chat between connected members)
- Campaigns and campaign applications

On the hosted platform the profiles table already exists; it is created
here only if missing so local databases match.

Revision ID: 3c1f0a9d2b7e
Revises:
Create Date: 2026-10-19 10:12:44.218305

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c1f0a9d2b7e"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _create_enum(name: str, *values: str) -> None:
    labels = ", ".join(f"'{v}'" for v in values)
    op.execute(f"""
        DO $$ BEGIN
            CREATE TYPE {name} AS ENUM ({labels});
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)


def upgrade() -> None:
    """Upgrade schema."""
    op.execute('CREATE EXTENSION IF NOT EXISTS "pgcrypto"')

    # Create ENUM types (idempotent)
    _create_enum("profile_role", "creator", "brand")
    _create_enum("request_type", "collab", "sponsorship")
    _create_enum("request_status", "pending", "accepted", "rejected", "completed")
    _create_enum("campaign_status", "open", "closed")
    _create_enum("application_status", "pending", "approved", "rejected")

    # ========================================================================
    # PROFILES table
    # ========================================================================
    op.execute("""
        CREATE TABLE IF NOT EXISTS profiles (
            id UUID PRIMARY KEY,
            username VARCHAR(40) UNIQUE,
            full_name VARCHAR(255),
            avatar_url TEXT,
            role profile_role NOT NULL DEFAULT 'creator',
            created_at TIMESTAMPTZ NOT NULL DEFAULT NOW()
        )
    """)

    # ========================================================================
    # COLLAB_REQUESTS table
    # ========================================================================
    op.create_table(
        "collab_requests",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("gen_random_uuid()"),
            nullable=False,
        ),
        sa.Column("sender_id", sa.UUID(), nullable=True),  # NULL for guests
        sa.Column("receiver_id", sa.UUID(), nullable=False),
        sa.Column(
            "type",
            postgresql.ENUM(
                "collab", "sponsorship", name="request_type", create_type=False
            ),
            nullable=False,
        ),
        sa.Column(
            "status",
            postgresql.ENUM(
                "pending",
                "accepted",
                "rejected",
                "completed",
                name="request_status",
                create_type=False,
            ),
            nullable=True,
            server_default="pending",
        ),
        sa.Column("message", sa.Text(), nullable=True),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column("responded_at", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(["sender_id"], ["profiles.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["receiver_id"], ["profiles.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "sender_id IS NULL OR sender_id <> receiver_id",
            name="ck_collab_requests_not_self",
        ),
    )
    op.create_index(
        "idx_collab_requests_receiver_status",
        "collab_requests",
        ["receiver_id", "status"],
    )
    op.create_index(
        "idx_collab_requests_sender_status",
        "collab_requests",
        ["sender_id", "status"],
    )
    op.create_index(
        "idx_collab_requests_created_at",
        "collab_requests",
        [sa.text("created_at DESC")],
    )

    # ========================================================================
    # MESSAGES table
    # ========================================================================
    op.create_table(
        "messages",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("gen_random_uuid()"),
            nullable=False,
        ),
        sa.Column("sender_id", sa.UUID(), nullable=False),
        sa.Column("receiver_id", sa.UUID(), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("read", sa.Boolean(), nullable=True, server_default="false"),
        sa.Column("client_id", sa.String(100), nullable=True),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["sender_id"], ["profiles.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["receiver_id"], ["profiles.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_messages_pair_created_at",
        "messages",
        ["sender_id", "receiver_id", "created_at"],
    )

    # ========================================================================
    # CAMPAIGNS table
    # ========================================================================
    op.create_table(
        "campaigns",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("gen_random_uuid()"),
            nullable=False,
        ),
        sa.Column("brand_id", sa.UUID(), nullable=False),
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("budget", sa.String(100), nullable=True),
        sa.Column(
            "status",
            postgresql.ENUM("open", "closed", name="campaign_status", create_type=False),
            nullable=False,
            server_default="open",
        ),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["brand_id"], ["profiles.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_campaigns_brand_id", "campaigns", ["brand_id"])
    op.create_index(
        "idx_campaigns_status_created_at",
        "campaigns",
        ["status", sa.text("created_at DESC")],
    )

    # ========================================================================
    # CAMPAIGN_APPLICATIONS table
    # ========================================================================
    op.create_table(
        "campaign_applications",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("gen_random_uuid()"),
            nullable=False,
        ),
        sa.Column("campaign_id", sa.UUID(), nullable=False),
        sa.Column("brand_id", sa.UUID(), nullable=False),
        sa.Column("influencer_id", sa.UUID(), nullable=False),
        sa.Column("message", sa.Text(), nullable=True),
        sa.Column(
            "status",
            postgresql.ENUM(
                "pending",
                "approved",
                "rejected",
                name="application_status",
                create_type=False,
            ),
            nullable=False,
            server_default="pending",
        ),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column("decided_at", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(["campaign_id"], ["campaigns.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["brand_id"], ["profiles.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(
            ["influencer_id"], ["profiles.id"], ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint(
            "campaign_id", "influencer_id", name="uq_application_per_campaign"
        ),
    )
    op.create_index(
        "idx_campaign_applications_campaign_id",
        "campaign_applications",
        ["campaign_id"],
    )
    op.create_index(
        "idx_campaign_applications_influencer_id",
        "campaign_applications",
        ["influencer_id"],
    )


def downgrade() -> None:
    """Downgrade schema."""
    # Drop tables (in reverse order of dependencies); profiles is left alone
    op.drop_table("campaign_applications")
    op.drop_table("campaigns")
    op.drop_table("messages")
    op.drop_table("collab_requests")

    # Drop ENUM types
    op.execute("DROP TYPE IF EXISTS application_status")
    op.execute("DROP TYPE IF EXISTS campaign_status")
    op.execute("DROP TYPE IF EXISTS request_status")
    op.execute("DROP TYPE IF EXISTS request_type")
