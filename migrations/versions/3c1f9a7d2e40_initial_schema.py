"""initial_schema

Create the schema for blog comments:
- Users and posts (owned by the auth and post services, mirrored here)
- Comments (threaded, soft-deleted, moderated)
- Comment likes and reports (one per user and comment)
- Commenter stats (per post author and commenter)
- Comment subscriptions and notifications

Revision ID: 3c1f9a7d2e40
Revises:
Create Date: 2026-10-15 09:12:44.318207

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c1f9a7d2e40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

ENUM_TYPES = {
    "user_role": ("user", "admin"),
    "moderation_status": ("pending", "approved", "hidden"),
    "report_status": ("pending", "reviewed", "rejected"),
    "notification_type": (
        "comment_reply",
        "post_comment",
        "post_like",
        "comment_like",
        "new_follower",
        "post_mention",
        "thread_subscription",
    ),
}


def _timestamp(name: str, nullable: bool = False) -> sa.Column:
    return sa.Column(
        name,
        sa.TIMESTAMP(timezone=True),
        nullable=nullable,
        server_default=None if nullable else sa.text("NOW()"),
    )


def _id() -> sa.Column:
    return sa.Column(
        "id",
        sa.UUID(),
        server_default=sa.text("uuid_generate_v4()"),
        nullable=False,
    )


def _enum(name: str) -> postgresql.ENUM:
    return postgresql.ENUM(*ENUM_TYPES[name], name=name, create_type=False)


def upgrade() -> None:
    """Upgrade schema."""
    op.execute('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"')

    # Create ENUM types (idempotent)
    for name, values in ENUM_TYPES.items():
        labels = ", ".join(f"'{value}'" for value in values)
        op.execute(f"""
            DO $$ BEGIN
                CREATE TYPE {name} AS ENUM ({labels});
            EXCEPTION
                WHEN duplicate_object THEN null;
            END $$;
        """)

    # ========================================================================
    # USERS table
    # ========================================================================
    op.create_table(
        "users",
        _id(),
        sa.Column("username", sa.String(50), nullable=False),
        sa.Column("role", _enum("user_role"), nullable=False, server_default="user"),
        _timestamp("created_at"),
        _timestamp("deleted_at", nullable=True),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("username", name="uq_users_username"),
    )

    # ========================================================================
    # POSTS table
    # ========================================================================
    op.create_table(
        "posts",
        _id(),
        sa.Column("title", sa.String(300), nullable=False),
        sa.Column("slug", sa.String(200), nullable=False),
        sa.Column("author_id", sa.UUID(), nullable=False),
        sa.Column("published", sa.Boolean(), nullable=False, server_default="true"),
        sa.Column(
            "allow_comments", sa.Boolean(), nullable=False, server_default="true"
        ),
        _timestamp("created_at"),
        _timestamp("deleted_at", nullable=True),
        sa.ForeignKeyConstraint(["author_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("slug", name="uq_posts_slug"),
    )
    op.create_index("idx_posts_author_id", "posts", ["author_id"])

    # ========================================================================
    # COMMENTS table
    # ========================================================================
    op.create_table(
        "comments",
        _id(),
        sa.Column("post_id", sa.UUID(), nullable=False),
        sa.Column("parent_id", sa.UUID(), nullable=True),
        sa.Column("author_id", sa.UUID(), nullable=False),
        sa.Column("text", sa.Text(), nullable=False),
        sa.Column("depth", sa.Integer(), nullable=False, server_default="0"),
        sa.Column(
            "moderation_status",
            _enum("moderation_status"),
            nullable=False,
            server_default="approved",
        ),
        _timestamp("created_at"),
        _timestamp("updated_at"),
        _timestamp("deleted_at", nullable=True),
        sa.ForeignKeyConstraint(["post_id"], ["posts.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["parent_id"], ["comments.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["author_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("depth >= 0", name="depth_non_negative"),
    )
    op.create_index(
        "idx_comments_post_id_parent_id", "comments", ["post_id", "parent_id"]
    )
    op.create_index("idx_comments_parent_id", "comments", ["parent_id"])
    op.create_index("idx_comments_author_id", "comments", ["author_id"])
    op.create_index("idx_comments_created_at", "comments", ["created_at"])

    # ========================================================================
    # COMMENT_LIKES table
    # ========================================================================
    op.create_table(
        "comment_likes",
        _id(),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("comment_id", sa.UUID(), nullable=False),
        _timestamp("created_at"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["comment_id"], ["comments.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("user_id", "comment_id", name="uq_comment_like"),
    )
    op.create_index("idx_comment_likes_comment_id", "comment_likes", ["comment_id"])

    # ========================================================================
    # COMMENT_REPORTS table
    # ========================================================================
    op.create_table(
        "comment_reports",
        _id(),
        sa.Column("comment_id", sa.UUID(), nullable=False),
        sa.Column("reporter_id", sa.UUID(), nullable=False),
        sa.Column("reason", sa.String(500), nullable=False),
        sa.Column(
            "status", _enum("report_status"), nullable=False, server_default="pending"
        ),
        _timestamp("created_at"),
        sa.ForeignKeyConstraint(["comment_id"], ["comments.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["reporter_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("comment_id", "reporter_id", name="uq_comment_report"),
    )
    op.create_index("idx_comment_reports_status", "comment_reports", ["status"])
    op.create_index(
        "idx_comment_reports_created_at", "comment_reports", ["created_at"]
    )

    # ========================================================================
    # COMMENTER_STATS table
    # ========================================================================
    op.create_table(
        "commenter_stats",
        sa.Column("post_author_id", sa.UUID(), nullable=False),
        sa.Column("commenter_id", sa.UUID(), nullable=False),
        sa.Column("comment_count", sa.Integer(), nullable=False, server_default="1"),
        _timestamp("last_comment_at"),
        sa.ForeignKeyConstraint(["post_author_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["commenter_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint(
            "post_author_id", "commenter_id", name="pk_commenter_stats"
        ),
        sa.CheckConstraint("comment_count >= 1", name="comment_count_positive"),
        sa.CheckConstraint("post_author_id <> commenter_id", name="no_self_stats"),
    )
    op.create_index(
        "idx_commenter_stats_author_count",
        "commenter_stats",
        ["post_author_id", sa.text("comment_count DESC")],
    )

    # ========================================================================
    # COMMENT_SUBSCRIPTIONS table
    # ========================================================================
    op.create_table(
        "comment_subscriptions",
        _id(),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("comment_id", sa.UUID(), nullable=False),
        _timestamp("created_at"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["comment_id"], ["comments.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("user_id", "comment_id", name="uq_comment_subscription"),
    )
    op.create_index(
        "idx_comment_subscriptions_comment_id",
        "comment_subscriptions",
        ["comment_id"],
    )

    # ========================================================================
    # NOTIFICATIONS table
    # ========================================================================
    op.create_table(
        "notifications",
        _id(),
        sa.Column("type", _enum("notification_type"), nullable=False),
        sa.Column("recipient_id", sa.UUID(), nullable=False),
        sa.Column("actor_id", sa.UUID(), nullable=False),
        sa.Column("post_id", sa.UUID(), nullable=True),
        sa.Column("comment_id", sa.UUID(), nullable=True),
        sa.Column("message", sa.String(500), nullable=False),
        sa.Column("read", sa.Boolean(), nullable=False, server_default="false"),
        _timestamp("created_at"),
        sa.ForeignKeyConstraint(["recipient_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["actor_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["post_id"], ["posts.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["comment_id"], ["comments.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_notifications_recipient_created",
        "notifications",
        ["recipient_id", sa.text("created_at DESC")],
    )
    op.create_index(
        "idx_notifications_recipient_read", "notifications", ["recipient_id", "read"]
    )


def downgrade() -> None:
    """Downgrade schema."""
    # Drop tables (in reverse order of dependencies)
    op.drop_table("notifications")
    op.drop_table("comment_subscriptions")
    op.drop_table("commenter_stats")
    op.drop_table("comment_reports")
    op.drop_table("comment_likes")
    op.drop_table("comments")
    op.drop_table("posts")
    op.drop_table("users")

    for name in reversed(list(ENUM_TYPES)):
        op.execute(f"DROP TYPE IF EXISTS {name}")
