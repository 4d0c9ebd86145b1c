"""SQLAlchemy table definitions for the blog comment subsystem.

These table definitions are used with SQLAlchemy Core.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    Enum,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    PrimaryKeyConstraint,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

metadata = MetaData()

USER_ROLES = ("user", "admin")
MODERATION_STATUSES = ("pending", "approved", "hidden")
REPORT_STATUSES = ("pending", "reviewed", "rejected")
NOTIFICATION_TYPES = (
    "comment_reply",
    "post_comment",
    "post_like",
    "comment_like",
    "new_follower",
    "post_mention",
    "thread_subscription",
)

# ============================================================================
# USERS TABLE (owned by the auth collaborator)
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("username", String(50), nullable=False, unique=True),
    Column(
        "role",
        Enum(*USER_ROLES, name="user_role", create_type=False),
        nullable=False,
        server_default="user",
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("deleted_at", TIMESTAMP(timezone=True), nullable=True),
)

# ============================================================================
# POSTS TABLE (owned by the post collaborator)
# ============================================================================
posts_table = Table(
    "posts",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("title", String(300), nullable=False),
    Column("slug", String(200), nullable=False, unique=True),
    Column(
        "author_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("published", Boolean, nullable=False, server_default="true"),
    Column("allow_comments", Boolean, nullable=False, server_default="true"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("deleted_at", TIMESTAMP(timezone=True), nullable=True),
)

Index("idx_posts_author_id", posts_table.c.author_id)

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("post_id", UUID, ForeignKey("posts.id", ondelete="CASCADE"), nullable=False),
    Column(
        "parent_id", UUID, ForeignKey("comments.id", ondelete="CASCADE"), nullable=True
    ),
    Column(
        "author_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("text", Text, nullable=False),
    Column("depth", Integer, nullable=False, server_default="0"),
    Column(
        "moderation_status",
        Enum(*MODERATION_STATUSES, name="moderation_status", create_type=False),
        nullable=False,
        server_default="approved",
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("deleted_at", TIMESTAMP(timezone=True), nullable=True),
    CheckConstraint("depth >= 0", name="depth_non_negative"),
)

Index(
    "idx_comments_post_id_parent_id",
    comments_table.c.post_id,
    comments_table.c.parent_id,
)
Index("idx_comments_parent_id", comments_table.c.parent_id)
Index("idx_comments_author_id", comments_table.c.author_id)
Index("idx_comments_created_at", comments_table.c.created_at)

# ============================================================================
# COMMENT LIKES TABLE
# ============================================================================
comment_likes_table = Table(
    "comment_likes",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column(
        "comment_id",
        UUID,
        ForeignKey("comments.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("user_id", "comment_id", name="uq_comment_like"),
)

Index("idx_comment_likes_comment_id", comment_likes_table.c.comment_id)

# ============================================================================
# COMMENT REPORTS TABLE
# ============================================================================
comment_reports_table = Table(
    "comment_reports",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "comment_id",
        UUID,
        ForeignKey("comments.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "reporter_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("reason", String(500), nullable=False),
    Column(
        "status",
        Enum(*REPORT_STATUSES, name="report_status", create_type=False),
        nullable=False,
        server_default="pending",
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("comment_id", "reporter_id", name="uq_comment_report"),
)

Index("idx_comment_reports_status", comment_reports_table.c.status)
Index("idx_comment_reports_created_at", comment_reports_table.c.created_at)

# ============================================================================
# COMMENTER STATS TABLE
# ============================================================================
commenter_stats_table = Table(
    "commenter_stats",
    metadata,
    Column(
        "post_author_id",
        UUID,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "commenter_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("comment_count", Integer, nullable=False, server_default="1"),
    Column(
        "last_comment_at",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default="NOW()",
    ),
    PrimaryKeyConstraint("post_author_id", "commenter_id", name="pk_commenter_stats"),
    CheckConstraint("comment_count >= 1", name="comment_count_positive"),
    CheckConstraint("post_author_id <> commenter_id", name="no_self_stats"),
)

Index(
    "idx_commenter_stats_author_count",
    commenter_stats_table.c.post_author_id,
    commenter_stats_table.c.comment_count.desc(),
)

# ============================================================================
# COMMENT SUBSCRIPTIONS TABLE
# ============================================================================
comment_subscriptions_table = Table(
    "comment_subscriptions",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column(
        "comment_id",
        UUID,
        ForeignKey("comments.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("user_id", "comment_id", name="uq_comment_subscription"),
)

Index("idx_comment_subscriptions_comment_id", comment_subscriptions_table.c.comment_id)

# ============================================================================
# NOTIFICATIONS TABLE
# ============================================================================
notifications_table = Table(
    "notifications",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "type",
        Enum(*NOTIFICATION_TYPES, name="notification_type", create_type=False),
        nullable=False,
    ),
    Column(
        "recipient_id",
        UUID,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "actor_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("post_id", UUID, ForeignKey("posts.id", ondelete="CASCADE"), nullable=True),
    Column(
        "comment_id",
        UUID,
        ForeignKey("comments.id", ondelete="CASCADE"),
        nullable=True,
    ),
    Column("message", String(500), nullable=False),
    Column("read", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index(
    "idx_notifications_recipient_created",
    notifications_table.c.recipient_id,
    notifications_table.c.created_at.desc(),
)
Index(
    "idx_notifications_recipient_read",
    notifications_table.c.recipient_id,
    notifications_table.c.read,
)
