"""Domain value objects for the blog comment subsystem."""

from blog.domain.value.identifiers import (
    CommentId,
    CommentLikeId,
    CommentReportId,
    NotificationId,
    PostId,
    SubscriptionId,
    UserId,
)
from blog.domain.value.types import (
    ModerationAction,
    ModerationStatus,
    NotificationType,
    ReportStatus,
    ThreadOrder,
    UserRole,
    Viewer,
    ViewerRole,
)

__all__ = [
    # Identifiers
    "UserId",
    "PostId",
    "CommentId",
    "CommentLikeId",
    "CommentReportId",
    "SubscriptionId",
    "NotificationId",
    # Types
    "ModerationAction",
    "ModerationStatus",
    "NotificationType",
    "ReportStatus",
    "ThreadOrder",
    "UserRole",
    "Viewer",
    "ViewerRole",
]
