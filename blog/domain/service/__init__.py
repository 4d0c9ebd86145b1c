"""Domain services."""

from .base import Service
from .comment_service import CommentService
from .jwt_service import JWTService
from .like_service import CommentLikeService
from .moderation_service import ModerationQueueItem, ModerationService, QueuedReport
from .notification_service import (
    NotificationPage,
    NotificationService,
    ThreadActivityEvent,
)
from .post_service import PostService
from .report_service import CommentReportDetails, CommentReportPage, ReportService
from .stats_service import CommenterStatsService, TopCommenter
from .subscription_service import SubscriptionService
from .thread_service import (
    CommentAuthor,
    CommentNode,
    RecentComment,
    RecentCommentsPage,
    ThreadService,
)
from .user_service import UserService

__all__ = [
    "CommentAuthor",
    "CommentLikeService",
    "CommentNode",
    "CommentReportDetails",
    "CommentReportPage",
    "CommentService",
    "CommenterStatsService",
    "JWTService",
    "ModerationQueueItem",
    "ModerationService",
    "NotificationPage",
    "NotificationService",
    "PostService",
    "QueuedReport",
    "RecentComment",
    "RecentCommentsPage",
    "ReportService",
    "Service",
    "SubscriptionService",
    "ThreadActivityEvent",
    "ThreadService",
    "TopCommenter",
    "UserService",
]
