"""In-memory repository implementations for testing."""

from .comment import InMemoryCommentRepository
from .like import InMemoryCommentLikeRepository
from .notification import InMemoryNotificationRepository
from .post import InMemoryPostRepository
from .report import InMemoryCommentReportRepository
from .stats import InMemoryCommenterStatsRepository
from .subscription import InMemoryCommentSubscriptionRepository
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryCommentLikeRepository",
    "InMemoryCommentReportRepository",
    "InMemoryCommentRepository",
    "InMemoryCommentSubscriptionRepository",
    "InMemoryCommenterStatsRepository",
    "InMemoryNotificationRepository",
    "InMemoryPostRepository",
    "InMemoryUserRepository",
]
