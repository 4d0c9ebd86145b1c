"""Repository interfaces for the blog domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from blog.domain.repository.comment import CommentRepository
from blog.domain.repository.like import CommentLikeRepository
from blog.domain.repository.notification import NotificationRepository
from blog.domain.repository.post import PostRepository
from blog.domain.repository.report import CommentReportRepository
from blog.domain.repository.stats import CommenterStatsRepository
from blog.domain.repository.subscription import CommentSubscriptionRepository
from blog.domain.repository.user import UserRepository

__all__ = [
    "UserRepository",
    "PostRepository",
    "CommentRepository",
    "CommentLikeRepository",
    "CommentReportRepository",
    "CommenterStatsRepository",
    "CommentSubscriptionRepository",
    "NotificationRepository",
]
