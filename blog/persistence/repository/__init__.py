"""PostgreSQL repository implementations."""

from blog.persistence.repository.comment import PostgresCommentRepository
from blog.persistence.repository.like import PostgresCommentLikeRepository
from blog.persistence.repository.notification import PostgresNotificationRepository
from blog.persistence.repository.post import PostgresPostRepository
from blog.persistence.repository.report import PostgresCommentReportRepository
from blog.persistence.repository.stats import PostgresCommenterStatsRepository
from blog.persistence.repository.subscription import (
    PostgresCommentSubscriptionRepository,
)
from blog.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresPostRepository",
    "PostgresCommentRepository",
    "PostgresCommentLikeRepository",
    "PostgresCommentReportRepository",
    "PostgresCommenterStatsRepository",
    "PostgresCommentSubscriptionRepository",
    "PostgresNotificationRepository",
]
