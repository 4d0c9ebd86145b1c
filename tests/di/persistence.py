"""Mock persistence providers for testing."""

from dishka import Scope, provide

from blog.domain.repository import (
    CommentLikeRepository,
    CommentReportRepository,
    CommentRepository,
    CommenterStatsRepository,
    CommentSubscriptionRepository,
    NotificationRepository,
    PostRepository,
    UserRepository,
)
from blog.persistence.repository.inmemory import (
    InMemoryCommentLikeRepository,
    InMemoryCommentReportRepository,
    InMemoryCommentRepository,
    InMemoryCommenterStatsRepository,
    InMemoryCommentSubscriptionRepository,
    InMemoryNotificationRepository,
    InMemoryPostRepository,
    InMemoryUserRepository,
)
from blog.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Uses REQUEST scope to ensure test isolation - each test gets fresh repositories.
    """

    __is_mock__ = True

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self) -> UserRepository:
        """Provide in-memory user repository."""
        return InMemoryUserRepository()

    @provide(scope=Scope.REQUEST)
    def get_post_repository(self) -> PostRepository:
        """Provide in-memory post repository."""
        return InMemoryPostRepository()

    @provide(scope=Scope.REQUEST)
    def get_comment_repository(
        self, post_repository: PostRepository, user_repository: UserRepository
    ) -> CommentRepository:
        """Provide in-memory comment repository sharing the request's posts and users."""
        return InMemoryCommentRepository(post_repository, user_repository)

    @provide(scope=Scope.REQUEST)
    def get_comment_like_repository(self) -> CommentLikeRepository:
        return InMemoryCommentLikeRepository()

    @provide(scope=Scope.REQUEST)
    def get_comment_report_repository(self) -> CommentReportRepository:
        return InMemoryCommentReportRepository()

    @provide(scope=Scope.REQUEST)
    def get_commenter_stats_repository(self) -> CommenterStatsRepository:
        return InMemoryCommenterStatsRepository()

    @provide(scope=Scope.REQUEST)
    def get_comment_subscription_repository(self) -> CommentSubscriptionRepository:
        return InMemoryCommentSubscriptionRepository()

    @provide(scope=Scope.REQUEST)
    def get_notification_repository(self) -> NotificationRepository:
        """Provide in-memory notification repository."""
        return InMemoryNotificationRepository()
