"""Domain layer DI providers."""

from dishka import Scope, provide

from blog.config import AuthSettings, CommentSettings
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
from blog.domain.service import (
    CommentLikeService,
    CommentService,
    CommenterStatsService,
    JWTService,
    ModerationService,
    NotificationService,
    PostService,
    ReportService,
    SubscriptionService,
    ThreadService,
    UserService,
)
from blog.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)

    @provide
    def get_post_service(self, post_repository: PostRepository) -> PostService:
        """Provide post domain service."""
        return PostService(post_repository=post_repository)

    @provide
    def get_stats_service(
        self,
        stats_repository: CommenterStatsRepository,
        comment_settings: CommentSettings,
    ) -> CommenterStatsService:
        """Provide commenter stats domain service."""
        return CommenterStatsService(
            stats_repository=stats_repository, comment_settings=comment_settings
        )

    @provide
    def get_notification_service(
        self,
        notification_repository: NotificationRepository,
        subscription_repository: CommentSubscriptionRepository,
        user_repository: UserRepository,
    ) -> NotificationService:
        """Provide notification domain service."""
        return NotificationService(
            notification_repository=notification_repository,
            subscription_repository=subscription_repository,
            user_repository=user_repository,
        )

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        post_service: PostService,
        user_service: UserService,
        stats_service: CommenterStatsService,
        notification_service: NotificationService,
        comment_settings: CommentSettings,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            post_service=post_service,
            user_service=user_service,
            stats_service=stats_service,
            notification_service=notification_service,
            comment_settings=comment_settings,
        )

    @provide
    def get_like_service(
        self,
        like_repository: CommentLikeRepository,
        post_service: PostService,
        comment_service: CommentService,
        user_service: UserService,
        notification_service: NotificationService,
    ) -> CommentLikeService:
        """Provide comment like domain service."""
        return CommentLikeService(
            like_repository=like_repository,
            post_service=post_service,
            comment_service=comment_service,
            user_service=user_service,
            notification_service=notification_service,
        )

    @provide
    def get_thread_service(
        self,
        comment_repository: CommentRepository,
        post_service: PostService,
        user_service: UserService,
        like_service: CommentLikeService,
        stats_service: CommenterStatsService,
        comment_settings: CommentSettings,
    ) -> ThreadService:
        """Provide thread assembly domain service."""
        return ThreadService(
            comment_repository=comment_repository,
            post_service=post_service,
            user_service=user_service,
            like_service=like_service,
            stats_service=stats_service,
            comment_settings=comment_settings,
        )

    @provide
    def get_moderation_service(
        self,
        comment_repository: CommentRepository,
        report_repository: CommentReportRepository,
        post_service: PostService,
        comment_service: CommentService,
        user_service: UserService,
    ) -> ModerationService:
        """Provide moderation domain service."""
        return ModerationService(
            comment_repository=comment_repository,
            report_repository=report_repository,
            post_service=post_service,
            comment_service=comment_service,
            user_service=user_service,
        )

    @provide
    def get_report_service(
        self,
        report_repository: CommentReportRepository,
        comment_repository: CommentRepository,
        post_repository: PostRepository,
        user_service: UserService,
        comment_settings: CommentSettings,
    ) -> ReportService:
        """Provide comment report domain service."""
        return ReportService(
            report_repository=report_repository,
            comment_repository=comment_repository,
            post_repository=post_repository,
            user_service=user_service,
            comment_settings=comment_settings,
        )

    @provide
    def get_subscription_service(
        self,
        subscription_repository: CommentSubscriptionRepository,
        comment_repository: CommentRepository,
        post_service: PostService,
        user_service: UserService,
    ) -> SubscriptionService:
        """Provide thread subscription domain service."""
        return SubscriptionService(
            subscription_repository=subscription_repository,
            comment_repository=comment_repository,
            post_service=post_service,
            user_service=user_service,
        )
