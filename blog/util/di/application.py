"""Application layer DI providers."""

from dishka import Scope, provide

from blog.application.usecase.comment import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    GetRecentCommentsUseCase,
    GetThreadUseCase,
    UpdateCommentUseCase,
)
from blog.application.usecase.like import LikeCommentUseCase, UnlikeCommentUseCase
from blog.application.usecase.moderation import (
    GetModerationQueueUseCase,
    ModerateCommentUseCase,
)
from blog.application.usecase.notification import (
    ClearReadNotificationsUseCase,
    DeleteNotificationUseCase,
    GetNotificationUseCase,
    GetUnreadCountUseCase,
    ListNotificationsUseCase,
    MarkAllNotificationsReadUseCase,
    MarkNotificationReadUseCase,
)
from blog.application.usecase.report import (
    ListReportsUseCase,
    ReportCommentUseCase,
    UpdateReportStatusUseCase,
)
from blog.application.usecase.stats import GetTopCommentersUseCase
from blog.application.usecase.subscription import (
    GetSubscriptionStatusUseCase,
    SubscribeUseCase,
    UnsubscribeUseCase,
)
from blog.config import CommentSettings
from blog.domain.service import (
    CommentLikeService,
    CommentService,
    CommenterStatsService,
    JWTService,
    ModerationService,
    NotificationService,
    ReportService,
    SubscriptionService,
    ThreadService,
    UserService,
)
from blog.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    # Comment use cases
    @provide
    def get_create_comment_use_case(
        self, comment_service: CommentService
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(comment_service=comment_service)

    @provide
    def get_thread_use_case(
        self, thread_service: ThreadService, jwt_service: JWTService
    ) -> GetThreadUseCase:
        """Provide get thread use case."""
        return GetThreadUseCase(thread_service=thread_service, jwt_service=jwt_service)

    @provide
    def get_update_comment_use_case(
        self, comment_service: CommentService
    ) -> UpdateCommentUseCase:
        return UpdateCommentUseCase(comment_service=comment_service)

    @provide
    def get_delete_comment_use_case(
        self, comment_service: CommentService
    ) -> DeleteCommentUseCase:
        return DeleteCommentUseCase(comment_service=comment_service)

    @provide
    def get_recent_comments_use_case(
        self,
        thread_service: ThreadService,
        jwt_service: JWTService,
        comment_settings: CommentSettings,
    ) -> GetRecentCommentsUseCase:
        """Provide recent comments use case."""
        return GetRecentCommentsUseCase(
            thread_service=thread_service,
            jwt_service=jwt_service,
            comment_settings=comment_settings,
        )

    # Like use cases
    @provide
    def get_like_comment_use_case(
        self, like_service: CommentLikeService
    ) -> LikeCommentUseCase:
        return LikeCommentUseCase(like_service=like_service)

    @provide
    def get_unlike_comment_use_case(
        self, like_service: CommentLikeService
    ) -> UnlikeCommentUseCase:
        return UnlikeCommentUseCase(like_service=like_service)

    # Moderation use cases
    @provide
    def get_moderate_comment_use_case(
        self, moderation_service: ModerationService
    ) -> ModerateCommentUseCase:
        """Provide moderate comment use case."""
        return ModerateCommentUseCase(moderation_service=moderation_service)

    @provide
    def get_moderation_queue_use_case(
        self, moderation_service: ModerationService
    ) -> GetModerationQueueUseCase:
        """Provide moderation queue use case."""
        return GetModerationQueueUseCase(moderation_service=moderation_service)

    # Report use cases
    @provide
    def get_report_comment_use_case(
        self, report_service: ReportService
    ) -> ReportCommentUseCase:
        return ReportCommentUseCase(report_service=report_service)

    @provide
    def get_list_reports_use_case(
        self,
        report_service: ReportService,
        jwt_service: JWTService,
        comment_settings: CommentSettings,
    ) -> ListReportsUseCase:
        return ListReportsUseCase(
            report_service=report_service,
            jwt_service=jwt_service,
            comment_settings=comment_settings,
        )

    @provide
    def get_update_report_status_use_case(
        self, report_service: ReportService, jwt_service: JWTService
    ) -> UpdateReportStatusUseCase:
        return UpdateReportStatusUseCase(
            report_service=report_service, jwt_service=jwt_service
        )

    # Subscription use cases
    @provide
    def get_subscribe_use_case(
        self, subscription_service: SubscriptionService
    ) -> SubscribeUseCase:
        return SubscribeUseCase(subscription_service=subscription_service)

    @provide
    def get_unsubscribe_use_case(
        self, subscription_service: SubscriptionService
    ) -> UnsubscribeUseCase:
        return UnsubscribeUseCase(subscription_service=subscription_service)

    @provide
    def get_subscription_status_use_case(
        self, subscription_service: SubscriptionService
    ) -> GetSubscriptionStatusUseCase:
        return GetSubscriptionStatusUseCase(subscription_service=subscription_service)

    # Notification use cases
    @provide
    def get_list_notifications_use_case(
        self,
        notification_service: NotificationService,
        comment_settings: CommentSettings,
    ) -> ListNotificationsUseCase:
        """Provide list notifications use case."""
        return ListNotificationsUseCase(
            notification_service=notification_service,
            comment_settings=comment_settings,
        )

    @provide
    def get_unread_count_use_case(
        self, notification_service: NotificationService
    ) -> GetUnreadCountUseCase:
        return GetUnreadCountUseCase(notification_service=notification_service)

    @provide
    def get_notification_use_case(
        self, notification_service: NotificationService
    ) -> GetNotificationUseCase:
        return GetNotificationUseCase(notification_service=notification_service)

    @provide
    def get_mark_notification_read_use_case(
        self, notification_service: NotificationService
    ) -> MarkNotificationReadUseCase:
        return MarkNotificationReadUseCase(notification_service=notification_service)

    @provide
    def get_mark_all_notifications_read_use_case(
        self, notification_service: NotificationService
    ) -> MarkAllNotificationsReadUseCase:
        return MarkAllNotificationsReadUseCase(
            notification_service=notification_service
        )

    @provide
    def get_delete_notification_use_case(
        self, notification_service: NotificationService
    ) -> DeleteNotificationUseCase:
        return DeleteNotificationUseCase(notification_service=notification_service)

    @provide
    def get_clear_read_notifications_use_case(
        self, notification_service: NotificationService
    ) -> ClearReadNotificationsUseCase:
        return ClearReadNotificationsUseCase(notification_service=notification_service)

    # Stats use cases
    @provide
    def get_top_commenters_use_case(
        self,
        stats_service: CommenterStatsService,
        user_service: UserService,
        comment_settings: CommentSettings,
    ) -> GetTopCommentersUseCase:
        """Provide top commenters use case."""
        return GetTopCommentersUseCase(
            stats_service=stats_service,
            user_service=user_service,
            comment_settings=comment_settings,
        )
