"""Notification inbox management use cases.

Every operation is restricted to the requesting user's own notifications.
"""

from uuid import UUID

from pydantic import BaseModel

from blog.domain.service import NotificationService
from blog.domain.value import NotificationId, UserId

from .list_notifications import NotificationItem, notification_item_from_model


class UserNotificationsRequest(BaseModel):
    """Request scoped to the current user's whole inbox."""

    user_id: str


class NotificationRequest(BaseModel):
    """Request for one notification of the current user."""

    notification_id: str
    user_id: str


class UnreadCountResponse(BaseModel):
    unread_count: int


class BulkUpdateResponse(BaseModel):
    count: int


class DeleteNotificationResponse(BaseModel):
    notification_id: str
    deleted: bool


class GetUnreadCountUseCase:
    def __init__(self, notification_service: NotificationService) -> None:
        self.notification_service = notification_service

    async def execute(self, request: UserNotificationsRequest) -> UnreadCountResponse:
        count = await self.notification_service.unread_count(
            UserId(UUID(request.user_id))
        )
        return UnreadCountResponse(unread_count=count)


class GetNotificationUseCase:
    def __init__(self, notification_service: NotificationService) -> None:
        self.notification_service = notification_service

    async def execute(self, request: NotificationRequest) -> NotificationItem:
        """Raises NotFoundError or ForbiddenError for absent or foreign notifications."""
        notification = await self.notification_service.get(
            NotificationId(UUID(request.notification_id)),
            UserId(UUID(request.user_id)),
        )
        return notification_item_from_model(notification)


class MarkNotificationReadUseCase:
    def __init__(self, notification_service: NotificationService) -> None:
        self.notification_service = notification_service

    async def execute(self, request: NotificationRequest) -> NotificationItem:
        notification = await self.notification_service.mark_read(
            NotificationId(UUID(request.notification_id)),
            UserId(UUID(request.user_id)),
        )
        return notification_item_from_model(notification)


class MarkAllNotificationsReadUseCase:
    def __init__(self, notification_service: NotificationService) -> None:
        self.notification_service = notification_service

    async def execute(self, request: UserNotificationsRequest) -> BulkUpdateResponse:
        count = await self.notification_service.mark_all_read(
            UserId(UUID(request.user_id))
        )
        return BulkUpdateResponse(count=count)


class DeleteNotificationUseCase:
    def __init__(self, notification_service: NotificationService) -> None:
        self.notification_service = notification_service

    async def execute(self, request: NotificationRequest) -> DeleteNotificationResponse:
        await self.notification_service.delete(
            NotificationId(UUID(request.notification_id)),
            UserId(UUID(request.user_id)),
        )
        return DeleteNotificationResponse(
            notification_id=request.notification_id, deleted=True
        )


class ClearReadNotificationsUseCase:
    def __init__(self, notification_service: NotificationService) -> None:
        self.notification_service = notification_service

    async def execute(self, request: UserNotificationsRequest) -> BulkUpdateResponse:
        count = await self.notification_service.clear_read(
            UserId(UUID(request.user_id))
        )
        return BulkUpdateResponse(count=count)
