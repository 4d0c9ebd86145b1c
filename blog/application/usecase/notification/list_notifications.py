"""List notifications use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from blog.config import CommentSettings
from blog.domain.model import Notification
from blog.domain.service import NotificationService
from blog.domain.value import UserId

from ..base import clamp_page


class NotificationItem(BaseModel):
    notification_id: str
    type: str
    actor_id: str
    post_id: str | None
    comment_id: str | None
    message: str
    read: bool
    created_at: datetime


def notification_item_from_model(notification: Notification) -> NotificationItem:
    return NotificationItem(
        notification_id=str(notification.id),
        type=notification.type.value,
        actor_id=str(notification.actor_id),
        post_id=str(notification.post_id) if notification.post_id else None,
        comment_id=str(notification.comment_id) if notification.comment_id else None,
        message=notification.message,
        read=notification.read,
        created_at=notification.created_at,
    )


class ListNotificationsRequest(BaseModel):
    """List notifications request."""

    user_id: str
    limit: int | None = None
    offset: int = 0
    unread_only: bool = False


class ListNotificationsResponse(BaseModel):
    items: list[NotificationItem]
    total: int
    unread_count: int
    limit: int
    offset: int


class ListNotificationsUseCase:
    """Use case for reading the current user's notification inbox."""

    def __init__(
        self,
        notification_service: NotificationService,
        comment_settings: CommentSettings,
    ) -> None:
        self.notification_service = notification_service
        self.comment_settings = comment_settings

    async def execute(
        self, request: ListNotificationsRequest
    ) -> ListNotificationsResponse:
        limit, offset = clamp_page(request.limit, request.offset, self.comment_settings)
        page = await self.notification_service.list_for_user(
            UserId(UUID(request.user_id)),
            limit=limit,
            offset=offset,
            unread_only=request.unread_only,
        )
        return ListNotificationsResponse(
            items=[notification_item_from_model(n) for n in page.items],
            total=page.total,
            unread_count=page.unread_count,
            limit=limit,
            offset=offset,
        )
