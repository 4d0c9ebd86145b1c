"""In-memory notification repository for testing."""

from typing import Optional, Sequence

from blog.domain.model.notification import Notification
from blog.domain.repository.notification import NotificationRepository
from blog.domain.value import NotificationId, UserId


class InMemoryNotificationRepository(NotificationRepository):
    """In-memory implementation of NotificationRepository for testing."""

    def __init__(self) -> None:
        self._notifications: dict[NotificationId, Notification] = {}

    def _for_recipient(
        self, recipient_id: UserId, unread_only: bool = False
    ) -> list[Notification]:
        return [
            n
            for n in self._notifications.values()
            if n.recipient_id == recipient_id and not (unread_only and n.read)
        ]

    async def find_by_id(self, notification_id: NotificationId) -> Optional[Notification]:
        return self._notifications.get(notification_id)

    async def save_many(
        self, notifications: Sequence[Notification]
    ) -> list[Notification]:
        for notification in notifications:
            self._notifications[notification.id] = notification
        return list(notifications)

    async def find_by_recipient(
        self,
        recipient_id: UserId,
        limit: int,
        offset: int,
        unread_only: bool = False,
    ) -> list[Notification]:
        notifications = self._for_recipient(recipient_id, unread_only)
        notifications.sort(key=lambda n: n.created_at, reverse=True)
        return notifications[offset : offset + limit]

    async def count_by_recipient(
        self, recipient_id: UserId, unread_only: bool = False
    ) -> int:
        return len(self._for_recipient(recipient_id, unread_only))

    async def mark_read(self, notification_id: NotificationId) -> Optional[Notification]:
        notification = self._notifications.get(notification_id)
        if notification is None:
            return None
        updated = notification.model_copy(update={"read": True})
        self._notifications[notification_id] = updated
        return updated

    async def mark_all_read(self, recipient_id: UserId) -> int:
        unread = self._for_recipient(recipient_id, unread_only=True)
        for notification in unread:
            self._notifications[notification.id] = notification.model_copy(
                update={"read": True}
            )
        return len(unread)

    async def delete(self, notification_id: NotificationId) -> bool:
        return self._notifications.pop(notification_id, None) is not None

    async def delete_read(self, recipient_id: UserId) -> int:
        read = [n for n in self._for_recipient(recipient_id) if n.read]
        for notification in read:
            del self._notifications[notification.id]
        return len(read)
