"""Notification repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from blog.domain.model.notification import Notification
from blog.domain.value import NotificationId, UserId


class NotificationRepository(ABC):
    """Repository for Notification entity."""

    @abstractmethod
    async def find_by_id(self, notification_id: NotificationId) -> Optional[Notification]:
        """Find a notification by ID."""
        pass

    @abstractmethod
    async def save_many(
        self, notifications: Sequence[Notification]
    ) -> List[Notification]:
        """Insert several notifications in one statement."""
        pass

    @abstractmethod
    async def find_by_recipient(
        self,
        recipient_id: UserId,
        limit: int,
        offset: int,
        unread_only: bool = False,
    ) -> List[Notification]:
        """Find a user's notifications, newest first."""
        pass

    @abstractmethod
    async def count_by_recipient(
        self, recipient_id: UserId, unread_only: bool = False
    ) -> int:
        """Count a user's notifications."""
        pass

    @abstractmethod
    async def mark_read(self, notification_id: NotificationId) -> Optional[Notification]:
        """Set the read flag on one notification."""
        pass

    @abstractmethod
    async def mark_all_read(self, recipient_id: UserId) -> int:
        """Set the read flag on all of a user's unread notifications.

        Returns:
            Number of notifications updated
        """
        pass

    @abstractmethod
    async def delete(self, notification_id: NotificationId) -> bool:
        """Delete one notification."""
        pass

    @abstractmethod
    async def delete_read(self, recipient_id: UserId) -> int:
        """Delete all of a user's read notifications.

        Returns:
            Number of notifications deleted
        """
        pass
