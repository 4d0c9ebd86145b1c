"""Notification use cases."""

from .list_notifications import (
    ListNotificationsRequest,
    ListNotificationsResponse,
    ListNotificationsUseCase,
    NotificationItem,
)
from .manage_notifications import (
    BulkUpdateResponse,
    ClearReadNotificationsUseCase,
    DeleteNotificationResponse,
    DeleteNotificationUseCase,
    GetNotificationUseCase,
    GetUnreadCountUseCase,
    MarkAllNotificationsReadUseCase,
    MarkNotificationReadUseCase,
    NotificationRequest,
    UnreadCountResponse,
    UserNotificationsRequest,
)

__all__ = [
    "BulkUpdateResponse",
    "ClearReadNotificationsUseCase",
    "DeleteNotificationResponse",
    "DeleteNotificationUseCase",
    "GetNotificationUseCase",
    "GetUnreadCountUseCase",
    "ListNotificationsRequest",
    "ListNotificationsResponse",
    "ListNotificationsUseCase",
    "MarkAllNotificationsReadUseCase",
    "MarkNotificationReadUseCase",
    "NotificationItem",
    "NotificationRequest",
    "UnreadCountResponse",
    "UserNotificationsRequest",
]
