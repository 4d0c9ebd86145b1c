"""Notification domain service."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import uuid4

import logfire

from blog.domain.error import ForbiddenError, NotFoundError
from blog.domain.model import Notification
from blog.domain.repository import (
    CommentSubscriptionRepository,
    NotificationRepository,
    UserRepository,
)
from blog.domain.value import (
    CommentId,
    NotificationId,
    NotificationType,
    PostId,
    UserId,
)

from .base import Service


@dataclass
class ThreadActivityEvent:
    """Something happened in a comment thread.

    Attributes:
        type: Notification type emitted to every recipient
        actor_id: User who caused the event; never notified
        message: Human-readable text shared by all recipients
        post_id: Post the activity happened on
        comment_id: Comment created or acted upon
        thread_comment_ids: Comments whose subscribers are notified
        parent_author_id: Author of the replied-to or liked comment
        post_author_id: Author of the post, notified for top-level comments
        is_top_level: Whether the activity is a new top-level comment
    """

    type: NotificationType
    actor_id: UserId
    message: str
    post_id: PostId | None = None
    comment_id: CommentId | None = None
    thread_comment_ids: list[CommentId] = field(default_factory=list)
    parent_author_id: UserId | None = None
    post_author_id: UserId | None = None
    is_top_level: bool = False


@dataclass
class NotificationPage:
    """Page of a user's notifications."""

    items: list[Notification]
    total: int
    unread_count: int


class NotificationService(Service):
    """Fans thread activity out to recipients and manages their inboxes."""

    def __init__(
        self,
        notification_repository: NotificationRepository,
        subscription_repository: CommentSubscriptionRepository,
        user_repository: UserRepository,
    ) -> None:
        """Initialize notification service.

        Args:
            notification_repository: Notification repository
            subscription_repository: Subscription repository (thread subscribers)
            user_repository: User repository (recipient liveness)
        """
        self.notification_repository = notification_repository
        self.subscription_repository = subscription_repository
        self.user_repository = user_repository

    async def resolve_recipients(self, event: ThreadActivityEvent) -> set[UserId]:
        """Compute who hears about an event.

        Thread subscribers, the parent comment's author and, for top-level
        comments, the post author. The actor and any missing or deactivated
        user are removed.
        """
        candidates: set[UserId] = set()
        if event.thread_comment_ids:
            candidates |= await self.subscription_repository.find_subscriber_ids(
                event.thread_comment_ids
            )
        if event.parent_author_id is not None:
            candidates.add(event.parent_author_id)
        if event.is_top_level and event.post_author_id is not None:
            candidates.add(event.post_author_id)

        candidates.discard(event.actor_id)
        if not candidates:
            return set()

        users = await self.user_repository.find_by_ids(list(candidates))
        return {
            user_id
            for user_id in candidates
            if user_id in users and not users[user_id].is_deactivated
        }

    async def notify_thread_activity(
        self, event: ThreadActivityEvent
    ) -> list[Notification]:
        """Create one notification per recipient of an event.

        Callers invoke this exactly once per event; nothing is deduplicated
        across calls.
        """
        with logfire.span(
            "notification_service.notify_thread_activity",
            type=event.type.value,
            actor_id=str(event.actor_id),
            comment_id=str(event.comment_id) if event.comment_id else None,
        ):
            recipients = await self.resolve_recipients(event)
            if not recipients:
                logfire.info("No notification recipients", type=event.type.value)
                return []

            now = datetime.now()
            notifications = [
                Notification(
                    id=NotificationId(uuid4()),
                    type=event.type,
                    recipient_id=recipient_id,
                    actor_id=event.actor_id,
                    post_id=event.post_id,
                    comment_id=event.comment_id,
                    message=event.message,
                    read=False,
                    created_at=now,
                )
                # Sorted for a stable insert order
                for recipient_id in sorted(recipients, key=str)
            ]
            saved = await self.notification_repository.save_many(notifications)
            logfire.info(
                "Notifications created",
                type=event.type.value,
                recipient_count=len(saved),
            )
            return saved

    async def list_for_user(
        self,
        user_id: UserId,
        limit: int,
        offset: int = 0,
        unread_only: bool = False,
    ) -> NotificationPage:
        """List a user's notifications newest first with counts."""
        with logfire.span(
            "notification_service.list_for_user",
            user_id=str(user_id),
            limit=limit,
            offset=offset,
        ):
            items = await self.notification_repository.find_by_recipient(
                user_id, limit=limit, offset=offset, unread_only=unread_only
            )
            total = await self.notification_repository.count_by_recipient(
                user_id, unread_only=unread_only
            )
            unread = await self.unread_count(user_id)
            return NotificationPage(items=items, total=total, unread_count=unread)

    async def unread_count(self, user_id: UserId) -> int:
        return await self.notification_repository.count_by_recipient(
            user_id, unread_only=True
        )

    async def _get_owned(
        self, notification_id: NotificationId, user_id: UserId, verb: str
    ) -> Notification:
        notification = await self.notification_repository.find_by_id(notification_id)
        if notification is None:
            raise NotFoundError("Notification not found")
        if notification.recipient_id != user_id:
            logfire.warn(
                "Notification ownership violation",
                notification_id=str(notification_id),
                user_id=str(user_id),
            )
            raise ForbiddenError(f"Cannot {verb} another user's notification")
        return notification

    async def get(self, notification_id: NotificationId, user_id: UserId) -> Notification:
        """Get one of the user's notifications."""
        return await self._get_owned(notification_id, user_id, "access")

    async def mark_read(
        self, notification_id: NotificationId, user_id: UserId
    ) -> Notification:
        """Mark one of the user's notifications as read."""
        with logfire.span(
            "notification_service.mark_read", notification_id=str(notification_id)
        ):
            notification = await self._get_owned(notification_id, user_id, "modify")
            if notification.read:
                return notification
            updated = await self.notification_repository.mark_read(notification_id)
            if updated is None:
                raise NotFoundError("Notification not found")
            return updated

    async def mark_all_read(self, user_id: UserId) -> int:
        """Mark all of the user's notifications as read."""
        with logfire.span("notification_service.mark_all_read", user_id=str(user_id)):
            count = await self.notification_repository.mark_all_read(user_id)
            logfire.info("Notifications marked read", user_id=str(user_id), count=count)
            return count

    async def delete(self, notification_id: NotificationId, user_id: UserId) -> None:
        """Delete one of the user's notifications."""
        with logfire.span(
            "notification_service.delete", notification_id=str(notification_id)
        ):
            await self._get_owned(notification_id, user_id, "delete")
            await self.notification_repository.delete(notification_id)

    async def clear_read(self, user_id: UserId) -> int:
        """Delete all of the user's read notifications."""
        with logfire.span("notification_service.clear_read", user_id=str(user_id)):
            count = await self.notification_repository.delete_read(user_id)
            logfire.info("Read notifications cleared", user_id=str(user_id), count=count)
            return count
