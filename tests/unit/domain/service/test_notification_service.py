"""Unit tests for NotificationService."""

from uuid import uuid4

import pytest

from blog.domain.error import ForbiddenError, NotFoundError
from blog.domain.service import (
    NotificationService,
    SubscriptionService,
    ThreadActivityEvent,
)
from blog.domain.value import NotificationId, NotificationType
from tests.conftest import add_comment, add_post, add_user
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


async def _notify(service: NotificationService, actor, recipient, message="hello"):
    saved = await service.notify_thread_activity(
        ThreadActivityEvent(
            type=NotificationType.COMMENT_LIKE,
            actor_id=actor.id,
            message=message,
            parent_author_id=recipient.id,
        )
    )
    return saved[0]


class TestFanOut:
    """Tests for resolve_recipients / notify_thread_activity."""

    @pytest.mark.asyncio
    async def test_recipients_union_without_actor(self, unit_env):
        # Arrange
        notification_service = await unit_env.get(NotificationService)
        subscription_service = await unit_env.get(SubscriptionService)
        post_author = await add_user(unit_env)
        parent_author = await add_user(unit_env)
        subscriber = await add_user(unit_env)
        actor = await add_user(unit_env)
        post = await add_post(unit_env, post_author)
        root = await add_comment(unit_env, post, parent_author)
        await subscription_service.subscribe(subscriber.id, post.id, root.id)
        await subscription_service.subscribe(actor.id, post.id, root.id)

        # Act
        recipients = await notification_service.resolve_recipients(
            ThreadActivityEvent(
                type=NotificationType.COMMENT_REPLY,
                actor_id=actor.id,
                message="reply",
                thread_comment_ids=[root.id],
                parent_author_id=parent_author.id,
                post_author_id=post_author.id,
            )
        )

        # Assert
        assert recipients == {parent_author.id, subscriber.id}

    @pytest.mark.asyncio
    async def test_top_level_event_includes_post_author(self, unit_env):
        notification_service = await unit_env.get(NotificationService)
        post_author = await add_user(unit_env)
        actor = await add_user(unit_env)

        recipients = await notification_service.resolve_recipients(
            ThreadActivityEvent(
                type=NotificationType.POST_COMMENT,
                actor_id=actor.id,
                message="comment",
                post_author_id=post_author.id,
                is_top_level=True,
            )
        )

        assert recipients == {post_author.id}

    @pytest.mark.asyncio
    async def test_deactivated_recipients_are_dropped(self, unit_env):
        notification_service = await unit_env.get(NotificationService)
        gone = await add_user(unit_env, deactivated=True)
        actor = await add_user(unit_env)

        saved = await notification_service.notify_thread_activity(
            ThreadActivityEvent(
                type=NotificationType.COMMENT_LIKE,
                actor_id=actor.id,
                message="liked",
                parent_author_id=gone.id,
            )
        )

        assert saved == []

    @pytest.mark.asyncio
    async def test_one_notification_per_recipient(self, unit_env):
        notification_service = await unit_env.get(NotificationService)
        recipient = await add_user(unit_env)
        actor = await add_user(unit_env)

        notification = await _notify(notification_service, actor, recipient)

        assert notification.recipient_id == recipient.id
        assert notification.actor_id == actor.id
        assert notification.read is False


class TestInbox:
    """Tests for listing and managing a user's notifications."""

    @pytest.mark.asyncio
    async def test_list_with_unread_count(self, unit_env):
        notification_service = await unit_env.get(NotificationService)
        recipient = await add_user(unit_env)
        actor = await add_user(unit_env)
        first = await _notify(notification_service, actor, recipient, "first")
        await _notify(notification_service, actor, recipient, "second")
        await notification_service.mark_read(first.id, recipient.id)

        page = await notification_service.list_for_user(recipient.id, limit=10)
        unread = await notification_service.list_for_user(
            recipient.id, limit=10, unread_only=True
        )

        assert page.total == 2
        assert page.unread_count == 1
        assert [n.message for n in unread.items] == ["second"]

    @pytest.mark.asyncio
    async def test_other_users_notification_is_forbidden(self, unit_env):
        notification_service = await unit_env.get(NotificationService)
        recipient = await add_user(unit_env)
        actor = await add_user(unit_env)
        notification = await _notify(notification_service, actor, recipient)

        with pytest.raises(ForbiddenError):
            await notification_service.mark_read(notification.id, actor.id)
        with pytest.raises(ForbiddenError):
            await notification_service.delete(notification.id, actor.id)

    @pytest.mark.asyncio
    async def test_missing_notification_is_not_found(self, unit_env):
        notification_service = await unit_env.get(NotificationService)
        recipient = await add_user(unit_env)

        with pytest.raises(NotFoundError, match="Notification not found"):
            await notification_service.get(NotificationId(uuid4()), recipient.id)

    @pytest.mark.asyncio
    async def test_mark_all_read_then_clear_read(self, unit_env):
        notification_service = await unit_env.get(NotificationService)
        recipient = await add_user(unit_env)
        actor = await add_user(unit_env)
        for message in ("a", "b", "c"):
            await _notify(notification_service, actor, recipient, message)

        assert await notification_service.mark_all_read(recipient.id) == 3
        assert await notification_service.unread_count(recipient.id) == 0
        assert await notification_service.clear_read(recipient.id) == 3

        page = await notification_service.list_for_user(recipient.id, limit=10)
        assert page.total == 0

    @pytest.mark.asyncio
    async def test_delete_own_notification(self, unit_env):
        notification_service = await unit_env.get(NotificationService)
        recipient = await add_user(unit_env)
        actor = await add_user(unit_env)
        notification = await _notify(notification_service, actor, recipient)

        await notification_service.delete(notification.id, recipient.id)

        with pytest.raises(NotFoundError):
            await notification_service.get(notification.id, recipient.id)
