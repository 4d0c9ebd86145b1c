"""Unit tests for CommentService."""

from datetime import datetime
from uuid import uuid4

import pytest

from blog.config import Settings
from blog.domain.error import ForbiddenError, NotFoundError, ValidationError
from blog.domain.repository import (
    CommentRepository,
    CommenterStatsRepository,
    NotificationRepository,
)
from blog.domain.service import CommentService, SubscriptionService
from blog.domain.value import CommentId, NotificationType, PostId
from tests.conftest import add_comment, add_post, add_user
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


class TestCreateComment:
    """Tests for create_comment method."""

    @pytest.mark.asyncio
    async def test_create_top_level_comment_with_depth_zero(self, unit_env):
        """Top-level comment should have depth 0."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        author = await add_user(unit_env)
        post = await add_post(unit_env, author)

        # Act
        result = await comment_service.create_comment(
            post_id=post.id, author_id=author.id, text="  First!  "
        )

        # Assert
        assert result.depth == 0
        assert result.parent_id is None
        assert result.text == "First!"

        saved = await comment_repo.find_by_id(result.id)
        assert saved is not None
        assert saved.post_id == post.id

    @pytest.mark.asyncio
    async def test_reply_increments_depth(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        author = await add_user(unit_env)
        post = await add_post(unit_env, author)

        parent = await comment_service.create_comment(post.id, author.id, "parent")
        reply = await comment_service.create_comment(
            post.id, author.id, "reply", parent_id=parent.id
        )

        assert reply.depth == 1
        assert reply.parent_id == parent.id

    @pytest.mark.asyncio
    async def test_reply_beyond_max_depth_is_rejected(self, unit_env):
        """Comments can nest down to the configured max depth and no further."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        settings = await unit_env.get(Settings)
        max_depth = settings.comments.max_depth
        author = await add_user(unit_env)
        post = await add_post(unit_env, author)

        comment = await comment_service.create_comment(post.id, author.id, "depth 0")
        for depth in range(1, max_depth + 1):
            comment = await comment_service.create_comment(
                post.id, author.id, f"depth {depth}", parent_id=comment.id
            )
        assert comment.depth == max_depth

        # Act / Assert
        with pytest.raises(ValidationError, match="Maximum thread depth"):
            await comment_service.create_comment(
                post.id, author.id, "too deep", parent_id=comment.id
            )

    @pytest.mark.asyncio
    async def test_blank_text_is_rejected(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        author = await add_user(unit_env)
        post = await add_post(unit_env, author)

        with pytest.raises(ValidationError, match="content is required"):
            await comment_service.create_comment(post.id, author.id, "   ")

    @pytest.mark.asyncio
    async def test_missing_post_raises_not_found(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        author = await add_user(unit_env)

        with pytest.raises(NotFoundError, match="Post not found"):
            await comment_service.create_comment(PostId(uuid4()), author.id, "hi")

    @pytest.mark.asyncio
    async def test_closed_post_is_forbidden(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        author = await add_user(unit_env)
        post = await add_post(unit_env, author, allow_comments=False)

        with pytest.raises(ForbiddenError, match="disabled"):
            await comment_service.create_comment(post.id, author.id, "hi")

    @pytest.mark.asyncio
    async def test_deactivated_author_cannot_comment(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        author = await add_user(unit_env)
        gone = await add_user(unit_env, deactivated=True)
        post = await add_post(unit_env, author)

        with pytest.raises(ForbiddenError, match="deactivated"):
            await comment_service.create_comment(post.id, gone.id, "hi")

    @pytest.mark.asyncio
    async def test_parent_on_another_post_is_not_found(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        author = await add_user(unit_env)
        post = await add_post(unit_env, author)
        other_post = await add_post(unit_env, author)

        parent = await comment_service.create_comment(other_post.id, author.id, "x")

        with pytest.raises(NotFoundError, match="Comment not found"):
            await comment_service.create_comment(
                post.id, author.id, "reply", parent_id=parent.id
            )

    @pytest.mark.asyncio
    async def test_increments_commenter_stats(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        stats_repo = await unit_env.get(CommenterStatsRepository)
        author = await add_user(unit_env)
        reader = await add_user(unit_env)
        post = await add_post(unit_env, author)

        await comment_service.create_comment(post.id, reader.id, "one")
        await comment_service.create_comment(post.id, reader.id, "two")
        await comment_service.create_comment(post.id, author.id, "own post")

        stats = await stats_repo.find(author.id, reader.id)
        assert stats is not None
        assert stats.comment_count == 2
        assert await stats_repo.find(author.id, author.id) is None

    @pytest.mark.asyncio
    async def test_top_level_comment_notifies_post_author(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        notification_repo = await unit_env.get(NotificationRepository)
        author = await add_user(unit_env)
        reader = await add_user(unit_env, username="reader")
        post = await add_post(unit_env, author, title="Hello")

        comment = await comment_service.create_comment(post.id, reader.id, "hi")

        notifications = await notification_repo.find_by_recipient(author.id, 10, 0)
        assert len(notifications) == 1
        assert notifications[0].type == NotificationType.POST_COMMENT
        assert notifications[0].actor_id == reader.id
        assert notifications[0].comment_id == comment.id
        assert notifications[0].message == 'reader commented on "Hello"'

    @pytest.mark.asyncio
    async def test_own_comment_does_not_notify_self(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        notification_repo = await unit_env.get(NotificationRepository)
        author = await add_user(unit_env)
        post = await add_post(unit_env, author)

        await comment_service.create_comment(post.id, author.id, "hi")

        assert await notification_repo.count_by_recipient(author.id) == 0

    @pytest.mark.asyncio
    async def test_reply_notifies_parent_author_and_thread_subscribers(
        self, unit_env
    ):
        """Subscribers of any ancestor hear about replies; the post author does not."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        subscription_service = await unit_env.get(SubscriptionService)
        notification_repo = await unit_env.get(NotificationRepository)
        author = await add_user(unit_env)
        alice = await add_user(unit_env)
        bob = await add_user(unit_env)
        carol = await add_user(unit_env)
        post = await add_post(unit_env, author)

        root = await comment_service.create_comment(post.id, alice.id, "root")
        child = await comment_service.create_comment(
            post.id, bob.id, "child", parent_id=root.id
        )
        await subscription_service.subscribe(carol.id, post.id, root.id)
        await subscription_service.subscribe(alice.id, post.id, root.id)
        author_before = await notification_repo.count_by_recipient(author.id)
        alice_before = await notification_repo.count_by_recipient(alice.id)

        # Act
        await comment_service.create_comment(
            post.id, alice.id, "grandchild", parent_id=child.id
        )

        # Assert
        bob_notes = await notification_repo.find_by_recipient(bob.id, 10, 0)
        carol_notes = await notification_repo.find_by_recipient(carol.id, 10, 0)
        assert [n.type for n in bob_notes] == [NotificationType.COMMENT_REPLY]
        assert [n.type for n in carol_notes] == [NotificationType.COMMENT_REPLY]
        assert await notification_repo.count_by_recipient(author.id) == author_before
        # Alice wrote the reply, so her own subscription to root stays quiet
        assert await notification_repo.count_by_recipient(alice.id) == alice_before
        alice_notes = await notification_repo.find_by_recipient(alice.id, 10, 0)
        assert all(n.actor_id != alice.id for n in alice_notes)


class TestUpdateComment:
    """Tests for update_comment method."""

    @pytest.mark.asyncio
    async def test_author_can_edit(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        author = await add_user(unit_env)
        post = await add_post(unit_env, author)
        comment = await comment_service.create_comment(post.id, author.id, "typo")

        updated = await comment_service.update_comment(
            post.id, comment.id, author.id, " fixed "
        )

        assert updated.text == "fixed"
        assert updated.updated_at >= comment.updated_at

    @pytest.mark.asyncio
    async def test_other_user_cannot_edit(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        author = await add_user(unit_env)
        other = await add_user(unit_env)
        post = await add_post(unit_env, author)
        comment = await comment_service.create_comment(post.id, author.id, "mine")

        with pytest.raises(ForbiddenError, match="your own comments"):
            await comment_service.update_comment(post.id, comment.id, other.id, "x")

    @pytest.mark.asyncio
    async def test_missing_comment_is_not_found(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        author = await add_user(unit_env)
        post = await add_post(unit_env, author)

        with pytest.raises(NotFoundError, match="Comment not found"):
            await comment_service.update_comment(
                post.id, CommentId(uuid4()), author.id, "x"
            )


class TestDeleteComment:
    """Tests for delete_comment method."""

    @pytest.mark.asyncio
    async def test_delete_cascades_to_replies(self, unit_env):
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        author = await add_user(unit_env)
        reader = await add_user(unit_env)
        post = await add_post(unit_env, author)

        root = await comment_service.create_comment(post.id, reader.id, "root")
        reply = await comment_service.create_comment(
            post.id, author.id, "reply", parent_id=root.id
        )
        nested = await comment_service.create_comment(
            post.id, reader.id, "nested", parent_id=reply.id
        )
        sibling = await comment_service.create_comment(post.id, reader.id, "other")

        # Act
        removed = await comment_service.delete_comment(post.id, root.id, reader.id)

        # Assert
        assert [c.id for c in removed] == [root.id, reply.id, nested.id]
        for comment_id in (root.id, reply.id, nested.id):
            stored = await comment_repo.find_by_id(comment_id)
            assert stored.is_deleted
        assert not (await comment_repo.find_by_id(sibling.id)).is_deleted

    @pytest.mark.asyncio
    async def test_delete_decrements_stats_for_every_removed_comment(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        stats_repo = await unit_env.get(CommenterStatsRepository)
        author = await add_user(unit_env)
        reader = await add_user(unit_env)
        post = await add_post(unit_env, author)

        root = await comment_service.create_comment(post.id, reader.id, "root")
        await comment_service.create_comment(
            post.id, reader.id, "reply", parent_id=root.id
        )
        await comment_service.create_comment(post.id, reader.id, "kept")
        assert (await stats_repo.find(author.id, reader.id)).comment_count == 3

        await comment_service.delete_comment(post.id, root.id, reader.id)

        assert (await stats_repo.find(author.id, reader.id)).comment_count == 1

    @pytest.mark.asyncio
    async def test_replies_already_deleted_elsewhere_are_not_uncounted_again(
        self, unit_env, monkeypatch
    ):
        """A subtree read before another request deleted part of it."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        stats_repo = await unit_env.get(CommenterStatsRepository)
        author = await add_user(unit_env)
        reader = await add_user(unit_env)
        post = await add_post(unit_env, author)

        root = await comment_service.create_comment(post.id, reader.id, "root")
        reply = await comment_service.create_comment(
            post.id, reader.id, "reply", parent_id=root.id
        )
        await comment_service.create_comment(post.id, reader.id, "kept")
        stale_subtree = await comment_service.collect_subtree(root)

        await comment_service.delete_comment(post.id, reply.id, reader.id)
        assert (await stats_repo.find(author.id, reader.id)).comment_count == 2

        async def _stale(_root):
            return stale_subtree

        monkeypatch.setattr(comment_service, "collect_subtree", _stale)

        # Act
        removed = await comment_service.delete_comment(post.id, root.id, reader.id)

        # Assert
        assert [c.id for c in removed] == [root.id]
        assert (await stats_repo.find(author.id, reader.id)).comment_count == 1

    @pytest.mark.asyncio
    async def test_second_delete_of_a_deleted_subtree_leaves_stats_alone(
        self, unit_env
    ):
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        stats_repo = await unit_env.get(CommenterStatsRepository)
        author = await add_user(unit_env)
        reader = await add_user(unit_env)
        post = await add_post(unit_env, author)

        root = await comment_service.create_comment(post.id, reader.id, "root")
        reply = await comment_service.create_comment(
            post.id, reader.id, "reply", parent_id=root.id
        )
        await comment_service.create_comment(post.id, reader.id, "kept")
        await comment_service.delete_comment(post.id, root.id, reader.id)

        marked = await comment_repo.soft_delete_many(
            [root.id, reply.id], datetime.now()
        )

        assert marked == []
        assert (await stats_repo.find(author.id, reader.id)).comment_count == 1

    @pytest.mark.asyncio
    async def test_deactivated_author_cannot_delete(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        author = await add_user(unit_env)
        gone = await add_user(unit_env, deactivated=True)
        post = await add_post(unit_env, author)
        comment = await add_comment(unit_env, post, gone, "left behind")

        with pytest.raises(ForbiddenError, match="deactivated"):
            await comment_service.delete_comment(post.id, comment.id, gone.id)

    @pytest.mark.asyncio
    async def test_stats_row_removed_when_count_reaches_zero(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        stats_repo = await unit_env.get(CommenterStatsRepository)
        author = await add_user(unit_env)
        reader = await add_user(unit_env)
        post = await add_post(unit_env, author)

        comment = await comment_service.create_comment(post.id, reader.id, "only")
        await comment_service.delete_comment(post.id, comment.id, reader.id)

        assert await stats_repo.find(author.id, reader.id) is None

    @pytest.mark.asyncio
    async def test_post_author_can_delete_any_comment(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        author = await add_user(unit_env)
        reader = await add_user(unit_env)
        post = await add_post(unit_env, author)
        comment = await comment_service.create_comment(post.id, reader.id, "hm")

        removed = await comment_service.delete_comment(post.id, comment.id, author.id)

        assert [c.id for c in removed] == [comment.id]

    @pytest.mark.asyncio
    async def test_other_user_cannot_delete(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        author = await add_user(unit_env)
        reader = await add_user(unit_env)
        stranger = await add_user(unit_env)
        post = await add_post(unit_env, author)
        comment = await comment_service.create_comment(post.id, reader.id, "hm")

        with pytest.raises(ForbiddenError):
            await comment_service.delete_comment(post.id, comment.id, stranger.id)

    @pytest.mark.asyncio
    async def test_deleting_twice_is_not_found(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        author = await add_user(unit_env)
        post = await add_post(unit_env, author)
        comment = await comment_service.create_comment(post.id, author.id, "bye")

        await comment_service.delete_comment(post.id, comment.id, author.id)

        with pytest.raises(NotFoundError):
            await comment_service.delete_comment(post.id, comment.id, author.id)
