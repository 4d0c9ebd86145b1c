"""Unit tests for CommentLikeService."""

from uuid import uuid4

import pytest

from blog.domain.error import (
    ConflictError,
    ForbiddenError,
    NotFoundError,
    ValidationError,
)
from blog.domain.repository import NotificationRepository
from blog.domain.service import CommentLikeService
from blog.domain.value import CommentId, NotificationType
from tests.conftest import add_comment, add_post, add_user
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


class TestLikeComment:
    """Tests for like_comment / unlike_comment."""

    @pytest.mark.asyncio
    async def test_like_returns_count_and_notifies_comment_author(self, unit_env):
        # Arrange
        like_service = await unit_env.get(CommentLikeService)
        notification_repo = await unit_env.get(NotificationRepository)
        author = await add_user(unit_env)
        commenter = await add_user(unit_env)
        fan = await add_user(unit_env, username="fan")
        post = await add_post(unit_env, author)
        comment = await add_comment(unit_env, post, commenter)

        # Act
        count = await like_service.like_comment(post.id, comment.id, fan.id)

        # Assert
        assert count == 1
        notes = await notification_repo.find_by_recipient(commenter.id, 10, 0)
        assert len(notes) == 1
        assert notes[0].type == NotificationType.COMMENT_LIKE
        assert notes[0].message == "fan liked your comment"

    @pytest.mark.asyncio
    async def test_liking_own_comment_does_not_notify(self, unit_env):
        like_service = await unit_env.get(CommentLikeService)
        notification_repo = await unit_env.get(NotificationRepository)
        author = await add_user(unit_env)
        post = await add_post(unit_env, author)
        comment = await add_comment(unit_env, post, author)

        await like_service.like_comment(post.id, comment.id, author.id)

        assert await notification_repo.count_by_recipient(author.id) == 0

    @pytest.mark.asyncio
    async def test_double_like_conflicts(self, unit_env):
        like_service = await unit_env.get(CommentLikeService)
        author = await add_user(unit_env)
        post = await add_post(unit_env, author)
        comment = await add_comment(unit_env, post, author)

        await like_service.like_comment(post.id, comment.id, author.id)

        with pytest.raises(ConflictError, match="already liked"):
            await like_service.like_comment(post.id, comment.id, author.id)

    @pytest.mark.asyncio
    async def test_deactivated_user_cannot_like(self, unit_env):
        like_service = await unit_env.get(CommentLikeService)
        author = await add_user(unit_env)
        gone = await add_user(unit_env, deactivated=True)
        post = await add_post(unit_env, author)
        comment = await add_comment(unit_env, post, author)

        with pytest.raises(ForbiddenError, match="Account has been deactivated"):
            await like_service.like_comment(post.id, comment.id, gone.id)

        assert await like_service.like_counts([comment.id]) == {comment.id: 0}

    @pytest.mark.asyncio
    async def test_unlike_returns_updated_count(self, unit_env):
        like_service = await unit_env.get(CommentLikeService)
        author = await add_user(unit_env)
        reader = await add_user(unit_env)
        post = await add_post(unit_env, author)
        comment = await add_comment(unit_env, post, author)
        await like_service.like_comment(post.id, comment.id, author.id)
        await like_service.like_comment(post.id, comment.id, reader.id)

        count = await like_service.unlike_comment(post.id, comment.id, reader.id)

        assert count == 1
        assert await like_service.liked_by(reader.id, [comment.id]) == set()
        assert await like_service.liked_by(author.id, [comment.id]) == {comment.id}

    @pytest.mark.asyncio
    async def test_unlike_without_like_is_rejected(self, unit_env):
        like_service = await unit_env.get(CommentLikeService)
        author = await add_user(unit_env)
        post = await add_post(unit_env, author)
        comment = await add_comment(unit_env, post, author)

        with pytest.raises(ValidationError, match="not liked"):
            await like_service.unlike_comment(post.id, comment.id, author.id)

    @pytest.mark.asyncio
    async def test_like_missing_comment_is_not_found(self, unit_env):
        like_service = await unit_env.get(CommentLikeService)
        author = await add_user(unit_env)
        post = await add_post(unit_env, author)

        with pytest.raises(NotFoundError):
            await like_service.like_comment(post.id, CommentId(uuid4()), author.id)

    @pytest.mark.asyncio
    async def test_like_counts_default_to_zero(self, unit_env):
        like_service = await unit_env.get(CommentLikeService)
        author = await add_user(unit_env)
        post = await add_post(unit_env, author)
        liked = await add_comment(unit_env, post, author)
        unliked = await add_comment(unit_env, post, author)
        await like_service.like_comment(post.id, liked.id, author.id)

        counts = await like_service.like_counts([liked.id, unliked.id])

        assert counts == {liked.id: 1, unliked.id: 0}

    @pytest.mark.asyncio
    async def test_anonymous_viewer_has_no_likes(self, unit_env):
        like_service = await unit_env.get(CommentLikeService)

        assert await like_service.liked_by(None, [CommentId(uuid4())]) == set()
