"""Unit tests for the moderation use cases."""

import pytest

from blog.application.usecase.moderation import (
    GetModerationQueueRequest,
    GetModerationQueueUseCase,
    ModerateCommentRequest,
    ModerateCommentUseCase,
)
from blog.domain.error import ValidationError
from blog.domain.value import ModerationStatus
from tests.conftest import add_comment, add_post, add_user
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


class TestModerationUseCases:
    """Tests for moderating and reading the queue."""

    @pytest.mark.asyncio
    async def test_hide_then_list_hidden(self, unit_env):
        moderate = await unit_env.get(ModerateCommentUseCase)
        get_queue = await unit_env.get(GetModerationQueueUseCase)
        author = await add_user(unit_env)
        reader = await add_user(unit_env)
        post = await add_post(unit_env, author)
        comment = await add_comment(unit_env, post, reader)
        await add_comment(unit_env, post, reader, status=ModerationStatus.PENDING)

        moderated = await moderate.execute(
            ModerateCommentRequest(
                post_id=str(post.id),
                comment_id=str(comment.id),
                user_id=str(author.id),
                action="hide",
            )
        )
        queue = await get_queue.execute(
            GetModerationQueueRequest(
                post_id=str(post.id), user_id=str(author.id), status="hidden"
            )
        )

        assert moderated.moderation_status == "hidden"
        assert queue.total == 1
        assert queue.items[0].comment.comment_id == str(comment.id)
        assert queue.items[0].report_count == 0

    @pytest.mark.asyncio
    async def test_unknown_status_filter_is_rejected(self, unit_env):
        get_queue = await unit_env.get(GetModerationQueueUseCase)
        author = await add_user(unit_env)
        post = await add_post(unit_env, author)

        with pytest.raises(ValidationError, match="Invalid status"):
            await get_queue.execute(
                GetModerationQueueRequest(
                    post_id=str(post.id), user_id=str(author.id), status="deleted"
                )
            )
