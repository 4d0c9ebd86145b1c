"""Unit tests for CreateCommentUseCase and DeleteCommentUseCase."""

import pytest

from blog.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentUseCase,
    UpdateCommentRequest,
    UpdateCommentUseCase,
)
from tests.conftest import add_post, add_user
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


class TestCommentUseCases:
    """Tests for the comment mutation use cases."""

    @pytest.mark.asyncio
    async def test_create_reply_edit_and_delete(self, unit_env):
        # Arrange
        create = await unit_env.get(CreateCommentUseCase)
        update = await unit_env.get(UpdateCommentUseCase)
        delete = await unit_env.get(DeleteCommentUseCase)
        author = await add_user(unit_env)
        reader = await add_user(unit_env)
        post = await add_post(unit_env, author)

        # Act
        root = await create.execute(
            CreateCommentRequest(
                post_id=str(post.id), author_id=str(reader.id), text="Great read"
            )
        )
        reply = await create.execute(
            CreateCommentRequest(
                post_id=str(post.id),
                author_id=str(author.id),
                text="Thanks!",
                parent_id=root.comment_id,
            )
        )
        edited = await update.execute(
            UpdateCommentRequest(
                post_id=str(post.id),
                comment_id=root.comment_id,
                user_id=str(reader.id),
                text="Great read, thanks",
            )
        )
        deleted = await delete.execute(
            DeleteCommentRequest(
                post_id=str(post.id),
                comment_id=root.comment_id,
                user_id=str(author.id),
            )
        )

        # Assert
        assert root.depth == 0
        assert root.moderation_status == "approved"
        assert reply.parent_id == root.comment_id
        assert reply.depth == 1
        assert edited.content == "Great read, thanks"
        assert deleted.comment_id == root.comment_id
        assert deleted.deleted_ids == [root.comment_id, reply.comment_id]
