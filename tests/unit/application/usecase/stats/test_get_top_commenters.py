"""Unit tests for GetTopCommentersUseCase."""

from uuid import uuid4

import pytest

from blog.application.usecase.stats import (
    GetTopCommentersRequest,
    GetTopCommentersUseCase,
)
from blog.domain.error import NotFoundError
from blog.domain.service import CommenterStatsService
from tests.conftest import add_user
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


class TestGetTopCommenters:
    """Tests for the top commenters leaderboard."""

    @pytest.mark.asyncio
    async def test_leaderboard_skips_deactivated_commenters(self, unit_env):
        # Arrange
        use_case = await unit_env.get(GetTopCommentersUseCase)
        stats_service = await unit_env.get(CommenterStatsService)
        author = await add_user(unit_env)
        regular = await add_user(unit_env, username="regular")
        gone = await add_user(unit_env, deactivated=True)
        for commenter, count in ((regular, 6), (gone, 9)):
            for _ in range(count):
                await stats_service.on_comment_created(author.id, commenter.id)

        # Act
        response = await use_case.execute(GetTopCommentersRequest(user_id=str(author.id)))

        # Assert
        assert response.threshold == 5
        assert [c.username for c in response.commenters] == ["regular"]
        assert response.commenters[0].comment_count == 6

    @pytest.mark.asyncio
    async def test_unknown_author_is_not_found(self, unit_env):
        use_case = await unit_env.get(GetTopCommentersUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(GetTopCommentersRequest(user_id=str(uuid4())))
