"""Top commenters use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from blog.config import CommentSettings
from blog.domain.service import CommenterStatsService, UserService
from blog.domain.value import UserId


class GetTopCommentersRequest(BaseModel):
    """Top commenters request."""

    user_id: str  # Post author whose commenters are ranked
    limit: int | None = None


class TopCommenterItem(BaseModel):
    user_id: str
    username: str
    comment_count: int
    last_comment_at: datetime


class GetTopCommentersResponse(BaseModel):
    user_id: str
    threshold: int
    commenters: list[TopCommenterItem]


class GetTopCommentersUseCase:
    """Use case for the leaderboard of an author's regular commenters."""

    def __init__(
        self,
        stats_service: CommenterStatsService,
        user_service: UserService,
        comment_settings: CommentSettings,
    ) -> None:
        self.stats_service = stats_service
        self.user_service = user_service
        self.comment_settings = comment_settings

    async def execute(self, request: GetTopCommentersRequest) -> GetTopCommentersResponse:
        """Execute top commenters flow.

        Deactivated commenters are left out of the leaderboard.

        Raises:
            NotFoundError: If the author does not exist
        """
        author = await self.user_service.get_active_user(UserId(UUID(request.user_id)))
        limit = min(
            request.limit or self.comment_settings.top_commenters_limit,
            self.comment_settings.max_page_size,
        )

        top = await self.stats_service.top_commenters(author.id, limit=limit)
        users = await self.user_service.get_users(t.commenter_id for t in top)

        commenters = [
            TopCommenterItem(
                user_id=str(t.commenter_id),
                username=users[t.commenter_id].username,
                comment_count=t.comment_count,
                last_comment_at=t.last_comment_at,
            )
            for t in top
            if t.commenter_id in users and not users[t.commenter_id].is_deactivated
        ]
        return GetTopCommentersResponse(
            user_id=str(author.id),
            threshold=self.comment_settings.top_commenter_threshold,
            commenters=commenters,
        )
