"""Recent comments use case."""

from pydantic import BaseModel

from blog.config import CommentSettings
from blog.domain.service import JWTService, ThreadService

from ..base import clamp_page
from .items import CommentItem, comment_item_from_node


class GetRecentCommentsRequest(BaseModel):
    """Recent comments request."""

    auth_token: str | None = None
    limit: int | None = None
    offset: int = 0


class RecentCommentItem(BaseModel):
    """Recent top-level comment with its post."""

    comment: CommentItem
    post_id: str
    post_title: str
    post_slug: str


class GetRecentCommentsResponse(BaseModel):
    """Recent comments response."""

    items: list[RecentCommentItem]
    total: int
    limit: int
    offset: int


class GetRecentCommentsUseCase:
    """Use case for the site-wide feed of recent top-level comments."""

    def __init__(
        self,
        thread_service: ThreadService,
        jwt_service: JWTService,
        comment_settings: CommentSettings,
    ) -> None:
        self.thread_service = thread_service
        self.jwt_service = jwt_service
        self.comment_settings = comment_settings

    async def execute(
        self, request: GetRecentCommentsRequest
    ) -> GetRecentCommentsResponse:
        """Execute recent comments flow.

        Returns:
            Newest top-level comments on published posts, one page
        """
        limit, offset = clamp_page(request.limit, request.offset, self.comment_settings)
        viewer = self.jwt_service.get_viewer_from_token(request.auth_token)

        page = await self.thread_service.recent_comments(viewer, limit, offset)

        return GetRecentCommentsResponse(
            items=[
                RecentCommentItem(
                    comment=comment_item_from_node(item.node),
                    post_id=str(item.post_id),
                    post_title=item.post_title,
                    post_slug=item.post_slug,
                )
                for item in page.items
            ],
            total=page.total,
            limit=limit,
            offset=offset,
        )
