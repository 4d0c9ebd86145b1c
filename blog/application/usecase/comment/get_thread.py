"""Get comment thread use case."""

from uuid import UUID

from pydantic import BaseModel

from blog.domain.service import JWTService, ThreadService
from blog.domain.value import PostId

from .items import CommentItem, comment_item_from_node


class GetThreadRequest(BaseModel):
    """Get comment thread request."""

    post_id: str  # UUID string
    auth_token: str | None = None  # JWT token (optional)


class GetThreadResponse(BaseModel):
    """Comment tree of a post as the viewer may see it."""

    post_id: str
    comments: list[CommentItem]
    total: int


def _count_visible(items: list[CommentItem]) -> int:
    return sum(
        (0 if item.placeholder else 1) + _count_visible(item.replies) for item in items
    )


class GetThreadUseCase:
    """Use case for reading the comment thread of a post."""

    def __init__(self, thread_service: ThreadService, jwt_service: JWTService) -> None:
        self.thread_service = thread_service
        self.jwt_service = jwt_service

    async def execute(self, request: GetThreadRequest) -> GetThreadResponse:
        """Execute get thread flow.

        Anonymous or invalid tokens read the thread as an anonymous viewer.

        Args:
            request: Get thread request with post ID and optional auth token

        Returns:
            Nested comment tree with like counts and badges
        """
        viewer = self.jwt_service.get_viewer_from_token(request.auth_token)
        nodes = await self.thread_service.assemble_thread(
            PostId(UUID(request.post_id)), viewer
        )
        comments = [comment_item_from_node(node) for node in nodes]

        return GetThreadResponse(
            post_id=request.post_id,
            comments=comments,
            total=_count_visible(comments),
        )
