"""Update comment use case."""

from uuid import UUID

from pydantic import BaseModel

from blog.domain.service import CommentService
from blog.domain.value import CommentId, PostId, UserId

from .items import CommentDetail, comment_detail_from_model


class UpdateCommentRequest(BaseModel):
    """Update comment request."""

    post_id: str  # UUID string
    comment_id: str  # UUID string
    user_id: str  # Current user ID (must be author)
    text: str


class UpdateCommentResponse(CommentDetail):
    """Update comment response."""


class UpdateCommentUseCase:
    """Use case for editing a comment's text."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: UpdateCommentRequest) -> UpdateCommentResponse:
        """Execute update comment flow.

        Raises:
            ForbiddenError: If the user is not the comment's author
            NotFoundError: If the post or comment is missing
        """
        comment = await self.comment_service.update_comment(
            post_id=PostId(UUID(request.post_id)),
            comment_id=CommentId(UUID(request.comment_id)),
            actor_id=UserId(UUID(request.user_id)),
            text=request.text,
        )
        return UpdateCommentResponse(**comment_detail_from_model(comment).model_dump())
