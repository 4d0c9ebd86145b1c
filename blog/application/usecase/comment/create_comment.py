"""Create comment use case."""

from uuid import UUID

from pydantic import BaseModel

from blog.domain.service import CommentService
from blog.domain.value import CommentId, PostId, UserId

from .items import CommentDetail, comment_detail_from_model


class CreateCommentRequest(BaseModel):
    """A top-level comment, or a reply when ``parent_id`` is set."""

    post_id: str
    author_id: str
    text: str
    parent_id: str | None = None


class CreateCommentResponse(CommentDetail):
    pass


class CreateCommentUseCase:
    """Comment on a post or reply inside its thread."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Store the comment.

        Depth is derived from the parent; stats and thread notifications are
        written in the same request transaction.

        Raises:
            NotFoundError: If the post or parent comment does not exist
            ForbiddenError: If the post is closed to comments
            ValidationError: If the text is blank or the reply is too deep
        """
        parent_id = CommentId(UUID(request.parent_id)) if request.parent_id else None
        comment = await self.comment_service.create_comment(
            post_id=PostId(UUID(request.post_id)),
            author_id=UserId(UUID(request.author_id)),
            text=request.text,
            parent_id=parent_id,
        )
        detail = comment_detail_from_model(comment)
        return CreateCommentResponse.model_validate(detail.model_dump())
