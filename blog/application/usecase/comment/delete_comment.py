"""Delete comment use case."""

from uuid import UUID

from pydantic import BaseModel

from blog.domain.service import CommentService
from blog.domain.value import CommentId, PostId, UserId


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    post_id: str
    comment_id: str
    user_id: str  # Comment author or post author


class DeleteCommentResponse(BaseModel):
    """Delete comment response."""

    comment_id: str
    deleted_ids: list[str]


class DeleteCommentUseCase:
    """Use case for removing a comment and its replies."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        removed = await self.comment_service.delete_comment(
            post_id=PostId(UUID(request.post_id)),
            comment_id=CommentId(UUID(request.comment_id)),
            actor_id=UserId(UUID(request.user_id)),
        )
        return DeleteCommentResponse(
            comment_id=request.comment_id,
            deleted_ids=[str(comment.id) for comment in removed],
        )
