"""Moderate comment use case."""

from uuid import UUID

from pydantic import BaseModel

from blog.domain.service import ModerationService
from blog.domain.value import CommentId, PostId, UserId

from ..comment.items import CommentDetail, comment_detail_from_model


class ModerateCommentRequest(BaseModel):
    """Moderate comment request."""

    post_id: str
    comment_id: str
    user_id: str  # Must be the post author
    action: str  # "approve" or "hide"


class ModerateCommentResponse(CommentDetail):
    """Comment after moderation."""


class ModerateCommentUseCase:
    """Use case for a post author approving or hiding a comment."""

    def __init__(self, moderation_service: ModerationService) -> None:
        self.moderation_service = moderation_service

    async def execute(self, request: ModerateCommentRequest) -> ModerateCommentResponse:
        """Execute moderation flow.

        Raises:
            ValidationError: If the action is unknown
            NotFoundError: If the post or comment is missing
            ForbiddenError: If the user is not the post author
        """
        comment = await self.moderation_service.moderate(
            post_id=PostId(UUID(request.post_id)),
            comment_id=CommentId(UUID(request.comment_id)),
            actor_id=UserId(UUID(request.user_id)),
            action=request.action,
        )
        return ModerateCommentResponse(
            **comment_detail_from_model(comment).model_dump()
        )
