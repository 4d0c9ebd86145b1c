"""Like and unlike comment use cases."""

from uuid import UUID

from pydantic import BaseModel

from blog.domain.service import CommentLikeService
from blog.domain.value import CommentId, PostId, UserId


class LikeCommentRequest(BaseModel):
    """Like or unlike comment request."""

    post_id: str
    comment_id: str
    user_id: str  # User ID from authenticated user


class LikeCommentResponse(BaseModel):
    """Like state of a comment after the change."""

    comment_id: str
    like_count: int
    has_liked: bool


class LikeCommentUseCase:
    """Use case for liking a comment."""

    def __init__(self, like_service: CommentLikeService) -> None:
        """Initialize like comment use case.

        Args:
            like_service: Comment like domain service
        """
        self.like_service = like_service

    async def execute(self, request: LikeCommentRequest) -> LikeCommentResponse:
        """Execute like flow.

        Raises:
            NotFoundError: If the post or comment is missing
            ConflictError: If the user already liked the comment
        """
        count = await self.like_service.like_comment(
            post_id=PostId(UUID(request.post_id)),
            comment_id=CommentId(UUID(request.comment_id)),
            user_id=UserId(UUID(request.user_id)),
        )
        return LikeCommentResponse(
            comment_id=request.comment_id, like_count=count, has_liked=True
        )


class UnlikeCommentUseCase:
    """Use case for removing a like from a comment."""

    def __init__(self, like_service: CommentLikeService) -> None:
        self.like_service = like_service

    async def execute(self, request: LikeCommentRequest) -> LikeCommentResponse:
        """Execute unlike flow.

        Raises:
            NotFoundError: If the post or comment is missing
            ValidationError: If the user had not liked the comment
        """
        count = await self.like_service.unlike_comment(
            post_id=PostId(UUID(request.post_id)),
            comment_id=CommentId(UUID(request.comment_id)),
            user_id=UserId(UUID(request.user_id)),
        )
        return LikeCommentResponse(
            comment_id=request.comment_id, like_count=count, has_liked=False
        )
