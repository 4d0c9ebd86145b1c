"""Comment like routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie

from blog.application.usecase.like import (
    LikeCommentRequest,
    LikeCommentResponse,
    LikeCommentUseCase,
    UnlikeCommentUseCase,
)
from blog.domain.service import JWTService

router = APIRouter(prefix="/posts", tags=["likes"], route_class=DishkaRoute)


@router.post(
    "/{post_id}/comments/{comment_id}/like", response_model=LikeCommentResponse
)
async def like_comment(
    post_id: UUID,
    comment_id: UUID,
    like_comment_use_case: FromDishka[LikeCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> LikeCommentResponse:
    """Like a comment. Liking twice is a conflict."""
    viewer = jwt_service.require_viewer(auth_token)
    return await like_comment_use_case.execute(
        LikeCommentRequest(
            post_id=str(post_id),
            comment_id=str(comment_id),
            user_id=str(viewer.user_id),
        )
    )


@router.delete(
    "/{post_id}/comments/{comment_id}/like", response_model=LikeCommentResponse
)
async def unlike_comment(
    post_id: UUID,
    comment_id: UUID,
    unlike_comment_use_case: FromDishka[UnlikeCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> LikeCommentResponse:
    """Remove a like from a comment."""
    viewer = jwt_service.require_viewer(auth_token)
    return await unlike_comment_use_case.execute(
        LikeCommentRequest(
            post_id=str(post_id),
            comment_id=str(comment_id),
            user_id=str(viewer.user_id),
        )
    )
