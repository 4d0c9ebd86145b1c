"""Comment moderation routes (post author only)."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Query
from pydantic import BaseModel

from blog.application.usecase.moderation import (
    GetModerationQueueRequest,
    GetModerationQueueResponse,
    GetModerationQueueUseCase,
    ModerateCommentRequest,
    ModerateCommentResponse,
    ModerateCommentUseCase,
)
from blog.domain.service import JWTService

router = APIRouter(prefix="/posts", tags=["moderation"], route_class=DishkaRoute)


class ModerateCommentAPIRequest(BaseModel):
    """API request for moderating a comment."""

    action: str  # "approve" or "hide"


@router.patch(
    "/{post_id}/comments/{comment_id}/moderate",
    response_model=ModerateCommentResponse,
)
async def moderate_comment(
    post_id: UUID,
    comment_id: UUID,
    request: ModerateCommentAPIRequest,
    moderate_comment_use_case: FromDishka[ModerateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ModerateCommentResponse:
    """Approve or hide a comment on one of your posts.

    Args:
        post_id: Post UUID
        comment_id: Comment UUID
        request: Moderation action
        moderate_comment_use_case: Moderate comment use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        The comment with its new moderation status
    """
    viewer = jwt_service.require_viewer(auth_token)
    return await moderate_comment_use_case.execute(
        ModerateCommentRequest(
            post_id=str(post_id),
            comment_id=str(comment_id),
            user_id=str(viewer.user_id),
            action=request.action,
        )
    )


@router.get("/{post_id}/moderation", response_model=GetModerationQueueResponse)
async def get_moderation_queue(
    post_id: UUID,
    get_moderation_queue_use_case: FromDishka[GetModerationQueueUseCase],
    jwt_service: FromDishka[JWTService],
    status: str | None = Query(default=None),
    auth_token: str | None = Cookie(default=None),
) -> GetModerationQueueResponse:
    """Comments of a post with their reports, optionally filtered by status."""
    viewer = jwt_service.require_viewer(auth_token)
    return await get_moderation_queue_use_case.execute(
        GetModerationQueueRequest(
            post_id=str(post_id), user_id=str(viewer.user_id), status=status
        )
    )
