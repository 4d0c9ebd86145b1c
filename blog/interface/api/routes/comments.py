"""Comment routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Query, status
from pydantic import BaseModel, Field

from blog.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
    GetRecentCommentsRequest,
    GetRecentCommentsResponse,
    GetRecentCommentsUseCase,
    GetThreadRequest,
    GetThreadResponse,
    GetThreadUseCase,
    UpdateCommentRequest,
    UpdateCommentResponse,
    UpdateCommentUseCase,
)
from blog.domain.service import JWTService

router = APIRouter(tags=["comments"], route_class=DishkaRoute)


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a comment."""

    content: str = Field(max_length=10000)
    parent_id: UUID | None = None  # Parent comment ID for replies


class ReplyAPIRequest(BaseModel):
    """API request for replying to a comment."""

    content: str = Field(max_length=10000)


class UpdateCommentAPIRequest(BaseModel):
    """API request for editing a comment."""

    content: str = Field(max_length=10000)


@router.get("/posts/{post_id}/comments", response_model=GetThreadResponse)
async def get_comments(
    post_id: UUID,
    get_thread_use_case: FromDishka[GetThreadUseCase],
    auth_token: str | None = Cookie(default=None),
) -> GetThreadResponse:
    """Get the comment thread of a post.

    Anonymous readers see approved comments only; post authors and admins
    also see pending and hidden comments with their moderation status.

    Args:
        post_id: Post UUID
        get_thread_use_case: Get thread use case from DI
        auth_token: JWT token from cookie (optional)

    Returns:
        Nested comment tree
    """
    return await get_thread_use_case.execute(
        GetThreadRequest(post_id=str(post_id), auth_token=auth_token)
    )


@router.post(
    "/posts/{post_id}/comments",
    response_model=CreateCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    post_id: UUID,
    request: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CreateCommentResponse:
    """Comment on a post, or reply when ``parent_id`` is given.

    Requires authentication.
    """
    viewer = jwt_service.require_viewer(auth_token)
    return await create_comment_use_case.execute(
        CreateCommentRequest(
            post_id=str(post_id),
            author_id=str(viewer.user_id),
            text=request.content,
            parent_id=str(request.parent_id) if request.parent_id else None,
        )
    )


@router.post(
    "/posts/{post_id}/comments/{comment_id}/reply",
    response_model=CreateCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def reply_to_comment(
    post_id: UUID,
    comment_id: UUID,
    request: ReplyAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CreateCommentResponse:
    """Reply to a comment. Replies deeper than the thread limit are rejected."""
    viewer = jwt_service.require_viewer(auth_token)
    return await create_comment_use_case.execute(
        CreateCommentRequest(
            post_id=str(post_id),
            author_id=str(viewer.user_id),
            text=request.content,
            parent_id=str(comment_id),
        )
    )


@router.patch(
    "/posts/{post_id}/comments/{comment_id}", response_model=UpdateCommentResponse
)
async def update_comment(
    post_id: UUID,
    comment_id: UUID,
    request: UpdateCommentAPIRequest,
    update_comment_use_case: FromDishka[UpdateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> UpdateCommentResponse:
    """Edit a comment. Only the comment author can edit."""
    viewer = jwt_service.require_viewer(auth_token)
    return await update_comment_use_case.execute(
        UpdateCommentRequest(
            post_id=str(post_id),
            comment_id=str(comment_id),
            user_id=str(viewer.user_id),
            text=request.content,
        )
    )


@router.delete(
    "/posts/{post_id}/comments/{comment_id}", response_model=DeleteCommentResponse
)
async def delete_comment(
    post_id: UUID,
    comment_id: UUID,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> DeleteCommentResponse:
    """Delete a comment and its replies.

    Allowed for the comment author and the post author.
    """
    viewer = jwt_service.require_viewer(auth_token)
    return await delete_comment_use_case.execute(
        DeleteCommentRequest(
            post_id=str(post_id),
            comment_id=str(comment_id),
            user_id=str(viewer.user_id),
        )
    )


@router.get("/comments/recent", response_model=GetRecentCommentsResponse)
async def get_recent_comments(
    get_recent_comments_use_case: FromDishka[GetRecentCommentsUseCase],
    limit: int | None = Query(default=None, ge=1),
    offset: int = Query(default=0, ge=0),
    auth_token: str | None = Cookie(default=None),
) -> GetRecentCommentsResponse:
    """Newest top-level comments across all published posts."""
    return await get_recent_comments_use_case.execute(
        GetRecentCommentsRequest(auth_token=auth_token, limit=limit, offset=offset)
    )
