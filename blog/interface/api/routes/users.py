"""User routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query

from blog.application.usecase.stats import (
    GetTopCommentersRequest,
    GetTopCommentersResponse,
    GetTopCommentersUseCase,
)

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)


@router.get("/{user_id}/top-commenters", response_model=GetTopCommentersResponse)
async def get_top_commenters(
    user_id: UUID,
    get_top_commenters_use_case: FromDishka[GetTopCommentersUseCase],
    limit: int | None = Query(default=None, ge=1),
) -> GetTopCommentersResponse:
    """Commenters who have earned the top commenter badge on a user's posts.

    Example:
        GET /users/123e4567-e89b-12d3-a456-426614174000/top-commenters

        Response:
        {
            "user_id": "123e4567-e89b-12d3-a456-426614174000",
            "threshold": 5,
            "commenters": [
                {"user_id": "...", "username": "alice", "comment_count": 12, ...}
            ]
        }
    """
    return await get_top_commenters_use_case.execute(
        GetTopCommentersRequest(user_id=str(user_id), limit=limit)
    )
