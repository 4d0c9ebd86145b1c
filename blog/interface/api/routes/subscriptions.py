"""Comment thread subscription routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, status

from blog.application.usecase.subscription import (
    GetSubscriptionStatusUseCase,
    SubscribeUseCase,
    SubscriptionRequest,
    SubscriptionResponse,
    UnsubscribeUseCase,
)
from blog.domain.service import JWTService

router = APIRouter(prefix="/posts", tags=["subscriptions"], route_class=DishkaRoute)


@router.post(
    "/{post_id}/comments/{comment_id}/subscribe",
    response_model=SubscriptionResponse,
    status_code=status.HTTP_201_CREATED,
)
async def subscribe(
    post_id: UUID,
    comment_id: UUID,
    subscribe_use_case: FromDishka[SubscribeUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> SubscriptionResponse:
    """Get notified of replies anywhere under a comment."""
    viewer = jwt_service.require_viewer(auth_token)
    return await subscribe_use_case.execute(
        SubscriptionRequest(
            post_id=str(post_id), comment_id=str(comment_id), user_id=str(viewer.user_id)
        )
    )


@router.delete(
    "/{post_id}/comments/{comment_id}/subscribe", response_model=SubscriptionResponse
)
async def unsubscribe(
    post_id: UUID,
    comment_id: UUID,
    unsubscribe_use_case: FromDishka[UnsubscribeUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> SubscriptionResponse:
    viewer = jwt_service.require_viewer(auth_token)
    return await unsubscribe_use_case.execute(
        SubscriptionRequest(
            post_id=str(post_id), comment_id=str(comment_id), user_id=str(viewer.user_id)
        )
    )


@router.get(
    "/{post_id}/comments/{comment_id}/subscribe", response_model=SubscriptionResponse
)
async def get_subscription_status(
    post_id: UUID,
    comment_id: UUID,
    get_subscription_status_use_case: FromDishka[GetSubscriptionStatusUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> SubscriptionResponse:
    viewer = jwt_service.require_viewer(auth_token)
    return await get_subscription_status_use_case.execute(
        SubscriptionRequest(
            post_id=str(post_id), comment_id=str(comment_id), user_id=str(viewer.user_id)
        )
    )
