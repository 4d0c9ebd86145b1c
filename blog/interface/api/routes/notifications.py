"""Notification inbox routes.

Static paths are declared before ``/{notification_id}`` so they are matched
first.
"""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Query

from blog.application.usecase.notification import (
    BulkUpdateResponse,
    ClearReadNotificationsUseCase,
    DeleteNotificationResponse,
    DeleteNotificationUseCase,
    GetNotificationUseCase,
    GetUnreadCountUseCase,
    ListNotificationsRequest,
    ListNotificationsResponse,
    ListNotificationsUseCase,
    MarkAllNotificationsReadUseCase,
    MarkNotificationReadUseCase,
    NotificationItem,
    NotificationRequest,
    UnreadCountResponse,
    UserNotificationsRequest,
)
from blog.domain.service import JWTService

router = APIRouter(
    prefix="/notifications", tags=["notifications"], route_class=DishkaRoute
)


@router.get("", response_model=ListNotificationsResponse)
async def list_notifications(
    list_notifications_use_case: FromDishka[ListNotificationsUseCase],
    jwt_service: FromDishka[JWTService],
    limit: int | None = Query(default=None, ge=1),
    offset: int = Query(default=0, ge=0),
    unread_only: bool = Query(default=False),
    auth_token: str | None = Cookie(default=None),
) -> ListNotificationsResponse:
    """The current user's notifications, newest first."""
    viewer = jwt_service.require_viewer(auth_token)
    return await list_notifications_use_case.execute(
        ListNotificationsRequest(
            user_id=str(viewer.user_id),
            limit=limit,
            offset=offset,
            unread_only=unread_only,
        )
    )


@router.get("/unread-count", response_model=UnreadCountResponse)
async def get_unread_count(
    get_unread_count_use_case: FromDishka[GetUnreadCountUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> UnreadCountResponse:
    viewer = jwt_service.require_viewer(auth_token)
    return await get_unread_count_use_case.execute(
        UserNotificationsRequest(user_id=str(viewer.user_id))
    )


@router.patch("/read-all", response_model=BulkUpdateResponse)
async def mark_all_read(
    mark_all_read_use_case: FromDishka[MarkAllNotificationsReadUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> BulkUpdateResponse:
    viewer = jwt_service.require_viewer(auth_token)
    return await mark_all_read_use_case.execute(
        UserNotificationsRequest(user_id=str(viewer.user_id))
    )


@router.delete("/clear", response_model=BulkUpdateResponse)
async def clear_read(
    clear_read_use_case: FromDishka[ClearReadNotificationsUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> BulkUpdateResponse:
    """Delete every read notification of the current user."""
    viewer = jwt_service.require_viewer(auth_token)
    return await clear_read_use_case.execute(
        UserNotificationsRequest(user_id=str(viewer.user_id))
    )


@router.get("/{notification_id}", response_model=NotificationItem)
async def get_notification(
    notification_id: UUID,
    get_notification_use_case: FromDishka[GetNotificationUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> NotificationItem:
    viewer = jwt_service.require_viewer(auth_token)
    return await get_notification_use_case.execute(
        NotificationRequest(
            notification_id=str(notification_id), user_id=str(viewer.user_id)
        )
    )


@router.patch("/{notification_id}/read", response_model=NotificationItem)
async def mark_read(
    notification_id: UUID,
    mark_read_use_case: FromDishka[MarkNotificationReadUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> NotificationItem:
    viewer = jwt_service.require_viewer(auth_token)
    return await mark_read_use_case.execute(
        NotificationRequest(
            notification_id=str(notification_id), user_id=str(viewer.user_id)
        )
    )


@router.delete("/{notification_id}", response_model=DeleteNotificationResponse)
async def delete_notification(
    notification_id: UUID,
    delete_notification_use_case: FromDishka[DeleteNotificationUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> DeleteNotificationResponse:
    viewer = jwt_service.require_viewer(auth_token)
    return await delete_notification_use_case.execute(
        NotificationRequest(
            notification_id=str(notification_id), user_id=str(viewer.user_id)
        )
    )
