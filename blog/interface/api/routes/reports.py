"""Comment report routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Query, status
from pydantic import BaseModel

from blog.application.usecase.report import (
    CommentReportItem,
    ListReportsRequest,
    ListReportsResponse,
    ListReportsUseCase,
    ReportCommentRequest,
    ReportCommentUseCase,
    UpdateReportStatusRequest,
    UpdateReportStatusResponse,
    UpdateReportStatusUseCase,
)
from blog.domain.service import JWTService

router = APIRouter(tags=["reports"], route_class=DishkaRoute)


class ReportCommentAPIRequest(BaseModel):
    """API request for reporting a comment."""

    reason: str | None = None


class UpdateReportStatusAPIRequest(BaseModel):
    status: str  # "reviewed" or "rejected"


@router.post(
    "/posts/{post_id}/comments/{comment_id}/report",
    response_model=CommentReportItem,
    status_code=status.HTTP_201_CREATED,
)
async def report_comment(
    post_id: UUID,
    comment_id: UUID,
    request: ReportCommentAPIRequest,
    report_comment_use_case: FromDishka[ReportCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CommentReportItem:
    """Report a comment. Each user may report a comment once."""
    viewer = jwt_service.require_viewer(auth_token)
    return await report_comment_use_case.execute(
        ReportCommentRequest(
            post_id=str(post_id),
            comment_id=str(comment_id),
            reporter_id=str(viewer.user_id),
            reason=request.reason,
        )
    )


@router.get("/reports/comments", response_model=ListReportsResponse)
async def list_reports(
    list_reports_use_case: FromDishka[ListReportsUseCase],
    limit: int | None = Query(default=None, ge=1),
    offset: int = Query(default=0, ge=0),
    auth_token: str | None = Cookie(default=None),
) -> ListReportsResponse:
    """All comment reports, newest first. Admin only."""
    return await list_reports_use_case.execute(
        ListReportsRequest(auth_token=auth_token, limit=limit, offset=offset)
    )


@router.patch(
    "/reports/comments/{report_id}", response_model=UpdateReportStatusResponse
)
async def update_report_status(
    report_id: UUID,
    request: UpdateReportStatusAPIRequest,
    update_report_status_use_case: FromDishka[UpdateReportStatusUseCase],
    auth_token: str | None = Cookie(default=None),
) -> UpdateReportStatusResponse:
    """Mark a report reviewed or rejected. Admin only."""
    return await update_report_status_use_case.execute(
        UpdateReportStatusRequest(
            auth_token=auth_token, report_id=str(report_id), status=request.status
        )
    )
