"""List and review comment reports (admin)."""

from uuid import UUID

from pydantic import BaseModel

from blog.config import CommentSettings
from blog.domain.error import ValidationError
from blog.domain.service import JWTService, ReportService
from blog.domain.value import CommentReportId, ReportStatus

from ..base import clamp_page
from .report_comment import CommentReportItem, report_item_from_details


class ListReportsRequest(BaseModel):
    """List reports request."""

    auth_token: str | None = None
    limit: int | None = None
    offset: int = 0


class ListReportsResponse(BaseModel):
    items: list[CommentReportItem]
    total: int
    limit: int
    offset: int


class ListReportsUseCase:
    """Use case for admins reviewing every comment report."""

    def __init__(
        self,
        report_service: ReportService,
        jwt_service: JWTService,
        comment_settings: CommentSettings,
    ) -> None:
        self.report_service = report_service
        self.jwt_service = jwt_service
        self.comment_settings = comment_settings

    async def execute(self, request: ListReportsRequest) -> ListReportsResponse:
        """Execute list reports flow.

        Raises:
            UnauthorizedError: If not authenticated
            ForbiddenError: If the viewer is not an admin
        """
        viewer = self.jwt_service.require_viewer(request.auth_token)
        limit, offset = clamp_page(request.limit, request.offset, self.comment_settings)

        page = await self.report_service.list_reports(viewer, limit, offset)

        return ListReportsResponse(
            items=[report_item_from_details(item) for item in page.items],
            total=page.total,
            limit=limit,
            offset=offset,
        )


class UpdateReportStatusRequest(BaseModel):
    """Update report status request."""

    auth_token: str | None = None
    report_id: str
    status: str  # "reviewed" or "rejected"


class UpdateReportStatusResponse(BaseModel):
    report_id: str
    status: str


class UpdateReportStatusUseCase:
    """Use case for admins closing a report."""

    REVIEW_STATUSES = (ReportStatus.REVIEWED, ReportStatus.REJECTED)

    def __init__(self, report_service: ReportService, jwt_service: JWTService) -> None:
        self.report_service = report_service
        self.jwt_service = jwt_service

    async def execute(
        self, request: UpdateReportStatusRequest
    ) -> UpdateReportStatusResponse:
        """Execute update report status flow.

        Raises:
            UnauthorizedError: If not authenticated
            ValidationError: If the status is not a review outcome
            ForbiddenError: If the viewer is not an admin
            NotFoundError: If the report is missing
        """
        viewer = self.jwt_service.require_viewer(request.auth_token)

        status = next(
            (s for s in self.REVIEW_STATUSES if s.value == request.status), None
        )
        if status is None:
            raise ValidationError('Invalid status. Must be "reviewed" or "rejected"')

        report = await self.report_service.update_report_status(
            viewer, CommentReportId(UUID(request.report_id)), status
        )
        return UpdateReportStatusResponse(
            report_id=str(report.id), status=report.status.value
        )
