"""Report comment use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from blog.domain.service import CommentReportDetails, ReportService
from blog.domain.value import CommentId, PostId, UserId


class ReportCommentRequest(BaseModel):
    """Report comment request."""

    post_id: str
    comment_id: str
    reporter_id: str  # User ID from authenticated user
    reason: str | None = None


class CommentReportItem(BaseModel):
    """A report with the comment and post it concerns."""

    report_id: str
    comment_id: str
    reporter_id: str
    reporter_username: str | None
    reason: str
    status: str
    created_at: datetime
    comment_content: str | None
    post_id: str | None
    post_title: str | None
    post_slug: str | None


def report_item_from_details(details: CommentReportDetails) -> CommentReportItem:
    report = details.report
    return CommentReportItem(
        report_id=str(report.id),
        comment_id=str(report.comment_id),
        reporter_id=str(report.reporter_id),
        reporter_username=details.reporter_username,
        reason=report.reason,
        status=report.status.value,
        created_at=report.created_at,
        comment_content=details.comment.text if details.comment else None,
        post_id=str(details.post.id) if details.post else None,
        post_title=details.post.title if details.post else None,
        post_slug=details.post.slug if details.post else None,
    )


class ReportCommentUseCase:
    """Use case for reporting a comment to admins and the post author."""

    def __init__(self, report_service: ReportService) -> None:
        self.report_service = report_service

    async def execute(self, request: ReportCommentRequest) -> CommentReportItem:
        """Execute report flow.

        Raises:
            ValidationError: If the reason is missing or out of bounds
            NotFoundError: If the comment is missing
            ConflictError: If the user already reported the comment
        """
        details = await self.report_service.report_comment(
            post_id=PostId(UUID(request.post_id)),
            comment_id=CommentId(UUID(request.comment_id)),
            reporter_id=UserId(UUID(request.reporter_id)),
            reason=request.reason,
        )
        return report_item_from_details(details)
