"""Moderation queue use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from blog.domain.error import ValidationError
from blog.domain.service import ModerationService
from blog.domain.value import ModerationStatus, PostId, UserId

from ..comment.items import CommentDetail, comment_detail_from_model


class GetModerationQueueRequest(BaseModel):
    """Moderation queue request."""

    post_id: str
    user_id: str  # Must be the post author
    status: str | None = None  # "pending", "approved" or "hidden"


class QueuedReportItem(BaseModel):
    report_id: str
    reporter_id: str
    reporter_username: str | None
    reason: str
    status: str
    created_at: datetime


class ModerationQueueEntry(BaseModel):
    """A comment awaiting the post author's attention."""

    comment: CommentDetail
    author_username: str | None
    report_count: int
    reports: list[QueuedReportItem]


class GetModerationQueueResponse(BaseModel):
    post_id: str
    items: list[ModerationQueueEntry]
    total: int


class GetModerationQueueUseCase:
    """Use case for listing a post's comments with their reports."""

    def __init__(self, moderation_service: ModerationService) -> None:
        self.moderation_service = moderation_service

    @staticmethod
    def _parse_status(status: str | None) -> ModerationStatus | None:
        if status is None:
            return None
        try:
            return ModerationStatus(status)
        except ValueError:
            raise ValidationError(
                'Invalid status. Must be "pending", "approved" or "hidden"'
            ) from None

    async def execute(
        self, request: GetModerationQueueRequest
    ) -> GetModerationQueueResponse:
        """Execute moderation queue flow.

        Raises:
            ValidationError: If the status filter is unknown
            NotFoundError: If the post is missing
            ForbiddenError: If the user is not the post author
        """
        queue = await self.moderation_service.moderation_queue(
            post_id=PostId(UUID(request.post_id)),
            actor_id=UserId(UUID(request.user_id)),
            status=self._parse_status(request.status),
        )

        items = [
            ModerationQueueEntry(
                comment=comment_detail_from_model(entry.comment),
                author_username=entry.author_username,
                report_count=len(entry.reports),
                reports=[
                    QueuedReportItem(
                        report_id=str(report.id),
                        reporter_id=str(report.reporter_id),
                        reporter_username=report.reporter_username,
                        reason=report.reason,
                        status=report.status.value,
                        created_at=report.created_at,
                    )
                    for report in entry.reports
                ],
            )
            for entry in queue
        ]
        return GetModerationQueueResponse(
            post_id=request.post_id, items=items, total=len(items)
        )
