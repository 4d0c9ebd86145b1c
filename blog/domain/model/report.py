"""Comment report entity."""

from datetime import datetime

from pydantic import Field

from blog.domain.model.common import DomainModel
from blog.domain.value import CommentId, CommentReportId, ReportStatus, UserId


class CommentReport(DomainModel):
    """A community report against a comment.

    Business rules:
    - One report per (comment, reporter) (enforced by database unique constraint)
    - Reason is stored trimmed
    """

    id: CommentReportId
    comment_id: CommentId
    reporter_id: UserId
    reason: str = Field(min_length=1, max_length=500)
    status: ReportStatus = ReportStatus.PENDING
    created_at: datetime = Field(default_factory=datetime.now)
