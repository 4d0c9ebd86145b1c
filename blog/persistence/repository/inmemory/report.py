"""In-memory comment report repository for testing."""

from typing import Optional, Sequence

from sqlalchemy.exc import IntegrityError

from blog.domain.model.report import CommentReport
from blog.domain.repository.report import CommentReportRepository
from blog.domain.value import CommentId, CommentReportId, ReportStatus, UserId


class InMemoryCommentReportRepository(CommentReportRepository):
    """In-memory implementation of CommentReportRepository for testing."""

    def __init__(self) -> None:
        self._reports: dict[CommentReportId, CommentReport] = {}

    def _newest_first(self, reports: list[CommentReport]) -> list[CommentReport]:
        return sorted(reports, key=lambda r: r.created_at, reverse=True)

    async def find_by_id(self, report_id: CommentReportId) -> Optional[CommentReport]:
        return self._reports.get(report_id)

    async def find_by_comment_and_reporter(
        self, comment_id: CommentId, reporter_id: UserId
    ) -> Optional[CommentReport]:
        for report in self._reports.values():
            if report.comment_id == comment_id and report.reporter_id == reporter_id:
                return report
        return None

    async def save(self, report: CommentReport) -> CommentReport:
        """Save a report.

        Raises:
            IntegrityError: If the reporter already reported the comment
        """
        existing = await self.find_by_comment_and_reporter(
            report.comment_id, report.reporter_id
        )
        if existing and existing.id != report.id:
            raise IntegrityError("Duplicate comment report", None, Exception())

        self._reports[report.id] = report
        return report

    async def find_by_comments(
        self, comment_ids: Sequence[CommentId]
    ) -> list[CommentReport]:
        wanted = set(comment_ids)
        return self._newest_first(
            [r for r in self._reports.values() if r.comment_id in wanted]
        )

    async def find_all(self, limit: int, offset: int) -> list[CommentReport]:
        return self._newest_first(list(self._reports.values()))[offset : offset + limit]

    async def count_all(self) -> int:
        return len(self._reports)

    async def update_status(
        self, report_id: CommentReportId, status: ReportStatus
    ) -> Optional[CommentReport]:
        report = self._reports.get(report_id)
        if report is None:
            return None
        updated = report.model_copy(update={"status": status})
        self._reports[report_id] = updated
        return updated
