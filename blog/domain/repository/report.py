"""Comment report repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from blog.domain.model.report import CommentReport
from blog.domain.value import CommentId, CommentReportId, ReportStatus, UserId


class CommentReportRepository(ABC):
    """Repository for CommentReport entity."""

    @abstractmethod
    async def find_by_id(self, report_id: CommentReportId) -> Optional[CommentReport]:
        """Find a report by ID."""
        pass

    @abstractmethod
    async def find_by_comment_and_reporter(
        self, comment_id: CommentId, reporter_id: UserId
    ) -> Optional[CommentReport]:
        """Find the report a user filed against a comment."""
        pass

    @abstractmethod
    async def save(self, report: CommentReport) -> CommentReport:
        """Save a report (create).

        Raises:
            IntegrityError: If the reporter already reported the comment
        """
        pass

    @abstractmethod
    async def find_by_comments(
        self, comment_ids: Sequence[CommentId]
    ) -> List[CommentReport]:
        """Find all reports on several comments, newest first."""
        pass

    @abstractmethod
    async def find_all(self, limit: int, offset: int) -> List[CommentReport]:
        """Find reports across all comments, newest first."""
        pass

    @abstractmethod
    async def count_all(self) -> int:
        """Count all reports."""
        pass

    @abstractmethod
    async def update_status(
        self, report_id: CommentReportId, status: ReportStatus
    ) -> Optional[CommentReport]:
        """Set a report's review status.

        Returns:
            Updated report, or None if absent
        """
        pass
