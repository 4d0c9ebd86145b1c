"""PostgreSQL implementation of CommentReport repository."""

from typing import List, Optional, Sequence

from sqlalchemy import and_, desc, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from blog.domain.model import CommentReport
from blog.domain.repository import CommentReportRepository
from blog.domain.value import CommentId, CommentReportId, ReportStatus, UserId
from blog.persistence.mappers import comment_report_to_dict, row_to_comment_report
from blog.persistence.tables import comment_reports_table


class PostgresCommentReportRepository(CommentReportRepository):
    """PostgreSQL implementation of CommentReportRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, report_id: CommentReportId) -> Optional[CommentReport]:
        """Find a report by ID."""
        stmt = select(comment_reports_table).where(
            comment_reports_table.c.id == report_id
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment_report(row._asdict()) if row else None

    async def find_by_comment_and_reporter(
        self, comment_id: CommentId, reporter_id: UserId
    ) -> Optional[CommentReport]:
        """Find a reporter's report on a comment."""
        stmt = select(comment_reports_table).where(
            and_(
                comment_reports_table.c.comment_id == comment_id,
                comment_reports_table.c.reporter_id == reporter_id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment_report(row._asdict()) if row else None

    async def save(self, report: CommentReport) -> CommentReport:
        """Insert a report inside a savepoint."""
        stmt = insert(comment_reports_table).values(**comment_report_to_dict(report))
        async with self.session.begin_nested():
            await self.session.execute(stmt)
        await self.session.flush()
        return report

    async def find_by_comments(
        self, comment_ids: Sequence[CommentId]
    ) -> List[CommentReport]:
        """Find all reports on several comments, newest first."""
        if not comment_ids:
            return []
        stmt = (
            select(comment_reports_table)
            .where(comment_reports_table.c.comment_id.in_(list(set(comment_ids))))
            .order_by(desc(comment_reports_table.c.created_at))
        )
        result = await self.session.execute(stmt)
        return [row_to_comment_report(row._asdict()) for row in result.fetchall()]

    async def find_all(self, limit: int, offset: int) -> List[CommentReport]:
        """Find a page of reports, newest first."""
        stmt = (
            select(comment_reports_table)
            .order_by(desc(comment_reports_table.c.created_at))
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment_report(row._asdict()) for row in result.fetchall()]

    async def count_all(self) -> int:
        stmt = select(func.count()).select_from(comment_reports_table)
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def update_status(
        self, report_id: CommentReportId, status: ReportStatus
    ) -> Optional[CommentReport]:
        """Set the review status of a report."""
        stmt = (
            update(comment_reports_table)
            .where(comment_reports_table.c.id == report_id)
            .values(status=status.value)
            .returning(comment_reports_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()

        if row is None:
            return None

        await self.session.flush()
        return row_to_comment_report(row._asdict())
