"""Comment report domain service."""

from dataclasses import dataclass
from datetime import datetime
from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from blog.config import CommentSettings
from blog.domain.error import ConflictError, ForbiddenError, NotFoundError, ValidationError
from blog.domain.model import Comment, CommentReport, Post
from blog.domain.repository import (
    CommentReportRepository,
    CommentRepository,
    PostRepository,
)
from blog.domain.value import (
    CommentId,
    CommentReportId,
    PostId,
    ReportStatus,
    UserId,
    Viewer,
)

from .base import Service
from .user_service import UserService


@dataclass
class CommentReportDetails:
    """A report with the context a reviewer needs."""

    report: CommentReport
    reporter_username: str | None
    comment: Comment | None
    post: Post | None


@dataclass
class CommentReportPage:
    items: list[CommentReportDetails]
    total: int


class ReportService(Service):
    """Ledger of community reports against comments.

    One report per (comment, reporter); reports feed the moderation queue
    and the admin review list.
    """

    def __init__(
        self,
        report_repository: CommentReportRepository,
        comment_repository: CommentRepository,
        post_repository: PostRepository,
        user_service: UserService,
        comment_settings: CommentSettings,
    ) -> None:
        """Initialize report service.

        Args:
            report_repository: Comment report repository
            comment_repository: Comment repository
            post_repository: Post repository
            user_service: User domain service
            comment_settings: Comment configuration (reason length bounds)
        """
        self.report_repository = report_repository
        self.comment_repository = comment_repository
        self.post_repository = post_repository
        self.user_service = user_service
        self.reason_min = comment_settings.report_reason_min_length
        self.reason_max = comment_settings.report_reason_max_length

    def validate_reason(self, reason: str | None) -> str:
        """Trim a report reason and check its length.

        Raises:
            ValidationError: If absent, too short or too long
        """
        trimmed = (reason or "").strip()
        if not self.reason_min <= len(trimmed) <= self.reason_max:
            raise ValidationError(
                f"Reason must be between {self.reason_min} and "
                f"{self.reason_max} characters"
            )
        return trimmed

    async def report_comment(
        self,
        post_id: PostId,
        comment_id: CommentId,
        reporter_id: UserId,
        reason: str | None,
    ) -> CommentReportDetails:
        """File a report against a comment.

        Raises:
            ValidationError: If the reason is invalid
            ForbiddenError: If the reporter's account has been deactivated
            NotFoundError: If the comment is missing, deleted or on another post
            ConflictError: If the reporter already reported the comment
        """
        with logfire.span(
            "report_service.report_comment",
            comment_id=str(comment_id),
            reporter_id=str(reporter_id),
        ):
            trimmed = self.validate_reason(reason)
            await self.user_service.require_active_actor(reporter_id)

            comment = await self.comment_repository.find_by_id(comment_id)
            if comment is None or comment.is_deleted or comment.post_id != post_id:
                raise NotFoundError("Comment not found")

            existing = await self.report_repository.find_by_comment_and_reporter(
                comment_id, reporter_id
            )
            if existing:
                raise ConflictError("You have already reported this comment")

            report = CommentReport(
                id=CommentReportId(uuid4()),
                comment_id=comment_id,
                reporter_id=reporter_id,
                reason=trimmed,
                status=ReportStatus.PENDING,
                created_at=datetime.now(),
            )
            try:
                saved = await self.report_repository.save(report)
            except IntegrityError:
                logfire.warn(
                    "Duplicate report attempt",
                    comment_id=str(comment_id),
                    reporter_id=str(reporter_id),
                )
                raise ConflictError("You have already reported this comment")

            post = await self.post_repository.find_by_id(comment.post_id)
            reporter = (await self.user_service.get_users([reporter_id])).get(
                reporter_id
            )

            logfire.info(
                "Comment reported",
                report_id=str(saved.id),
                comment_id=str(comment_id),
            )
            return CommentReportDetails(
                report=saved,
                reporter_username=reporter.username if reporter else None,
                comment=comment,
                post=post,
            )

    @staticmethod
    def _require_admin(viewer: Viewer) -> None:
        if not viewer.is_admin:
            logfire.warn(
                "Non-admin report access",
                user_id=str(viewer.user_id) if viewer.user_id else None,
            )
            raise ForbiddenError("Admin access required")

    async def list_reports(
        self, viewer: Viewer, limit: int, offset: int = 0
    ) -> CommentReportPage:
        """List all reports newest first with their context. Admin only."""
        self._require_admin(viewer)

        with logfire.span("report_service.list_reports", limit=limit, offset=offset):
            reports = await self.report_repository.find_all(limit=limit, offset=offset)
            total = await self.report_repository.count_all()

            comments: dict[CommentId, Comment] = {}
            posts: dict[PostId, Post] = {}
            if reports:
                comments = await self.comment_repository.find_by_ids(
                    list({r.comment_id for r in reports})
                )
            if comments:
                posts = await self.post_repository.find_by_ids(
                    list({c.post_id for c in comments.values()})
                )
            users = await self.user_service.get_users(r.reporter_id for r in reports)

            items = []
            for report in reports:
                comment = comments.get(report.comment_id)
                reporter = users.get(report.reporter_id)
                items.append(
                    CommentReportDetails(
                        report=report,
                        reporter_username=reporter.username if reporter else None,
                        comment=comment,
                        post=posts.get(comment.post_id) if comment else None,
                    )
                )
            return CommentReportPage(items=items, total=total)

    async def update_report_status(
        self, viewer: Viewer, report_id: CommentReportId, status: ReportStatus
    ) -> CommentReport:
        """Mark a report reviewed or rejected. Admin only."""
        self._require_admin(viewer)

        with logfire.span(
            "report_service.update_report_status",
            report_id=str(report_id),
            status=status.value,
        ):
            updated = await self.report_repository.update_status(report_id, status)
            if updated is None:
                raise NotFoundError("Report not found")
            logfire.info(
                "Report status updated", report_id=str(report_id), status=status.value
            )
            return updated
