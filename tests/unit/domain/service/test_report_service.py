"""Unit tests for ReportService."""

from uuid import uuid4

import pytest

from blog.domain.error import ConflictError, ForbiddenError, NotFoundError, ValidationError
from blog.domain.repository import CommentReportRepository
from blog.domain.service import ModerationService, ReportService
from blog.domain.value import (
    CommentId,
    CommentReportId,
    ModerationStatus,
    ReportStatus,
    UserRole,
)
from tests.conftest import add_comment, add_post, add_user, viewer_for
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


class TestReportComment:
    """Tests for report_comment."""

    @pytest.mark.asyncio
    async def test_report_is_stored_pending_with_trimmed_reason(self, unit_env):
        report_service = await unit_env.get(ReportService)
        author = await add_user(unit_env)
        reporter = await add_user(unit_env, username="watchful")
        post = await add_post(unit_env, author, title="Reported")
        comment = await add_comment(unit_env, post, author, "questionable")

        details = await report_service.report_comment(
            post.id, comment.id, reporter.id, "   this is spam   "
        )

        assert details.report.reason == "this is spam"
        assert details.report.status == ReportStatus.PENDING
        assert details.reporter_username == "watchful"
        assert details.comment.id == comment.id
        assert details.post.title == "Reported"

    @pytest.mark.asyncio
    async def test_report_does_not_change_moderation_status(self, unit_env):
        report_service = await unit_env.get(ReportService)
        moderation_service = await unit_env.get(ModerationService)
        author = await add_user(unit_env)
        reporter = await add_user(unit_env)
        post = await add_post(unit_env, author)
        comment = await add_comment(unit_env, post, author)

        await report_service.report_comment(post.id, comment.id, reporter.id, "spam!!")

        queue = await moderation_service.moderation_queue(post.id, author.id)
        assert queue[0].comment.moderation_status == ModerationStatus.APPROVED

    @pytest.mark.asyncio
    @pytest.mark.parametrize("reason", [None, "", "    ", "abcd", "x" * 501])
    async def test_reason_length_is_validated(self, unit_env, reason):
        report_service = await unit_env.get(ReportService)
        author = await add_user(unit_env)
        post = await add_post(unit_env, author)
        comment = await add_comment(unit_env, post, author)

        with pytest.raises(ValidationError, match="between 5 and 500"):
            await report_service.report_comment(post.id, comment.id, author.id, reason)

    @pytest.mark.asyncio
    async def test_reason_checked_before_comment_lookup(self, unit_env):
        report_service = await unit_env.get(ReportService)
        author = await add_user(unit_env)
        post = await add_post(unit_env, author)

        with pytest.raises(ValidationError):
            await report_service.report_comment(
                post.id, CommentId(uuid4()), author.id, "no"
            )

    @pytest.mark.asyncio
    async def test_deactivated_reporter_is_forbidden(self, unit_env):
        report_service = await unit_env.get(ReportService)
        report_repo = await unit_env.get(CommentReportRepository)
        author = await add_user(unit_env)
        gone = await add_user(unit_env, deactivated=True)
        post = await add_post(unit_env, author)
        comment = await add_comment(unit_env, post, author)

        with pytest.raises(ForbiddenError, match="Account has been deactivated"):
            await report_service.report_comment(
                post.id, comment.id, gone.id, "spam spam"
            )

        assert await report_repo.count_all() == 0

    @pytest.mark.asyncio
    async def test_duplicate_report_conflicts(self, unit_env):
        report_service = await unit_env.get(ReportService)
        author = await add_user(unit_env)
        reporter = await add_user(unit_env)
        post = await add_post(unit_env, author)
        comment = await add_comment(unit_env, post, author)
        await report_service.report_comment(post.id, comment.id, reporter.id, "spam!!")

        with pytest.raises(ConflictError, match="already reported"):
            await report_service.report_comment(
                post.id, comment.id, reporter.id, "still spam"
            )

    @pytest.mark.asyncio
    async def test_comment_on_other_post_is_not_found(self, unit_env):
        report_service = await unit_env.get(ReportService)
        author = await add_user(unit_env)
        post = await add_post(unit_env, author)
        other = await add_post(unit_env, author)
        comment = await add_comment(unit_env, other, author)

        with pytest.raises(NotFoundError):
            await report_service.report_comment(post.id, comment.id, author.id, "spam!!")


class TestAdminReports:
    """Tests for list_reports / update_report_status."""

    @pytest.mark.asyncio
    async def test_admin_lists_reports_with_total(self, unit_env):
        report_service = await unit_env.get(ReportService)
        admin = await add_user(unit_env, role=UserRole.ADMIN)
        author = await add_user(unit_env)
        post = await add_post(unit_env, author)
        comment = await add_comment(unit_env, post, author, "reported text")
        for _ in range(3):
            reporter = await add_user(unit_env)
            await report_service.report_comment(
                post.id, comment.id, reporter.id, "spam!!"
            )

        page = await report_service.list_reports(viewer_for(admin), limit=2)

        assert page.total == 3
        assert len(page.items) == 2
        assert page.items[0].comment.text == "reported text"
        assert page.items[0].post.id == post.id

    @pytest.mark.asyncio
    async def test_non_admin_is_forbidden(self, unit_env):
        report_service = await unit_env.get(ReportService)
        reader = await add_user(unit_env)

        with pytest.raises(ForbiddenError, match="Admin access required"):
            await report_service.list_reports(viewer_for(reader), limit=10)

    @pytest.mark.asyncio
    async def test_admin_updates_status(self, unit_env):
        report_service = await unit_env.get(ReportService)
        admin = await add_user(unit_env, role=UserRole.ADMIN)
        author = await add_user(unit_env)
        post = await add_post(unit_env, author)
        comment = await add_comment(unit_env, post, author)
        details = await report_service.report_comment(
            post.id, comment.id, admin.id, "spam!!"
        )

        updated = await report_service.update_report_status(
            viewer_for(admin), details.report.id, ReportStatus.REJECTED
        )

        assert updated.status == ReportStatus.REJECTED

    @pytest.mark.asyncio
    async def test_update_missing_report_is_not_found(self, unit_env):
        report_service = await unit_env.get(ReportService)
        admin = await add_user(unit_env, role=UserRole.ADMIN)

        with pytest.raises(NotFoundError, match="Report not found"):
            await report_service.update_report_status(
                viewer_for(admin), CommentReportId(uuid4()), ReportStatus.REVIEWED
            )
