"""Comment moderation domain service."""

from collections import defaultdict
from dataclasses import dataclass, field
from datetime import datetime

import logfire

from blog.domain.error import ForbiddenError, NotFoundError, ValidationError
from blog.domain.model import Comment, Post
from blog.domain.repository import CommentReportRepository, CommentRepository
from blog.domain.value import (
    CommentId,
    CommentReportId,
    ModerationAction,
    ModerationStatus,
    PostId,
    ReportStatus,
    UserId,
)

from .base import Service
from .comment_service import CommentService
from .post_service import PostService
from .user_service import UserService


@dataclass
class QueuedReport:
    """A report as shown in the moderation queue."""

    id: CommentReportId
    reporter_id: UserId
    reporter_username: str | None
    reason: str
    status: ReportStatus
    created_at: datetime


@dataclass
class ModerationQueueItem:
    """A comment awaiting moderation with the reports filed against it."""

    comment: Comment
    author_username: str | None
    reports: list[QueuedReport] = field(default_factory=list)


class ModerationService(Service):
    """Post authors approve or hide comments on their posts.

    Status moves PENDING/APPROVED <-> HIDDEN; reports never change it on
    their own.
    """

    def __init__(
        self,
        comment_repository: CommentRepository,
        report_repository: CommentReportRepository,
        post_service: PostService,
        comment_service: CommentService,
        user_service: UserService,
    ) -> None:
        """Initialize moderation service.

        Args:
            comment_repository: Comment repository
            report_repository: Comment report repository
            post_service: Post domain service
            comment_service: Comment domain service
            user_service: User domain service
        """
        self.comment_repository = comment_repository
        self.report_repository = report_repository
        self.post_service = post_service
        self.comment_service = comment_service
        self.user_service = user_service

    @staticmethod
    def parse_action(action: str) -> ModerationAction:
        """Parse a moderation action string.

        Raises:
            ValidationError: If the action is not "approve" or "hide"
        """
        try:
            return ModerationAction(action)
        except ValueError:
            raise ValidationError('Invalid action. Must be "approve" or "hide"')

    @staticmethod
    def _require_post_author(post: Post, actor_id: UserId, verb: str) -> None:
        if post.author_id != actor_id:
            logfire.warn(
                "Moderation by non post author",
                post_id=str(post.id),
                actor_id=str(actor_id),
            )
            raise ForbiddenError(f"Must be post author to {verb}")

    async def moderate(
        self,
        post_id: PostId,
        comment_id: CommentId,
        actor_id: UserId,
        action: str,
    ) -> Comment:
        """Apply an approve or hide action to a comment.

        Raises:
            ValidationError: If the action is unknown
            NotFoundError: If the post or comment is missing
            ForbiddenError: If the actor is not the post's author or their
                account has been deactivated
        """
        moderation_action = self.parse_action(action)

        with logfire.span(
            "moderation_service.moderate",
            comment_id=str(comment_id),
            actor_id=str(actor_id),
            action=moderation_action.value,
        ):
            post = await self.post_service.get_post(post_id)
            await self.comment_service.get_comment_on_post(post_id, comment_id)
            await self.user_service.require_active_actor(actor_id)
            self._require_post_author(post, actor_id, "moderate comments")

            updated = await self.comment_repository.set_moderation_status(
                comment_id, moderation_action.resulting_status
            )
            if updated is None:
                raise NotFoundError("Comment not found")

            logfire.info(
                "Comment moderated",
                comment_id=str(comment_id),
                status=updated.moderation_status.value,
            )
            return updated

    async def hide(
        self, post_id: PostId, comment_id: CommentId, actor_id: UserId
    ) -> Comment:
        return await self.moderate(
            post_id, comment_id, actor_id, ModerationAction.HIDE.value
        )

    async def approve(
        self, post_id: PostId, comment_id: CommentId, actor_id: UserId
    ) -> Comment:
        return await self.moderate(
            post_id, comment_id, actor_id, ModerationAction.APPROVE.value
        )

    async def moderation_queue(
        self,
        post_id: PostId,
        actor_id: UserId,
        status: ModerationStatus | None = None,
    ) -> list[ModerationQueueItem]:
        """Comments of a post with their reports, for the post's author.

        Args:
            post_id: Post ID
            actor_id: Requesting user; must be the post author
            status: Only include comments with this moderation status

        Raises:
            NotFoundError: If the post is missing
            ForbiddenError: If the actor is not the post's author
        """
        with logfire.span(
            "moderation_service.moderation_queue",
            post_id=str(post_id),
            status=status.value if status else None,
        ):
            post = await self.post_service.get_post(post_id)
            self._require_post_author(post, actor_id, "view the moderation queue")

            comments = await self.comment_repository.find_by_post(post_id, status)
            if not comments:
                return []

            reports = await self.report_repository.find_by_comments(
                [c.id for c in comments]
            )
            users = await self.user_service.get_users(
                [c.author_id for c in comments] + [r.reporter_id for r in reports]
            )

            reports_by_comment: dict[CommentId, list[QueuedReport]] = defaultdict(list)
            for report in reports:
                reporter = users.get(report.reporter_id)
                reports_by_comment[report.comment_id].append(
                    QueuedReport(
                        id=report.id,
                        reporter_id=report.reporter_id,
                        reporter_username=reporter.username if reporter else None,
                        reason=report.reason,
                        status=report.status,
                        created_at=report.created_at,
                    )
                )

            queue = []
            for comment in comments:
                author = users.get(comment.author_id)
                queue.append(
                    ModerationQueueItem(
                        comment=comment,
                        author_username=author.username if author else None,
                        reports=reports_by_comment[comment.id],
                    )
                )

            logfire.info(
                "Moderation queue loaded",
                post_id=str(post_id),
                comments=len(queue),
                reports=len(reports),
            )
            return queue
