"""Comment like domain service."""

from datetime import datetime
from typing import Sequence
from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from blog.domain.error import ConflictError, ValidationError
from blog.domain.model import CommentLike
from blog.domain.repository import CommentLikeRepository
from blog.domain.value import (
    CommentId,
    CommentLikeId,
    NotificationType,
    PostId,
    UserId,
)

from .base import Service
from .comment_service import CommentService
from .notification_service import NotificationService, ThreadActivityEvent
from .post_service import PostService
from .user_service import UserService


class CommentLikeService(Service):
    """Domain service for liking comments."""

    def __init__(
        self,
        like_repository: CommentLikeRepository,
        post_service: PostService,
        comment_service: CommentService,
        user_service: UserService,
        notification_service: NotificationService,
    ) -> None:
        """Initialize like service.

        Args:
            like_repository: Comment like repository
            post_service: Post domain service
            comment_service: Comment domain service
            user_service: User domain service
            notification_service: Notification domain service
        """
        self.like_repository = like_repository
        self.post_service = post_service
        self.comment_service = comment_service
        self.user_service = user_service
        self.notification_service = notification_service

    async def like_comment(
        self, post_id: PostId, comment_id: CommentId, user_id: UserId
    ) -> int:
        """Like a comment and notify its author.

        Returns:
            Like count after the like

        Raises:
            NotFoundError: If the post or comment is missing
            ConflictError: If the user already liked the comment
        """
        with logfire.span(
            "like_service.like_comment",
            comment_id=str(comment_id),
            user_id=str(user_id),
        ):
            await self.post_service.get_post(post_id)
            comment = await self.comment_service.get_comment_on_post(
                post_id, comment_id
            )
            actor = await self.user_service.require_active_actor(user_id)

            if await self.like_repository.find_by_user_and_comment(user_id, comment_id):
                raise ConflictError("You have already liked this comment")

            like = CommentLike(
                id=CommentLikeId(uuid4()),
                user_id=user_id,
                comment_id=comment_id,
                created_at=datetime.now(),
            )
            try:
                await self.like_repository.save(like)
            except IntegrityError:
                logfire.warn(
                    "Duplicate like attempt",
                    user_id=str(user_id),
                    comment_id=str(comment_id),
                )
                raise ConflictError("You have already liked this comment")

            await self.notification_service.notify_thread_activity(
                ThreadActivityEvent(
                    type=NotificationType.COMMENT_LIKE,
                    actor_id=user_id,
                    message=f"{actor.username} liked your comment",
                    post_id=post_id,
                    comment_id=comment_id,
                    parent_author_id=comment.author_id,
                )
            )

            count = await self.like_repository.count_by_comment(comment_id)
            logfire.info("Comment liked", comment_id=str(comment_id), like_count=count)
            return count

    async def unlike_comment(
        self, post_id: PostId, comment_id: CommentId, user_id: UserId
    ) -> int:
        """Remove a like.

        Returns:
            Like count after the removal

        Raises:
            NotFoundError: If the post or comment is missing
            ValidationError: If the user had not liked the comment
        """
        with logfire.span(
            "like_service.unlike_comment",
            comment_id=str(comment_id),
            user_id=str(user_id),
        ):
            await self.post_service.get_post(post_id)
            await self.comment_service.get_comment_on_post(post_id, comment_id)
            await self.user_service.require_active_actor(user_id)

            deleted = await self.like_repository.delete_by_user_and_comment(
                user_id, comment_id
            )
            if not deleted:
                raise ValidationError("You have not liked this comment")

            count = await self.like_repository.count_by_comment(comment_id)
            logfire.info(
                "Comment unliked", comment_id=str(comment_id), like_count=count
            )
            return count

    async def like_counts(
        self, comment_ids: Sequence[CommentId]
    ) -> dict[CommentId, int]:
        """Like counts for many comments from a single grouped query."""
        if not comment_ids:
            return {}
        counts = await self.like_repository.count_by_comments(comment_ids)
        return {cid: counts.get(cid, 0) for cid in comment_ids}

    async def liked_by(
        self, user_id: UserId | None, comment_ids: Sequence[CommentId]
    ) -> set[CommentId]:
        """Which of the comments the user has liked."""
        if user_id is None or not comment_ids:
            return set()
        return await self.like_repository.find_liked_comment_ids(user_id, comment_ids)
