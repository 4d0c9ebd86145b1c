"""Comment domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from blog.config import CommentSettings
from blog.domain.error import ForbiddenError, NotFoundError, ValidationError
from blog.domain.model import Comment, Post
from blog.domain.repository import CommentRepository
from blog.domain.value import CommentId, NotificationType, PostId, UserId

from .base import Service
from .notification_service import NotificationService, ThreadActivityEvent
from .post_service import PostService
from .stats_service import CommenterStatsService
from .user_service import UserService


class CommentService(Service):
    """Domain service for the comment lifecycle.

    Creating or deleting a comment also moves commenter stats, and creating
    one fans out notifications. All of it happens in the caller's unit of
    work.
    """

    def __init__(
        self,
        comment_repository: CommentRepository,
        post_service: PostService,
        user_service: UserService,
        stats_service: CommenterStatsService,
        notification_service: NotificationService,
        comment_settings: CommentSettings,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            post_service: Post domain service
            user_service: User domain service
            stats_service: Commenter stats domain service
            notification_service: Notification domain service
            comment_settings: Comment configuration (depth limit)
        """
        self.comment_repository = comment_repository
        self.post_service = post_service
        self.user_service = user_service
        self.stats_service = stats_service
        self.notification_service = notification_service
        self.max_depth = comment_settings.max_depth

    async def get_comment_on_post(
        self, post_id: PostId, comment_id: CommentId
    ) -> Comment:
        """Get a live comment that belongs to the given post.

        Raises:
            NotFoundError: If missing, deleted or on another post
        """
        comment = await self.comment_repository.find_by_id(comment_id)
        if comment is None or comment.is_deleted or comment.post_id != post_id:
            logfire.warn(
                "Comment not found",
                comment_id=str(comment_id),
                post_id=str(post_id),
            )
            raise NotFoundError("Comment not found")
        return comment

    async def get_ancestor_ids(self, comment: Comment) -> list[CommentId]:
        """IDs from the comment itself up to its top-level ancestor."""
        chain = [comment.id]
        current = comment
        # Bounded by the depth limit
        while current.parent_id is not None:
            parent = await self.comment_repository.find_by_id(current.parent_id)
            if parent is None:
                break
            chain.append(parent.id)
            current = parent
        return chain

    async def create_comment(
        self,
        post_id: PostId,
        author_id: UserId,
        text: str,
        parent_id: CommentId | None = None,
    ) -> Comment:
        """Create a comment on a post or reply to another comment.

        Args:
            post_id: Post ID
            author_id: Author user ID
            text: Comment text
            parent_id: Parent comment ID for replies (None for top-level)

        Returns:
            Created comment

        Raises:
            NotFoundError: If the post, author or parent comment is missing
            ForbiddenError: If the post does not accept comments or the author
                is deactivated
            ValidationError: If the text is blank or the depth limit is hit
        """
        with logfire.span(
            "comment_service.create_comment",
            post_id=str(post_id),
            author_id=str(author_id),
            parent_id=str(parent_id) if parent_id else None,
        ):
            post = await self.post_service.get_post(post_id)
            if not post.allow_comments:
                logfire.warn("Comment on closed post", post_id=str(post_id))
                raise ForbiddenError("Comments are disabled for this post")

            author = await self.user_service.require_active_actor(author_id)

            content = text.strip()
            if not content:
                raise ValidationError("Comment content is required")

            parent: Comment | None = None
            depth = 0
            if parent_id:
                parent = await self.get_comment_on_post(post_id, parent_id)
                depth = parent.depth + 1
                if depth > self.max_depth:
                    logfire.warn(
                        "Maximum thread depth reached",
                        parent_id=str(parent_id),
                        depth=depth,
                    )
                    raise ValidationError(
                        f"Maximum thread depth of {self.max_depth} levels reached"
                    )

            now = datetime.now()
            comment = Comment(
                id=CommentId(uuid4()),
                post_id=post_id,
                author_id=author_id,
                text=content,
                parent_id=parent.id if parent else None,
                depth=depth,
                created_at=now,
                updated_at=now,
                deleted_at=None,
            )
            saved = await self.comment_repository.save(comment)

            await self.stats_service.on_comment_created(
                post.author_id, author_id, saved.created_at
            )
            await self._notify_created(post, saved, parent, author.username)

            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                post_id=str(post_id),
                depth=depth,
            )
            return saved

    async def _notify_created(
        self,
        post: Post,
        comment: Comment,
        parent: Comment | None,
        actor_username: str,
    ) -> None:
        if parent is None:
            event = ThreadActivityEvent(
                type=NotificationType.POST_COMMENT,
                actor_id=comment.author_id,
                message=f'{actor_username} commented on "{post.title}"',
                post_id=post.id,
                comment_id=comment.id,
                post_author_id=post.author_id,
                is_top_level=True,
            )
        else:
            event = ThreadActivityEvent(
                type=NotificationType.COMMENT_REPLY,
                actor_id=comment.author_id,
                message=f'{actor_username} replied to a comment on "{post.title}"',
                post_id=post.id,
                comment_id=comment.id,
                thread_comment_ids=await self.get_ancestor_ids(parent),
                parent_author_id=parent.author_id,
                post_author_id=post.author_id,
            )
        await self.notification_service.notify_thread_activity(event)

    async def update_comment(
        self,
        post_id: PostId,
        comment_id: CommentId,
        actor_id: UserId,
        text: str,
    ) -> Comment:
        """Edit the text of a comment. Only its author may do so.

        Raises:
            NotFoundError: If the post or comment is missing
            ForbiddenError: If the actor is not the comment's author
            ValidationError: If the new text is blank
        """
        with logfire.span(
            "comment_service.update_comment",
            comment_id=str(comment_id),
            actor_id=str(actor_id),
        ):
            await self.post_service.get_post(post_id)
            comment = await self.get_comment_on_post(post_id, comment_id)
            await self.user_service.require_active_actor(actor_id)

            if comment.author_id != actor_id:
                logfire.warn(
                    "Unauthorized comment edit attempt",
                    comment_id=str(comment_id),
                    actor_id=str(actor_id),
                )
                raise ForbiddenError("You can only edit your own comments")

            content = text.strip()
            if not content:
                raise ValidationError("Comment content is required")

            updated = await self.comment_repository.update_text(comment_id, content)
            if updated is None:
                raise NotFoundError("Comment not found")

            logfire.info(
                "Comment text updated",
                comment_id=str(comment_id),
                text_length=len(content),
            )
            return updated

    async def collect_subtree(self, root: Comment) -> list[Comment]:
        """The comment and all of its live descendants, level by level."""
        subtree = [root]
        level = [root]
        while level:
            level = await self.comment_repository.find_children_of(
                [c.id for c in level]
            )
            subtree.extend(level)
        return subtree

    async def delete_comment(
        self,
        post_id: PostId,
        comment_id: CommentId,
        actor_id: UserId,
    ) -> list[Comment]:
        """Soft-delete a comment together with its replies.

        Allowed for the comment's author and the post's author. Every removed
        comment is uncounted from its author's stats.

        Returns:
            The comments this call deleted, root first. Replies removed by a
            concurrent delete are left out.
        """
        with logfire.span(
            "comment_service.delete_comment",
            comment_id=str(comment_id),
            actor_id=str(actor_id),
        ):
            post = await self.post_service.get_post(post_id)
            comment = await self.get_comment_on_post(post_id, comment_id)
            await self.user_service.require_active_actor(actor_id)

            if actor_id not in (comment.author_id, post.author_id):
                logfire.warn(
                    "Unauthorized comment delete attempt",
                    comment_id=str(comment_id),
                    actor_id=str(actor_id),
                )
                raise ForbiddenError("You can only delete your own comments")

            subtree = await self.collect_subtree(comment)
            marked = set(
                await self.comment_repository.soft_delete_many(
                    [c.id for c in subtree], datetime.now()
                )
            )

            # A concurrent delete may already have taken part of the subtree
            removed = [c for c in subtree if c.id in marked]
            for gone in removed:
                await self.stats_service.on_comment_deleted(
                    post.author_id, gone.author_id
                )

            logfire.info(
                "Comment deleted",
                comment_id=str(comment_id),
                removed_count=len(removed),
                skipped_count=len(subtree) - len(removed),
            )
            return removed
