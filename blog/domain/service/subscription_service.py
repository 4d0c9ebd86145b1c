"""Comment subscription domain service."""

from datetime import datetime
from typing import Iterable
from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from blog.domain.error import ConflictError, NotFoundError
from blog.domain.model import Comment, CommentSubscription
from blog.domain.repository import CommentRepository, CommentSubscriptionRepository
from blog.domain.value import CommentId, PostId, SubscriptionId, UserId

from .base import Service
from .post_service import PostService
from .user_service import UserService


class SubscriptionService(Service):
    """Registry of users following activity under a comment."""

    def __init__(
        self,
        subscription_repository: CommentSubscriptionRepository,
        comment_repository: CommentRepository,
        post_service: PostService,
        user_service: UserService,
    ) -> None:
        """Initialize subscription service.

        Args:
            subscription_repository: Subscription repository
            comment_repository: Comment repository
            post_service: Post domain service
            user_service: User domain service
        """
        self.subscription_repository = subscription_repository
        self.comment_repository = comment_repository
        self.post_service = post_service
        self.user_service = user_service

    async def _get_thread_comment(
        self, post_id: PostId, comment_id: CommentId
    ) -> Comment:
        await self.post_service.get_post(post_id)

        comment = await self.comment_repository.find_by_id(comment_id)
        if comment is None or comment.is_deleted:
            raise NotFoundError("Comment not found")
        if comment.post_id != post_id:
            logfire.warn(
                "Subscription comment does not belong to post",
                comment_id=str(comment_id),
                post_id=str(post_id),
            )
            raise NotFoundError("Comment does not belong to this post")
        return comment

    async def subscribe(
        self, user_id: UserId, post_id: PostId, comment_id: CommentId
    ) -> CommentSubscription:
        """Subscribe a user to a comment thread.

        Raises:
            NotFoundError: If the post or comment is missing or mismatched
            ForbiddenError: If the account has been deactivated
            ConflictError: If the user is already subscribed
        """
        with logfire.span(
            "subscription_service.subscribe",
            user_id=str(user_id),
            comment_id=str(comment_id),
        ):
            await self._get_thread_comment(post_id, comment_id)
            await self.user_service.require_active_actor(user_id)

            if await self.subscription_repository.find(user_id, comment_id):
                raise ConflictError("You are already subscribed to this comment thread")

            subscription = CommentSubscription(
                id=SubscriptionId(uuid4()),
                user_id=user_id,
                comment_id=comment_id,
                created_at=datetime.now(),
            )
            try:
                saved = await self.subscription_repository.save(subscription)
            except IntegrityError:
                logfire.warn(
                    "Duplicate subscription attempt",
                    user_id=str(user_id),
                    comment_id=str(comment_id),
                )
                raise ConflictError("You are already subscribed to this comment thread")

            logfire.info(
                "Subscribed to comment thread",
                user_id=str(user_id),
                comment_id=str(comment_id),
            )
            return saved

    async def unsubscribe(
        self, user_id: UserId, post_id: PostId, comment_id: CommentId
    ) -> None:
        """Remove a user's subscription.

        Raises:
            NotFoundError: If the post or comment is missing or mismatched, or
                the user is not subscribed
        """
        with logfire.span(
            "subscription_service.unsubscribe",
            user_id=str(user_id),
            comment_id=str(comment_id),
        ):
            await self._get_thread_comment(post_id, comment_id)
            await self.user_service.require_active_actor(user_id)

            deleted = await self.subscription_repository.delete(user_id, comment_id)
            if not deleted:
                raise NotFoundError("You are not subscribed to this comment thread")

            logfire.info(
                "Unsubscribed from comment thread",
                user_id=str(user_id),
                comment_id=str(comment_id),
            )

    async def is_subscribed(self, user_id: UserId, comment_id: CommentId) -> bool:
        return await self.subscription_repository.find(user_id, comment_id) is not None

    async def subscribers(self, comment_id: CommentId) -> set[UserId]:
        """Users subscribed to one comment."""
        return await self.subscription_repository.find_subscriber_ids([comment_id])

    async def subscribers_for_thread(
        self, comment_ids: Iterable[CommentId]
    ) -> set[UserId]:
        """Users subscribed to any comment of a reply chain."""
        return await self.subscription_repository.find_subscriber_ids(
            list(comment_ids)
        )
