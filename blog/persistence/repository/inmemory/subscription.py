"""In-memory comment subscription repository for testing."""

from typing import Optional, Sequence

from sqlalchemy.exc import IntegrityError

from blog.domain.model.subscription import CommentSubscription
from blog.domain.repository.subscription import CommentSubscriptionRepository
from blog.domain.value import CommentId, UserId


class InMemoryCommentSubscriptionRepository(CommentSubscriptionRepository):
    """In-memory implementation of CommentSubscriptionRepository for testing."""

    def __init__(self) -> None:
        self._subscriptions: list[CommentSubscription] = []

    async def find(
        self, user_id: UserId, comment_id: CommentId
    ) -> Optional[CommentSubscription]:
        for subscription in self._subscriptions:
            if subscription.user_id == user_id and subscription.comment_id == comment_id:
                return subscription
        return None

    async def save(self, subscription: CommentSubscription) -> CommentSubscription:
        """Save a subscription.

        Raises:
            IntegrityError: If the user is already subscribed to the comment
        """
        if await self.find(subscription.user_id, subscription.comment_id):
            raise IntegrityError("Duplicate comment subscription", None, Exception())

        self._subscriptions.append(subscription)
        return subscription

    async def delete(self, user_id: UserId, comment_id: CommentId) -> bool:
        for i, subscription in enumerate(self._subscriptions):
            if subscription.user_id == user_id and subscription.comment_id == comment_id:
                self._subscriptions.pop(i)
                return True
        return False

    async def find_subscriber_ids(
        self, comment_ids: Sequence[CommentId]
    ) -> set[UserId]:
        wanted = set(comment_ids)
        return {s.user_id for s in self._subscriptions if s.comment_id in wanted}
