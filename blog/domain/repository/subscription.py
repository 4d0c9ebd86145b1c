"""Comment subscription repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from blog.domain.model.subscription import CommentSubscription
from blog.domain.value import CommentId, UserId


class CommentSubscriptionRepository(ABC):
    """Repository for CommentSubscription entity."""

    @abstractmethod
    async def find(
        self, user_id: UserId, comment_id: CommentId
    ) -> Optional[CommentSubscription]:
        """Find a user's subscription to a comment thread."""
        pass

    @abstractmethod
    async def save(self, subscription: CommentSubscription) -> CommentSubscription:
        """Save a subscription (create).

        Raises:
            IntegrityError: If the user is already subscribed
        """
        pass

    @abstractmethod
    async def delete(self, user_id: UserId, comment_id: CommentId) -> bool:
        """Delete a subscription.

        Returns:
            True if a subscription was deleted, False if none existed
        """
        pass

    @abstractmethod
    async def find_subscriber_ids(
        self, comment_ids: Sequence[CommentId]
    ) -> set[UserId]:
        """Find users subscribed to any of the given comments."""
        pass
