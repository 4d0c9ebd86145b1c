"""Commenter statistics repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional, Sequence

from blog.domain.model.stats import CommenterStats
from blog.domain.value import UserId


class CommenterStatsRepository(ABC):
    """Repository for CommenterStats, keyed by (post_author_id, commenter_id).

    Increment and decrement must be atomic at the storage layer so that
    concurrent comment creation never loses an update.
    """

    @abstractmethod
    async def find(
        self, post_author_id: UserId, commenter_id: UserId
    ) -> Optional[CommenterStats]:
        """Find the stats row for one pair."""
        pass

    @abstractmethod
    async def increment(
        self, post_author_id: UserId, commenter_id: UserId, commented_at: datetime
    ) -> CommenterStats:
        """Create the row with a count of 1, or add 1 to an existing row.

        Args:
            post_author_id: Author of the commented post
            commenter_id: Author of the comment
            commented_at: Creation time of the comment

        Returns:
            The row after the upsert
        """
        pass

    @abstractmethod
    async def decrement(
        self, post_author_id: UserId, commenter_id: UserId
    ) -> Optional[CommenterStats]:
        """Subtract 1 from the row, deleting it when the count would reach 0.

        Returns:
            The row after the update, or None if it was deleted or never existed
        """
        pass

    @abstractmethod
    async def find_for_pairs(
        self, pairs: Sequence[tuple[UserId, UserId]]
    ) -> dict[tuple[UserId, UserId], CommenterStats]:
        """Find stats rows for several (post_author_id, commenter_id) pairs."""
        pass

    @abstractmethod
    async def find_top(
        self, post_author_id: UserId, min_count: int, limit: int
    ) -> List[CommenterStats]:
        """Find an author's most frequent commenters.

        Returns:
            Rows with at least min_count comments, highest count first
        """
        pass
