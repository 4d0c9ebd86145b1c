"""In-memory commenter stats repository for testing."""

from datetime import datetime
from typing import Optional, Sequence

from blog.domain.model.stats import CommenterStats
from blog.domain.repository.stats import CommenterStatsRepository
from blog.domain.value import UserId


class InMemoryCommenterStatsRepository(CommenterStatsRepository):
    """In-memory implementation of CommenterStatsRepository for testing."""

    def __init__(self) -> None:
        self._stats: dict[tuple[UserId, UserId], CommenterStats] = {}

    async def find(
        self, post_author_id: UserId, commenter_id: UserId
    ) -> Optional[CommenterStats]:
        return self._stats.get((post_author_id, commenter_id))

    async def increment(
        self, post_author_id: UserId, commenter_id: UserId, commented_at: datetime
    ) -> CommenterStats:
        key = (post_author_id, commenter_id)
        current = self._stats.get(key)
        count = current.comment_count + 1 if current else 1
        stats = CommenterStats(
            post_author_id=post_author_id,
            commenter_id=commenter_id,
            comment_count=count,
            last_comment_at=commented_at,
        )
        self._stats[key] = stats
        return stats

    async def decrement(
        self, post_author_id: UserId, commenter_id: UserId
    ) -> Optional[CommenterStats]:
        key = (post_author_id, commenter_id)
        current = self._stats.get(key)
        if current is None:
            return None
        if current.comment_count <= 1:
            del self._stats[key]
            return None
        stats = current.model_copy(update={"comment_count": current.comment_count - 1})
        self._stats[key] = stats
        return stats

    async def find_for_pairs(
        self, pairs: Sequence[tuple[UserId, UserId]]
    ) -> dict[tuple[UserId, UserId], CommenterStats]:
        return {pair: self._stats[pair] for pair in pairs if pair in self._stats}

    async def find_top(
        self, post_author_id: UserId, min_count: int, limit: int
    ) -> list[CommenterStats]:
        rows = [
            s
            for s in self._stats.values()
            if s.post_author_id == post_author_id and s.comment_count >= min_count
        ]
        rows.sort(key=lambda s: (s.comment_count, s.last_comment_at), reverse=True)
        return rows[:limit]
