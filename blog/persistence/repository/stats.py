"""PostgreSQL implementation of CommenterStats repository."""

from datetime import datetime
from typing import List, Optional, Sequence

from sqlalchemy import and_, delete, desc, select, tuple_, update
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.ext.asyncio import AsyncSession

from blog.domain.model import CommenterStats
from blog.domain.repository import CommenterStatsRepository
from blog.domain.value import UserId
from blog.persistence.mappers import row_to_commenter_stats
from blog.persistence.tables import commenter_stats_table


class PostgresCommenterStatsRepository(CommenterStatsRepository):
    """PostgreSQL implementation of CommenterStatsRepository.

    Counts are changed with single upsert/update statements, never with a
    read followed by a write.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    def _pair(self, post_author_id: UserId, commenter_id: UserId):
        return and_(
            commenter_stats_table.c.post_author_id == post_author_id,
            commenter_stats_table.c.commenter_id == commenter_id,
        )

    async def find(
        self, post_author_id: UserId, commenter_id: UserId
    ) -> Optional[CommenterStats]:
        """Find the stats row for one pair."""
        stmt = select(commenter_stats_table).where(
            self._pair(post_author_id, commenter_id)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_commenter_stats(row._asdict()) if row else None

    async def increment(
        self, post_author_id: UserId, commenter_id: UserId, commented_at: datetime
    ) -> CommenterStats:
        """Upsert the pair, adding 1 to an existing count."""
        stmt = pg_insert(commenter_stats_table).values(
            post_author_id=post_author_id,
            commenter_id=commenter_id,
            comment_count=1,
            last_comment_at=commented_at,
        )
        stmt = stmt.on_conflict_do_update(
            index_elements=[
                commenter_stats_table.c.post_author_id,
                commenter_stats_table.c.commenter_id,
            ],
            set_={
                "comment_count": commenter_stats_table.c.comment_count + 1,
                "last_comment_at": stmt.excluded.last_comment_at,
            },
        ).returning(commenter_stats_table)

        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_commenter_stats(row._asdict())  # type: ignore[union-attr]

    async def decrement(
        self, post_author_id: UserId, commenter_id: UserId
    ) -> Optional[CommenterStats]:
        """Subtract 1 from the pair, removing the row at its last comment."""
        stmt = (
            update(commenter_stats_table)
            .where(self._pair(post_author_id, commenter_id))
            .where(commenter_stats_table.c.comment_count > 1)
            .values(comment_count=commenter_stats_table.c.comment_count - 1)
            .returning(commenter_stats_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()

        if row is None:
            await self.session.execute(
                delete(commenter_stats_table)
                .where(self._pair(post_author_id, commenter_id))
                .where(commenter_stats_table.c.comment_count <= 1)
            )

        await self.session.flush()
        return row_to_commenter_stats(row._asdict()) if row else None

    async def find_for_pairs(
        self, pairs: Sequence[tuple[UserId, UserId]]
    ) -> dict[tuple[UserId, UserId], CommenterStats]:
        """Find stats rows for several pairs (batch query)."""
        if not pairs:
            return {}
        stmt = select(commenter_stats_table).where(
            tuple_(
                commenter_stats_table.c.post_author_id,
                commenter_stats_table.c.commenter_id,
            ).in_(list(set(pairs)))
        )
        result = await self.session.execute(stmt)
        rows = [row_to_commenter_stats(row._asdict()) for row in result.fetchall()]
        return {(stats.post_author_id, stats.commenter_id): stats for stats in rows}

    async def find_top(
        self, post_author_id: UserId, min_count: int, limit: int
    ) -> List[CommenterStats]:
        """Find an author's most frequent commenters."""
        stmt = (
            select(commenter_stats_table)
            .where(commenter_stats_table.c.post_author_id == post_author_id)
            .where(commenter_stats_table.c.comment_count >= min_count)
            .order_by(
                desc(commenter_stats_table.c.comment_count),
                desc(commenter_stats_table.c.last_comment_at),
            )
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [row_to_commenter_stats(row._asdict()) for row in result.fetchall()]
