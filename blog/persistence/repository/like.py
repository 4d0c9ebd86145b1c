"""PostgreSQL implementation of CommentLike repository."""

from typing import Optional, Sequence

from sqlalchemy import and_, delete, func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from blog.domain.model import CommentLike
from blog.domain.repository import CommentLikeRepository
from blog.domain.value import CommentId, UserId
from blog.persistence.mappers import comment_like_to_dict, row_to_comment_like
from blog.persistence.tables import comment_likes_table


class PostgresCommentLikeRepository(CommentLikeRepository):
    """PostgreSQL implementation of CommentLikeRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_user_and_comment(
        self, user_id: UserId, comment_id: CommentId
    ) -> Optional[CommentLike]:
        """Find a user's like on a comment."""
        stmt = select(comment_likes_table).where(
            and_(
                comment_likes_table.c.user_id == user_id,
                comment_likes_table.c.comment_id == comment_id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment_like(row._asdict()) if row else None

    async def save(self, like: CommentLike) -> CommentLike:
        """Insert a like.

        Runs inside a savepoint so a unique violation leaves the request
        transaction usable.
        """
        stmt = insert(comment_likes_table).values(**comment_like_to_dict(like))
        async with self.session.begin_nested():
            await self.session.execute(stmt)
        await self.session.flush()
        return like

    async def delete_by_user_and_comment(
        self, user_id: UserId, comment_id: CommentId
    ) -> bool:
        """Delete a user's like on a comment."""
        stmt = delete(comment_likes_table).where(
            and_(
                comment_likes_table.c.user_id == user_id,
                comment_likes_table.c.comment_id == comment_id,
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def count_by_comment(self, comment_id: CommentId) -> int:
        """Count likes on one comment."""
        stmt = (
            select(func.count())
            .select_from(comment_likes_table)
            .where(comment_likes_table.c.comment_id == comment_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def count_by_comments(
        self, comment_ids: Sequence[CommentId]
    ) -> dict[CommentId, int]:
        """Count likes on several comments (batch query)."""
        if not comment_ids:
            return {}
        stmt = (
            select(comment_likes_table.c.comment_id, func.count())
            .where(comment_likes_table.c.comment_id.in_(list(set(comment_ids))))
            .group_by(comment_likes_table.c.comment_id)
        )
        result = await self.session.execute(stmt)
        return {CommentId(row[0]): row[1] for row in result.fetchall()}

    async def find_liked_comment_ids(
        self, user_id: UserId, comment_ids: Sequence[CommentId]
    ) -> set[CommentId]:
        """Find which of the given comments a user has liked."""
        if not comment_ids:
            return set()
        stmt = select(comment_likes_table.c.comment_id).where(
            and_(
                comment_likes_table.c.user_id == user_id,
                comment_likes_table.c.comment_id.in_(list(set(comment_ids))),
            )
        )
        result = await self.session.execute(stmt)
        return {CommentId(row[0]) for row in result.fetchall()}
