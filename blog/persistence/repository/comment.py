"""PostgreSQL implementation of Comment repository."""

from datetime import datetime
from typing import List, Optional, Sequence

from sqlalchemy import asc, desc, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from blog.domain.model import Comment
from blog.domain.repository import CommentRepository
from blog.domain.value import CommentId, ModerationStatus, PostId
from blog.persistence.mappers import comment_to_dict, row_to_comment
from blog.persistence.tables import comments_table, posts_table, users_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_by_ids(
        self, comment_ids: Sequence[CommentId]
    ) -> dict[CommentId, Comment]:
        """Find several comments in one query."""
        if not comment_ids:
            return {}
        stmt = select(comments_table).where(
            comments_table.c.id.in_(list(set(comment_ids)))
        )
        result = await self.session.execute(stmt)
        comments = [row_to_comment(row._asdict()) for row in result.fetchall()]
        return {comment.id: comment for comment in comments}

    async def find_top_level(
        self, post_id: PostId, newest_first: bool = True
    ) -> List[Comment]:
        """Find the live top-level comments of a post."""
        order = desc if newest_first else asc
        stmt = (
            select(comments_table)
            .where(comments_table.c.post_id == post_id)
            .where(comments_table.c.parent_id.is_(None))
            .where(comments_table.c.deleted_at.is_(None))
            .order_by(order(comments_table.c.created_at), order(comments_table.c.id))
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def find_children_of(self, parent_ids: Sequence[CommentId]) -> List[Comment]:
        """Find the live direct replies of several comments, oldest first."""
        if not parent_ids:
            return []
        stmt = (
            select(comments_table)
            .where(comments_table.c.parent_id.in_(list(set(parent_ids))))
            .where(comments_table.c.deleted_at.is_(None))
            .order_by(comments_table.c.created_at, comments_table.c.id)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def find_by_post(
        self,
        post_id: PostId,
        status: Optional[ModerationStatus] = None,
    ) -> List[Comment]:
        """Find every live comment of a post, newest first."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.post_id == post_id)
            .where(comments_table.c.deleted_at.is_(None))
        )
        if status is not None:
            stmt = stmt.where(comments_table.c.moderation_status == status.value)

        stmt = stmt.order_by(desc(comments_table.c.created_at))

        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def find_recent_top_level(
        self, limit: int, offset: int
    ) -> tuple[List[Comment], int]:
        """Find recent top-level comments across published posts."""
        joined = comments_table.join(
            posts_table, posts_table.c.id == comments_table.c.post_id
        ).join(users_table, users_table.c.id == comments_table.c.author_id)
        conditions = (
            comments_table.c.parent_id.is_(None),
            comments_table.c.deleted_at.is_(None),
            posts_table.c.published.is_(True),
            posts_table.c.deleted_at.is_(None),
            users_table.c.deleted_at.is_(None),
        )

        stmt = (
            select(comments_table)
            .select_from(joined)
            .where(*conditions)
            .order_by(desc(comments_table.c.created_at))
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        comments = [row_to_comment(row._asdict()) for row in result.fetchall()]

        count_stmt = select(func.count()).select_from(joined).where(*conditions)
        total = (await self.session.execute(count_stmt)).scalar() or 0

        return comments, total

    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update)."""
        existing = await self.find_by_id(comment.id)
        comment_dict = comment_to_dict(comment)

        if existing:
            stmt = (
                comments_table.update()
                .where(comments_table.c.id == comment.id)
                .values(**comment_dict)
            )
        else:
            stmt = comments_table.insert().values(**comment_dict)

        await self.session.execute(stmt)
        await self.session.flush()
        return comment

    async def update_text(self, comment_id: CommentId, text: str) -> Optional[Comment]:
        """Update the text content of a comment."""
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .where(comments_table.c.deleted_at.is_(None))
            .values(text=text, updated_at=datetime.now())
            .returning(comments_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()

        if row is None:
            return None

        await self.session.flush()
        return row_to_comment(row._asdict())

    async def set_moderation_status(
        self, comment_id: CommentId, status: ModerationStatus
    ) -> Optional[Comment]:
        """Set the moderation status of a live comment."""
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .where(comments_table.c.deleted_at.is_(None))
            .values(moderation_status=status.value, updated_at=datetime.now())
            .returning(comments_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()

        if row is None:
            return None

        await self.session.flush()
        return row_to_comment(row._asdict())

    async def soft_delete_many(
        self, comment_ids: Sequence[CommentId], deleted_at: datetime
    ) -> list[CommentId]:
        """Mark live comments as deleted and return the ids actually marked."""
        if not comment_ids:
            return []
        stmt = (
            update(comments_table)
            .where(comments_table.c.id.in_(list(set(comment_ids))))
            .where(comments_table.c.deleted_at.is_(None))
            .values(deleted_at=deleted_at, updated_at=deleted_at)
            .returning(comments_table.c.id)
        )
        result = await self.session.execute(stmt)
        marked = [CommentId(row.id) for row in result]
        await self.session.flush()
        return marked

    async def count_by_post(self, post_id: PostId) -> int:
        """Count comments for a post (excluding deleted)."""
        stmt = (
            select(func.count())
            .select_from(comments_table)
            .where(comments_table.c.post_id == post_id)
            .where(comments_table.c.deleted_at.is_(None))
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0
