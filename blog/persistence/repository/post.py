"""PostgreSQL implementation of Post repository."""

from typing import Optional, Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from blog.domain.model import Post
from blog.domain.repository import PostRepository
from blog.domain.value import PostId
from blog.persistence.mappers import post_to_dict, row_to_post
from blog.persistence.tables import posts_table


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        stmt = select(posts_table).where(posts_table.c.id == post_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_post(row._asdict()) if row else None

    async def find_by_ids(self, post_ids: Sequence[PostId]) -> dict[PostId, Post]:
        """Find several posts in one query."""
        if not post_ids:
            return {}
        stmt = select(posts_table).where(posts_table.c.id.in_(list(set(post_ids))))
        result = await self.session.execute(stmt)
        posts = [row_to_post(row._asdict()) for row in result.fetchall()]
        return {post.id: post for post in posts}

    async def save(self, post: Post) -> Post:
        """Save a post (create or update)."""
        existing = await self.find_by_id(post.id)
        post_dict = post_to_dict(post)

        if existing:
            stmt = (
                posts_table.update()
                .where(posts_table.c.id == post.id)
                .values(**post_dict)
            )
        else:
            stmt = posts_table.insert().values(**post_dict)

        await self.session.execute(stmt)
        await self.session.flush()
        return post
