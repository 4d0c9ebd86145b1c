"""PostgreSQL implementation of CommentSubscription repository."""

from typing import Optional, Sequence

from sqlalchemy import and_, delete, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from blog.domain.model import CommentSubscription
from blog.domain.repository import CommentSubscriptionRepository
from blog.domain.value import CommentId, UserId
from blog.persistence.mappers import (
    comment_subscription_to_dict,
    row_to_comment_subscription,
)
from blog.persistence.tables import comment_subscriptions_table


class PostgresCommentSubscriptionRepository(CommentSubscriptionRepository):
    """PostgreSQL implementation of CommentSubscriptionRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find(
        self, user_id: UserId, comment_id: CommentId
    ) -> Optional[CommentSubscription]:
        """Find a user's subscription to a comment thread."""
        stmt = select(comment_subscriptions_table).where(
            and_(
                comment_subscriptions_table.c.user_id == user_id,
                comment_subscriptions_table.c.comment_id == comment_id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment_subscription(row._asdict()) if row else None

    async def save(self, subscription: CommentSubscription) -> CommentSubscription:
        """Insert a subscription inside a savepoint."""
        stmt = insert(comment_subscriptions_table).values(
            **comment_subscription_to_dict(subscription)
        )
        async with self.session.begin_nested():
            await self.session.execute(stmt)
        await self.session.flush()
        return subscription

    async def delete(self, user_id: UserId, comment_id: CommentId) -> bool:
        """Delete a user's subscription to a comment thread."""
        stmt = delete(comment_subscriptions_table).where(
            and_(
                comment_subscriptions_table.c.user_id == user_id,
                comment_subscriptions_table.c.comment_id == comment_id,
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def find_subscriber_ids(
        self, comment_ids: Sequence[CommentId]
    ) -> set[UserId]:
        """Find every user subscribed to any of the given comments."""
        if not comment_ids:
            return set()
        stmt = (
            select(comment_subscriptions_table.c.user_id)
            .where(comment_subscriptions_table.c.comment_id.in_(list(set(comment_ids))))
            .distinct()
        )
        result = await self.session.execute(stmt)
        return {UserId(row[0]) for row in result.fetchall()}
