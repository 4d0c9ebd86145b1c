"""PostgreSQL implementation of Notification repository."""

from typing import List, Optional, Sequence

from sqlalchemy import and_, delete, desc, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from blog.domain.model import Notification
from blog.domain.repository import NotificationRepository
from blog.domain.value import NotificationId, UserId
from blog.persistence.mappers import notification_to_dict, row_to_notification
from blog.persistence.tables import notifications_table


class PostgresNotificationRepository(NotificationRepository):
    """PostgreSQL implementation of NotificationRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, notification_id: NotificationId) -> Optional[Notification]:
        """Find a notification by ID."""
        stmt = select(notifications_table).where(
            notifications_table.c.id == notification_id
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_notification(row._asdict()) if row else None

    async def save_many(
        self, notifications: Sequence[Notification]
    ) -> List[Notification]:
        """Insert several notifications in one statement."""
        if not notifications:
            return []
        stmt = insert(notifications_table).values(
            [notification_to_dict(n) for n in notifications]
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return list(notifications)

    async def find_by_recipient(
        self,
        recipient_id: UserId,
        limit: int,
        offset: int,
        unread_only: bool = False,
    ) -> List[Notification]:
        """Find a user's notifications, newest first."""
        stmt = select(notifications_table).where(
            notifications_table.c.recipient_id == recipient_id
        )
        if unread_only:
            stmt = stmt.where(notifications_table.c.read.is_(False))

        stmt = (
            stmt.order_by(desc(notifications_table.c.created_at))
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_notification(row._asdict()) for row in result.fetchall()]

    async def count_by_recipient(
        self, recipient_id: UserId, unread_only: bool = False
    ) -> int:
        """Count a user's notifications."""
        stmt = (
            select(func.count())
            .select_from(notifications_table)
            .where(notifications_table.c.recipient_id == recipient_id)
        )
        if unread_only:
            stmt = stmt.where(notifications_table.c.read.is_(False))
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def mark_read(self, notification_id: NotificationId) -> Optional[Notification]:
        """Set the read flag on one notification."""
        stmt = (
            update(notifications_table)
            .where(notifications_table.c.id == notification_id)
            .values(read=True)
            .returning(notifications_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()

        if row is None:
            return None

        await self.session.flush()
        return row_to_notification(row._asdict())

    async def mark_all_read(self, recipient_id: UserId) -> int:
        """Set the read flag on all of a user's unread notifications."""
        stmt = (
            update(notifications_table)
            .where(
                and_(
                    notifications_table.c.recipient_id == recipient_id,
                    notifications_table.c.read.is_(False),
                )
            )
            .values(read=True)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount  # type: ignore[attr-defined]

    async def delete(self, notification_id: NotificationId) -> bool:
        """Delete one notification."""
        stmt = delete(notifications_table).where(
            notifications_table.c.id == notification_id
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def delete_read(self, recipient_id: UserId) -> int:
        """Delete all of a user's read notifications."""
        stmt = delete(notifications_table).where(
            and_(
                notifications_table.c.recipient_id == recipient_id,
                notifications_table.c.read.is_(True),
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount  # type: ignore[attr-defined]
