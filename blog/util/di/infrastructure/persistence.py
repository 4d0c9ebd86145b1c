"""Persistence providers: engine, request session and Postgres repositories."""

from collections.abc import AsyncIterator

import logfire
from dishka import Scope, provide
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from blog.config import Settings
from blog.domain.repository import (
    CommentLikeRepository,
    CommentReportRepository,
    CommentRepository,
    CommenterStatsRepository,
    CommentSubscriptionRepository,
    NotificationRepository,
    PostRepository,
    UserRepository,
)
from blog.persistence.database import create_engine, create_session_factory
from blog.persistence.repository import (
    PostgresCommentLikeRepository,
    PostgresCommentReportRepository,
    PostgresCommentRepository,
    PostgresCommenterStatsRepository,
    PostgresCommentSubscriptionRepository,
    PostgresNotificationRepository,
    PostgresPostRepository,
    PostgresUserRepository,
)
from blog.util.di.base import ProviderBase
from blog.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """PostgreSQL-backed repositories sharing one session per request."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Yield the request's session.

        A comment, its stats bump and its notifications commit together when
        the request finishes, or are rolled back together if it raised.
        """
        async with session_factory() as session:
            try:
                yield session
            except Exception as e:
                await session.rollback()
                logfire.warn("Request transaction rolled back", error=type(e).__name__)
                raise
            else:
                await session.commit()

    users = provide(
        PostgresUserRepository, provides=UserRepository, scope=Scope.REQUEST
    )
    posts = provide(
        PostgresPostRepository, provides=PostRepository, scope=Scope.REQUEST
    )
    comments = provide(
        PostgresCommentRepository, provides=CommentRepository, scope=Scope.REQUEST
    )
    comment_likes = provide(
        PostgresCommentLikeRepository,
        provides=CommentLikeRepository,
        scope=Scope.REQUEST,
    )
    comment_reports = provide(
        PostgresCommentReportRepository,
        provides=CommentReportRepository,
        scope=Scope.REQUEST,
    )
    commenter_stats = provide(
        PostgresCommenterStatsRepository,
        provides=CommenterStatsRepository,
        scope=Scope.REQUEST,
    )
    subscriptions = provide(
        PostgresCommentSubscriptionRepository,
        provides=CommentSubscriptionRepository,
        scope=Scope.REQUEST,
    )
    notifications = provide(
        PostgresNotificationRepository,
        provides=NotificationRepository,
        scope=Scope.REQUEST,
    )
