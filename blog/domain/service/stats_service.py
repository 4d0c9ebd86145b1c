"""Commenter statistics domain service."""

from dataclasses import dataclass
from datetime import datetime
from typing import Iterable

import logfire

from blog.config import CommentSettings
from blog.domain.model import CommenterStats
from blog.domain.repository import CommenterStatsRepository
from blog.domain.value import UserId

from .base import Service


@dataclass
class TopCommenter:
    """Entry in an author's top commenter leaderboard."""

    commenter_id: UserId
    comment_count: int
    last_comment_at: datetime


class CommenterStatsService(Service):
    """Tracks how often each user comments on each author's posts.

    Counters move in the same unit of work as the comment mutation that
    caused them, so they never drift from the comments that exist.
    """

    def __init__(
        self,
        stats_repository: CommenterStatsRepository,
        comment_settings: CommentSettings,
    ) -> None:
        """Initialize commenter stats service.

        Args:
            stats_repository: Commenter stats repository
            comment_settings: Comment configuration (badge threshold)
        """
        self.stats_repository = stats_repository
        self.threshold = comment_settings.top_commenter_threshold

    async def on_comment_created(
        self,
        post_author_id: UserId,
        commenter_id: UserId,
        commented_at: datetime | None = None,
    ) -> CommenterStats | None:
        """Count a new comment. Self-comments are not tracked."""
        if post_author_id == commenter_id:
            return None

        with logfire.span(
            "commenter_stats.on_comment_created",
            post_author_id=str(post_author_id),
            commenter_id=str(commenter_id),
        ):
            stats = await self.stats_repository.increment(
                post_author_id, commenter_id, commented_at or datetime.now()
            )
            logfire.info(
                "Commenter stats incremented",
                post_author_id=str(post_author_id),
                commenter_id=str(commenter_id),
                comment_count=stats.comment_count,
            )
            return stats

    async def on_comment_deleted(
        self, post_author_id: UserId, commenter_id: UserId
    ) -> CommenterStats | None:
        """Uncount a deleted comment, dropping the row when it reaches zero."""
        if post_author_id == commenter_id:
            return None

        with logfire.span(
            "commenter_stats.on_comment_deleted",
            post_author_id=str(post_author_id),
            commenter_id=str(commenter_id),
        ):
            stats = await self.stats_repository.decrement(post_author_id, commenter_id)
            logfire.info(
                "Commenter stats decremented",
                post_author_id=str(post_author_id),
                commenter_id=str(commenter_id),
                removed=stats is None,
            )
            return stats

    async def is_top_commenter(
        self, commenter_id: UserId, post_author_id: UserId
    ) -> bool:
        """Whether commenter has earned the badge on this author's posts."""
        if commenter_id == post_author_id:
            return False
        stats = await self.stats_repository.find(post_author_id, commenter_id)
        return stats is not None and stats.comment_count >= self.threshold

    async def top_commenter_flags(
        self, pairs: Iterable[tuple[UserId, UserId]]
    ) -> dict[tuple[UserId, UserId], bool]:
        """Batch badge lookup for (post_author_id, commenter_id) pairs."""
        unique_pairs = [
            pair for pair in dict.fromkeys(pairs) if pair[0] != pair[1]
        ]
        found = (
            await self.stats_repository.find_for_pairs(unique_pairs)
            if unique_pairs
            else {}
        )
        return {
            pair: pair in found and found[pair].comment_count >= self.threshold
            for pair in unique_pairs
        }

    async def top_commenter_map(
        self, post_author_id: UserId, commenter_ids: Iterable[UserId]
    ) -> dict[UserId, bool]:
        """Batch badge lookup against a single post author."""
        flags = await self.top_commenter_flags(
            (post_author_id, commenter_id) for commenter_id in commenter_ids
        )
        return {commenter_id: flag for (_, commenter_id), flag in flags.items()}

    async def top_commenters(
        self, post_author_id: UserId, limit: int = 10
    ) -> list[TopCommenter]:
        """Leaderboard of an author's commenters who have the badge."""
        with logfire.span(
            "commenter_stats.top_commenters",
            post_author_id=str(post_author_id),
            limit=limit,
        ):
            rows = await self.stats_repository.find_top(
                post_author_id, min_count=self.threshold, limit=limit
            )
            return [
                TopCommenter(
                    commenter_id=row.commenter_id,
                    comment_count=row.comment_count,
                    last_comment_at=row.last_comment_at,
                )
                for row in rows
            ]
