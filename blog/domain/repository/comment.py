"""Comment repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional, Sequence

from blog.domain.model.comment import Comment
from blog.domain.value import CommentId, ModerationStatus, PostId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found (soft-deleted included), None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(
        self, comment_ids: Sequence[CommentId]
    ) -> dict[CommentId, Comment]:
        """Find several comments (soft-deleted included) in one query."""
        pass

    @abstractmethod
    async def find_top_level(
        self, post_id: PostId, newest_first: bool = True
    ) -> List[Comment]:
        """Find the non-deleted top-level comments of a post.

        Args:
            post_id: The post ID
            newest_first: Order by creation time descending when True

        Returns:
            Top-level comments in the requested order
        """
        pass

    @abstractmethod
    async def find_children_of(
        self, parent_ids: Sequence[CommentId]
    ) -> List[Comment]:
        """Find the non-deleted direct children of several comments.

        Issued once per tree level, so a whole thread loads in one round trip
        per depth.

        Args:
            parent_ids: Parent comment IDs

        Returns:
            Child comments ordered oldest first
        """
        pass

    @abstractmethod
    async def find_by_post(
        self,
        post_id: PostId,
        status: Optional[ModerationStatus] = None,
    ) -> List[Comment]:
        """Find every non-deleted comment of a post, newest first.

        Args:
            post_id: The post ID
            status: Only return comments with this moderation status

        Returns:
            List of comments
        """
        pass

    @abstractmethod
    async def find_recent_top_level(
        self, limit: int, offset: int
    ) -> tuple[List[Comment], int]:
        """Find recent top-level comments across all posts.

        Only comments on published, non-deleted posts by active authors are
        considered.

        Args:
            limit: Maximum number of comments to return
            offset: Number of comments to skip

        Returns:
            Page of comments (newest first) and the total number of matches
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update).

        Args:
            comment: The comment to save

        Returns:
            The saved comment
        """
        pass

    @abstractmethod
    async def update_text(self, comment_id: CommentId, text: str) -> Optional[Comment]:
        """Replace the text of a non-deleted comment.

        Returns:
            Updated comment, or None if absent or deleted
        """
        pass

    @abstractmethod
    async def set_moderation_status(
        self, comment_id: CommentId, status: ModerationStatus
    ) -> Optional[Comment]:
        """Set the moderation status of a non-deleted comment.

        Returns:
            Updated comment, or None if absent or deleted
        """
        pass

    @abstractmethod
    async def soft_delete_many(
        self, comment_ids: Sequence[CommentId], deleted_at: datetime
    ) -> list[CommentId]:
        """Mark comments as deleted.

        Already deleted comments are left untouched.

        Returns:
            Ids of the comments this call marked
        """
        pass

    @abstractmethod
    async def count_by_post(self, post_id: PostId) -> int:
        """Count non-deleted comments for a post."""
        pass
