"""Comment like repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from blog.domain.model.like import CommentLike
from blog.domain.value import CommentId, UserId


class CommentLikeRepository(ABC):
    """Repository for CommentLike entity."""

    @abstractmethod
    async def find_by_user_and_comment(
        self, user_id: UserId, comment_id: CommentId
    ) -> Optional[CommentLike]:
        """Find a user's like on a comment."""
        pass

    @abstractmethod
    async def save(self, like: CommentLike) -> CommentLike:
        """Save a like (create).

        Raises:
            IntegrityError: If the user already liked the comment
        """
        pass

    @abstractmethod
    async def delete_by_user_and_comment(
        self, user_id: UserId, comment_id: CommentId
    ) -> bool:
        """Delete a user's like.

        Returns:
            True if a like was deleted, False if none existed
        """
        pass

    @abstractmethod
    async def count_by_comment(self, comment_id: CommentId) -> int:
        """Count likes on one comment."""
        pass

    @abstractmethod
    async def count_by_comments(
        self, comment_ids: Sequence[CommentId]
    ) -> dict[CommentId, int]:
        """Count likes on several comments with one grouped query.

        Comments without likes are absent from the result.
        """
        pass

    @abstractmethod
    async def find_liked_comment_ids(
        self, user_id: UserId, comment_ids: Sequence[CommentId]
    ) -> set[CommentId]:
        """Return the subset of comment_ids the user has liked."""
        pass
