"""In-memory comment like repository for testing."""

from typing import Optional, Sequence

from sqlalchemy.exc import IntegrityError

from blog.domain.model.like import CommentLike
from blog.domain.repository.like import CommentLikeRepository
from blog.domain.value import CommentId, UserId


class InMemoryCommentLikeRepository(CommentLikeRepository):
    """In-memory implementation of CommentLikeRepository for testing."""

    def __init__(self) -> None:
        self._likes: list[CommentLike] = []

    async def find_by_user_and_comment(
        self, user_id: UserId, comment_id: CommentId
    ) -> Optional[CommentLike]:
        for like in self._likes:
            if like.user_id == user_id and like.comment_id == comment_id:
                return like
        return None

    async def save(self, like: CommentLike) -> CommentLike:
        """Save a like.

        Raises:
            IntegrityError: If the user already liked the comment
        """
        if await self.find_by_user_and_comment(like.user_id, like.comment_id):
            raise IntegrityError("Duplicate comment like", None, Exception())

        self._likes.append(like)
        return like

    async def delete_by_user_and_comment(
        self, user_id: UserId, comment_id: CommentId
    ) -> bool:
        for i, like in enumerate(self._likes):
            if like.user_id == user_id and like.comment_id == comment_id:
                self._likes.pop(i)
                return True
        return False

    async def count_by_comment(self, comment_id: CommentId) -> int:
        return sum(1 for like in self._likes if like.comment_id == comment_id)

    async def count_by_comments(
        self, comment_ids: Sequence[CommentId]
    ) -> dict[CommentId, int]:
        wanted = set(comment_ids)
        counts: dict[CommentId, int] = {}
        for like in self._likes:
            if like.comment_id in wanted:
                counts[like.comment_id] = counts.get(like.comment_id, 0) + 1
        return counts

    async def find_liked_comment_ids(
        self, user_id: UserId, comment_ids: Sequence[CommentId]
    ) -> set[CommentId]:
        wanted = set(comment_ids)
        return {
            like.comment_id
            for like in self._likes
            if like.user_id == user_id and like.comment_id in wanted
        }
