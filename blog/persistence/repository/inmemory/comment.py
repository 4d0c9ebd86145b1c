"""In-memory comment repository for testing."""

from datetime import datetime
from typing import Optional, Sequence

from blog.domain.model.comment import Comment
from blog.domain.repository.comment import CommentRepository
from blog.domain.repository.post import PostRepository
from blog.domain.repository.user import UserRepository
from blog.domain.value import CommentId, ModerationStatus, PostId


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing.

    Recent-comment queries join against posts and users, so the post and
    user repositories of the same request are passed in.
    """

    def __init__(
        self, post_repository: PostRepository, user_repository: UserRepository
    ) -> None:
        self._comments: dict[CommentId, Comment] = {}
        self.post_repository = post_repository
        self.user_repository = user_repository

    def _live(self) -> list[Comment]:
        return [c for c in self._comments.values() if c.deleted_at is None]

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_by_ids(
        self, comment_ids: Sequence[CommentId]
    ) -> dict[CommentId, Comment]:
        return {
            cid: self._comments[cid] for cid in comment_ids if cid in self._comments
        }

    async def find_top_level(
        self, post_id: PostId, newest_first: bool = True
    ) -> list[Comment]:
        """Find live top-level comments of a post."""
        comments = [
            c for c in self._live() if c.post_id == post_id and c.parent_id is None
        ]
        comments.sort(key=lambda c: c.created_at, reverse=newest_first)
        return comments

    async def find_children_of(self, parent_ids: Sequence[CommentId]) -> list[Comment]:
        """Find live direct replies of several comments, oldest first."""
        wanted = set(parent_ids)
        comments = [c for c in self._live() if c.parent_id in wanted]
        comments.sort(key=lambda c: c.created_at)
        return comments

    async def find_by_post(
        self,
        post_id: PostId,
        status: Optional[ModerationStatus] = None,
    ) -> list[Comment]:
        comments = [c for c in self._live() if c.post_id == post_id]
        if status is not None:
            comments = [c for c in comments if c.moderation_status == status]
        comments.sort(key=lambda c: c.created_at, reverse=True)
        return comments

    async def find_recent_top_level(
        self, limit: int, offset: int
    ) -> tuple[list[Comment], int]:
        """Find recent top-level comments on published posts by active authors."""
        candidates = [c for c in self._live() if c.parent_id is None]
        posts = await self.post_repository.find_by_ids(
            list({c.post_id for c in candidates})
        )
        users = await self.user_repository.find_by_ids(
            list({c.author_id for c in candidates})
        )

        matching = []
        for comment in candidates:
            post = posts.get(comment.post_id)
            author = users.get(comment.author_id)
            if post is None or not post.published or post.is_deleted:
                continue
            if author is None or author.is_deactivated:
                continue
            matching.append(comment)

        matching.sort(key=lambda c: c.created_at, reverse=True)
        return matching[offset : offset + limit], len(matching)

    async def save(self, comment: Comment) -> Comment:
        """Save or update a comment."""
        self._comments[comment.id] = comment
        return comment

    async def update_text(self, comment_id: CommentId, text: str) -> Optional[Comment]:
        comment = self._comments.get(comment_id)
        if comment is None or comment.is_deleted:
            return None
        updated = comment.model_copy(update={"text": text, "updated_at": datetime.now()})
        self._comments[comment_id] = updated
        return updated

    async def set_moderation_status(
        self, comment_id: CommentId, status: ModerationStatus
    ) -> Optional[Comment]:
        comment = self._comments.get(comment_id)
        if comment is None or comment.is_deleted:
            return None
        updated = comment.model_copy(
            update={"moderation_status": status, "updated_at": datetime.now()}
        )
        self._comments[comment_id] = updated
        return updated

    async def soft_delete_many(
        self, comment_ids: Sequence[CommentId], deleted_at: datetime
    ) -> list[CommentId]:
        """Mark comments as deleted, skipping ones already deleted."""
        marked: list[CommentId] = []
        for comment_id in set(comment_ids):
            comment = self._comments.get(comment_id)
            if comment is None or comment.is_deleted:
                continue
            self._comments[comment_id] = comment.model_copy(
                update={"deleted_at": deleted_at, "updated_at": deleted_at}
            )
            marked.append(comment_id)
        return marked

    async def count_by_post(self, post_id: PostId) -> int:
        """Count comments for a post (excluding deleted)."""
        return sum(1 for c in self._live() if c.post_id == post_id)
