"""Post repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from blog.domain.model.post import Post
from blog.domain.value import PostId


class PostRepository(ABC):
    """Read access to the post collaborator."""

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID, including soft-deleted posts."""
        pass

    @abstractmethod
    async def find_by_ids(self, post_ids: Sequence[PostId]) -> dict[PostId, Post]:
        """Find several posts in one query."""
        pass

    @abstractmethod
    async def save(self, post: Post) -> Post:
        """Save a post (create or update)."""
        pass
