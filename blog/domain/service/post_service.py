"""Post domain service."""

from typing import Iterable

import logfire

from blog.domain.error import NotFoundError
from blog.domain.model import Post
from blog.domain.repository import PostRepository
from blog.domain.value import PostId

from .base import Service


class PostService(Service):
    """Read-side access to posts for the comment subsystem."""

    def __init__(self, post_repository: PostRepository) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
        """
        self.post_repository = post_repository

    async def get_post_by_id(self, post_id: PostId) -> Post | None:
        """Get a post by ID, None if missing or soft-deleted."""
        post = await self.post_repository.find_by_id(post_id)
        if post is None or post.is_deleted:
            return None
        return post

    async def get_post(self, post_id: PostId) -> Post:
        """Get a live post or fail.

        Raises:
            NotFoundError: If the post does not exist or is deleted
        """
        post = await self.get_post_by_id(post_id)
        if post is None:
            logfire.warn("Post not found", post_id=str(post_id))
            raise NotFoundError("Post not found")
        return post

    async def get_posts(self, post_ids: Iterable[PostId]) -> dict[PostId, Post]:
        """Batch load live posts."""
        unique_ids = list(dict.fromkeys(post_ids))
        if not unique_ids:
            return {}
        posts = await self.post_repository.find_by_ids(unique_ids)
        return {pid: post for pid, post in posts.items() if not post.is_deleted}
