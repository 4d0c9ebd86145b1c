"""In-memory post repository for testing."""

from typing import Optional, Sequence

from blog.domain.model.post import Post
from blog.domain.repository.post import PostRepository
from blog.domain.value import PostId


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing."""

    def __init__(self) -> None:
        self._posts: dict[PostId, Post] = {}

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        return self._posts.get(post_id)

    async def find_by_ids(self, post_ids: Sequence[PostId]) -> dict[PostId, Post]:
        return {pid: self._posts[pid] for pid in post_ids if pid in self._posts}

    async def save(self, post: Post) -> Post:
        self._posts[post.id] = post
        return post
