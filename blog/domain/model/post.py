"""Post entity (collaborator view)."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from blog.domain.model.common import DomainModel
from blog.domain.value import PostId, UserId


class Post(DomainModel):
    """Post as seen by the comment subsystem.

    Post CRUD lives elsewhere; comments only need the author, the publication
    state and whether the author allows comments.
    """

    id: PostId
    title: str = Field(min_length=1, max_length=300)
    slug: str = Field(min_length=1, max_length=200)
    author_id: UserId
    published: bool = True
    allow_comments: bool = True
    created_at: datetime = Field(default_factory=datetime.now)
    deleted_at: Optional[datetime] = None

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None
