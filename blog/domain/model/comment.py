"""Comment entity.

Comments form a tree through parent references. The depth of a reply is its
parent's depth plus one and is fixed at creation time.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from blog.domain.model.common import DomainModel
from blog.domain.value import CommentId, ModerationStatus, PostId, UserId


class Comment(DomainModel):
    """Comment entity.

    Threading is managed through:
    - parent_id: Direct parent comment (None for top-level)
    - depth: Nesting level (0 for top-level, capped by the max thread depth)
    """

    id: CommentId
    post_id: PostId
    author_id: UserId
    text: str = Field(min_length=1, max_length=10000)
    parent_id: Optional[CommentId] = None
    depth: int = Field(default=0, ge=0)
    moderation_status: ModerationStatus = ModerationStatus.APPROVED
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
    deleted_at: Optional[datetime] = None

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None

    @property
    def is_top_level(self) -> bool:
        return self.parent_id is None
