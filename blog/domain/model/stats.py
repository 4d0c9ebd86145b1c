"""Commenter statistics entity."""

from datetime import datetime

from pydantic import Field

from blog.domain.model.common import DomainModel
from blog.domain.value import UserId


class CommenterStats(DomainModel):
    """Running count of one commenter's comments on one author's posts.

    Keyed by (post_author_id, commenter_id). Rows never exist with a zero count
    and are never created for an author commenting on their own posts.
    """

    post_author_id: UserId
    commenter_id: UserId
    comment_count: int = Field(ge=1)
    last_comment_at: datetime = Field(default_factory=datetime.now)
