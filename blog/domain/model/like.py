"""Comment like entity."""

from datetime import datetime

from pydantic import Field

from blog.domain.model.common import DomainModel
from blog.domain.value import CommentId, CommentLikeId, UserId


class CommentLike(DomainModel):
    """A user's like on a comment.

    One like per user per comment (enforced by database unique constraint).
    """

    id: CommentLikeId
    user_id: UserId
    comment_id: CommentId
    created_at: datetime = Field(default_factory=datetime.now)
