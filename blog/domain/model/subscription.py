"""Comment thread subscription entity."""

from datetime import datetime

from pydantic import Field

from blog.domain.model.common import DomainModel
from blog.domain.value import CommentId, SubscriptionId, UserId


class CommentSubscription(DomainModel):
    """A user's opt-in to activity under a comment."""

    id: SubscriptionId
    user_id: UserId
    comment_id: CommentId
    created_at: datetime = Field(default_factory=datetime.now)
