"""Notification entity."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from blog.domain.model.common import DomainModel
from blog.domain.value import CommentId, NotificationId, NotificationType, PostId, UserId


class Notification(DomainModel):
    """A notification delivered to one recipient.

    Only the read flag changes after creation.
    """

    id: NotificationId
    type: NotificationType
    recipient_id: UserId
    actor_id: UserId
    post_id: Optional[PostId] = None
    comment_id: Optional[CommentId] = None
    message: str = Field(min_length=1, max_length=500)
    read: bool = False
    created_at: datetime = Field(default_factory=datetime.now)
