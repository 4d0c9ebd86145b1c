"""Strongly typed identifiers for blog domain entities.

Using NewType keeps post, comment and user IDs from being mixed up.
"""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", UUID)
PostId = NewType("PostId", UUID)
CommentId = NewType("CommentId", UUID)
CommentLikeId = NewType("CommentLikeId", UUID)
CommentReportId = NewType("CommentReportId", UUID)
SubscriptionId = NewType("SubscriptionId", UUID)
NotificationId = NewType("NotificationId", UUID)
