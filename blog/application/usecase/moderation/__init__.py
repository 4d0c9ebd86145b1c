"""Comment moderation use cases."""

from .get_moderation_queue import (
    GetModerationQueueRequest,
    GetModerationQueueResponse,
    GetModerationQueueUseCase,
)
from .moderate_comment import (
    ModerateCommentRequest,
    ModerateCommentResponse,
    ModerateCommentUseCase,
)

__all__ = [
    "GetModerationQueueRequest",
    "GetModerationQueueResponse",
    "GetModerationQueueUseCase",
    "ModerateCommentRequest",
    "ModerateCommentResponse",
    "ModerateCommentUseCase",
]
