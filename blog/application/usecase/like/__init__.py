"""Comment like use cases."""

from .like_comment import (
    LikeCommentRequest,
    LikeCommentResponse,
    LikeCommentUseCase,
    UnlikeCommentUseCase,
)

__all__ = [
    "LikeCommentRequest",
    "LikeCommentResponse",
    "LikeCommentUseCase",
    "UnlikeCommentUseCase",
]
