"""Comment use cases."""

from .create_comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
)
from .delete_comment import (
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
)
from .get_recent_comments import (
    GetRecentCommentsRequest,
    GetRecentCommentsResponse,
    GetRecentCommentsUseCase,
)
from .get_thread import GetThreadRequest, GetThreadResponse, GetThreadUseCase
from .items import CommentAuthorItem, CommentDetail, CommentItem
from .update_comment import (
    UpdateCommentRequest,
    UpdateCommentResponse,
    UpdateCommentUseCase,
)

__all__ = [
    "CommentAuthorItem",
    "CommentDetail",
    "CommentItem",
    "CreateCommentRequest",
    "CreateCommentResponse",
    "CreateCommentUseCase",
    "DeleteCommentRequest",
    "DeleteCommentResponse",
    "DeleteCommentUseCase",
    "GetRecentCommentsRequest",
    "GetRecentCommentsResponse",
    "GetRecentCommentsUseCase",
    "GetThreadRequest",
    "GetThreadResponse",
    "GetThreadUseCase",
    "UpdateCommentRequest",
    "UpdateCommentResponse",
    "UpdateCommentUseCase",
]
