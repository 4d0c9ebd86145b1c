"""Commenter stats use cases."""

from .get_top_commenters import (
    GetTopCommentersRequest,
    GetTopCommentersResponse,
    GetTopCommentersUseCase,
    TopCommenterItem,
)

__all__ = [
    "GetTopCommentersRequest",
    "GetTopCommentersResponse",
    "GetTopCommentersUseCase",
    "TopCommenterItem",
]
