"""Comment report use cases."""

from .list_reports import (
    ListReportsRequest,
    ListReportsResponse,
    ListReportsUseCase,
    UpdateReportStatusRequest,
    UpdateReportStatusResponse,
    UpdateReportStatusUseCase,
)
from .report_comment import (
    CommentReportItem,
    ReportCommentRequest,
    ReportCommentUseCase,
)

__all__ = [
    "CommentReportItem",
    "ListReportsRequest",
    "ListReportsResponse",
    "ListReportsUseCase",
    "ReportCommentRequest",
    "ReportCommentUseCase",
    "UpdateReportStatusRequest",
    "UpdateReportStatusResponse",
    "UpdateReportStatusUseCase",
]
