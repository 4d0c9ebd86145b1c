"""Base use case."""

from abc import ABC, abstractmethod
from typing import Any

from blog.config import CommentSettings


class BaseUseCase(ABC):
    """Base use case for orchestrating domain services."""

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass


def clamp_page(
    limit: int | None, offset: int, settings: CommentSettings
) -> tuple[int, int]:
    """Apply the default and maximum page size to a requested page."""
    if limit is None or limit < 1:
        limit = settings.default_page_size
    return min(limit, settings.max_page_size), max(offset, 0)
