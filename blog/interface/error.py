"""HTTP mapping of domain errors."""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from blog.domain.error import (
    ConflictError,
    DomainError,
    ForbiddenError,
    NotFoundError,
    UnauthorizedError,
    ValidationError,
)

STATUS_BY_ERROR: dict[type[DomainError], int] = {
    ValidationError: status.HTTP_400_BAD_REQUEST,
    UnauthorizedError: status.HTTP_401_UNAUTHORIZED,
    ForbiddenError: status.HTTP_403_FORBIDDEN,
    NotFoundError: status.HTTP_404_NOT_FOUND,
    ConflictError: status.HTTP_409_CONFLICT,
}


def status_for(error: DomainError) -> int:
    """HTTP status for a domain error; unknown subclasses are client errors."""
    for error_type, code in STATUS_BY_ERROR.items():
        if isinstance(error, error_type):
            return code
    return status.HTTP_400_BAD_REQUEST


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    code = status_for(exc)
    logfire.warn(
        "Domain error",
        error_type=type(exc).__name__,
        status_code=code,
        path=request.url.path,
        detail=exc.message,
    )
    return JSONResponse(status_code=code, content={"detail": exc.message})


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logfire.error(
        "Unhandled error",
        error_type=type(exc).__name__,
        error=str(exc),
        path=request.url.path,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


def register_error_handlers(app: FastAPI) -> None:
    """Install exception handlers turning domain errors into JSON responses.

    The body is always ``{"detail": message}``, matching FastAPI's own
    HTTPException responses.
    """
    app.add_exception_handler(DomainError, domain_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
