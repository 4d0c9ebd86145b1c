"""Domain layer errors.

Every error raised by a domain service carries a message that is safe to show
to the requester. The interface layer maps each class to an HTTP status.
"""


class DomainError(Exception):
    """Base domain error."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ValidationError(DomainError):
    """Input or business rule violation (400)."""

    pass


class UnauthorizedError(DomainError):
    """Operation requires an authenticated user (401)."""

    def __init__(self, message: str = "Authentication required") -> None:
        super().__init__(message)


class ForbiddenError(DomainError):
    """Authenticated user lacks permission for the operation (403)."""

    pass


class NotFoundError(DomainError):
    """Requested resource does not exist or is soft-deleted (404)."""

    pass


class ConflictError(DomainError):
    """Operation collides with existing state, e.g. a duplicate report (409)."""

    pass
