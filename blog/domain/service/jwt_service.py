"""JWT token domain service."""

import logfire

from blog.config import AuthSettings
from blog.domain.error import UnauthorizedError
from blog.domain.value import UserId, UserRole, Viewer
from blog.util.jwt import JWTError, TokenPayload, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Domain service turning session tokens into viewers."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def create_token(
        self, user_id: str, username: str, role: UserRole = UserRole.USER
    ) -> str:
        """Create JWT token for user.

        Issuing tokens belongs to the auth collaborator; this is kept for
        tooling and tests that need a valid session.
        """
        with logfire.span("jwt_service.create_token", user_id=user_id):
            return create_token(user_id, username, role.value, self.auth_settings)

    def verify_token(self, token: str) -> TokenPayload:
        """Verify JWT token and extract payload.

        Raises:
            JWTError: If token is invalid or expired
        """
        with logfire.span("jwt_service.verify_token"):
            try:
                return verify_token(token, self.auth_settings)
            except JWTError as e:
                logfire.warn("JWT token verification failed", error=str(e))
                raise

    def get_viewer_from_token(self, token: str | None) -> Viewer:
        """Build a viewer from an optional token.

        Missing, invalid or expired tokens yield an anonymous viewer.
        """
        if not token:
            return Viewer.anonymous()

        try:
            payload = self.verify_token(token)
        except JWTError:
            return Viewer.anonymous()

        return Viewer(
            user_id=UserId(payload.user_id),
            username=payload.username,
            role=payload.role,
        )

    def require_viewer(self, token: str | None) -> Viewer:
        """Build an authenticated viewer or fail.

        Raises:
            UnauthorizedError: If the token is missing or invalid
        """
        viewer = self.get_viewer_from_token(token)
        if not viewer.is_authenticated:
            raise UnauthorizedError()
        return viewer
