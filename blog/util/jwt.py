"""Session token encoding and verification.

The auth service issues HS256 tokens into the ``auth_token`` cookie; this
service verifies them to identify the viewer and their role.
"""

from datetime import datetime, timedelta, timezone
from uuid import UUID

import jwt
from pydantic import BaseModel, ValidationError

from blog.config import AuthSettings
from blog.domain.value import UserRole


class TokenPayload(BaseModel):
    user_id: UUID
    username: str
    role: UserRole = UserRole.USER
    exp: datetime


class JWTError(Exception):
    """Token could not be verified."""


def create_token(user_id: str, username: str, role: str, settings: AuthSettings) -> str:
    """Encode a session token for ``user_id`` valid for ``jwt_expiry_days``."""
    issued_at = datetime.now(timezone.utc)
    claims = {
        "user_id": user_id,
        "username": username,
        "role": role,
        "iat": issued_at,
        "exp": issued_at + timedelta(days=settings.jwt_expiry_days),
    }
    return jwt.encode(claims, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Decode ``token`` and validate its claims.

    Raises:
        JWTError: If the signature is bad, the token expired, or the claims
            do not describe a user
    """
    try:
        claims = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": ["exp", "user_id"]},
        )
        return TokenPayload.model_validate(claims)
    except jwt.ExpiredSignatureError as e:
        raise JWTError("Token has expired") from e
    except (jwt.InvalidTokenError, ValidationError) as e:
        raise JWTError("Invalid token") from e
