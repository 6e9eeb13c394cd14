"""JWT token utilities.

Access tokens are minted by the hosted auth platform. The service verifies
them with the shared secret; ``create_token`` exists for local tooling and
tests.
"""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel, ValidationError

from grifi.config import AuthSettings


class TokenPayload(BaseModel):
    """Claims used from a platform access token."""

    sub: str  # User ID
    exp: datetime
    email: str | None = None
    role: str | None = None


class JWTError(Exception):
    """JWT-related error."""

    pass


def create_token(
    user_id: str,
    settings: AuthSettings,
    email: str | None = None,
    expires_in: timedelta = timedelta(hours=1),
) -> str:
    """Create a token shaped like the platform's access tokens.

    Args:
        user_id: User ID (sub claim)
        settings: Authentication settings
        email: Optional email claim
        expires_in: Token lifetime

    Returns:
        Encoded JWT token
    """
    payload = {
        "sub": user_id,
        "exp": datetime.now(timezone.utc) + expires_in,
        "role": "authenticated",
    }
    if email:
        payload["email"] = email
    if settings.jwt_audience:
        payload["aud"] = settings.jwt_audience

    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Verify and decode a platform access token.

    Args:
        token: JWT token to verify
        settings: Authentication settings

    Returns:
        Token payload if valid

    Raises:
        JWTError: If token is invalid or expired
    """
    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            audience=settings.jwt_audience,
            options={"verify_aud": settings.jwt_audience is not None},
        )
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except jwt.InvalidTokenError:
        raise JWTError("Invalid token")

    try:
        return TokenPayload(**payload)
    except ValidationError:
        raise JWTError("Token is missing required claims")
