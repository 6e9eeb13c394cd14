"""Access token verification service."""

from uuid import UUID

import logfire

from grifi.config import AuthSettings
from grifi.domain.value import UserId
from grifi.util.jwt import JWTError, TokenPayload, verify_token

from .base import Service

# Role claim the platform puts on signed-in users' tokens
MEMBER_ROLE = "authenticated"


class JWTService(Service):
    """Resolves platform access tokens to member IDs."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def verify_token(self, token: str) -> TokenPayload:
        """Decode a platform access token.

        Raises:
            JWTError: If the token fails verification
        """
        with logfire.span("jwt_service.verify_token"):
            return verify_token(token, self.auth_settings)

    def get_user_id_from_token(self, token: str | None) -> UserId | None:
        """Member ID carried by a token, or None for anonymous visitors.

        Missing, invalid and expired tokens, tokens issued to other roles
        and tokens whose subject is not a user ID all resolve to None.
        """
        if not token:
            return None

        try:
            payload = self.verify_token(token)
        except JWTError as e:
            logfire.debug("Ignoring unusable access token", error=str(e))
            return None

        if payload.role is not None and payload.role != MEMBER_ROLE:
            logfire.debug("Ignoring token for non-member role", role=payload.role)
            return None

        try:
            return UserId(UUID(payload.sub))
        except ValueError:
            logfire.warn("Access token subject is not a user id", sub=payload.sub)
            return None
