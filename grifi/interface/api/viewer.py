"""Who is making the current request.

Resolved once per request by the DI container from the platform access
token, sent either as a bearer token or in the platform's session cookie.
Routes depend on ``Viewer`` instead of reading tokens themselves.
"""

from typing import Mapping, Optional

from dishka import Provider, Scope, provide
from fastapi import Request
from pydantic import BaseModel, ConfigDict

from grifi.config import AuthSettings
from grifi.domain.service import JWTService
from grifi.domain.value import UserId
from grifi.interface.error import UnauthorizedError


class Viewer(BaseModel):
    """Authenticated member, or an anonymous visitor when user_id is None."""

    model_config = ConfigDict(frozen=True)

    user_id: Optional[UserId] = None

    @property
    def is_authenticated(self) -> bool:
        return self.user_id is not None

    def require(self) -> str:
        """User ID as a string for use case requests.

        Raises:
            UnauthorizedError: If the visitor is anonymous
        """
        if self.user_id is None:
            raise UnauthorizedError()
        return str(self.user_id)


def extract_token(
    headers: Mapping[str, str],
    cookies: Mapping[str, str],
    auth_settings: AuthSettings,
) -> Optional[str]:
    """Access token from the Authorization header, else the session cookie."""
    authorization = headers.get("authorization")
    if authorization:
        scheme, _, token = authorization.partition(" ")
        if scheme.lower() == "bearer" and token:
            return token.strip()
    return cookies.get(auth_settings.access_token_cookie)


class ViewerProvider(Provider):
    """Request-scoped viewer provider for the HTTP layer."""

    scope = Scope.REQUEST

    @provide
    def get_viewer(
        self,
        request: Request,
        jwt_service: JWTService,
        auth_settings: AuthSettings,
    ) -> Viewer:
        """Resolve the viewer from the request's access token."""
        token = extract_token(request.headers, request.cookies, auth_settings)
        return Viewer(user_id=jwt_service.get_user_id_from_token(token))
