"""Access token verification."""

from dataclasses import dataclass
from typing import Protocol
from uuid import UUID


class AuthGateway(Protocol):
    """Resolves access tokens issued by the auth provider."""

    def get_user_id(self, access_token: str) -> UUID | None:
        """Return the user id for a valid token, otherwise None."""


@dataclass
class AuthService:
    """Service for authenticating API requests."""

    gateway: AuthGateway

    def authenticate(self, authorization: str | None) -> UUID | None:
        """Return the user id for an ``Authorization: Bearer`` header value."""
        if not authorization:
            return None
        scheme, _, token = authorization.partition(" ")
        if scheme.lower() != "bearer" or not token.strip():
            return None
        return self.gateway.get_user_id(token.strip())
