"""Supabase Auth access token verification."""

import logging
from dataclasses import dataclass
from uuid import UUID

from supabase import AuthError, Client

from fitai.services.auth import AuthGateway

_logger = logging.getLogger(__name__)


@dataclass
class SupabaseAuthGateway(AuthGateway):
    """Resolve access tokens through the Supabase Auth API."""

    client: Client

    def get_user_id(self, access_token: str) -> UUID | None:
        """Return the user id for a valid access token."""
        try:
            response = self.client.auth.get_user(access_token)
        except AuthError as exc:
            _logger.info("Rejected access token: %s", exc)
            return None
        user = getattr(response, "user", None)
        raw_id = getattr(user, "id", None)
        if not raw_id:
            return None
        try:
            return UUID(str(raw_id))
        except ValueError:
            return None
