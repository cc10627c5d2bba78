"""Identity domain service."""

from uuid import UUID

import logfire

from blog.config import AuthSettings
from blog.domain.value import UserId, UserRef
from blog.util.jwt import JWTError, verify_token

from .base import Service


class IdentityService(Service):
    """Resolves callers to ``UserRef`` values.

    This is the only place a role is turned into a moderation capability.
    """

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize identity service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def to_user_ref(self, user_id: UserId, role: str) -> UserRef:
        """Build a caller reference from a user ID and role."""
        return UserRef(
            id=user_id,
            role=role,
            can_moderate=role in self.auth_settings.moderator_roles,
        )

    def resolve(self, token: str | None) -> UserRef | None:
        """Resolve a JWT token to a caller without raising.

        Args:
            token: JWT token string (optional)

        Returns:
            The caller if the token is valid, None if it is missing or invalid
        """
        if not token:
            return None

        try:
            payload = verify_token(token, self.auth_settings)
            user_id = UserId(UUID(payload.user_id))
        except (JWTError, ValueError) as e:
            # Invalid or expired token, treat as anonymous
            logfire.debug("Token rejected, treating as anonymous", error=str(e))
            return None

        user = self.to_user_ref(user_id, payload.role)
        logfire.debug(
            "Caller resolved", user_id=str(user.id), can_moderate=user.can_moderate
        )
        return user
