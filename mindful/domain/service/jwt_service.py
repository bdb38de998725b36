"""JWT token domain service."""

import logfire

from mindful.config import AuthSettings
from mindful.util.jwt import TokenPayload, JWTError, verify_token

from .base import Service


class JWTService(Service):
    """Domain service for JWT token operations."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def verify_token(self, token: str) -> TokenPayload:
        """Verify JWT token and extract payload.

        Args:
            token: JWT token string

        Returns:
            Token payload

        Raises:
            JWTError: If token is invalid or expired
        """
        with logfire.span("jwt_service.verify_token"):
            try:
                payload = verify_token(token, self.auth_settings)
                logfire.info("JWT token verified", user_id=payload.sub)
                return payload
            except JWTError as e:
                logfire.warn("JWT token verification failed", error=str(e))
                raise

    def get_payload_from_token(self, token: str | None) -> TokenPayload | None:
        """Extract the payload from a JWT token without raising exceptions.

        This is a convenience method for API routes that need to optionally
        authenticate users without failing on invalid tokens.

        Args:
            token: JWT token string (optional)

        Returns:
            Payload if token is valid, None if token is missing or invalid
        """
        if not token:
            return None

        try:
            return self.verify_token(token)
        except JWTError:
            # Invalid or expired token, treat as unauthenticated
            return None
