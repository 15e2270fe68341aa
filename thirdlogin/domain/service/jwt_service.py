"""JWT token domain service."""

from datetime import datetime

import logfire

from thirdlogin.config import AuthSettings
from thirdlogin.util.jwt import TokenPayload, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Domain service for session token operations."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def create_token(self, uid: str, name: str, device_flag: int) -> tuple[str, datetime]:
        """Create a session token for an account.

        Args:
            uid: Account ID
            name: Account display name
            device_flag: Device the session is issued for

        Returns:
            JWT token string and its expiry
        """
        with logfire.span("jwt_service.create_token", uid=uid):
            token, expires_at = create_token(uid, name, device_flag, self.auth_settings)
            logfire.info("JWT token created", uid=uid, device_flag=device_flag)
            return token, expires_at

    def verify_token(self, token: str) -> TokenPayload:
        """Verify a session token and extract its payload.

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
                logfire.info("JWT token verified", uid=payload.uid)
                return payload
            except Exception as e:
                logfire.error("JWT token verification failed", error=str(e))
                raise
