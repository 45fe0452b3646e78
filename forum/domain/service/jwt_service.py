"""JWT token domain service."""

import logfire

from forum.config import AuthSettings
from forum.domain.value import AccountId
from forum.util.jwt import JWTError, TokenPayload, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Domain service for JWT token operations."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def create_token(self, account_id: AccountId, email: str) -> str:
        """Create JWT token for an account.

        Args:
            account_id: Account ID
            email: Account email

        Returns:
            JWT token string
        """
        with logfire.span("jwt_service.create_token", account_id=account_id):
            token = create_token(account_id, email, self.auth_settings)
            logfire.info("JWT token created", account_id=account_id)
            return token

    def create_refresh_token(self, account_id: AccountId, email: str) -> str:
        """Create a refresh token for an account."""
        with logfire.span("jwt_service.create_refresh_token", account_id=account_id):
            return create_token(
                account_id, email, self.auth_settings, token_type="refresh"
            )

    def verify_refresh_token(self, token: str) -> TokenPayload:
        """Verify a refresh token.

        Raises:
            JWTError: If the token is invalid, expired or an access token
        """
        with logfire.span("jwt_service.verify_refresh_token"):
            try:
                return verify_token(token, self.auth_settings, token_type="refresh")
            except JWTError as e:
                logfire.warn("Refresh token verification failed", error=str(e))
                raise

    def verify_token(self, token: str) -> TokenPayload:
        """Verify an access token and extract its payload.

        Raises:
            JWTError: If token is invalid, expired or a refresh token
        """
        with logfire.span("jwt_service.verify_token"):
            try:
                return verify_token(token, self.auth_settings)
            except JWTError as e:
                logfire.warn("JWT token verification failed", error=str(e))
                raise

    def get_account_id_from_token(self, token: str | None) -> AccountId | None:
        """Extract the account ID from a token without raising.

        Args:
            token: JWT token string (optional)

        Returns:
            Account ID if token is valid, None if token is missing or invalid
        """
        if not token:
            return None

        try:
            return AccountId(self.verify_token(token).account_id)
        except JWTError as e:
            # Invalid or expired token, treat as unauthenticated
            logfire.debug(
                "JWT verification failed, treating as unauthenticated", error=str(e)
            )
            return None
