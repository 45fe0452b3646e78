"""JWT token utilities."""

import secrets
from datetime import datetime, timedelta
from typing import Literal

import jwt
from pydantic import BaseModel

from forum.config import AuthSettings
from forum.util.error import UtilError

TokenType = Literal["access", "refresh"]


class TokenPayload(BaseModel):
    """JWT token payload."""

    account_id: int
    email: str
    exp: datetime
    token_type: TokenType = "access"
    jti: str | None = None


class JWTError(UtilError):
    """JWT-related error."""

    pass


def create_token(
    account_id: int,
    email: str,
    settings: AuthSettings,
    token_type: TokenType = "access",
) -> str:
    """Create a JWT for an account.

    Refresh tokens live longer than access tokens and carry a random ``jti``
    so that two tokens issued in the same second still differ.

    Args:
        account_id: Account ID
        email: Account email at issue time
        settings: Authentication settings
        token_type: "access" or "refresh"

    Returns:
        Encoded JWT token
    """
    days = (
        settings.refresh_expiry_days
        if token_type == "refresh"
        else settings.jwt_expiry_days
    )
    expiry = datetime.now() + timedelta(days=days)

    payload = {
        "account_id": account_id,
        "email": email,
        "exp": expiry,
        "token_type": token_type,
    }
    if token_type == "refresh":
        payload["jti"] = secrets.token_urlsafe(16)

    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(
    token: str, settings: AuthSettings, token_type: TokenType = "access"
) -> TokenPayload:
    """Verify and decode a JWT token of the expected type.

    Args:
        token: JWT token to verify
        settings: Authentication settings
        token_type: Type the token must have

    Returns:
        Token payload if valid

    Raises:
        JWTError: If token is invalid, expired or of the wrong type
    """
    try:
        payload = jwt.decode(
            token, settings.jwt_secret, algorithms=[settings.jwt_algorithm]
        )
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except jwt.InvalidTokenError:
        raise JWTError("Invalid token")

    decoded = TokenPayload(**payload)
    if decoded.token_type != token_type:
        raise JWTError(f"Expected {token_type} token, got {decoded.token_type}")
    return decoded
