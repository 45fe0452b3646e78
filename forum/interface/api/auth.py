"""Access token extraction for routes."""

from fastapi import Request

from forum.config import AuthSettings
from forum.domain.service import AccountService, JWTService
from forum.domain.value import AccountId
from forum.interface.error import AuthenticationRequiredError


def extract_token(request: Request, auth_settings: AuthSettings) -> str | None:
    """Read the access token from the Authorization header or the auth cookie.

    The header wins when both are present.
    """
    authorization = request.headers.get("Authorization")
    if authorization:
        scheme, _, token = authorization.partition(" ")
        if scheme.lower() == "bearer" and token:
            return token.strip()
    return request.cookies.get(auth_settings.cookie_name)


def optional_account_id(
    request: Request, auth_settings: AuthSettings, jwt_service: JWTService
) -> AccountId | None:
    """Account behind the request's token, None if anonymous or invalid."""
    return jwt_service.get_account_id_from_token(extract_token(request, auth_settings))


def require_account_id(
    request: Request, auth_settings: AuthSettings, jwt_service: JWTService
) -> AccountId:
    """Account behind the request's token.

    Raises:
        AuthenticationRequiredError: If the token is missing, invalid or expired
    """
    account_id = optional_account_id(request, auth_settings, jwt_service)
    if account_id is None:
        raise AuthenticationRequiredError()
    return account_id


async def require_active_account_id(
    request: Request,
    auth_settings: AuthSettings,
    jwt_service: JWTService,
    account_service: AccountService,
) -> AccountId:
    """Account behind the request's token, checked against its lifecycle.

    A valid signature is not enough for writes: a token issued before the
    account was scheduled for deletion, anonymized or disabled is refused
    the same way a login would be.

    Raises:
        AuthenticationRequiredError: If the token is missing, invalid or expired
        LoginRejectedError: If the account may not act (U101, U102)
        NotFoundError: If the account no longer exists
    """
    account_id = require_account_id(request, auth_settings, jwt_service)
    await account_service.require_active(account_id)
    return account_id
