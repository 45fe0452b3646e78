"""Refresh token use case."""

from forum.application.usecase.base import BaseUseCase, CamelModel
from forum.domain.error import InvalidRefreshTokenError
from forum.domain.service import AccountService, JWTService
from forum.domain.value import AccountId
from forum.util.jwt import JWTError


class RefreshTokenRequest(CamelModel):
    """Refresh token request."""

    refresh_token: str


class RefreshTokenResponse(CamelModel):
    """New token pair; the previous refresh token is no longer valid."""

    token: str
    refresh_token: str


class RefreshTokenUseCase(BaseUseCase):
    """Use case for exchanging a refresh token for a new token pair."""

    def __init__(self, account_service: AccountService, jwt_service: JWTService) -> None:
        self.account_service = account_service
        self.jwt_service = jwt_service

    async def execute(self, request: RefreshTokenRequest) -> RefreshTokenResponse:
        """Verify the refresh token, rotate it and issue a new access token.

        Raises:
            InvalidRefreshTokenError: If the token is invalid, expired, an
                access token, or not the one stored on the account
            LoginRejectedError: If the account may no longer log in
        """
        try:
            payload = self.jwt_service.verify_refresh_token(request.refresh_token)
        except JWTError:
            raise InvalidRefreshTokenError()

        account_id = AccountId(payload.account_id)
        replacement = self.jwt_service.create_refresh_token(account_id, payload.email)
        account = await self.account_service.rotate_refresh_token(
            account_id, request.refresh_token, replacement
        )
        return RefreshTokenResponse(
            token=self.jwt_service.create_token(account.id, account.email.root),
            refresh_token=replacement,
        )
