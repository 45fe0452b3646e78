"""Logout use case."""

from pydantic import BaseModel

from forum.application.usecase.base import BaseUseCase
from forum.domain.service import AccountService
from forum.domain.value import AccountId


class LogoutRequest(BaseModel):
    """Logout request; anonymous callers only get their cookie cleared."""

    account_id: int | None = None


class LogoutUseCase(BaseUseCase):
    """Use case for logging out."""

    def __init__(self, account_service: AccountService) -> None:
        self.account_service = account_service

    async def execute(self, request: LogoutRequest) -> None:
        """Revoke the caller's stored refresh token."""
        if request.account_id is not None:
            await self.account_service.revoke_refresh_token(AccountId(request.account_id))
