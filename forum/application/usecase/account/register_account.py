"""Register account use case."""

from datetime import datetime

from pydantic import Field

from forum.application.usecase.base import BaseUseCase, CamelModel
from forum.domain.service import AccountService


class RegisterAccountRequest(CamelModel):
    """Register account request."""

    email: str = Field(min_length=3, max_length=255)
    password: str = Field(min_length=8, max_length=128)
    name: str = Field(min_length=1, max_length=100)
    nickname: str = Field(min_length=2, max_length=30)


class RegisterAccountResponse(CamelModel):
    """Register account response."""

    account_id: int
    email: str
    nickname: str
    created_at: datetime


class RegisterAccountUseCase(BaseUseCase):
    """Use case for registering a new account."""

    def __init__(self, account_service: AccountService) -> None:
        """Initialize register account use case.

        Args:
            account_service: Account domain service
        """
        self.account_service = account_service

    async def execute(self, request: RegisterAccountRequest) -> RegisterAccountResponse:
        """Register an active account.

        Raises:
            BusinessRuleViolationError: If the email or nickname is taken
        """
        account = await self.account_service.register(
            email=request.email,
            password=request.password,
            name=request.name,
            nickname=request.nickname,
        )
        return RegisterAccountResponse(
            account_id=account.id,
            email=account.email.root,
            nickname=account.nickname.root,
            created_at=account.created_at,
        )
