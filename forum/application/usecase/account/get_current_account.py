"""Get current account use case."""

from datetime import datetime

from pydantic import BaseModel

from forum.application.usecase.base import BaseUseCase, CamelModel
from forum.domain.model import Account
from forum.domain.service import AccountService
from forum.domain.value import AccountId, AccountStatus


class GetCurrentAccountRequest(BaseModel):
    """Get current account request."""

    account_id: int


class AccountResponse(CamelModel):
    """Account details visible to its owner."""

    account_id: int
    email: str
    name: str
    nickname: str
    image: str | None
    grade: int
    role: str
    status: AccountStatus
    deleted_at: datetime | None
    created_at: datetime

    @classmethod
    def from_account(cls, account: Account) -> "AccountResponse":
        """Build the response from an Account."""
        return cls(
            account_id=account.id,
            email=account.email.root,
            name=account.name,
            nickname=account.nickname.root,
            image=account.image,
            grade=account.grade,
            role=account.role,
            status=account.status,
            deleted_at=account.deleted_at,
            created_at=account.created_at,
        )


class GetCurrentAccountUseCase(BaseUseCase):
    """Use case for getting the authenticated account."""

    def __init__(self, account_service: AccountService) -> None:
        self.account_service = account_service

    async def execute(self, request: GetCurrentAccountRequest) -> AccountResponse:
        """Load the account behind a verified token.

        Raises:
            NotFoundError: If the account no longer exists
        """
        account = await self.account_service.get_account(AccountId(request.account_id))
        return AccountResponse.from_account(account)
