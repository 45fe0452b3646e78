"""Restore account use case."""

from forum.application.usecase.account.get_current_account import AccountResponse
from forum.application.usecase.base import BaseUseCase, CamelModel
from forum.domain.service import AccountService


class RestoreAccountRequest(CamelModel):
    """Restore request carrying login credentials."""

    email: str
    password: str


class RestoreAccountUseCase(BaseUseCase):
    """Use case for cancelling a scheduled deletion."""

    def __init__(self, account_service: AccountService) -> None:
        """Initialize restore account use case.

        Args:
            account_service: Account domain service
        """
        self.account_service = account_service

    async def execute(self, request: RestoreAccountRequest) -> AccountResponse:
        """Restore a pending account identified by its credentials.

        Raises:
            NotFoundError: If no account uses the email
            BusinessRuleViolationError: If the password does not match
            NotScheduledError: If nothing is scheduled
            AccountAnonymizedError: If the account is already anonymized
        """
        account = await self.account_service.restore_with_credentials(
            request.email, request.password
        )
        return AccountResponse.from_account(account)
