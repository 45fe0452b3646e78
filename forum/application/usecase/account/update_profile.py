"""Update profile use case."""

from pydantic import BaseModel

from forum.application.usecase.base import BaseUseCase
from forum.domain.service import AccountService
from forum.domain.value import AccountId

from .get_current_account import AccountResponse


class UpdateProfileRequest(BaseModel):
    """Update profile request.

    Fields left as None keep their current value.
    """

    account_id: int
    name: str | None = None
    nickname: str | None = None
    image: str | None = None


class UpdateProfileUseCase(BaseUseCase):
    """Use case for changing the caller's public profile."""

    def __init__(self, account_service: AccountService) -> None:
        """Initialize update profile use case.

        Args:
            account_service: Account domain service
        """
        self.account_service = account_service

    async def execute(self, request: UpdateProfileRequest) -> AccountResponse:
        """Apply the profile changes.

        Raises:
            LoginRejectedError: If the account is pending deletion or disabled
            BusinessRuleViolationError: If the nickname is taken or the update fails
        """
        account = await self.account_service.update_profile(
            AccountId(request.account_id),
            name=request.name,
            nickname=request.nickname,
            image=request.image,
        )
        return AccountResponse.from_account(account)
