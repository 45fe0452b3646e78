"""Request account deletion use case."""

from datetime import datetime

from pydantic import BaseModel

from forum.application.usecase.base import BaseUseCase, CamelModel
from forum.domain.service import AccountService
from forum.domain.value import AccountId


class RequestDeletionRequest(BaseModel):
    """Request deletion request."""

    account_id: int


class RequestDeletionResponse(CamelModel):
    """Scheduled deletion details."""

    account_id: int
    deleted_at: datetime  # Anonymization happens on the first sweep after this


class RequestDeletionUseCase(BaseUseCase):
    """Use case for scheduling the caller's account for deletion."""

    def __init__(self, account_service: AccountService) -> None:
        """Initialize request deletion use case.

        Args:
            account_service: Account domain service
        """
        self.account_service = account_service

    async def execute(self, request: RequestDeletionRequest) -> RequestDeletionResponse:
        """Schedule deletion after the configured grace window.

        Raises:
            NotFoundError: If the account does not exist
            AlreadyScheduledError: If an unexpired schedule exists
            AccountAnonymizedError: If the account is already anonymized
        """
        schedule = await self.account_service.request_deletion(
            AccountId(request.account_id), datetime.now()
        )
        return RequestDeletionResponse(
            account_id=schedule.account_id, deleted_at=schedule.deleted_at
        )
