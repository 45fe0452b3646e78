"""Toggle like use case."""

from pydantic import BaseModel

from forum.application.usecase.base import BaseUseCase, CamelModel
from forum.domain.service import LikeService
from forum.domain.value import AccountId, ReferenceType


class ToggleLikeRequest(BaseModel):
    """Toggle like request."""

    user_id: int
    reference_type: ReferenceType
    reference_id: int


class ToggleLikeResponse(CamelModel):
    """Toggle like response."""

    is_liked: bool


class ToggleLikeUseCase(BaseUseCase):
    """Use case for liking or unliking a board post or comment."""

    def __init__(self, like_service: LikeService) -> None:
        """Initialize toggle like use case.

        Args:
            like_service: Like domain service
        """
        self.like_service = like_service

    async def execute(self, request: ToggleLikeRequest) -> ToggleLikeResponse:
        """Flip the requester's like on the target.

        Raises:
            NotFoundError: If the target does not exist
        """
        is_liked = await self.like_service.toggle(
            AccountId(request.user_id), request.reference_type, request.reference_id
        )
        return ToggleLikeResponse(is_liked=is_liked)
