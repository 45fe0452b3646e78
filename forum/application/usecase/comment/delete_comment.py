"""Delete comment use case."""

from pydantic import BaseModel

from forum.application.usecase.base import BaseUseCase
from forum.domain.service import CommentService
from forum.domain.value import AccountId, CommentId


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    comment_id: int
    user_id: int


class DeleteCommentUseCase(BaseUseCase):
    """Use case for soft deleting a comment."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: DeleteCommentRequest) -> None:
        """Soft delete the comment if the requester wrote it.

        Raises:
            NotFoundError: If the comment does not exist
            NotAuthorizedError: If the requester is not the author
            ContentDeletedException: If the comment is already deleted
        """
        await self.comment_service.delete_comment(
            CommentId(request.comment_id), AccountId(request.user_id)
        )
