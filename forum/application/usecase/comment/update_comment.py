"""Update comment use case."""

from pydantic import BaseModel, Field

from forum.application.usecase.base import BaseUseCase
from forum.domain.model.comment import MAX_CONTENT_LENGTH
from forum.domain.repository import AccountRepository
from forum.domain.service import CommentService, LikeService
from forum.domain.value import AccountId, CommentId, ReferenceType

from .common import CommentResponse


class UpdateCommentRequest(BaseModel):
    """Update comment request."""

    comment_id: int
    user_id: int
    content: str = Field(min_length=1, max_length=MAX_CONTENT_LENGTH)


class UpdateCommentUseCase(BaseUseCase):
    """Use case for editing a comment."""

    def __init__(
        self,
        comment_service: CommentService,
        like_service: LikeService,
        account_repository: AccountRepository,
    ) -> None:
        """Initialize update comment use case.

        Args:
            comment_service: Comment domain service
            like_service: Like service for the editor's like state
            account_repository: Account repository for the author's nickname
        """
        self.comment_service = comment_service
        self.like_service = like_service
        self.account_repository = account_repository

    async def execute(self, request: UpdateCommentRequest) -> CommentResponse:
        """Edit the comment if the requester wrote it.

        Raises:
            NotFoundError: If the comment does not exist
            NotAuthorizedError: If the requester is not the author
            ContentDeletedException: If the comment is deleted
        """
        user_id = AccountId(request.user_id)
        comment = await self.comment_service.update_comment(
            CommentId(request.comment_id), user_id, request.content
        )

        author = await self.account_repository.find_by_id(comment.author_id)
        liked = await self.like_service.liked_ids(
            user_id, ReferenceType.COMMENT, [comment.id]
        )
        board_author_id = await self.comment_service.get_board_author_id(
            comment.board_type, comment.board_id
        )
        return CommentResponse.from_comment(
            comment,
            nickname=author.nickname.root if author else None,
            is_liked=comment.id in liked,
            board_author_id=board_author_id,
        )
