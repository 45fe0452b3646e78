"""Create comment use case."""

from pydantic import BaseModel, Field

from forum.application.usecase.base import BaseUseCase, CamelModel
from forum.domain.model.comment import MAX_CONTENT_LENGTH
from forum.domain.repository import AccountRepository
from forum.domain.service import CommentService
from forum.domain.value import AccountId, BoardId, BoardType, CommentId

from .common import CommentResponse


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    board_type: BoardType
    board_id: int
    author_id: int
    content: str = Field(min_length=1, max_length=MAX_CONTENT_LENGTH)
    parent_comment_id: int | None = None  # Parent comment ID for replies


class CreateCommentResponse(CamelModel):
    """Create comment response."""

    comment_id: int
    comment: CommentResponse


class CreateCommentUseCase(BaseUseCase):
    """Use case for creating a comment or a reply."""

    def __init__(
        self, comment_service: CommentService, account_repository: AccountRepository
    ) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
            account_repository: Account repository for the author's nickname
        """
        self.comment_service = comment_service
        self.account_repository = account_repository

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Create the comment.

        Raises:
            NotFoundError: If the board or parent comment does not exist
            DepthLimitExceededError: If the parent is itself a reply
        """
        board_type = request.board_type
        board_id = BoardId(request.board_id)

        comment = await self.comment_service.create_comment(
            board_type=board_type,
            board_id=board_id,
            author_id=AccountId(request.author_id),
            content=request.content,
            parent_comment_id=(
                CommentId(request.parent_comment_id)
                if request.parent_comment_id is not None
                else None
            ),
        )

        author = await self.account_repository.find_by_id(comment.author_id)
        board_author_id = await self.comment_service.get_board_author_id(
            board_type, board_id
        )
        return CreateCommentResponse(
            comment_id=comment.id,
            comment=CommentResponse.from_comment(
                comment,
                nickname=author.nickname.root if author else None,
                is_liked=False,
                board_author_id=board_author_id,
            ),
        )
