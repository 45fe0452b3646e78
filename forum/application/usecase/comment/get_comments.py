"""Get comments use case."""

from pydantic import BaseModel, Field

from forum.application.usecase.base import BaseUseCase, CamelModel
from forum.domain.model import Comment
from forum.domain.repository import AccountRepository
from forum.domain.service import CommentService, LikeService, ThreadAssembler
from forum.domain.value import AccountId, BoardId, BoardType, ReferenceType

from .common import CommentResponse, CommentThreadResponse


class GetCommentsRequest(BaseModel):
    """Get comments request."""

    board_type: BoardType
    board_id: int
    cursor: int | None = None  # Last top-level comment id already seen
    size: int = Field(default=20)
    viewer_id: int | None = None  # Authenticated viewer (optional)


class GetCommentsResponse(CamelModel):
    """One page of comment threads."""

    content: list[CommentThreadResponse]
    next_cursor: int | None
    has_next: bool


class GetCommentsUseCase(BaseUseCase):
    """Use case for listing comment threads of a board post."""

    def __init__(
        self,
        comment_service: CommentService,
        thread_assembler: ThreadAssembler,
        like_service: LikeService,
        account_repository: AccountRepository,
    ) -> None:
        """Initialize get comments use case.

        Args:
            comment_service: Comment domain service (board lookup)
            thread_assembler: Page and reply assembly
            like_service: Like lookups for the viewer
            account_repository: Account repository for author nicknames
        """
        self.comment_service = comment_service
        self.thread_assembler = thread_assembler
        self.like_service = like_service
        self.account_repository = account_repository

    async def execute(self, request: GetCommentsRequest) -> GetCommentsResponse:
        """Fetch a page of top-level comments with their replies.

        Args:
            request: Board, cursor, page size and optional viewer

        Returns:
            Threads newest first, each with replies oldest first

        Raises:
            NotFoundError: If the board post does not exist
        """
        board_type = request.board_type
        board_id = BoardId(request.board_id)
        board_author_id = await self.comment_service.get_board_author_id(
            board_type, board_id
        )

        page = await self.thread_assembler.fetch_page(
            board_type, board_id, request.cursor, request.size
        )
        replies = await self.thread_assembler.attach_replies(page.comments)

        all_comments: list[Comment] = list(page.comments)
        for group in replies.values():
            all_comments.extend(group)

        # Batch lookups for nicknames and the viewer's likes (avoid N+1)
        author_ids = list({c.author_id for c in all_comments})
        accounts = await self.account_repository.find_by_ids(author_ids)
        nicknames = {a.id: a.nickname.root for a in accounts}

        liked: set[int] = set()
        if request.viewer_id is not None:
            liked = await self.like_service.liked_ids(
                AccountId(request.viewer_id),
                ReferenceType.COMMENT,
                [c.id for c in all_comments],
            )

        def to_response(comment: Comment) -> CommentResponse:
            return CommentResponse.from_comment(
                comment,
                nickname=nicknames.get(comment.author_id),
                is_liked=comment.id in liked,
                board_author_id=board_author_id,
            )

        threads = [
            CommentThreadResponse(
                **to_response(comment).model_dump(),
                replies=[to_response(r) for r in replies.get(comment.id, [])],
            )
            for comment in page.comments
        ]

        return GetCommentsResponse(
            content=threads,
            next_cursor=page.next_cursor,
            has_next=page.has_more,
        )
