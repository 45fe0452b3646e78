"""Comment domain service."""

from datetime import datetime

import logfire

from forum.domain.error import (
    ContentDeletedException,
    DepthLimitExceededError,
    ErrorCode,
    NotAuthorizedError,
    NotFoundError,
)
from forum.domain.model.comment import Comment, NewComment
from forum.domain.repository import BoardRepository, CommentRepository
from forum.domain.value import AccountId, BoardId, BoardType, CommentId, ReferenceType

from .base import Service
from .like_service import LikeService


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        board_repository: BoardRepository,
        like_service: LikeService,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            board_repository: Board lookup
            like_service: Like service (likes are dropped with their comment)
        """
        self.comment_repository = comment_repository
        self.board_repository = board_repository
        self.like_service = like_service

    async def get_board_author_id(
        self, board_type: BoardType, board_id: BoardId
    ) -> AccountId:
        """Get the author of a board post.

        Raises:
            NotFoundError: If the board post does not exist
        """
        author_id = await self.board_repository.find_author_id(board_type, board_id)
        if author_id is None:
            logfire.warn(
                "Board not found",
                board_type=board_type.value,
                board_id=board_id,
            )
            raise NotFoundError(ErrorCode.BOARD_NOT_FOUND, board_type.value, board_id)
        return author_id

    async def create_comment(
        self,
        board_type: BoardType,
        board_id: BoardId,
        author_id: AccountId,
        content: str,
        parent_comment_id: CommentId | None = None,
    ) -> Comment:
        """Create a comment on a board post or reply to a top-level comment.

        Args:
            board_type: Board kind
            board_id: Board post ID
            author_id: Author account ID
            content: Comment text
            parent_comment_id: Parent comment ID for replies (None for top-level)

        Returns:
            Created comment

        Raises:
            NotFoundError: If the board or parent comment does not exist, or the
                parent belongs to another board
            DepthLimitExceededError: If the parent is itself a reply
        """
        with logfire.span(
            "comment_service.create_comment",
            board_type=board_type.value,
            board_id=board_id,
            author_id=author_id,
            parent_comment_id=parent_comment_id,
        ):
            await self.get_board_author_id(board_type, board_id)

            if parent_comment_id is not None:
                parent = await self.comment_repository.find_by_id(parent_comment_id)
                if parent is None or (
                    parent.board_type != board_type or parent.board_id != board_id
                ):
                    logfire.error(
                        "Parent comment not found on board",
                        parent_comment_id=parent_comment_id,
                        board_type=board_type.value,
                        board_id=board_id,
                    )
                    raise NotFoundError(
                        ErrorCode.PARENT_NOT_FOUND, "comment", parent_comment_id
                    )
                if parent.is_reply:
                    logfire.warn(
                        "Reply to a reply rejected",
                        parent_comment_id=parent_comment_id,
                    )
                    raise DepthLimitExceededError()

            saved = await self.comment_repository.create(
                NewComment(
                    board_type=board_type,
                    board_id=board_id,
                    parent_comment_id=parent_comment_id,
                    author_id=author_id,
                    content=content,
                    created_at=datetime.now(),
                )
            )
            logfire.info(
                "Comment created",
                comment_id=saved.id,
                board_type=board_type.value,
                board_id=board_id,
                is_reply=saved.is_reply,
            )
            return saved

    async def get_comment_by_id(self, comment_id: CommentId) -> Comment | None:
        """Get a comment by ID.

        Args:
            comment_id: Comment ID

        Returns:
            Comment if found, None otherwise
        """
        with logfire.span("comment_service.get_comment_by_id", comment_id=comment_id):
            return await self.comment_repository.find_by_id(comment_id)

    async def _get_owned_comment(
        self, comment_id: CommentId, user_id: AccountId, denied: ErrorCode
    ) -> Comment:
        comment = await self.comment_repository.find_by_id(comment_id)
        if comment is None:
            raise NotFoundError(ErrorCode.COMMENT_NOT_FOUND, "comment", comment_id)
        if comment.author_id != user_id:
            logfire.warn(
                "Comment change by non-author rejected",
                comment_id=comment_id,
                user_id=user_id,
            )
            raise NotAuthorizedError(denied, "comment", comment_id, user_id)
        if comment.is_deleted:
            raise ContentDeletedException("comment", comment_id)
        return comment

    async def update_comment(
        self, comment_id: CommentId, user_id: AccountId, content: str
    ) -> Comment:
        """Edit the content of a comment.

        Args:
            comment_id: Comment ID
            user_id: Account requesting the edit
            content: New text

        Returns:
            Updated comment

        Raises:
            NotFoundError: If the comment does not exist
            NotAuthorizedError: If the user is not the author
            ContentDeletedException: If the comment is deleted
        """
        with logfire.span(
            "comment_service.update_comment", comment_id=comment_id, user_id=user_id
        ):
            await self._get_owned_comment(
                comment_id, user_id, ErrorCode.NO_EDIT_PERMISSION
            )

            updated = await self.comment_repository.update_content(
                comment_id, content, datetime.now()
            )
            if updated is None:
                # Deleted between the read and the guarded update
                raise ContentDeletedException("comment", comment_id)

            logfire.info(
                "Comment updated", comment_id=comment_id, content_length=len(content)
            )
            return updated

    async def delete_comment(self, comment_id: CommentId, user_id: AccountId) -> None:
        """Soft delete a comment and drop its likes.

        Replies are left in place.

        Raises:
            NotFoundError: If the comment does not exist
            NotAuthorizedError: If the user is not the author
            ContentDeletedException: If the comment is already deleted
        """
        with logfire.span(
            "comment_service.delete_comment", comment_id=comment_id, user_id=user_id
        ):
            await self._get_owned_comment(
                comment_id, user_id, ErrorCode.NO_DELETE_PERMISSION
            )

            deleted = await self.comment_repository.soft_delete(
                comment_id, datetime.now()
            )
            if not deleted:
                raise ContentDeletedException("comment", comment_id)

            removed = await self.like_service.delete_by_reference(
                ReferenceType.COMMENT, comment_id
            )
            logfire.info("Comment deleted", comment_id=comment_id, likes_removed=removed)
