"""Comment repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional, Sequence

from forum.domain.model.comment import Comment, NewComment
from forum.domain.value import BoardId, BoardType, CommentId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_top_level(
        self,
        board_type: BoardType,
        board_id: BoardId,
        before_id: Optional[CommentId],
        limit: int,
    ) -> List[Comment]:
        """Find top-level comments of a board, newest first.

        Soft-deleted comments are included so threads keep their shape.

        Args:
            board_type: Board kind
            board_id: Board post ID
            before_id: When set, only comments with id strictly below it
            limit: Maximum number of rows

        Returns:
            Comments ordered by id descending
        """
        pass

    @abstractmethod
    async def find_replies(self, parent_ids: Sequence[CommentId]) -> List[Comment]:
        """Find the direct replies of several parents in one query.

        Args:
            parent_ids: Parent comment IDs

        Returns:
            Replies ordered by creation time, then id
        """
        pass

    @abstractmethod
    async def create(self, comment: NewComment) -> Comment:
        """Insert a comment and return it with its assigned id."""
        pass

    @abstractmethod
    async def update_content(
        self, comment_id: CommentId, content: str, now: datetime
    ) -> Optional[Comment]:
        """Update the content of a comment that is not deleted.

        Returns:
            The updated comment, or None if missing or deleted
        """
        pass

    @abstractmethod
    async def soft_delete(self, comment_id: CommentId, now: datetime) -> bool:
        """Mark a comment deleted if it is not already.

        Returns:
            True if a row was updated
        """
        pass

    @abstractmethod
    async def adjust_like_count(self, comment_id: CommentId, delta: int) -> None:
        """Atomically add ``delta`` to the like count (never below 0)."""
        pass
