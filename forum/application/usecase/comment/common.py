"""Comment response models shared by the comment use cases."""

from datetime import datetime

from forum.application.usecase.base import CamelModel
from forum.domain.model import Comment
from forum.domain.value import BoardType


class CommentResponse(CamelModel):
    """Single comment as shown to a viewer.

    Deleted comments keep their place in the thread but their content is
    withheld.
    """

    comment_id: int
    board_type: BoardType
    board_id: int
    parent_comment_id: int | None
    user_id: int
    user_nickname: str | None
    content: str | None
    like_count: int
    is_liked: bool
    is_author: bool  # Written by the board post's author
    is_deleted: bool
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_comment(
        cls,
        comment: Comment,
        nickname: str | None,
        is_liked: bool,
        board_author_id: int | None,
    ) -> "CommentResponse":
        """Build the response for one comment."""
        return cls(
            comment_id=comment.id,
            board_type=comment.board_type,
            board_id=comment.board_id,
            parent_comment_id=comment.parent_comment_id,
            user_id=comment.author_id,
            user_nickname=nickname,
            content=None if comment.is_deleted else comment.content,
            like_count=comment.like_count,
            is_liked=is_liked,
            is_author=comment.author_id == board_author_id,
            is_deleted=comment.is_deleted,
            created_at=comment.created_at,
            updated_at=comment.updated_at,
        )


class CommentThreadResponse(CommentResponse):
    """Top-level comment with its direct replies (oldest first)."""

    replies: list[CommentResponse]
