"""Comment entity.

Comments belong to a board post identified by (board type, board id).
Threads are at most two levels deep: top-level comments and their direct
replies. Deleting a comment is a soft delete that keeps the row so replies
stay attached.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from forum.domain.model.common import DomainModel
from forum.domain.value import AccountId, BoardId, BoardType, CommentId

MAX_CONTENT_LENGTH = 1000


class Comment(DomainModel):
    """Comment entity.

    - parent_comment_id: None for top-level comments, otherwise the id of a
      top-level comment (replies to replies are rejected at write time)
    - like_count: maintained by single-row updates when likes are toggled
    """

    id: CommentId
    board_type: BoardType
    board_id: BoardId
    parent_comment_id: Optional[CommentId] = None
    author_id: AccountId
    content: str = Field(min_length=1, max_length=MAX_CONTENT_LENGTH)
    like_count: int = Field(default=0, ge=0)
    is_deleted: bool = False
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @property
    def is_reply(self) -> bool:
        """Whether this comment replies to another comment."""
        return self.parent_comment_id is not None


class NewComment(DomainModel):
    """Comment that has not been stored yet (id assigned by the store)."""

    board_type: BoardType
    board_id: BoardId
    parent_comment_id: Optional[CommentId] = None
    author_id: AccountId
    content: str = Field(min_length=1, max_length=MAX_CONTENT_LENGTH)
    created_at: datetime = Field(default_factory=datetime.now)
