"""In-memory comment repository for testing."""

from datetime import datetime
from typing import List, Optional, Sequence

from forum.domain.model import Comment, NewComment
from forum.domain.repository import CommentRepository
from forum.domain.value import BoardId, BoardType, CommentId


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}
        self._next_id = 1

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_top_level(
        self,
        board_type: BoardType,
        board_id: BoardId,
        before_id: Optional[CommentId],
        limit: int,
    ) -> List[Comment]:
        """Find top-level comments of a board, id descending."""
        matching = [
            c
            for c in self._comments.values()
            if c.board_type == board_type
            and c.board_id == board_id
            and c.parent_comment_id is None
            and (before_id is None or c.id < before_id)
        ]
        matching.sort(key=lambda c: c.id, reverse=True)
        return matching[:limit]

    async def find_replies(self, parent_ids: Sequence[CommentId]) -> List[Comment]:
        """Find direct replies of several parents, oldest first."""
        parents = set(parent_ids)
        replies = [c for c in self._comments.values() if c.parent_comment_id in parents]
        return sorted(replies, key=lambda c: (c.created_at, c.id))

    async def create(self, comment: NewComment) -> Comment:
        """Store a comment with the next sequential id."""
        created = Comment(
            id=CommentId(self._next_id),
            board_type=comment.board_type,
            board_id=comment.board_id,
            parent_comment_id=comment.parent_comment_id,
            author_id=comment.author_id,
            content=comment.content,
            created_at=comment.created_at,
            updated_at=comment.created_at,
        )
        self._comments[created.id] = created
        self._next_id += 1
        return created

    async def save(self, comment: Comment) -> Comment:
        """Store a comment snapshot as is (test seeding helper)."""
        self._comments[comment.id] = comment
        self._next_id = max(self._next_id, comment.id + 1)
        return comment

    async def update_content(
        self, comment_id: CommentId, content: str, now: datetime
    ) -> Optional[Comment]:
        """Update content of a non-deleted comment."""
        comment = self._comments.get(comment_id)
        if comment is None or comment.is_deleted:
            return None
        updated = comment.model_copy(update={"content": content, "updated_at": now})
        self._comments[comment_id] = updated
        return updated

    async def soft_delete(self, comment_id: CommentId, now: datetime) -> bool:
        """Mark a comment deleted if it is not already."""
        comment = self._comments.get(comment_id)
        if comment is None or comment.is_deleted:
            return False
        self._comments[comment_id] = comment.model_copy(
            update={"is_deleted": True, "updated_at": now}
        )
        return True

    async def adjust_like_count(self, comment_id: CommentId, delta: int) -> None:
        """Adjust like_count, clamped at 0."""
        comment = self._comments.get(comment_id)
        if comment is None:
            return
        self._comments[comment_id] = comment.model_copy(
            update={"like_count": max(0, comment.like_count + delta)}
        )
