"""PostgreSQL implementation of Comment repository."""

from datetime import datetime
from typing import List, Optional, Sequence

from sqlalchemy import case, desc, select
from sqlalchemy.ext.asyncio import AsyncSession

from forum.domain.model import Comment, NewComment
from forum.domain.repository import CommentRepository
from forum.domain.value import BoardId, BoardType, CommentId
from forum.persistence.mappers import new_comment_to_dict, row_to_comment
from forum.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_top_level(
        self,
        board_type: BoardType,
        board_id: BoardId,
        before_id: Optional[CommentId],
        limit: int,
    ) -> List[Comment]:
        """Find top-level comments of a board, id descending."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.board_type == board_type.value)
            .where(comments_table.c.board_id == board_id)
            .where(comments_table.c.parent_comment_id.is_(None))
        )

        if before_id is not None:
            stmt = stmt.where(comments_table.c.id < before_id)

        stmt = stmt.order_by(desc(comments_table.c.id)).limit(limit)

        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def find_replies(self, parent_ids: Sequence[CommentId]) -> List[Comment]:
        """Find direct replies of several parents, oldest first."""
        if not parent_ids:
            return []

        stmt = (
            select(comments_table)
            .where(comments_table.c.parent_comment_id.in_(list(parent_ids)))
            .order_by(comments_table.c.created_at, comments_table.c.id)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def create(self, comment: NewComment) -> Comment:
        """Insert a comment and return it with its generated id."""
        stmt = (
            comments_table.insert()
            .values(**new_comment_to_dict(comment))
            .returning(comments_table)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return row_to_comment(result.one()._asdict())

    async def update_content(
        self, comment_id: CommentId, content: str, now: datetime
    ) -> Optional[Comment]:
        """Update content of a non-deleted comment."""
        stmt = (
            comments_table.update()
            .where(comments_table.c.id == comment_id)
            .where(comments_table.c.is_deleted.is_(False))
            .values(content=content, updated_at=now)
            .returning(comments_table)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def soft_delete(self, comment_id: CommentId, now: datetime) -> bool:
        """Mark a comment deleted if it is not already."""
        stmt = (
            comments_table.update()
            .where(comments_table.c.id == comment_id)
            .where(comments_table.c.is_deleted.is_(False))
            .values(is_deleted=True, updated_at=now)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0

    async def adjust_like_count(self, comment_id: CommentId, delta: int) -> None:
        """Atomically adjust like_count, clamped at 0."""
        new_count = comments_table.c.like_count + delta
        stmt = (
            comments_table.update()
            .where(comments_table.c.id == comment_id)
            .values(like_count=case((new_count < 0, 0), else_=new_count))
        )
        await self.session.execute(stmt)
        await self.session.flush()
