"""PostgreSQL implementation of the board lookup."""

from typing import Optional

from sqlalchemy import Table, select
from sqlalchemy.ext.asyncio import AsyncSession

from forum.domain.repository import BoardRepository
from forum.domain.value import AccountId, BoardId, BoardType
from forum.persistence.tables import codeboards_table, freeboards_table


def _board_table(board_type: BoardType) -> Table:
    match board_type:
        case BoardType.FREEBOARD:
            return freeboards_table
        case BoardType.CODEBOARD:
            return codeboards_table


class PostgresBoardRepository(BoardRepository):
    """Reads board authors from the freeboard and codeboard tables."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_author_id(
        self, board_type: BoardType, board_id: BoardId
    ) -> Optional[AccountId]:
        """Return the author of a live board post."""
        table = _board_table(board_type)
        stmt = (
            select(table.c.user_id)
            .where(table.c.id == board_id)
            .where(table.c.is_deleted.is_(False))
        )
        result = await self.session.execute(stmt)
        author_id = result.scalar_one_or_none()
        return AccountId(author_id) if author_id is not None else None
