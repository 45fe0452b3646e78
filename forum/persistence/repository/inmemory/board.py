"""In-memory board lookup for testing."""

from typing import Optional

from forum.domain.repository import BoardRepository
from forum.domain.value import AccountId, BoardId, BoardType


class InMemoryBoardRepository(BoardRepository):
    """In-memory implementation of BoardRepository for testing."""

    def __init__(self) -> None:
        self._authors: dict[tuple[BoardType, BoardId], AccountId] = {}

    def add_board(
        self, board_type: BoardType, board_id: BoardId, author_id: AccountId
    ) -> None:
        """Register a board post (test seeding helper)."""
        self._authors[(board_type, board_id)] = author_id

    async def find_author_id(
        self, board_type: BoardType, board_id: BoardId
    ) -> Optional[AccountId]:
        """Return the author of a board post."""
        return self._authors.get((board_type, board_id))
