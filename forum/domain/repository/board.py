"""Board lookup interface.

Board CRUD lives outside this service; comments and likes only need to
know whether a post exists and who wrote it.
"""

from abc import ABC, abstractmethod
from typing import Optional

from forum.domain.value import AccountId, BoardId, BoardType


class BoardRepository(ABC):
    """Read-only access to board posts."""

    @abstractmethod
    async def find_author_id(
        self, board_type: BoardType, board_id: BoardId
    ) -> Optional[AccountId]:
        """Return the author of a live board post, None if it does not exist."""
        pass
