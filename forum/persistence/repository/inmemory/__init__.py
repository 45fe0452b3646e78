"""In-memory repository implementations for testing."""

from .account import InMemoryAccountRepository
from .board import InMemoryBoardRepository
from .comment import InMemoryCommentRepository
from .like import InMemoryLikeRepository

__all__ = [
    "InMemoryAccountRepository",
    "InMemoryBoardRepository",
    "InMemoryCommentRepository",
    "InMemoryLikeRepository",
]
