"""Repository interfaces for the forum domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from forum.domain.repository.account import AccountRepository
from forum.domain.repository.board import BoardRepository
from forum.domain.repository.comment import CommentRepository
from forum.domain.repository.like import LikeRepository

__all__ = [
    "AccountRepository",
    "BoardRepository",
    "CommentRepository",
    "LikeRepository",
]
