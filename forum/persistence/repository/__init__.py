"""PostgreSQL repository implementations."""

from forum.persistence.repository.account import PostgresAccountRepository
from forum.persistence.repository.board import PostgresBoardRepository
from forum.persistence.repository.comment import PostgresCommentRepository
from forum.persistence.repository.like import PostgresLikeRepository

__all__ = [
    "PostgresAccountRepository",
    "PostgresBoardRepository",
    "PostgresCommentRepository",
    "PostgresLikeRepository",
]
