"""Domain value objects for the forum."""

from forum.domain.value.identifiers import AccountId, BoardId, CommentId, LikeId
from forum.domain.value.types import (
    AccountStatus,
    BoardType,
    Email,
    LoginDecision,
    Nickname,
    ReferenceType,
)

__all__ = [
    # Identifiers
    "AccountId",
    "BoardId",
    "CommentId",
    "LikeId",
    # Types
    "AccountStatus",
    "BoardType",
    "Email",
    "LoginDecision",
    "Nickname",
    "ReferenceType",
]
