"""Domain model entities for the forum."""

from forum.domain.model.account import Account, NewAccount
from forum.domain.model.comment import Comment, NewComment
from forum.domain.model.like import Like

__all__ = [
    "Account",
    "Comment",
    "Like",
    "NewAccount",
    "NewComment",
]
