"""Strongly typed identifiers for forum domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting. All identifiers are database
assigned integers.
"""

from typing import NewType

AccountId = NewType("AccountId", int)
CommentId = NewType("CommentId", int)
BoardId = NewType("BoardId", int)
LikeId = NewType("LikeId", int)
