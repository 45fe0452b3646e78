"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict

from forum.domain.model import Account, Comment, Like, NewAccount, NewComment
from forum.domain.value import (
    AccountId,
    BoardId,
    BoardType,
    CommentId,
    Email,
    LikeId,
    Nickname,
    ReferenceType,
)


def row_to_account(row: Dict[str, Any]) -> Account:
    """Convert database row to Account domain model.

    Args:
        row: Database row as dict

    Returns:
        Account domain model
    """
    return Account(
        id=AccountId(row["id"]),
        email=Email(row["email"]),
        password_hash=row["password_hash"],
        name=row["name"],
        nickname=Nickname(row["nickname"]),
        image=row.get("image"),
        grade=row["grade"],
        role=row["role"],
        github_token=row.get("github_token"),
        refresh_token=row.get("refresh_token"),
        is_deleted=row["is_deleted"],
        deleted_at=row.get("deleted_at"),
        enabled=row["enabled"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def new_account_to_dict(account: NewAccount) -> Dict[str, Any]:
    """Convert NewAccount to an insert dict.

    Args:
        account: Account draft

    Returns:
        Dict suitable for database insertion
    """
    return {
        "email": account.email.root,
        "password_hash": account.password_hash,
        "name": account.name,
        "nickname": account.nickname.root,
        "image": account.image,
        "role": account.role,
        "created_at": account.created_at,
        "updated_at": account.created_at,
    }


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    parent_id = row.get("parent_comment_id")
    return Comment(
        id=CommentId(row["id"]),
        board_type=BoardType(row["board_type"]),
        board_id=BoardId(row["board_id"]),
        parent_comment_id=CommentId(parent_id) if parent_id is not None else None,
        author_id=AccountId(row["author_id"]),
        content=row["content"],
        like_count=row["like_count"],
        is_deleted=row["is_deleted"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def new_comment_to_dict(comment: NewComment) -> Dict[str, Any]:
    """Convert NewComment to an insert dict."""
    return {
        "board_type": comment.board_type.value,
        "board_id": comment.board_id,
        "parent_comment_id": comment.parent_comment_id,
        "author_id": comment.author_id,
        "content": comment.content,
        "created_at": comment.created_at,
        "updated_at": comment.created_at,
    }


def row_to_like(row: Dict[str, Any]) -> Like:
    """Convert database row to Like domain model."""
    return Like(
        id=LikeId(row["id"]),
        account_id=AccountId(row["account_id"]),
        reference_type=ReferenceType(row["reference_type"]),
        reference_id=row["reference_id"],
        created_at=row["created_at"],
    )
