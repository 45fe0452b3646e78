"""Test configuration and fixtures."""

import os
from datetime import datetime

# Must be set before any forum module builds Settings
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("SCHEDULER__ENABLED", "false")

import logfire  # noqa: E402
import pytest  # noqa: E402

from forum.domain.model import Account, Comment  # noqa: E402
from forum.domain.value import (  # noqa: E402
    AccountId,
    BoardId,
    BoardType,
    CommentId,
    Email,
    Nickname,
)

logfire.configure(send_to_logfire=False, console=False)


def make_account(account_id: int, **overrides) -> Account:
    """Build an active account snapshot for seeding repositories."""
    fields = dict(
        id=AccountId(account_id),
        email=Email(f"user{account_id}@example.com"),
        password_hash="not-a-real-hash",
        name=f"User {account_id}",
        nickname=Nickname(f"user{account_id}"),
    )
    fields.update(overrides)
    return Account(**fields)


def make_comment(
    comment_id: int,
    board_id: int = 1,
    author_id: int = 1,
    parent_comment_id: int | None = None,
    board_type: BoardType = BoardType.FREEBOARD,
    created_at: datetime | None = None,
    **overrides,
) -> Comment:
    """Build a comment snapshot for seeding repositories."""
    created = created_at or datetime(2026, 1, 1, 12, 0, 0)
    fields = dict(
        id=CommentId(comment_id),
        board_type=board_type,
        board_id=BoardId(board_id),
        parent_comment_id=CommentId(parent_comment_id) if parent_comment_id else None,
        author_id=AccountId(author_id),
        content=f"Comment {comment_id}",
        created_at=created,
        updated_at=created,
    )
    fields.update(overrides)
    return Comment(**fields)


@pytest.fixture
def now() -> datetime:
    """Fixed reference time for lifecycle tests."""
    return datetime(2026, 6, 1, 3, 0, 0)
