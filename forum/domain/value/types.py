"""Domain value objects for the forum.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

import re
from enum import Enum

from pydantic import field_validator

from forum.domain.value.common import RootValueObject


class BoardType(str, Enum):
    """Kind of board that owns a comment."""

    FREEBOARD = "FREEBOARD"
    CODEBOARD = "CODEBOARD"


class ReferenceType(str, Enum):
    """Kind of entity that can be liked."""

    POST_FREEBOARD = "POST_FREEBOARD"
    POST_CODEBOARD = "POST_CODEBOARD"
    COMMENT = "COMMENT"

    @classmethod
    def for_board(cls, board_type: BoardType) -> "ReferenceType":
        """Reference type of a post on the given board."""
        match board_type:
            case BoardType.FREEBOARD:
                return cls.POST_FREEBOARD
            case BoardType.CODEBOARD:
                return cls.POST_CODEBOARD

    @property
    def board_type(self) -> BoardType | None:
        """Board owning the referenced post, None for comments."""
        match self:
            case ReferenceType.POST_FREEBOARD:
                return BoardType.FREEBOARD
            case ReferenceType.POST_CODEBOARD:
                return BoardType.CODEBOARD
            case ReferenceType.COMMENT:
                return None


class AccountStatus(str, Enum):
    """Lifecycle state of an account.

    Exactly one state holds at any time:
    - ACTIVE: usable, nothing scheduled
    - PENDING_DELETION: deletion scheduled, can still be restored
    - ANONYMIZED: terminal, personal data overwritten
    """

    ACTIVE = "active"
    PENDING_DELETION = "pending_deletion"
    ANONYMIZED = "anonymized"


class LoginDecision(str, Enum):
    """Outcome of the login policy check."""

    ALLOW = "allow"
    REJECT_DELETED_PENDING = "reject_deleted_pending"
    REJECT_DISABLED = "reject_disabled"


class Email(RootValueObject[str]):
    """Account email address.

    Stored and compared exactly as given (case-sensitive).
    """

    @field_validator("root")
    @classmethod
    def validate_email_format(cls, v: str) -> str:
        """Validate a minimal local@domain shape."""
        if len(v) > 255 or not re.match(r"^[^@\s]+@[^@\s]+\.[^@\s]+$", v):
            raise ValueError("Email must look like local@domain and be at most 255 characters")
        return v


class Nickname(RootValueObject[str]):
    """Public, unique account nickname."""

    @field_validator("root")
    @classmethod
    def validate_nickname(cls, v: str) -> str:
        """Validate nickname length."""
        if len(v.strip()) < 2 or len(v) > 30:
            raise ValueError("Nickname must be 2-30 characters")
        return v
