"""Domain layer errors.

Every domain error carries an ErrorCode: a stable client-facing code, a
default message, and the kind of failure. The interface layer turns the code
into the response envelope; the domain never deals with HTTP.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Abstract failure category."""

    BUSINESS_RULE = "business_rule"
    NOT_FOUND = "not_found"


class ErrorCode(Enum):
    """Client-facing error codes."""

    # Accounts
    EMAIL_DUPLICATE = ("USER001", "Email is already in use.", ErrorKind.BUSINESS_RULE)
    NICKNAME_DUPLICATE = (
        "USER002",
        "Nickname is already in use.",
        ErrorKind.BUSINESS_RULE,
    )
    ACCOUNT_NOT_FOUND = ("USER003", "Account not found.", ErrorKind.NOT_FOUND)
    INVALID_PASSWORD = ("USER004", "Password does not match.", ErrorKind.BUSINESS_RULE)
    ALREADY_SCHEDULED_DELETE = (
        "U100",
        "Account deletion is already scheduled.",
        ErrorKind.BUSINESS_RULE,
    )
    ACCOUNT_PENDING_DELETE = (
        "U101",
        "Account is scheduled for deletion. Restore it to log in again.",
        ErrorKind.BUSINESS_RULE,
    )
    ACCOUNT_DISABLED = ("U102", "Account is disabled.", ErrorKind.BUSINESS_RULE)
    DELETE_NOT_SCHEDULED = (
        "U103",
        "Account deletion is not scheduled.",
        ErrorKind.BUSINESS_RULE,
    )
    GRACE_WINDOW_NOT_EXPIRED = (
        "U104",
        "Deletion grace window has not expired yet.",
        ErrorKind.BUSINESS_RULE,
    )
    ACCOUNT_ANONYMIZED = (
        "U105",
        "Account has already been deleted.",
        ErrorKind.BUSINESS_RULE,
    )
    INVALID_REFRESH_TOKEN = (
        "U106",
        "Refresh token is invalid or has been revoked.",
        ErrorKind.BUSINESS_RULE,
    )
    UPDATE_FAIL = ("U502", "Failed to update account.", ErrorKind.BUSINESS_RULE)

    # Comments
    COMMENT_NOT_FOUND = ("C001", "Comment not found.", ErrorKind.NOT_FOUND)
    PARENT_NOT_FOUND = ("C002", "Parent comment not found.", ErrorKind.NOT_FOUND)
    DEPTH_LIMIT_EXCEEDED = (
        "C003",
        "Replies cannot be replied to.",
        ErrorKind.BUSINESS_RULE,
    )
    NO_EDIT_PERMISSION = (
        "C004",
        "Only the author can edit this comment.",
        ErrorKind.BUSINESS_RULE,
    )
    NO_DELETE_PERMISSION = (
        "C005",
        "Only the author can delete this comment.",
        ErrorKind.BUSINESS_RULE,
    )
    ALREADY_DELETED = ("C006", "Comment has been deleted.", ErrorKind.BUSINESS_RULE)
    BOARD_NOT_FOUND = ("C007", "Board post not found.", ErrorKind.NOT_FOUND)

    # Likes
    LIKE_TARGET_NOT_FOUND = ("L001", "Like target not found.", ErrorKind.NOT_FOUND)

    def __init__(self, code: str, message: str, kind: ErrorKind) -> None:
        self.code = code
        self.message = message
        self.kind = kind


class DomainError(Exception):
    """Base domain error."""

    def __init__(self, error_code: ErrorCode, message: str | None = None) -> None:
        self.error_code = error_code
        self.message = message or error_code.message
        super().__init__(self.message)

    @property
    def code(self) -> str:
        """Client-facing error code."""
        return self.error_code.code


class BusinessRuleViolationError(DomainError):
    """Business rule violation error."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(
        self, error_code: ErrorCode, resource: str, identifier: object
    ) -> None:
        self.resource = resource
        self.identifier = identifier
        super().__init__(error_code, f"{error_code.message} ({resource} {identifier})")


class AlreadyScheduledError(BusinessRuleViolationError):
    """Deletion was requested while an unexpired schedule exists."""

    def __init__(self) -> None:
        super().__init__(ErrorCode.ALREADY_SCHEDULED_DELETE)


class NotScheduledError(BusinessRuleViolationError):
    """Restore or anonymize on an account with nothing scheduled."""

    def __init__(self) -> None:
        super().__init__(ErrorCode.DELETE_NOT_SCHEDULED)


class GraceWindowNotExpiredError(BusinessRuleViolationError):
    """Anonymization attempted before the scheduled deletion time."""

    def __init__(self) -> None:
        super().__init__(ErrorCode.GRACE_WINDOW_NOT_EXPIRED)


class AccountAnonymizedError(BusinessRuleViolationError):
    """Lifecycle transition attempted on an anonymized (terminal) account."""

    def __init__(self) -> None:
        super().__init__(ErrorCode.ACCOUNT_ANONYMIZED)


class LoginRejectedError(BusinessRuleViolationError):
    """Login or token use refused by the lifecycle policy."""

    pass


class InvalidRefreshTokenError(BusinessRuleViolationError):
    """Refresh token is malformed, expired, or no longer the stored one."""

    def __init__(self) -> None:
        super().__init__(ErrorCode.INVALID_REFRESH_TOKEN)


class DepthLimitExceededError(BusinessRuleViolationError):
    """Raised when replying to a comment that is itself a reply."""

    def __init__(self) -> None:
        super().__init__(ErrorCode.DEPTH_LIMIT_EXCEEDED)


class NotAuthorizedError(BusinessRuleViolationError):
    """Raised when a user attempts to change content they don't own."""

    def __init__(
        self, error_code: ErrorCode, resource: str, resource_id: object, user_id: object
    ) -> None:
        super().__init__(
            error_code,
            f"{error_code.message} (user {user_id}, {resource} {resource_id})",
        )


class ContentDeletedException(BusinessRuleViolationError):
    """Raised when attempting to edit or delete already deleted content."""

    def __init__(self, resource: str, resource_id: object) -> None:
        super().__init__(
            ErrorCode.ALREADY_DELETED, f"Cannot modify deleted {resource} {resource_id}"
        )
