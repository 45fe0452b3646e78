"""Account aggregate root.

Accounts move through a small lifecycle: active, pending deletion (a grace
window during which the owner may restore the account), and anonymized
(terminal soft delete with personal data overwritten).
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from forum.domain.model.common import DomainModel
from forum.domain.value import AccountId, AccountStatus, Email, Nickname


class Account(DomainModel):
    """Registered user account."""

    id: AccountId
    email: Email
    password_hash: str
    name: str
    nickname: Nickname
    image: Optional[str] = None
    grade: int = Field(default=1, ge=0)
    role: str = "ROLE_USER"
    github_token: Optional[str] = None
    refresh_token: Optional[str] = None
    is_deleted: bool = False
    deleted_at: Optional[datetime] = None  # Set when deletion is scheduled
    enabled: bool = True
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @property
    def status(self) -> AccountStatus:
        """Current lifecycle state derived from the lifecycle fields."""
        if self.is_deleted:
            return AccountStatus.ANONYMIZED
        if self.deleted_at is not None:
            return AccountStatus.PENDING_DELETION
        return AccountStatus.ACTIVE


class NewAccount(DomainModel):
    """Account that has not been stored yet (id assigned by the store)."""

    email: Email
    password_hash: str
    name: str
    nickname: Nickname
    image: Optional[str] = None
    role: str = "ROLE_USER"
    created_at: datetime = Field(default_factory=datetime.now)
