"""Account repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from forum.domain.model.account import Account, NewAccount
from forum.domain.value import AccountId


class AccountRepository(ABC):
    """Repository for the Account aggregate.

    Lifecycle mutations are single-row updates that report whether a row
    changed, so callers can detect lost races and failed writes.
    """

    @abstractmethod
    async def find_by_id(self, account_id: AccountId) -> Optional[Account]:
        """Find an account by ID.

        Args:
            account_id: The account's unique identifier

        Returns:
            The account if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[Account]:
        """Find an account by exact email match."""
        pass

    @abstractmethod
    async def find_by_nickname(self, nickname: str) -> Optional[Account]:
        """Find an account by exact nickname match."""
        pass

    @abstractmethod
    async def find_by_ids(self, account_ids: List[AccountId]) -> List[Account]:
        """Find several accounts in one query (missing ids are skipped)."""
        pass

    @abstractmethod
    async def create(self, account: NewAccount) -> Account:
        """Insert a new account and return it with its assigned id.

        The stored account is active: enabled, not deleted, nothing scheduled.
        """
        pass

    @abstractmethod
    async def update_profile(
        self,
        account_id: AccountId,
        name: str,
        nickname: str,
        image: Optional[str],
        now: datetime,
    ) -> bool:
        """Overwrite the public profile of a non-anonymized account.

        Raises:
            IntegrityError: If the nickname was taken concurrently (Postgres)

        Returns:
            True if a row was updated
        """
        pass

    @abstractmethod
    async def store_refresh_token(
        self, account_id: AccountId, token: Optional[str]
    ) -> bool:
        """Replace the stored refresh token (None revokes it).

        Returns:
            True if a non-anonymized account was updated
        """
        pass

    @abstractmethod
    async def rotate_refresh_token(
        self, account_id: AccountId, current: str, replacement: str
    ) -> bool:
        """Swap the stored refresh token only if it still equals ``current``.

        A token that was already rotated, revoked or never stored updates
        nothing, which is how reuse of an old refresh token is detected.

        Returns:
            True if a row was updated
        """
        pass

    @abstractmethod
    async def schedule_deletion(
        self, account_id: AccountId, deleted_at: datetime
    ) -> bool:
        """Set the scheduled deletion time and revoke the refresh token.

        Args:
            account_id: Account to update
            deleted_at: Moment the account becomes eligible for anonymization

        Returns:
            True if a row was updated
        """
        pass

    @abstractmethod
    async def clear_deletion(self, account_id: AccountId) -> bool:
        """Clear a scheduled deletion (restore).

        Only non-anonymized accounts are affected.

        Returns:
            True if a row was updated
        """
        pass

    @abstractmethod
    async def find_due_for_anonymization(self, now: datetime) -> List[Account]:
        """Find accounts whose grace window has elapsed.

        Candidates have ``deleted_at <= now`` and are not yet anonymized.

        Args:
            now: Reference time

        Returns:
            Accounts ordered by id
        """
        pass

    @abstractmethod
    async def anonymize(
        self, account_id: AccountId, email: str, name: str, now: datetime
    ) -> bool:
        """Soft delete and anonymize an account in one row update.

        Sets ``is_deleted``, disables the account, overwrites email and name,
        and drops stored tokens. Accounts that are already anonymized are
        left untouched.

        Returns:
            True if a row was updated
        """
        pass
