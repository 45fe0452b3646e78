"""In-memory account repository for testing."""

from datetime import datetime
from typing import List, Optional

from forum.domain.model import Account, NewAccount
from forum.domain.repository import AccountRepository
from forum.domain.value import AccountId, Email, Nickname


class InMemoryAccountRepository(AccountRepository):
    """In-memory implementation of AccountRepository for testing."""

    def __init__(self) -> None:
        self._accounts: dict[AccountId, Account] = {}
        self._next_id = 1

    async def find_by_id(self, account_id: AccountId) -> Optional[Account]:
        """Find an account by ID."""
        return self._accounts.get(account_id)

    async def find_by_email(self, email: str) -> Optional[Account]:
        """Find an account by email."""
        for account in self._accounts.values():
            if account.email.root == email:
                return account
        return None

    async def find_by_nickname(self, nickname: str) -> Optional[Account]:
        """Find an account by nickname."""
        for account in self._accounts.values():
            if account.nickname.root == nickname:
                return account
        return None

    async def find_by_ids(self, account_ids: List[AccountId]) -> List[Account]:
        """Find several accounts."""
        return [self._accounts[i] for i in account_ids if i in self._accounts]

    async def create(self, account: NewAccount) -> Account:
        """Store an account with the next sequential id."""
        created = Account(
            id=AccountId(self._next_id),
            email=account.email,
            password_hash=account.password_hash,
            name=account.name,
            nickname=account.nickname,
            image=account.image,
            role=account.role,
            created_at=account.created_at,
            updated_at=account.created_at,
        )
        self._accounts[created.id] = created
        self._next_id += 1
        return created

    async def save(self, account: Account) -> Account:
        """Store an account snapshot as is (test seeding helper)."""
        self._accounts[account.id] = account
        self._next_id = max(self._next_id, account.id + 1)
        return account

    def _update(self, account_id: AccountId, **changes) -> bool:
        account = self._accounts.get(account_id)
        if account is None or account.is_deleted:
            return False
        self._accounts[account_id] = account.model_copy(update=changes)
        return True

    async def update_profile(
        self,
        account_id: AccountId,
        name: str,
        nickname: str,
        image: Optional[str],
        now: datetime,
    ) -> bool:
        """Overwrite name, nickname and image of a non-anonymized account."""
        return self._update(
            account_id,
            name=name,
            nickname=Nickname(nickname),
            image=image,
            updated_at=now,
        )

    async def store_refresh_token(
        self, account_id: AccountId, token: Optional[str]
    ) -> bool:
        """Replace the stored refresh token."""
        return self._update(account_id, refresh_token=token)

    async def rotate_refresh_token(
        self, account_id: AccountId, current: str, replacement: str
    ) -> bool:
        """Swap the refresh token if it still matches."""
        account = self._accounts.get(account_id)
        if account is None or account.refresh_token != current:
            return False
        return self._update(account_id, refresh_token=replacement)

    async def schedule_deletion(
        self, account_id: AccountId, deleted_at: datetime
    ) -> bool:
        """Set deleted_at on a non-anonymized account and revoke its refresh token."""
        return self._update(
            account_id,
            deleted_at=deleted_at,
            refresh_token=None,
            updated_at=datetime.now(),
        )

    async def clear_deletion(self, account_id: AccountId) -> bool:
        """Clear deleted_at on a non-anonymized account."""
        return self._update(account_id, deleted_at=None, updated_at=datetime.now())

    async def find_due_for_anonymization(self, now: datetime) -> List[Account]:
        """Find scheduled accounts with deleted_at <= now."""
        return sorted(
            (
                a
                for a in self._accounts.values()
                if a.deleted_at is not None and a.deleted_at <= now and not a.is_deleted
            ),
            key=lambda a: a.id,
        )

    async def anonymize(
        self, account_id: AccountId, email: str, name: str, now: datetime
    ) -> bool:
        """Soft delete and anonymize one account."""
        return self._update(
            account_id,
            is_deleted=True,
            enabled=False,
            email=Email(email),
            name=name,
            github_token=None,
            refresh_token=None,
            updated_at=now,
        )
