"""PostgreSQL implementation of Account repository."""

from datetime import datetime
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from forum.domain.model import Account, NewAccount
from forum.domain.repository import AccountRepository
from forum.domain.value import AccountId
from forum.persistence.mappers import new_account_to_dict, row_to_account
from forum.persistence.tables import accounts_table


class PostgresAccountRepository(AccountRepository):
    """PostgreSQL implementation of AccountRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _find_one(self, *conditions) -> Optional[Account]:
        stmt = select(accounts_table).where(*conditions)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_account(row._asdict()) if row else None

    async def find_by_id(self, account_id: AccountId) -> Optional[Account]:
        """Find an account by ID."""
        return await self._find_one(accounts_table.c.id == account_id)

    async def find_by_email(self, email: str) -> Optional[Account]:
        """Find an account by email."""
        return await self._find_one(accounts_table.c.email == email)

    async def find_by_nickname(self, nickname: str) -> Optional[Account]:
        """Find an account by nickname."""
        return await self._find_one(accounts_table.c.nickname == nickname)

    async def find_by_ids(self, account_ids: List[AccountId]) -> List[Account]:
        """Find several accounts in one query."""
        if not account_ids:
            return []
        stmt = select(accounts_table).where(accounts_table.c.id.in_(account_ids))
        result = await self.session.execute(stmt)
        return [row_to_account(row._asdict()) for row in result.fetchall()]

    async def create(self, account: NewAccount) -> Account:
        """Insert an account and return it with its generated id."""
        stmt = (
            accounts_table.insert()
            .values(**new_account_to_dict(account))
            .returning(accounts_table)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return row_to_account(result.one()._asdict())

    async def _update_live(self, account_id: AccountId, *conditions, **values) -> bool:
        """Single-row update that never touches an anonymized account."""
        stmt = (
            accounts_table.update()
            .where(accounts_table.c.id == account_id)
            .where(accounts_table.c.is_deleted.is_(False))
            .where(*conditions)
            .values(**values)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0

    async def update_profile(
        self,
        account_id: AccountId,
        name: str,
        nickname: str,
        image: Optional[str],
        now: datetime,
    ) -> bool:
        """Overwrite name, nickname and image of a non-anonymized account."""
        return await self._update_live(
            account_id, name=name, nickname=nickname, image=image, updated_at=now
        )

    async def store_refresh_token(
        self, account_id: AccountId, token: Optional[str]
    ) -> bool:
        """Replace the stored refresh token."""
        return await self._update_live(account_id, refresh_token=token)

    async def rotate_refresh_token(
        self, account_id: AccountId, current: str, replacement: str
    ) -> bool:
        """Swap the refresh token if it still matches."""
        return await self._update_live(
            account_id,
            accounts_table.c.refresh_token == current,
            refresh_token=replacement,
        )

    async def schedule_deletion(
        self, account_id: AccountId, deleted_at: datetime
    ) -> bool:
        """Set deleted_at on a non-anonymized account and revoke its refresh token."""
        return await self._update_live(
            account_id,
            deleted_at=deleted_at,
            refresh_token=None,
            updated_at=datetime.now(),
        )

    async def clear_deletion(self, account_id: AccountId) -> bool:
        """Clear deleted_at on a non-anonymized account."""
        return await self._update_live(
            account_id, deleted_at=None, updated_at=datetime.now()
        )

    async def find_due_for_anonymization(self, now: datetime) -> List[Account]:
        """Find scheduled accounts with deleted_at <= now."""
        stmt = (
            select(accounts_table)
            .where(accounts_table.c.deleted_at.is_not(None))
            .where(accounts_table.c.deleted_at <= now)
            .where(accounts_table.c.is_deleted.is_(False))
            .order_by(accounts_table.c.id)
        )
        result = await self.session.execute(stmt)
        return [row_to_account(row._asdict()) for row in result.fetchall()]

    async def anonymize(
        self, account_id: AccountId, email: str, name: str, now: datetime
    ) -> bool:
        """Soft delete and anonymize one account inside a savepoint.

        A failing statement rolls back only this account's savepoint, so the
        surrounding sweep transaction stays usable.
        """
        stmt = (
            accounts_table.update()
            .where(accounts_table.c.id == account_id)
            .where(accounts_table.c.is_deleted.is_(False))
            .values(
                is_deleted=True,
                enabled=False,
                email=email,
                name=name,
                github_token=None,
                refresh_token=None,
                updated_at=now,
            )
        )
        async with self.session.begin_nested():
            result = await self.session.execute(stmt)
        return result.rowcount > 0
