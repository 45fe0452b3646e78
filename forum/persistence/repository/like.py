"""PostgreSQL implementation of Like repository."""

from datetime import datetime
from typing import Optional, Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from forum.domain.model import Like
from forum.domain.repository import LikeRepository
from forum.domain.value import AccountId, ReferenceType
from forum.persistence.mappers import row_to_like
from forum.persistence.tables import likes_table


class PostgresLikeRepository(LikeRepository):
    """PostgreSQL implementation of LikeRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    def _matches(
        self, account_id: AccountId, reference_type: ReferenceType, reference_id: int
    ):
        return (
            likes_table.c.account_id == account_id,
            likes_table.c.reference_type == reference_type.value,
            likes_table.c.reference_id == reference_id,
        )

    async def find(
        self, account_id: AccountId, reference_type: ReferenceType, reference_id: int
    ) -> Optional[Like]:
        """Find an account's like on a target."""
        stmt = select(likes_table).where(
            *self._matches(account_id, reference_type, reference_id)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_like(row._asdict()) if row else None

    async def create(
        self, account_id: AccountId, reference_type: ReferenceType, reference_id: int
    ) -> Like:
        """Insert a like.

        Runs in a savepoint so a duplicate (IntegrityError) leaves the
        request transaction usable.
        """
        stmt = (
            likes_table.insert()
            .values(
                account_id=account_id,
                reference_type=reference_type.value,
                reference_id=reference_id,
                created_at=datetime.now(),
            )
            .returning(likes_table)
        )
        async with self.session.begin_nested():
            result = await self.session.execute(stmt)
        return row_to_like(result.one()._asdict())

    async def delete(
        self, account_id: AccountId, reference_type: ReferenceType, reference_id: int
    ) -> bool:
        """Delete an account's like on a target."""
        stmt = likes_table.delete().where(
            *self._matches(account_id, reference_type, reference_id)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0

    async def find_liked_ids(
        self,
        account_id: AccountId,
        reference_type: ReferenceType,
        reference_ids: Sequence[int],
    ) -> set[int]:
        """Batch lookup of liked targets."""
        if not reference_ids:
            return set()

        stmt = (
            select(likes_table.c.reference_id)
            .where(likes_table.c.account_id == account_id)
            .where(likes_table.c.reference_type == reference_type.value)
            .where(likes_table.c.reference_id.in_(list(reference_ids)))
        )
        result = await self.session.execute(stmt)
        return set(result.scalars().all())

    async def delete_by_reference(
        self, reference_type: ReferenceType, reference_id: int
    ) -> int:
        """Delete every like on a target."""
        stmt = (
            likes_table.delete()
            .where(likes_table.c.reference_type == reference_type.value)
            .where(likes_table.c.reference_id == reference_id)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount
