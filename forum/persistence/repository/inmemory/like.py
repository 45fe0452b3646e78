"""In-memory like repository for testing."""

from datetime import datetime
from typing import Optional, Sequence

from sqlalchemy.exc import IntegrityError

from forum.domain.model import Like
from forum.domain.repository import LikeRepository
from forum.domain.value import AccountId, LikeId, ReferenceType


class InMemoryLikeRepository(LikeRepository):
    """In-memory implementation of LikeRepository for testing."""

    def __init__(self) -> None:
        self._likes: list[Like] = []
        self._next_id = 1

    async def find(
        self, account_id: AccountId, reference_type: ReferenceType, reference_id: int
    ) -> Optional[Like]:
        """Find an account's like on a target."""
        for like in self._likes:
            if (
                like.account_id == account_id
                and like.reference_type == reference_type
                and like.reference_id == reference_id
            ):
                return like
        return None

    async def create(
        self, account_id: AccountId, reference_type: ReferenceType, reference_id: int
    ) -> Like:
        """Store a like.

        Raises:
            IntegrityError: If the like already exists (duplicate)
        """
        if await self.find(account_id, reference_type, reference_id):
            raise IntegrityError("Duplicate like", None, Exception())

        like = Like(
            id=LikeId(self._next_id),
            account_id=account_id,
            reference_type=reference_type,
            reference_id=reference_id,
            created_at=datetime.now(),
        )
        self._likes.append(like)
        self._next_id += 1
        return like

    async def delete(
        self, account_id: AccountId, reference_type: ReferenceType, reference_id: int
    ) -> bool:
        """Delete an account's like on a target."""
        like = await self.find(account_id, reference_type, reference_id)
        if like is None:
            return False
        self._likes.remove(like)
        return True

    async def find_liked_ids(
        self,
        account_id: AccountId,
        reference_type: ReferenceType,
        reference_ids: Sequence[int],
    ) -> set[int]:
        """Batch lookup of liked targets."""
        wanted = set(reference_ids)
        return {
            like.reference_id
            for like in self._likes
            if like.account_id == account_id
            and like.reference_type == reference_type
            and like.reference_id in wanted
        }

    async def delete_by_reference(
        self, reference_type: ReferenceType, reference_id: int
    ) -> int:
        """Delete every like on a target."""
        before = len(self._likes)
        self._likes = [
            like
            for like in self._likes
            if not (
                like.reference_type == reference_type
                and like.reference_id == reference_id
            )
        ]
        return before - len(self._likes)
