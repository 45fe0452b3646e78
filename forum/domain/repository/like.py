"""Like repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from forum.domain.model.like import Like
from forum.domain.value import AccountId, ReferenceType


class LikeRepository(ABC):
    """Repository for Like entity."""

    @abstractmethod
    async def find(
        self, account_id: AccountId, reference_type: ReferenceType, reference_id: int
    ) -> Optional[Like]:
        """Find an account's like on a target."""
        pass

    @abstractmethod
    async def create(
        self, account_id: AccountId, reference_type: ReferenceType, reference_id: int
    ) -> Like:
        """Store a like.

        Raises:
            IntegrityError: If the account already likes the target
        """
        pass

    @abstractmethod
    async def delete(
        self, account_id: AccountId, reference_type: ReferenceType, reference_id: int
    ) -> bool:
        """Delete an account's like on a target.

        Returns:
            True if a like was deleted
        """
        pass

    @abstractmethod
    async def find_liked_ids(
        self,
        account_id: AccountId,
        reference_type: ReferenceType,
        reference_ids: Sequence[int],
    ) -> set[int]:
        """Batch lookup of the targets an account likes."""
        pass

    @abstractmethod
    async def delete_by_reference(
        self, reference_type: ReferenceType, reference_id: int
    ) -> int:
        """Delete every like on a target.

        Returns:
            Number of likes removed
        """
        pass
