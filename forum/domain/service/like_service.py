"""Like domain service."""

from typing import Sequence

import logfire
from sqlalchemy.exc import IntegrityError

from forum.domain.error import ErrorCode, NotFoundError
from forum.domain.repository import BoardRepository, CommentRepository, LikeRepository
from forum.domain.value import AccountId, BoardId, CommentId, ReferenceType

from .base import Service


class LikeService(Service):
    """Domain service for like operations."""

    def __init__(
        self,
        like_repository: LikeRepository,
        comment_repository: CommentRepository,
        board_repository: BoardRepository,
    ) -> None:
        """Initialize like service.

        Args:
            like_repository: Like repository
            comment_repository: Comment repository (like counts live on comments)
            board_repository: Board lookup
        """
        self.like_repository = like_repository
        self.comment_repository = comment_repository
        self.board_repository = board_repository

    async def _ensure_target_exists(
        self, reference_type: ReferenceType, reference_id: int
    ) -> None:
        board_type = reference_type.board_type
        if board_type is None:
            comment = await self.comment_repository.find_by_id(CommentId(reference_id))
            exists = comment is not None and not comment.is_deleted
        else:
            author_id = await self.board_repository.find_author_id(
                board_type, BoardId(reference_id)
            )
            exists = author_id is not None

        if not exists:
            logfire.warn(
                "Like on non-existent target",
                reference_type=reference_type.value,
                reference_id=reference_id,
            )
            raise NotFoundError(
                ErrorCode.LIKE_TARGET_NOT_FOUND, reference_type.value, reference_id
            )

    async def toggle(
        self, user_id: AccountId, reference_type: ReferenceType, reference_id: int
    ) -> bool:
        """Like a target, or remove the like if it already exists.

        Comment like counts are adjusted with a single atomic update.

        Args:
            user_id: Account toggling the like
            reference_type: Kind of target
            reference_id: Target ID

        Returns:
            True if the target is liked after the call

        Raises:
            NotFoundError: If the target does not exist (or is a deleted comment)
        """
        with logfire.span(
            "like_service.toggle",
            user_id=user_id,
            reference_type=reference_type.value,
            reference_id=reference_id,
        ):
            await self._ensure_target_exists(reference_type, reference_id)

            removed = await self.like_repository.delete(
                user_id, reference_type, reference_id
            )
            if removed:
                if reference_type is ReferenceType.COMMENT:
                    await self.comment_repository.adjust_like_count(
                        CommentId(reference_id), -1
                    )
                logfire.info(
                    "Like removed",
                    user_id=user_id,
                    reference_type=reference_type.value,
                    reference_id=reference_id,
                )
                return False

            try:
                await self.like_repository.create(user_id, reference_type, reference_id)
            except IntegrityError:
                # A concurrent request stored the same like first
                logfire.warn(
                    "Duplicate like attempt",
                    user_id=user_id,
                    reference_type=reference_type.value,
                    reference_id=reference_id,
                )
                return True

            if reference_type is ReferenceType.COMMENT:
                await self.comment_repository.adjust_like_count(
                    CommentId(reference_id), 1
                )
            logfire.info(
                "Like added",
                user_id=user_id,
                reference_type=reference_type.value,
                reference_id=reference_id,
            )
            return True

    async def liked_ids(
        self,
        user_id: AccountId,
        reference_type: ReferenceType,
        reference_ids: Sequence[int],
    ) -> set[int]:
        """Return the subset of targets the account likes.

        Args:
            user_id: Account ID
            reference_type: Kind of target
            reference_ids: Target IDs to check

        Returns:
            Liked target IDs
        """
        if not reference_ids:
            return set()

        # Batch query to fetch all likes at once (avoid N+1)
        return await self.like_repository.find_liked_ids(
            user_id, reference_type, reference_ids
        )

    async def delete_by_reference(
        self, reference_type: ReferenceType, reference_id: int
    ) -> int:
        """Remove every like on a target.

        Returns:
            Number of likes removed
        """
        with logfire.span(
            "like_service.delete_by_reference",
            reference_type=reference_type.value,
            reference_id=reference_id,
        ):
            return await self.like_repository.delete_by_reference(
                reference_type, reference_id
            )
