"""Unit tests for LikeService."""

import pytest
import pytest_asyncio
from sqlalchemy.exc import IntegrityError

from forum.domain.error import NotFoundError
from forum.domain.repository import (
    BoardRepository,
    CommentRepository,
    LikeRepository,
)
from forum.domain.service import LikeService
from forum.domain.value import AccountId, BoardId, BoardType, CommentId, ReferenceType
from forum.persistence.repository.inmemory import (
    InMemoryBoardRepository,
    InMemoryCommentRepository,
    InMemoryLikeRepository,
)
from tests.conftest import make_comment
from tests.harness import create_env_fixture

unit_env = create_env_fixture()

USER = AccountId(1)


class RacingLikeRepository(InMemoryLikeRepository):
    """Like repository where another request always stores the like first."""

    async def delete(self, account_id, reference_type, reference_id) -> bool:
        return False

    async def create(self, account_id, reference_type, reference_id):
        raise IntegrityError("Duplicate like", None, Exception())


@pytest_asyncio.fixture
async def comment(unit_env):
    comment_repo = await unit_env.get(CommentRepository)
    return await comment_repo.save(make_comment(1, author_id=2))


class TestToggle:
    """Tests for toggling likes."""

    @pytest.mark.asyncio
    async def test_like_then_unlike_comment(self, unit_env, comment):
        # Arrange
        like_service = await unit_env.get(LikeService)
        comment_repo = await unit_env.get(CommentRepository)

        # Act & Assert
        assert await like_service.toggle(USER, ReferenceType.COMMENT, comment.id) is True
        liked = await comment_repo.find_by_id(comment.id)
        assert liked.like_count == 1

        assert await like_service.toggle(USER, ReferenceType.COMMENT, comment.id) is False
        unliked = await comment_repo.find_by_id(comment.id)
        assert unliked.like_count == 0

    @pytest.mark.asyncio
    async def test_likes_from_different_users_add_up(self, unit_env, comment):
        like_service = await unit_env.get(LikeService)
        comment_repo = await unit_env.get(CommentRepository)

        for user_id in (1, 2, 3):
            await like_service.toggle(AccountId(user_id), ReferenceType.COMMENT, comment.id)

        assert (await comment_repo.find_by_id(comment.id)).like_count == 3

    @pytest.mark.asyncio
    async def test_like_board_post(self, unit_env):
        like_service = await unit_env.get(LikeService)
        board_repo = await unit_env.get(BoardRepository)
        like_repo = await unit_env.get(LikeRepository)
        board_repo.add_board(BoardType.CODEBOARD, BoardId(9), AccountId(2))

        result = await like_service.toggle(USER, ReferenceType.POST_CODEBOARD, 9)

        assert result is True
        assert await like_repo.find(USER, ReferenceType.POST_CODEBOARD, 9) is not None

    @pytest.mark.asyncio
    async def test_board_post_on_other_board_is_not_found(self, unit_env):
        like_service = await unit_env.get(LikeService)
        board_repo = await unit_env.get(BoardRepository)
        board_repo.add_board(BoardType.CODEBOARD, BoardId(9), AccountId(2))

        with pytest.raises(NotFoundError) as exc_info:
            await like_service.toggle(USER, ReferenceType.POST_FREEBOARD, 9)
        assert exc_info.value.code == "L001"

    @pytest.mark.asyncio
    async def test_deleted_comment_cannot_be_liked(self, unit_env):
        like_service = await unit_env.get(LikeService)
        comment_repo = await unit_env.get(CommentRepository)
        await comment_repo.save(make_comment(1, is_deleted=True))

        with pytest.raises(NotFoundError) as exc_info:
            await like_service.toggle(USER, ReferenceType.COMMENT, 1)
        assert exc_info.value.code == "L001"

    @pytest.mark.asyncio
    async def test_concurrent_duplicate_counts_as_liked(self):
        """A like stored by a racing request leaves the target liked."""
        comment_repo = InMemoryCommentRepository()
        await comment_repo.save(make_comment(1))
        like_service = LikeService(
            like_repository=RacingLikeRepository(),
            comment_repository=comment_repo,
            board_repository=InMemoryBoardRepository(),
        )

        result = await like_service.toggle(USER, ReferenceType.COMMENT, 1)

        assert result is True
        # The racing request owns the count increment
        assert (await comment_repo.find_by_id(CommentId(1))).like_count == 0


class TestLikedIds:
    """Tests for batch like lookups."""

    @pytest.mark.asyncio
    async def test_returns_only_liked_targets(self, unit_env):
        like_service = await unit_env.get(LikeService)
        like_repo = await unit_env.get(LikeRepository)
        await like_repo.create(USER, ReferenceType.COMMENT, 1)
        await like_repo.create(USER, ReferenceType.COMMENT, 3)
        await like_repo.create(AccountId(2), ReferenceType.COMMENT, 2)
        await like_repo.create(USER, ReferenceType.POST_FREEBOARD, 2)

        liked = await like_service.liked_ids(USER, ReferenceType.COMMENT, [1, 2, 3])

        assert liked == {1, 3}

    @pytest.mark.asyncio
    async def test_empty_ids(self, unit_env):
        like_service = await unit_env.get(LikeService)

        assert await like_service.liked_ids(USER, ReferenceType.COMMENT, []) == set()
