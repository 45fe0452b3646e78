"""Unit tests for CommentService."""

from datetime import datetime

import pytest
import pytest_asyncio

from forum.domain.error import (
    ContentDeletedException,
    DepthLimitExceededError,
    NotAuthorizedError,
    NotFoundError,
)
from forum.domain.repository import BoardRepository, CommentRepository, LikeRepository
from forum.domain.service import CommentService
from forum.domain.value import (
    AccountId,
    BoardId,
    BoardType,
    CommentId,
    ReferenceType,
)
from tests.conftest import make_comment
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()

AUTHOR = AccountId(1)
OTHER = AccountId(2)


@pytest_asyncio.fixture
async def board(unit_env):
    """Free board post 1 written by OTHER."""
    board_repo = await unit_env.get(BoardRepository)
    board_repo.add_board(BoardType.FREEBOARD, BoardId(1), OTHER)
    return BoardType.FREEBOARD, BoardId(1)


class TestCreateComment:
    """Tests for create_comment method."""

    @pytest.mark.asyncio
    async def test_create_top_level_comment(self, unit_env, board):
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)

        # Act
        result = await comment_service.create_comment(*board, AUTHOR, "First!")

        # Assert
        assert result.id is not None
        assert result.parent_comment_id is None
        assert result.content == "First!"
        assert result.like_count == 0

        saved = await comment_repo.find_by_id(result.id)
        assert saved is not None
        assert saved.is_reply is False

    @pytest.mark.asyncio
    async def test_reply_to_top_level_comment(self, unit_env, board):
        comment_service = await unit_env.get(CommentService)
        parent = await comment_service.create_comment(*board, OTHER, "Question")

        reply = await comment_service.create_comment(
            *board, AUTHOR, "Answer", parent_comment_id=parent.id
        )

        assert reply.parent_comment_id == parent.id
        assert reply.is_reply is True

    @pytest.mark.asyncio
    async def test_reply_to_reply_raises_depth_error(self, unit_env, board):
        """Threads are at most two levels deep."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        parent = await comment_service.create_comment(*board, OTHER, "Question")
        reply = await comment_service.create_comment(
            *board, AUTHOR, "Answer", parent_comment_id=parent.id
        )

        # Act & Assert
        with pytest.raises(DepthLimitExceededError) as exc_info:
            await comment_service.create_comment(
                *board, OTHER, "Nested", parent_comment_id=reply.id
            )
        assert exc_info.value.code == "C003"

        # Nothing was written
        top_level = await comment_repo.find_top_level(*board, None, 10)
        replies = await comment_repo.find_replies([parent.id])
        assert len(top_level) == 1
        assert len(replies) == 1

    @pytest.mark.asyncio
    async def test_missing_parent_raises(self, unit_env, board):
        comment_service = await unit_env.get(CommentService)

        with pytest.raises(NotFoundError) as exc_info:
            await comment_service.create_comment(
                *board, AUTHOR, "Reply", parent_comment_id=CommentId(999)
            )
        assert exc_info.value.code == "C002"

    @pytest.mark.asyncio
    async def test_parent_on_different_board_raises(self, unit_env, board):
        comment_service = await unit_env.get(CommentService)
        board_repo = await unit_env.get(BoardRepository)
        board_repo.add_board(BoardType.CODEBOARD, BoardId(1), OTHER)
        parent = await comment_service.create_comment(
            BoardType.CODEBOARD, BoardId(1), OTHER, "Elsewhere"
        )

        with pytest.raises(NotFoundError) as exc_info:
            await comment_service.create_comment(
                *board, AUTHOR, "Reply", parent_comment_id=parent.id
            )
        assert exc_info.value.code == "C002"

    @pytest.mark.asyncio
    async def test_missing_board_raises(self, unit_env):
        comment_service = await unit_env.get(CommentService)

        with pytest.raises(NotFoundError) as exc_info:
            await comment_service.create_comment(
                BoardType.FREEBOARD, BoardId(404), AUTHOR, "Hello"
            )
        assert exc_info.value.code == "C007"


class TestUpdateComment:
    """Tests for update_comment method."""

    @pytest.mark.asyncio
    async def test_author_can_edit(self, unit_env, board):
        comment_service = await unit_env.get(CommentService)
        comment = await comment_service.create_comment(*board, AUTHOR, "Tpyo")

        updated = await comment_service.update_comment(comment.id, AUTHOR, "Typo")

        assert updated.content == "Typo"
        assert updated.updated_at >= comment.updated_at

    @pytest.mark.asyncio
    async def test_non_author_cannot_edit(self, unit_env, board):
        comment_service = await unit_env.get(CommentService)
        comment = await comment_service.create_comment(*board, AUTHOR, "Mine")

        with pytest.raises(NotAuthorizedError) as exc_info:
            await comment_service.update_comment(comment.id, OTHER, "Yours")
        assert exc_info.value.code == "C004"

    @pytest.mark.asyncio
    async def test_deleted_comment_cannot_be_edited(self, unit_env, board):
        comment_service = await unit_env.get(CommentService)
        comment = await comment_service.create_comment(*board, AUTHOR, "Gone soon")
        await comment_service.delete_comment(comment.id, AUTHOR)

        with pytest.raises(ContentDeletedException) as exc_info:
            await comment_service.update_comment(comment.id, AUTHOR, "Back")
        assert exc_info.value.code == "C006"

    @pytest.mark.asyncio
    async def test_missing_comment_raises(self, unit_env):
        comment_service = await unit_env.get(CommentService)

        with pytest.raises(NotFoundError) as exc_info:
            await comment_service.update_comment(CommentId(1), AUTHOR, "Hi")
        assert exc_info.value.code == "C001"


class TestDeleteComment:
    """Tests for delete_comment method."""

    @pytest.mark.asyncio
    async def test_soft_delete_keeps_replies_and_drops_likes(self, unit_env, board):
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        like_repo = await unit_env.get(LikeRepository)
        parent = await comment_service.create_comment(*board, AUTHOR, "Parent")
        reply = await comment_service.create_comment(
            *board, OTHER, "Reply", parent_comment_id=parent.id
        )
        await like_repo.create(OTHER, ReferenceType.COMMENT, parent.id)

        # Act
        await comment_service.delete_comment(parent.id, AUTHOR)

        # Assert
        deleted = await comment_repo.find_by_id(parent.id)
        assert deleted.is_deleted is True
        assert deleted.content == "Parent"  # Row kept as is
        assert await comment_repo.find_by_id(reply.id) is not None
        assert await like_repo.find(OTHER, ReferenceType.COMMENT, parent.id) is None

    @pytest.mark.asyncio
    async def test_non_author_cannot_delete(self, unit_env, board):
        comment_service = await unit_env.get(CommentService)
        comment = await comment_service.create_comment(*board, AUTHOR, "Mine")

        with pytest.raises(NotAuthorizedError) as exc_info:
            await comment_service.delete_comment(comment.id, OTHER)
        assert exc_info.value.code == "C005"

    @pytest.mark.asyncio
    async def test_delete_twice_raises(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        await comment_repo.save(
            make_comment(1, author_id=AUTHOR, is_deleted=True, updated_at=datetime.now())
        )

        with pytest.raises(ContentDeletedException):
            await comment_service.delete_comment(CommentId(1), AUTHOR)
