"""Unit tests for UpdateCommentUseCase and DeleteCommentUseCase."""

import pytest

from forum.application.usecase.comment import (
    DeleteCommentRequest,
    DeleteCommentUseCase,
    UpdateCommentRequest,
    UpdateCommentUseCase,
)
from forum.domain.error import ContentDeletedException, NotAuthorizedError
from forum.domain.repository import (
    AccountRepository,
    BoardRepository,
    CommentRepository,
    LikeRepository,
)
from forum.domain.value import AccountId, BoardId, BoardType, CommentId, ReferenceType
from tests.conftest import make_account, make_comment
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def seed(unit_env) -> None:
    account_repo = await unit_env.get(AccountRepository)
    board_repo = await unit_env.get(BoardRepository)
    comment_repo = await unit_env.get(CommentRepository)
    await account_repo.save(make_account(1))
    await account_repo.save(make_account(2))
    board_repo.add_board(BoardType.FREEBOARD, BoardId(1), AccountId(2))
    await comment_repo.save(make_comment(1, author_id=1))


class TestUpdateCommentUseCase:
    """Tests for UpdateCommentUseCase."""

    @pytest.mark.asyncio
    async def test_update_keeps_viewer_like(self, unit_env):
        # Arrange
        await seed(unit_env)
        like_repo = await unit_env.get(LikeRepository)
        await like_repo.create(AccountId(1), ReferenceType.COMMENT, 1)
        use_case = await unit_env.get(UpdateCommentUseCase)

        # Act
        result = await use_case.execute(
            UpdateCommentRequest(comment_id=1, user_id=1, content="Edited")
        )

        # Assert
        assert result.content == "Edited"
        assert result.is_liked is True
        assert result.is_author is False
        assert result.user_nickname == "user1"

    @pytest.mark.asyncio
    async def test_update_by_other_user_rejected(self, unit_env):
        await seed(unit_env)
        use_case = await unit_env.get(UpdateCommentUseCase)

        with pytest.raises(NotAuthorizedError):
            await use_case.execute(
                UpdateCommentRequest(comment_id=1, user_id=2, content="Edited")
            )


class TestDeleteCommentUseCase:
    """Tests for DeleteCommentUseCase."""

    @pytest.mark.asyncio
    async def test_delete_then_update_rejected(self, unit_env):
        await seed(unit_env)
        delete_use_case = await unit_env.get(DeleteCommentUseCase)
        update_use_case = await unit_env.get(UpdateCommentUseCase)
        comment_repo = await unit_env.get(CommentRepository)

        await delete_use_case.execute(DeleteCommentRequest(comment_id=1, user_id=1))

        assert (await comment_repo.find_by_id(CommentId(1))).is_deleted is True
        with pytest.raises(ContentDeletedException):
            await update_use_case.execute(
                UpdateCommentRequest(comment_id=1, user_id=1, content="Back")
            )
