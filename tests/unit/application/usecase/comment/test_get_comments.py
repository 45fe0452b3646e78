"""Unit tests for GetCommentsUseCase."""

from datetime import datetime, timedelta

import pytest
import pytest_asyncio

from forum.application.usecase.comment import GetCommentsRequest, GetCommentsUseCase
from forum.domain.error import NotFoundError
from forum.domain.repository import (
    AccountRepository,
    BoardRepository,
    CommentRepository,
    LikeRepository,
)
from forum.domain.value import AccountId, BoardId, BoardType, ReferenceType
from tests.conftest import make_account, make_comment
from tests.harness import create_env_fixture

unit_env = create_env_fixture()

BOARD_AUTHOR = AccountId(1)
COMMENTER = AccountId(2)


@pytest_asyncio.fixture
async def thread(unit_env):
    """Board 1 with two top-level comments; comment 1 has two replies."""
    account_repo = await unit_env.get(AccountRepository)
    board_repo = await unit_env.get(BoardRepository)
    comment_repo = await unit_env.get(CommentRepository)

    await account_repo.save(make_account(1))
    await account_repo.save(make_account(2))
    board_repo.add_board(BoardType.FREEBOARD, BoardId(1), BOARD_AUTHOR)

    base = datetime(2026, 1, 1, 12, 0, 0)
    await comment_repo.save(make_comment(1, author_id=COMMENTER, created_at=base))
    await comment_repo.save(
        make_comment(2, author_id=COMMENTER, created_at=base + timedelta(minutes=1))
    )
    await comment_repo.save(
        make_comment(
            3,
            author_id=BOARD_AUTHOR,
            parent_comment_id=1,
            created_at=base + timedelta(minutes=3),
        )
    )
    await comment_repo.save(
        make_comment(
            4,
            author_id=COMMENTER,
            parent_comment_id=1,
            created_at=base + timedelta(minutes=2),
            is_deleted=True,
        )
    )


class TestGetCommentsUseCase:
    """Tests for GetCommentsUseCase."""

    @pytest.mark.asyncio
    async def test_threads_newest_first_with_replies_oldest_first(
        self, unit_env, thread
    ):
        # Arrange
        use_case = await unit_env.get(GetCommentsUseCase)

        # Act
        result = await use_case.execute(
            GetCommentsRequest(board_type=BoardType.FREEBOARD, board_id=1)
        )

        # Assert
        assert [t.comment_id for t in result.content] == [2, 1]
        assert result.has_next is False
        assert result.next_cursor is None

        first = result.content[1]
        assert [r.comment_id for r in first.replies] == [4, 3]
        assert result.content[0].replies == []

    @pytest.mark.asyncio
    async def test_deleted_reply_hides_content(self, unit_env, thread):
        use_case = await unit_env.get(GetCommentsUseCase)

        result = await use_case.execute(
            GetCommentsRequest(board_type=BoardType.FREEBOARD, board_id=1)
        )

        deleted = result.content[1].replies[0]
        assert deleted.is_deleted is True
        assert deleted.content is None

    @pytest.mark.asyncio
    async def test_author_flags_and_nicknames(self, unit_env, thread):
        use_case = await unit_env.get(GetCommentsUseCase)

        result = await use_case.execute(
            GetCommentsRequest(board_type=BoardType.FREEBOARD, board_id=1)
        )

        top = result.content[1]
        board_author_reply = top.replies[1]
        assert top.is_author is False
        assert top.user_nickname == "user2"
        assert board_author_reply.is_author is True
        assert board_author_reply.user_nickname == "user1"

    @pytest.mark.asyncio
    async def test_is_liked_for_viewer(self, unit_env, thread):
        use_case = await unit_env.get(GetCommentsUseCase)
        like_repo = await unit_env.get(LikeRepository)
        await like_repo.create(BOARD_AUTHOR, ReferenceType.COMMENT, 2)
        await like_repo.create(BOARD_AUTHOR, ReferenceType.COMMENT, 3)

        as_viewer = await use_case.execute(
            GetCommentsRequest(
                board_type=BoardType.FREEBOARD, board_id=1, viewer_id=BOARD_AUTHOR
            )
        )
        anonymous = await use_case.execute(
            GetCommentsRequest(board_type=BoardType.FREEBOARD, board_id=1)
        )

        assert as_viewer.content[0].is_liked is True
        assert as_viewer.content[1].is_liked is False
        assert as_viewer.content[1].replies[1].is_liked is True
        assert all(not t.is_liked for t in anonymous.content)

    @pytest.mark.asyncio
    async def test_cursor_pagination(self, unit_env, thread):
        use_case = await unit_env.get(GetCommentsUseCase)

        first = await use_case.execute(
            GetCommentsRequest(board_type=BoardType.FREEBOARD, board_id=1, size=1)
        )
        second = await use_case.execute(
            GetCommentsRequest(
                board_type=BoardType.FREEBOARD,
                board_id=1,
                size=1,
                cursor=first.next_cursor,
            )
        )

        assert [t.comment_id for t in first.content] == [2]
        assert first.has_next is True
        assert first.next_cursor == 2
        assert [t.comment_id for t in second.content] == [1]
        assert second.has_next is False

    @pytest.mark.asyncio
    async def test_camel_case_serialization(self, unit_env, thread):
        use_case = await unit_env.get(GetCommentsUseCase)

        result = await use_case.execute(
            GetCommentsRequest(board_type=BoardType.FREEBOARD, board_id=1)
        )
        payload = result.model_dump(by_alias=True)

        assert set(payload) == {"content", "nextCursor", "hasNext"}
        assert "commentId" in payload["content"][0]
        assert "isLiked" in payload["content"][1]["replies"][0]
        assert payload["content"][1]["replies"][0]["parentCommentId"] == 1

    @pytest.mark.asyncio
    async def test_unknown_board(self, unit_env):
        use_case = await unit_env.get(GetCommentsUseCase)

        with pytest.raises(NotFoundError) as exc_info:
            await use_case.execute(
                GetCommentsRequest(board_type=BoardType.CODEBOARD, board_id=1)
            )
        assert exc_info.value.code == "C007"
