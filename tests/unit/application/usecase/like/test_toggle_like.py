"""Unit tests for ToggleLikeUseCase."""

import pytest

from forum.application.usecase.like import ToggleLikeRequest, ToggleLikeUseCase
from forum.domain.error import NotFoundError
from forum.domain.repository import BoardRepository
from forum.domain.value import AccountId, BoardId, BoardType, ReferenceType
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestToggleLikeUseCase:
    """Tests for ToggleLikeUseCase."""

    @pytest.mark.asyncio
    async def test_toggle_twice_returns_to_unliked(self, unit_env):
        board_repo = await unit_env.get(BoardRepository)
        board_repo.add_board(BoardType.FREEBOARD, BoardId(5), AccountId(2))
        use_case = await unit_env.get(ToggleLikeUseCase)
        request = ToggleLikeRequest(
            user_id=1, reference_type=ReferenceType.POST_FREEBOARD, reference_id=5
        )

        first = await use_case.execute(request)
        second = await use_case.execute(request)

        assert first.is_liked is True
        assert second.is_liked is False
        assert first.model_dump(by_alias=True) == {"isLiked": True}

    @pytest.mark.asyncio
    async def test_missing_target(self, unit_env):
        use_case = await unit_env.get(ToggleLikeUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                ToggleLikeRequest(
                    user_id=1, reference_type=ReferenceType.COMMENT, reference_id=77
                )
            )
