"""Like routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request

from forum.application.usecase.like import (
    ToggleLikeRequest,
    ToggleLikeResponse,
    ToggleLikeUseCase,
)
from forum.config import Settings
from forum.domain.service import AccountService, JWTService
from forum.domain.value import ReferenceType
from forum.interface.api.auth import require_active_account_id
from forum.interface.api.response import ApiResponse, ok

router = APIRouter(prefix="/like", tags=["likes"], route_class=DishkaRoute)


@router.post(
    "/{reference_type}/{reference_id}", response_model=ApiResponse[ToggleLikeResponse]
)
async def toggle_like(
    reference_type: ReferenceType,
    reference_id: int,
    http_request: Request,
    toggle_like_use_case: FromDishka[ToggleLikeUseCase],
    jwt_service: FromDishka[JWTService],
    account_service: FromDishka[AccountService],
    settings: FromDishka[Settings],
) -> ApiResponse[ToggleLikeResponse]:
    """Like a board post or comment, or remove an existing like.

    Args:
        reference_type: POST_FREEBOARD, POST_CODEBOARD or COMMENT
        reference_id: Target ID

    Returns:
        ``{"isLiked": bool}`` after the toggle
    """
    user_id = await require_active_account_id(
        http_request, settings.auth, jwt_service, account_service
    )
    result = await toggle_like_use_case.execute(
        ToggleLikeRequest(
            user_id=user_id, reference_type=reference_type, reference_id=reference_id
        )
    )
    return ok(result)
