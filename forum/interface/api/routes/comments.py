"""Comment routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query, Request
from pydantic import Field

from forum.application.usecase.base import CamelModel
from forum.application.usecase.comment import (
    CommentResponse,
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentUseCase,
    GetCommentsRequest,
    GetCommentsResponse,
    GetCommentsUseCase,
    UpdateCommentRequest,
    UpdateCommentUseCase,
)
from forum.config import Settings
from forum.domain.model.comment import MAX_CONTENT_LENGTH
from forum.domain.service import AccountService, JWTService
from forum.domain.value import BoardType
from forum.interface.api.auth import optional_account_id, require_active_account_id
from forum.interface.api.response import ApiResponse, ok

router = APIRouter(prefix="/comment", tags=["comments"], route_class=DishkaRoute)


class CreateCommentAPIRequest(CamelModel):
    """API request for creating a comment."""

    board_type: BoardType
    board_id: int
    content: str = Field(min_length=1, max_length=MAX_CONTENT_LENGTH)
    parent_comment_id: int | None = None  # Parent comment ID for replies


class UpdateCommentAPIRequest(CamelModel):
    """API request for updating a comment."""

    content: str = Field(min_length=1, max_length=MAX_CONTENT_LENGTH)


@router.post("", response_model=ApiResponse[CreateCommentResponse])
async def create_comment(
    request: CreateCommentAPIRequest,
    http_request: Request,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    account_service: FromDishka[AccountService],
    settings: FromDishka[Settings],
) -> ApiResponse[CreateCommentResponse]:
    """Create a comment on a board post or reply to a top-level comment.

    Requires an active account: a token whose account is pending deletion
    is refused with U101. Replies to replies are rejected with C003.
    """
    author_id = await require_active_account_id(
        http_request, settings.auth, jwt_service, account_service
    )
    result = await create_comment_use_case.execute(
        CreateCommentRequest(
            board_type=request.board_type,
            board_id=request.board_id,
            author_id=author_id,
            content=request.content,
            parent_comment_id=request.parent_comment_id,
        )
    )
    return ok(result)


@router.get("", response_model=ApiResponse[GetCommentsResponse])
async def get_comments(
    http_request: Request,
    get_comments_use_case: FromDishka[GetCommentsUseCase],
    jwt_service: FromDishka[JWTService],
    settings: FromDishka[Settings],
    board_type: BoardType = Query(alias="boardType"),
    board_id: int = Query(alias="boardId"),
    cursor: int | None = Query(default=None),
    size: int | None = Query(default=None),
) -> ApiResponse[GetCommentsResponse]:
    """Get a page of comment threads for a board post.

    Top-level comments come newest first; pass the returned ``nextCursor``
    as ``cursor`` for the next page. Each thread carries its replies oldest
    first. Authentication is optional and only fills ``isLiked``.
    """
    viewer_id = optional_account_id(http_request, settings.auth, jwt_service)
    result = await get_comments_use_case.execute(
        GetCommentsRequest(
            board_type=board_type,
            board_id=board_id,
            cursor=cursor,
            size=size if size is not None else settings.pagination.default_size,
            viewer_id=viewer_id,
        )
    )
    return ok(result)


@router.put("/{comment_id}", response_model=ApiResponse[CommentResponse])
async def update_comment(
    comment_id: int,
    request: UpdateCommentAPIRequest,
    http_request: Request,
    update_comment_use_case: FromDishka[UpdateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    account_service: FromDishka[AccountService],
    settings: FromDishka[Settings],
) -> ApiResponse[CommentResponse]:
    """Edit a comment. Only the author can edit, and never a deleted comment."""
    user_id = await require_active_account_id(
        http_request, settings.auth, jwt_service, account_service
    )
    result = await update_comment_use_case.execute(
        UpdateCommentRequest(
            comment_id=comment_id, user_id=user_id, content=request.content
        )
    )
    return ok(result)


@router.delete("/{comment_id}", response_model=ApiResponse[None])
async def delete_comment(
    comment_id: int,
    http_request: Request,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    jwt_service: FromDishka[JWTService],
    account_service: FromDishka[AccountService],
    settings: FromDishka[Settings],
) -> ApiResponse[None]:
    """Soft delete a comment. Replies stay in place."""
    user_id = await require_active_account_id(
        http_request, settings.auth, jwt_service, account_service
    )
    await delete_comment_use_case.execute(
        DeleteCommentRequest(comment_id=comment_id, user_id=user_id)
    )
    return ok()
