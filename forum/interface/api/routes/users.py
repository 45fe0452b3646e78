"""Account routes: registration, login, profile and the deletion lifecycle."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request, Response
from pydantic import ConfigDict, Field, field_validator

from forum.application.usecase.account import (
    AccountResponse,
    GetCurrentAccountRequest,
    GetCurrentAccountUseCase,
    LoginRequest,
    LoginResponse,
    LoginUseCase,
    LogoutRequest,
    LogoutUseCase,
    RefreshTokenRequest,
    RefreshTokenResponse,
    RefreshTokenUseCase,
    RegisterAccountRequest,
    RegisterAccountResponse,
    RegisterAccountUseCase,
    RequestDeletionRequest,
    RequestDeletionResponse,
    RequestDeletionUseCase,
    RestoreAccountRequest,
    RestoreAccountUseCase,
    UpdateProfileRequest,
    UpdateProfileUseCase,
)
from forum.application.usecase.base import CamelModel
from forum.config import Settings
from forum.domain.service import AccountService, JWTService
from forum.interface.api.auth import (
    optional_account_id,
    require_account_id,
    require_active_account_id,
)
from forum.interface.api.response import ApiResponse, ok

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)


class UpdateProfileAPIRequest(CamelModel):
    """API request for updating the caller's profile.

    Omitted or blank name and nickname keep their current values.
    """

    model_config = ConfigDict(str_strip_whitespace=True)

    name: str | None = Field(default=None, max_length=100)
    nickname: str | None = Field(default=None, max_length=30)
    image: str | None = None

    @field_validator("name", "nickname")
    @classmethod
    def blank_keeps_current(cls, v: str | None) -> str | None:
        return v or None

    @field_validator("nickname")
    @classmethod
    def nickname_length(cls, v: str | None) -> str | None:
        if v is not None and len(v) < 2:
            raise ValueError("Nickname must be 2-30 characters")
        return v


def _set_auth_cookie(response: Response, token: str, settings: Settings) -> None:
    response.set_cookie(
        key=settings.auth.cookie_name,
        value=token,
        httponly=True,
        secure=settings.environment == "production",
        samesite="lax",
        max_age=settings.auth.jwt_expiry_days * 24 * 60 * 60,
    )


@router.post("/register", response_model=ApiResponse[RegisterAccountResponse])
async def register(
    request: RegisterAccountRequest,
    register_use_case: FromDishka[RegisterAccountUseCase],
) -> ApiResponse[RegisterAccountResponse]:
    """Register a new account.

    Args:
        request: Email, password, name and nickname
        register_use_case: Register account use case from DI

    Returns:
        The created account's id and public fields
    """
    return ok(await register_use_case.execute(request))


@router.post("/login", response_model=ApiResponse[LoginResponse])
async def login(
    request: LoginRequest,
    response: Response,
    login_use_case: FromDishka[LoginUseCase],
    settings: FromDishka[Settings],
) -> ApiResponse[LoginResponse]:
    """Log in with email and password.

    The access token is returned in the body and set as an HTTP-only
    cookie; the refresh token is returned in the body only.
    Accounts pending deletion are refused with U101 and must be restored
    through ``POST /users/restore`` first.
    """
    result = await login_use_case.execute(request)
    _set_auth_cookie(response, result.token, settings)
    return ok(result)


@router.post("/refresh", response_model=ApiResponse[RefreshTokenResponse])
async def refresh(
    request: RefreshTokenRequest,
    response: Response,
    refresh_use_case: FromDishka[RefreshTokenUseCase],
    settings: FromDishka[Settings],
) -> ApiResponse[RefreshTokenResponse]:
    """Exchange a refresh token for a new access token and refresh token.

    The presented refresh token stops working; presenting it again fails
    with U106. The new access token is also set as the auth cookie.
    """
    result = await refresh_use_case.execute(request)
    _set_auth_cookie(response, result.token, settings)
    return ok(result)


@router.post("/logout", response_model=ApiResponse[None])
async def logout(
    http_request: Request,
    response: Response,
    logout_use_case: FromDishka[LogoutUseCase],
    jwt_service: FromDishka[JWTService],
    settings: FromDishka[Settings],
) -> ApiResponse[None]:
    """Clear the auth cookie and revoke the stored refresh token."""
    account_id = optional_account_id(http_request, settings.auth, jwt_service)
    await logout_use_case.execute(LogoutRequest(account_id=account_id))
    response.delete_cookie(key=settings.auth.cookie_name, samesite="lax")
    return ok()


@router.get("/me", response_model=ApiResponse[AccountResponse])
async def get_me(
    http_request: Request,
    get_account_use_case: FromDishka[GetCurrentAccountUseCase],
    jwt_service: FromDishka[JWTService],
    settings: FromDishka[Settings],
) -> ApiResponse[AccountResponse]:
    """Get the authenticated account."""
    account_id = require_account_id(http_request, settings.auth, jwt_service)
    return ok(
        await get_account_use_case.execute(
            GetCurrentAccountRequest(account_id=account_id)
        )
    )


@router.put("/me", response_model=ApiResponse[AccountResponse])
async def update_me(
    request: UpdateProfileAPIRequest,
    http_request: Request,
    update_profile_use_case: FromDishka[UpdateProfileUseCase],
    account_service: FromDishka[AccountService],
    jwt_service: FromDishka[JWTService],
    settings: FromDishka[Settings],
) -> ApiResponse[AccountResponse]:
    """Change the caller's name, nickname or avatar.

    Nicknames are unique (USER002). Accounts pending deletion are refused
    with U101.
    """
    account_id = await require_active_account_id(
        http_request, settings.auth, jwt_service, account_service
    )
    result = await update_profile_use_case.execute(
        UpdateProfileRequest(
            account_id=account_id,
            name=request.name,
            nickname=request.nickname,
            image=request.image,
        )
    )
    return ok(result)


@router.delete("/me", response_model=ApiResponse[RequestDeletionResponse])
async def delete_me(
    http_request: Request,
    response: Response,
    request_deletion_use_case: FromDishka[RequestDeletionUseCase],
    jwt_service: FromDishka[JWTService],
    settings: FromDishka[Settings],
) -> ApiResponse[RequestDeletionResponse]:
    """Schedule the authenticated account for deletion.

    The account is anonymized by the first deletion sweep after the grace
    window; until then it can be restored. The session cookie is cleared.
    """
    account_id = require_account_id(http_request, settings.auth, jwt_service)
    result = await request_deletion_use_case.execute(
        RequestDeletionRequest(account_id=account_id)
    )
    response.delete_cookie(key=settings.auth.cookie_name, samesite="lax")
    return ok(result)


@router.post("/restore", response_model=ApiResponse[AccountResponse])
async def restore(
    request: RestoreAccountRequest,
    restore_use_case: FromDishka[RestoreAccountUseCase],
) -> ApiResponse[AccountResponse]:
    """Cancel a scheduled deletion using the account's credentials."""
    return ok(await restore_use_case.execute(request))
