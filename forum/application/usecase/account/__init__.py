"""Account use cases."""

from .get_current_account import (
    AccountResponse,
    GetCurrentAccountRequest,
    GetCurrentAccountUseCase,
)
from .login import LoginRequest, LoginResponse, LoginUseCase
from .logout import LogoutRequest, LogoutUseCase
from .refresh_token import (
    RefreshTokenRequest,
    RefreshTokenResponse,
    RefreshTokenUseCase,
)
from .register_account import (
    RegisterAccountRequest,
    RegisterAccountResponse,
    RegisterAccountUseCase,
)
from .request_deletion import (
    RequestDeletionRequest,
    RequestDeletionResponse,
    RequestDeletionUseCase,
)
from .restore_account import RestoreAccountRequest, RestoreAccountUseCase
from .update_profile import UpdateProfileRequest, UpdateProfileUseCase

__all__ = [
    "AccountResponse",
    "GetCurrentAccountRequest",
    "GetCurrentAccountUseCase",
    "LoginRequest",
    "LoginResponse",
    "LoginUseCase",
    "LogoutRequest",
    "LogoutUseCase",
    "RefreshTokenRequest",
    "RefreshTokenResponse",
    "RefreshTokenUseCase",
    "RegisterAccountRequest",
    "RegisterAccountResponse",
    "RegisterAccountUseCase",
    "RequestDeletionRequest",
    "RequestDeletionResponse",
    "RequestDeletionUseCase",
    "RestoreAccountRequest",
    "RestoreAccountUseCase",
    "UpdateProfileRequest",
    "UpdateProfileUseCase",
]
