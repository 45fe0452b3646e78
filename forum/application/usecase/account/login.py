"""Login use case."""

from forum.application.usecase.base import BaseUseCase, CamelModel
from forum.domain.service import AccountService, JWTService


class LoginRequest(CamelModel):
    """Email/password login request."""

    email: str
    password: str


class LoginResponse(CamelModel):
    """Login response."""

    token: str
    refresh_token: str
    account_id: int
    nickname: str


class LoginUseCase(BaseUseCase):
    """Use case for email/password login."""

    def __init__(self, account_service: AccountService, jwt_service: JWTService) -> None:
        """Initialize login use case.

        Args:
            account_service: Account domain service
            jwt_service: JWT token domain service
        """
        self.account_service = account_service
        self.jwt_service = jwt_service

    async def execute(self, request: LoginRequest) -> LoginResponse:
        """Authenticate and issue an access token and a refresh token.

        Accounts pending deletion or disabled are refused by the lifecycle
        policy before any token is issued. The refresh token is stored on the
        account, replacing the one from any earlier login.

        Raises:
            NotFoundError: If no account uses the email
            BusinessRuleViolationError: If the password does not match
            LoginRejectedError: If the lifecycle policy refuses the login
        """
        account = await self.account_service.authenticate(
            request.email, request.password
        )
        email = account.email.root
        token = self.jwt_service.create_token(account.id, email)
        refresh_token = self.jwt_service.create_refresh_token(account.id, email)
        await self.account_service.store_refresh_token(account.id, refresh_token)
        return LoginResponse(
            token=token,
            refresh_token=refresh_token,
            account_id=account.id,
            nickname=account.nickname.root,
        )
