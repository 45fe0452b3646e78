"""Application layer DI providers."""

from dishka import Scope, provide

from forum.application.usecase.account import (
    GetCurrentAccountUseCase,
    LoginUseCase,
    LogoutUseCase,
    RefreshTokenUseCase,
    RegisterAccountUseCase,
    RequestDeletionUseCase,
    RestoreAccountUseCase,
    UpdateProfileUseCase,
)
from forum.application.usecase.comment import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    GetCommentsUseCase,
    UpdateCommentUseCase,
)
from forum.application.usecase.like import ToggleLikeUseCase
from forum.domain.repository import AccountRepository
from forum.domain.service import (
    AccountService,
    CommentService,
    JWTService,
    LikeService,
    ThreadAssembler,
)
from forum.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Account use cases
    @provide(scope=Scope.REQUEST)
    def get_register_account_use_case(
        self, account_service: AccountService
    ) -> RegisterAccountUseCase:
        """Provide register account use case."""
        return RegisterAccountUseCase(account_service=account_service)

    @provide(scope=Scope.REQUEST)
    def get_login_use_case(
        self, account_service: AccountService, jwt_service: JWTService
    ) -> LoginUseCase:
        """Provide login use case."""
        return LoginUseCase(account_service=account_service, jwt_service=jwt_service)

    @provide(scope=Scope.REQUEST)
    def get_current_account_use_case(
        self, account_service: AccountService
    ) -> GetCurrentAccountUseCase:
        """Provide get current account use case."""
        return GetCurrentAccountUseCase(account_service=account_service)

    @provide(scope=Scope.REQUEST)
    def get_request_deletion_use_case(
        self, account_service: AccountService
    ) -> RequestDeletionUseCase:
        """Provide request deletion use case."""
        return RequestDeletionUseCase(account_service=account_service)

    @provide(scope=Scope.REQUEST)
    def get_restore_account_use_case(
        self, account_service: AccountService
    ) -> RestoreAccountUseCase:
        """Provide restore account use case."""
        return RestoreAccountUseCase(account_service=account_service)

    @provide(scope=Scope.REQUEST)
    def get_update_profile_use_case(
        self, account_service: AccountService
    ) -> UpdateProfileUseCase:
        """Provide update profile use case."""
        return UpdateProfileUseCase(account_service=account_service)

    @provide(scope=Scope.REQUEST)
    def get_refresh_token_use_case(
        self, account_service: AccountService, jwt_service: JWTService
    ) -> RefreshTokenUseCase:
        """Provide refresh token use case."""
        return RefreshTokenUseCase(
            account_service=account_service, jwt_service=jwt_service
        )

    @provide(scope=Scope.REQUEST)
    def get_logout_use_case(self, account_service: AccountService) -> LogoutUseCase:
        """Provide logout use case."""
        return LogoutUseCase(account_service=account_service)

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_create_comment_use_case(
        self, comment_service: CommentService, account_repository: AccountRepository
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(
            comment_service=comment_service, account_repository=account_repository
        )

    @provide(scope=Scope.REQUEST)
    def get_get_comments_use_case(
        self,
        comment_service: CommentService,
        thread_assembler: ThreadAssembler,
        like_service: LikeService,
        account_repository: AccountRepository,
    ) -> GetCommentsUseCase:
        """Provide get comments use case."""
        return GetCommentsUseCase(
            comment_service=comment_service,
            thread_assembler=thread_assembler,
            like_service=like_service,
            account_repository=account_repository,
        )

    @provide(scope=Scope.REQUEST)
    def get_update_comment_use_case(
        self,
        comment_service: CommentService,
        like_service: LikeService,
        account_repository: AccountRepository,
    ) -> UpdateCommentUseCase:
        """Provide update comment use case."""
        return UpdateCommentUseCase(
            comment_service=comment_service,
            like_service=like_service,
            account_repository=account_repository,
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_comment_use_case(
        self, comment_service: CommentService
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(comment_service=comment_service)

    # Like use cases
    @provide(scope=Scope.REQUEST)
    def get_toggle_like_use_case(self, like_service: LikeService) -> ToggleLikeUseCase:
        """Provide toggle like use case."""
        return ToggleLikeUseCase(like_service=like_service)
