"""Domain layer DI providers."""

from dishka import Scope, provide
from pwdlib import PasswordHash

from forum.config import AuthSettings, LifecycleSettings, PaginationSettings
from forum.domain.repository import (
    AccountRepository,
    BoardRepository,
    CommentRepository,
    LikeRepository,
)
from forum.domain.service import (
    AccountService,
    CommentService,
    DeletionScheduler,
    JWTService,
    LifecyclePolicy,
    LikeService,
    ThreadAssembler,
)
from forum.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_password_hash(self) -> PasswordHash:
        """Provide the password hasher (Argon2 with recommended parameters)."""
        return PasswordHash.recommended()

    @provide(scope=Scope.APP)
    def get_lifecycle_policy(self) -> LifecyclePolicy:
        """Provide the stateless lifecycle policy."""
        return LifecyclePolicy()

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_account_service(
        self,
        account_repository: AccountRepository,
        lifecycle_policy: LifecyclePolicy,
        password_hash: PasswordHash,
        lifecycle_settings: LifecycleSettings,
    ) -> AccountService:
        """Provide account domain service."""
        return AccountService(
            account_repository=account_repository,
            lifecycle_policy=lifecycle_policy,
            password_hash=password_hash,
            lifecycle_settings=lifecycle_settings,
        )

    @provide
    def get_deletion_scheduler(
        self, account_repository: AccountRepository, lifecycle_policy: LifecyclePolicy
    ) -> DeletionScheduler:
        """Provide the deletion sweep."""
        return DeletionScheduler(
            account_repository=account_repository, lifecycle_policy=lifecycle_policy
        )

    @provide
    def get_thread_assembler(
        self,
        comment_repository: CommentRepository,
        pagination_settings: PaginationSettings,
    ) -> ThreadAssembler:
        """Provide comment thread assembler."""
        return ThreadAssembler(
            comment_repository=comment_repository,
            max_page_size=pagination_settings.max_size,
        )

    @provide
    def get_like_service(
        self,
        like_repository: LikeRepository,
        comment_repository: CommentRepository,
        board_repository: BoardRepository,
    ) -> LikeService:
        """Provide like domain service."""
        return LikeService(
            like_repository=like_repository,
            comment_repository=comment_repository,
            board_repository=board_repository,
        )

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        board_repository: BoardRepository,
        like_service: LikeService,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            board_repository=board_repository,
            like_service=like_service,
        )
