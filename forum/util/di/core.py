"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from forum.config import (
    AuthSettings,
    LifecycleSettings,
    PaginationSettings,
    SchedulerSettings,
    Settings,
)
from forum.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        """Provide auth settings."""
        return settings.auth

    @provide(scope=Scope.APP)
    def provide_lifecycle_settings(self, settings: Settings) -> LifecycleSettings:
        """Provide account lifecycle settings."""
        return settings.lifecycle

    @provide(scope=Scope.APP)
    def provide_scheduler_settings(self, settings: Settings) -> SchedulerSettings:
        """Provide background job settings."""
        return settings.scheduler

    @provide(scope=Scope.APP)
    def provide_pagination_settings(self, settings: Settings) -> PaginationSettings:
        """Provide comment pagination settings."""
        return settings.pagination
