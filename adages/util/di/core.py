"""Core DI providers (not swappable)."""

from dishka import Scope, provide

from adages.config import (
    AuthSettings,
    CommendationSettings,
    PersistenceSettings,
    Settings,
)
from adages.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Config provider.

    Settings are loaded from environment variables and .env file unless a
    prebuilt ``Settings`` is handed in.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        super().__init__()
        self._settings = settings

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings."""
        return self._settings or Settings()

    @provide(scope=Scope.APP)
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        """Provide auth settings."""
        return settings.auth

    @provide(scope=Scope.APP)
    def provide_persistence_settings(self, settings: Settings) -> PersistenceSettings:
        """Provide persistence settings."""
        return settings.persistence

    @provide(scope=Scope.APP)
    def provide_commendation_settings(
        self, settings: Settings
    ) -> CommendationSettings:
        """Provide commendation settings."""
        return settings.commendations
