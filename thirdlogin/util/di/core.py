"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from thirdlogin.config import (
    AuthSettings,
    AvatarSettings,
    HandshakeSettings,
    PushSettings,
    Settings,
)
from thirdlogin.util.di.base import ProviderBase


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
    def provide_handshake_settings(self, settings: Settings) -> HandshakeSettings:
        """Provide handshake settings."""
        return settings.handshake

    @provide(scope=Scope.APP)
    def provide_avatar_settings(self, settings: Settings) -> AvatarSettings:
        """Provide avatar settings."""
        return settings.avatar

    @provide(scope=Scope.APP)
    def provide_push_settings(self, settings: Settings) -> PushSettings:
        """Provide push settings."""
        return settings.push
