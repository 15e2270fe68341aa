"""Identity provider infrastructure providers."""

from dishka import Scope, provide

from thirdlogin.adapter.oauth import GiteeIdentityProvider, MallIdentityProvider
from thirdlogin.config import Settings
from thirdlogin.domain.service import IdentityProvider
from thirdlogin.util.di.base import ProviderBase
from thirdlogin.util.error import ConfigurationError


class OAuthProvider(ProviderBase):
    """Identity component base."""

    __mock_component__ = "identity"


class ProdOAuthProvider(OAuthProvider):
    """Production identity provider, selected by ``AUTH__PROVIDER``."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_identity_provider(self, settings: Settings) -> IdentityProvider:
        """Provide the configured external identity provider.

        Returns:
            Gitee or commerce identity provider

        Raises:
            ConfigurationError: If Gitee OAuth credentials are not configured
        """
        auth = settings.auth
        if auth.provider == "mall":
            return MallIdentityProvider(auth.mall, timeout=auth.http_timeout_seconds)

        if not auth.gitee.client_id:
            raise ConfigurationError("AUTH__GITEE__CLIENT_ID", "must be configured")
        if not auth.gitee.client_secret:
            raise ConfigurationError("AUTH__GITEE__CLIENT_SECRET", "must be configured")

        return GiteeIdentityProvider(
            auth.gitee,
            redirect_uri=auth.callback_url,
            timeout=auth.http_timeout_seconds,
        )
