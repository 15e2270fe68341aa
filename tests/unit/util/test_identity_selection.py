"""Unit tests for identity provider selection."""

import pytest

from thirdlogin.adapter.oauth import GiteeIdentityProvider, MallIdentityProvider
from thirdlogin.config import AuthSettings, GiteeOAuthSettings, Settings
from thirdlogin.util.di.infrastructure.identity import ProdOAuthProvider
from thirdlogin.util.error import ConfigurationError

GITEE_CREDENTIALS = GiteeOAuthSettings(client_id="cid", client_secret="secret")


def select(auth: AuthSettings):
    return ProdOAuthProvider().get_identity_provider(Settings(auth=auth))


class TestIdentitySelection:
    """Tests for ProdOAuthProvider."""

    def test_gitee_selected(self):
        provider = select(AuthSettings(provider="gitee", gitee=GITEE_CREDENTIALS))

        assert isinstance(provider, GiteeIdentityProvider)
        assert provider.redirect_uri.endswith("/user/thirdlogin/callback")

    def test_mall_selected(self):
        assert isinstance(select(AuthSettings(provider="mall")), MallIdentityProvider)

    def test_gitee_with_default_settings_rejected(self):
        """Gitee cannot be selected with the shipped empty credentials."""
        with pytest.raises(ConfigurationError) as exc_info:
            select(AuthSettings(provider="gitee"))

        assert exc_info.value.setting == "AUTH__GITEE__CLIENT_ID"

    def test_gitee_without_secret_rejected(self):
        auth = AuthSettings(
            provider="gitee", gitee=GiteeOAuthSettings(client_id="cid")
        )

        with pytest.raises(ConfigurationError) as exc_info:
            select(auth)

        assert exc_info.value.setting == "AUTH__GITEE__CLIENT_SECRET"
