"""Unit tests for the Gitee identity provider."""

from unittest.mock import AsyncMock, MagicMock, patch
from urllib.parse import parse_qs, urlparse

import httpx
import pytest

from thirdlogin.adapter.oauth import GiteeIdentityProvider
from thirdlogin.config import GiteeOAuthSettings
from thirdlogin.domain.error import ProviderExchangeError, ProviderProfileError
from thirdlogin.domain.value import IdentityProviderKind

REDIRECT_URI = "http://localhost:8000/user/thirdlogin/callback"


@pytest.fixture
def provider() -> GiteeIdentityProvider:
    return GiteeIdentityProvider(
        settings=GiteeOAuthSettings(client_id="cid", client_secret="secret"),
        redirect_uri=REDIRECT_URI,
    )


def json_response(status_code: int, body) -> MagicMock:
    response = MagicMock()
    response.status_code = status_code
    response.json.return_value = body
    return response


class TestAuthorizationUrl:
    """Tests for authorization_url method."""

    def test_authorization_url_parameters(self, provider):
        """The authorize URL carries client, callback and state."""
        url = provider.authorization_url("authcode-1")

        parsed = urlparse(url)
        params = parse_qs(parsed.query)
        assert f"{parsed.scheme}://{parsed.netloc}{parsed.path}" == (
            "https://gitee.com/oauth/authorize"
        )
        assert params["client_id"] == ["cid"]
        assert params["redirect_uri"] == [REDIRECT_URI]
        assert params["response_type"] == ["code"]
        assert params["state"] == ["authcode-1"]


class TestExchange:
    """Tests for exchange method."""

    @pytest.mark.asyncio
    async def test_exchange_returns_access_token(self, provider):
        """Should post the code and return the access token."""
        with patch("httpx.AsyncClient") as mock_client:
            post = AsyncMock(
                return_value=json_response(200, {"access_token": "gitee-token"})
            )
            mock_client.return_value.__aenter__.return_value.post = post

            token = await provider.exchange("abc123")

        assert token == "gitee-token"
        sent = post.call_args.kwargs["data"]
        assert post.call_args.args[0] == "https://gitee.com/oauth/token"
        assert sent["grant_type"] == "authorization_code"
        assert sent["code"] == "abc123"
        assert sent["client_id"] == "cid"
        assert sent["client_secret"] == "secret"
        assert sent["redirect_uri"] == REDIRECT_URI

    @pytest.mark.asyncio
    async def test_exchange_without_token_returns_empty(self, provider):
        """A body with no access token yields an empty token."""
        with patch("httpx.AsyncClient") as mock_client:
            mock_client.return_value.__aenter__.return_value.post = AsyncMock(
                return_value=json_response(200, {"error": "invalid_grant"})
            )

            token = await provider.exchange("abc123")

        assert token == ""

    @pytest.mark.asyncio
    async def test_exchange_non_200_raises(self, provider):
        with patch("httpx.AsyncClient") as mock_client:
            mock_client.return_value.__aenter__.return_value.post = AsyncMock(
                return_value=json_response(401, {})
            )

            with pytest.raises(ProviderExchangeError, match="401"):
                await provider.exchange("abc123")

    @pytest.mark.asyncio
    async def test_exchange_transport_error_raises(self, provider):
        with patch("httpx.AsyncClient") as mock_client:
            mock_client.return_value.__aenter__.return_value.post = AsyncMock(
                side_effect=httpx.ConnectError("connection refused")
            )

            with pytest.raises(ProviderExchangeError):
                await provider.exchange("abc123")

    @pytest.mark.asyncio
    async def test_exchange_non_json_raises(self, provider):
        response = MagicMock()
        response.status_code = 200
        response.json.side_effect = ValueError("Expecting value")

        with patch("httpx.AsyncClient") as mock_client:
            mock_client.return_value.__aenter__.return_value.post = AsyncMock(
                return_value=response
            )

            with pytest.raises(ProviderExchangeError):
                await provider.exchange("abc123")


class TestFetchProfile:
    """Tests for fetch_profile method."""

    @pytest.mark.asyncio
    async def test_fetch_profile_normalizes_user(self, provider):
        """Should map the Gitee user onto an external profile."""
        user = {
            "id": 42,
            "login": "octocat",
            "name": "The Octocat",
            "avatar_url": "https://gitee.com/assets/octocat.png",
            "email": None,
            "bio": "Hello",
            "html_url": "https://gitee.com/octocat",
            "created_at": "2020-01-01T00:00:00+08:00",
        }
        with patch("httpx.AsyncClient") as mock_client:
            get = AsyncMock(return_value=json_response(200, user))
            mock_client.return_value.__aenter__.return_value.get = get

            profile = await provider.fetch_profile("gitee-token")

        assert get.call_args.kwargs["params"] == {"access_token": "gitee-token"}
        assert profile.provider == IdentityProviderKind.GITEE
        assert profile.login == "octocat"
        assert profile.name == "The Octocat"
        assert profile.avatar_url == "https://gitee.com/assets/octocat.png"
        assert profile.email is None
        assert profile.bio == "Hello"
        assert profile.html_url == "https://gitee.com/octocat"
        assert profile.provider_created_at == "2020-01-01T00:00:00+08:00"
        assert profile.raw["id"] == 42

    @pytest.mark.asyncio
    async def test_fetch_profile_500_raises(self, provider):
        """A server error from the user endpoint is a profile failure."""
        with patch("httpx.AsyncClient") as mock_client:
            mock_client.return_value.__aenter__.return_value.get = AsyncMock(
                return_value=json_response(500, {})
            )

            with pytest.raises(ProviderProfileError, match="500"):
                await provider.fetch_profile("gitee-token")

    @pytest.mark.asyncio
    async def test_fetch_profile_without_login_raises(self, provider):
        with patch("httpx.AsyncClient") as mock_client:
            mock_client.return_value.__aenter__.return_value.get = AsyncMock(
                return_value=json_response(200, {"name": "No Login"})
            )

            with pytest.raises(ProviderProfileError):
                await provider.fetch_profile("gitee-token")

    @pytest.mark.asyncio
    async def test_fetch_profile_transport_error_raises(self, provider):
        with patch("httpx.AsyncClient") as mock_client:
            mock_client.return_value.__aenter__.return_value.get = AsyncMock(
                side_effect=httpx.ReadTimeout("timed out")
            )

            with pytest.raises(ProviderProfileError):
                await provider.fetch_profile("gitee-token")

    @pytest.mark.asyncio
    async def test_fetch_profile_blank_login_raises(self, provider):
        """A whitespace login is rejected as a profile failure."""
        with patch("httpx.AsyncClient") as mock_client:
            mock_client.return_value.__aenter__.return_value.get = AsyncMock(
                return_value=json_response(200, {"login": "   "})
            )

            with pytest.raises(ProviderProfileError, match="invalid"):
                await provider.fetch_profile("gitee-token")

    @pytest.mark.asyncio
    async def test_fetch_profile_wrong_field_type_raises(self, provider):
        """A field of the wrong type is a profile failure."""
        with patch("httpx.AsyncClient") as mock_client:
            mock_client.return_value.__aenter__.return_value.get = AsyncMock(
                return_value=json_response(200, {"login": "octocat", "name": 5})
            )

            with pytest.raises(ProviderProfileError, match="invalid"):
                await provider.fetch_profile("gitee-token")
