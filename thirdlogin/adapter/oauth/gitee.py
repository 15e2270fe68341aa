"""Gitee OAuth 2.0 identity provider.

Plain authorization code flow: the browser is redirected to Gitee with our
authcode as ``state``, Gitee calls back with ``code`` and we exchange it for
an access token and fetch ``/api/v5/user``.
"""

from urllib.parse import urlencode

import httpx
import logfire
from pydantic import ValidationError

from thirdlogin.config import GiteeOAuthSettings
from thirdlogin.domain.error import ProviderExchangeError, ProviderProfileError
from thirdlogin.domain.service.identity_service import IdentityProvider
from thirdlogin.domain.value import ExternalProfile, IdentityProviderKind


class GiteeIdentityProvider(IdentityProvider):
    """Identity provider backed by Gitee OAuth."""

    kind = IdentityProviderKind.GITEE

    def __init__(
        self,
        settings: GiteeOAuthSettings,
        redirect_uri: str,
        timeout: float = 30.0,
    ) -> None:
        """Initialize Gitee identity provider.

        Args:
            settings: Gitee client credentials and endpoints
            redirect_uri: Callback URL registered with Gitee
            timeout: Transport timeout in seconds for each request
        """
        self.client_id = settings.client_id
        self.client_secret = settings.client_secret
        self.oauth_url = settings.oauth_url
        self.token_url = settings.token_url
        self.user_url = settings.user_url
        self.redirect_uri = redirect_uri
        self.timeout = timeout

    def authorization_url(self, state: str) -> str:
        """Build the Gitee authorization URL.

        Args:
            state: Authcode echoed back to the callback

        Returns:
            Authorization URL to redirect the browser to
        """
        params = {
            "client_id": self.client_id,
            "redirect_uri": self.redirect_uri,
            "response_type": "code",
            "state": state,
        }
        return f"{self.oauth_url}?{urlencode(params)}"

    async def exchange(self, code: str) -> str:
        """Exchange an authorization code for an access token.

        Args:
            code: Authorization code from the callback

        Returns:
            Access token, empty if Gitee returned none

        Raises:
            ProviderExchangeError: If the token request fails
        """
        data = {
            "grant_type": "authorization_code",
            "code": code,
            "client_id": self.client_id,
            "redirect_uri": self.redirect_uri,
            "client_secret": self.client_secret,
        }

        try:
            async with httpx.AsyncClient() as client:
                response = await client.post(
                    self.token_url,
                    data=data,
                    headers={"Accept": "application/json"},
                    timeout=self.timeout,
                )
        except httpx.HTTPError as e:
            logfire.error("Gitee token exchange HTTP error", error=str(e))
            raise ProviderExchangeError(f"HTTP error during token exchange: {e}")

        if response.status_code != 200:
            logfire.error(
                "Gitee token exchange failed",
                status_code=response.status_code,
            )
            raise ProviderExchangeError(
                f"Token exchange failed: {response.status_code}"
            )

        try:
            result = response.json()
        except ValueError as e:
            raise ProviderExchangeError(f"Token response is not JSON: {e}")

        token = result.get("access_token") if isinstance(result, dict) else None
        return token if isinstance(token, str) else ""

    async def fetch_profile(self, token: str) -> ExternalProfile:
        """Fetch the Gitee user behind ``token``.

        Args:
            token: Gitee access token

        Returns:
            Normalized profile keyed by the Gitee login

        Raises:
            ProviderProfileError: On transport failure, non-200 status or an
                unusable body
        """
        try:
            async with httpx.AsyncClient() as client:
                response = await client.get(
                    self.user_url,
                    params={"access_token": token},
                    timeout=self.timeout,
                )
        except httpx.HTTPError as e:
            logfire.error("Gitee user info HTTP error", error=str(e))
            raise ProviderProfileError(f"HTTP error fetching user info: {e}")

        if response.status_code != 200:
            logfire.error(
                "Gitee user info request failed",
                status_code=response.status_code,
            )
            raise ProviderProfileError(
                f"User info request failed: {response.status_code}"
            )

        try:
            user_info = response.json()
        except ValueError as e:
            raise ProviderProfileError(f"User info is not JSON: {e}")

        if not isinstance(user_info, dict) or not user_info.get("login"):
            raise ProviderProfileError("User info carries no login")

        try:
            return ExternalProfile(
                provider=IdentityProviderKind.GITEE,
                login=str(user_info["login"]),
                name=user_info.get("name") or "",
                avatar_url=user_info.get("avatar_url") or None,
                email=user_info.get("email") or None,
                bio=user_info.get("bio") or None,
                html_url=user_info.get("html_url") or None,
                provider_created_at=user_info.get("created_at") or None,
                raw=user_info,
            )
        except ValidationError as e:
            logfire.error("Gitee user info invalid", error=str(e))
            raise ProviderProfileError(f"User info is invalid: {e}") from e
