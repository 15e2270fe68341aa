"""Commerce platform identity provider.

The commerce app hands the browser a user token directly, so there is no
code exchange and no redirect step: the token is sent as-is to the
environment's user endpoint.
"""

import httpx
import logfire
from pydantic import ValidationError

from thirdlogin.config import MallOAuthSettings
from thirdlogin.domain.error import ProviderExchangeError, ProviderProfileError
from thirdlogin.domain.service.identity_service import IdentityProvider
from thirdlogin.domain.value import ExternalProfile, IdentityProviderKind

# Envelope code for a successful lookup
SUCCESS_CODE = 200


class MallIdentityProvider(IdentityProvider):
    """Identity provider backed by the commerce platform user service."""

    kind = IdentityProviderKind.MALL

    def __init__(self, settings: MallOAuthSettings, timeout: float = 30.0) -> None:
        """Initialize commerce identity provider.

        Args:
            settings: Commerce user endpoint for this environment
            timeout: Transport timeout in seconds
        """
        self.user_url = settings.user_url
        self.timeout = timeout

    def authorization_url(self, state: str) -> str:
        """Commerce logins start inside the commerce app."""
        raise ProviderExchangeError("Commerce login has no authorization redirect")

    async def exchange(self, code: str) -> str:
        """The commerce token is already the access token."""
        return code

    async def fetch_profile(self, token: str) -> ExternalProfile:
        """Fetch the commerce user behind ``token``.

        Args:
            token: Commerce user token

        Returns:
            Normalized profile keyed by the commerce user ID

        Raises:
            ProviderProfileError: On transport failure, non-200 status, an
                error envelope or an unusable body
        """
        headers = {
            "Accept": "*/*",
            "Accept-Language": "zh_hant",
            "Platform": "IM",
            "Content-Type": "application/json",
            "Authorization": token,
        }

        try:
            async with httpx.AsyncClient() as client:
                response = await client.get(
                    self.user_url, headers=headers, timeout=self.timeout
                )
        except httpx.HTTPError as e:
            logfire.error("Commerce user info HTTP error", error=str(e))
            raise ProviderProfileError(f"HTTP error fetching user info: {e}")

        if response.status_code != 200:
            logfire.error(
                "Commerce user info request failed",
                status_code=response.status_code,
            )
            raise ProviderProfileError(
                f"User info request failed: {response.status_code}"
            )

        try:
            envelope = response.json()
        except ValueError as e:
            raise ProviderProfileError(f"User info is not JSON: {e}")

        if not isinstance(envelope, dict):
            raise ProviderProfileError("User info envelope is not an object")

        if envelope.get("code") != SUCCESS_CODE:
            logfire.error(
                "Commerce user lookup rejected",
                code=envelope.get("code"),
                message=envelope.get("message"),
            )
            raise ProviderProfileError(
                f"User lookup failed: {envelope.get('code')} {envelope.get('message')}"
            )

        data = envelope.get("data") or {}
        if not isinstance(data, dict) or not data.get("userId"):
            raise ProviderProfileError("User info carries no userId")

        try:
            return ExternalProfile(
                provider=IdentityProviderKind.MALL,
                login=str(data["userId"]),
                name=data.get("nickname") or "",
                avatar_url=data.get("photo") or None,
                email=data.get("email") or None,
                bio=data.get("description") or None,
                provider_created_at=data.get("createTime") or None,
                raw=data,
            )
        except ValidationError as e:
            logfire.error("Commerce user info invalid", error=str(e))
            raise ProviderProfileError(f"User info is invalid: {e}") from e
