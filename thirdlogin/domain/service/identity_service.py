"""Identity resolution domain service."""

import logfire

from thirdlogin.domain.error import ProviderExchangeError
from thirdlogin.domain.value import ExternalProfile, IdentityProviderKind

from .base import Service


class IdentityProvider:
    """External identity provider interface.

    One implementation is active per deployment. Implementations make a
    single round trip per call and never retry.
    """

    kind: IdentityProviderKind

    def authorization_url(self, state: str) -> str:
        """Build the provider URL the browser is redirected to.

        Args:
            state: Opaque value the provider echoes back to the callback

        Returns:
            Authorization URL

        Raises:
            ProviderExchangeError: If the provider has no redirect step
        """
        raise NotImplementedError

    async def exchange(self, code: str) -> str:
        """Exchange an authorization code for an access token.

        Args:
            code: Authorization code from the provider callback

        Returns:
            Access token, empty if the provider returned none

        Raises:
            ProviderExchangeError: If the exchange request fails
        """
        raise NotImplementedError

    async def fetch_profile(self, token: str) -> ExternalProfile:
        """Fetch and normalize the provider profile.

        Args:
            token: Access token from ``exchange``

        Returns:
            Normalized external profile

        Raises:
            ProviderProfileError: On non-success status or unusable body
        """
        raise NotImplementedError


class IdentityService(Service):
    """Domain service resolving authorization codes into external profiles."""

    def __init__(self, identity_provider: IdentityProvider) -> None:
        """Initialize identity service.

        Args:
            identity_provider: The configured external identity provider
        """
        self.identity_provider = identity_provider

    def authorization_url(self, state: str) -> str:
        """Authorization URL carrying ``state`` through the provider."""
        return self.identity_provider.authorization_url(state)

    async def resolve(self, code: str) -> ExternalProfile:
        """Resolve an authorization code into a normalized profile.

        Args:
            code: Authorization code from the provider callback

        Returns:
            Normalized external profile

        Raises:
            ProviderExchangeError: If no usable access token is obtained
            ProviderProfileError: If the profile cannot be fetched
        """
        provider = self.identity_provider.kind.value
        with logfire.span("identity_service.resolve", provider=provider):
            token = await self.identity_provider.exchange(code)
            if not token:
                logfire.error("Provider returned no access token", provider=provider)
                raise ProviderExchangeError(f"{provider} returned no access token")

            profile = await self.identity_provider.fetch_profile(token)
            logfire.info(
                "External identity resolved",
                provider=provider,
                login=profile.login,
            )
            return profile
