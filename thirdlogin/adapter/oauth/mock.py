"""Mock identity provider for testing."""

from thirdlogin.domain.error import ProviderExchangeError, ProviderProfileError
from thirdlogin.domain.service.identity_service import IdentityProvider
from thirdlogin.domain.value import ExternalProfile, IdentityProviderKind


class MockIdentityProvider(IdentityProvider):
    """Returns a configurable profile without making real API calls.

    Tests swap ``profile`` or set ``exchange_error`` / ``profile_error`` to
    drive the failure paths.
    """

    kind = IdentityProviderKind.GITEE

    def __init__(self) -> None:
        self.profile = ExternalProfile(
            provider=IdentityProviderKind.GITEE,
            login="mockuser",
            name="Mock User",
            avatar_url="https://gitee.com/assets/mock-avatar.png",
            email="mock@example.com",
        )
        self.exchange_error: ProviderExchangeError | None = None
        self.profile_error: ProviderProfileError | None = None
        self.exchanged_codes: list[str] = []

    def authorization_url(self, state: str) -> str:
        """Return mock authorization URL."""
        return f"https://gitee.com/oauth/authorize?state={state}&mock=true"

    async def exchange(self, code: str) -> str:
        """Return a token derived from ``code``."""
        self.exchanged_codes.append(code)
        if self.exchange_error:
            raise self.exchange_error
        return f"token-{code}"

    async def fetch_profile(self, token: str) -> ExternalProfile:
        """Return the configured profile."""
        if self.profile_error:
            raise self.profile_error
        return self.profile
