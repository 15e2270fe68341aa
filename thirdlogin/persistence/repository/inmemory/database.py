"""Shared in-memory tables for testing."""

from typing import Optional

from thirdlogin.domain.model import Account, AccountSettings, LinkedIdentity
from thirdlogin.domain.value import AccountId, IdentityProviderKind, LinkedIdentityId


class InMemoryDatabase:
    """Committed rows shared by in-memory repositories and units of work."""

    def __init__(self) -> None:
        self.accounts: dict[AccountId, Account] = {}
        self.account_settings: dict[AccountId, AccountSettings] = {}
        self.linked_identities: dict[LinkedIdentityId, LinkedIdentity] = {}

    def find_identity(
        self, provider: IdentityProviderKind, login: str
    ) -> Optional[LinkedIdentity]:
        """Find a linked identity by its unique ``(provider, login)``."""
        for identity in self.linked_identities.values():
            if identity.provider == provider and identity.login == login:
                return identity
        return None

    def clear(self) -> None:
        """Drop every row."""
        self.accounts.clear()
        self.account_settings.clear()
        self.linked_identities.clear()
