"""In-memory linked identity repository for testing."""

from typing import Optional

from thirdlogin.domain.error import DuplicateRecordError
from thirdlogin.domain.model import LinkedIdentity
from thirdlogin.domain.repository import LinkedIdentityRepository
from thirdlogin.domain.value import IdentityProviderKind

from .database import InMemoryDatabase


class InMemoryLinkedIdentityRepository(LinkedIdentityRepository):
    """In-memory implementation of LinkedIdentityRepository for testing."""

    def __init__(
        self, database: InMemoryDatabase, staged: InMemoryDatabase | None = None
    ) -> None:
        self.database = database
        self.staged = staged

    async def find_by_login(
        self, provider: IdentityProviderKind, login: str
    ) -> Optional[LinkedIdentity]:
        """Find the identity linked for a provider login."""
        if self.staged:
            staged = self.staged.find_identity(provider, login)
            if staged:
                return staged
        return self.database.find_identity(provider, login)

    async def insert(self, identity: LinkedIdentity) -> LinkedIdentity:
        """Insert a linked identity, enforcing ``(provider, login)`` uniqueness."""
        if await self.find_by_login(identity.provider, identity.login):
            raise DuplicateRecordError(
                f"Identity already linked: {identity.provider.value}:{identity.login}"
            )
        target = self.staged or self.database
        target.linked_identities[identity.id] = identity
        return identity
