"""Linked identity repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from thirdlogin.domain.model import LinkedIdentity
from thirdlogin.domain.value import IdentityProviderKind


class LinkedIdentityRepository(ABC):
    """Repository for LinkedIdentity entities.

    The store enforces uniqueness of ``(provider, login)``; ``insert`` raises
    ``DuplicateRecordError`` when that constraint is violated.
    """

    @abstractmethod
    async def find_by_login(
        self, provider: IdentityProviderKind, login: str
    ) -> Optional[LinkedIdentity]:
        """Find the identity linked for a provider login.

        Args:
            provider: The identity provider
            login: The user's stable login on that provider

        Returns:
            The linked identity if found, None otherwise
        """
        pass

    @abstractmethod
    async def insert(self, identity: LinkedIdentity) -> LinkedIdentity:
        """Insert a new linked identity.

        Args:
            identity: The identity to insert

        Returns:
            The inserted identity
        """
        pass
