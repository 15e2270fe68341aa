"""Expiring key-value store interface."""

from abc import ABC, abstractmethod
from typing import Optional


class KeyValueStore(ABC):
    """Key-value cache with per-key expiry.

    Provides read-your-last-write ordering for a single key and nothing
    across keys. Every method raises ``StoreUnavailableError`` when the
    backing cache cannot be reached.
    """

    @abstractmethod
    async def get(self, key: str) -> Optional[str]:
        """Read a key.

        Returns:
            The stored value, or None if absent or expired
        """
        pass

    @abstractmethod
    async def set(self, key: str, value: str, ttl_seconds: int) -> None:
        """Write a key, replacing any previous value and expiry."""
        pass

    @abstractmethod
    async def delete(self, key: str) -> None:
        """Remove a key. Removing an absent key is not an error."""
        pass

    @abstractmethod
    async def replace_if_equals(
        self, key: str, expected: str, value: str, ttl_seconds: int
    ) -> bool:
        """Atomically replace a key only if it currently holds ``expected``.

        Returns:
            True if the value was replaced, False otherwise
        """
        pass

    @abstractmethod
    async def pop_unless_equals(self, key: str, retained: str) -> Optional[str]:
        """Atomically read a key and delete it unless it holds ``retained``.

        At most one caller ever receives a deleted value.

        Returns:
            The value read, or None if absent or expired
        """
        pass
