"""Key-value store implementations backing the handshake and push dedup."""

import time
from collections.abc import Callable
from typing import Optional

import logfire
from redis.asyncio import Redis
from redis.exceptions import RedisError

from thirdlogin.domain.error import StoreUnavailableError
from thirdlogin.domain.repository import KeyValueStore

# Compare-and-set: overwrite KEYS[1] with ARGV[2] (expiring in ARGV[3]
# seconds) only while it still holds ARGV[1].
_REPLACE_IF_EQUALS = """
if redis.call('GET', KEYS[1]) == ARGV[1] then
    redis.call('SET', KEYS[1], ARGV[2], 'EX', ARGV[3])
    return 1
end
return 0
"""

# Read KEYS[1] and delete it in the same step unless it holds ARGV[1].
_POP_UNLESS_EQUALS = """
local value = redis.call('GET', KEYS[1])
if value and value ~= ARGV[1] then
    redis.call('DEL', KEYS[1])
end
return value
"""


class RedisKeyValueStore(KeyValueStore):
    """Redis implementation of KeyValueStore.

    Expects a client created with ``decode_responses=True``.
    """

    def __init__(self, client: Redis) -> None:
        """Initialize store with a Redis client.

        Args:
            client: Async Redis client
        """
        self.client = client
        self._replace_script = client.register_script(_REPLACE_IF_EQUALS)
        self._pop_script = client.register_script(_POP_UNLESS_EQUALS)

    async def get(self, key: str) -> Optional[str]:
        """Read a key."""
        try:
            return await self.client.get(key)
        except RedisError as e:
            logfire.error("Redis get failed", key=key, error=str(e))
            raise StoreUnavailableError(f"Cache read failed: {e}") from e

    async def set(self, key: str, value: str, ttl_seconds: int) -> None:
        """Write a key with an expiry."""
        try:
            await self.client.setex(key, ttl_seconds, value)
        except RedisError as e:
            logfire.error("Redis set failed", key=key, error=str(e))
            raise StoreUnavailableError(f"Cache write failed: {e}") from e

    async def delete(self, key: str) -> None:
        """Remove a key."""
        try:
            await self.client.delete(key)
        except RedisError as e:
            logfire.error("Redis delete failed", key=key, error=str(e))
            raise StoreUnavailableError(f"Cache delete failed: {e}") from e

    async def replace_if_equals(
        self, key: str, expected: str, value: str, ttl_seconds: int
    ) -> bool:
        """Atomically replace a key only if it holds ``expected``."""
        try:
            replaced = await self._replace_script(
                keys=[key], args=[expected, value, ttl_seconds]
            )
        except RedisError as e:
            logfire.error("Redis compare-and-set failed", key=key, error=str(e))
            raise StoreUnavailableError(f"Cache write failed: {e}") from e
        return bool(replaced)

    async def pop_unless_equals(self, key: str, retained: str) -> Optional[str]:
        """Atomically read a key, deleting it unless it holds ``retained``."""
        try:
            return await self._pop_script(keys=[key], args=[retained])
        except RedisError as e:
            logfire.error("Redis read-and-delete failed", key=key, error=str(e))
            raise StoreUnavailableError(f"Cache read failed: {e}") from e


class InMemoryKeyValueStore(KeyValueStore):
    """In-memory implementation of KeyValueStore for testing.

    Expiry is evaluated lazily on access against ``clock``, which tests can
    replace to move time forward.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._entries: dict[str, tuple[str, float]] = {}
        self.unavailable = False

    def _check_available(self) -> None:
        if self.unavailable:
            raise StoreUnavailableError("Cache unavailable")

    def _live(self, key: str) -> Optional[str]:
        entry = self._entries.get(key)
        if entry is None:
            return None
        value, expires_at = entry
        if self._clock() >= expires_at:
            del self._entries[key]
            return None
        return value

    async def get(self, key: str) -> Optional[str]:
        """Read a key."""
        self._check_available()
        return self._live(key)

    async def set(self, key: str, value: str, ttl_seconds: int) -> None:
        """Write a key with an expiry."""
        self._check_available()
        self._entries[key] = (value, self._clock() + ttl_seconds)

    async def delete(self, key: str) -> None:
        """Remove a key."""
        self._check_available()
        self._entries.pop(key, None)

    async def replace_if_equals(
        self, key: str, expected: str, value: str, ttl_seconds: int
    ) -> bool:
        """Replace a key only if it holds ``expected``."""
        self._check_available()
        if self._live(key) != expected:
            return False
        self._entries[key] = (value, self._clock() + ttl_seconds)
        return True

    async def pop_unless_equals(self, key: str, retained: str) -> Optional[str]:
        """Read a key, deleting it unless it holds ``retained``."""
        self._check_available()
        value = self._live(key)
        if value is not None and value != retained:
            del self._entries[key]
        return value

    def ttl(self, key: str) -> Optional[float]:
        """Seconds until ``key`` expires, None if absent."""
        if self._live(key) is None:
            return None
        return self._entries[key][1] - self._clock()
