"""Cache infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from redis.asyncio import Redis, from_url

from thirdlogin.adapter.cache import RedisKeyValueStore
from thirdlogin.config import Settings
from thirdlogin.domain.repository import KeyValueStore
from thirdlogin.util.di.base import ProviderBase


class CacheProvider(ProviderBase):
    """Cache component base."""

    __mock_component__ = "cache"


class ProdCacheProvider(CacheProvider):
    """Production cache provider using Redis."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    async def get_redis(self, settings: Settings) -> AsyncIterator[Redis]:
        """Provide Redis client, closed when the container closes."""
        client = from_url(settings.redis.url, encoding="utf-8", decode_responses=True)
        yield client
        await client.aclose()
        logfire.info("Redis client closed")

    @provide(scope=Scope.APP)
    def get_key_value_store(self, client: Redis) -> KeyValueStore:
        """Provide Redis-backed key-value store."""
        return RedisKeyValueStore(client)
