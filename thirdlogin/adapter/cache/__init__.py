"""Key-value cache adapters."""

from .store import InMemoryKeyValueStore, RedisKeyValueStore

__all__ = ["InMemoryKeyValueStore", "RedisKeyValueStore"]
