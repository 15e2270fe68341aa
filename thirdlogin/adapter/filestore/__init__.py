"""Image storage service adapters."""

from .client import HttpFileStorage, InMemoryFileStorage

__all__ = ["HttpFileStorage", "InMemoryFileStorage"]
