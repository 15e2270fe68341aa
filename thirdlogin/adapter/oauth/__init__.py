"""External identity provider adapters."""

from .gitee import GiteeIdentityProvider
from .mall import MallIdentityProvider
from .mock import MockIdentityProvider

__all__ = [
    "GiteeIdentityProvider",
    "MallIdentityProvider",
    "MockIdentityProvider",
]
