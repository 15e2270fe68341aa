"""Dependency injection module."""

from typing import Type

from thirdlogin.util.di.application import ProdApplicationProvider
from thirdlogin.util.di.base import Component, ProviderBase
from thirdlogin.util.di.core import ProdConfigProvider
from thirdlogin.util.di.domain import ProdDomainProvider
from thirdlogin.util.di.infrastructure import (
    CacheProvider,
    NotificationProvider,
    OAuthProvider,
    PersistenceProvider,
    ProdCacheProvider,
    ProdNotificationProvider,
    ProdOAuthProvider,
    ProdPersistenceProvider,
    ProdStorageProvider,
    StorageProvider,
)

# Single list - all providers treated uniformly
PROVIDERS: list[Type[ProviderBase]] = [
    # Core providers (not mockable)
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    # Infrastructure components (mockable)
    OAuthProvider,
    CacheProvider,
    StorageProvider,
    NotificationProvider,
    PersistenceProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Pick the provider class to instantiate for one entry of PROVIDERS.

    Config, domain and application providers have no subclasses and are
    returned unchanged. Infrastructure bases are resolved to the subclass
    whose ``__is_mock__`` matches ``use_mock``; mock subclasses live under
    ``tests/di`` and only exist once that package is imported.

    Args:
        base: Entry of PROVIDERS
        use_mock: Select the mock implementation of a mockable component

    Returns:
        Provider class, not instantiated

    Raises:
        ValueError: If the component has no implementation of that kind
    """
    implementations = base.__subclasses__()
    if not implementations:
        return base

    for implementation in implementations:
        if getattr(implementation, "__is_mock__", False) == use_mock:
            return implementation

    kind = "mock" if use_mock else "production"
    raise ValueError(f"No {kind} implementation for {base.__mock_component__}")


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "get_provider",
    # Core providers
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    # Infrastructure base classes
    "CacheProvider",
    "NotificationProvider",
    "OAuthProvider",
    "PersistenceProvider",
    "StorageProvider",
    # Infrastructure implementations
    "ProdCacheProvider",
    "ProdNotificationProvider",
    "ProdOAuthProvider",
    "ProdPersistenceProvider",
    "ProdStorageProvider",
]
