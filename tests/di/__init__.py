"""Mock providers for testing."""

from .cache import MockCacheProvider
from .identity import MockOAuthProvider
from .notification import MockNotificationProvider
from .persistence import MockPersistenceProvider
from .storage import MockStorageProvider
from .container import build_test_container

__all__ = [
    "MockCacheProvider",
    "MockNotificationProvider",
    "MockOAuthProvider",
    "MockPersistenceProvider",
    "MockStorageProvider",
    "build_test_container",
]
