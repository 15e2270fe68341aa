"""Infrastructure providers."""

# Import bases
from .cache import CacheProvider
from .identity import OAuthProvider
from .notification import NotificationProvider
from .persistence import PersistenceProvider
from .storage import StorageProvider

# Import implementations (needed for __subclasses__())
from .cache import ProdCacheProvider  # noqa: F401
from .identity import ProdOAuthProvider  # noqa: F401
from .notification import ProdNotificationProvider  # noqa: F401
from .persistence import ProdPersistenceProvider  # noqa: F401
from .storage import ProdStorageProvider  # noqa: F401

__all__ = [
    "CacheProvider",
    "NotificationProvider",
    "OAuthProvider",
    "PersistenceProvider",
    "ProdCacheProvider",
    "ProdNotificationProvider",
    "ProdOAuthProvider",
    "ProdPersistenceProvider",
    "ProdStorageProvider",
    "StorageProvider",
]
