"""In-memory repository implementations for testing."""

from .account import InMemoryAccountRepository
from .database import InMemoryDatabase
from .linked_identity import InMemoryLinkedIdentityRepository
from .transaction import InMemoryTransactionFactory, InMemoryUnitOfWork

__all__ = [
    "InMemoryAccountRepository",
    "InMemoryDatabase",
    "InMemoryLinkedIdentityRepository",
    "InMemoryTransactionFactory",
    "InMemoryUnitOfWork",
]
