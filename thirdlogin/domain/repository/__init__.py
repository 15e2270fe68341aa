"""Repository interfaces for the login handshake domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence and adapter layers.
"""

from thirdlogin.domain.repository.account import AccountRepository
from thirdlogin.domain.repository.key_value import KeyValueStore
from thirdlogin.domain.repository.linked_identity import LinkedIdentityRepository
from thirdlogin.domain.repository.transaction import TransactionFactory, UnitOfWork

__all__ = [
    "AccountRepository",
    "KeyValueStore",
    "LinkedIdentityRepository",
    "TransactionFactory",
    "UnitOfWork",
]
