"""PostgreSQL repository implementations."""

from thirdlogin.persistence.repository.account import PostgresAccountRepository
from thirdlogin.persistence.repository.linked_identity import (
    PostgresLinkedIdentityRepository,
)
from thirdlogin.persistence.repository.transaction import (
    PostgresTransactionFactory,
    PostgresUnitOfWork,
)

__all__ = [
    "PostgresAccountRepository",
    "PostgresLinkedIdentityRepository",
    "PostgresTransactionFactory",
    "PostgresUnitOfWork",
]
