"""In-memory unit of work for testing."""

from thirdlogin.domain.error import DuplicateRecordError
from thirdlogin.domain.repository import TransactionFactory, UnitOfWork

from .account import InMemoryAccountRepository
from .database import InMemoryDatabase
from .linked_identity import InMemoryLinkedIdentityRepository


class InMemoryUnitOfWork(UnitOfWork):
    """Stages writes and applies them to the database on commit.

    Uniqueness is re-checked at commit time, so two units of work racing on
    the same identity behave like two database transactions: the second
    commit fails with ``DuplicateRecordError``.
    """

    def __init__(self, database: InMemoryDatabase) -> None:
        super().__init__()
        self.database = database
        self.staged = InMemoryDatabase()
        self.linked_identities = InMemoryLinkedIdentityRepository(
            database, self.staged
        )
        self.accounts = InMemoryAccountRepository(database, self.staged)

    async def _commit(self) -> None:
        for identity in self.staged.linked_identities.values():
            if self.database.find_identity(identity.provider, identity.login):
                raise DuplicateRecordError(
                    f"Identity already linked: "
                    f"{identity.provider.value}:{identity.login}"
                )
        self.database.linked_identities.update(self.staged.linked_identities)
        self.database.accounts.update(self.staged.accounts)
        self.database.account_settings.update(self.staged.account_settings)
        self.staged.clear()

    async def rollback(self) -> None:
        """Discard staged writes."""
        self.staged.clear()


class InMemoryTransactionFactory(TransactionFactory):
    """Opens in-memory units of work over a shared database."""

    def __init__(self, database: InMemoryDatabase) -> None:
        self.database = database

    def begin(self) -> InMemoryUnitOfWork:
        """Start a new unit of work."""
        return InMemoryUnitOfWork(self.database)
