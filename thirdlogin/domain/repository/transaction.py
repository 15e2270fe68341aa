"""Transaction boundary for multi-table writes."""

from abc import ABC, abstractmethod
from types import TracebackType
from typing import Optional

from thirdlogin.domain.repository.account import AccountRepository
from thirdlogin.domain.repository.linked_identity import LinkedIdentityRepository


class UnitOfWork(ABC):
    """A single database transaction spanning the provisioning tables.

    Repositories exposed here write inside the transaction. Leaving the
    context without a successful ``commit`` rolls everything back.
    """

    linked_identities: LinkedIdentityRepository
    accounts: AccountRepository

    def __init__(self) -> None:
        self._committed = False

    async def __aenter__(self) -> "UnitOfWork":
        return self

    async def __aexit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        if not self._committed:
            await self.rollback()
        await self.close()

    async def commit(self) -> None:
        """Commit the transaction.

        Raises:
            RepositoryError: If the store rejects the commit
        """
        await self._commit()
        self._committed = True

    @abstractmethod
    async def _commit(self) -> None:
        pass

    @abstractmethod
    async def rollback(self) -> None:
        """Discard every write made in this transaction."""
        pass

    async def close(self) -> None:
        """Release the underlying connection, if any."""
        return None


class TransactionFactory(ABC):
    """Opens new, independent units of work."""

    @abstractmethod
    def begin(self) -> UnitOfWork:
        """Start a new transaction.

        Returns:
            A unit of work to be used as an async context manager
        """
        pass
