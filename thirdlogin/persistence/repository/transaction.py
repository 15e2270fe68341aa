"""PostgreSQL unit of work for provisioning writes."""

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from thirdlogin.domain.error import DuplicateRecordError, RepositoryError
from thirdlogin.domain.repository import TransactionFactory, UnitOfWork
from thirdlogin.persistence.repository.account import PostgresAccountRepository
from thirdlogin.persistence.repository.linked_identity import (
    PostgresLinkedIdentityRepository,
)


class PostgresUnitOfWork(UnitOfWork):
    """Unit of work owning one session and therefore one transaction."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize unit of work.

        Args:
            session: Session dedicated to this transaction
        """
        super().__init__()
        self.session = session
        self.linked_identities = PostgresLinkedIdentityRepository(session)
        self.accounts = PostgresAccountRepository(session)

    async def _commit(self) -> None:
        try:
            await self.session.commit()
        except IntegrityError as e:
            raise DuplicateRecordError(str(e.orig)) from e
        except SQLAlchemyError as e:
            raise RepositoryError(str(e)) from e

    async def rollback(self) -> None:
        """Roll back the session."""
        await self.session.rollback()

    async def close(self) -> None:
        """Return the connection to the pool."""
        await self.session.close()


class PostgresTransactionFactory(TransactionFactory):
    """Opens a fresh session per unit of work."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        """Initialize factory.

        Args:
            session_factory: Session factory bound to the engine
        """
        self.session_factory = session_factory

    def begin(self) -> PostgresUnitOfWork:
        """Start a new transaction."""
        return PostgresUnitOfWork(self.session_factory())
