"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from thirdlogin.config import Settings
from thirdlogin.domain.repository import (
    AccountRepository,
    LinkedIdentityRepository,
    TransactionFactory,
)
from thirdlogin.persistence.database import create_engine, create_session_factory
from thirdlogin.persistence.repository import (
    PostgresAccountRepository,
    PostgresLinkedIdentityRepository,
    PostgresTransactionFactory,
)
from thirdlogin.util.di.base import ProviderBase
from thirdlogin.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        """Provide database engine, disposed when the container closes."""
        engine = create_engine(settings.database, echo=settings.debug)
        # Instrument SQLAlchemy for observability
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Provide read session for request scope.

        Provisioning writes go through their own unit of work; this session
        only serves lookups and is rolled back if the request failed.
        """
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception as e:
                logfire.warn("Session rollback", error=str(e))
                await session.rollback()
                raise

    @provide(scope=Scope.APP)
    def get_transaction_factory(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> TransactionFactory:
        """Provide provisioning transaction factory."""
        return PostgresTransactionFactory(session_factory)

    @provide(scope=Scope.REQUEST)
    def get_account_repository(self, session: AsyncSession) -> AccountRepository:
        """Provide Account repository."""
        return PostgresAccountRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_linked_identity_repository(
        self, session: AsyncSession
    ) -> LinkedIdentityRepository:
        """Provide LinkedIdentity repository."""
        return PostgresLinkedIdentityRepository(session)
