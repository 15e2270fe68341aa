"""PostgreSQL implementation of Account repository."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from thirdlogin.domain.error import DuplicateRecordError, RepositoryError
from thirdlogin.domain.model import Account, AccountSettings
from thirdlogin.domain.repository import AccountRepository
from thirdlogin.domain.value import AccountId
from thirdlogin.persistence.mappers import (
    account_settings_to_dict,
    account_to_dict,
    row_to_account,
)
from thirdlogin.persistence.tables import account_settings_table, accounts_table


class PostgresAccountRepository(AccountRepository):
    """PostgreSQL implementation of AccountRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, account_id: AccountId) -> Optional[Account]:
        """Find an account by ID.

        Args:
            account_id: Account ID to look up

        Returns:
            Account if found, None otherwise
        """
        stmt = select(accounts_table).where(accounts_table.c.id == account_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_account(dict(row)) if row else None

    async def insert(self, account: Account) -> Account:
        """Insert a new account.

        Args:
            account: Account to insert

        Returns:
            Inserted account

        Raises:
            DuplicateRecordError: If the account ID already exists
            RepositoryError: If the insert fails
        """
        stmt = accounts_table.insert().values(**account_to_dict(account))
        await self._write(stmt)
        return account

    async def insert_settings(self, settings: AccountSettings) -> AccountSettings:
        """Insert the settings row for an account.

        Args:
            settings: Settings row to insert

        Returns:
            Inserted settings

        Raises:
            DuplicateRecordError: If the account already has settings
            RepositoryError: If the insert fails
        """
        stmt = account_settings_table.insert().values(
            **account_settings_to_dict(settings)
        )
        await self._write(stmt)
        return settings

    async def _write(self, stmt) -> None:
        try:
            await self.session.execute(stmt)
            await self.session.flush()
        except IntegrityError as e:
            raise DuplicateRecordError(str(e.orig)) from e
        except SQLAlchemyError as e:
            raise RepositoryError(str(e)) from e
