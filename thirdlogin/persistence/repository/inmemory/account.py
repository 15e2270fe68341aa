"""In-memory account repository for testing."""

from typing import Optional

from thirdlogin.domain.error import DuplicateRecordError
from thirdlogin.domain.model import Account, AccountSettings
from thirdlogin.domain.repository import AccountRepository
from thirdlogin.domain.value import AccountId

from .database import InMemoryDatabase


class InMemoryAccountRepository(AccountRepository):
    """In-memory implementation of AccountRepository for testing.

    Writes go to ``staged`` when given (inside a unit of work), otherwise
    straight to ``database``.
    """

    def __init__(
        self, database: InMemoryDatabase, staged: InMemoryDatabase | None = None
    ) -> None:
        self.database = database
        self.staged = staged

    async def find_by_id(self, account_id: AccountId) -> Optional[Account]:
        """Find an account by ID."""
        if self.staged and account_id in self.staged.accounts:
            return self.staged.accounts[account_id]
        return self.database.accounts.get(account_id)

    async def insert(self, account: Account) -> Account:
        """Insert a new account."""
        if await self.find_by_id(account.id):
            raise DuplicateRecordError(f"Account already exists: {account.id}")
        target = self.staged or self.database
        target.accounts[account.id] = account
        return account

    async def insert_settings(self, settings: AccountSettings) -> AccountSettings:
        """Insert the settings row for an account."""
        target = self.staged or self.database
        if (
            settings.account_id in self.database.account_settings
            or settings.account_id in target.account_settings
        ):
            raise DuplicateRecordError(
                f"Account settings already exist: {settings.account_id}"
            )
        target.account_settings[settings.account_id] = settings
        return settings
