"""Account repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from thirdlogin.domain.model import Account, AccountSettings
from thirdlogin.domain.value import AccountId


class AccountRepository(ABC):
    """Repository for the Account aggregate.

    Write methods raise ``RepositoryError`` when the store rejects the row.
    """

    @abstractmethod
    async def find_by_id(self, account_id: AccountId) -> Optional[Account]:
        """Find an account by ID.

        Args:
            account_id: The account's unique identifier

        Returns:
            The account if found, None otherwise
        """
        pass

    @abstractmethod
    async def insert(self, account: Account) -> Account:
        """Insert a new account.

        Args:
            account: The account to insert

        Returns:
            The inserted account
        """
        pass

    @abstractmethod
    async def insert_settings(self, settings: AccountSettings) -> AccountSettings:
        """Insert the initialization settings row for an account.

        Args:
            settings: The settings row to insert

        Returns:
            The inserted settings
        """
        pass
