"""Unit tests for the in-memory unit of work."""

from uuid import uuid4

import pytest

from thirdlogin.domain.error import DuplicateRecordError
from thirdlogin.domain.model import Account, AccountSettings, LinkedIdentity
from thirdlogin.domain.value import AccountId, LinkedIdentityId
from thirdlogin.persistence.repository.inmemory import (
    InMemoryDatabase,
    InMemoryTransactionFactory,
)
from tests.conftest import make_profile


def new_rows(login: str = "octocat"):
    account_id = AccountId(uuid4())
    account = Account(id=account_id, name=login)
    identity = LinkedIdentity.from_profile(
        LinkedIdentityId(uuid4()), account_id, make_profile(login=login)
    )
    return account, identity


class TestInMemoryUnitOfWork:
    """Tests for InMemoryUnitOfWork."""

    @pytest.mark.asyncio
    async def test_commit_publishes_rows(self):
        database = InMemoryDatabase()
        transactions = InMemoryTransactionFactory(database)
        account, identity = new_rows()

        async with transactions.begin() as uow:
            await uow.linked_identities.insert(identity)
            await uow.accounts.insert(account)
            await uow.accounts.insert_settings(AccountSettings(account_id=account.id))
            assert database.accounts == {}
            await uow.commit()

        assert database.accounts[account.id] == account
        assert account.id in database.account_settings
        assert database.linked_identities[identity.id] == identity

    @pytest.mark.asyncio
    async def test_exit_without_commit_rolls_back(self):
        database = InMemoryDatabase()
        account, identity = new_rows()

        async with InMemoryTransactionFactory(database).begin() as uow:
            await uow.linked_identities.insert(identity)
            await uow.accounts.insert(account)

        assert database.accounts == {}
        assert database.linked_identities == {}

    @pytest.mark.asyncio
    async def test_exception_rolls_back(self):
        database = InMemoryDatabase()
        account, identity = new_rows()

        with pytest.raises(RuntimeError):
            async with InMemoryTransactionFactory(database).begin() as uow:
                await uow.linked_identities.insert(identity)
                raise RuntimeError("abort")

        assert database.linked_identities == {}

    @pytest.mark.asyncio
    async def test_racing_commits_second_fails(self):
        """Two transactions linking one identity: only the first commits."""
        database = InMemoryDatabase()
        transactions = InMemoryTransactionFactory(database)
        first_account, first_identity = new_rows("racer")
        second_account, second_identity = new_rows("racer")

        async with transactions.begin() as first, transactions.begin() as second:
            await first.linked_identities.insert(first_identity)
            await second.linked_identities.insert(second_identity)
            await first.accounts.insert(first_account)
            await second.accounts.insert(second_account)

            await first.commit()
            with pytest.raises(DuplicateRecordError):
                await second.commit()

        assert list(database.accounts) == [first_account.id]
        assert list(database.linked_identities) == [first_identity.id]
