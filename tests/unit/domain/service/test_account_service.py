"""Unit tests for AccountService."""

from uuid import uuid4

import pytest

from thirdlogin.domain.model import Account, LinkedIdentity
from thirdlogin.domain.service import AccountService
from thirdlogin.domain.value import AccountId, IdentityProviderKind, LinkedIdentityId
from thirdlogin.persistence.repository.inmemory import InMemoryDatabase
from tests.conftest import make_profile
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


def link(database: InMemoryDatabase, login: str, with_account: bool = True) -> AccountId:
    account_id = AccountId(uuid4())
    if with_account:
        database.accounts[account_id] = Account(id=account_id, name=login)
    identity = LinkedIdentity.from_profile(
        LinkedIdentityId(uuid4()), account_id, make_profile(login=login)
    )
    database.linked_identities[identity.id] = identity
    return account_id


class TestFindLinked:
    """Tests for find_linked method."""

    @pytest.mark.asyncio
    async def test_find_linked_returns_account(self, unit_env):
        account_service = await unit_env.get(AccountService)
        database = await unit_env.get(InMemoryDatabase)
        account_id = link(database, "octocat")

        account = await account_service.find_linked(
            IdentityProviderKind.GITEE, "octocat"
        )

        assert account is not None
        assert account.id == account_id

    @pytest.mark.asyncio
    async def test_find_linked_unknown_login(self, unit_env):
        """A first-seen login is not an error."""
        account_service = await unit_env.get(AccountService)

        account = await account_service.find_linked(
            IdentityProviderKind.GITEE, "stranger"
        )

        assert account is None

    @pytest.mark.asyncio
    async def test_find_linked_is_scoped_by_provider(self, unit_env):
        """The same login on another provider is a different identity."""
        account_service = await unit_env.get(AccountService)
        database = await unit_env.get(InMemoryDatabase)
        link(database, "octocat")

        account = await account_service.find_linked(
            IdentityProviderKind.MALL, "octocat"
        )

        assert account is None

    @pytest.mark.asyncio
    async def test_find_linked_dangling_identity(self, unit_env):
        """An identity whose account is gone resolves to nothing."""
        account_service = await unit_env.get(AccountService)
        database = await unit_env.get(InMemoryDatabase)
        link(database, "orphan", with_account=False)

        account = await account_service.find_linked(
            IdentityProviderKind.GITEE, "orphan"
        )

        assert account is None
