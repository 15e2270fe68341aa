"""Unit tests for ProvisioningService."""

import asyncio
from unittest.mock import AsyncMock, patch

import pytest

from thirdlogin.domain.error import (
    AccountCreationError,
    CommitError,
    LinkedIdentityConflictError,
    LinkedRecordInsertError,
    RepositoryError,
)
from thirdlogin.domain.service import FileStorage, ProvisioningService
from thirdlogin.domain.value import DeviceFlag
from thirdlogin.persistence.repository.inmemory import (
    InMemoryAccountRepository,
    InMemoryDatabase,
    InMemoryLinkedIdentityRepository,
    InMemoryUnitOfWork,
)
from tests.conftest import make_profile
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()

AVATAR_URL = "https://gitee.com/assets/octocat.png"


class TestProvision:
    """Tests for provision method."""

    @pytest.mark.asyncio
    async def test_provision_writes_identity_account_and_settings(self, unit_env):
        """A first login creates all three rows, linked together."""
        provisioning_service = await unit_env.get(ProvisioningService)
        database = await unit_env.get(InMemoryDatabase)
        profile = make_profile(login="octocat", name="The Octocat", avatar_url=None)

        provisioned = await provisioning_service.provision(profile, DeviceFlag.WEB)

        account = provisioned.account
        assert account.name == "The Octocat"
        assert account.device_flag == DeviceFlag.WEB
        assert account.has_avatar is False
        assert provisioned.avatar_path is None

        assert database.accounts[account.id] == account
        assert account.id in database.account_settings
        identity = database.find_identity(profile.provider, "octocat")
        assert identity is not None
        assert identity.account_id == account.id
        assert identity.email == "octocat@example.com"

    @pytest.mark.asyncio
    async def test_provision_blank_name_falls_back_to_login(self, unit_env):
        """Accounts are named after the login when the provider has no name."""
        provisioning_service = await unit_env.get(ProvisioningService)

        provisioned = await provisioning_service.provision(
            make_profile(login="nameless", name="  ", avatar_url=None),
            DeviceFlag.APP,
        )

        assert provisioned.account.name == "nameless"

    @pytest.mark.asyncio
    async def test_provision_stores_avatar(self, unit_env):
        """A downloadable avatar is copied and the account flagged."""
        provisioning_service = await unit_env.get(ProvisioningService)
        file_storage = await unit_env.get(FileStorage)
        file_storage.images[AVATAR_URL] = b"\x89PNG"

        provisioned = await provisioning_service.provision(
            make_profile(avatar_url=AVATAR_URL), DeviceFlag.APP
        )

        account_id = provisioned.account.id
        assert provisioned.account.has_avatar is True
        assert provisioned.avatar_path.endswith(f"/{account_id}.png")
        assert file_storage.files[provisioned.avatar_path] == (
            "image/png",
            b"\x89PNG",
        )

    @pytest.mark.asyncio
    async def test_provision_avatar_failure_still_provisions(self, unit_env):
        """An unreachable file service only costs the avatar."""
        provisioning_service = await unit_env.get(ProvisioningService)
        file_storage = await unit_env.get(FileStorage)
        database = await unit_env.get(InMemoryDatabase)
        file_storage.images[AVATAR_URL] = b"\x89PNG"
        file_storage.fail_uploads = True

        provisioned = await provisioning_service.provision(
            make_profile(avatar_url=AVATAR_URL), DeviceFlag.APP
        )

        assert provisioned.account.has_avatar is False
        assert provisioned.avatar_path is None
        assert provisioned.account.id in database.accounts

    @pytest.mark.asyncio
    async def test_provision_skips_placeholder_avatar(self, unit_env):
        """The provider's placeholder image is never copied."""
        provisioning_service = await unit_env.get(ProvisioningService)
        file_storage = await unit_env.get(FileStorage)
        placeholder = "https://gitee.com/assets/no_portrait.png"
        file_storage.images[placeholder] = b"\x89PNG"

        provisioned = await provisioning_service.provision(
            make_profile(avatar_url=placeholder), DeviceFlag.APP
        )

        assert provisioned.account.has_avatar is False
        assert file_storage.files == {}

    @pytest.mark.asyncio
    async def test_provision_existing_identity_raises_conflict(self, unit_env):
        """A second provision of the same login is rejected, nothing written."""
        provisioning_service = await unit_env.get(ProvisioningService)
        database = await unit_env.get(InMemoryDatabase)
        profile = make_profile(login="dup", avatar_url=None)

        await provisioning_service.provision(profile, DeviceFlag.APP)

        with pytest.raises(LinkedIdentityConflictError) as exc_info:
            await provisioning_service.provision(profile, DeviceFlag.APP)

        assert exc_info.value.login == "dup"
        assert len(database.accounts) == 1
        assert len(database.linked_identities) == 1

    @pytest.mark.asyncio
    async def test_provision_concurrent_first_logins_link_once(self, unit_env):
        """Two racing first logins leave exactly one account behind."""
        provisioning_service = await unit_env.get(ProvisioningService)
        database = await unit_env.get(InMemoryDatabase)
        profile = make_profile(login="racer", avatar_url=None)

        outcomes = await asyncio.gather(
            provisioning_service.provision(profile, DeviceFlag.APP),
            provisioning_service.provision(profile, DeviceFlag.APP),
            return_exceptions=True,
        )

        conflicts = [o for o in outcomes if isinstance(o, LinkedIdentityConflictError)]
        assert len(conflicts) == 1
        assert len(database.accounts) == 1
        assert len(database.account_settings) == 1
        assert len(database.linked_identities) == 1

    @pytest.mark.asyncio
    async def test_provision_linked_insert_failure_writes_nothing(self, unit_env):
        """A failed identity insert aborts provisioning."""
        provisioning_service = await unit_env.get(ProvisioningService)
        database = await unit_env.get(InMemoryDatabase)

        with patch.object(
            InMemoryLinkedIdentityRepository,
            "insert",
            AsyncMock(side_effect=RepositoryError("connection reset")),
        ):
            with pytest.raises(LinkedRecordInsertError) as exc_info:
                await provisioning_service.provision(
                    make_profile(avatar_url=None), DeviceFlag.APP
                )

        assert not isinstance(exc_info.value, LinkedIdentityConflictError)
        assert database.accounts == {}
        assert database.linked_identities == {}

    @pytest.mark.asyncio
    async def test_provision_account_failure_rolls_back_identity(self, unit_env):
        """A failed account insert leaves no orphaned linked identity."""
        provisioning_service = await unit_env.get(ProvisioningService)
        database = await unit_env.get(InMemoryDatabase)

        with patch.object(
            InMemoryAccountRepository,
            "insert_settings",
            AsyncMock(side_effect=RepositoryError("constraint violated")),
        ):
            with pytest.raises(AccountCreationError):
                await provisioning_service.provision(
                    make_profile(avatar_url=None), DeviceFlag.APP
                )

        assert database.accounts == {}
        assert database.account_settings == {}
        assert database.linked_identities == {}

    @pytest.mark.asyncio
    async def test_provision_commit_failure_raises_commit_error(self, unit_env):
        """A rejected commit is reported as a commit failure."""
        provisioning_service = await unit_env.get(ProvisioningService)
        database = await unit_env.get(InMemoryDatabase)

        with patch.object(
            InMemoryUnitOfWork,
            "_commit",
            AsyncMock(side_effect=RepositoryError("serialization failure")),
        ):
            with pytest.raises(CommitError):
                await provisioning_service.provision(
                    make_profile(avatar_url=None), DeviceFlag.APP
                )

        assert database.accounts == {}
        assert database.linked_identities == {}
