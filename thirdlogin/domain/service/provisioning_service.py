"""Account provisioning domain service."""

from uuid import uuid4

import logfire

from thirdlogin.domain.error import (
    AccountCreationError,
    CommitError,
    DuplicateRecordError,
    LinkedIdentityConflictError,
    LinkedRecordInsertError,
    RepositoryError,
)
from thirdlogin.domain.model import Account, AccountSettings, LinkedIdentity
from thirdlogin.domain.model.common import DomainModel
from thirdlogin.domain.repository import TransactionFactory
from thirdlogin.domain.value import (
    AccountId,
    DeviceFlag,
    ExternalProfile,
    LinkedIdentityId,
)

from .avatar_service import AvatarService
from .base import Service


class ProvisionedAccount(DomainModel):
    """A newly created account and the avatar stored for it, if any."""

    account: Account
    avatar_path: str | None = None


class ProvisioningService(Service):
    """Creates a local account for a first-seen external identity.

    The linked identity, the account and its settings row are written in one
    transaction. Avatar enrichment happens before the transaction opens so
    no connection is held across network calls, and it never decides
    whether provisioning succeeds.
    """

    def __init__(
        self, transactions: TransactionFactory, avatar_service: AvatarService
    ) -> None:
        """Initialize provisioning service.

        Args:
            transactions: Opens provisioning transactions
            avatar_service: Best-effort avatar enrichment
        """
        self.transactions = transactions
        self.avatar_service = avatar_service

    async def provision(
        self, profile: ExternalProfile, device_flag: DeviceFlag
    ) -> ProvisionedAccount:
        """Create the linked identity and account for ``profile``.

        Args:
            profile: External profile with no linked account yet
            device_flag: Device the first login came from

        Returns:
            The provisioned account

        Raises:
            LinkedIdentityConflictError: If a concurrent login linked the
                same identity first
            LinkedRecordInsertError: If the linked identity cannot be written
            AccountCreationError: If the account rows cannot be written
            CommitError: If the transaction fails to commit
        """
        account_id = AccountId(uuid4())
        provider = profile.provider.value

        with logfire.span(
            "provisioning_service.provision",
            provider=provider,
            login=profile.login,
            account_id=str(account_id),
        ):
            stored_avatar = await self.avatar_service.store_avatar(
                account_id, profile.avatar_url
            )

            account = Account(
                id=account_id,
                name=profile.display_name,
                device_flag=device_flag,
                has_avatar=stored_avatar is not None,
            )
            identity = LinkedIdentity.from_profile(
                LinkedIdentityId(uuid4()), account_id, profile
            )

            async with self.transactions.begin() as uow:
                try:
                    await uow.linked_identities.insert(identity)
                except DuplicateRecordError:
                    logfire.warn(
                        "Identity linked concurrently",
                        provider=provider,
                        login=profile.login,
                    )
                    raise LinkedIdentityConflictError(provider, profile.login)
                except RepositoryError as e:
                    logfire.error(
                        "Linked identity insert failed",
                        provider=provider,
                        login=profile.login,
                        error=str(e),
                    )
                    raise LinkedRecordInsertError(str(e)) from e

                try:
                    await uow.accounts.insert(account)
                    await uow.accounts.insert_settings(
                        AccountSettings(account_id=account_id)
                    )
                except RepositoryError as e:
                    logfire.error(
                        "Account creation failed",
                        account_id=str(account_id),
                        error=str(e),
                    )
                    raise AccountCreationError(str(e)) from e

                try:
                    await uow.commit()
                except DuplicateRecordError:
                    logfire.warn(
                        "Identity linked concurrently",
                        provider=provider,
                        login=profile.login,
                    )
                    raise LinkedIdentityConflictError(provider, profile.login)
                except RepositoryError as e:
                    logfire.error(
                        "Provisioning commit failed",
                        account_id=str(account_id),
                        error=str(e),
                    )
                    raise CommitError(str(e)) from e

            logfire.info(
                "Account provisioned",
                provider=provider,
                login=profile.login,
                account_id=str(account_id),
                has_avatar=account.has_avatar,
            )
            return ProvisionedAccount(account=account, avatar_path=stored_avatar)
