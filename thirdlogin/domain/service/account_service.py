"""Account lookup domain service."""

import logfire

from thirdlogin.domain.model import Account
from thirdlogin.domain.repository import AccountRepository, LinkedIdentityRepository
from thirdlogin.domain.value import IdentityProviderKind

from .base import Service


class AccountService(Service):
    """Domain service matching external identities to local accounts."""

    def __init__(
        self,
        account_repository: AccountRepository,
        linked_identity_repository: LinkedIdentityRepository,
    ) -> None:
        """Initialize account service.

        Args:
            account_repository: Account repository
            linked_identity_repository: Linked identity repository
        """
        self.account_repository = account_repository
        self.linked_identity_repository = linked_identity_repository

    async def find_linked(
        self, provider: IdentityProviderKind, login: str
    ) -> Account | None:
        """Find the local account linked to an external login.

        Read-only. Returning None is the normal path for a first login.

        Args:
            provider: Identity provider
            login: Stable external login identifier

        Returns:
            Linked account if found, None otherwise
        """
        with logfire.span(
            "account_service.find_linked", provider=provider.value, login=login
        ):
            identity = await self.linked_identity_repository.find_by_login(
                provider, login
            )
            if not identity:
                logfire.info(
                    "No linked identity", provider=provider.value, login=login
                )
                return None

            account = await self.account_repository.find_by_id(identity.account_id)
            if not account:
                logfire.warn(
                    "Linked identity points at missing account",
                    provider=provider.value,
                    login=login,
                    account_id=str(identity.account_id),
                )
                return None

            logfire.info(
                "Linked account found",
                provider=provider.value,
                login=login,
                account_id=str(account.id),
            )
            return account
