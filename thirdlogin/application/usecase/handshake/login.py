"""Third-party login use case.

Runs when the identity provider calls back: resolves the external identity,
finds or provisions the local account, issues a session and hands the
outcome to the waiting poller through the handshake.
"""

import logfire
from pydantic import BaseModel

from thirdlogin.config import AvatarSettings
from thirdlogin.domain.error import (
    DomainError,
    EmptyCodeError,
    LinkedIdentityConflictError,
    MissingAuthcodeError,
    StoreUnavailableError,
)
from thirdlogin.domain.model import LoginResult
from thirdlogin.domain.service import (
    AccountService,
    HandshakeService,
    IdentityService,
    ProvisioningService,
    SessionService,
    avatar_path,
)
from thirdlogin.domain.value import DeviceFlag, HandshakeStatus


class ThirdLoginRequest(BaseModel):
    """Provider callback parameters."""

    code: str  # Authorization code, or commerce user token
    state: str  # Authcode echoed back by the provider
    public_ip: str = ""
    device_flag: DeviceFlag = DeviceFlag.APP


class ThirdLoginResponse(BaseModel):
    """Outcome of a callback."""

    status: HandshakeStatus
    uid: str | None = None
    resolved: bool = False  # Whether this callback resolved the handshake


class ThirdLoginUseCase:
    """Use case for completing a third-party login."""

    def __init__(
        self,
        handshake_service: HandshakeService,
        identity_service: IdentityService,
        account_service: AccountService,
        provisioning_service: ProvisioningService,
        session_service: SessionService,
        avatar_settings: AvatarSettings,
    ) -> None:
        """Initialize third-party login use case.

        Args:
            handshake_service: Handshake domain service
            identity_service: Identity resolution domain service
            account_service: Account lookup domain service
            provisioning_service: Account provisioning domain service
            session_service: Session issuance domain service
            avatar_settings: Avatar partitioning for existing accounts
        """
        self.handshake_service = handshake_service
        self.identity_service = identity_service
        self.account_service = account_service
        self.provisioning_service = provisioning_service
        self.session_service = session_service
        self.avatar_settings = avatar_settings

    async def execute(self, request: ThirdLoginRequest) -> ThirdLoginResponse:
        """Execute the callback flow.

        Steps:
        1. Resolve the code into an external profile
        2. Find the linked account, or provision one
        3. Issue a session
        4. Resolve the handshake with the result, or mark it failed

        Args:
            request: Callback parameters

        Returns:
            Final handshake status for this callback

        Raises:
            EmptyCodeError: If the code is empty (handshake left pending)
            MissingAuthcodeError: If the state is empty
            StoreUnavailableError: If the outcome cannot be written
        """
        if not request.code:
            raise EmptyCodeError("code is required")
        if not request.state:
            raise MissingAuthcodeError("state is required")

        with logfire.span(
            "third_login",
            provider=self.identity_service.identity_provider.kind.value,
        ):
            try:
                result = await self._login(request)
            except StoreUnavailableError:
                raise
            except DomainError as e:
                logfire.warn(
                    "Third-party login failed",
                    error=str(e),
                    error_type=type(e).__name__,
                )
                await self.handshake_service.complete(request.state, None)
                return ThirdLoginResponse(status=HandshakeStatus.FAILED)
            except Exception as e:
                logfire.error(
                    "Third-party login crashed",
                    error=str(e),
                    error_type=type(e).__name__,
                )
                await self.handshake_service.complete(request.state, None)
                raise

            resolved = await self.handshake_service.complete(request.state, result)
            return ThirdLoginResponse(
                status=HandshakeStatus.SUCCEEDED,
                uid=result.uid,
                resolved=resolved,
            )

    async def _login(self, request: ThirdLoginRequest) -> LoginResult:
        profile = await self.identity_service.resolve(request.code)

        account = await self.account_service.find_linked(
            profile.provider, profile.login
        )
        stored_avatar = None

        if account is None:
            try:
                provisioned = await self.provisioning_service.provision(
                    profile, request.device_flag
                )
                account = provisioned.account
                stored_avatar = provisioned.avatar_path
            except LinkedIdentityConflictError:
                # A concurrent first login won; log in as its account.
                account = await self.account_service.find_linked(
                    profile.provider, profile.login
                )
                if account is None:
                    raise
                logfire.info(
                    "Re-resolved concurrently linked identity",
                    provider=profile.provider.value,
                    login=profile.login,
                    account_id=str(account.id),
                )
        elif account.has_avatar:
            stored_avatar = avatar_path(account.id, self.avatar_settings.partition)

        return self.session_service.issue(
            account, request.device_flag, request.public_ip, stored_avatar
        )
