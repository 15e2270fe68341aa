"""Session issuance domain service."""

import asyncio

import logfire

from thirdlogin.domain.error import AccountDestroyedError
from thirdlogin.domain.model import Account, LoginResult
from thirdlogin.domain.value import DeviceFlag

from .base import Service
from .jwt_service import JWTService
from .notification_service import NotificationService

# Strong references to in-flight welcome notifications
_welcome_tasks: set[asyncio.Task] = set()


async def wait_for_notifications() -> None:
    """Wait for every scheduled welcome notification to finish."""
    while _welcome_tasks:
        await asyncio.gather(*list(_welcome_tasks), return_exceptions=True)


class SessionService(Service):
    """Issues login sessions for resolved accounts."""

    def __init__(
        self, jwt_service: JWTService, notification_service: NotificationService
    ) -> None:
        """Initialize session service.

        Args:
            jwt_service: Session token service
            notification_service: Login notification service
        """
        self.jwt_service = jwt_service
        self.notification_service = notification_service

    def issue(
        self,
        account: Account,
        device_flag: DeviceFlag,
        public_ip: str,
        avatar_path: str | None = None,
    ) -> LoginResult:
        """Issue a session for ``account`` and schedule its welcome notice.

        The notification runs in the background and never affects the
        returned result.

        Args:
            account: Existing or newly provisioned account
            device_flag: Device the login came from
            public_ip: Public IP address of the login request
            avatar_path: Avatar stored during provisioning, if any

        Returns:
            Login result for the handshake

        Raises:
            AccountDestroyedError: If the account has been destroyed
        """
        uid = str(account.id)
        with logfire.span("session_service.issue", uid=uid):
            if account.is_destroyed:
                logfire.warn("Login refused for destroyed account", uid=uid)
                raise AccountDestroyedError(uid)

            token, expires_at = self.jwt_service.create_token(
                uid, account.name, int(device_flag)
            )

            result = LoginResult(
                uid=uid,
                name=account.name,
                token=token,
                device_flag=device_flag,
                has_avatar=account.has_avatar,
                avatar_path=avatar_path,
                expires_at=expires_at,
            )

            task = asyncio.create_task(self._welcome(public_ip, uid))
            _welcome_tasks.add(task)
            task.add_done_callback(_welcome_tasks.discard)

            logfire.info("Session issued", uid=uid, device_flag=int(device_flag))
            return result

    async def _welcome(self, public_ip: str, uid: str) -> None:
        try:
            await self.notification_service.send_welcome(public_ip, uid)
        except Exception as e:
            logfire.error(
                "Welcome notification failed",
                uid=uid,
                error=str(e),
                error_type=type(e).__name__,
            )
