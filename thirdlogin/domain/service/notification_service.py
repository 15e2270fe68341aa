"""Notification domain service."""

import logfire

from thirdlogin.config import PushSettings
from thirdlogin.domain.repository import KeyValueStore

from .base import Service

_DEDUP_MARKER = "1"


class PushClient:
    """Push webhook interface."""

    async def push(self, uid: str, content: str) -> bool:
        """Deliver a notification to a user's devices.

        Args:
            uid: Recipient account ID
            content: Notification text

        Returns:
            True if a push server accepted the notification
        """
        raise NotImplementedError


class NotificationService(Service):
    """Sends login notifications, suppressing repeats per recipient.

    After a successful push the recipient is marked in the cache for the
    dedup TTL; pushes to a marked recipient are skipped.
    """

    def __init__(
        self, push_client: PushClient, store: KeyValueStore, settings: PushSettings
    ) -> None:
        """Initialize notification service.

        Args:
            push_client: Push webhook client
            store: Expiring key-value store holding dedup markers
            settings: Push configuration
        """
        self.push_client = push_client
        self.store = store
        self.settings = settings

    def dedup_key(self, uid: str) -> str:
        """Cache key marking a recent push to ``uid``."""
        return f"{self.settings.key_prefix}{uid}"

    async def push(self, uid: str, content: str) -> bool:
        """Push ``content`` to ``uid`` unless a push was sent recently.

        Args:
            uid: Recipient account ID
            content: Notification text

        Returns:
            True if the notification was delivered by this call

        Raises:
            StoreUnavailableError: If the dedup marker cannot be read
        """
        key = self.dedup_key(uid)
        if await self.store.get(key):
            logfire.info("Push suppressed, recently notified", uid=uid)
            return False

        delivered = await self.push_client.push(uid, content)
        if not delivered:
            logfire.warn("Push not accepted by any server", uid=uid)
            return False

        await self.store.set(key, _DEDUP_MARKER, self.settings.dedup_ttl_seconds)
        logfire.info("Push delivered", uid=uid)
        return True

    async def send_welcome(self, public_ip: str, uid: str) -> bool:
        """Notify an account that it has just logged in.

        Args:
            public_ip: Public IP address the login came from
            uid: Account ID

        Returns:
            True if the notification was delivered
        """
        with logfire.span("notification_service.send_welcome", uid=uid):
            location = public_ip or "an unknown address"
            return await self.push(uid, f"Your account just signed in from {location}.")
