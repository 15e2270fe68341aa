"""Login handshake domain service.

The handshake is a mailbox in the key-value cache keyed by an authcode:

    begin    -> "1" (pending)              pending TTL
    complete -> "0" (failed) | JSON result  result TTL
    poll     -> reads, deleting in the same step once terminal

The poller and the provider callback never talk to each other directly;
the cache entry is the only thing they share.
"""

from uuid import uuid4

import logfire
from pydantic import ValidationError

from thirdlogin.config import HandshakeSettings
from thirdlogin.domain.model import LoginResult
from thirdlogin.domain.model.common import DomainModel
from thirdlogin.domain.repository import KeyValueStore
from thirdlogin.domain.value import HandshakeStatus

from .base import Service

PENDING_SENTINEL = "1"
FAILED_SENTINEL = "0"


class HandshakePoll(DomainModel):
    """Outcome of a single poll."""

    status: HandshakeStatus
    result: LoginResult | None = None


class HandshakeService(Service):
    """Domain service driving the handshake state machine."""

    def __init__(self, store: KeyValueStore, settings: HandshakeSettings) -> None:
        """Initialize handshake service.

        Args:
            store: Expiring key-value store used as the handoff channel
            settings: Handshake TTLs and key prefix
        """
        self.store = store
        self.settings = settings

    def key_for(self, authcode: str) -> str:
        """Cache key holding the handshake for ``authcode``."""
        return f"{self.settings.key_prefix}{authcode}"

    async def begin(self) -> str:
        """Start a handshake in the pending state.

        Returns:
            The new authcode

        Raises:
            StoreUnavailableError: If the pending entry cannot be written
        """
        authcode = uuid4().hex
        with logfire.span("handshake_service.begin"):
            await self.store.set(
                self.key_for(authcode),
                PENDING_SENTINEL,
                self.settings.pending_ttl_seconds,
            )
            logfire.info(
                "Handshake begun",
                ttl_seconds=self.settings.pending_ttl_seconds,
            )
            return authcode

    async def poll(self, authcode: str) -> HandshakePoll:
        """Read the current state of a handshake.

        A terminal entry is deleted in the same store operation that reads
        it, so it is returned to at most one poller even when polls race.

        Args:
            authcode: Authcode returned by ``begin``

        Returns:
            The handshake status, with the login result when it succeeded

        Raises:
            StoreUnavailableError: If the entry cannot be read
        """
        if not authcode:
            return HandshakePoll(status=HandshakeStatus.NOT_FOUND)

        value = await self.store.pop_unless_equals(
            self.key_for(authcode), PENDING_SENTINEL
        )

        if not value:
            return HandshakePoll(status=HandshakeStatus.NOT_FOUND)
        if value == PENDING_SENTINEL:
            return HandshakePoll(status=HandshakeStatus.PENDING)

        if value == FAILED_SENTINEL:
            logfire.info("Handshake consumed", status=HandshakeStatus.FAILED.value)
            return HandshakePoll(status=HandshakeStatus.FAILED)

        try:
            result = LoginResult.from_json(value)
        except ValidationError as e:
            logfire.error("Handshake result unreadable", error=str(e))
            return HandshakePoll(status=HandshakeStatus.FAILED)

        logfire.info(
            "Handshake consumed",
            status=HandshakeStatus.SUCCEEDED.value,
            uid=result.uid,
        )
        return HandshakePoll(status=HandshakeStatus.SUCCEEDED, result=result)

    async def complete(self, authcode: str, result: LoginResult | None) -> bool:
        """Resolve a pending handshake with a login result or a failure.

        Only a pending entry is replaced (first write wins). A duplicate
        callback, or one arriving after the pending entry expired, leaves
        the store untouched.

        Args:
            authcode: Authcode carried through the provider as ``state``
            result: Login result, or None to mark the handshake failed

        Returns:
            True if the handshake was resolved by this call

        Raises:
            StoreUnavailableError: If the entry cannot be written
        """
        value = result.to_json() if result is not None else FAILED_SENTINEL
        status = (
            HandshakeStatus.SUCCEEDED if result is not None else HandshakeStatus.FAILED
        )

        with logfire.span("handshake_service.complete", status=status.value):
            replaced = await self.store.replace_if_equals(
                self.key_for(authcode),
                PENDING_SENTINEL,
                value,
                self.settings.result_ttl_seconds,
            )
            if replaced:
                logfire.info("Handshake resolved", status=status.value)
            else:
                logfire.warn(
                    "Handshake not pending, result dropped",
                    status=status.value,
                )
            return replaced
