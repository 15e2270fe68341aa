"""Avatar enrichment domain service."""

import asyncio
import zlib

import logfire

from thirdlogin.config import AvatarSettings
from thirdlogin.domain.value import AccountId

from .base import Service

# Placeholder image served by providers for users without an avatar
PLACEHOLDER_AVATAR_SUFFIX = "no_portrait.png"


class FileStorage:
    """Image storage service interface."""

    async def download_image(self, url: str) -> bytes | None:
        """Download an image.

        Args:
            url: Public image URL

        Returns:
            Image bytes, or None if the URL did not yield an image
        """
        raise NotImplementedError

    async def upload_file(self, path: str, content_type: str, data: bytes) -> str:
        """Upload a file.

        Args:
            path: Object path inside the storage service
            content_type: MIME type of ``data``
            data: File content

        Returns:
            Identifier of the stored object
        """
        raise NotImplementedError


def avatar_partition(account_id: AccountId, partitions: int) -> int:
    """Deterministic storage partition for an account's avatar."""
    return zlib.crc32(str(account_id).encode("utf-8")) % partitions


def avatar_path(account_id: AccountId, partitions: int) -> str:
    """Object path of an account's avatar."""
    return f"avatar/{avatar_partition(account_id, partitions)}/{account_id}.png"


class AvatarService(Service):
    """Copies a provider avatar into our own image storage.

    Strictly best effort: every failure, including the deadline, results in
    "no avatar" and is never raised to the caller.
    """

    def __init__(self, file_storage: FileStorage, settings: AvatarSettings) -> None:
        """Initialize avatar service.

        Args:
            file_storage: Image storage service
            settings: Partitioning and deadline configuration
        """
        self.file_storage = file_storage
        self.settings = settings

    async def store_avatar(
        self, account_id: AccountId, avatar_url: str | None
    ) -> str | None:
        """Download ``avatar_url`` and store it as the account's avatar.

        Args:
            account_id: Account the avatar belongs to
            avatar_url: Provider avatar URL

        Returns:
            Stored object path, or None if no avatar was stored
        """
        if not avatar_url or avatar_url.endswith(PLACEHOLDER_AVATAR_SUFFIX):
            return None

        with logfire.span("avatar_service.store_avatar", account_id=str(account_id)):
            try:
                return await asyncio.wait_for(
                    self._copy(account_id, avatar_url),
                    timeout=self.settings.timeout_seconds,
                )
            except asyncio.TimeoutError:
                logfire.warn(
                    "Avatar copy timed out",
                    account_id=str(account_id),
                    timeout_seconds=self.settings.timeout_seconds,
                )
            except Exception as e:
                logfire.warn(
                    "Avatar copy failed",
                    account_id=str(account_id),
                    error=str(e),
                    error_type=type(e).__name__,
                )
            return None

    async def _copy(self, account_id: AccountId, avatar_url: str) -> str | None:
        data = await self.file_storage.download_image(avatar_url)
        if not data:
            logfire.info("Avatar download returned no image", account_id=str(account_id))
            return None

        path = avatar_path(account_id, self.settings.partition)
        await self.file_storage.upload_file(path, "image/png", data)
        logfire.info("Avatar stored", account_id=str(account_id), path=path)
        return path
