"""Image storage service clients."""

import asyncio

import httpx
import logfire

from thirdlogin.adapter.error import FileServiceError
from thirdlogin.domain.service.avatar_service import FileStorage


class HttpFileStorage(FileStorage):
    """Client for the internal file service HTTP API."""

    def __init__(self, base_url: str, timeout: float = 30.0) -> None:
        """Initialize file service client.

        Args:
            base_url: File service base URL
            timeout: Transport timeout in seconds for each request
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    async def download_image(self, url: str) -> bytes | None:
        """Download an image from a public URL.

        Args:
            url: Image URL

        Returns:
            Image bytes, or None for an empty body

        Raises:
            FileServiceError: On transport failure or non-200 status
        """
        try:
            async with httpx.AsyncClient(follow_redirects=True) as client:
                response = await client.get(url, timeout=self.timeout)
        except httpx.HTTPError as e:
            raise FileServiceError(f"HTTP error downloading image: {e}")

        if response.status_code != 200:
            raise FileServiceError(f"Image download failed: {response.status_code}")

        return response.content or None

    async def upload_file(self, path: str, content_type: str, data: bytes) -> str:
        """Upload a file to the file service.

        Args:
            path: Object path inside the file service
            content_type: MIME type of ``data``
            data: File content

        Returns:
            Object path the file was stored under

        Raises:
            FileServiceError: On transport failure or non-200 status
        """
        filename = path.rsplit("/", 1)[-1]
        try:
            async with httpx.AsyncClient() as client:
                response = await client.post(
                    f"{self.base_url}/file/upload",
                    params={"path": path, "type": "avatar"},
                    files={"file": (filename, data, content_type)},
                    timeout=self.timeout,
                )
        except httpx.HTTPError as e:
            raise FileServiceError(f"HTTP error uploading file: {e}")

        if response.status_code != 200:
            raise FileServiceError(f"File upload failed: {response.status_code}")

        logfire.info("File uploaded", path=path, size=len(data))
        return path


class InMemoryFileStorage(FileStorage):
    """In-memory file storage for testing.

    ``images`` maps URLs to downloadable content; uploads land in ``files``.
    """

    def __init__(self) -> None:
        self.images: dict[str, bytes] = {}
        self.files: dict[str, tuple[str, bytes]] = {}
        self.fail_uploads = False
        self.delay_seconds = 0.0

    async def download_image(self, url: str) -> bytes | None:
        """Return the registered image for ``url``."""
        if self.delay_seconds:
            await asyncio.sleep(self.delay_seconds)
        if url not in self.images:
            raise FileServiceError(f"Image download failed: 404 {url}")
        return self.images[url]

    async def upload_file(self, path: str, content_type: str, data: bytes) -> str:
        """Store the file in memory."""
        if self.fail_uploads:
            raise FileServiceError("File upload failed: 503")
        self.files[path] = (content_type, data)
        return path
