"""Push webhook clients."""

import httpx
import logfire

from thirdlogin.config import PushSettings
from thirdlogin.domain.service.notification_service import PushClient


class HttpPushClient(PushClient):
    """Client for the internal push service.

    Each configured server is tried in order until one accepts.
    """

    def __init__(self, settings: PushSettings, timeout: float = 10.0) -> None:
        """Initialize push client.

        Args:
            settings: Push servers and message template
            timeout: Transport timeout in seconds for each server
        """
        self.servers = settings.servers
        self.template_id = settings.template_id
        self.push_type = settings.push_type
        self.timeout = timeout

    async def push(self, uid: str, content: str) -> bool:
        """Send a notice to ``uid``.

        Args:
            uid: Recipient account ID
            content: Notification text

        Returns:
            True if one of the servers accepted the notice
        """
        payload = {
            "userId": uid,
            "deviceId": "",
            "lang": "",
            "pushType": self.push_type,
            "templateId": self.template_id,
            "params": {"im_content": content},
        }

        async with httpx.AsyncClient() as client:
            for server in self.servers:
                try:
                    response = await client.post(
                        f"http://{server}/inner/push/sendNotice",
                        json=payload,
                        timeout=self.timeout,
                    )
                except httpx.HTTPError as e:
                    logfire.warn("Push server unreachable", server=server, error=str(e))
                    continue

                if response.status_code >= 400:
                    logfire.warn(
                        "Push server rejected notice",
                        server=server,
                        status_code=response.status_code,
                    )
                    continue

                logfire.info("Push accepted", server=server, uid=uid)
                return True

        return False


class RecordingPushClient(PushClient):
    """Push client for testing that records every notice it is given."""

    def __init__(self) -> None:
        self.sent: list[tuple[str, str]] = []
        self.accept = True

    async def push(self, uid: str, content: str) -> bool:
        """Record the notice."""
        self.sent.append((uid, content))
        return self.accept
