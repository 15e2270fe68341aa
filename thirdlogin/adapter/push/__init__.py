"""Push webhook adapters."""

from .client import HttpPushClient, RecordingPushClient

__all__ = ["HttpPushClient", "RecordingPushClient"]
