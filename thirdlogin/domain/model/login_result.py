"""Login result handed from the callback to the polling client."""

from datetime import datetime
from typing import Optional

from thirdlogin.domain.model.common import DomainModel
from thirdlogin.domain.value import DeviceFlag


class LoginResult(DomainModel):
    """Session payload for a successful third-party login.

    Serialized as JSON into the handoff store and returned verbatim to the
    poller, so every field must survive a JSON round trip.
    """

    uid: str
    name: str
    token: str
    device_flag: DeviceFlag
    has_avatar: bool = False
    avatar_path: Optional[str] = None
    expires_at: datetime

    def to_json(self) -> str:
        """Serialize for the handoff store."""
        return self.model_dump_json()

    @classmethod
    def from_json(cls, payload: str) -> "LoginResult":
        """Deserialize a value previously written by ``to_json``."""
        return cls.model_validate_json(payload)
