"""Domain value objects for the third-party login handshake.

Value objects are immutable and defined by their values, not identity.
"""

from enum import Enum, IntEnum
from typing import Any

from pydantic import Field, field_validator

from thirdlogin.domain.value.common import ValueObject


class IdentityProviderKind(str, Enum):
    """Supported external identity providers.

    Exactly one is active per deployment, selected by configuration.
    """

    GITEE = "gitee"
    MALL = "mall"


class DeviceFlag(IntEnum):
    """Device class a session is issued for."""

    APP = 0
    WEB = 1
    PC = 2


class HandshakeStatus(str, Enum):
    """Observable state of a login handshake.

    NOT_FOUND covers both "never began" and "expired", which are
    indistinguishable to a poller.
    """

    PENDING = "pending"
    SUCCEEDED = "succeeded"
    FAILED = "failed"
    NOT_FOUND = "not_found"


class ExternalProfile(ValueObject):
    """Normalized identity returned by an external provider.

    Transient: never persisted directly, the linked identity record keeps a
    denormalized copy of the display fields.
    """

    provider: IdentityProviderKind
    login: str  # Stable external login identifier
    name: str = ""
    avatar_url: str | None = None
    email: str | None = None
    bio: str | None = None
    html_url: str | None = None
    provider_created_at: str | None = None
    raw: dict[str, Any] = Field(default_factory=dict)

    @field_validator("login")
    @classmethod
    def validate_login(cls, v: str) -> str:
        """Validate the external login identifier is present."""
        if not v.strip():
            raise ValueError("External login identifier must not be blank")
        return v

    @property
    def display_name(self) -> str:
        """Provider name, falling back to the login when blank."""
        return self.name if self.name.strip() else self.login
