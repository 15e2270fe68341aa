"""Domain value objects for the login handshake."""

from thirdlogin.domain.value.identifiers import AccountId, LinkedIdentityId
from thirdlogin.domain.value.types import (
    DeviceFlag,
    ExternalProfile,
    HandshakeStatus,
    IdentityProviderKind,
)

__all__ = [
    # Identifiers
    "AccountId",
    "LinkedIdentityId",
    # Types
    "DeviceFlag",
    "ExternalProfile",
    "HandshakeStatus",
    "IdentityProviderKind",
]
