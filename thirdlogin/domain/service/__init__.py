"""Domain services."""

from .account_service import AccountService
from .avatar_service import AvatarService, FileStorage, avatar_path
from .base import Service
from .handshake_service import HandshakePoll, HandshakeService
from .identity_service import IdentityProvider, IdentityService
from .jwt_service import JWTService
from .notification_service import NotificationService, PushClient
from .provisioning_service import ProvisionedAccount, ProvisioningService
from .session_service import SessionService, wait_for_notifications

__all__ = [
    "AccountService",
    "AvatarService",
    "FileStorage",
    "HandshakePoll",
    "HandshakeService",
    "IdentityProvider",
    "IdentityService",
    "JWTService",
    "NotificationService",
    "ProvisionedAccount",
    "ProvisioningService",
    "PushClient",
    "Service",
    "SessionService",
    "avatar_path",
    "wait_for_notifications",
]
