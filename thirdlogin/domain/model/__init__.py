"""Domain model entities for the login handshake."""

from thirdlogin.domain.model.account import Account, AccountSettings
from thirdlogin.domain.model.linked_identity import LinkedIdentity
from thirdlogin.domain.model.login_result import LoginResult

__all__ = [
    "Account",
    "AccountSettings",
    "LinkedIdentity",
    "LoginResult",
]
