"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from thirdlogin.domain.model import Account, AccountSettings, LinkedIdentity
from thirdlogin.domain.value import (
    AccountId,
    DeviceFlag,
    IdentityProviderKind,
    LinkedIdentityId,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_account(row: Dict[str, Any]) -> Account:
    """Convert database row to Account domain model.

    Args:
        row: Database row as dict

    Returns:
        Account domain model
    """
    return Account(
        id=AccountId(_uuid(row["id"])),
        name=row["name"],
        device_flag=DeviceFlag(row["device_flag"]),
        has_avatar=row["has_avatar"],
        is_destroyed=row["is_destroyed"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def account_to_dict(account: Account) -> Dict[str, Any]:
    """Convert Account domain model to database dict."""
    data = account.model_dump()
    data["device_flag"] = int(account.device_flag)
    return data


def account_settings_to_dict(settings: AccountSettings) -> Dict[str, Any]:
    """Convert AccountSettings domain model to database dict."""
    return settings.model_dump()


def row_to_linked_identity(row: Dict[str, Any]) -> LinkedIdentity:
    """Convert database row to LinkedIdentity domain model.

    Args:
        row: Database row as dict

    Returns:
        LinkedIdentity domain model
    """
    return LinkedIdentity(
        id=LinkedIdentityId(_uuid(row["id"])),
        account_id=AccountId(_uuid(row["account_id"])),
        provider=IdentityProviderKind(row["provider"]),
        login=row["login"],
        name=row["name"],
        avatar_url=row.get("avatar_url"),
        email=row.get("email"),
        bio=row.get("bio"),
        html_url=row.get("html_url"),
        provider_created_at=row.get("provider_created_at"),
        created_at=row["created_at"],
    )


def linked_identity_to_dict(identity: LinkedIdentity) -> Dict[str, Any]:
    """Convert LinkedIdentity domain model to database dict."""
    data = identity.model_dump()
    data["provider"] = identity.provider.value
    return data
