"""Account aggregate.

The local user entity. This service only creates accounts and reads their
existence and state; everything else about them belongs to the wider user
subsystem.
"""

from datetime import datetime, timezone

from pydantic import Field

from thirdlogin.domain.model.common import DomainModel
from thirdlogin.domain.value import AccountId, DeviceFlag


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Account(DomainModel):
    """Local account created from, or linked to, an external identity."""

    id: AccountId
    name: str
    device_flag: DeviceFlag = DeviceFlag.APP
    has_avatar: bool = False
    is_destroyed: bool = False
    created_at: datetime = Field(default_factory=_utcnow)
    updated_at: datetime = Field(default_factory=_utcnow)


class AccountSettings(DomainModel):
    """Per-account defaults written alongside a newly provisioned account."""

    account_id: AccountId
    message_notifications: bool = True
    search_by_name: bool = True
    created_at: datetime = Field(default_factory=_utcnow)
