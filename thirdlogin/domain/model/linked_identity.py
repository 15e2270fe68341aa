"""Linked identity entity.

Maps an external provider login to a local account. Created once, together
with the account, and never mutated afterwards by this service.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import Field

from thirdlogin.domain.model.common import DomainModel
from thirdlogin.domain.value import (
    AccountId,
    ExternalProfile,
    IdentityProviderKind,
    LinkedIdentityId,
)


class LinkedIdentity(DomainModel):
    """External identity linked to a local account.

    Display fields are a denormalized copy of the provider profile taken at
    link time.
    """

    id: LinkedIdentityId
    account_id: AccountId
    provider: IdentityProviderKind
    login: str  # Stable identifier from the provider
    name: str
    avatar_url: Optional[str] = None
    email: Optional[str] = None
    bio: Optional[str] = None
    html_url: Optional[str] = None
    provider_created_at: Optional[str] = None
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def from_profile(
        cls,
        identity_id: LinkedIdentityId,
        account_id: AccountId,
        profile: ExternalProfile,
    ) -> "LinkedIdentity":
        """Build the record linking ``profile`` to ``account_id``."""
        return cls(
            id=identity_id,
            account_id=account_id,
            provider=profile.provider,
            login=profile.login,
            name=profile.display_name,
            avatar_url=profile.avatar_url,
            email=profile.email,
            bio=profile.bio,
            html_url=profile.html_url,
            provider_created_at=profile.provider_created_at,
        )
