"""Strongly typed identifiers for login handshake domain entities.

Using NewType for strong typing prevents mixing up account and linked
identity IDs and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

AccountId = NewType("AccountId", UUID)
LinkedIdentityId = NewType("LinkedIdentityId", UUID)
