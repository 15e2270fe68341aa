"""SQLAlchemy table definitions for third-party login.

These table definitions are used with SQLAlchemy Core and manual mappers.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    Column,
    ForeignKey,
    Index,
    MetaData,
    SmallInteger,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# ACCOUNTS TABLE
# ============================================================================
accounts_table = Table(
    "accounts",
    metadata,
    Column("id", UUID, primary_key=True),
    Column("name", String(255), nullable=False),
    Column("device_flag", SmallInteger, nullable=False, server_default="0"),
    Column("has_avatar", Boolean, nullable=False, server_default="false"),
    Column("is_destroyed", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# ACCOUNT SETTINGS TABLE (initialization row written with the account)
# ============================================================================
account_settings_table = Table(
    "account_settings",
    metadata,
    Column(
        "account_id",
        UUID,
        ForeignKey("accounts.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column("message_notifications", Boolean, nullable=False, server_default="true"),
    Column("search_by_name", Boolean, nullable=False, server_default="true"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# LINKED IDENTITIES TABLE (external provider login -> account)
# ============================================================================
linked_identities_table = Table(
    "linked_identities",
    metadata,
    Column("id", UUID, primary_key=True),
    # Checked at commit: the identity row is written before its account
    Column(
        "account_id",
        UUID,
        ForeignKey(
            "accounts.id", ondelete="CASCADE", deferrable=True, initially="DEFERRED"
        ),
        nullable=False,
    ),
    Column("provider", String(50), nullable=False),  # 'gitee', 'mall'
    Column("login", String(255), nullable=False),
    Column("name", String(255), nullable=False),
    Column("avatar_url", Text, nullable=True),
    Column("email", String(255), nullable=True),
    Column("bio", Text, nullable=True),
    Column("html_url", Text, nullable=True),
    Column("provider_created_at", String(64), nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("provider", "login", name="uq_linked_identity_login"),
)

Index("idx_linked_identities_account_id", linked_identities_table.c.account_id)
