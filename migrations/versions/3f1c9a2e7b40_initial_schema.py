"""initial_schema

Create the third-party login schema:
- Accounts (local users created on first login)
- Account settings (initialization row written with each account)
- Linked identities (external provider login -> account, unique per provider)

Revision ID: 3f1c9a2e7b40
Revises:
Create Date: 2026-10-17 09:12:44.518302

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3f1c9a2e7b40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # ========================================================================
    # ACCOUNTS table
    # ========================================================================
    op.create_table(
        "accounts",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("device_flag", sa.SmallInteger(), nullable=False, server_default="0"),
        sa.Column("has_avatar", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column("is_destroyed", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
    )

    # ========================================================================
    # ACCOUNT_SETTINGS table
    # ========================================================================
    op.create_table(
        "account_settings",
        sa.Column("account_id", sa.UUID(), nullable=False),
        sa.Column(
            "message_notifications", sa.Boolean(), nullable=False, server_default="true"
        ),
        sa.Column("search_by_name", sa.Boolean(), nullable=False, server_default="true"),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["account_id"], ["accounts.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("account_id"),
    )

    # ========================================================================
    # LINKED_IDENTITIES table
    # ========================================================================
    op.create_table(
        "linked_identities",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("account_id", sa.UUID(), nullable=False),
        sa.Column("provider", sa.String(50), nullable=False),  # 'gitee', 'mall'
        sa.Column("login", sa.String(255), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("avatar_url", sa.Text(), nullable=True),
        sa.Column("email", sa.String(255), nullable=True),
        sa.Column("bio", sa.Text(), nullable=True),
        sa.Column("html_url", sa.Text(), nullable=True),
        sa.Column("provider_created_at", sa.String(64), nullable=True),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        # Checked at commit: the identity row is written before its account
        sa.ForeignKeyConstraint(
            ["account_id"],
            ["accounts.id"],
            ondelete="CASCADE",
            deferrable=True,
            initially="DEFERRED",
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("provider", "login", name="uq_linked_identity_login"),
    )
    op.create_index(
        "idx_linked_identities_account_id", "linked_identities", ["account_id"]
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_linked_identities_account_id", table_name="linked_identities")
    op.drop_table("linked_identities")
    op.drop_table("account_settings")
    op.drop_table("accounts")
