"""Initial schema - roles, service accounts, role bindings, permissions.

Revision ID: 001
Revises:
Create Date: 2026-10-18

"""

from collections.abc import Sequence

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "roles",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )

    op.create_table(
        "service_accounts",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("email", sa.String(255), nullable=True),
        sa.Column("key_id", sa.String(255), nullable=True),
        sa.Column("key_secret", sa.String(255), nullable=True),
        sa.Column("base_role_id", sa.UUID(), sa.ForeignKey("roles.id"), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )
    op.create_index("ix_service_accounts_email", "service_accounts", ["email"], unique=True)
    op.create_index(
        "ix_service_accounts_key_pair", "service_accounts", ["key_id", "key_secret"], unique=True
    )

    op.create_table(
        "role_bindings",
        sa.Column("role_id", sa.UUID(), sa.ForeignKey("roles.id", ondelete="CASCADE"), primary_key=True),
        sa.Column(
            "service_account_id",
            sa.UUID(),
            sa.ForeignKey("service_accounts.id", ondelete="CASCADE"),
            primary_key=True,
        ),
    )

    op.create_table(
        "permissions",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column("role_id", sa.UUID(), sa.ForeignKey("roles.id", ondelete="CASCADE"), nullable=False),
        sa.Column("service", sa.String(255), nullable=False),
        sa.Column("ownership_level", sa.String(2), nullable=False),
        sa.Column("action", sa.String(255), nullable=False),
        sa.Column("resource_hierarchy", sa.Text(), nullable=False),
        sa.Column("alias", sa.String(255), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.CheckConstraint("ownership_level IN ('RO', 'RL')", name="ck_permissions_ownership_level"),
    )
    op.create_index(
        "ux_permissions_grant",
        "permissions",
        ["role_id", "service", "ownership_level", "action", "resource_hierarchy"],
        unique=True,
    )


def downgrade() -> None:
    op.drop_table("permissions")
    op.drop_table("role_bindings")
    op.drop_table("service_accounts")
    op.drop_table("roles")
