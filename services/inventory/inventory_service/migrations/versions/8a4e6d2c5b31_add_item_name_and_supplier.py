"""add name and supplier to inventory_items

Revision ID: 8a4e6d2c5b31
Revises: 3f1c2a9b7d10
Create Date: 2025-11-17 00:00:00.000000
"""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "8a4e6d2c5b31"
down_revision = "3f1c2a9b7d10"
branch_labels = None
depends_on = None


def _has_column(inspector: sa.Inspector, table_name: str, column_name: str) -> bool:
    return any(col["name"] == column_name for col in inspector.get_columns(table_name))


def upgrade() -> None:
    bind = op.get_bind()
    inspector = sa.inspect(bind)

    if not _has_column(inspector, "inventory_items", "name"):
        op.add_column(
            "inventory_items",
            sa.Column("name", sa.String(), nullable=False, server_default=""),
        )
    if not _has_column(inspector, "inventory_items", "supplier"):
        op.add_column(
            "inventory_items",
            sa.Column("supplier", sa.String(), nullable=False, server_default=""),
        )


def downgrade() -> None:
    with op.batch_alter_table("inventory_items") as batch_op:
        batch_op.drop_column("supplier")
        batch_op.drop_column("name")
