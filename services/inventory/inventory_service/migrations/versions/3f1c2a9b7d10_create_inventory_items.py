"""create inventory_items

Revision ID: 3f1c2a9b7d10
Revises:
Create Date: 2025-11-03 00:00:00.000000
"""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "3f1c2a9b7d10"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    bind = op.get_bind()
    inspector = sa.inspect(bind)

    # Databases provisioned with create_all already have the table.
    if "inventory_items" in inspector.get_table_names():
        return

    op.create_table(
        "inventory_items",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("article_number", sa.String(), nullable=False),
        sa.Column("quantity", sa.Integer(), nullable=False, server_default=sa.text("0")),
        sa.Column("location", sa.String(), nullable=False, server_default=""),
    )
    op.create_index("ix_inventory_items_id", "inventory_items", ["id"])
    op.create_index("ix_inventory_items_article_number", "inventory_items", ["article_number"])


def downgrade() -> None:
    op.drop_index("ix_inventory_items_article_number", table_name="inventory_items")
    op.drop_index("ix_inventory_items_id", table_name="inventory_items")
    op.drop_table("inventory_items")
