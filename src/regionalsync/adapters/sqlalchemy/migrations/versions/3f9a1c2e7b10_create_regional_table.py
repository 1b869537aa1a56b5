"""create regional table

Revision ID: 3f9a1c2e7b10
Revises:
Create Date: 2026-10-17 09:00:00

"""

from __future__ import annotations

import sqlalchemy as sa
from alembic import op

revision = "3f9a1c2e7b10"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "regional",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("active", sa.Boolean(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_regional")),
    )
    op.create_index("ix_regional_name", "regional", ["name"], unique=False)
    op.create_index(
        "uq_regional_active_name",
        "regional",
        ["name"],
        unique=True,
        sqlite_where=sa.text("active = 1"),
        postgresql_where=sa.text("active"),
    )


def downgrade() -> None:
    op.drop_index("uq_regional_active_name", table_name="regional")
    op.drop_index("ix_regional_name", table_name="regional")
    op.drop_table("regional")
