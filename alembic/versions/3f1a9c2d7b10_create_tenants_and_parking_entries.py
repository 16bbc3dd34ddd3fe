"""create tenants and parking_entries

Revision ID: 3f1a9c2d7b10
Revises: 
Create Date: 2026-10-19 08:30:00.000000

"""
from collections.abc import Sequence

import sqlalchemy as sa
import sqlmodel

from alembic import op

# revision identifiers, used by Alembic.
revision: str = '3f1a9c2d7b10'
down_revision: str | Sequence[str] | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "tenants",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("plate_number", sqlmodel.AutoString(length=20), nullable=False),
        sa.Column("name", sqlmodel.AutoString(length=255), nullable=False),
        sa.Column("phone", sqlmodel.AutoString(length=30), nullable=True),
        sa.Column("shop_number", sqlmodel.AutoString(length=50), nullable=True),
        sa.Column("floor_code", sqlmodel.AutoString(length=50), nullable=True),
        sa.Column("building", sqlmodel.AutoString(length=255), nullable=False),
        sa.Column("monthly_rate", sa.Integer(), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_tenants_plate_number", "tenants", ["plate_number"], unique=True)

    op.create_table(
        "parking_entries",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("plate_number", sqlmodel.AutoString(length=20), nullable=False),
        sa.Column("driver_name", sqlmodel.AutoString(length=255), nullable=True),
        sa.Column("phone", sqlmodel.AutoString(length=30), nullable=True),
        sa.Column("shop_number", sqlmodel.AutoString(length=50), nullable=True),
        sa.Column("building", sqlmodel.AutoString(length=255), nullable=True),
        sa.Column(
            "tenant_type",
            sa.Enum("TENANT", "NON_TENANT", "MOTORCYCLE", name="tenanttype"),
            nullable=False,
        ),
        sa.Column(
            "payment_method",
            sa.Enum("CASH", "MPESA", name="paymentmethod"),
            nullable=False,
        ),
        sa.Column("amount_paid", sa.Integer(), nullable=False),
        sa.Column("is_paid", sa.Boolean(), nullable=False),
        sa.Column("entry_time", sqlmodel.AutoString(length=40), nullable=False),
        sa.Column("reference_code", sqlmodel.AutoString(length=40), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_parking_entries_plate_number", "parking_entries", ["plate_number"])
    op.create_index("ix_parking_entries_building", "parking_entries", ["building"])
    op.create_index("ix_parking_entries_entry_time", "parking_entries", ["entry_time"])
    op.create_index(
        "ix_parking_entries_reference_code", "parking_entries", ["reference_code"], unique=True
    )


def downgrade() -> None:
    op.drop_index("ix_parking_entries_reference_code", table_name="parking_entries")
    op.drop_index("ix_parking_entries_entry_time", table_name="parking_entries")
    op.drop_index("ix_parking_entries_building", table_name="parking_entries")
    op.drop_index("ix_parking_entries_plate_number", table_name="parking_entries")
    op.drop_table("parking_entries")
    op.drop_index("ix_tenants_plate_number", table_name="tenants")
    op.drop_table("tenants")
