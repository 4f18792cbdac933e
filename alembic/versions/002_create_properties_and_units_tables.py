"""create properties and units tables

Revision ID: 002
Revises: 001
Create Date: 2025-02-03 10:05:00.000000

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "002"
down_revision: Union[str, None] = "001"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

big_id = sa.BigInteger().with_variant(sa.Integer(), "sqlite")


def upgrade() -> None:
    op.create_table(
        "properties",
        sa.Column("id", sa.String(36), nullable=False),
        sa.Column("owner_id", big_id, nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("type", sa.String(100), nullable=False),
        sa.Column("address", sa.String(500), nullable=False),
        sa.Column("city", sa.String(100), nullable=False),
        sa.Column("neighborhood", sa.String(100), nullable=True),
        sa.Column("area", sa.Float(), nullable=True),
        sa.Column("rooms", sa.String(20), nullable=True),
        sa.Column("bathrooms", sa.String(20), nullable=True),
        sa.Column("construction_year", sa.String(10), nullable=True),
        sa.Column("unit_number", sa.String(50), nullable=True),
        sa.Column("postal_code", sa.String(20), nullable=True),
        sa.Column("country", sa.String(100), nullable=True),
        sa.Column("property_sub_type", sa.String(100), nullable=True),
        sa.Column("features", sa.JSON(), nullable=True),
        sa.Column("monthly_rent", sa.Float(), nullable=True),
        sa.Column("insurance", sa.Float(), nullable=True),
        sa.Column("available_from", sa.DateTime(), nullable=True),
        sa.Column("min_rental_period", sa.String(50), nullable=True),
        sa.Column("public_display", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("payment_email", sa.String(320), nullable=True),
        sa.Column("support_phone", sa.String(32), nullable=True),
        sa.Column("payment_account", sa.String(100), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("images", sa.JSON(), nullable=True),
        sa.Column("status", sa.String(50), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["owner_id"], ["users.id"]),
    )
    op.create_index("ix_properties_owner_id", "properties", ["owner_id"], unique=False)

    op.create_table(
        "units",
        sa.Column("id", sa.String(36), nullable=False),
        sa.Column("property_id", sa.String(36), nullable=False),
        sa.Column("unit_number", sa.String(50), nullable=False),
        sa.Column("type", sa.String(100), nullable=True),
        sa.Column("area", sa.Float(), nullable=True),
        sa.Column("status", sa.String(50), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["property_id"], ["properties.id"], ondelete="CASCADE"),
    )
    op.create_index("ix_units_property_id", "units", ["property_id"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_units_property_id", table_name="units")
    op.drop_table("units")
    op.drop_index("ix_properties_owner_id", table_name="properties")
    op.drop_table("properties")
