"""create maintenance requests, visit appointments and ratings tables

Revision ID: 004
Revises: 003
Create Date: 2025-02-03 10:15:00.000000

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "004"
down_revision: Union[str, None] = "003"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

big_id = sa.BigInteger().with_variant(sa.Integer(), "sqlite")


def upgrade() -> None:
    op.create_table(
        "maintenance_requests",
        sa.Column("id", sa.String(36), nullable=False),
        sa.Column("property_id", sa.String(36), nullable=False),
        sa.Column("owner_id", big_id, nullable=False),
        sa.Column("unit", sa.String(50), nullable=True),
        sa.Column("type", sa.String(100), nullable=False),
        sa.Column("priority", sa.String(20), nullable=False),
        sa.Column("problem_description", sa.Text(), nullable=False),
        sa.Column("contact_name", sa.String(255), nullable=True),
        sa.Column("contact_phone", sa.String(32), nullable=True),
        sa.Column("scheduled_date", sa.DateTime(), nullable=True),
        sa.Column("cost", sa.Float(), nullable=True),
        sa.Column("status", sa.String(50), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["property_id"], ["properties.id"], ondelete="CASCADE"),
    )
    op.create_index(
        "ix_maintenance_requests_property_id", "maintenance_requests", ["property_id"], unique=False
    )
    op.create_index(
        "ix_maintenance_requests_owner_id", "maintenance_requests", ["owner_id"], unique=False
    )

    op.create_table(
        "property_visit_appointments",
        sa.Column("id", sa.String(36), nullable=False),
        sa.Column("property_id", sa.String(36), nullable=False),
        sa.Column("owner_id", big_id, nullable=False),
        sa.Column("requester_id", big_id, nullable=True),
        sa.Column("requester_name", sa.String(255), nullable=False),
        sa.Column("requester_email", sa.String(320), nullable=True),
        sa.Column("requester_phone", sa.String(32), nullable=True),
        sa.Column("visit_type", sa.String(50), nullable=False),
        sa.Column("scheduled_date", sa.DateTime(), nullable=False),
        sa.Column("time_slot", sa.String(50), nullable=False),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["property_id"], ["properties.id"], ondelete="CASCADE"),
    )
    op.create_index(
        "ix_property_visit_appointments_property_id",
        "property_visit_appointments",
        ["property_id"],
        unique=False,
    )
    op.create_index(
        "ix_property_visit_appointments_owner_id",
        "property_visit_appointments",
        ["owner_id"],
        unique=False,
    )

    op.create_table(
        "property_ratings",
        sa.Column("id", sa.String(36), nullable=False),
        sa.Column("property_id", sa.String(36), nullable=False),
        sa.Column("contract_id", sa.String(36), nullable=True),
        sa.Column("tenant_user_id", big_id, nullable=True),
        sa.Column("stay_period_from", sa.DateTime(), nullable=True),
        sa.Column("stay_period_to", sa.DateTime(), nullable=True),
        sa.Column("overall_property_rating", sa.Float(), nullable=False),
        sa.Column("property_ratings", sa.JSON(), nullable=True),
        sa.Column("owner_ratings", sa.JSON(), nullable=True),
        sa.Column("satisfaction_level", sa.String(50), nullable=True),
        sa.Column("positives", sa.Text(), nullable=True),
        sa.Column("negatives", sa.Text(), nullable=True),
        sa.Column("photos", sa.JSON(), nullable=True),
        sa.Column("improve_comment", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("correct_grammar", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("privacy_option", sa.String(20), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["property_id"], ["properties.id"], ondelete="CASCADE"),
    )
    op.create_index(
        "ix_property_ratings_property_id", "property_ratings", ["property_id"], unique=False
    )
    op.create_index(
        "ix_property_ratings_tenant_user_id", "property_ratings", ["tenant_user_id"], unique=False
    )


def downgrade() -> None:
    op.drop_index("ix_property_ratings_tenant_user_id", table_name="property_ratings")
    op.drop_index("ix_property_ratings_property_id", table_name="property_ratings")
    op.drop_table("property_ratings")
    op.drop_index(
        "ix_property_visit_appointments_owner_id", table_name="property_visit_appointments"
    )
    op.drop_index(
        "ix_property_visit_appointments_property_id", table_name="property_visit_appointments"
    )
    op.drop_table("property_visit_appointments")
    op.drop_index("ix_maintenance_requests_owner_id", table_name="maintenance_requests")
    op.drop_index("ix_maintenance_requests_property_id", table_name="maintenance_requests")
    op.drop_table("maintenance_requests")
