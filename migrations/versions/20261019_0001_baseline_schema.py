"""baseline schema for users, catalog, leads and lead associations

Revision ID: 20261019_0001
Revises:
Create Date: 2026-10-19 00:00:01
"""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "20261019_0001"
down_revision = None
branch_labels = None
depends_on = None

LEAD_TYPES = ("Individual", "Business", "Housing-Society", "Agent")
MODEL_TYPES = ("Purchase", "Rent", "Individual Home-kit")
LEAD_STATUSES = ("New", "In-Progress", "Closed")


def _catalog_table(name: str) -> None:
    op.create_table(
        name,
        sa.Column("id", sa.String(length=36), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("price", sa.Numeric(10, 2), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.CheckConstraint("price >= 0", name=f"ck_{name}_price_non_negative"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(f"idx_{name}_active_name", name, ["is_active", "name"])


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.String(length=36), nullable=False),
        sa.Column("email", sa.String(length=320), nullable=False),
        sa.Column("full_name", sa.String(length=255), nullable=True),
        sa.Column("hashed_password", sa.String(length=255), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("email"),
    )

    _catalog_table("products")
    _catalog_table("services")

    op.create_table(
        "leads",
        sa.Column("id", sa.String(length=36), nullable=False),
        sa.Column("user_id", sa.String(length=36), nullable=False),
        sa.Column("full_name", sa.String(length=255), nullable=False),
        sa.Column("email", sa.String(length=320), nullable=False),
        sa.Column("phone", sa.String(length=50), nullable=True),
        sa.Column("company", sa.String(length=255), nullable=True),
        sa.Column("address", sa.Text(), nullable=False),
        sa.Column("location_url", sa.String(length=2048), nullable=True),
        sa.Column("pincode", sa.String(length=20), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("lead_type", sa.Enum(*LEAD_TYPES, name="lead_type"), nullable=False),
        sa.Column("model_type", sa.Enum(*MODEL_TYPES, name="model_type"), nullable=False),
        sa.Column("lead_score", sa.Integer(), nullable=False),
        sa.Column("status", sa.Enum(*LEAD_STATUSES, name="lead_status"), nullable=False),
        sa.Column("potential_amount", sa.Numeric(10, 2), nullable=False),
        sa.Column("follow_up", sa.Boolean(), nullable=False),
        sa.Column("follow_up_date", sa.Date(), nullable=True),
        sa.Column("follow_up_notes", sa.Text(), nullable=True),
        sa.Column("lead_sealed", sa.Boolean(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.CheckConstraint("lead_score >= 0 AND lead_score <= 100", name="ck_leads_lead_score_range"),
        sa.CheckConstraint("potential_amount >= 0", name="ck_leads_potential_amount_non_negative"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_leads_user_id", "leads", ["user_id"])
    op.create_index("idx_leads_user_score", "leads", ["user_id", "lead_score"])
    op.create_index("idx_leads_user_status", "leads", ["user_id", "status"])

    op.create_table(
        "lead_products",
        sa.Column("id", sa.String(length=36), nullable=False),
        sa.Column("lead_id", sa.String(length=36), nullable=False),
        sa.Column("product_id", sa.String(length=36), nullable=False),
        sa.Column("quantity", sa.Integer(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(["lead_id"], ["leads.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["product_id"], ["products.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("lead_id", "product_id", name="uq_lead_products_lead_product"),
    )
    op.create_index("ix_lead_products_lead_id", "lead_products", ["lead_id"])

    op.create_table(
        "lead_services",
        sa.Column("id", sa.String(length=36), nullable=False),
        sa.Column("lead_id", sa.String(length=36), nullable=False),
        sa.Column("service_id", sa.String(length=36), nullable=False),
        sa.Column("quantity", sa.Integer(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(["lead_id"], ["leads.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["service_id"], ["services.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("lead_id", "service_id", name="uq_lead_services_lead_service"),
    )
    op.create_index("ix_lead_services_lead_id", "lead_services", ["lead_id"])


def downgrade() -> None:
    op.drop_index("ix_lead_services_lead_id", table_name="lead_services")
    op.drop_table("lead_services")
    op.drop_index("ix_lead_products_lead_id", table_name="lead_products")
    op.drop_table("lead_products")
    op.drop_index("idx_leads_user_status", table_name="leads")
    op.drop_index("idx_leads_user_score", table_name="leads")
    op.drop_index("ix_leads_user_id", table_name="leads")
    op.drop_table("leads")
    op.drop_index("idx_services_active_name", table_name="services")
    op.drop_table("services")
    op.drop_index("idx_products_active_name", table_name="products")
    op.drop_table("products")
    op.drop_table("users")
    sa.Enum(name="lead_status").drop(op.get_bind(), checkfirst=True)
    sa.Enum(name="model_type").drop(op.get_bind(), checkfirst=True)
    sa.Enum(name="lead_type").drop(op.get_bind(), checkfirst=True)
