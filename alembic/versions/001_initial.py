"""Initial migration — users, credentials, catalog, settings and properties.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-17
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import UUID

# revision identifiers, used by Alembic.
revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # ── users ──
    op.create_table(
        "users",
        sa.Column("id", UUID(as_uuid=True), primary_key=True, server_default=sa.text("gen_random_uuid()")),
        sa.Column("name", sa.String(150), nullable=False),
        sa.Column("email", sa.String(255), nullable=False, unique=True),
        sa.Column("phone", sa.String(30), nullable=True),
        sa.Column("account_type", sa.String(20), nullable=False, server_default="particular"),
        sa.Column("role", sa.String(10), nullable=False, server_default="user"),
        sa.Column("status", sa.String(10), nullable=False, server_default="active"),
        sa.Column("validation_status", sa.String(20), nullable=False, server_default="not_submitted"),
        sa.Column("creci_number", sa.String(30), nullable=True),
        sa.Column("creci_state", sa.String(2), nullable=True),
        sa.Column("company_name", sa.String(200), nullable=True),
        sa.Column("cnpj", sa.String(20), nullable=True),
        sa.Column("document_type", sa.String(30), nullable=True),
        sa.Column("document_number", sa.String(50), nullable=True),
        sa.Column("document_url", sa.String(2048), nullable=True),
        sa.Column("proof_of_address_url", sa.String(2048), nullable=True),
        sa.Column("years_of_experience", sa.String(10), nullable=True),
        sa.Column("service_regions", sa.Text, nullable=True),
        sa.Column("specialties", sa.Text, nullable=True),
        sa.Column("professional_website", sa.String(2048), nullable=True),
        sa.Column("contact_preference", sa.String(20), nullable=True),
        sa.Column("preferred_contact_time", sa.String(100), nullable=True),
        sa.Column("additional_notes", sa.Text, nullable=True),
        sa.Column("team_size", sa.String(10), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_users_email", "users", ["email"], unique=True)
    op.create_index("ix_users_status", "users", ["status"])

    # ── credentials ──
    op.create_table(
        "credentials",
        sa.Column(
            "user_id", UUID(as_uuid=True),
            sa.ForeignKey("users.id", ondelete="CASCADE"),
            primary_key=True,
        ),
        sa.Column("password_hash", sa.String(255), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )

    # ── property_types ──
    op.create_table(
        "property_types",
        sa.Column("id", UUID(as_uuid=True), primary_key=True, server_default=sa.text("gen_random_uuid()")),
        sa.Column("name", sa.String(50), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_property_types_name", "property_types", ["name"], unique=True)

    # ── system_settings ──
    op.create_table(
        "system_settings",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column("listing_price", sa.Numeric(10, 2), nullable=False),
        sa.Column("admin_contact_phone", sa.String(30), nullable=True),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )

    # ── properties ──
    op.create_table(
        "properties",
        sa.Column("id", UUID(as_uuid=True), primary_key=True, server_default=sa.text("gen_random_uuid()")),
        sa.Column("owner_id", UUID(as_uuid=True), sa.ForeignKey("users.id"), nullable=False),
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("type", sa.String(50), nullable=False),
        sa.Column("description", sa.Text, nullable=False, server_default=""),
        sa.Column("city", sa.String(100), nullable=False),
        sa.Column("neighborhood", sa.String(100), nullable=False, server_default=""),
        sa.Column("address", sa.String(300), nullable=True),
        sa.Column("price", sa.Numeric(14, 2), nullable=False, server_default="0"),
        sa.Column("price_on_request", sa.Boolean, nullable=False, server_default="false"),
        sa.Column("condo_fee", sa.Numeric(10, 2), nullable=True),
        sa.Column("iptu", sa.Numeric(10, 2), nullable=True),
        sa.Column("area", sa.Float, nullable=False, server_default="0"),
        sa.Column("bedrooms", sa.Integer, nullable=True),
        sa.Column("suites", sa.Integer, nullable=True),
        sa.Column("bathrooms", sa.Integer, nullable=True),
        sa.Column("garage_spots", sa.Integer, nullable=True),
        sa.Column("images", sa.JSON, nullable=False, server_default="[]"),
        sa.Column("latitude", sa.Float, nullable=True),
        sa.Column("longitude", sa.Float, nullable=True),
        sa.Column("has_pool", sa.Boolean, nullable=False, server_default="false"),
        sa.Column("is_furnished", sa.Boolean, nullable=False, server_default="false"),
        sa.Column("pets_allowed", sa.Boolean, nullable=False, server_default="false"),
        sa.Column("views", sa.Integer, nullable=False, server_default="0"),
        sa.Column("status", sa.String(30), nullable=False, server_default="pending_payment"),
        sa.Column("expires_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("contact_override", sa.String(10), nullable=False, server_default="owner"),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_properties_owner_id", "properties", ["owner_id"])
    op.create_index("ix_properties_city", "properties", ["city"])
    op.create_index("ix_properties_type", "properties", ["type"])
    op.create_index("ix_properties_price", "properties", ["price"])
    op.create_index("ix_properties_created_at", "properties", ["created_at"])
    op.create_index("ix_properties_status_expires_at", "properties", ["status", "expires_at"])


def downgrade() -> None:
    op.drop_table("properties")
    op.drop_table("system_settings")
    op.drop_table("property_types")
    op.drop_table("credentials")
    op.drop_table("users")
