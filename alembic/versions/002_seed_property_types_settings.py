"""Seed the property type catalog and the system settings row.

Revision ID: 002_seed_property_types_settings
Revises: 001_initial
Create Date: 2026-10-17
"""
import uuid
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import UUID

revision: str = "002_seed_property_types_settings"
down_revision: Union[str, None] = "001_initial"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


PROPERTY_TYPES = ["Apartment", "House", "Land"]


def upgrade() -> None:
    types_table = sa.table(
        "property_types",
        sa.column("id", UUID(as_uuid=True)),
        sa.column("name", sa.String),
    )
    for name in PROPERTY_TYPES:
        op.execute(types_table.insert().values(id=uuid.uuid4(), name=name))

    settings_table = sa.table(
        "system_settings",
        sa.column("id", sa.Integer),
        sa.column("listing_price", sa.Numeric),
        sa.column("admin_contact_phone", sa.String),
    )
    op.execute(
        settings_table.insert().values(id=1, listing_price=99.90, admin_contact_phone="5511999998888")
    )


def downgrade() -> None:
    op.execute("DELETE FROM system_settings WHERE id = 1")
    for name in PROPERTY_TYPES:
        op.execute(sa.text("DELETE FROM property_types WHERE name = :name").bindparams(name=name))
