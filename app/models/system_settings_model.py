"""SystemSettings SQLAlchemy model — single-row, admin-mutable configuration."""
from datetime import datetime, timezone
from decimal import Decimal
from typing import Optional

from sqlalchemy import DateTime, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base

SETTINGS_ROW_ID = 1


class SystemSettings(Base):
    __tablename__ = "system_settings"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, default=SETTINGS_ROW_ID)
    listing_price: Mapped[Decimal] = mapped_column(Numeric(10, 2), comment="Fee charged per listing")
    admin_contact_phone: Mapped[Optional[str]] = mapped_column(String(30), comment="Used when contact_override=admin")
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )

    def __repr__(self) -> str:
        return f"<SystemSettings(listing_price={self.listing_price})>"
