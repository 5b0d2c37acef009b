"""Property SQLAlchemy model — a classified listing and its lifecycle state."""
import uuid
from datetime import datetime, timezone
from decimal import Decimal
from typing import List, Optional

from sqlalchemy import (
    Boolean,
    DateTime,
    Float,
    ForeignKey,
    Index,
    Integer,
    JSON,
    Numeric,
    String,
    Text,
)
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column

from app.core.domain_types import ContactOverride, PropertyStatus
from app.database import Base


class Property(Base):
    __tablename__ = "properties"

    id: Mapped[uuid.UUID] = mapped_column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    owner_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("users.id"),
        index=True,
        comment="Creating user; immutable",
    )

    title: Mapped[str] = mapped_column(String(200))
    type: Mapped[str] = mapped_column(String(50), comment="Name from property_types catalog")
    description: Mapped[str] = mapped_column(Text, default="")
    city: Mapped[str] = mapped_column(String(100), index=True)
    neighborhood: Mapped[str] = mapped_column(String(100), default="")
    address: Mapped[Optional[str]] = mapped_column(String(300))

    price: Mapped[Decimal] = mapped_column(Numeric(14, 2), default=Decimal("0"))
    price_on_request: Mapped[bool] = mapped_column(Boolean, default=False, comment="Hide price from anonymous viewers")
    condo_fee: Mapped[Optional[Decimal]] = mapped_column(Numeric(10, 2))
    iptu: Mapped[Optional[Decimal]] = mapped_column(Numeric(10, 2))

    area: Mapped[float] = mapped_column(Float, default=0.0, comment="m²")
    bedrooms: Mapped[Optional[int]] = mapped_column(Integer)
    suites: Mapped[Optional[int]] = mapped_column(Integer)
    bathrooms: Mapped[Optional[int]] = mapped_column(Integer)
    garage_spots: Mapped[Optional[int]] = mapped_column(Integer)

    images: Mapped[List[str]] = mapped_column(JSON, default=list, comment="Ordered image URLs; first is the cover")
    latitude: Mapped[Optional[float]] = mapped_column(Float)
    longitude: Mapped[Optional[float]] = mapped_column(Float)

    has_pool: Mapped[bool] = mapped_column(Boolean, default=False)
    is_furnished: Mapped[bool] = mapped_column(Boolean, default=False)
    pets_allowed: Mapped[bool] = mapped_column(Boolean, default=False)

    views: Mapped[int] = mapped_column(Integer, default=0)
    status: Mapped[str] = mapped_column(
        String(30),
        default=PropertyStatus.PENDING_PAYMENT.value,
        comment="pending_payment, pending_approval, active, rejected",
    )
    expires_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True))
    contact_override: Mapped[str] = mapped_column(String(10), default=ContactOverride.OWNER.value)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )

    __table_args__ = (
        Index("ix_properties_status_expires_at", "status", "expires_at"),
        Index("ix_properties_type", "type"),
        Index("ix_properties_price", "price"),
        Index("ix_properties_created_at", "created_at"),
    )

    def __repr__(self) -> str:
        return f"<Property(id={self.id}, title='{self.title}', status={self.status})>"
