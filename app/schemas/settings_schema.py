"""Pydantic schemas for system settings, the property type catalog and admin stats."""
from datetime import datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class SystemSettingsRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    listing_price: Decimal
    admin_contact_phone: Optional[str] = None
    updated_at: Optional[datetime] = None


class SystemSettingsUpdate(BaseModel):
    listing_price: Optional[Decimal] = Field(None, ge=0)
    admin_contact_phone: Optional[str] = None


class PropertyTypeRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str


class PropertyTypeWrite(BaseModel):
    name: str = Field(..., min_length=1, max_length=50)


class AdminStats(BaseModel):
    """Numbers for the back-office dashboard."""
    users: int = 0
    pending_approval: int = 0
    pending_payment: int = 0
    active: int = 0
    rejected: int = 0
    revenue: Decimal = Decimal("0")
