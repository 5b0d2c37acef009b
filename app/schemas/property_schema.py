"""Pydantic schemas for Property API requests and responses."""
from datetime import datetime
from decimal import Decimal
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from app.core.domain_types import ContactOverride, PropertyStatus


class PropertyBase(BaseModel):
    """Owner-editable fields shared by create and read."""
    title: str
    type: str
    description: str = ""
    city: str
    neighborhood: str = ""
    address: Optional[str] = None

    price: Decimal = Decimal("0")
    price_on_request: bool = False
    condo_fee: Optional[Decimal] = None
    iptu: Optional[Decimal] = None

    area: float = 0.0
    bedrooms: Optional[int] = None
    suites: Optional[int] = None
    bathrooms: Optional[int] = None
    garage_spots: Optional[int] = None

    images: List[str] = Field(default_factory=list, description="Ordered image URLs; the first is the cover")
    latitude: Optional[float] = None
    longitude: Optional[float] = None

    has_pool: bool = False
    is_furnished: bool = False
    pets_allowed: bool = False


class PropertyCreate(PropertyBase):
    """Schema for creating a new listing (always starts pending payment)."""
    pass


class PropertyUpdate(BaseModel):
    """Schema for partial owner updates (all fields optional).

    id, owner_id, created_at, views and status are not writable here.
    """
    title: Optional[str] = None
    type: Optional[str] = None
    description: Optional[str] = None
    city: Optional[str] = None
    neighborhood: Optional[str] = None
    address: Optional[str] = None
    price: Optional[Decimal] = None
    price_on_request: Optional[bool] = None
    condo_fee: Optional[Decimal] = None
    iptu: Optional[Decimal] = None
    area: Optional[float] = None
    bedrooms: Optional[int] = None
    suites: Optional[int] = None
    bathrooms: Optional[int] = None
    garage_spots: Optional[int] = None
    images: Optional[List[str]] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    has_pool: Optional[bool] = None
    is_furnished: Optional[bool] = None
    pets_allowed: Optional[bool] = None


class PropertyAdminUpdate(PropertyUpdate):
    """Admin-only extras: listing validity and contact routing."""
    expires_at: Optional[datetime] = None
    contact_override: Optional[ContactOverride] = None


class PropertyRead(PropertyBase):
    """Full listing view for owners and admins."""
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    owner_id: UUID
    price: Optional[Decimal] = None
    views: int = 0
    status: PropertyStatus
    expires_at: Optional[datetime] = None
    is_expired: bool = False
    contact_override: ContactOverride = ContactOverride.OWNER
    created_at: datetime
    updated_at: datetime


class PropertyPublicRead(BaseModel):
    """Listing as shown in the public feed and detail page.

    `price` is null when the listing hides it from anonymous visitors.
    """
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    owner_id: UUID
    title: str
    type: str
    description: str
    city: str
    neighborhood: str
    address: Optional[str] = None
    price: Optional[Decimal] = None
    price_on_request: bool = False
    condo_fee: Optional[Decimal] = None
    iptu: Optional[Decimal] = None
    area: float
    bedrooms: Optional[int] = None
    suites: Optional[int] = None
    bathrooms: Optional[int] = None
    garage_spots: Optional[int] = None
    images: List[str] = []
    cover_image: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    has_pool: bool = False
    is_furnished: bool = False
    pets_allowed: bool = False
    views: int = 0
    status: PropertyStatus
    is_expired: bool = False
    created_at: datetime


class PropertyContact(BaseModel):
    """Where buyer outreach for a listing should go."""
    property_id: UUID
    owner_name: str
    owner_account_type: str
    phone: Optional[str] = None
    routed_to: ContactOverride


class PropertyCheckout(BaseModel):
    """What the owner is about to pay for a listing."""
    property_id: UUID
    title: str
    status: PropertyStatus
    listing_price: Decimal
