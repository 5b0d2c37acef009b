"""Dict-backed implementations of the repository protocols.

Hold transient ORM instances (never attached to a session). Used by the
service tests and handy for scripting against the services without a
database.
"""
import uuid
from collections import Counter
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, Dict, List, Optional
from uuid import UUID

from app.core.lifecycle import as_utc, should_count_view
from app.core.listing_query import ListingFilters, matches_public_feed
from app.models.property_model import Property
from app.models.property_type_model import PropertyType
from app.models.system_settings_model import SETTINGS_ROW_ID, SystemSettings
from app.models.user_model import User


def _newest_first(items: List[Any]) -> List[Any]:
    return sorted(items, key=lambda item: as_utc(item.created_at), reverse=True)


class InMemoryPropertyRepository:
    def __init__(self) -> None:
        self._items: Dict[UUID, Property] = {}

    async def get(self, property_id: UUID) -> Optional[Property]:
        return self._items.get(property_id)

    async def add(self, prop: Property) -> Property:
        if prop.id is None:
            prop.id = uuid.uuid4()
        self._items[prop.id] = prop
        return prop

    async def update(self, property_id: UUID, fields: Dict[str, Any]) -> Optional[Property]:
        prop = self._items.get(property_id)
        if prop is None:
            return None
        for field, value in fields.items():
            setattr(prop, field, value)
        prop.updated_at = datetime.now(timezone.utc)
        return prop

    async def delete(self, property_id: UUID) -> bool:
        return self._items.pop(property_id, None) is not None

    async def increment_views(self, property_id: UUID) -> bool:
        prop = self._items.get(property_id)
        if prop is None or not should_count_view(prop):
            return False
        prop.views = (prop.views or 0) + 1
        return True

    async def list_public(self, filters: ListingFilters, now: datetime) -> List[Property]:
        return _newest_first([p for p in self._items.values() if matches_public_feed(p, filters, now)])

    async def list_by_owner(self, owner_id: UUID) -> List[Property]:
        return _newest_first([p for p in self._items.values() if p.owner_id == owner_id])

    async def list_all(self, status: Optional[str] = None) -> List[Property]:
        return _newest_first([p for p in self._items.values() if not status or p.status == status])

    async def count_by_owner(self) -> Dict[UUID, int]:
        return dict(Counter(p.owner_id for p in self._items.values()))

    async def count_by_status(self) -> Dict[str, int]:
        return dict(Counter(p.status for p in self._items.values()))


class InMemoryUserRepository:
    def __init__(self) -> None:
        self._items: Dict[UUID, User] = {}

    async def get(self, user_id: UUID) -> Optional[User]:
        return self._items.get(user_id)

    async def get_by_email(self, email: str) -> Optional[User]:
        return next((u for u in self._items.values() if u.email == email), None)

    async def add(self, user: User) -> User:
        if user.id is None:
            user.id = uuid.uuid4()
        if user.created_at is None:
            user.created_at = datetime.now(timezone.utc)
        self._items[user.id] = user
        return user

    async def update(self, user_id: UUID, fields: Dict[str, Any]) -> Optional[User]:
        user = self._items.get(user_id)
        if user is None:
            return None
        for field, value in fields.items():
            setattr(user, field, value)
        user.updated_at = datetime.now(timezone.utc)
        return user

    async def list_all(self) -> List[User]:
        return sorted(self._items.values(), key=lambda u: as_utc(u.created_at))

    async def count(self) -> int:
        return len(self._items)


class InMemoryCredentialRepository:
    def __init__(self) -> None:
        self._hashes: Dict[UUID, str] = {}

    async def get_hash(self, user_id: UUID) -> Optional[str]:
        return self._hashes.get(user_id)

    async def set_hash(self, user_id: UUID, password_hash: str) -> None:
        self._hashes[user_id] = password_hash


class InMemorySettingsRepository:
    def __init__(self, listing_price: Decimal = Decimal("99.90"), admin_contact_phone: Optional[str] = None):
        self._row = SystemSettings(
            id=SETTINGS_ROW_ID,
            listing_price=listing_price,
            admin_contact_phone=admin_contact_phone,
        )

    async def get(self) -> SystemSettings:
        return self._row

    async def update(self, fields: Dict[str, Any]) -> SystemSettings:
        for field, value in fields.items():
            setattr(self._row, field, value)
        return self._row


class InMemoryPropertyTypeRepository:
    def __init__(self, names: tuple = ()) -> None:
        self._items: Dict[UUID, PropertyType] = {}
        for name in names:
            property_type = PropertyType(id=uuid.uuid4(), name=name)
            self._items[property_type.id] = property_type

    async def list_all(self) -> List[PropertyType]:
        return sorted(self._items.values(), key=lambda t: t.name)

    async def get(self, type_id: UUID) -> Optional[PropertyType]:
        return self._items.get(type_id)

    async def get_by_name(self, name: str) -> Optional[PropertyType]:
        return next((t for t in self._items.values() if t.name == name), None)

    async def add(self, name: str) -> PropertyType:
        property_type = PropertyType(id=uuid.uuid4(), name=name, created_at=datetime.now(timezone.utc))
        self._items[property_type.id] = property_type
        return property_type

    async def rename(self, type_id: UUID, name: str) -> Optional[PropertyType]:
        property_type = self._items.get(type_id)
        if property_type is None:
            return None
        property_type.name = name
        return property_type

    async def delete(self, type_id: UUID) -> bool:
        return self._items.pop(type_id, None) is not None
