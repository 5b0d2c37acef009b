"""Boundary Protocols — storage contracts the services depend on.

Invariants:
    - Services never touch an AsyncSession directly; they receive repositories
    - Lookup misses return None / False, never raise
    - Every method touches exactly one aggregate (no multi-entity writes)

Implementations:
    - app/repositories/*_repository : SQLAlchemy async, one AsyncSession per request
    - app/repositories/memory : dict-backed, for service tests and local tooling
"""
from datetime import datetime
from typing import Any, Dict, List, Optional, Protocol
from uuid import UUID

from app.core.listing_query import ListingFilters
from app.models.property_model import Property
from app.models.property_type_model import PropertyType
from app.models.system_settings_model import SystemSettings
from app.models.user_model import User


class PropertyRepository(Protocol):
    async def get(self, property_id: UUID) -> Optional[Property]: ...
    async def add(self, prop: Property) -> Property: ...
    async def update(self, property_id: UUID, fields: Dict[str, Any]) -> Optional[Property]: ...
    async def delete(self, property_id: UUID) -> bool: ...
    async def increment_views(self, property_id: UUID) -> bool: ...
    async def list_public(self, filters: ListingFilters, now: datetime) -> List[Property]: ...
    async def list_by_owner(self, owner_id: UUID) -> List[Property]: ...
    async def list_all(self, status: Optional[str] = None) -> List[Property]: ...
    async def count_by_owner(self) -> Dict[UUID, int]: ...
    async def count_by_status(self) -> Dict[str, int]: ...


class UserRepository(Protocol):
    async def get(self, user_id: UUID) -> Optional[User]: ...
    async def get_by_email(self, email: str) -> Optional[User]: ...
    async def add(self, user: User) -> User: ...
    async def update(self, user_id: UUID, fields: Dict[str, Any]) -> Optional[User]: ...
    async def list_all(self) -> List[User]: ...
    async def count(self) -> int: ...


class CredentialRepository(Protocol):
    """Password hashes only; never exposed past the auth service."""
    async def get_hash(self, user_id: UUID) -> Optional[str]: ...
    async def set_hash(self, user_id: UUID, password_hash: str) -> None: ...


class SettingsRepository(Protocol):
    async def get(self) -> SystemSettings: ...
    async def update(self, fields: Dict[str, Any]) -> SystemSettings: ...


class PropertyTypeRepository(Protocol):
    async def list_all(self) -> List[PropertyType]: ...
    async def get(self, type_id: UUID) -> Optional[PropertyType]: ...
    async def get_by_name(self, name: str) -> Optional[PropertyType]: ...
    async def add(self, name: str) -> PropertyType: ...
    async def rename(self, type_id: UUID, name: str) -> Optional[PropertyType]: ...
    async def delete(self, type_id: UUID) -> bool: ...
