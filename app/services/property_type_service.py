"""Property type catalog — the names a listing's `type` must come from."""
from typing import List
from uuid import UUID

from app.core.exceptions import DuplicateError, NotFoundError
from app.core.logging import get_logger
from app.core.repository_protocols import PropertyTypeRepository
from app.models.property_type_model import PropertyType

logger = get_logger(__name__)


class PropertyTypeService:
    def __init__(self, property_types: PropertyTypeRepository):
        self.property_types = property_types

    async def list_all(self) -> List[PropertyType]:
        return await self.property_types.list_all()

    async def _ensure_unique(self, name: str) -> None:
        if await self.property_types.get_by_name(name):
            raise DuplicateError(f"Tipo de imóvel '{name}' já existe.", detail={"name": name})

    async def add(self, name: str) -> PropertyType:
        name = name.strip()
        await self._ensure_unique(name)
        property_type = await self.property_types.add(name)
        logger.info("Property type added: %s", name)
        return property_type

    async def rename(self, type_id: UUID, name: str) -> PropertyType:
        # Listings keep the old name; only new writes are checked against the catalog
        name = name.strip()
        current = await self.property_types.get(type_id)
        if current is None:
            raise NotFoundError(f"Property type {type_id} not found")
        if current.name != name:
            await self._ensure_unique(name)
        return await self.property_types.rename(type_id, name)

    async def delete(self, type_id: UUID) -> None:
        if not await self.property_types.delete(type_id):
            raise NotFoundError(f"Property type {type_id} not found")
        logger.info("Property type deleted: %s", type_id)
