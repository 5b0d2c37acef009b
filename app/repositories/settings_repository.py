"""SQLAlchemy-backed system settings (single row) and property type catalog."""
from typing import Any, Dict, List, Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.models.property_type_model import PropertyType
from app.models.system_settings_model import SETTINGS_ROW_ID, SystemSettings


class SqlSettingsRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def get(self) -> SystemSettings:
        """Return the settings row, creating it from configured defaults on first use."""
        row = await self.db.get(SystemSettings, SETTINGS_ROW_ID)
        if row is None:
            row = SystemSettings(
                id=SETTINGS_ROW_ID,
                listing_price=settings.default_listing_price,
                admin_contact_phone=settings.default_admin_contact_phone,
            )
            self.db.add(row)
            await self.db.flush()
        return row

    async def update(self, fields: Dict[str, Any]) -> SystemSettings:
        row = await self.get()
        for field, value in fields.items():
            setattr(row, field, value)
        await self.db.flush()
        await self.db.refresh(row)
        return row


class SqlPropertyTypeRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_all(self) -> List[PropertyType]:
        result = await self.db.execute(select(PropertyType).order_by(PropertyType.name))
        return list(result.scalars().all())

    async def get(self, type_id: UUID) -> Optional[PropertyType]:
        result = await self.db.execute(select(PropertyType).where(PropertyType.id == type_id))
        return result.scalar_one_or_none()

    async def get_by_name(self, name: str) -> Optional[PropertyType]:
        result = await self.db.execute(select(PropertyType).where(PropertyType.name == name))
        return result.scalar_one_or_none()

    async def add(self, name: str) -> PropertyType:
        property_type = PropertyType(name=name)
        self.db.add(property_type)
        await self.db.flush()
        await self.db.refresh(property_type)
        return property_type

    async def rename(self, type_id: UUID, name: str) -> Optional[PropertyType]:
        property_type = await self.get(type_id)
        if property_type is None:
            return None
        property_type.name = name
        await self.db.flush()
        return property_type

    async def delete(self, type_id: UUID) -> bool:
        property_type = await self.get(type_id)
        if property_type is None:
            return False
        await self.db.delete(property_type)
        await self.db.flush()
        return True
