"""SQLAlchemy-backed property store."""
from datetime import datetime
from typing import Any, Dict, List, Optional
from uuid import UUID

from sqlalchemy import func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.domain_types import PropertyStatus
from app.core.listing_query import ListingFilters, filter_clauses, visibility_clause
from app.models.property_model import Property


class SqlPropertyRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def get(self, property_id: UUID) -> Optional[Property]:
        result = await self.db.execute(select(Property).where(Property.id == property_id))
        return result.scalar_one_or_none()

    async def add(self, prop: Property) -> Property:
        self.db.add(prop)
        await self.db.flush()
        await self.db.refresh(prop)
        return prop

    async def update(self, property_id: UUID, fields: Dict[str, Any]) -> Optional[Property]:
        prop = await self.get(property_id)
        if prop is None:
            return None
        for field, value in fields.items():
            setattr(prop, field, value)
        await self.db.flush()
        await self.db.refresh(prop)
        return prop

    async def delete(self, property_id: UUID) -> bool:
        prop = await self.get(property_id)
        if prop is None:
            return False
        await self.db.delete(prop)
        await self.db.flush()
        return True

    async def increment_views(self, property_id: UUID) -> bool:
        """Atomic +1, only for active listings. Returns whether a row changed."""
        result = await self.db.execute(
            update(Property)
            .where(Property.id == property_id, Property.status == PropertyStatus.ACTIVE.value)
            .values(views=Property.views + 1)
            .execution_options(synchronize_session="fetch")
        )
        return result.rowcount > 0

    async def list_public(self, filters: ListingFilters, now: datetime) -> List[Property]:
        query = (
            select(Property)
            .where(visibility_clause(now), *filter_clauses(filters))
            .order_by(Property.created_at.desc())
        )
        return list((await self.db.execute(query)).scalars().all())

    async def list_by_owner(self, owner_id: UUID) -> List[Property]:
        query = select(Property).where(Property.owner_id == owner_id).order_by(Property.created_at.desc())
        return list((await self.db.execute(query)).scalars().all())

    async def list_all(self, status: Optional[str] = None) -> List[Property]:
        query = select(Property).order_by(Property.created_at.desc())
        if status:
            query = query.where(Property.status == status)
        return list((await self.db.execute(query)).scalars().all())

    async def count_by_owner(self) -> Dict[UUID, int]:
        query = select(Property.owner_id, func.count(Property.id)).group_by(Property.owner_id)
        return {r[0]: r[1] for r in (await self.db.execute(query)).all()}

    async def count_by_status(self) -> Dict[str, int]:
        query = select(Property.status, func.count(Property.id)).group_by(Property.status)
        return {r[0]: r[1] for r in (await self.db.execute(query)).all()}
