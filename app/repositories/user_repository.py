"""SQLAlchemy-backed user and credential stores."""
from typing import Any, Dict, List, Optional
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.user_model import Credential, User


class SqlUserRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def get(self, user_id: UUID) -> Optional[User]:
        result = await self.db.execute(select(User).where(User.id == user_id))
        return result.scalar_one_or_none()

    async def get_by_email(self, email: str) -> Optional[User]:
        result = await self.db.execute(select(User).where(User.email == email))
        return result.scalar_one_or_none()

    async def add(self, user: User) -> User:
        self.db.add(user)
        await self.db.flush()
        await self.db.refresh(user)
        return user

    async def update(self, user_id: UUID, fields: Dict[str, Any]) -> Optional[User]:
        user = await self.get(user_id)
        if user is None:
            return None
        for field, value in fields.items():
            setattr(user, field, value)
        await self.db.flush()
        await self.db.refresh(user)
        return user

    async def list_all(self) -> List[User]:
        result = await self.db.execute(select(User).order_by(User.created_at))
        return list(result.scalars().all())

    async def count(self) -> int:
        return (await self.db.execute(select(func.count(User.id)))).scalar_one()


class SqlCredentialRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_hash(self, user_id: UUID) -> Optional[str]:
        result = await self.db.execute(
            select(Credential.password_hash).where(Credential.user_id == user_id)
        )
        return result.scalar_one_or_none()

    async def set_hash(self, user_id: UUID, password_hash: str) -> None:
        credential = await self.db.get(Credential, user_id)
        if credential is None:
            self.db.add(Credential(user_id=user_id, password_hash=password_hash))
        else:
            credential.password_hash = password_hash
        await self.db.flush()
