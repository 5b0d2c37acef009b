"""Test fixtures — async test client, test database, users and factories."""
from typing import AsyncGenerator

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

import app.models  # noqa: F401
from app.database import Base
from app.api.deps import get_db
from app.core.domain_types import DEFAULT_PROPERTY_TYPES, AccountType, UserRole
from app.core.security import create_access_token
from app.main import app
from app.models.user_model import User
from app.repositories.settings_repository import SqlPropertyTypeRepository
from app.repositories.user_repository import SqlCredentialRepository, SqlUserRepository
from app.services.auth_service import AuthService


TEST_DATABASE_URL = "sqlite+aiosqlite:///./test.db"

test_engine = create_async_engine(TEST_DATABASE_URL, echo=False, poolclass=NullPool)
test_session_factory = async_sessionmaker(
    test_engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


@pytest_asyncio.fixture(scope="function")
async def db_session() -> AsyncGenerator[AsyncSession, None]:
    """Create tables, seed the type catalog and yield a test database session."""
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with test_session_factory() as session:
        types = SqlPropertyTypeRepository(session)
        for name in DEFAULT_PROPERTY_TYPES:
            await types.add(name)
        await session.commit()
        yield session

    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


@pytest_asyncio.fixture(scope="function")
async def client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """Yield an HTTP test client with the test DB injected.

    Each request gets its own session, so a rolled-back request never expires
    the users and listings the fixtures hold on `db_session`.
    """

    async def override_get_db():
        async with test_session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


async def create_user(
    db: AsyncSession,
    email: str,
    password: str = "password123",
    name: str = "Test User",
    **extra,
) -> User:
    """Register a user straight through the auth service."""
    service = AuthService(SqlUserRepository(db), SqlCredentialRepository(db))
    user = await service.register(name, email, password, **extra)
    await db.commit()
    return user


def auth_headers(user: User) -> dict:
    return {"Authorization": f"Bearer {create_access_token(user.id)}"}


@pytest_asyncio.fixture
async def owner(db_session: AsyncSession) -> User:
    return await create_user(db_session, "ana@email.com", name="Ana Costa", phone="11987654321")


@pytest_asyncio.fixture
async def other_user(db_session: AsyncSession) -> User:
    return await create_user(db_session, "outra@email.com", name="Outra Pessoa", phone="11911112222")


@pytest_asyncio.fixture
async def admin(db_session: AsyncSession) -> User:
    return await create_user(
        db_session, "admin@email.com", password="admin123", name="Admin", role=UserRole.ADMIN
    )


@pytest_asyncio.fixture
async def broker(db_session: AsyncSession) -> User:
    return await create_user(
        db_session, "corretor@email.com", name="Corretor", account_type=AccountType.CORRETOR
    )


def make_property_payload(**overrides) -> dict:
    """Create a valid property creation payload."""
    defaults = {
        "title": "Apartamento Moderno no Centro",
        "type": "Apartment",
        "description": "Lindo apartamento com 2 quartos, sala ampla e cozinha planejada.",
        "city": "São Paulo",
        "neighborhood": "Centro",
        "price": 750000,
        "price_on_request": False,
        "condo_fee": 800,
        "iptu": 150,
        "area": 85,
        "bedrooms": 2,
        "suites": 1,
        "bathrooms": 2,
        "garage_spots": 1,
        "images": ["https://picsum.photos/seed/10/800/600", "https://picsum.photos/seed/11/800/600"],
        "latitude": -23.5505,
        "longitude": -46.6333,
        "is_furnished": True,
        "pets_allowed": True,
    }
    defaults.update(overrides)
    return defaults


async def create_property(client: AsyncClient, owner: User, **overrides) -> dict:
    resp = await client.post("/api/v1/properties", json=make_property_payload(**overrides), headers=auth_headers(owner))
    assert resp.status_code == 201, resp.text
    return resp.json()["data"]


async def create_active_property(client: AsyncClient, owner: User, admin: User, **overrides) -> dict:
    """Create, pay and approve a listing so it shows up in the public feed."""
    created = await create_property(client, owner, **overrides)
    pay = await client.post(f"/api/v1/properties/{created['id']}/payment", headers=auth_headers(owner))
    assert pay.status_code == 200, pay.text
    approve = await client.post(f"/api/v1/admin/properties/{created['id']}/approve", headers=auth_headers(admin))
    assert approve.status_code == 200, approve.text
    return approve.json()["data"]
