"""API dependencies — database session, services, and the current user.

Autenticação por bearer token (JWT assinado com SECRET_KEY). O token só
carrega o id; o utilizador é recarregado da DB em cada pedido, por isso
bloqueios e mudanças de role aplicam-se de imediato.
"""
from typing import AsyncGenerator, Annotated, Optional

from fastapi import Depends, Security
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.core.domain_types import PROFESSIONAL_ACCOUNT_TYPES, AccountType, UserStatus
from app.core.exceptions import (
    AccountBlockedError,
    AuthenticationRequiredError,
    PermissionDeniedError,
)
from app.core.logging import set_actor
from app.core.security import decode_access_token
from app.database import async_session_factory
from app.models.user_model import User
from app.repositories.property_repository import SqlPropertyRepository
from app.repositories.settings_repository import SqlPropertyTypeRepository, SqlSettingsRepository
from app.repositories.user_repository import SqlCredentialRepository, SqlUserRepository
from app.services.admin_service import AdminService
from app.services.auth_service import AuthService
from app.services.listing_service import ListingService
from app.services.property_type_service import PropertyTypeService
from app.services.settings_service import SettingsService


# ---------------------------------------------------------------------------
# Database session dependency
# ---------------------------------------------------------------------------

async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Yield an async database session for request scope."""
    async with async_session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


DbSession = Annotated[AsyncSession, Depends(get_db)]


# ---------------------------------------------------------------------------
# Services (one set of repositories per request session)
# ---------------------------------------------------------------------------

def get_listing_service(db: DbSession) -> ListingService:
    return ListingService(
        properties=SqlPropertyRepository(db),
        users=SqlUserRepository(db),
        settings=SqlSettingsRepository(db),
        property_types=SqlPropertyTypeRepository(db),
        validity_days=settings.listing_validity_days,
    )


def get_auth_service(db: DbSession) -> AuthService:
    return AuthService(SqlUserRepository(db), SqlCredentialRepository(db))


def get_admin_service(db: DbSession) -> AdminService:
    return AdminService(SqlUserRepository(db), SqlPropertyRepository(db), SqlSettingsRepository(db))


def get_settings_service(db: DbSession) -> SettingsService:
    return SettingsService(SqlSettingsRepository(db))


def get_property_type_service(db: DbSession) -> PropertyTypeService:
    return PropertyTypeService(SqlPropertyTypeRepository(db))


# ---------------------------------------------------------------------------
# Current user
# ---------------------------------------------------------------------------

_bearer = HTTPBearer(
    auto_error=False,  # False para devolver 401 no envelope ApiResponse em vez do 403 do FastAPI
    description="Token devolvido por /api/v1/auth/login ou /register",
)


async def get_optional_user(
    db: DbSession,
    credentials: Annotated[Optional[HTTPAuthorizationCredentials], Security(_bearer)],
) -> Optional[User]:
    """Resolve o utilizador do token, ou None para visitantes anónimos.

    Um token presente mas inválido continua a ser erro (401), para o cliente
    saber que a sessão expirou.
    """
    if credentials is None:
        return None
    user = await SqlUserRepository(db).get(decode_access_token(credentials.credentials))
    if user is None:
        raise AuthenticationRequiredError("Sessão inválida ou expirada.")
    set_actor(user.id)
    if user.status == UserStatus.BLOCKED:
        raise AccountBlockedError()
    return user


async def require_user(user: Annotated[Optional[User], Depends(get_optional_user)]) -> User:
    if user is None:
        raise AuthenticationRequiredError("Faça login para continuar.")
    return user


async def require_admin(user: Annotated[User, Depends(require_user)]) -> User:
    if not user.is_admin:
        raise PermissionDeniedError("Acesso restrito a administradores.")
    return user


async def require_professional(user: Annotated[User, Depends(require_user)]) -> User:
    if AccountType(user.account_type) not in PROFESSIONAL_ACCOUNT_TYPES:
        raise PermissionDeniedError("Disponível apenas para corretores e imobiliárias.")
    return user


OptionalUser = Annotated[Optional[User], Depends(get_optional_user)]
CurrentUser = Annotated[User, Depends(require_user)]
AdminUser = Annotated[User, Depends(require_admin)]
ProfessionalUser = Annotated[User, Depends(require_professional)]
