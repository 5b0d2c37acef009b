"""Admin back-office API router — moderation, users, settings and dashboard.
/api/v1/admin"""
from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Request

from app.api.deps import (
    AdminUser,
    get_admin_service,
    get_listing_service,
    get_settings_service,
)
from app.api.responses import ok
from app.api.v1.properties import owner_view
from app.core.domain_types import PropertyStatus
from app.schemas.base_schema import ApiResponse, Meta
from app.schemas.property_schema import PropertyRead
from app.schemas.settings_schema import AdminStats, SystemSettingsRead, SystemSettingsUpdate
from app.schemas.user_schema import (
    AdminUserUpdate,
    UserAdminRead,
    UserRead,
    UserStatusUpdate,
    ValidationDecision,
)
from app.services.admin_service import AdminService
from app.services.listing_service import ListingService
from app.services.settings_service import SettingsService

router = APIRouter()


# ─── Listing moderation ─────────────────────────────────────────

@router.get("/properties", response_model=ApiResponse[List[PropertyRead]])
async def list_all_properties(
    request: Request,
    admin: AdminUser,
    status: Optional[PropertyStatus] = Query(None, description="Filtrar por status"),
    service: ListingService = Depends(get_listing_service),
):
    items = [owner_view(p) for p in await service.list_all(status)]
    return ok(items, "Anúncios", request, meta=Meta(total=len(items)))


@router.post("/properties/{property_id}/approve", response_model=ApiResponse[PropertyRead])
async def approve_property(
    property_id: UUID,
    request: Request,
    admin: AdminUser,
    service: ListingService = Depends(get_listing_service),
):
    prop = await service.approve(property_id, admin)
    return ok(owner_view(prop), "Anúncio aprovado", request)


@router.post("/properties/{property_id}/reject", response_model=ApiResponse[PropertyRead])
async def reject_property(
    property_id: UUID,
    request: Request,
    admin: AdminUser,
    service: ListingService = Depends(get_listing_service),
):
    prop = await service.reject(property_id, admin)
    return ok(owner_view(prop), "Anúncio rejeitado", request)


# ─── Users ──────────────────────────────────────────────────────

@router.get("/users", response_model=ApiResponse[List[UserAdminRead]])
async def list_users(
    request: Request,
    admin: AdminUser,
    service: AdminService = Depends(get_admin_service),
):
    items = [
        UserAdminRead.model_validate(user).model_copy(update={"property_count": count})
        for user, count in await service.list_users()
    ]
    return ok(items, "Utilizadores", request, meta=Meta(total=len(items)))


@router.patch("/users/{user_id}", response_model=ApiResponse[UserRead])
async def update_user(
    user_id: UUID,
    payload: AdminUserUpdate,
    request: Request,
    admin: AdminUser,
    service: AdminService = Depends(get_admin_service),
):
    user = await service.update_user(user_id, payload.model_dump(exclude_unset=True))
    return ok(UserRead.model_validate(user), "Utilizador atualizado", request)


@router.patch("/users/{user_id}/status", response_model=ApiResponse[UserRead])
async def update_user_status(
    user_id: UUID,
    payload: UserStatusUpdate,
    request: Request,
    admin: AdminUser,
    service: AdminService = Depends(get_admin_service),
):
    user = await service.update_user_status(user_id, payload.status)
    return ok(UserRead.model_validate(user), "Status atualizado", request)


@router.patch("/users/{user_id}/validation", response_model=ApiResponse[UserRead])
async def decide_validation(
    user_id: UUID,
    payload: ValidationDecision,
    request: Request,
    admin: AdminUser,
    service: AdminService = Depends(get_admin_service),
):
    user = await service.decide_validation(user_id, payload.validation_status)
    return ok(UserRead.model_validate(user), "Validação registada", request)


# ─── Settings & dashboard ───────────────────────────────────────

@router.get("/settings", response_model=ApiResponse[SystemSettingsRead])
async def get_settings(
    request: Request,
    admin: AdminUser,
    service: SettingsService = Depends(get_settings_service),
):
    return ok(SystemSettingsRead.model_validate(await service.get()), "Configurações", request)


@router.patch("/settings", response_model=ApiResponse[SystemSettingsRead])
async def update_settings(
    payload: SystemSettingsUpdate,
    request: Request,
    admin: AdminUser,
    service: SettingsService = Depends(get_settings_service),
):
    row = await service.update(payload.model_dump(exclude_unset=True))
    return ok(SystemSettingsRead.model_validate(row), "Configurações atualizadas", request)


@router.get("/stats", response_model=ApiResponse[AdminStats])
async def get_stats(
    request: Request,
    admin: AdminUser,
    service: AdminService = Depends(get_admin_service),
):
    return ok(AdminStats(**await service.stats()), "Estatísticas", request)
