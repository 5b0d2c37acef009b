"""Property types API router — public catalog, admin maintenance.
/api/v1/property-types"""
from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, Request

from app.api.deps import AdminUser, get_property_type_service
from app.api.responses import ok
from app.schemas.base_schema import ApiResponse
from app.schemas.settings_schema import PropertyTypeRead, PropertyTypeWrite
from app.services.property_type_service import PropertyTypeService

router = APIRouter()


@router.get("", response_model=ApiResponse[List[PropertyTypeRead]])
async def list_property_types(
    request: Request,
    service: PropertyTypeService = Depends(get_property_type_service),
):
    types = [PropertyTypeRead.model_validate(t) for t in await service.list_all()]
    return ok(types, "Tipos de imóvel", request)


@router.post("", response_model=ApiResponse[PropertyTypeRead], status_code=201)
async def create_property_type(
    payload: PropertyTypeWrite,
    request: Request,
    admin: AdminUser,
    service: PropertyTypeService = Depends(get_property_type_service),
):
    property_type = await service.add(payload.name)
    return ok(PropertyTypeRead.model_validate(property_type), "Tipo criado", request)


@router.patch("/{type_id}", response_model=ApiResponse[PropertyTypeRead])
async def rename_property_type(
    type_id: UUID,
    payload: PropertyTypeWrite,
    request: Request,
    admin: AdminUser,
    service: PropertyTypeService = Depends(get_property_type_service),
):
    property_type = await service.rename(type_id, payload.name)
    return ok(PropertyTypeRead.model_validate(property_type), "Tipo atualizado", request)


@router.delete("/{type_id}", response_model=ApiResponse[None], status_code=200)
async def delete_property_type(
    type_id: UUID,
    request: Request,
    admin: AdminUser,
    service: PropertyTypeService = Depends(get_property_type_service),
):
    await service.delete(type_id)
    return ok(None, "Tipo removido", request)
