"""Properties API router — public feed, owner dashboard, CRUD, views and payment.
/api/v1/properties"""
from decimal import Decimal
from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Request

from app.api.deps import CurrentUser, OptionalUser, get_listing_service
from app.api.responses import ok
from app.core import lifecycle
from app.core.domain_types import ContactOverride, PropertyStatus
from app.core.exceptions import NotFoundError
from app.core.listing_query import ListingFilters
from app.models.property_model import Property
from app.models.user_model import User
from app.schemas.base_schema import ApiResponse, Meta
from app.schemas.property_schema import (
    PropertyAdminUpdate,
    PropertyCheckout,
    PropertyContact,
    PropertyCreate,
    PropertyPublicRead,
    PropertyRead,
)
from app.services.listing_service import ListingService

router = APIRouter()


def public_view(prop: Property, viewer: Optional[User]) -> PropertyPublicRead:
    item = PropertyPublicRead.model_validate(prop)
    return item.model_copy(update={
        "price": lifecycle.visible_price(prop, viewer),
        "cover_image": prop.images[0] if prop.images else None,
        "is_expired": lifecycle.is_expired(prop),
    })


def owner_view(prop: Property) -> PropertyRead:
    return PropertyRead.model_validate(prop).model_copy(update={"is_expired": lifecycle.is_expired(prop)})


def _can_see_everything(prop: Property, viewer: Optional[User]) -> bool:
    return lifecycle.is_admin(viewer) or lifecycle.is_owner(prop, viewer)


@router.get("", response_model=ApiResponse[List[PropertyPublicRead]])
async def list_properties(
    request: Request,
    viewer: OptionalUser,
    type: Optional[str] = Query(None, description="Nome exato do tipo (catálogo)"),
    city: Optional[str] = Query(None, description="Parte do nome da cidade"),
    max_price: Optional[Decimal] = Query(None, ge=0),
    max_area: Optional[float] = Query(None, ge=0),
    q: Optional[str] = Query(None, description="Busca em título, descrição, cidade e bairro"),
    service: ListingService = Depends(get_listing_service),
):
    """Public feed: active, non-expired listings, newest first."""
    filters = ListingFilters(
        type=type, city=city, max_price=max_price, max_area=max_area, q=q, anonymous=viewer is None,
    )
    items = [public_view(p, viewer) for p in await service.list_public(filters)]
    return ok(items, "Imóveis encontrados", request, meta=Meta(total=len(items)))


@router.get("/mine", response_model=ApiResponse[List[PropertyRead]])
async def list_my_properties(
    request: Request,
    user: CurrentUser,
    service: ListingService = Depends(get_listing_service),
):
    items = [owner_view(p) for p in await service.list_by_owner(user.id)]
    return ok(items, "Meus anúncios", request, meta=Meta(total=len(items)))


@router.get("/{property_id}", response_model=ApiResponse[PropertyPublicRead])
async def get_property(
    property_id: UUID,
    request: Request,
    viewer: OptionalUser,
    service: ListingService = Depends(get_listing_service),
):
    prop = await service.require(property_id)
    if not lifecycle.is_publicly_visible(prop) and not _can_see_everything(prop, viewer):
        raise NotFoundError(f"Property {property_id} not found")
    return ok(public_view(prop, viewer), "Imóvel encontrado", request)


@router.get("/{property_id}/contact", response_model=ApiResponse[PropertyContact])
async def get_property_contact(
    property_id: UUID,
    request: Request,
    user: CurrentUser,
    service: ListingService = Depends(get_listing_service),
):
    prop, owner, phone = await service.contact_for(property_id)
    if not lifecycle.is_publicly_visible(prop) and not _can_see_everything(prop, user):
        raise NotFoundError(f"Property {property_id} not found")
    contact = PropertyContact(
        property_id=prop.id,
        owner_name=owner.name,
        owner_account_type=owner.account_type,
        phone=phone,
        routed_to=ContactOverride(prop.contact_override),
    )
    return ok(contact, "Contato do anúncio", request)


@router.post("", response_model=ApiResponse[PropertyRead], status_code=201)
async def create_property(
    payload: PropertyCreate,
    request: Request,
    user: CurrentUser,
    service: ListingService = Depends(get_listing_service),
):
    prop = await service.create(payload.model_dump(), user.id)
    return ok(owner_view(prop), "Anúncio criado, aguardando pagamento", request)


@router.patch("/{property_id}", response_model=ApiResponse[PropertyRead])
async def update_property(
    property_id: UUID,
    payload: PropertyAdminUpdate,
    request: Request,
    user: CurrentUser,
    service: ListingService = Depends(get_listing_service),
):
    """Partial update. `expires_at` and `contact_override` are honoured for admins only."""
    prop = await service.update(property_id, payload.model_dump(exclude_unset=True), user)
    return ok(owner_view(prop), "Anúncio atualizado", request)


@router.delete("/{property_id}", response_model=ApiResponse[None], status_code=200)
async def delete_property(
    property_id: UUID,
    request: Request,
    user: CurrentUser,
    service: ListingService = Depends(get_listing_service),
):
    await service.delete(property_id, user)
    return ok(None, "Anúncio removido", request)


@router.post("/{property_id}/views", response_model=ApiResponse[dict])
async def register_view(
    property_id: UUID,
    request: Request,
    service: ListingService = Depends(get_listing_service),
):
    counted = await service.increment_views(property_id)
    return ok({"counted": counted}, "Visualização registada" if counted else "Visualização ignorada", request)


@router.get("/{property_id}/checkout", response_model=ApiResponse[PropertyCheckout])
async def get_checkout(
    property_id: UUID,
    request: Request,
    user: CurrentUser,
    service: ListingService = Depends(get_listing_service),
):
    """Listing fee shown before the simulated payment."""
    prop, listing_price = await service.checkout_for(property_id, user)
    checkout = PropertyCheckout(
        property_id=prop.id,
        title=prop.title,
        status=PropertyStatus(prop.status),
        listing_price=listing_price,
    )
    return ok(checkout, "Resumo do pagamento", request)


@router.post("/{property_id}/payment", response_model=ApiResponse[PropertyRead])
async def pay_property(
    property_id: UUID,
    request: Request,
    user: CurrentUser,
    service: ListingService = Depends(get_listing_service),
):
    """Simulated checkout: pending_payment → pending_approval."""
    prop = await service.simulate_payment(property_id, user)
    return ok(owner_view(prop), "Pagamento confirmado", request)
