"""Listing service — property CRUD and lifecycle orchestration.

Loads entities through the repository protocols, applies the pure rules
from app.core.lifecycle / app.core.validation, and writes the result back.
Cross-field invariants are checked here on every write, so callers other
than the web forms cannot store invalid listings either.
"""
import uuid
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, Dict, List, Optional, Tuple
from uuid import UUID

from app.core import lifecycle
from app.core.domain_types import ContactOverride, PropertyStatus
from app.core.exceptions import NotFoundError, PermissionDeniedError, ValidationError
from app.core.listing_query import ListingFilters
from app.core.logging import get_logger
from app.core.repository_protocols import (
    PropertyRepository,
    PropertyTypeRepository,
    SettingsRepository,
    UserRepository,
)
from app.core.validation import validate_property_data
from app.models.property_model import Property
from app.models.user_model import User
from app.schemas.property_schema import PropertyBase

logger = get_logger(__name__)

_EDITABLE_FIELDS = tuple(PropertyBase.model_fields)
_ADMIN_ONLY_FIELDS = ("expires_at", "contact_override")


def _drop_nulls_for_required(fields: Dict[str, Any]) -> Dict[str, Any]:
    columns = Property.__table__.columns
    return {k: v for k, v in fields.items() if v is not None or columns[k].nullable}


class ListingService:
    def __init__(
        self,
        properties: PropertyRepository,
        users: UserRepository,
        settings: SettingsRepository,
        property_types: PropertyTypeRepository,
        validity_days: int = 30,
    ):
        self.properties = properties
        self.users = users
        self.settings = settings
        self.property_types = property_types
        self.validity_days = validity_days

    # ─── Queries ────────────────────────────────────────────────

    async def list_public(self, filters: ListingFilters, now: Optional[datetime] = None) -> List[Property]:
        return await self.properties.list_public(filters, now or lifecycle.utcnow())

    async def list_by_owner(self, owner_id: UUID) -> List[Property]:
        return await self.properties.list_by_owner(owner_id)

    async def list_all(self, status: Optional[PropertyStatus] = None) -> List[Property]:
        return await self.properties.list_all(status.value if status else None)

    async def get(self, property_id: UUID) -> Optional[Property]:
        return await self.properties.get(property_id)

    async def require(self, property_id: UUID) -> Property:
        prop = await self.properties.get(property_id)
        if prop is None:
            raise NotFoundError(f"Property {property_id} not found")
        return prop

    # ─── Writes ─────────────────────────────────────────────────

    async def _allowed_types(self) -> set:
        return {t.name for t in await self.property_types.list_all()}

    async def create(self, data: Dict[str, Any], owner_id: UUID) -> Property:
        errors = validate_property_data(data, await self._allowed_types())
        if errors:
            raise ValidationError(errors)

        now = lifecycle.utcnow()
        prop = Property(
            **{field: data.get(field) for field in _EDITABLE_FIELDS if field in data},
            id=uuid.uuid4(),
            owner_id=owner_id,
            created_at=now,
            updated_at=now,
            views=0,
            status=PropertyStatus.PENDING_PAYMENT.value,
            expires_at=lifecycle.compute_expiry(now, self.validity_days),
            contact_override=ContactOverride.OWNER.value,
        )
        prop = await self.properties.add(prop)
        logger.info("Property created", extra={"property_id": prop.id, "owner_id": owner_id})
        return prop

    async def update(self, property_id: UUID, fields: Dict[str, Any], actor: User) -> Property:
        """Shallow-merge `fields` into the listing after the edit guard and re-validation."""
        prop = await self.require(property_id)
        lifecycle.ensure_can_modify(prop, actor)

        forbidden = [f for f in fields if f not in _EDITABLE_FIELDS and f not in _ADMIN_ONLY_FIELDS]
        if forbidden:
            raise ValidationError({f: "Campo não pode ser alterado." for f in forbidden})
        if not lifecycle.is_admin(actor) and any(f in fields for f in _ADMIN_ONLY_FIELDS):
            raise PermissionDeniedError("Apenas administradores podem alterar validade e contato.")
        fields = _drop_nulls_for_required(fields)

        merged = {field: getattr(prop, field) for field in _EDITABLE_FIELDS}
        merged.update({k: v for k, v in fields.items() if k in _EDITABLE_FIELDS})
        allowed = await self._allowed_types() if "type" in fields else None
        errors = validate_property_data(merged, allowed)
        if "images" in fields and not fields["images"] and lifecycle.requires_images(prop.status):
            errors["images"] = "O anúncio precisa de pelo menos uma imagem."
        if errors:
            raise ValidationError(errors)

        changes = dict(fields)
        if "expires_at" in changes and changes["expires_at"] is not None:
            changes["expires_at"] = lifecycle.as_utc(changes["expires_at"]).astimezone(timezone.utc)
        if "contact_override" in changes and changes["contact_override"] is not None:
            changes["contact_override"] = ContactOverride(changes["contact_override"]).value

        next_status = lifecycle.status_after_edit(prop, actor)
        if next_status is not None:
            changes["status"] = next_status.value
            logger.info("Rejected property resubmitted", extra={"property_id": property_id, "status": next_status.value})

        return await self.properties.update(property_id, changes)

    async def delete(self, property_id: UUID, actor: User) -> bool:
        prop = await self.require(property_id)
        lifecycle.ensure_can_modify(prop, actor)
        deleted = await self.properties.delete(property_id)
        logger.info("Property deleted", extra={"property_id": property_id, "user_id": actor.id})
        return deleted

    async def increment_views(self, property_id: UUID) -> bool:
        """Count one detail-page view; only active listings are counted."""
        await self.require(property_id)
        return await self.properties.increment_views(property_id)

    # ─── Lifecycle transitions ──────────────────────────────────

    async def checkout_for(self, property_id: UUID, actor: User) -> Tuple[Property, Decimal]:
        """The listing plus the fee its owner pays to publish it."""
        prop = await self.require(property_id)
        lifecycle.ensure_can_pay(prop, actor)
        system_settings = await self.settings.get()
        return prop, system_settings.listing_price

    async def simulate_payment(self, property_id: UUID, actor: User) -> Property:
        """pending_payment → pending_approval; a no-op in any other status."""
        prop = await self.require(property_id)
        lifecycle.ensure_can_pay(prop, actor)

        next_status = lifecycle.apply_payment(prop.status)
        if next_status == PropertyStatus(prop.status):
            logger.info("Payment ignored", extra={"property_id": property_id, "status": next_status.value})
            return prop

        prop = await self.properties.update(property_id, {"status": next_status.value})
        logger.info("Property paid", extra={"property_id": property_id, "status": next_status.value})
        return prop

    async def approve(self, property_id: UUID, actor: User) -> Property:
        return await self._decide(property_id, actor, lifecycle.approve)

    async def reject(self, property_id: UUID, actor: User) -> Property:
        return await self._decide(property_id, actor, lifecycle.reject)

    async def _decide(self, property_id: UUID, actor: User, rule) -> Property:
        if not lifecycle.is_admin(actor):
            raise PermissionDeniedError("Apenas administradores podem moderar anúncios.")
        prop = await self.require(property_id)
        next_status = rule(prop)
        prop = await self.properties.update(property_id, {"status": next_status.value})
        logger.info("Property moderated", extra={"property_id": property_id, "status": next_status.value})
        return prop

    # ─── Contact routing ────────────────────────────────────────

    async def contact_for(self, property_id: UUID) -> Tuple[Property, User, Optional[str]]:
        prop = await self.require(property_id)
        owner = await self.users.get(prop.owner_id)
        if owner is None:
            raise NotFoundError(f"Owner of property {property_id} not found")
        system_settings = await self.settings.get()
        phone = lifecycle.resolve_contact_phone(prop, owner.phone, system_settings.admin_contact_phone)
        return prop, owner, phone
