"""Listing lifecycle rules — status transitions, expiry, visibility and routing.

Pure functions over anything shaped like a Property (ORM row or test double)
and anything shaped like a user (`id`, `role`). No IO here; the listing
service loads and saves around these calls.

    pending_payment --payment--> pending_approval --approve--> active
                                                  \--reject--> rejected
    rejected --owner edit--> pending_payment

Expiry is derived at read time and never stored as a status.
"""
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from typing import Any, Optional

from app.core.domain_types import ContactOverride, PropertyStatus, UserRole
from app.core.exceptions import InvalidTransitionError, PermissionDeniedError, ValidationError


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Attach UTC to naive timestamps (SQLite hands them back without tzinfo)."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def compute_expiry(start: datetime, validity_days: int) -> datetime:
    return as_utc(start) + timedelta(days=validity_days)


def is_expired(prop: Any, now: Optional[datetime] = None) -> bool:
    expires_at = as_utc(prop.expires_at)
    return expires_at is not None and expires_at < (now or utcnow())


def is_publicly_visible(prop: Any, now: Optional[datetime] = None) -> bool:
    return prop.status == PropertyStatus.ACTIVE and not is_expired(prop, now)


# ─── Transitions ─────────────────────────────────────────────────

def apply_payment(status: str) -> PropertyStatus:
    """Status after a successful payment; anything but pending_payment is kept."""
    current = PropertyStatus(status)
    if current == PropertyStatus.PENDING_PAYMENT:
        return PropertyStatus.PENDING_APPROVAL
    return current


def _ensure_awaiting_decision(prop: Any) -> None:
    current = PropertyStatus(prop.status)
    if current != PropertyStatus.PENDING_APPROVAL:
        raise InvalidTransitionError(
            f"Anúncio {prop.id} não está aguardando aprovação (status atual: {current.value}).",
            detail={"status": current.value},
        )


def approve(prop: Any) -> PropertyStatus:
    _ensure_awaiting_decision(prop)
    if not prop.images:
        raise ValidationError({"images": "O anúncio precisa de pelo menos uma imagem para ser ativado."})
    return PropertyStatus.ACTIVE


def requires_images(status: str) -> bool:
    """Listings live or awaiting moderation must keep at least one image."""
    return PropertyStatus(status) in (PropertyStatus.ACTIVE, PropertyStatus.PENDING_APPROVAL)


def reject(prop: Any) -> PropertyStatus:
    _ensure_awaiting_decision(prop)
    return PropertyStatus.REJECTED


def status_after_edit(prop: Any, actor: Any) -> Optional[PropertyStatus]:
    """A rejected listing edited by its owner goes back to the payment step."""
    if prop.status == PropertyStatus.REJECTED and not is_admin(actor):
        return PropertyStatus.PENDING_PAYMENT
    return None


# ─── Authorization ───────────────────────────────────────────────

def is_admin(actor: Any) -> bool:
    return actor is not None and actor.role == UserRole.ADMIN


def is_owner(prop: Any, actor: Any) -> bool:
    return actor is not None and prop.owner_id == actor.id


def can_modify(prop: Any, actor: Any) -> bool:
    """Admins may always edit/delete; owners only outside pending_approval."""
    if is_admin(actor):
        return True
    return is_owner(prop, actor) and prop.status != PropertyStatus.PENDING_APPROVAL


def ensure_can_modify(prop: Any, actor: Any) -> None:
    if can_modify(prop, actor):
        return
    if is_owner(prop, actor):
        raise PermissionDeniedError("Não é possível alterar um anúncio em aprovação.")
    raise PermissionDeniedError("Você não tem permissão para alterar este anúncio.")


def ensure_can_pay(prop: Any, actor: Any) -> None:
    if not (is_admin(actor) or is_owner(prop, actor)):
        raise PermissionDeniedError("Você não tem permissão para pagar este anúncio.")


# ─── Presentation rules ──────────────────────────────────────────

def visible_price(prop: Any, viewer: Any) -> Optional[Decimal]:
    """Price shown to `viewer`; None for anonymous viewers of price-on-request listings."""
    if viewer is None and prop.price_on_request:
        return None
    return prop.price


def resolve_contact_phone(prop: Any, owner_phone: Optional[str], admin_phone: Optional[str]) -> Optional[str]:
    if prop.contact_override == ContactOverride.ADMIN:
        return admin_phone
    return owner_phone


def should_count_view(prop: Any) -> bool:
    return prop.status == PropertyStatus.ACTIVE
