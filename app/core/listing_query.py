"""Public listing feed query — visibility, filter and free-text predicates.

The same semantics are expressed twice: as Python predicates (used by the
in-memory store) and as SQLAlchemy clauses (used by the SQL store).

    feed = visible AND filters AND (search OR q is blank)
"""
from datetime import datetime
from decimal import Decimal
from typing import Any, List, Optional

from pydantic import BaseModel
from sqlalchemy import and_, or_

from app.core.domain_types import PropertyStatus
from app.core.lifecycle import is_publicly_visible
from app.models.property_model import Property

SEARCH_FIELDS = ("title", "description", "city", "neighborhood")


class ListingFilters(BaseModel):
    """Optional, AND-combined public feed filters."""
    type: Optional[str] = None
    city: Optional[str] = None
    max_price: Optional[Decimal] = None
    max_area: Optional[float] = None
    q: Optional[str] = None
    # anonymous viewers cannot filter on prices they are not shown
    anonymous: bool = False

    @property
    def search_term(self) -> str:
        return (self.q or "").strip()


def _contains(haystack: Optional[str], needle: str) -> bool:
    return needle.casefold() in (haystack or "").casefold()


def matches_filters(prop: Any, filters: ListingFilters) -> bool:
    if filters.type and prop.type != filters.type:
        return False
    if filters.city and not _contains(prop.city, filters.city):
        return False
    if filters.max_price is not None:
        if filters.anonymous and prop.price_on_request:
            return False
        if prop.price > filters.max_price:
            return False
    if filters.max_area is not None and prop.area > filters.max_area:
        return False
    return True


def matches_search(prop: Any, q: Optional[str]) -> bool:
    term = (q or "").strip()
    if not term:
        return True
    return any(_contains(getattr(prop, field), term) for field in SEARCH_FIELDS)


def matches_public_feed(prop: Any, filters: ListingFilters, now: Optional[datetime] = None) -> bool:
    return (
        is_publicly_visible(prop, now)
        and matches_filters(prop, filters)
        and matches_search(prop, filters.q)
    )


# ─── SQL rendition ───────────────────────────────────────────────

def like_pattern(term: str) -> str:
    """Substring pattern with LIKE wildcards in `term` taken literally."""
    escaped = term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


def visibility_clause(now: datetime):
    return and_(
        Property.status == PropertyStatus.ACTIVE.value,
        or_(Property.expires_at.is_(None), Property.expires_at >= now),
    )


def filter_clauses(filters: ListingFilters) -> List[Any]:
    """Apply dynamic filters to a property query."""
    clauses = []

    if filters.type:
        clauses.append(Property.type == filters.type)
    if filters.city:
        clauses.append(Property.city.ilike(like_pattern(filters.city), escape="\\"))
    if filters.max_price is not None:
        clauses.append(Property.price <= filters.max_price)
        if filters.anonymous:
            clauses.append(Property.price_on_request.is_(False))
    if filters.max_area is not None:
        clauses.append(Property.area <= filters.max_area)

    term = filters.search_term
    if term:
        pattern = like_pattern(term)
        clauses.append(
            or_(
                Property.title.ilike(pattern, escape="\\"),
                Property.description.ilike(pattern, escape="\\"),
                Property.city.ilike(pattern, escape="\\"),
                Property.neighborhood.ilike(pattern, escape="\\"),
            )
        )

    return clauses
