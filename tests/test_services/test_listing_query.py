"""Tests for public feed predicates — filters and free-text search."""
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from types import SimpleNamespace

from app.core.listing_query import (
    ListingFilters,
    like_pattern,
    matches_filters,
    matches_public_feed,
    matches_search,
)

NOW = datetime(2026, 3, 1, tzinfo=timezone.utc)


def make_prop(**overrides):
    defaults = dict(
        title="Apartamento Moderno no Centro",
        description="Próximo a metrô, shoppings e parques.",
        type="Apartment",
        city="São Paulo",
        neighborhood="Centro",
        price=Decimal("750000"),
        price_on_request=False,
        area=85.0,
        status="active",
        expires_at=NOW + timedelta(days=5),
    )
    defaults.update(overrides)
    return SimpleNamespace(**defaults)


class TestFilters:
    def test_empty_filters_match(self):
        assert matches_filters(make_prop(), ListingFilters())

    def test_city_case_insensitive_substring(self):
        assert matches_filters(make_prop(), ListingFilters(city="são paulo"))
        assert matches_filters(make_prop(), ListingFilters(city="PAULO"))
        assert not matches_filters(make_prop(), ListingFilters(city="Rio"))

    def test_type_is_exact(self):
        assert matches_filters(make_prop(), ListingFilters(type="Apartment"))
        assert not matches_filters(make_prop(), ListingFilters(type="House"))

    def test_max_price_inclusive(self):
        assert matches_filters(make_prop(), ListingFilters(max_price=Decimal("750000")))
        assert not matches_filters(make_prop(), ListingFilters(max_price=Decimal("749999")))

    def test_max_area_inclusive(self):
        assert matches_filters(make_prop(), ListingFilters(max_area=85))
        assert not matches_filters(make_prop(), ListingFilters(max_area=84.9))

    def test_hidden_price_never_matches_anonymous_max_price(self):
        hidden = make_prop(price_on_request=True)
        assert not matches_filters(hidden, ListingFilters(max_price=Decimal("750000"), anonymous=True))
        assert not matches_filters(hidden, ListingFilters(max_price=Decimal("9999999"), anonymous=True))
        assert matches_filters(hidden, ListingFilters(max_price=Decimal("750000")))
        assert matches_filters(hidden, ListingFilters(anonymous=True))

    def test_wildcards_are_plain_characters(self):
        assert not matches_filters(make_prop(), ListingFilters(city="_"))
        assert not matches_filters(make_prop(), ListingFilters(city="%"))


class TestSearch:
    def test_blank_matches_everything(self):
        assert matches_search(make_prop(), None)
        assert matches_search(make_prop(), "   ")

    def test_matches_any_text_field(self):
        assert matches_search(make_prop(), "moderno")
        assert matches_search(make_prop(), "METRÔ")
        assert matches_search(make_prop(), "centro")
        assert not matches_search(make_prop(), "piscina")


class TestPublicFeed:
    def test_requires_active_and_unexpired(self):
        filters = ListingFilters()
        assert matches_public_feed(make_prop(), filters, NOW)
        assert not matches_public_feed(make_prop(status="pending_approval"), filters, NOW)
        assert not matches_public_feed(make_prop(expires_at=NOW - timedelta(days=1)), filters, NOW)

    def test_combines_filters_and_search(self):
        filters = ListingFilters(city="paulo", q="parques")
        assert matches_public_feed(make_prop(), filters, NOW)
        assert not matches_public_feed(make_prop(), ListingFilters(city="paulo", q="praia"), NOW)


class TestLikePattern:
    def test_plain_term(self):
        assert like_pattern("paulo") == "%paulo%"

    def test_escapes_wildcards(self):
        assert like_pattern("50%_off") == "%50\\%\\_off%"
        assert like_pattern("a\\b") == "%a\\\\b%"
