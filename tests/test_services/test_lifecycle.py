"""Tests for lifecycle rules — transitions, expiry, edit guard, price and contact routing."""
import uuid
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from types import SimpleNamespace

import pytest

from app.core import lifecycle
from app.core.domain_types import ContactOverride, PropertyStatus, UserRole
from app.core.exceptions import InvalidTransitionError, PermissionDeniedError, ValidationError

NOW = datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)


def make_prop(**overrides):
    defaults = dict(
        id=uuid.uuid4(),
        owner_id=uuid.uuid4(),
        status=PropertyStatus.ACTIVE.value,
        expires_at=NOW + timedelta(days=10),
        images=["https://img/1.jpg"],
        price=Decimal("500000"),
        price_on_request=False,
        contact_override=ContactOverride.OWNER.value,
    )
    defaults.update(overrides)
    return SimpleNamespace(**defaults)


def make_user(role=UserRole.USER, user_id=None):
    return SimpleNamespace(id=user_id or uuid.uuid4(), role=role.value)


class TestExpiry:
    def test_future_expiry_not_expired(self):
        assert lifecycle.is_expired(make_prop(), NOW) is False

    def test_past_expiry_expired(self):
        assert lifecycle.is_expired(make_prop(expires_at=NOW - timedelta(seconds=1)), NOW) is True

    def test_no_expiry_never_expires(self):
        assert lifecycle.is_expired(make_prop(expires_at=None), NOW) is False

    def test_naive_timestamp_treated_as_utc(self):
        naive = (NOW - timedelta(hours=1)).replace(tzinfo=None)
        assert lifecycle.is_expired(make_prop(expires_at=naive), NOW) is True

    def test_compute_expiry(self):
        assert lifecycle.compute_expiry(NOW, 30) == NOW + timedelta(days=30)

    @pytest.mark.parametrize("status", ["pending_payment", "pending_approval", "rejected"])
    def test_only_active_is_visible(self, status):
        assert lifecycle.is_publicly_visible(make_prop(status=status), NOW) is False

    def test_expired_active_not_visible(self):
        prop = make_prop(expires_at=NOW - timedelta(days=1))
        assert lifecycle.is_publicly_visible(prop, NOW) is False


class TestTransitions:
    def test_payment_from_pending_payment(self):
        assert lifecycle.apply_payment("pending_payment") == PropertyStatus.PENDING_APPROVAL

    @pytest.mark.parametrize("status", ["pending_approval", "active", "rejected"])
    def test_payment_elsewhere_is_noop(self, status):
        assert lifecycle.apply_payment(status) == PropertyStatus(status)

    def test_approve(self):
        prop = make_prop(status="pending_approval")
        assert lifecycle.approve(prop) == PropertyStatus.ACTIVE

    def test_approve_without_images(self):
        with pytest.raises(ValidationError) as exc:
            lifecycle.approve(make_prop(status="pending_approval", images=[]))
        assert "images" in exc.value.errors

    @pytest.mark.parametrize("status", ["pending_payment", "active", "rejected"])
    def test_decisions_need_pending_approval(self, status):
        with pytest.raises(InvalidTransitionError):
            lifecycle.approve(make_prop(status=status))
        with pytest.raises(InvalidTransitionError):
            lifecycle.reject(make_prop(status=status))

    def test_reject(self):
        assert lifecycle.reject(make_prop(status="pending_approval")) == PropertyStatus.REJECTED

    def test_owner_edit_of_rejected_resubmits(self):
        owner = make_user()
        prop = make_prop(status="rejected", owner_id=owner.id)
        assert lifecycle.status_after_edit(prop, owner) == PropertyStatus.PENDING_PAYMENT

    def test_admin_edit_of_rejected_keeps_status(self):
        prop = make_prop(status="rejected")
        assert lifecycle.status_after_edit(prop, make_user(UserRole.ADMIN)) is None

    def test_images_required_while_live_or_in_review(self):
        assert lifecycle.requires_images("active")
        assert lifecycle.requires_images(PropertyStatus.PENDING_APPROVAL)
        assert not lifecycle.requires_images("pending_payment")
        assert not lifecycle.requires_images("rejected")


class TestEditGuard:
    def test_owner_can_modify_outside_pending_approval(self):
        owner = make_user()
        for status in ("pending_payment", "active", "rejected"):
            assert lifecycle.can_modify(make_prop(status=status, owner_id=owner.id), owner)

    def test_owner_blocked_during_pending_approval(self):
        owner = make_user()
        prop = make_prop(status="pending_approval", owner_id=owner.id)
        assert lifecycle.can_modify(prop, owner) is False
        with pytest.raises(PermissionDeniedError):
            lifecycle.ensure_can_modify(prop, owner)

    def test_admin_always_can_modify(self):
        assert lifecycle.can_modify(make_prop(status="pending_approval"), make_user(UserRole.ADMIN))

    def test_stranger_never_can_modify(self):
        assert lifecycle.can_modify(make_prop(), make_user()) is False
        assert lifecycle.can_modify(make_prop(), None) is False


class TestPresentation:
    def test_price_hidden_from_anonymous_when_on_request(self):
        prop = make_prop(price_on_request=True)
        assert lifecycle.visible_price(prop, None) is None
        assert lifecycle.visible_price(prop, make_user()) == Decimal("500000")

    def test_price_shown_when_not_on_request(self):
        assert lifecycle.visible_price(make_prop(), None) == Decimal("500000")

    def test_contact_owner(self):
        assert lifecycle.resolve_contact_phone(make_prop(), "11", "55") == "11"

    def test_contact_admin_override(self):
        prop = make_prop(contact_override=ContactOverride.ADMIN.value)
        assert lifecycle.resolve_contact_phone(prop, "11", "55") == "55"

    def test_views_count_only_when_active(self):
        assert lifecycle.should_count_view(make_prop()) is True
        assert lifecycle.should_count_view(make_prop(status="pending_approval")) is False
