"""Tests for subscription events and the user's subscription state."""

from datetime import UTC, datetime

import pytest

from examelement.domain.billing.entities.subscription_event import (
    SubscriptionEffect,
    SubscriptionEvent,
    effect_of,
)
from examelement.domain.common.exceptions import ValidationError
from examelement.domain.common.value_objects.ids import UserId
from examelement.domain.identity.entities.user import User

NOW = datetime(2026, 3, 14, 9, 30, tzinfo=UTC)


class TestEventEffects:
    @pytest.mark.parametrize(
        ("event_type", "effect"),
        [
            ("customer.subscription.created", SubscriptionEffect.SUBSCRIBE),
            ("customer.subscription.updated", SubscriptionEffect.SUBSCRIBE),
            ("customer.subscription.deleted", SubscriptionEffect.UNSUBSCRIBE),
            ("invoice.payment_failed", SubscriptionEffect.UNSUBSCRIBE),
            ("invoice.paid", SubscriptionEffect.NONE),
            ("charge.refunded", SubscriptionEffect.NONE),
        ],
    )
    def test_effect_of(self, event_type: str, effect: SubscriptionEffect) -> None:
        assert effect_of(event_type) is effect

    def test_event_exposes_effect(self) -> None:
        event = SubscriptionEvent.create("evt_1", "customer.subscription.deleted", UserId(1), NOW)

        assert event.effect is SubscriptionEffect.UNSUBSCRIBE

    def test_event_id_required(self) -> None:
        with pytest.raises(ValidationError):
            SubscriptionEvent.create("", "customer.subscription.created", None, NOW)


class TestUserSubscription:
    def test_new_users_are_free(self) -> None:
        user = User.create(email="student@example.com", payment_customer_id="cus_1")

        assert user.is_subscribed is False
        assert user.payment_customer_id == "cus_1"

    def test_subscribe_keeps_subscription_id(self) -> None:
        user = User.create(email="student@example.com")

        user.subscribe("sub_1")

        assert user.is_subscribed is True
        assert user.payment_subscription_id == "sub_1"

    def test_unsubscribe(self) -> None:
        user = User.create(email="student@example.com")
        user.subscribe("sub_1")

        user.unsubscribe()

        assert user.is_subscribed is False

    def test_email_required(self) -> None:
        with pytest.raises(ValidationError):
            User.create(email="")

    def test_link_payment_customer(self) -> None:
        user = User.create(email="student@example.com")

        user.link_payment_customer(" cus_9 ")

        assert user.payment_customer_id == "cus_9"

    def test_link_payment_customer_needs_id(self) -> None:
        user = User.create(email="student@example.com")

        with pytest.raises(ValidationError):
            user.link_payment_customer("  ")

    def test_long_email_message_names_limit(self) -> None:
        with pytest.raises(ValidationError, match="255 characters"):
            User.create(email="a" * 256)
