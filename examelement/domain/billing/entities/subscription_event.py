"""Processed payment processor events."""

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum

from examelement.domain.common.entity import Entity
from examelement.domain.common.exceptions import ValidationError
from examelement.domain.common.value_objects.ids import SubscriptionEventId, UserId


class SubscriptionEffect(StrEnum):
    SUBSCRIBE = "subscribe"
    UNSUBSCRIBE = "unsubscribe"
    NONE = "none"


EVENT_EFFECTS: dict[str, SubscriptionEffect] = {
    "customer.subscription.created": SubscriptionEffect.SUBSCRIBE,
    "customer.subscription.updated": SubscriptionEffect.SUBSCRIBE,
    "customer.subscription.deleted": SubscriptionEffect.UNSUBSCRIBE,
    "invoice.payment_failed": SubscriptionEffect.UNSUBSCRIBE,
}


def effect_of(event_type: str) -> SubscriptionEffect:
    """What an event type does to a user's subscription flag."""
    return EVENT_EFFECTS.get(event_type, SubscriptionEffect.NONE)


@dataclass(frozen=True)
class SubscriptionEvent(Entity[SubscriptionEventId]):
    """
    A payment processor event that has been applied.

    The processor's event id is unique; seeing it again means the event
    was re-delivered and must not be applied twice.
    """

    id: SubscriptionEventId
    event_id: str
    event_type: str
    user_id: UserId | None = None
    created_at: datetime | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        if not self.event_id:
            raise ValidationError("Event id cannot be empty", field="event_id")
        if not self.event_type:
            raise ValidationError("Event type cannot be empty", field="event_type")

    @property
    def effect(self) -> SubscriptionEffect:
        return effect_of(self.event_type)

    @classmethod
    def create(
        cls, event_id: str, event_type: str, user_id: UserId | None, created_at: datetime
    ) -> "SubscriptionEvent":
        return cls(
            id=SubscriptionEventId.generate(),
            event_id=event_id,
            event_type=event_type,
            user_id=user_id,
            created_at=created_at,
        )
