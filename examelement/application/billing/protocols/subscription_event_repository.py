"""Protocol for processed payment events."""

from typing import Protocol

from examelement.domain.billing.entities.subscription_event import SubscriptionEvent


class SubscriptionEventRepositoryProtocol(Protocol):
    def exists(self, event_id: str) -> bool: ...

    def add(self, event: SubscriptionEvent) -> SubscriptionEvent:
        """
        Record an event. Flushes; the caller commits.

        Raises:
            DuplicateSubscriptionEventError: If event_id was already recorded
        """
        ...
