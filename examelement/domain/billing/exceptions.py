"""Billing domain exceptions."""

from examelement.domain.common.exceptions import BusinessRuleViolationError


class DuplicateSubscriptionEventError(BusinessRuleViolationError):
    """Raised when an event id has already been recorded."""

    def __init__(self, event_id: str) -> None:
        super().__init__("event_applied_once", f"Event {event_id} was already processed")
        self.event_id = event_id
