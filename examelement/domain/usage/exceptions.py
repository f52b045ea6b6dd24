"""Usage domain exceptions."""

from examelement.domain.common.exceptions import BusinessRuleViolationError
from examelement.domain.common.value_objects.content_type import ContentType


class QuotaExceededError(BusinessRuleViolationError):
    """Raised when a free-tier user has used up today's quota for a content type."""

    def __init__(self, content_type: ContentType, limit: int) -> None:
        if limit == 0:
            message = f"{content_type} generation requires a subscription"
        else:
            message = f"Daily {content_type} limit of {limit} reached"
        super().__init__("daily_generation_quota", message)
        self.content_type = content_type
        self.limit = limit
