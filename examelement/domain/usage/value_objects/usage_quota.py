from dataclasses import dataclass
from datetime import date

from examelement.domain.common.value_object import ValueObject
from examelement.domain.common.value_objects.content_type import ContentType
from examelement.domain.common.value_objects.ids import UserId


@dataclass(frozen=True)
class UsageQuota(ValueObject):
    """
    Stored counter for one quota key (user, content type).

    The counter belongs to reset_date; once the server date moves past it the
    stored count no longer applies.
    """

    user_id: UserId
    content_type: ContentType
    count: int
    reset_date: date

    def used_on(self, today: date) -> int:
        """Generations counted against `today`."""
        return self.count if self.reset_date == today else 0


@dataclass(frozen=True)
class QuotaDecision(ValueObject):
    """
    Result of a successful check-and-consume.

    remaining and limit are None for unlimited (subscribed) users, in which
    case nothing was consumed and consumed_on is None as well.
    """

    allowed: bool
    remaining: int | None
    limit: int | None = None
    consumed_on: date | None = None

    @property
    def consumed(self) -> bool:
        return self.consumed_on is not None


@dataclass(frozen=True)
class QuotaUsage(ValueObject):
    """Read-only view of today's usage for one content type."""

    content_type: ContentType
    limit: int | None
    used: int

    @property
    def remaining(self) -> int | None:
        if self.limit is None:
            return None
        return max(self.limit - self.used, 0)
