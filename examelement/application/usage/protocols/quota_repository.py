"""Protocol for per-user, per-content-type quota counters."""

from datetime import date
from typing import Protocol

from examelement.domain.common.value_objects.content_type import ContentType
from examelement.domain.common.value_objects.ids import UserId
from examelement.domain.usage.value_objects.usage_quota import UsageQuota


class QuotaRepositoryProtocol(Protocol):
    def try_consume(
        self, user_id: UserId, content_type: ContentType, limit: int, today: date
    ) -> int | None:
        """
        Atomically count one generation against today's quota.

        A counter whose reset_date is before `today` restarts at 1. The
        check and the increment happen in one conditional statement, so
        concurrent callers can never push the count past `limit`.

        Args:
            user_id: The user
            content_type: The quota's content type
            limit: Free-tier daily limit (positive)
            today: Server date

        Returns:
            The new count, or None if the limit was already reached
        """
        ...

    def release(self, user_id: UserId, content_type: ContentType, consumed_on: date) -> bool:
        """
        Give back one generation consumed on `consumed_on`.

        Returns:
            True if a unit was returned; False once the day rolled over or
            the count is already zero
        """
        ...

    def find_by_user(self, user_id: UserId) -> list[UsageQuota]: ...
