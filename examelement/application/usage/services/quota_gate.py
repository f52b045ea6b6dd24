"""Daily generation quota enforcement."""

from datetime import date

import structlog

from examelement.application.common.clock import ClockProtocol
from examelement.application.common.unit_of_work import UnitOfWork
from examelement.application.usage.protocols.quota_repository import QuotaRepositoryProtocol
from examelement.domain.common.value_objects.content_type import ContentType
from examelement.domain.common.value_objects.ids import UserId
from examelement.domain.usage.exceptions import QuotaExceededError
from examelement.domain.usage.services.quota_policy import QuotaPolicy
from examelement.domain.usage.value_objects.usage_quota import QuotaDecision, QuotaUsage

logger = structlog.get_logger(__name__)


class QuotaGate:
    """
    Decides whether a user may generate another item of a content type today.

    Counters are only ever changed through here. Every change is committed
    straight away so a consumed unit is visible to concurrent requests (and
    to other server instances) before the slow generator call starts.
    """

    def __init__(
        self,
        quota_repository: QuotaRepositoryProtocol,
        policy: QuotaPolicy,
        clock: ClockProtocol,
        uow: UnitOfWork,
    ) -> None:
        self.quota_repository = quota_repository
        self.policy = policy
        self.clock = clock
        self.uow = uow

    def check_and_consume(
        self, user_id: UserId, content_type: ContentType, is_subscribed: bool
    ) -> QuotaDecision:
        """
        Consume one unit of today's quota.

        Args:
            user_id: The user generating content
            content_type: What is being generated
            is_subscribed: Verified subscription flag

        Returns:
            QuotaDecision; remaining is None for unlimited users

        Raises:
            QuotaExceededError: If the free-tier limit is already used up
        """
        limit = self.policy.daily_limit(content_type, is_subscribed)
        if limit is None:
            return QuotaDecision(allowed=True, remaining=None)

        if limit <= 0:
            logger.info(
                "quota_exceeded", user_id=user_id.value, content_type=str(content_type), limit=0
            )
            raise QuotaExceededError(content_type, limit)

        today = self.clock.today()
        with self.uow:
            count = self.quota_repository.try_consume(user_id, content_type, limit, today)
            self.uow.commit()

        if count is None:
            logger.info(
                "quota_exceeded",
                user_id=user_id.value,
                content_type=str(content_type),
                limit=limit,
            )
            raise QuotaExceededError(content_type, limit)

        logger.info(
            "quota_consumed",
            user_id=user_id.value,
            content_type=str(content_type),
            count=count,
            limit=limit,
        )
        return QuotaDecision(
            allowed=True, remaining=limit - count, limit=limit, consumed_on=today
        )

    def release(self, user_id: UserId, content_type: ContentType, consumed_on: date) -> bool:
        """
        Give back a unit consumed by a generation that then failed.

        Never crosses into another day and never drops below zero.

        Returns:
            True if a unit was given back
        """
        with self.uow:
            released = self.quota_repository.release(user_id, content_type, consumed_on)
            self.uow.commit()

        logger.info(
            "quota_released",
            user_id=user_id.value,
            content_type=str(content_type),
            consumed_on=consumed_on.isoformat(),
            released=released,
        )
        return released

    def status(self, user_id: UserId, is_subscribed: bool) -> list[QuotaUsage]:
        """
        Today's usage for every content type, without writing anything.

        A counter left over from an earlier day reads as zero usage.
        """
        today = self.clock.today()
        stored = {
            quota.content_type: quota for quota in self.quota_repository.find_by_user(user_id)
        }
        usage: list[QuotaUsage] = []
        for content_type in ContentType:
            quota = stored.get(content_type)
            usage.append(
                QuotaUsage(
                    content_type=content_type,
                    limit=self.policy.daily_limit(content_type, is_subscribed),
                    used=quota.used_on(today) if quota else 0,
                )
            )
        return usage
