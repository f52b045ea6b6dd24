"""Pydantic schemas for daily generation usage."""

from pydantic import BaseModel, Field

from examelement.domain.common.value_objects.content_type import ContentType
from examelement.domain.usage.value_objects.usage_quota import QuotaUsage


class QuotaUsageResponse(BaseModel):
    content_type: ContentType
    used: int
    limit: int | None = Field(None, description="Daily limit; null when unlimited")
    remaining: int | None = None

    @classmethod
    def from_domain(cls, usage: QuotaUsage) -> "QuotaUsageResponse":
        return cls(
            content_type=usage.content_type,
            used=usage.used,
            limit=usage.limit,
            remaining=usage.remaining,
        )


class UsageResponse(BaseModel):
    is_subscribed: bool
    quotas: list[QuotaUsageResponse]
