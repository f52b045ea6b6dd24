"""Tests for QuotaPolicy and the UsageQuota value object."""

from datetime import date
from types import MappingProxyType

import pytest

from examelement.domain.common.exceptions import ValidationError
from examelement.domain.common.value_objects.content_type import ContentType
from examelement.domain.common.value_objects.ids import UserId
from examelement.domain.usage.services.quota_policy import QuotaPolicy
from examelement.domain.usage.value_objects.usage_quota import QuotaUsage, UsageQuota


class TestQuotaPolicy:
    def test_default_free_limits(self) -> None:
        policy = QuotaPolicy()

        assert policy.daily_limit(ContentType.FLASHCARD, is_subscribed=False) == 1
        assert policy.daily_limit(ContentType.QUIZ, is_subscribed=False) == 0
        assert policy.daily_limit(ContentType.MOCK_EXAM, is_subscribed=False) == 3

    @pytest.mark.parametrize("content_type", list(ContentType))
    def test_subscribers_unlimited(self, content_type: ContentType) -> None:
        assert QuotaPolicy().daily_limit(content_type, is_subscribed=True) is None

    def test_from_limits(self) -> None:
        policy = QuotaPolicy.from_limits(flashcard=5, quiz=2, mock_exam=0)

        assert policy.daily_limit(ContentType.QUIZ, is_subscribed=False) == 2
        assert policy.daily_limit(ContentType.MOCK_EXAM, is_subscribed=False) == 0

    def test_negative_limit_rejected(self) -> None:
        with pytest.raises(ValidationError):
            QuotaPolicy.from_limits(flashcard=-1, quiz=0, mock_exam=3)

    def test_every_content_type_needs_a_limit(self) -> None:
        with pytest.raises(ValidationError):
            QuotaPolicy(free_limits=MappingProxyType({ContentType.QUIZ: 1}))


class TestUsageQuota:
    def test_count_applies_on_its_reset_date(self) -> None:
        quota = UsageQuota(UserId(1), ContentType.MOCK_EXAM, count=2, reset_date=date(2026, 3, 14))

        assert quota.used_on(date(2026, 3, 14)) == 2

    def test_count_lapses_on_a_new_day(self) -> None:
        quota = UsageQuota(UserId(1), ContentType.MOCK_EXAM, count=3, reset_date=date(2026, 3, 14))

        assert quota.used_on(date(2026, 3, 15)) == 0

    def test_remaining_never_negative(self) -> None:
        assert QuotaUsage(ContentType.QUIZ, limit=0, used=0).remaining == 0
        assert QuotaUsage(ContentType.MOCK_EXAM, limit=3, used=5).remaining == 0
        assert QuotaUsage(ContentType.MOCK_EXAM, limit=3, used=1).remaining == 2

    def test_unlimited_has_no_remaining(self) -> None:
        assert QuotaUsage(ContentType.QUIZ, limit=None, used=7).remaining is None
