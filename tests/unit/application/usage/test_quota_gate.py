"""Tests for QuotaGate with a mocked repository."""

from datetime import date
from unittest.mock import MagicMock

import pytest

from examelement.application.usage.services.quota_gate import QuotaGate
from examelement.domain.common.value_objects.content_type import ContentType
from examelement.domain.common.value_objects.ids import UserId
from examelement.domain.usage.exceptions import QuotaExceededError
from examelement.domain.usage.services.quota_policy import QuotaPolicy
from examelement.domain.usage.value_objects.usage_quota import UsageQuota
from tests.fakes import FixedClock

USER = UserId(1)


def _gate(repository: MagicMock, clock: FixedClock | None = None) -> QuotaGate:
    return QuotaGate(repository, QuotaPolicy(), clock or FixedClock(), MagicMock())


class TestCheckAndConsume:
    def test_subscribers_bypass_counters(self) -> None:
        repository = MagicMock()

        decision = _gate(repository).check_and_consume(USER, ContentType.QUIZ, is_subscribed=True)

        assert decision.remaining is None
        assert not decision.consumed
        repository.try_consume.assert_not_called()

    def test_premium_only_type_refused_without_write(self) -> None:
        repository = MagicMock()

        with pytest.raises(QuotaExceededError) as exc_info:
            _gate(repository).check_and_consume(USER, ContentType.QUIZ, is_subscribed=False)

        assert exc_info.value.limit == 0
        repository.try_consume.assert_not_called()

    def test_consumes_against_today(self) -> None:
        repository = MagicMock()
        repository.try_consume.return_value = 2

        decision = _gate(repository).check_and_consume(
            USER, ContentType.MOCK_EXAM, is_subscribed=False
        )

        assert decision.remaining == 1
        assert decision.consumed_on == date(2026, 3, 14)
        repository.try_consume.assert_called_once_with(
            USER, ContentType.MOCK_EXAM, 3, date(2026, 3, 14)
        )

    def test_limit_reached(self) -> None:
        repository = MagicMock()
        repository.try_consume.return_value = None

        with pytest.raises(QuotaExceededError):
            _gate(repository).check_and_consume(USER, ContentType.MOCK_EXAM, is_subscribed=False)


class TestStatus:
    def test_yesterdays_counter_reads_as_unused(self) -> None:
        repository = MagicMock()
        repository.find_by_user.return_value = [
            UsageQuota(USER, ContentType.MOCK_EXAM, count=3, reset_date=date(2026, 3, 13)),
            UsageQuota(USER, ContentType.FLASHCARD, count=1, reset_date=date(2026, 3, 14)),
        ]

        usage = {u.content_type: u for u in _gate(repository).status(USER, is_subscribed=False)}

        assert usage[ContentType.MOCK_EXAM].used == 0
        assert usage[ContentType.MOCK_EXAM].remaining == 3
        assert usage[ContentType.FLASHCARD].remaining == 0
        assert usage[ContentType.QUIZ].limit == 0
        repository.try_consume.assert_not_called()
