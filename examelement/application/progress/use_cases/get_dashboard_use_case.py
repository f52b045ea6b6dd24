"""Use case for the progress dashboard."""

from dataclasses import dataclass
from datetime import date, timedelta
from decimal import Decimal

from examelement.application.common.clock import ClockProtocol
from examelement.application.progress.services.progress_ledger import ProgressLedger
from examelement.domain.common.exceptions import ValidationError
from examelement.domain.common.value_objects.content_type import ContentType
from examelement.domain.common.value_objects.ids import UserId
from examelement.domain.progress.services.progress_aggregator import (
    DailyPerformance,
    ItemResult,
    ProgressAggregator,
    ProgressSummary,
    SubjectBreakdown,
    TopicPerformance,
    WeakTopic,
)

MAX_HISTORY_DAYS = 365


@dataclass
class Dashboard:
    summary: ProgressSummary
    subjects: list[SubjectBreakdown]
    weak_topics: list[WeakTopic]


@dataclass
class SubjectAnalytics:
    subject: str
    topics: list[TopicPerformance]
    recent_quizzes: list[ItemResult]
    recent_mock_exams: list[ItemResult]


@dataclass
class PerformanceHistory:
    subject: str
    since: date
    days: list[DailyPerformance]


class GetDashboardUseCase:
    """
    Build dashboard views by replaying the user's ledger.

    Nothing is cached, so a new ledger entry shows up on the very next read.
    """

    def __init__(
        self,
        progress_ledger: ProgressLedger,
        aggregator: ProgressAggregator,
        clock: ClockProtocol,
        weak_topic_threshold: Decimal | int = 50,
    ) -> None:
        """Initialize use case with dependencies."""
        self.progress_ledger = progress_ledger
        self.aggregator = aggregator
        self.clock = clock
        self.weak_topic_threshold = weak_topic_threshold

    def get_dashboard(
        self, user_id: int, subject: str | None = None, topic: str | None = None
    ) -> Dashboard:
        """
        Progress for a user, optionally narrowed to a subject and topic.

        The subject breakdown and weak topics always cover the whole ledger so
        the dashboard can point at other subjects that need work.
        """
        entries = self.progress_ledger.entries_for(UserId(user_id))
        return Dashboard(
            summary=self.aggregator.summarize(entries, subject=subject, topic=topic),
            subjects=self.aggregator.breakdown_by_subject(entries),
            weak_topics=self.aggregator.weak_topics(entries, self.weak_topic_threshold),
        )

    def get_subject_analytics(self, user_id: int, subject: str) -> SubjectAnalytics:
        """Per-topic progress and the latest graded quizzes and mock exams of a subject."""
        entries = self.progress_ledger.entries_for(UserId(user_id), subject=subject)
        return SubjectAnalytics(
            subject=subject,
            topics=self.aggregator.topic_performance(entries, subject),
            recent_quizzes=self.aggregator.recent_results(entries, subject, ContentType.QUIZ),
            recent_mock_exams=self.aggregator.recent_results(
                entries, subject, ContentType.MOCK_EXAM
            ),
        )

    def get_history(self, user_id: int, subject: str, days: int = 30) -> PerformanceHistory:
        """
        Daily results of a subject over the last `days` days, today included.

        Raises:
            ValidationError: If days is outside 1..MAX_HISTORY_DAYS
        """
        if not 1 <= days <= MAX_HISTORY_DAYS:
            raise ValidationError(
                f"days must be between 1 and {MAX_HISTORY_DAYS}", field="days", value=days
            )
        since = self.clock.today() - timedelta(days=days - 1)
        entries = self.progress_ledger.entries_for(UserId(user_id), subject=subject)
        return PerformanceHistory(
            subject=subject,
            since=since,
            days=self.aggregator.daily_history(entries, subject, since),
        )
