"""
Domain service that folds progress ledger entries into summaries.

This is a pure domain service with no infrastructure dependencies. Every
summary is recomputed from the entries it is given, so it always equals a
replay of the ledger.
"""

from collections import defaultdict
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field, replace
from datetime import date, datetime
from decimal import Decimal

from examelement.domain.common.value_object import ValueObject
from examelement.domain.common.value_objects.content_type import ContentType
from examelement.domain.common.value_objects.rounding import round_half_up
from examelement.domain.progress.entities.ledger_entry import EventKind, LedgerEntry

DEFAULT_WEAK_TOPIC_LIMIT = 5
DEFAULT_RECENT_LIMIT = 10

# Content types whose averages can mark a topic as weak
SCORED_CONTENT_TYPES = (ContentType.QUIZ, ContentType.MOCK_EXAM)


@dataclass(frozen=True)
class ContentTypeProgress(ValueObject):
    """
    Counts and marks for one content type.

    highest_score is the best single item's percentage, where average_score
    weights every item by its marks.
    """

    generated: int = 0
    graded: int = 0
    marks_earned: int = 0
    marks_possible: int = 0
    highest_score: Decimal | None = None

    @property
    def average_score(self) -> Decimal | None:
        """Weighted average percentage, two decimals, None before any grading."""
        if self.marks_possible == 0:
            return None
        return round_half_up(100 * self.marks_earned, self.marks_possible, places=2)

    def add(self, entry: LedgerEntry) -> "ContentTypeProgress":
        if entry.event_kind is EventKind.GENERATED:
            return replace(self, generated=self.generated + 1)
        score = entry.percentage
        assert score is not None
        highest = self.highest_score
        if highest is None or score > highest:
            highest = score
        return replace(
            self,
            graded=self.graded + 1,
            marks_earned=self.marks_earned + entry.marks_earned,
            marks_possible=self.marks_possible + entry.marks_possible,
            highest_score=highest,
        )


@dataclass(frozen=True)
class ProgressSummary(ValueObject):
    """Progress for a (subject, topic) filter; None means "all"."""

    subject: str | None
    topic: str | None
    by_content_type: Mapping[ContentType, ContentTypeProgress] = field(default_factory=dict)

    def for_type(self, content_type: ContentType) -> ContentTypeProgress:
        return self.by_content_type.get(content_type, ContentTypeProgress())

    @property
    def total_generated(self) -> int:
        return sum(progress.generated for progress in self.by_content_type.values())


@dataclass(frozen=True)
class SubjectBreakdown(ValueObject):
    subject: str
    topics: tuple[str, ...]
    summary: ProgressSummary


@dataclass(frozen=True)
class WeakTopic(ValueObject):
    subject: str
    topic: str
    content_type: ContentType
    average_score: Decimal


@dataclass(frozen=True)
class TopicPerformance(ValueObject):
    topic: str
    summary: ProgressSummary


@dataclass(frozen=True)
class ItemResult(ValueObject):
    """Final score of one graded item, as recorded in the ledger."""

    item_id: int
    topic: str
    content_type: ContentType
    marks_earned: int
    marks_possible: int
    percentage: Decimal
    graded_at: datetime | None


@dataclass(frozen=True)
class DailyPerformance(ValueObject):
    """Graded quizzes and mock exams of one calendar day (UTC)."""

    day: date
    by_content_type: Mapping[ContentType, ContentTypeProgress] = field(default_factory=dict)

    def for_type(self, content_type: ContentType) -> ContentTypeProgress:
        return self.by_content_type.get(content_type, ContentTypeProgress())


class ProgressAggregator:
    """
    Derives dashboard views from ledger entries.

    Averages are weighted by marks (sum earned / sum possible) rather than
    averaging per-item percentages.
    """

    def summarize(
        self,
        entries: Iterable[LedgerEntry],
        subject: str | None = None,
        topic: str | None = None,
    ) -> ProgressSummary:
        """
        Fold entries matching the filter into a summary.

        Args:
            entries: Ledger entries of a single user
            subject: Optional subject filter
            topic: Optional topic filter

        Returns:
            ProgressSummary with an entry for every content type
        """
        totals = {content_type: ContentTypeProgress() for content_type in ContentType}
        for entry in entries:
            if subject is not None and entry.subject != subject:
                continue
            if topic is not None and entry.topic != topic:
                continue
            totals[entry.content_type] = totals[entry.content_type].add(entry)
        return ProgressSummary(subject=subject, topic=topic, by_content_type=totals)

    def breakdown_by_subject(self, entries: Iterable[LedgerEntry]) -> list[SubjectBreakdown]:
        """Per-subject summaries, ordered by subject name."""
        by_subject: dict[str, list[LedgerEntry]] = defaultdict(list)
        for entry in entries:
            by_subject[entry.subject].append(entry)

        return [
            SubjectBreakdown(
                subject=subject,
                topics=tuple(sorted({entry.topic for entry in subject_entries})),
                summary=self.summarize(subject_entries, subject=subject),
            )
            for subject, subject_entries in sorted(by_subject.items())
        ]

    def weak_topics(
        self,
        entries: Iterable[LedgerEntry],
        threshold: Decimal | int,
        limit: int = DEFAULT_WEAK_TOPIC_LIMIT,
    ) -> list[WeakTopic]:
        """
        Topics whose quiz or mock-exam average is below the threshold.

        Only topics with at least one graded item are considered. Lowest
        average first, ties by subject and topic name.
        """
        by_key: dict[tuple[str, str, ContentType], ContentTypeProgress] = defaultdict(
            ContentTypeProgress
        )
        for entry in entries:
            if entry.event_kind is not EventKind.GRADED:
                continue
            if entry.content_type not in SCORED_CONTENT_TYPES:
                continue
            key = (entry.subject, entry.topic, entry.content_type)
            by_key[key] = by_key[key].add(entry)

        weak: list[WeakTopic] = []
        for (subject, topic, content_type), progress in by_key.items():
            average = progress.average_score
            if average is not None and average < threshold:
                weak.append(
                    WeakTopic(
                        subject=subject,
                        topic=topic,
                        content_type=content_type,
                        average_score=average,
                    )
                )

        weak.sort(key=lambda w: (w.average_score, w.subject, w.topic, w.content_type))
        return weak[:limit]

    def topic_performance(
        self, entries: Iterable[LedgerEntry], subject: str
    ) -> list[TopicPerformance]:
        """Per-topic summaries within one subject, ordered by topic name."""
        by_topic: dict[str, list[LedgerEntry]] = defaultdict(list)
        for entry in entries:
            if entry.subject == subject:
                by_topic[entry.topic].append(entry)

        return [
            TopicPerformance(
                topic=topic, summary=self.summarize(topic_entries, subject=subject, topic=topic)
            )
            for topic, topic_entries in sorted(by_topic.items())
        ]

    def recent_results(
        self,
        entries: Iterable[LedgerEntry],
        subject: str,
        content_type: ContentType,
        limit: int = DEFAULT_RECENT_LIMIT,
    ) -> list[ItemResult]:
        """
        Most recently graded items of one type in a subject, newest first.

        Items still waiting for a reviewer have no grading entry yet and are
        not listed.
        """
        graded = [
            entry
            for entry in entries
            if entry.event_kind is EventKind.GRADED
            and entry.subject == subject
            and entry.content_type is content_type
        ]
        graded.sort(key=lambda e: (e.occurred_at is not None, e.occurred_at, e.item_id.value))
        graded.reverse()

        results: list[ItemResult] = []
        for entry in graded[:limit]:
            percentage = entry.percentage
            assert percentage is not None
            results.append(
                ItemResult(
                    item_id=entry.item_id.value,
                    topic=entry.topic,
                    content_type=entry.content_type,
                    marks_earned=entry.marks_earned,
                    marks_possible=entry.marks_possible,
                    percentage=percentage,
                    graded_at=entry.occurred_at,
                )
            )
        return results

    def daily_history(
        self, entries: Iterable[LedgerEntry], subject: str, since: date
    ) -> list[DailyPerformance]:
        """
        Day-by-day quiz and mock-exam results in a subject from `since` on.

        Days without any grading are left out. Each day's averages are
        weighted by marks like everywhere else.
        """
        by_day: dict[date, dict[ContentType, ContentTypeProgress]] = defaultdict(dict)
        for entry in entries:
            if entry.event_kind is not EventKind.GRADED or entry.occurred_at is None:
                continue
            if entry.subject != subject or entry.content_type not in SCORED_CONTENT_TYPES:
                continue
            day = entry.occurred_at.date()
            if day < since:
                continue
            progress = by_day[day].get(entry.content_type, ContentTypeProgress())
            by_day[day][entry.content_type] = progress.add(entry)

        return [
            DailyPerformance(day=day, by_content_type=by_type)
            for day, by_type in sorted(by_day.items())
        ]
