"""Tests for ProgressAggregator domain service."""

from datetime import UTC, date, datetime, timedelta
from decimal import Decimal

import pytest

from examelement.domain.common.exceptions import InvariantViolationError
from examelement.domain.common.value_objects.content_type import ContentType
from examelement.domain.common.value_objects.ids import ContentItemId, UserId
from examelement.domain.progress.entities.ledger_entry import LedgerEntry
from examelement.domain.progress.services.progress_aggregator import ProgressAggregator

NOW = datetime(2026, 3, 14, 9, 30, tzinfo=UTC)


def _generated(
    item_id: int, subject: str, topic: str, content_type: ContentType = ContentType.QUIZ
) -> LedgerEntry:
    return LedgerEntry.generated(
        UserId(1), ContentItemId(item_id), subject, topic, content_type, occurred_at=NOW
    )


def _graded(
    item_id: int,
    subject: str,
    topic: str,
    earned: int,
    possible: int,
    content_type: ContentType = ContentType.QUIZ,
    occurred_at: datetime = NOW,
) -> LedgerEntry:
    return LedgerEntry.graded(
        UserId(1),
        ContentItemId(item_id),
        subject,
        topic,
        content_type,
        marks_earned=earned,
        marks_possible=possible,
        occurred_at=occurred_at,
    )


@pytest.fixture
def entries() -> list[LedgerEntry]:
    return [
        _generated(1, "Biology", "Cells"),
        _graded(1, "Biology", "Cells", earned=1, possible=4),
        _generated(2, "Chemistry", "Moles"),
        _graded(2, "Chemistry", "Moles", earned=10, possible=10),
        _generated(3, "Biology", "Genetics", ContentType.FLASHCARD),
        _generated(4, "Biology", "Genetics", ContentType.MOCK_EXAM),
        _graded(4, "Biology", "Genetics", earned=3, possible=6, content_type=ContentType.MOCK_EXAM),
    ]


class TestLedgerEntry:
    def test_generation_entries_carry_no_marks(self) -> None:
        entry = _generated(1, "Biology", "Cells")

        assert entry.marks_earned == 0
        assert entry.marks_possible == 0

    def test_graded_entries_need_possible_marks(self) -> None:
        with pytest.raises(InvariantViolationError):
            _graded(1, "Biology", "Cells", earned=0, possible=0)

    def test_earned_cannot_exceed_possible(self) -> None:
        with pytest.raises(InvariantViolationError):
            _graded(1, "Biology", "Cells", earned=5, possible=4)

    def test_percentage(self) -> None:
        assert _graded(1, "Biology", "Cells", earned=2, possible=3).percentage == Decimal("66.67")
        assert _generated(1, "Biology", "Cells").percentage is None


class TestSummarize:
    def test_empty_ledger(self) -> None:
        summary = ProgressAggregator().summarize([])

        assert summary.total_generated == 0
        assert set(summary.by_content_type) == set(ContentType)
        assert summary.for_type(ContentType.QUIZ).average_score is None

    def test_average_is_weighted_by_marks(self, entries: list[LedgerEntry]) -> None:
        summary = ProgressAggregator().summarize(entries)

        quiz = summary.for_type(ContentType.QUIZ)
        assert quiz.generated == 2
        assert quiz.graded == 2
        assert quiz.marks_earned == 11
        assert quiz.marks_possible == 14
        # 11/14, not the mean of 25% and 100%
        assert quiz.average_score == Decimal("78.57")
        assert summary.total_generated == 4

    def test_flashcards_count_without_average(self, entries: list[LedgerEntry]) -> None:
        flashcards = ProgressAggregator().summarize(entries).for_type(ContentType.FLASHCARD)

        assert flashcards.generated == 1
        assert flashcards.average_score is None

    def test_filters_by_subject_and_topic(self, entries: list[LedgerEntry]) -> None:
        aggregator = ProgressAggregator()

        biology = aggregator.summarize(entries, subject="Biology")
        cells = aggregator.summarize(entries, subject="Biology", topic="Cells")

        assert biology.total_generated == 3
        assert cells.total_generated == 1
        assert cells.for_type(ContentType.QUIZ).average_score == Decimal("25.00")
        assert cells.subject == "Biology"
        assert cells.topic == "Cells"

    def test_equals_replay_in_any_order(self, entries: list[LedgerEntry]) -> None:
        aggregator = ProgressAggregator()

        assert aggregator.summarize(entries) == aggregator.summarize(list(reversed(entries)))


class TestBreakdownBySubject:
    def test_subjects_sorted_with_topics(self, entries: list[LedgerEntry]) -> None:
        breakdown = ProgressAggregator().breakdown_by_subject(entries)

        assert [b.subject for b in breakdown] == ["Biology", "Chemistry"]
        assert breakdown[0].topics == ("Cells", "Genetics")
        assert breakdown[0].summary.total_generated == 3
        assert breakdown[1].summary.for_type(ContentType.QUIZ).average_score == Decimal("100.00")


class TestWeakTopics:
    def test_below_threshold_lowest_first(self, entries: list[LedgerEntry]) -> None:
        weak = ProgressAggregator().weak_topics(entries, threshold=60)

        assert [(w.subject, w.topic, w.content_type) for w in weak] == [
            ("Biology", "Cells", ContentType.QUIZ),
            ("Biology", "Genetics", ContentType.MOCK_EXAM),
        ]
        assert weak[0].average_score == Decimal("25.00")
        assert weak[1].average_score == Decimal("50.00")

    def test_threshold_is_exclusive(self, entries: list[LedgerEntry]) -> None:
        weak = ProgressAggregator().weak_topics(entries, threshold=50)

        assert [w.topic for w in weak] == ["Cells"]

    def test_ungraded_topics_are_never_weak(self) -> None:
        weak = ProgressAggregator().weak_topics([_generated(1, "Physics", "Forces")], threshold=60)

        assert weak == []

    def test_limit(self, entries: list[LedgerEntry]) -> None:
        weak = ProgressAggregator().weak_topics(entries, threshold=60, limit=1)

        assert len(weak) == 1


class TestHighestScore:
    def test_best_single_item(self, entries: list[LedgerEntry]) -> None:
        summary = ProgressAggregator().summarize(entries)

        assert summary.for_type(ContentType.QUIZ).highest_score == Decimal("100.00")
        assert summary.for_type(ContentType.MOCK_EXAM).highest_score == Decimal("50.00")
        assert summary.for_type(ContentType.FLASHCARD).highest_score is None


class TestTopicPerformance:
    def test_topics_of_one_subject(self, entries: list[LedgerEntry]) -> None:
        topics = ProgressAggregator().topic_performance(entries, "Biology")

        assert [t.topic for t in topics] == ["Cells", "Genetics"]
        assert topics[0].summary.for_type(ContentType.QUIZ).average_score == Decimal("25.00")
        assert topics[1].summary.for_type(ContentType.FLASHCARD).generated == 1
        assert topics[1].summary.subject == "Biology"

    def test_unknown_subject(self, entries: list[LedgerEntry]) -> None:
        assert ProgressAggregator().topic_performance(entries, "Physics") == []


class TestRecentResults:
    def test_newest_first(self) -> None:
        entries = [
            _graded(1, "Biology", "Cells", earned=1, possible=4),
            _graded(2, "Biology", "Cells", earned=2, possible=4, occurred_at=NOW + timedelta(1)),
            _graded(3, "Biology", "Enzymes", earned=3, possible=4),
            _graded(4, "Chemistry", "Moles", earned=4, possible=4),
            _generated(5, "Biology", "Cells"),
        ]

        results = ProgressAggregator().recent_results(entries, "Biology", ContentType.QUIZ)

        # Same timestamp falls back to the newer item
        assert [r.item_id for r in results] == [2, 3, 1]
        assert results[0].percentage == Decimal("50.00")
        assert results[0].graded_at == NOW + timedelta(1)

    def test_limit_and_type(self) -> None:
        entries = [_graded(n, "Biology", "Cells", earned=1, possible=2) for n in range(1, 13)]
        mock_exam = _graded(20, "Biology", "Cells", 1, 2, content_type=ContentType.MOCK_EXAM)
        entries.append(mock_exam)

        aggregator = ProgressAggregator()
        quizzes = aggregator.recent_results(entries, "Biology", ContentType.QUIZ)
        mock_exams = aggregator.recent_results(entries, "Biology", ContentType.MOCK_EXAM)

        assert [r.item_id for r in quizzes] == list(range(12, 2, -1))
        assert [r.item_id for r in mock_exams] == [20]


class TestDailyHistory:
    def test_groups_by_day(self) -> None:
        yesterday = NOW - timedelta(days=1)
        entries = [
            _graded(1, "Biology", "Cells", earned=1, possible=4, occurred_at=yesterday),
            _graded(2, "Biology", "Cells", earned=4, possible=4),
            _graded(
                3,
                "Biology",
                "Genetics",
                earned=1,
                possible=2,
                content_type=ContentType.MOCK_EXAM,
            ),
            _graded(4, "Biology", "Cells", earned=1, possible=4, occurred_at=NOW - timedelta(9)),
            _graded(5, "Chemistry", "Moles", earned=0, possible=4),
            _generated(6, "Biology", "Cells"),
        ]

        days = ProgressAggregator().daily_history(entries, "Biology", since=date(2026, 3, 7))

        assert [d.day for d in days] == [date(2026, 3, 13), date(2026, 3, 14)]
        assert days[0].for_type(ContentType.QUIZ).average_score == Decimal("25.00")
        assert days[0].for_type(ContentType.MOCK_EXAM).graded == 0
        assert days[1].for_type(ContentType.QUIZ).graded == 1
        assert days[1].for_type(ContentType.MOCK_EXAM).average_score == Decimal("50.00")

    def test_flashcards_never_appear(self) -> None:
        entries = [_generated(1, "Biology", "Cells", ContentType.FLASHCARD)]

        assert ProgressAggregator().daily_history(entries, "Biology", since=date(2026, 3, 1)) == []
