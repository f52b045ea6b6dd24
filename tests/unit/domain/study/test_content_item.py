"""Tests for the study entities: Question, ContentItem and AnswerRecord."""

from datetime import UTC, datetime

import pytest

from examelement.domain.common.exceptions import InvariantViolationError, ValidationError
from examelement.domain.common.value_objects.content_type import ContentType
from examelement.domain.common.value_objects.ids import (
    AnswerRecordId,
    ContentItemId,
    QuestionId,
    UserId,
)
from examelement.domain.study.entities.answer_record import AnswerRecord, AnswerStatus
from examelement.domain.study.entities.content_item import ContentItem
from examelement.domain.study.entities.question import Question
from examelement.domain.study.exceptions import (
    AlreadySubmittedError,
    AnswerNotPendingReviewError,
)

NOW = datetime(2026, 3, 14, 9, 30, tzinfo=UTC)
OPTIONS = {"A": "Mitochondria", "B": "Nucleus"}


def _card(number: int = 1) -> Question:
    return Question.flashcard(number=number, prompt="Define osmosis", answer="Water diffusion")


def _quiz_question(number: int = 1) -> Question:
    return Question.multiple_choice(
        number=number, prompt="Powerhouse of the cell?", options=OPTIONS, correct_option="A"
    )


def _quiz(questions: list[Question]) -> ContentItem:
    return ContentItem.create(UserId(1), ContentType.QUIZ, "Biology", "Cells", "Cells", questions)


def _quiz_about(subject: str = "Biology", topic: str = "Cells") -> ContentItem:
    return ContentItem.create(
        UserId(1), ContentType.QUIZ, subject, topic, "", [_quiz_question()]
    )


def _pending_record(max_marks: int = 4) -> AnswerRecord:
    return AnswerRecord(
        id=AnswerRecordId(1),
        item_id=ContentItemId(1),
        question_id=QuestionId(7),
        attempt=1,
        submitted_value="Plants use light",
        status=AnswerStatus.PENDING_REVIEW,
        max_marks=max_marks,
    )


class TestQuestion:
    def test_multiple_choice_needs_known_correct_option(self) -> None:
        with pytest.raises(ValidationError):
            Question.multiple_choice(
                number=1, prompt="Pick one", options=OPTIONS, correct_option="C"
            )

    def test_multiple_choice_needs_two_options(self) -> None:
        with pytest.raises(ValidationError):
            Question.multiple_choice(
                number=1, prompt="Pick one", options={"A": "Only"}, correct_option="A"
            )

    def test_option_letters_limited_to_a_to_d(self) -> None:
        with pytest.raises(ValidationError):
            Question.multiple_choice(
                number=1, prompt="Pick one", options={"A": "x", "E": "y"}, correct_option="A"
            )

    def test_marks_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            Question.free_response(number=1, prompt="Explain", sample_answer="Because", marks=0)

    def test_free_response_needs_sample_answer(self) -> None:
        with pytest.raises(ValidationError):
            Question.free_response(number=1, prompt="Explain", sample_answer=" ")

    def test_rubric_keywords_unique_ignoring_case(self) -> None:
        with pytest.raises(ValidationError):
            Question.free_response(
                number=1, prompt="Explain", sample_answer="Because", rubric=("Light", "light")
            )

    def test_rubric_keywords_stripped(self) -> None:
        question = Question.free_response(
            number=1, prompt="Explain", sample_answer="Because", rubric=(" light ",)
        )

        assert question.rubric == ("light",)

    def test_flashcard_needs_answer(self) -> None:
        with pytest.raises(ValidationError):
            Question.flashcard(number=1, prompt="Define osmosis", answer="")

    def test_flashcards_are_not_gradable(self) -> None:
        assert _card().is_gradable is False
        assert _quiz_question().is_gradable is True


class TestContentItem:
    def test_create_strips_and_defaults_title(self) -> None:
        item = ContentItem.create(
            owner_id=UserId(1),
            content_type=ContentType.FLASHCARD,
            subject=" Biology ",
            topic=" Cells ",
            title="",
            questions=[_card()],
        )

        assert item.subject == "Biology"
        assert item.topic == "Cells"
        assert item.title == "Biology: Cells"
        assert item.is_submitted is False
        assert item.is_deleted is False

    def test_questions_sorted_by_number(self) -> None:
        item = ContentItem.create(
            owner_id=UserId(1),
            content_type=ContentType.FLASHCARD,
            subject="Biology",
            topic="Cells",
            title="Cells",
            questions=[_card(2), _card(1)],
        )

        assert [q.number for q in item.questions] == [1, 2]

    def test_long_subject_message_names_limit(self) -> None:
        with pytest.raises(ValidationError, match="100 characters"):
            _quiz_about(subject="B" * 101)

    def test_long_topic_message_names_limit(self) -> None:
        with pytest.raises(ValidationError, match="200 characters"):
            _quiz_about(topic="C" * 201)

    def test_needs_questions(self) -> None:
        with pytest.raises(ValidationError):
            _quiz([])

    def test_rejects_duplicate_numbers(self) -> None:
        with pytest.raises(ValidationError):
            _quiz([_quiz_question(1), _quiz_question(1)])

    def test_rejects_question_kind_not_allowed_for_type(self) -> None:
        with pytest.raises(ValidationError):
            _quiz([_card()])

    def test_total_marks_skip_ungradable(self) -> None:
        item = _quiz([_quiz_question(1), _quiz_question(2)])

        assert item.total_marks == 2

    def test_submitted_once(self) -> None:
        item = _quiz([_quiz_question()])
        item.mark_submitted(NOW)

        assert item.submitted_at == NOW
        with pytest.raises(AlreadySubmittedError):
            item.mark_submitted(NOW)

    def test_ownership(self) -> None:
        item = _quiz([_quiz_question()])

        assert item.is_owned_by(UserId(1))
        assert not item.is_owned_by(UserId(2))


class TestAnswerRecord:
    def test_review_creates_next_attempt(self) -> None:
        pending = _pending_record()

        graded = pending.review(3, grader_id=UserId(900), at=NOW)

        assert graded is not pending
        assert graded.attempt == 2
        assert graded.status is AnswerStatus.GRADED
        assert graded.marks_awarded == 3
        assert graded.graded_by == UserId(900)
        assert graded.submitted_value == pending.submitted_value
        assert pending.is_pending

    def test_review_rejects_out_of_range_marks(self) -> None:
        with pytest.raises(ValidationError):
            _pending_record(max_marks=4).review(5, grader_id=UserId(900), at=NOW)

    def test_graded_answers_cannot_be_reviewed(self) -> None:
        graded = _pending_record().review(1, grader_id=UserId(900), at=NOW)

        with pytest.raises(AnswerNotPendingReviewError):
            graded.review(2, grader_id=UserId(900), at=NOW)

    def test_pending_answers_carry_no_mark(self) -> None:
        with pytest.raises(InvariantViolationError):
            AnswerRecord(
                id=AnswerRecordId(1),
                item_id=ContentItemId(1),
                question_id=QuestionId(1),
                attempt=1,
                submitted_value="x",
                status=AnswerStatus.PENDING_REVIEW,
                max_marks=2,
                marks_awarded=1,
            )

    def test_graded_marks_within_maximum(self) -> None:
        with pytest.raises(InvariantViolationError):
            AnswerRecord(
                id=AnswerRecordId(1),
                item_id=ContentItemId(1),
                question_id=QuestionId(1),
                attempt=1,
                submitted_value="x",
                status=AnswerStatus.GRADED,
                max_marks=2,
                marks_awarded=3,
            )
