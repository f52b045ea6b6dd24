"""
Domain service for grading submitted answers.

This is a pure domain service with no infrastructure dependencies. Marks are
always computed here from the stored question; nothing the caller sends is
ever taken as a mark.
"""

import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from examelement.domain.common.exceptions import ValidationError
from examelement.domain.common.value_object import ValueObject
from examelement.domain.common.value_objects.ids import QuestionId
from examelement.domain.common.value_objects.rounding import round_half_up
from examelement.domain.study.entities.answer_record import AnswerRecord, AnswerStatus
from examelement.domain.study.entities.question import GradingModel, Question


@dataclass(frozen=True)
class QuestionGrade(ValueObject):
    """Outcome of grading one answer."""

    status: AnswerStatus
    marks_awarded: int | None = None
    is_correct: bool | None = None


@dataclass(frozen=True)
class ItemScore(ValueObject):
    """Aggregate score of a submitted item."""

    total_marks: int
    earned_marks: int
    pending_count: int = 0

    @property
    def percentage(self) -> int:
        if self.total_marks == 0:
            return 0
        return int(round_half_up(100 * self.earned_marks, self.total_marks))

    @property
    def is_complete(self) -> bool:
        """Whether every question has a mark."""
        return self.pending_count == 0


class ScoringEngine:
    """
    Grades answers under each grading model.

    - auto: exact, case-sensitive comparison of the chosen option letter
    - manual: keyword rubric when the question has one, otherwise the answer
      waits for a trusted reviewer
    - none: flashcards are not gradable
    """

    def grade(self, question: Question, submitted: str) -> QuestionGrade:
        """
        Grade one submitted answer.

        Args:
            question: The stored question
            submitted: The submitted option letter or free text ("" when unanswered)

        Returns:
            QuestionGrade for the answer

        Raises:
            ValidationError: If the question cannot be graded
        """
        if question.grading_model is GradingModel.AUTO:
            is_correct = submitted == question.correct_option
            return QuestionGrade(
                status=AnswerStatus.GRADED,
                marks_awarded=question.marks if is_correct else 0,
                is_correct=is_correct,
            )

        if question.grading_model is GradingModel.MANUAL:
            return self._grade_free_response(question, submitted)

        raise ValidationError(
            "Flashcards cannot be graded", field="question", value=question.number
        )

    def _grade_free_response(self, question: Question, submitted: str) -> QuestionGrade:
        if not submitted.strip():
            return QuestionGrade(status=AnswerStatus.GRADED, marks_awarded=0)

        if not question.rubric:
            return QuestionGrade(status=AnswerStatus.PENDING_REVIEW)

        matched = sum(1 for keyword in question.rubric if _contains_word(submitted, keyword))
        marks = int(round_half_up(question.marks * matched, len(question.rubric)))
        return QuestionGrade(
            status=AnswerStatus.GRADED,
            marks_awarded=self.ensure_within_bounds(question, marks),
        )

    def ensure_within_bounds(self, question: Question, marks: int) -> int:
        """
        Check a mark against the question's maximum.

        Raises:
            ValidationError: If marks fall outside 0..question.marks
        """
        if not 0 <= marks <= question.marks:
            raise ValidationError(
                f"Marks must be between 0 and {question.marks}",
                field="marks_awarded",
                value=marks,
            )
        return marks

    def score(
        self,
        questions: Iterable[Question],
        records: Mapping[QuestionId, AnswerRecord],
    ) -> ItemScore:
        """
        Sum marks over an item's gradable questions.

        Args:
            questions: The item's questions
            records: Effective (latest) answer record per question id

        Returns:
            ItemScore; pending and missing answers earn nothing yet
        """
        total = 0
        earned = 0
        pending = 0
        for question in questions:
            if not question.is_gradable:
                continue
            total += question.marks
            record = records.get(question.id)
            if record is None or record.is_pending:
                pending += 1
            else:
                earned += record.marks_awarded or 0
        return ItemScore(total_marks=total, earned_marks=earned, pending_count=pending)


def _contains_word(text: str, keyword: str) -> bool:
    pattern = rf"(?<!\w){re.escape(keyword.strip())}(?!\w)"
    return re.search(pattern, text, flags=re.IGNORECASE) is not None
