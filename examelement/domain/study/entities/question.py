"""Question entity: one prompt inside a generated content item."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import StrEnum

from examelement.domain.common.entity import Entity
from examelement.domain.common.exceptions import ValidationError
from examelement.domain.common.value_objects.ids import QuestionId

OPTION_LETTERS = ("A", "B", "C", "D")
MIN_OPTIONS = 2


class GradingModel(StrEnum):
    AUTO = "auto"
    MANUAL = "manual"
    NONE = "none"


@dataclass
class Question(Entity[QuestionId]):
    """
    A single question of a flashcard set, quiz or mock exam.

    Business Rules:
    - number is 1-based and unique within its item (checked by ContentItem)
    - marks is a positive integer
    - auto questions carry options keyed by A-D and a correct option among them
    - manual questions carry a sample answer and optionally a keyword rubric
    - flashcards (grading model none) carry an answer and are never graded
    """

    id: QuestionId
    number: int
    prompt: str
    grading_model: GradingModel
    marks: int = 1
    options: dict[str, str] = field(default_factory=dict)
    correct_option: str | None = None
    answer: str | None = None
    explanation: str | None = None
    sample_answer: str | None = None
    rubric: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants."""
        if self.number < 1:
            raise ValidationError(
                "Question number must be positive", field="number", value=self.number
            )
        if not self.prompt or not self.prompt.strip():
            raise ValidationError("Question prompt cannot be empty", field="prompt")
        if self.marks < 1:
            raise ValidationError(
                "Question marks must be positive", field="marks", value=self.marks
            )

        if self.grading_model is GradingModel.AUTO:
            self._validate_options()
        elif self.grading_model is GradingModel.MANUAL:
            if not self.sample_answer or not self.sample_answer.strip():
                raise ValidationError(
                    "Free-response question needs a sample answer", field="sample_answer"
                )
            self._validate_rubric()
        elif not self.answer or not self.answer.strip():
            raise ValidationError("Flashcard needs an answer", field="answer")

    def _validate_options(self) -> None:
        unknown = [letter for letter in self.options if letter not in OPTION_LETTERS]
        if unknown:
            raise ValidationError("Option letters must be A-D", field="options", value=unknown)
        if len(self.options) < MIN_OPTIONS:
            raise ValidationError(
                f"Multiple-choice question needs at least {MIN_OPTIONS} options", field="options"
            )
        if any(not text or not text.strip() for text in self.options.values()):
            raise ValidationError("Option text cannot be empty", field="options")
        if self.correct_option not in self.options:
            raise ValidationError(
                "Correct option must be one of the question's options",
                field="correct_option",
                value=self.correct_option,
            )

    def _validate_rubric(self) -> None:
        seen: set[str] = set()
        for keyword in self.rubric:
            normalized = keyword.strip().casefold()
            if not normalized:
                raise ValidationError("Rubric keywords cannot be empty", field="rubric")
            if normalized in seen:
                raise ValidationError("Duplicate rubric keyword", field="rubric", value=keyword)
            seen.add(normalized)

    @property
    def is_gradable(self) -> bool:
        return self.grading_model is not GradingModel.NONE

    @classmethod
    def multiple_choice(
        cls,
        number: int,
        prompt: str,
        options: Mapping[str, str],
        correct_option: str,
        marks: int = 1,
        explanation: str | None = None,
    ) -> "Question":
        return cls(
            id=QuestionId.generate(),
            number=number,
            prompt=prompt,
            grading_model=GradingModel.AUTO,
            marks=marks,
            options=dict(options),
            correct_option=correct_option,
            explanation=explanation,
        )

    @classmethod
    def free_response(
        cls,
        number: int,
        prompt: str,
        sample_answer: str,
        marks: int = 1,
        rubric: tuple[str, ...] = (),
    ) -> "Question":
        return cls(
            id=QuestionId.generate(),
            number=number,
            prompt=prompt,
            grading_model=GradingModel.MANUAL,
            marks=marks,
            sample_answer=sample_answer,
            rubric=tuple(keyword.strip() for keyword in rubric),
        )

    @classmethod
    def flashcard(
        cls,
        number: int,
        prompt: str,
        answer: str,
        explanation: str | None = None,
    ) -> "Question":
        return cls(
            id=QuestionId.generate(),
            number=number,
            prompt=prompt,
            grading_model=GradingModel.NONE,
            answer=answer,
            explanation=explanation,
        )
