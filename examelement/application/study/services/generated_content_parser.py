"""Validates raw generator output and turns it into Question entities."""

from collections.abc import Mapping
from typing import Any

import pydantic
import structlog
from pydantic import BaseModel, ConfigDict, Field

from examelement.application.study.protocols.content_generator import (
    GenerationRequest,
    RawContent,
)
from examelement.domain.common.exceptions import DomainError
from examelement.domain.common.value_objects.content_type import ContentType
from examelement.domain.study.entities.question import Question
from examelement.domain.study.exceptions import InvalidGeneratedContentError

logger = structlog.get_logger(__name__)


class RawQuestion(BaseModel):
    """Shape every generated question must have before the domain sees it."""

    model_config = ConfigDict(extra="ignore", str_strip_whitespace=True)

    number: int | None = None
    prompt: str = Field(min_length=1)
    marks: int = 1
    options: dict[str, str] | None = None
    correct_option: str | None = None
    answer: str | None = None
    explanation: str | None = None
    sample_answer: str | None = None
    rubric: list[str] = Field(default_factory=list)


class GeneratedContentParser:
    """
    Checks generator output against the request.

    Flashcard sets and quizzes must contain exactly the requested number of
    questions; a mock exam needs at least one. Anything malformed raises
    InvalidGeneratedContentError and nothing is persisted.
    """

    def parse(self, request: GenerationRequest, raw: RawContent) -> list[Question]:
        """
        Validate raw output for a request.

        Args:
            request: What was asked of the generator
            raw: What came back

        Returns:
            Questions ready to be stored, ordered by number

        Raises:
            InvalidGeneratedContentError: If the output is malformed
        """
        self._check_arity(request, len(raw.questions))

        questions: list[Question] = []
        for position, payload in enumerate(raw.questions, start=1):
            questions.append(self._parse_question(request.content_type, position, payload))

        numbers = [question.number for question in questions]
        if len(set(numbers)) != len(numbers):
            raise self._reject(request, "duplicate question numbers")

        return sorted(questions, key=lambda question: question.number)

    def _check_arity(self, request: GenerationRequest, received: int) -> None:
        if request.content_type is ContentType.MOCK_EXAM:
            if received < 1:
                raise self._reject(request, "mock exam has no questions")
            return
        if received != request.count:
            raise self._reject(request, f"expected {request.count} questions, got {received}")

    def _parse_question(
        self, content_type: ContentType, position: int, payload: Mapping[str, Any]
    ) -> Question:
        try:
            raw = RawQuestion.model_validate(payload)
            number = raw.number if raw.number is not None else position

            if content_type is ContentType.FLASHCARD:
                return Question.flashcard(
                    number=number,
                    prompt=raw.prompt,
                    answer=raw.answer or "",
                    explanation=raw.explanation,
                )
            if content_type is ContentType.QUIZ or raw.options:
                return Question.multiple_choice(
                    number=number,
                    prompt=raw.prompt,
                    options=raw.options or {},
                    correct_option=raw.correct_option or "",
                    marks=raw.marks,
                    explanation=raw.explanation,
                )
            return Question.free_response(
                number=number,
                prompt=raw.prompt,
                sample_answer=raw.sample_answer or raw.answer or "",
                marks=raw.marks,
                rubric=tuple(raw.rubric),
            )
        except (pydantic.ValidationError, DomainError) as e:
            logger.warning(
                "generated_question_rejected",
                content_type=str(content_type),
                position=position,
                error=str(e),
            )
            raise InvalidGeneratedContentError(f"question {position}: {e}") from e

    def _reject(self, request: GenerationRequest, reason: str) -> InvalidGeneratedContentError:
        logger.warning(
            "generated_content_rejected",
            content_type=str(request.content_type),
            requested=request.count,
            reason=reason,
        )
        return InvalidGeneratedContentError(reason)
