"""Pydantic schemas for content generation and retrieval."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from examelement.domain.common.value_objects.content_type import ContentType
from examelement.domain.study.entities.content_item import ContentItem
from examelement.domain.study.entities.question import Question


class GenerateContentRequest(BaseModel):
    """Request to generate a flashcard set, quiz or mock exam."""

    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)

    content_type: ContentType
    subject: str = Field(..., min_length=1, max_length=100)
    topic: str = Field(..., min_length=1, max_length=200)
    exam_board: str | None = Field(None, max_length=100)
    count: int = Field(10, ge=1, description="Number of questions to generate")


class GenerateContentResponse(BaseModel):
    item_id: int
    content_type: ContentType
    title: str
    question_count: int
    remaining: int | None = Field(
        None, description="Generations of this type left today; null when unlimited"
    )


class QuestionResponse(BaseModel):
    """
    A question as shown to its owner.

    Answer keys (correct option, sample answer, rubric) are only included
    once the item has been submitted. Flashcard answers are always shown.
    """

    id: int
    number: int
    prompt: str
    grading_model: str
    marks: int
    options: dict[str, str] | None = None
    answer: str | None = None
    explanation: str | None = None
    correct_option: str | None = None
    sample_answer: str | None = None
    rubric: list[str] | None = None

    @classmethod
    def from_domain(cls, question: Question, reveal_answers: bool) -> "QuestionResponse":
        flashcard = not question.is_gradable
        return cls(
            id=question.id.value,
            number=question.number,
            prompt=question.prompt,
            grading_model=str(question.grading_model),
            marks=question.marks,
            options=dict(question.options) or None,
            answer=question.answer if flashcard or reveal_answers else None,
            explanation=question.explanation if flashcard or reveal_answers else None,
            correct_option=question.correct_option if reveal_answers else None,
            sample_answer=question.sample_answer if reveal_answers else None,
            rubric=list(question.rubric) if reveal_answers and question.rubric else None,
        )


class ContentItemResponse(BaseModel):
    id: int
    content_type: ContentType
    subject: str
    topic: str
    exam_board: str | None
    title: str
    total_marks: int
    created_at: datetime | None
    submitted_at: datetime | None
    questions: list[QuestionResponse]

    @classmethod
    def from_domain(cls, item: ContentItem) -> "ContentItemResponse":
        return cls(
            id=item.id.value,
            content_type=item.content_type,
            subject=item.subject,
            topic=item.topic,
            exam_board=item.exam_board,
            title=item.title,
            total_marks=item.total_marks,
            created_at=item.created_at,
            submitted_at=item.submitted_at,
            questions=[
                QuestionResponse.from_domain(question, reveal_answers=item.is_submitted)
                for question in item.questions
            ],
        )


class ContentItemSummary(BaseModel):
    id: int
    content_type: ContentType
    subject: str
    topic: str
    title: str
    question_count: int
    created_at: datetime | None
    submitted_at: datetime | None

    @classmethod
    def from_domain(cls, item: ContentItem) -> "ContentItemSummary":
        return cls(
            id=item.id.value,
            content_type=item.content_type,
            subject=item.subject,
            topic=item.topic,
            title=item.title,
            question_count=len(item.questions),
            created_at=item.created_at,
            submitted_at=item.submitted_at,
        )


class ContentListResponse(BaseModel):
    items: list[ContentItemSummary]
    total: int
