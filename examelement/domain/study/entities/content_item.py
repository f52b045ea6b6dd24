"""ContentItem entity: a generated flashcard set, quiz or mock exam."""

from dataclasses import dataclass, field
from datetime import datetime

from examelement.domain.common.entity import Entity
from examelement.domain.common.exceptions import ValidationError
from examelement.domain.common.value_objects.content_type import ContentType
from examelement.domain.common.value_objects.ids import ContentItemId, QuestionId, UserId
from examelement.domain.study.entities.question import GradingModel, Question
from examelement.domain.study.exceptions import AlreadySubmittedError

MAX_SUBJECT_LENGTH = 100
MAX_TOPIC_LENGTH = 200

# Grading models each content type may hold
ALLOWED_GRADING_MODELS: dict[ContentType, frozenset[GradingModel]] = {
    ContentType.FLASHCARD: frozenset({GradingModel.NONE}),
    ContentType.QUIZ: frozenset({GradingModel.AUTO}),
    ContentType.MOCK_EXAM: frozenset({GradingModel.AUTO, GradingModel.MANUAL}),
}


@dataclass
class ContentItem(Entity[ContentItemId]):
    """
    A generated study item owned by exactly one user.

    Business Rules:
    - Owner is fixed at creation and never reassigned
    - Holds at least one question; question numbers are unique
    - Every question's grading model fits the content type
    - Immutable after creation apart from submitted_at and deleted_at, each set once
    - Only flashcard sets can be deleted; deletion hides the set but keeps its history
    """

    id: ContentItemId
    owner_id: UserId
    content_type: ContentType
    subject: str
    topic: str
    title: str
    questions: list[Question] = field(default_factory=list)
    exam_board: str | None = None
    created_at: datetime | None = None
    submitted_at: datetime | None = None
    deleted_at: datetime | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        if not self.subject or not self.subject.strip():
            raise ValidationError("Subject cannot be empty", field="subject")
        if len(self.subject) > MAX_SUBJECT_LENGTH:
            raise ValidationError(
                f"Subject cannot exceed {MAX_SUBJECT_LENGTH} characters", field="subject"
            )
        if not self.topic or not self.topic.strip():
            raise ValidationError("Topic cannot be empty", field="topic")
        if len(self.topic) > MAX_TOPIC_LENGTH:
            raise ValidationError(
                f"Topic cannot exceed {MAX_TOPIC_LENGTH} characters", field="topic"
            )
        if not self.questions:
            raise ValidationError("Content item needs at least one question", field="questions")

        numbers = [question.number for question in self.questions]
        if len(set(numbers)) != len(numbers):
            raise ValidationError("Duplicate question numbers", field="questions", value=numbers)

        allowed = ALLOWED_GRADING_MODELS[self.content_type]
        for question in self.questions:
            if question.grading_model not in allowed:
                raise ValidationError(
                    f"{self.content_type} cannot hold {question.grading_model} questions",
                    field="questions",
                    value=question.number,
                )

        self.questions.sort(key=lambda question: question.number)

    @property
    def is_submitted(self) -> bool:
        return self.submitted_at is not None

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None

    @property
    def is_gradable(self) -> bool:
        return self.content_type.is_gradable

    @property
    def total_marks(self) -> int:
        return sum(question.marks for question in self.questions if question.is_gradable)

    def question(self, question_id: QuestionId) -> Question | None:
        """Find one of this item's questions by id."""
        return next((q for q in self.questions if q.id == question_id), None)

    def is_owned_by(self, user_id: UserId) -> bool:
        return self.owner_id == user_id

    def mark_submitted(self, at: datetime) -> None:
        """
        Record that answers were submitted.

        Raises:
            AlreadySubmittedError: If the item was already submitted
        """
        if self.submitted_at is not None:
            raise AlreadySubmittedError(self.id.value)
        self.submitted_at = at

    @classmethod
    def create(
        cls,
        owner_id: UserId,
        content_type: ContentType,
        subject: str,
        topic: str,
        title: str,
        questions: list[Question],
        exam_board: str | None = None,
    ) -> "ContentItem":
        """
        Create a new, unsubmitted content item.

        Raises:
            ValidationError: If any invariant is violated
        """
        return cls(
            id=ContentItemId.generate(),
            owner_id=owner_id,
            content_type=content_type,
            subject=subject.strip(),
            topic=topic.strip(),
            title=title.strip() or f"{subject.strip()}: {topic.strip()}",
            questions=questions,
            exam_board=exam_board.strip() if exam_board else None,
        )
