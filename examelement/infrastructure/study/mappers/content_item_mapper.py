"""Mapper for ContentItem and Question ORM ↔ Domain conversion."""

from examelement.domain.common.value_objects.content_type import ContentType
from examelement.domain.common.value_objects.ids import ContentItemId, QuestionId, UserId
from examelement.domain.study.entities.content_item import ContentItem
from examelement.domain.study.entities.question import GradingModel, Question
from examelement.models import ContentItem as ContentItemORM
from examelement.models import Question as QuestionORM


class ContentItemMapper:
    """
    Mapper for ContentItem ORM ↔ Domain conversion.

    Items are immutable apart from submitted_at and deleted_at, which
    repositories set with conditional updates, so there is no update path here.
    """

    def to_domain(self, orm_model: ContentItemORM) -> ContentItem:
        """Convert ORM model (with its questions) to domain entity."""
        return ContentItem(
            id=ContentItemId(orm_model.id),
            owner_id=UserId(orm_model.user_id),
            content_type=ContentType(orm_model.content_type),
            subject=orm_model.subject,
            topic=orm_model.topic,
            title=orm_model.title,
            questions=[self.question_to_domain(question) for question in orm_model.questions],
            exam_board=orm_model.exam_board,
            created_at=orm_model.created_at,
            submitted_at=orm_model.submitted_at,
            deleted_at=orm_model.deleted_at,
        )

    def question_to_domain(self, orm_model: QuestionORM) -> Question:
        return Question(
            id=QuestionId(orm_model.id),
            number=orm_model.number,
            prompt=orm_model.prompt,
            grading_model=GradingModel(orm_model.grading_model),
            marks=orm_model.marks,
            options=dict(orm_model.options or {}),
            correct_option=orm_model.correct_option,
            answer=orm_model.answer,
            explanation=orm_model.explanation,
            sample_answer=orm_model.sample_answer,
            rubric=tuple(orm_model.rubric or ()),
        )

    def to_orm(self, domain_entity: ContentItem) -> ContentItemORM:
        """Convert a new domain entity to ORM models."""
        return ContentItemORM(
            user_id=domain_entity.owner_id.value,
            content_type=str(domain_entity.content_type),
            subject=domain_entity.subject,
            topic=domain_entity.topic,
            exam_board=domain_entity.exam_board,
            title=domain_entity.title,
            submitted_at=domain_entity.submitted_at,
            questions=[self.question_to_orm(question) for question in domain_entity.questions],
        )

    def question_to_orm(self, domain_entity: Question) -> QuestionORM:
        return QuestionORM(
            number=domain_entity.number,
            prompt=domain_entity.prompt,
            grading_model=str(domain_entity.grading_model),
            marks=domain_entity.marks,
            options=dict(domain_entity.options) or None,
            correct_option=domain_entity.correct_option,
            answer=domain_entity.answer,
            explanation=domain_entity.explanation,
            sample_answer=domain_entity.sample_answer,
            rubric=list(domain_entity.rubric) or None,
        )
