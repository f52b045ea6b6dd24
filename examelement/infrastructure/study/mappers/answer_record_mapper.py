"""Mapper for AnswerRecord ORM ↔ Domain conversion."""

from examelement.domain.common.value_objects.ids import (
    AnswerRecordId,
    ContentItemId,
    QuestionId,
    UserId,
)
from examelement.domain.study.entities.answer_record import AnswerRecord, AnswerStatus
from examelement.models import AnswerRecord as AnswerRecordORM


class AnswerRecordMapper:
    """Mapper for AnswerRecord ORM ↔ Domain conversion. Records are insert-only."""

    def to_domain(self, orm_model: AnswerRecordORM) -> AnswerRecord:
        """Convert ORM model to domain entity."""
        return AnswerRecord(
            id=AnswerRecordId(orm_model.id),
            item_id=ContentItemId(orm_model.content_item_id),
            question_id=QuestionId(orm_model.question_id),
            attempt=orm_model.attempt,
            submitted_value=orm_model.submitted_value,
            status=AnswerStatus(orm_model.status),
            max_marks=orm_model.max_marks,
            marks_awarded=orm_model.marks_awarded,
            is_correct=orm_model.is_correct,
            graded_by=UserId(orm_model.graded_by) if orm_model.graded_by else None,
            created_at=orm_model.created_at,
        )

    def to_orm(self, domain_entity: AnswerRecord) -> AnswerRecordORM:
        """Convert a new domain entity to an ORM model."""
        orm_model = AnswerRecordORM(
            content_item_id=domain_entity.item_id.value,
            question_id=domain_entity.question_id.value,
            attempt=domain_entity.attempt,
            submitted_value=domain_entity.submitted_value,
            status=str(domain_entity.status),
            max_marks=domain_entity.max_marks,
            marks_awarded=domain_entity.marks_awarded,
            is_correct=domain_entity.is_correct,
            graded_by=domain_entity.graded_by.value if domain_entity.graded_by else None,
        )
        if domain_entity.created_at is not None:
            orm_model.created_at = domain_entity.created_at
        return orm_model
