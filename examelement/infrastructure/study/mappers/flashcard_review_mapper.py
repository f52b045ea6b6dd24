"""Mapper for FlashcardReview ORM ↔ Domain conversion."""

from examelement.domain.common.value_objects.ids import (
    ContentItemId,
    FlashcardReviewId,
    QuestionId,
    UserId,
)
from examelement.domain.study.entities.flashcard_review import FlashcardReview
from examelement.models import FlashcardReview as FlashcardReviewORM


class FlashcardReviewMapper:
    """Mapper for FlashcardReview ORM ↔ Domain conversion. Reviews are insert-only."""

    def to_domain(self, orm_model: FlashcardReviewORM) -> FlashcardReview:
        return FlashcardReview(
            id=FlashcardReviewId(orm_model.id),
            item_id=ContentItemId(orm_model.content_item_id),
            question_id=QuestionId(orm_model.question_id),
            user_id=UserId(orm_model.user_id),
            remembered=orm_model.remembered,
            reviewed_at=orm_model.reviewed_at,
        )

    def to_orm(self, domain_entity: FlashcardReview) -> FlashcardReviewORM:
        orm_model = FlashcardReviewORM(
            user_id=domain_entity.user_id.value,
            content_item_id=domain_entity.item_id.value,
            question_id=domain_entity.question_id.value,
            remembered=domain_entity.remembered,
        )
        if domain_entity.reviewed_at is not None:
            orm_model.reviewed_at = domain_entity.reviewed_at
        return orm_model
