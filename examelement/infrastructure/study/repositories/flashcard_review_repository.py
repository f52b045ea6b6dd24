"""Repository for FlashcardReview domain entities."""

from sqlalchemy import case, func, select
from sqlalchemy.orm import Session

from examelement.domain.common.value_objects.ids import QuestionId
from examelement.domain.study.entities.flashcard_review import FlashcardReview, ReviewTally
from examelement.infrastructure.study.mappers.flashcard_review_mapper import (
    FlashcardReviewMapper,
)
from examelement.models import FlashcardReview as FlashcardReviewORM


class FlashcardReviewRepository:
    """Insert-only repository for flashcard self-reviews."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = FlashcardReviewMapper()

    def add(self, review: FlashcardReview) -> FlashcardReview:
        orm_model = self.mapper.to_orm(review)
        self.db.add(orm_model)
        self.db.flush()
        return self.mapper.to_domain(orm_model)

    def tally(self, question_id: QuestionId) -> ReviewTally:
        stmt = select(
            func.count(FlashcardReviewORM.id),
            func.coalesce(func.sum(case((FlashcardReviewORM.remembered.is_(True), 1), else_=0)), 0),
        ).where(FlashcardReviewORM.question_id == question_id.value)
        reviews, remembered = self.db.execute(stmt).one()
        return ReviewTally(question_id=question_id, reviews=reviews, remembered=remembered)
