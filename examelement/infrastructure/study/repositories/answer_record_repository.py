"""Repository for AnswerRecord domain entities."""

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from examelement.domain.common.value_objects.ids import ContentItemId, QuestionId
from examelement.domain.study.entities.answer_record import AnswerRecord
from examelement.domain.study.exceptions import DuplicateAnswerAttemptError
from examelement.infrastructure.study.mappers.answer_record_mapper import AnswerRecordMapper
from examelement.models import AnswerRecord as AnswerRecordORM


class AnswerRecordRepository:
    """Insert-only repository for AnswerRecord domain entities."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = AnswerRecordMapper()

    def add_all(self, records: list[AnswerRecord]) -> list[AnswerRecord]:
        """
        Insert answer records.

        Raises:
            DuplicateAnswerAttemptError: If a (question, attempt) pair already exists
        """
        orm_models = [self.mapper.to_orm(record) for record in records]
        self.db.add_all(orm_models)
        try:
            self.db.flush()
        except IntegrityError as e:
            raise DuplicateAnswerAttemptError() from e
        return [self.mapper.to_domain(orm) for orm in orm_models]

    def find_latest_by_item(self, item_id: ContentItemId) -> dict[QuestionId, AnswerRecord]:
        stmt = (
            select(AnswerRecordORM)
            .where(AnswerRecordORM.content_item_id == item_id.value)
            .order_by(AnswerRecordORM.question_id, AnswerRecordORM.attempt)
        )
        latest: dict[QuestionId, AnswerRecord] = {}
        for orm_model in self.db.execute(stmt).scalars():
            record = self.mapper.to_domain(orm_model)
            latest[record.question_id] = record
        return latest
