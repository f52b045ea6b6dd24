"""Protocol for AnswerRecord repository."""

from typing import Protocol

from examelement.domain.common.value_objects.ids import ContentItemId, QuestionId
from examelement.domain.study.entities.answer_record import AnswerRecord


class AnswerRecordRepositoryProtocol(Protocol):
    def add_all(self, records: list[AnswerRecord]) -> list[AnswerRecord]:
        """Insert records. (question, attempt) is unique. Flushes; the caller commits."""
        ...

    def find_latest_by_item(self, item_id: ContentItemId) -> dict[QuestionId, AnswerRecord]:
        """Effective answer per question: the record with the highest attempt."""
        ...
