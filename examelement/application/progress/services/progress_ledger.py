"""Appends generation and grading facts to the progress ledger."""

import structlog

from examelement.application.common.clock import ClockProtocol
from examelement.application.progress.protocols.ledger_repository import (
    LedgerRepositoryProtocol,
)
from examelement.domain.common.value_objects.ids import UserId
from examelement.domain.progress.entities.ledger_entry import LedgerEntry
from examelement.domain.study.entities.content_item import ContentItem
from examelement.domain.study.services.scoring_engine import ItemScore

logger = structlog.get_logger(__name__)


class ProgressLedger:
    """
    Append-only source of truth for progress.

    Entries join the caller's transaction; nothing here commits.
    """

    def __init__(self, ledger_repository: LedgerRepositoryProtocol, clock: ClockProtocol) -> None:
        self.ledger_repository = ledger_repository
        self.clock = clock

    def record_generation(self, item: ContentItem) -> LedgerEntry:
        entry = self.ledger_repository.append(
            LedgerEntry.generated(
                user_id=item.owner_id,
                item_id=item.id,
                subject=item.subject,
                topic=item.topic,
                content_type=item.content_type,
                occurred_at=self.clock.now(),
            )
        )
        logger.info(
            "ledger_generation_recorded",
            user_id=item.owner_id.value,
            item_id=item.id.value,
            content_type=str(item.content_type),
        )
        return entry

    def record_grading(self, item: ContentItem, score: ItemScore) -> LedgerEntry:
        """
        Record a fully graded item.

        Args:
            item: The graded item
            score: Its complete score (no pending answers)
        """
        entry = self.ledger_repository.append(
            LedgerEntry.graded(
                user_id=item.owner_id,
                item_id=item.id,
                subject=item.subject,
                topic=item.topic,
                content_type=item.content_type,
                marks_earned=score.earned_marks,
                marks_possible=score.total_marks,
                occurred_at=self.clock.now(),
            )
        )
        logger.info(
            "ledger_grading_recorded",
            user_id=item.owner_id.value,
            item_id=item.id.value,
            marks_earned=score.earned_marks,
            marks_possible=score.total_marks,
        )
        return entry

    def entries_for(
        self, user_id: UserId, subject: str | None = None, topic: str | None = None
    ) -> list[LedgerEntry]:
        return self.ledger_repository.find_by_user(user_id, subject=subject, topic=topic)
