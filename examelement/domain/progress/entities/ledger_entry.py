"""Progress ledger entry: an append-only fact about generation or grading."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import StrEnum

from examelement.domain.common.entity import Entity
from examelement.domain.common.exceptions import InvariantViolationError
from examelement.domain.common.value_objects.content_type import ContentType
from examelement.domain.common.value_objects.ids import ContentItemId, LedgerEntryId, UserId
from examelement.domain.common.value_objects.rounding import round_half_up


class EventKind(StrEnum):
    GENERATED = "generated"
    GRADED = "graded"


@dataclass(frozen=True)
class LedgerEntry(Entity[LedgerEntryId]):
    """
    One immutable progress fact for (user, subject, topic).

    Business Rules:
    - Entries are only ever appended; never updated or deleted
    - Generation entries carry no marks
    - Grading entries carry 0 <= marks_earned <= marks_possible, marks_possible > 0
    - Each item emits at most one entry of each kind
    """

    id: LedgerEntryId
    user_id: UserId
    item_id: ContentItemId
    subject: str
    topic: str
    content_type: ContentType
    event_kind: EventKind
    marks_earned: int = 0
    marks_possible: int = 0
    occurred_at: datetime | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        if self.event_kind is EventKind.GENERATED:
            if self.marks_earned or self.marks_possible:
                raise InvariantViolationError("LedgerEntry", "generation entries carry no marks")
            return
        if self.marks_possible <= 0:
            raise InvariantViolationError("LedgerEntry", "marks_possible must be positive")
        if not 0 <= self.marks_earned <= self.marks_possible:
            raise InvariantViolationError(
                "LedgerEntry", "marks_earned must be within 0..marks_possible"
            )

    @property
    def percentage(self) -> Decimal | None:
        """The graded item's score as a percentage with two decimals; None for generation."""
        if self.event_kind is EventKind.GENERATED:
            return None
        return round_half_up(100 * self.marks_earned, self.marks_possible, places=2)

    @classmethod
    def generated(
        cls,
        user_id: UserId,
        item_id: ContentItemId,
        subject: str,
        topic: str,
        content_type: ContentType,
        occurred_at: datetime,
    ) -> "LedgerEntry":
        return cls(
            id=LedgerEntryId.generate(),
            user_id=user_id,
            item_id=item_id,
            subject=subject,
            topic=topic,
            content_type=content_type,
            event_kind=EventKind.GENERATED,
            occurred_at=occurred_at,
        )

    @classmethod
    def graded(
        cls,
        user_id: UserId,
        item_id: ContentItemId,
        subject: str,
        topic: str,
        content_type: ContentType,
        marks_earned: int,
        marks_possible: int,
        occurred_at: datetime,
    ) -> "LedgerEntry":
        return cls(
            id=LedgerEntryId.generate(),
            user_id=user_id,
            item_id=item_id,
            subject=subject,
            topic=topic,
            content_type=content_type,
            event_kind=EventKind.GRADED,
            marks_earned=marks_earned,
            marks_possible=marks_possible,
            occurred_at=occurred_at,
        )
