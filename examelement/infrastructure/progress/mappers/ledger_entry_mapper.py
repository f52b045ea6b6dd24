"""Mapper for progress ledger ORM ↔ Domain conversion."""

from examelement.domain.common.value_objects.content_type import ContentType
from examelement.domain.common.value_objects.ids import ContentItemId, LedgerEntryId, UserId
from examelement.domain.progress.entities.ledger_entry import EventKind, LedgerEntry
from examelement.models import ProgressLedgerEntry as LedgerEntryORM


class LedgerEntryMapper:
    """Mapper for LedgerEntry ORM ↔ Domain conversion. Entries are insert-only."""

    def to_domain(self, orm_model: LedgerEntryORM) -> LedgerEntry:
        return LedgerEntry(
            id=LedgerEntryId(orm_model.id),
            user_id=UserId(orm_model.user_id),
            item_id=ContentItemId(orm_model.content_item_id),
            subject=orm_model.subject,
            topic=orm_model.topic,
            content_type=ContentType(orm_model.content_type),
            event_kind=EventKind(orm_model.event_kind),
            marks_earned=orm_model.marks_earned,
            marks_possible=orm_model.marks_possible,
            occurred_at=orm_model.occurred_at,
        )

    def to_orm(self, domain_entity: LedgerEntry) -> LedgerEntryORM:
        orm_model = LedgerEntryORM(
            user_id=domain_entity.user_id.value,
            content_item_id=domain_entity.item_id.value,
            subject=domain_entity.subject,
            topic=domain_entity.topic,
            content_type=str(domain_entity.content_type),
            event_kind=str(domain_entity.event_kind),
            marks_earned=domain_entity.marks_earned,
            marks_possible=domain_entity.marks_possible,
        )
        if domain_entity.occurred_at is not None:
            orm_model.occurred_at = domain_entity.occurred_at
        return orm_model
