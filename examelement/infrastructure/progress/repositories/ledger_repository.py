"""Repository for the append-only progress ledger."""

from sqlalchemy import select
from sqlalchemy.orm import Session

from examelement.domain.common.value_objects.ids import UserId
from examelement.domain.progress.entities.ledger_entry import LedgerEntry
from examelement.infrastructure.progress.mappers.ledger_entry_mapper import LedgerEntryMapper
from examelement.models import ProgressLedgerEntry as LedgerEntryORM


class LedgerRepository:
    """Append-only repository: there are deliberately no update or delete methods."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = LedgerEntryMapper()

    def append(self, entry: LedgerEntry) -> LedgerEntry:
        orm_model = self.mapper.to_orm(entry)
        self.db.add(orm_model)
        self.db.flush()
        self.db.refresh(orm_model)
        return self.mapper.to_domain(orm_model)

    def find_by_user(
        self, user_id: UserId, subject: str | None = None, topic: str | None = None
    ) -> list[LedgerEntry]:
        stmt = select(LedgerEntryORM).where(LedgerEntryORM.user_id == user_id.value)
        if subject is not None:
            stmt = stmt.where(LedgerEntryORM.subject == subject)
        if topic is not None:
            stmt = stmt.where(LedgerEntryORM.topic == topic)
        stmt = stmt.order_by(LedgerEntryORM.id)
        return [self.mapper.to_domain(orm) for orm in self.db.execute(stmt).scalars()]
