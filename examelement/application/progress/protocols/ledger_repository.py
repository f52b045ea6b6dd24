"""Protocol for the append-only progress ledger."""

from typing import Protocol

from examelement.domain.common.value_objects.ids import UserId
from examelement.domain.progress.entities.ledger_entry import LedgerEntry


class LedgerRepositoryProtocol(Protocol):
    def append(self, entry: LedgerEntry) -> LedgerEntry:
        """Insert an entry. There is no update or delete. Flushes; the caller commits."""
        ...

    def find_by_user(
        self, user_id: UserId, subject: str | None = None, topic: str | None = None
    ) -> list[LedgerEntry]:
        """A user's entries in the order they were appended."""
        ...
