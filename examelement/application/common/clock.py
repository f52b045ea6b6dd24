"""Clock port. All dates come from the server, never the client."""

from datetime import date, datetime
from typing import Protocol


class ClockProtocol(Protocol):
    def now(self) -> datetime:
        """Current UTC time."""
        ...

    def today(self) -> date:
        """Current UTC calendar date; quota counters reset when this advances."""
        ...
