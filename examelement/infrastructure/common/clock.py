"""Server clock."""

from datetime import UTC, date, datetime


class SystemClock:
    """UTC wall clock. Quota days roll over at midnight UTC."""

    def now(self) -> datetime:
        return datetime.now(UTC)

    def today(self) -> date:
        return self.now().date()
