"""Repository for daily generation quota counters."""

from datetime import date

from sqlalchemy import case, or_, select, update
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from examelement.domain.common.value_objects.content_type import ContentType
from examelement.domain.common.value_objects.ids import UserId
from examelement.domain.usage.value_objects.usage_quota import UsageQuota
from examelement.models import UsageQuota as UsageQuotaORM


class QuotaRepository:
    """
    Quota counters, changed only through single conditional statements.

    No in-process locks are used; the database row is the only point of
    coordination, so several server instances agree on the count.
    """

    def __init__(self, db: Session) -> None:
        self.db = db

    def try_consume(
        self, user_id: UserId, content_type: ContentType, limit: int, today: date
    ) -> int | None:
        """
        Count one generation against today's quota.

        Returns:
            The new count, or None if the limit was already reached
        """
        if limit <= 0:
            return None

        count = self._conditional_increment(user_id, content_type, limit, today)
        if count is not None or self._exists(user_id, content_type):
            return count

        self._insert_if_missing(user_id, content_type, today)
        return self._conditional_increment(user_id, content_type, limit, today)

    def release(self, user_id: UserId, content_type: ContentType, consumed_on: date) -> bool:
        stmt = (
            update(UsageQuotaORM)
            .where(
                UsageQuotaORM.user_id == user_id.value,
                UsageQuotaORM.content_type == str(content_type),
                UsageQuotaORM.reset_date == consumed_on,
                UsageQuotaORM.count > 0,
            )
            .values(count=UsageQuotaORM.count - 1)
            .execution_options(synchronize_session=False)
        )
        result = self.db.execute(stmt)
        return (getattr(result, "rowcount", 0) or 0) == 1

    def find_by_user(self, user_id: UserId) -> list[UsageQuota]:
        stmt = select(UsageQuotaORM).where(UsageQuotaORM.user_id == user_id.value)
        return [
            UsageQuota(
                user_id=UserId(orm_model.user_id),
                content_type=ContentType(orm_model.content_type),
                count=orm_model.count,
                reset_date=orm_model.reset_date,
            )
            for orm_model in self.db.execute(stmt).scalars()
        ]

    def _conditional_increment(
        self, user_id: UserId, content_type: ContentType, limit: int, today: date
    ) -> int | None:
        # A counter from an earlier day restarts at 1 in the same statement
        stale = UsageQuotaORM.reset_date < today
        stmt = (
            update(UsageQuotaORM)
            .where(
                UsageQuotaORM.user_id == user_id.value,
                UsageQuotaORM.content_type == str(content_type),
                or_(stale, UsageQuotaORM.count < limit),
            )
            .values(
                count=case((stale, 1), else_=UsageQuotaORM.count + 1),
                reset_date=today,
            )
            .returning(UsageQuotaORM.count)
            .execution_options(synchronize_session=False)
        )
        return self.db.execute(stmt).scalar_one_or_none()

    def _exists(self, user_id: UserId, content_type: ContentType) -> bool:
        stmt = select(UsageQuotaORM.id).where(
            UsageQuotaORM.user_id == user_id.value,
            UsageQuotaORM.content_type == str(content_type),
        )
        return self.db.execute(stmt).first() is not None

    def _insert_if_missing(self, user_id: UserId, content_type: ContentType, today: date) -> None:
        values = {
            "user_id": user_id.value,
            "content_type": str(content_type),
            "count": 0,
            "reset_date": today,
        }
        dialect = self.db.get_bind().dialect.name
        if dialect == "postgresql":
            self.db.execute(
                postgresql.insert(UsageQuotaORM)
                .values(**values)
                .on_conflict_do_nothing(index_elements=["user_id", "content_type"])
            )
        elif dialect == "sqlite":
            self.db.execute(
                sqlite.insert(UsageQuotaORM)
                .values(**values)
                .on_conflict_do_nothing(index_elements=["user_id", "content_type"])
            )
        else:
            try:
                with self.db.begin_nested():
                    self.db.add(UsageQuotaORM(**values))
            except IntegrityError:
                # A concurrent request created the row first
                pass
