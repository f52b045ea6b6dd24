"""Tests for QuotaRepository against SQLite."""

from datetime import date

from sqlalchemy.orm import Session

from examelement import models
from examelement.domain.common.value_objects.content_type import ContentType
from examelement.domain.common.value_objects.ids import UserId
from examelement.infrastructure.usage.repositories.quota_repository import QuotaRepository

TODAY = date(2026, 3, 14)
TOMORROW = date(2026, 3, 15)
USER = UserId(1)


class TestTryConsume:
    def test_first_use_creates_counter(self, db_session: Session, free_user: models.User) -> None:
        repository = QuotaRepository(db_session)

        assert repository.try_consume(USER, ContentType.MOCK_EXAM, 3, TODAY) == 1

        quotas = repository.find_by_user(USER)
        assert len(quotas) == 1
        assert quotas[0].count == 1
        assert quotas[0].reset_date == TODAY

    def test_stops_at_limit(self, db_session: Session, free_user: models.User) -> None:
        repository = QuotaRepository(db_session)

        counts = [repository.try_consume(USER, ContentType.MOCK_EXAM, 3, TODAY) for _ in range(5)]

        assert counts == [1, 2, 3, None, None]

    def test_zero_limit_never_counts(self, db_session: Session, free_user: models.User) -> None:
        repository = QuotaRepository(db_session)

        assert repository.try_consume(USER, ContentType.QUIZ, 0, TODAY) is None
        assert repository.find_by_user(USER) == []

    def test_new_day_restarts_at_one(self, db_session: Session, free_user: models.User) -> None:
        repository = QuotaRepository(db_session)
        for _ in range(3):
            repository.try_consume(USER, ContentType.MOCK_EXAM, 3, TODAY)

        assert repository.try_consume(USER, ContentType.MOCK_EXAM, 3, TOMORROW) == 1

        assert repository.find_by_user(USER)[0].reset_date == TOMORROW

    def test_content_types_counted_separately(
        self, db_session: Session, free_user: models.User
    ) -> None:
        repository = QuotaRepository(db_session)

        assert repository.try_consume(USER, ContentType.FLASHCARD, 1, TODAY) == 1
        assert repository.try_consume(USER, ContentType.FLASHCARD, 1, TODAY) is None
        assert repository.try_consume(USER, ContentType.MOCK_EXAM, 3, TODAY) == 1


class TestRelease:
    def test_gives_back_one_unit(self, db_session: Session, free_user: models.User) -> None:
        repository = QuotaRepository(db_session)
        repository.try_consume(USER, ContentType.MOCK_EXAM, 3, TODAY)
        repository.try_consume(USER, ContentType.MOCK_EXAM, 3, TODAY)

        assert repository.release(USER, ContentType.MOCK_EXAM, TODAY) is True

        assert repository.find_by_user(USER)[0].count == 1

    def test_never_below_zero(self, db_session: Session, free_user: models.User) -> None:
        repository = QuotaRepository(db_session)
        repository.try_consume(USER, ContentType.FLASHCARD, 1, TODAY)

        assert repository.release(USER, ContentType.FLASHCARD, TODAY) is True
        assert repository.release(USER, ContentType.FLASHCARD, TODAY) is False

        assert repository.find_by_user(USER)[0].count == 0

    def test_never_crosses_days(self, db_session: Session, free_user: models.User) -> None:
        repository = QuotaRepository(db_session)
        repository.try_consume(USER, ContentType.MOCK_EXAM, 3, TODAY)
        repository.try_consume(USER, ContentType.MOCK_EXAM, 3, TOMORROW)

        assert repository.release(USER, ContentType.MOCK_EXAM, TODAY) is False

        assert repository.find_by_user(USER)[0].count == 1

    def test_missing_counter(self, db_session: Session, free_user: models.User) -> None:
        assert QuotaRepository(db_session).release(USER, ContentType.MOCK_EXAM, TODAY) is False
