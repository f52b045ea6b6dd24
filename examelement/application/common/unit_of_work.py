"""
Unit of Work interface.

The Unit of Work keeps the rows written by one business operation together:
either all of them are committed or none are.

Example:
    class SubmitAnswersUseCase:
        def __init__(self, content_store: ContentStore, uow: UnitOfWork) -> None:
            self.content_store = content_store
            self.uow = uow

        def submit(self, item_id: int, user_id: int, answers: dict[int, str]) -> ItemScore:
            with self.uow:
                outcome = self.content_store.record_answers(...)
                self.uow.commit()
                return outcome.score
"""

from abc import ABC, abstractmethod
from types import TracebackType
from typing import Self


class UnitOfWork(ABC):
    """
    Unit of Work interface (Port).

    Infrastructure layer provides concrete implementations
    (e.g., SqlAlchemyUnitOfWork).
    """

    @abstractmethod
    def commit(self) -> None:
        """Commit the current transaction."""
        raise NotImplementedError

    @abstractmethod
    def rollback(self) -> None:
        """Rollback the current transaction."""
        raise NotImplementedError

    def __enter__(self) -> Self:
        """Enter the unit of work context."""
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """
        Exit the unit of work context.

        If an exception occurred, rollback. Otherwise, do nothing
        (commit must be called explicitly).
        """
        if exc_type is not None:
            self.rollback()
