"""Use case for deleting a flashcard set."""

from examelement.application.common.unit_of_work import UnitOfWork
from examelement.application.study.services.content_store import ContentStore
from examelement.domain.common.value_objects.ids import ContentItemId, UserId


class DeleteContentUseCase:
    """Delete one of the user's flashcard sets. Quizzes and mock exams stay."""

    def __init__(self, content_store: ContentStore, uow: UnitOfWork) -> None:
        """Initialize use case with dependencies."""
        self.content_store = content_store
        self.uow = uow

    def delete(self, item_id: int, user_id: int) -> None:
        """
        Hide the set from every read. Its ledger entries are kept.

        Raises:
            ContentAccessDeniedError: If the set is missing or belongs to someone else
            ContentNotDeletableError: If the item is a quiz or mock exam
        """
        with self.uow:
            self.content_store.delete(ContentItemId(item_id), UserId(user_id))
            self.uow.commit()
