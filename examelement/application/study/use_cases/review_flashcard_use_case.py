"""Use case for a student marking a flashcard as remembered or forgotten."""

from examelement.application.common.unit_of_work import UnitOfWork
from examelement.application.study.services.content_store import ContentStore
from examelement.domain.common.value_objects.ids import ContentItemId, QuestionId, UserId
from examelement.domain.study.entities.flashcard_review import ReviewTally


class ReviewFlashcardUseCase:
    """
    Record a self-review of one flashcard.

    Self-reviews are study aids only. They carry no marks and never touch
    the progress ledger.
    """

    def __init__(self, content_store: ContentStore, uow: UnitOfWork) -> None:
        """Initialize use case with dependencies."""
        self.content_store = content_store
        self.uow = uow

    def review(self, item_id: int, question_id: int, user_id: int, remembered: bool) -> ReviewTally:
        with self.uow:
            tally = self.content_store.review_flashcard(
                ContentItemId(item_id), QuestionId(question_id), UserId(user_id), remembered
            )
            self.uow.commit()
        return tally
