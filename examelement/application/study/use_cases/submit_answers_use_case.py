"""Use case for submitting answers to a quiz or mock exam."""

from collections.abc import Mapping

import structlog

from examelement.application.common.unit_of_work import UnitOfWork
from examelement.application.progress.services.progress_ledger import ProgressLedger
from examelement.application.study.services.content_store import ContentStore
from examelement.domain.common.value_objects.ids import ContentItemId, UserId
from examelement.domain.study.services.scoring_engine import ItemScore

logger = structlog.get_logger(__name__)


class SubmitAnswersUseCase:
    """Grade a submission and record it, all in one transaction."""

    def __init__(
        self,
        content_store: ContentStore,
        progress_ledger: ProgressLedger,
        uow: UnitOfWork,
    ) -> None:
        """Initialize use case with dependencies."""
        self.content_store = content_store
        self.progress_ledger = progress_ledger
        self.uow = uow

    def submit(self, item_id: int, user_id: int, answers: Mapping[int, str]) -> ItemScore:
        """
        Submit answers for an item.

        A grading ledger entry is written now if every answer got a mark;
        otherwise it is written when the last pending answer is reviewed.

        Args:
            item_id: The quiz or mock exam
            user_id: Verified user id
            answers: Submitted value per question id

        Returns:
            The item's score

        Raises:
            ContentAccessDeniedError: If the item is missing or not the user's
            AlreadySubmittedError: If the item was already submitted
            ValidationError: If the item cannot be graded or answers are invalid
        """
        with self.uow:
            graded = self.content_store.record_answers(
                ContentItemId(item_id), UserId(user_id), answers
            )
            if graded.score.is_complete:
                self.progress_ledger.record_grading(graded.item, graded.score)
            self.uow.commit()

        logger.info(
            "answers_submitted",
            item_id=item_id,
            user_id=user_id,
            percentage=graded.score.percentage,
            pending_count=graded.score.pending_count,
        )
        return graded.score
