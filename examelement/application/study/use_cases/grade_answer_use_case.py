"""Use case for a trusted reviewer grading a free-response answer."""

from collections.abc import Iterable

import structlog

from examelement.application.common.unit_of_work import UnitOfWork
from examelement.application.progress.services.progress_ledger import ProgressLedger
from examelement.application.study.services.content_store import ContentStore, GradedItem
from examelement.domain.common.value_objects.ids import ContentItemId, QuestionId, UserId
from examelement.exceptions import ForbiddenError

logger = structlog.get_logger(__name__)


class GradeAnswerUseCase:
    """
    Apply a reviewer's mark to an answer awaiting review.

    Only users listed as graders may call this; students can never set
    their own marks.
    """

    def __init__(
        self,
        content_store: ContentStore,
        progress_ledger: ProgressLedger,
        uow: UnitOfWork,
        grader_ids: Iterable[int] = (),
    ) -> None:
        """Initialize use case with dependencies."""
        self.content_store = content_store
        self.progress_ledger = progress_ledger
        self.uow = uow
        self.grader_ids = frozenset(grader_ids)

    def grade(self, item_id: int, question_id: int, grader_id: int, marks: int) -> GradedItem:
        """
        Grade one pending answer.

        Args:
            item_id: The mock exam
            question_id: The free-response question
            grader_id: Verified id of the reviewer
            marks: Marks to award

        Returns:
            The item with its updated answers and score

        Raises:
            ForbiddenError: If grader_id is not a trusted grader
            NotFoundError: If the item or question does not exist
            AnswerNotPendingReviewError: If the answer is not awaiting review
            ValidationError: If marks are out of range
        """
        if grader_id not in self.grader_ids:
            logger.warning("grading_denied", grader_id=grader_id, item_id=item_id)
            raise ForbiddenError("Only trusted graders can award marks")

        with self.uow:
            graded = self.content_store.grade(
                ContentItemId(item_id), QuestionId(question_id), UserId(grader_id), marks
            )
            if graded.score.is_complete:
                self.progress_ledger.record_grading(graded.item, graded.score)
            self.uow.commit()

        return graded
