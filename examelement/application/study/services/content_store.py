"""Ownership-checked persistence of generated content and answers."""

from collections.abc import Mapping
from dataclasses import dataclass

import structlog

from examelement.application.common.clock import ClockProtocol
from examelement.application.study.protocols.answer_record_repository import (
    AnswerRecordRepositoryProtocol,
)
from examelement.application.study.protocols.content_repository import (
    ContentRepositoryProtocol,
)
from examelement.application.study.protocols.flashcard_review_repository import (
    FlashcardReviewRepositoryProtocol,
)
from examelement.domain.common.exceptions import ValidationError
from examelement.domain.common.value_objects.content_type import ContentType
from examelement.domain.common.value_objects.ids import (
    AnswerRecordId,
    ContentItemId,
    QuestionId,
    UserId,
)
from examelement.domain.study.entities.answer_record import AnswerRecord
from examelement.domain.study.entities.content_item import ContentItem
from examelement.domain.study.entities.flashcard_review import FlashcardReview, ReviewTally
from examelement.domain.study.entities.question import Question
from examelement.domain.study.exceptions import (
    AlreadySubmittedError,
    AnswerNotPendingReviewError,
    ContentNotDeletableError,
    ContentNotGradableError,
    ContentNotReviewableError,
    QuestionNotFoundError,
    ResultsNotAvailableError,
)
from examelement.domain.study.services.scoring_engine import ItemScore, ScoringEngine
from examelement.exceptions import ContentAccessDeniedError, NotFoundError

logger = structlog.get_logger(__name__)


@dataclass
class GradedItem:
    """An item together with its effective answers and score."""

    item: ContentItem
    records: dict[QuestionId, AnswerRecord]
    score: ItemScore


class ContentStore:
    """
    Stores content items and their answers under strict per-user ownership.

    Writes join the caller's unit of work; nothing here commits.
    """

    def __init__(
        self,
        content_repository: ContentRepositoryProtocol,
        answer_record_repository: AnswerRecordRepositoryProtocol,
        flashcard_review_repository: FlashcardReviewRepositoryProtocol,
        scoring_engine: ScoringEngine,
        clock: ClockProtocol,
    ) -> None:
        self.content_repository = content_repository
        self.answer_record_repository = answer_record_repository
        self.flashcard_review_repository = flashcard_review_repository
        self.scoring_engine = scoring_engine
        self.clock = clock

    def create(
        self,
        owner_id: UserId,
        content_type: ContentType,
        subject: str,
        topic: str,
        title: str,
        questions: list[Question],
        exam_board: str | None = None,
    ) -> ContentItem:
        """
        Store a new item and its questions.

        Raises:
            ValidationError: If the item violates an invariant
        """
        item = ContentItem.create(
            owner_id=owner_id,
            content_type=content_type,
            subject=subject,
            topic=topic,
            title=title,
            questions=questions,
            exam_board=exam_board,
        )
        return self.content_repository.add(item)

    def get(self, item_id: ContentItemId, requester_id: UserId) -> ContentItem:
        """
        Fetch an item owned by the requester.

        Raises:
            ContentAccessDeniedError: If the item is missing or owned by someone else
        """
        item = self.content_repository.find_by_id(item_id, requester_id)
        if item is None:
            logger.info(
                "content_access_denied", item_id=item_id.value, requester_id=requester_id.value
            )
            raise ContentAccessDeniedError()
        return item

    def list(
        self,
        owner_id: UserId,
        content_type: ContentType | None = None,
        subject: str | None = None,
        topic: str | None = None,
    ) -> list[ContentItem]:
        return self.content_repository.find_by_owner(
            owner_id, content_type=content_type, subject=subject, topic=topic
        )

    def record_answers(
        self,
        item_id: ContentItemId,
        requester_id: UserId,
        answers: Mapping[int, str],
    ) -> GradedItem:
        """
        Grade and store a submission.

        Args:
            item_id: The item being answered
            requester_id: Verified requester
            answers: Submitted value per question id; missing questions count as unanswered

        Returns:
            GradedItem with the new records and the item's score

        Raises:
            ContentAccessDeniedError: If the item is missing or not the requester's
            ContentNotGradableError: If the item is a flashcard set
            AlreadySubmittedError: If the item was already submitted
            ValidationError: If an answer names a question outside the item
        """
        item = self.get(item_id, requester_id)
        if not item.is_gradable:
            raise ContentNotGradableError(str(item.content_type))
        if item.is_submitted:
            raise AlreadySubmittedError(item_id.value)

        known = {question.id.value for question in item.questions}
        unknown = sorted(set(answers) - known)
        if unknown:
            raise ValidationError(
                "Answers reference questions outside this item", field="answers", value=unknown
            )

        submitted_at = self.clock.now()
        if not self.content_repository.mark_submitted(item.id, submitted_at):
            raise AlreadySubmittedError(item_id.value)
        item.mark_submitted(submitted_at)

        records: list[AnswerRecord] = []
        for question in item.questions:
            submitted = answers.get(question.id.value, "")
            grade = self.scoring_engine.grade(question, submitted)
            records.append(
                AnswerRecord(
                    id=AnswerRecordId.generate(),
                    item_id=item.id,
                    question_id=question.id,
                    attempt=1,
                    submitted_value=submitted,
                    status=grade.status,
                    max_marks=question.marks,
                    marks_awarded=grade.marks_awarded,
                    is_correct=grade.is_correct,
                    created_at=submitted_at,
                )
            )
        saved = self.answer_record_repository.add_all(records)
        by_question = {record.question_id: record for record in saved}
        score = self.scoring_engine.score(item.questions, by_question)

        logger.info(
            "answers_recorded",
            item_id=item.id.value,
            user_id=requester_id.value,
            earned_marks=score.earned_marks,
            total_marks=score.total_marks,
            pending_count=score.pending_count,
        )
        return GradedItem(item=item, records=by_question, score=score)

    def results(self, item_id: ContentItemId, requester_id: UserId) -> GradedItem:
        """
        Effective answers and score of a submitted item.

        Raises:
            ContentAccessDeniedError: If the item is missing or not the requester's
            ResultsNotAvailableError: If the item has not been submitted
        """
        item = self.get(item_id, requester_id)
        if not item.is_submitted:
            raise ResultsNotAvailableError(item_id.value)
        return self._graded(item)

    def grade(
        self,
        item_id: ContentItemId,
        question_id: QuestionId,
        grader_id: UserId,
        marks: int,
    ) -> GradedItem:
        """
        Apply a trusted reviewer's mark to a pending answer.

        The caller is responsible for checking that grader_id is trusted. The
        item stays locked until the caller commits, so the returned score
        reflects every review of the item committed before this one.

        Raises:
            NotFoundError: If the item does not exist
            QuestionNotFoundError: If the question is not part of the item
            AnswerNotPendingReviewError: If the answer is not awaiting review
            ValidationError: If marks fall outside 0..question marks
        """
        item = self.content_repository.find_by_id_for_review(item_id)
        if item is None:
            raise NotFoundError(f"Content item with id {item_id.value} not found")
        question = item.question(question_id)
        if question is None:
            raise QuestionNotFoundError(question_id.value)

        latest = self.answer_record_repository.find_latest_by_item(item.id)
        current = latest.get(question.id)
        if current is None:
            raise AnswerNotPendingReviewError(question_id.value)

        self.scoring_engine.ensure_within_bounds(question, marks)
        reviewed = current.review(marks, grader_id, self.clock.now())
        saved = self.answer_record_repository.add_all([reviewed])[0]
        latest[question.id] = saved

        score = self.scoring_engine.score(item.questions, latest)
        logger.info(
            "answer_reviewed",
            item_id=item.id.value,
            question_id=question_id.value,
            grader_id=grader_id.value,
            marks_awarded=marks,
            pending_count=score.pending_count,
        )
        return GradedItem(item=item, records=latest, score=score)

    def review_flashcard(
        self,
        item_id: ContentItemId,
        question_id: QuestionId,
        requester_id: UserId,
        remembered: bool,
    ) -> ReviewTally:
        """
        Record whether the owner remembered one card of a flashcard set.

        Returns:
            The card's review counts including this review

        Raises:
            ContentAccessDeniedError: If the set is missing, deleted or not the requester's
            ContentNotReviewableError: If the item is not a flashcard set
            QuestionNotFoundError: If the card is not part of the set
        """
        item = self.get(item_id, requester_id)
        if item.content_type is not ContentType.FLASHCARD:
            raise ContentNotReviewableError(str(item.content_type))
        question = item.question(question_id)
        if question is None:
            raise QuestionNotFoundError(question_id.value)

        self.flashcard_review_repository.add(
            FlashcardReview.record(
                item.id, question.id, requester_id, remembered, self.clock.now()
            )
        )
        return self.flashcard_review_repository.tally(question.id)

    def delete(self, item_id: ContentItemId, requester_id: UserId) -> ContentItem:
        """
        Delete one of the requester's flashcard sets.

        The set disappears from reads but its row stays, so progress ledger
        entries that name it are untouched.

        Raises:
            ContentAccessDeniedError: If the set is missing, already deleted or not the
                requester's
            ContentNotDeletableError: If the item is a quiz or mock exam
        """
        item = self.get(item_id, requester_id)
        if item.content_type is not ContentType.FLASHCARD:
            raise ContentNotDeletableError(str(item.content_type))

        deleted_at = self.clock.now()
        if not self.content_repository.mark_deleted(item.id, deleted_at):
            raise ContentAccessDeniedError()
        item.deleted_at = deleted_at
        logger.info("content_deleted", item_id=item.id.value, user_id=requester_id.value)
        return item

    def _graded(self, item: ContentItem) -> GradedItem:
        latest = self.answer_record_repository.find_latest_by_item(item.id)
        return GradedItem(
            item=item, records=latest, score=self.scoring_engine.score(item.questions, latest)
        )
