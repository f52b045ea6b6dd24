"""Use case for generating a new flashcard set, quiz or mock exam."""

import asyncio
from dataclasses import dataclass

import structlog

from examelement.application.common.unit_of_work import UnitOfWork
from examelement.application.progress.services.progress_ledger import ProgressLedger
from examelement.application.study.protocols.content_generator import (
    ContentGeneratorProtocol,
    GenerationRequest,
    RawContent,
)
from examelement.application.study.services.content_store import ContentStore
from examelement.application.study.services.generated_content_parser import (
    GeneratedContentParser,
)
from examelement.application.usage.services.access_controller import AccessController
from examelement.domain.common.exceptions import ValidationError
from examelement.domain.common.value_objects.content_type import ContentType
from examelement.domain.common.value_objects.ids import UserId
from examelement.domain.study.entities.content_item import ContentItem
from examelement.exceptions import GeneratorError

logger = structlog.get_logger(__name__)


@dataclass
class GenerationResult:
    item: ContentItem
    remaining: int | None

    @property
    def question_count(self) -> int:
        return len(self.item.questions)


class GenerateContentUseCase:
    """
    Generate and store new content.

    Order of work:
    1. consume quota (AccessController), once
    2. call the generator, time-bounded, retrying a failed call
    3. validate the output
    4. store item, questions and the generation ledger entry in one transaction

    If any step after 1 fails the consumed quota is given back.
    """

    def __init__(
        self,
        access_controller: AccessController,
        content_generator: ContentGeneratorProtocol,
        parser: GeneratedContentParser,
        content_store: ContentStore,
        progress_ledger: ProgressLedger,
        uow: UnitOfWork,
        timeout_seconds: float = 60.0,
        max_attempts: int = 2,
        max_count: int = 50,
    ) -> None:
        self.access_controller = access_controller
        self.content_generator = content_generator
        self.parser = parser
        self.content_store = content_store
        self.progress_ledger = progress_ledger
        self.uow = uow
        self.timeout_seconds = timeout_seconds
        self.max_attempts = max(1, max_attempts)
        self.max_count = max_count

    async def generate(
        self,
        user_id: int,
        content_type: ContentType,
        subject: str,
        topic: str,
        count: int,
        exam_board: str | None = None,
    ) -> GenerationResult:
        """
        Generate a content item for a user.

        Args:
            user_id: Verified user id
            content_type: flashcard, quiz or mock_exam
            subject: Subject name
            topic: Topic within the subject
            count: Number of questions to generate
            exam_board: Optional exam board the content targets

        Returns:
            GenerationResult with the stored item and the remaining quota

        Raises:
            ValidationError: If the request or the generated output is invalid
            QuotaExceededError: If the user is out of quota
            GeneratorError: If the generator fails on every attempt
        """
        if not 1 <= count <= self.max_count:
            raise ValidationError(
                f"count must be between 1 and {self.max_count}", field="count", value=count
            )
        if not subject.strip() or not topic.strip():
            raise ValidationError("Subject and topic are required", field="topic")

        user_id_vo = UserId(user_id)
        request = GenerationRequest(
            content_type=content_type,
            subject=subject.strip(),
            topic=topic.strip(),
            count=count,
            exam_board=exam_board.strip() if exam_board else None,
        )

        decision = self.access_controller.authorize_generation(user_id_vo, content_type)
        try:
            raw = await self._call_generator(request)
            questions = self.parser.parse(request, raw)
            with self.uow:
                item = self.content_store.create(
                    owner_id=user_id_vo,
                    content_type=content_type,
                    subject=request.subject,
                    topic=request.topic,
                    title=raw.title or "",
                    questions=questions,
                    exam_board=request.exam_board,
                )
                self.progress_ledger.record_generation(item)
                self.uow.commit()
        except BaseException:
            self.access_controller.revoke_generation(user_id_vo, content_type, decision)
            raise

        logger.info(
            "content_generated",
            user_id=user_id,
            item_id=item.id.value,
            content_type=str(content_type),
            question_count=len(item.questions),
        )
        return GenerationResult(item=item, remaining=decision.remaining)

    async def _call_generator(self, request: GenerationRequest) -> RawContent:
        for attempt in range(1, self.max_attempts + 1):
            try:
                return await asyncio.wait_for(
                    self.content_generator.generate(request), timeout=self.timeout_seconds
                )
            except TimeoutError:
                logger.warning(
                    "generator_timeout",
                    content_type=str(request.content_type),
                    attempt=attempt,
                    timeout_seconds=self.timeout_seconds,
                )
            except GeneratorError as e:
                logger.warning(
                    "generator_failed",
                    content_type=str(request.content_type),
                    attempt=attempt,
                    error=e.message,
                )
        raise GeneratorError()
