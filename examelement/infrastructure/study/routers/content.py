"""API endpoints for generated content, submissions and results."""

from typing import Annotated

import structlog
from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response, status

from examelement.application.study.use_cases.delete_content_use_case import DeleteContentUseCase
from examelement.application.study.use_cases.fetch_content_use_case import FetchContentUseCase
from examelement.application.study.use_cases.generate_content_use_case import (
    GenerateContentUseCase,
)
from examelement.application.study.use_cases.get_results_use_case import GetResultsUseCase
from examelement.application.study.use_cases.grade_answer_use_case import GradeAnswerUseCase
from examelement.application.study.use_cases.review_flashcard_use_case import (
    ReviewFlashcardUseCase,
)
from examelement.application.study.use_cases.submit_answers_use_case import (
    SubmitAnswersUseCase,
)
from examelement.config import get_settings
from examelement.core import container
from examelement.domain.common.exceptions import DomainError
from examelement.domain.common.value_objects.content_type import ContentType
from examelement.domain.identity.entities.user import User
from examelement.exceptions import ExamElementError
from examelement.infrastructure.common.dependencies import require_content_generation
from examelement.infrastructure.common.di import inject_use_case
from examelement.infrastructure.common.rate_limit import limiter
from examelement.infrastructure.identity.dependencies import get_current_user
from examelement.infrastructure.study.schemas import (
    ContentItemResponse,
    ContentItemSummary,
    ContentListResponse,
    FlashcardReviewRequest,
    FlashcardReviewResponse,
    GenerateContentRequest,
    GenerateContentResponse,
    GradeAnswerRequest,
    GradeAnswerResponse,
    ResultsResponse,
    ScoreResponse,
    SubmitAnswersRequest,
)

logger = structlog.get_logger(__name__)
settings = get_settings()

router = APIRouter(prefix="/content", tags=["content"])

UNEXPECTED_ERROR = "An unexpected error occurred. Please try again later."


@router.post(
    "/generate",
    response_model=GenerateContentResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_content_generation)],
)
@limiter.limit(settings.GENERATION_RATE_LIMIT)  # type: ignore[misc]
async def generate_content(
    request: Request,
    body: GenerateContentRequest,
    current_user: Annotated[User, Depends(get_current_user)],
    use_case: GenerateContentUseCase = Depends(
        inject_use_case(container.generate_content_use_case)
    ),
) -> GenerateContentResponse:
    """
    Generate a flashcard set, quiz or mock exam.

    Free users are limited per content type per day; the quota is given back
    if generation fails.
    """
    try:
        result = await use_case.generate(
            user_id=current_user.id.value,
            content_type=body.content_type,
            subject=body.subject,
            topic=body.topic,
            count=body.count,
            exam_board=body.exam_board,
        )
        return GenerateContentResponse(
            item_id=result.item.id.value,
            content_type=result.item.content_type,
            title=result.item.title,
            question_count=result.question_count,
            remaining=result.remaining,
        )
    except (ExamElementError, DomainError):
        raise
    except Exception as e:
        logger.error(
            "failed_to_generate_content",
            user_id=current_user.id.value,
            content_type=str(body.content_type),
            error=str(e),
            exc_info=True,
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=UNEXPECTED_ERROR
        ) from e


@router.get("", response_model=ContentListResponse, status_code=status.HTTP_200_OK)
def list_content(
    current_user: Annotated[User, Depends(get_current_user)],
    content_type: Annotated[ContentType | None, Query()] = None,
    subject: Annotated[str | None, Query(max_length=100)] = None,
    topic: Annotated[str | None, Query(max_length=200)] = None,
    use_case: FetchContentUseCase = Depends(inject_use_case(container.fetch_content_use_case)),
) -> ContentListResponse:
    """List the current user's content items, newest first."""
    try:
        items = use_case.list_items(
            current_user.id.value, content_type=content_type, subject=subject, topic=topic
        )
        return ContentListResponse(
            items=[ContentItemSummary.from_domain(item) for item in items], total=len(items)
        )
    except (ExamElementError, DomainError):
        raise
    except Exception as e:
        logger.error("failed_to_list_content", user_id=current_user.id.value, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=UNEXPECTED_ERROR
        ) from e


@router.get("/{item_id}", response_model=ContentItemResponse, status_code=status.HTTP_200_OK)
def get_content(
    item_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    use_case: FetchContentUseCase = Depends(inject_use_case(container.fetch_content_use_case)),
) -> ContentItemResponse:
    """
    Get one of the current user's content items.

    Answer keys stay hidden until the item has been submitted.
    """
    try:
        item = use_case.get_item(item_id, current_user.id.value)
        return ContentItemResponse.from_domain(item)
    except (ExamElementError, DomainError):
        raise
    except Exception as e:
        logger.error("failed_to_get_content", item_id=item_id, error=str(e), exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=UNEXPECTED_ERROR
        ) from e


@router.post(
    "/{item_id}/submit", response_model=ScoreResponse, status_code=status.HTTP_200_OK
)
def submit_answers(
    item_id: int,
    body: SubmitAnswersRequest,
    current_user: Annotated[User, Depends(get_current_user)],
    use_case: SubmitAnswersUseCase = Depends(inject_use_case(container.submit_answers_use_case)),
) -> ScoreResponse:
    """
    Submit answers to a quiz or mock exam.

    Marks are computed on the server; an item can only be submitted once.
    """
    try:
        score = use_case.submit(item_id, current_user.id.value, body.as_mapping())
        return ScoreResponse.from_domain(score)
    except (ExamElementError, DomainError):
        raise
    except Exception as e:
        logger.error("failed_to_submit_answers", item_id=item_id, error=str(e), exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=UNEXPECTED_ERROR
        ) from e


@router.get(
    "/{item_id}/results", response_model=ResultsResponse, status_code=status.HTTP_200_OK
)
def get_results(
    item_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    use_case: GetResultsUseCase = Depends(inject_use_case(container.get_results_use_case)),
) -> ResultsResponse:
    """Per-question results of a submitted item."""
    try:
        graded = use_case.get_results(item_id, current_user.id.value)
        return ResultsResponse.from_domain(graded)
    except (ExamElementError, DomainError):
        raise
    except Exception as e:
        logger.error("failed_to_get_results", item_id=item_id, error=str(e), exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=UNEXPECTED_ERROR
        ) from e


@router.post(
    "/{item_id}/questions/{question_id}/grade",
    response_model=GradeAnswerResponse,
    status_code=status.HTTP_200_OK,
)
def grade_answer(
    item_id: int,
    question_id: int,
    body: GradeAnswerRequest,
    current_user: Annotated[User, Depends(get_current_user)],
    use_case: GradeAnswerUseCase = Depends(inject_use_case(container.grade_answer_use_case)),
) -> GradeAnswerResponse:
    """Award marks to a free-response answer awaiting review. Graders only."""
    try:
        graded = use_case.grade(item_id, question_id, current_user.id.value, body.marks_awarded)
        return GradeAnswerResponse(
            item_id=item_id,
            question_id=question_id,
            marks_awarded=body.marks_awarded,
            score=ScoreResponse.from_domain(graded.score),
        )
    except (ExamElementError, DomainError):
        raise
    except Exception as e:
        logger.error(
            "failed_to_grade_answer",
            item_id=item_id,
            question_id=question_id,
            error=str(e),
            exc_info=True,
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=UNEXPECTED_ERROR
        ) from e


@router.post(
    "/{item_id}/questions/{question_id}/review",
    response_model=FlashcardReviewResponse,
    status_code=status.HTTP_201_CREATED,
)
def review_flashcard(
    item_id: int,
    question_id: int,
    body: FlashcardReviewRequest,
    current_user: Annotated[User, Depends(get_current_user)],
    use_case: ReviewFlashcardUseCase = Depends(
        inject_use_case(container.review_flashcard_use_case)
    ),
) -> FlashcardReviewResponse:
    """Mark one card of a flashcard set as remembered or forgotten."""
    try:
        tally = use_case.review(item_id, question_id, current_user.id.value, body.remembered)
        return FlashcardReviewResponse.from_domain(item_id, tally)
    except (ExamElementError, DomainError):
        raise
    except Exception as e:
        logger.error(
            "failed_to_review_flashcard",
            item_id=item_id,
            question_id=question_id,
            error=str(e),
            exc_info=True,
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=UNEXPECTED_ERROR
        ) from e


@router.delete("/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_content(
    item_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    use_case: DeleteContentUseCase = Depends(inject_use_case(container.delete_content_use_case)),
) -> Response:
    """
    Delete a flashcard set.

    Quizzes and mock exams cannot be deleted. Progress already recorded for
    the set stays on the dashboard.
    """
    try:
        use_case.delete(item_id, current_user.id.value)
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    except (ExamElementError, DomainError):
        raise
    except Exception as e:
        logger.error("failed_to_delete_content", item_id=item_id, error=str(e), exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=UNEXPECTED_ERROR
        ) from e
