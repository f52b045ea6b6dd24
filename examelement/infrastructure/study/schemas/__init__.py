from .content_schemas import (
    ContentItemResponse,
    ContentItemSummary,
    ContentListResponse,
    GenerateContentRequest,
    GenerateContentResponse,
    QuestionResponse,
)
from .submission_schemas import (
    FlashcardReviewRequest,
    FlashcardReviewResponse,
    GradeAnswerRequest,
    GradeAnswerResponse,
    QuestionResultResponse,
    ResultsResponse,
    ScoreResponse,
    SubmitAnswersRequest,
    SubmittedAnswer,
)

__all__ = [
    "ContentItemResponse",
    "ContentItemSummary",
    "ContentListResponse",
    "FlashcardReviewRequest",
    "FlashcardReviewResponse",
    "GenerateContentRequest",
    "GenerateContentResponse",
    "GradeAnswerRequest",
    "GradeAnswerResponse",
    "QuestionResponse",
    "QuestionResultResponse",
    "ResultsResponse",
    "ScoreResponse",
    "SubmitAnswersRequest",
    "SubmittedAnswer",
]
