"""Pydantic schemas for answer submission, results, reviewer grading and flashcard reviews."""

from pydantic import BaseModel, ConfigDict, Field, model_validator

from examelement.application.study.services.content_store import GradedItem
from examelement.domain.study.entities.flashcard_review import ReviewTally
from examelement.domain.study.services.scoring_engine import ItemScore


class SubmittedAnswer(BaseModel):
    """
    One answer: an option letter for multiple choice, free text otherwise.

    Marks can never be sent by the client; unknown fields are rejected.
    """

    model_config = ConfigDict(extra="forbid")

    question_id: int
    answer: str = Field("", max_length=10000)


class SubmitAnswersRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    answers: list[SubmittedAnswer] = Field(default_factory=list)

    @model_validator(mode="after")
    def validate_unique_questions(self) -> "SubmitAnswersRequest":
        """Each question may be answered once per submission."""
        ids = [answer.question_id for answer in self.answers]
        if len(ids) != len(set(ids)):
            msg = "Each question can only be answered once"
            raise ValueError(msg)
        return self

    def as_mapping(self) -> dict[int, str]:
        return {answer.question_id: answer.answer for answer in self.answers}


class ScoreResponse(BaseModel):
    total_marks: int
    earned_marks: int
    percentage: int
    pending_review: int
    is_complete: bool

    @classmethod
    def from_domain(cls, score: ItemScore) -> "ScoreResponse":
        return cls(
            total_marks=score.total_marks,
            earned_marks=score.earned_marks,
            percentage=score.percentage,
            pending_review=score.pending_count,
            is_complete=score.is_complete,
        )


class QuestionResultResponse(BaseModel):
    question_id: int
    number: int
    prompt: str
    submitted_value: str | None
    status: str | None
    is_correct: bool | None
    marks_awarded: int | None
    max_marks: int
    correct_option: str | None = None
    sample_answer: str | None = None
    explanation: str | None = None


class ResultsResponse(BaseModel):
    item_id: int
    title: str
    score: ScoreResponse
    questions: list[QuestionResultResponse]

    @classmethod
    def from_domain(cls, graded: GradedItem) -> "ResultsResponse":
        questions = []
        for question in graded.item.questions:
            record = graded.records.get(question.id)
            questions.append(
                QuestionResultResponse(
                    question_id=question.id.value,
                    number=question.number,
                    prompt=question.prompt,
                    submitted_value=record.submitted_value if record else None,
                    status=str(record.status) if record else None,
                    is_correct=record.is_correct if record else None,
                    marks_awarded=record.marks_awarded if record else None,
                    max_marks=question.marks,
                    correct_option=question.correct_option,
                    sample_answer=question.sample_answer,
                    explanation=question.explanation,
                )
            )
        return cls(
            item_id=graded.item.id.value,
            title=graded.item.title,
            score=ScoreResponse.from_domain(graded.score),
            questions=questions,
        )


class GradeAnswerRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    marks_awarded: int = Field(..., ge=0)


class GradeAnswerResponse(BaseModel):
    item_id: int
    question_id: int
    marks_awarded: int
    score: ScoreResponse


class FlashcardReviewRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    remembered: bool


class FlashcardReviewResponse(BaseModel):
    item_id: int
    question_id: int
    reviews: int
    remembered: int
    forgotten: int

    @classmethod
    def from_domain(cls, item_id: int, tally: ReviewTally) -> "FlashcardReviewResponse":
        return cls(
            item_id=item_id,
            question_id=tally.question_id.value,
            reviews=tally.reviews,
            remembered=tally.remembered,
            forgotten=tally.forgotten,
        )
