from pydantic import BaseModel
from pydantic_ai import Agent

from examelement.domain.common.value_objects.content_type import ContentType
from examelement.infrastructure.ai.ai_model import get_ai_model


class GeneratedQuestion(BaseModel):
    """
    Loose question shape asked of the model.

    Every field is optional on purpose: the model's output is checked by the
    application's parser, which rejects anything incomplete.
    """

    number: int | None = None
    prompt: str | None = None
    marks: int | None = None
    options: dict[str, str] | None = None
    correct_option: str | None = None
    answer: str | None = None
    explanation: str | None = None
    sample_answer: str | None = None
    rubric: list[str] | None = None


class GeneratedContent(BaseModel):
    title: str | None = None
    questions: list[GeneratedQuestion] = []


_INSTRUCTIONS: dict[ContentType, str] = {
    ContentType.FLASHCARD: """
        You write revision flashcards for students preparing for exams.
        Create exactly the requested number of flashcards for the given subject and topic.
        For each card give a short question in `prompt`, a precise `answer` and, when useful,
        a one-sentence `explanation`. Test one fact or idea per card.
        Give the set a short `title`.
        """,
    ContentType.QUIZ: """
        You write multiple-choice quizzes for students preparing for exams.
        Create exactly the requested number of questions for the given subject and topic.
        Each question has a `prompt`, four `options` keyed "A", "B", "C" and "D",
        the letter of the single correct option in `correct_option`, `marks` set to 1
        and a short `explanation` of why the answer is correct.
        Give the quiz a short `title`.
        """,
    ContentType.MOCK_EXAM: """
        You write mock exam papers in the style of the requested exam board.
        Create up to the requested number of numbered questions for the given subject and topic.
        Mix short multiple-choice questions (with `options` keyed "A" to "D" and a
        `correct_option` letter) and longer free-response questions. Free-response questions
        have a model answer in `sample_answer` and a `rubric` of 2-6 keywords or short phrases
        a good answer must contain. Give every question its `marks` (1-12) weighted by effort.
        Give the paper a `title`.
        """,
}


def get_content_agent(content_type: ContentType) -> Agent[None, GeneratedContent]:
    return Agent(
        get_ai_model(),
        output_type=GeneratedContent,
        instructions=_INSTRUCTIONS[content_type],
    )
