from enum import StrEnum


class ContentType(StrEnum):
    """Kinds of generated study content. Also the second half of a quota key."""

    FLASHCARD = "flashcard"
    QUIZ = "quiz"
    MOCK_EXAM = "mock_exam"

    @property
    def is_gradable(self) -> bool:
        return self is not ContentType.FLASHCARD
