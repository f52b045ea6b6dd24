from dataclasses import dataclass

from ..entity import EntityId


@dataclass(frozen=True)
class UserId(EntityId):
    """Strongly-typed user identifier."""


@dataclass(frozen=True)
class ContentItemId(EntityId):
    """Strongly-typed content item (flashcard set, quiz, mock exam) identifier."""


@dataclass(frozen=True)
class QuestionId(EntityId):
    """Strongly-typed question identifier."""


@dataclass(frozen=True)
class AnswerRecordId(EntityId):
    """Strongly-typed answer record identifier."""


@dataclass(frozen=True)
class LedgerEntryId(EntityId):
    """Strongly-typed progress ledger entry identifier."""


@dataclass(frozen=True)
class SubscriptionEventId(EntityId):
    """Strongly-typed processed subscription event identifier."""


@dataclass(frozen=True)
class FlashcardReviewId(EntityId):
    """Strongly-typed flashcard self-review identifier."""
