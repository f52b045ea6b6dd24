"""Protocol for the external content generator."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Protocol

from examelement.domain.common.value_objects.content_type import ContentType


@dataclass(frozen=True)
class GenerationRequest:
    content_type: ContentType
    subject: str
    topic: str
    count: int
    exam_board: str | None = None


@dataclass
class RawContent:
    """
    Unvalidated generator output.

    Each question is a loose mapping; nothing here is trusted until
    GeneratedContentParser has checked it.
    """

    title: str | None = None
    questions: list[Mapping[str, Any]] = field(default_factory=list)


class ContentGeneratorProtocol(Protocol):
    async def generate(self, request: GenerationRequest) -> RawContent:
        """
        Produce content for the request.

        Raises:
            GeneratorError: If the generator fails or is unavailable
        """
        ...
