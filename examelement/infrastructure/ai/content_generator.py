"""Content generator backed by a pydantic-ai agent."""

import structlog
from pydantic_ai.exceptions import AgentRunError, UserError

from examelement.application.study.protocols.content_generator import (
    GenerationRequest,
    RawContent,
)
from examelement.exceptions import GeneratorError
from examelement.infrastructure.ai.ai_agents import get_content_agent

logger = structlog.get_logger(__name__)


class AIContentGenerator:
    async def generate(self, request: GenerationRequest) -> RawContent:
        """
        Ask the configured model for content.

        Output is passed on loosely typed; validation happens in the
        application layer.

        Raises:
            GeneratorError: If the model call fails
        """
        agent = get_content_agent(request.content_type)
        prompt = (
            f"Subject: {request.subject}\n"
            f"Topic: {request.topic}\n"
            f"Exam board: {request.exam_board or 'any'}\n"
            f"Number of questions: {request.count}"
        )
        try:
            result = await agent.run(prompt)
        except (AgentRunError, UserError) as e:
            logger.warning(
                "ai_generation_failed",
                content_type=str(request.content_type),
                error=str(e),
            )
            raise GeneratorError() from e

        return RawContent(
            title=result.output.title,
            questions=[
                question.model_dump(exclude_none=True) for question in result.output.questions
            ],
        )
