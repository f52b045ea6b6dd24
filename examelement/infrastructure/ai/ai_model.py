from collections.abc import Callable
from functools import lru_cache

from pydantic_ai.models import Model
from pydantic_ai.models.anthropic import AnthropicModel
from pydantic_ai.models.google import GoogleModel
from pydantic_ai.models.openai import OpenAIChatModel
from pydantic_ai.providers.anthropic import AnthropicProvider
from pydantic_ai.providers.google import GoogleProvider
from pydantic_ai.providers.ollama import OllamaProvider
from pydantic_ai.providers.openai import OpenAIProvider

from examelement.config import Settings, get_settings
from examelement.exceptions import GeneratorError


def _ollama(settings: Settings, model_name: str) -> Model:
    assert settings.OPENAI_BASE_URL is not None
    return OpenAIChatModel(
        model_name=model_name, provider=OllamaProvider(base_url=settings.OPENAI_BASE_URL)
    )


def _openai(settings: Settings, model_name: str) -> Model:
    assert settings.OPENAI_API_KEY is not None
    return OpenAIChatModel(
        model_name=model_name, provider=OpenAIProvider(api_key=settings.OPENAI_API_KEY)
    )


def _anthropic(settings: Settings, model_name: str) -> Model:
    assert settings.ANTHROPIC_API_KEY is not None
    return AnthropicModel(
        model_name=model_name, provider=AnthropicProvider(api_key=settings.ANTHROPIC_API_KEY)
    )


def _google(settings: Settings, model_name: str) -> Model:
    assert settings.GEMINI_API_KEY is not None
    return GoogleModel(
        model_name=model_name, provider=GoogleProvider(api_key=settings.GEMINI_API_KEY)
    )


# Credentials each builder asserts are guaranteed by the settings validator
MODEL_BUILDERS: dict[str, Callable[[Settings, str], Model]] = {
    "ollama": _ollama,
    "openai": _openai,
    "anthropic": _anthropic,
    "google": _google,
}


def build_model(settings: Settings) -> Model:
    """
    Build the pydantic-ai model that writes study content.

    Raises:
        GeneratorError: If no provider or model name is configured
    """
    if settings.AI_PROVIDER is None or settings.AI_MODEL_NAME is None:
        raise GeneratorError("No AI model provider is configured")
    return MODEL_BUILDERS[settings.AI_PROVIDER](settings, settings.AI_MODEL_NAME)


@lru_cache
def get_ai_model() -> Model:
    """Cached content model, built on first generation rather than at startup."""
    return build_model(get_settings())
