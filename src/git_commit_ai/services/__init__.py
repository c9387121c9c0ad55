"""AI services that generate commit messages, selected by name."""

from typing import Dict, List, Type

from git_commit_ai.services.base import AIService, AIServiceParams, stream_choices
from git_commit_ai.services.codestral import CodestralService
from git_commit_ai.services.mistral import MistralService
from git_commit_ai.services.openai_service import OpenAIService

SERVICES: Dict[str, Type[AIService]] = {
    "MISTRAL": MistralService,
    "CODESTRAL": CodestralService,
    "OPENAI": OpenAIService,
}


def create_ai_service(name: str, params: AIServiceParams) -> AIService:
    """Instantiate the service registered under ``name``.

    Raises:
        ValueError: If no service has that name
    """
    try:
        service_class = SERVICES[name.upper()]
    except KeyError:
        raise ValueError(
            f"Unknown AI service: {name}. Must be one of {tuple(SERVICES)}"
        ) from None
    return service_class(params)


def create_ai_services(params: AIServiceParams) -> List[AIService]:
    """Instantiate every service enabled in the configuration, in order."""
    return [create_ai_service(name, params) for name in params.config.ai_services]


__all__ = [
    "AIService",
    "AIServiceParams",
    "CodestralService",
    "MistralService",
    "OpenAIService",
    "SERVICES",
    "create_ai_service",
    "create_ai_services",
    "stream_choices",
]
