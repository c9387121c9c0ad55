"""Mistral AI service: checks that the configured model exists before chatting."""

from typing import Iterator

from git_commit_ai.config import GenerationConfig
from git_commit_ai.errors import InvalidModelError
from git_commit_ai.logging_config import get_logger
from git_commit_ai.models import BackendRoute, ChatRequest, ChoiceRecord, ServiceIdentity
from git_commit_ai.services.base import (
    AIService,
    AIServiceParams,
    ChatCompletionsAPI,
    generate_messages,
    stream_choices,
)

logger = get_logger(__name__)

MISTRAL_HOST = "https://api.mistral.ai"
CODESTRAL_HOST = "https://codestral.mistral.ai"
CODESTRAL_MODEL = "codestral-latest"


def resolve_mistral_route(config: GenerationConfig) -> BackendRoute:
    """Pick host, key and identity for the configured Mistral model.

    ``codestral-latest`` is served by the Codestral host with the
    Codestral key; every other model goes to api.mistral.ai.
    """
    if config.mistral_model == CODESTRAL_MODEL:
        return BackendRoute(
            host=CODESTRAL_HOST,
            api_key=config.codestral_key or "",
            model=config.mistral_model,
            identity=ServiceIdentity("MistralAI-Codestral", "#199910"),
        )
    return BackendRoute(
        host=MISTRAL_HOST,
        api_key=config.mistral_key or "",
        model=config.mistral_model,
        identity=ServiceIdentity("MistralAI", "#FC4A0A"),
    )


class MistralService(AIService):
    """Generates commit messages with Mistral AI chat completions."""

    def __init__(self, params: AIServiceParams):
        self.params = params
        self.route = resolve_mistral_route(params.config)
        self.identity = self.route.identity
        self.api = ChatCompletionsAPI(
            self.route, timeout=params.config.timeout, proxy=params.config.proxy
        )

    def generate_commit_messages(self) -> Iterator[ChoiceRecord]:
        return stream_choices(self.identity, self._generate_messages)

    def _generate_messages(self):
        return generate_messages(self.params, "MistralAI", self._complete)

    def _complete(self, prompt: str) -> str:
        self.check_available_models()
        config = self.params.config
        request = ChatRequest.create(
            self.route.model, prompt, config.temperature, config.max_tokens
        )
        return self.api.create_chat_completion(request)

    def check_available_models(self) -> None:
        """Raise InvalidModelError unless the backend offers the model."""
        available_models = self.api.list_models()
        if self.route.model not in available_models:
            logger.debug(
                "Configured model not offered by Mistral AI",
                extra={"model": self.route.model},
            )
            raise InvalidModelError("Invalid model type of Mistral AI")
