"""Codestral service: a single chat-completion call on codestral.mistral.ai."""

from typing import Iterator

from git_commit_ai.models import BackendRoute, ChatRequest, ChoiceRecord, ServiceIdentity
from git_commit_ai.services.base import (
    AIService,
    AIServiceParams,
    ChatCompletionsAPI,
    generate_messages,
    stream_choices,
)
from git_commit_ai.services.mistral import CODESTRAL_HOST


class CodestralService(AIService):
    """Generates commit messages with Codestral chat completions."""

    def __init__(self, params: AIServiceParams):
        self.params = params
        config = params.config
        self.identity = ServiceIdentity("Codestral", "#199910")
        self.route = BackendRoute(
            host=CODESTRAL_HOST,
            api_key=config.codestral_key or "",
            model=config.codestral_model,
            identity=self.identity,
        )
        self.api = ChatCompletionsAPI(self.route, timeout=config.timeout, proxy=config.proxy)

    def generate_commit_messages(self) -> Iterator[ChoiceRecord]:
        return stream_choices(self.identity, self._generate_messages)

    def _generate_messages(self):
        return generate_messages(self.params, "Codestral", self._complete)

    def _complete(self, prompt: str) -> str:
        config = self.params.config
        request = ChatRequest.create(
            self.route.model, prompt, config.temperature, config.max_tokens
        )
        return self.api.create_chat_completion(request)
