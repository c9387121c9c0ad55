"""OpenAI service using the official OpenAI SDK.

Also works with OpenAI-compatible servers through ``openai_url``.
"""

import json
from typing import Iterator
from urllib.parse import urlparse

from openai import (
    APIConnectionError,
    APIStatusError,
    APITimeoutError,
    DefaultHttpxClient,
    OpenAI,
)

from git_commit_ai.errors import (
    BackendHTTPError,
    BackendTimeoutError,
    HostNotFoundError,
    NoContentError,
    is_name_resolution_failure,
)
from git_commit_ai.models import ChatRequest, ChoiceRecord, ServiceIdentity
from git_commit_ai.services.base import (
    AIService,
    AIServiceParams,
    generate_messages,
    stream_choices,
)


class OpenAIService(AIService):
    """Generates commit messages with OpenAI chat completions."""

    def __init__(self, params: AIServiceParams):
        self.params = params
        config = params.config
        self.identity = ServiceIdentity("ChatGPT", "#74AA9C", "#FFF")

        kwargs = {}
        if config.openai_url:
            kwargs["base_url"] = config.openai_url
        if config.proxy:
            kwargs["http_client"] = DefaultHttpxClient(proxy=config.proxy)
        self._client = OpenAI(
            api_key=config.openai_key or "",
            timeout=config.timeout,
            max_retries=0,
            **kwargs,
        )

    def generate_commit_messages(self) -> Iterator[ChoiceRecord]:
        return stream_choices(self.identity, self._generate_messages)

    def _generate_messages(self):
        return generate_messages(self.params, "OpenAI", self._complete)

    def _complete(self, prompt: str) -> str:
        config = self.params.config
        request = ChatRequest.create(
            config.openai_model, prompt, config.temperature, config.max_tokens
        )
        try:
            resp = self._client.chat.completions.create(
                model=request.model,
                messages=request.messages(),
                temperature=request.temperature,
                top_p=1,
                max_tokens=request.max_tokens,
                stream=False,
                seed=request.random_seed,
            )
        except APITimeoutError as e:
            raise BackendTimeoutError(f"timeout of {config.timeout}s exceeded") from e
        except APIConnectionError as e:
            if is_name_resolution_failure(e):
                raise HostNotFoundError(urlparse(str(self._client.base_url)).hostname) from e
            raise
        except APIStatusError as e:
            body = json.dumps(e.body) if e.body is not None else e.message
            raise BackendHTTPError(e.status_code, body) from e

        if not resp.choices or not resp.choices[0].message.content:
            raise NoContentError()
        return resp.choices[0].message.content
