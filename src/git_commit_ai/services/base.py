"""Shared contract and building blocks for AI services.

Every service turns a staged diff into a stream of ``ChoiceRecord``
objects. The stream is a generator: nothing is sent to the backend until
the caller starts iterating, and a failure at any stage is reported as a
single error record instead of an exception.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Iterator, List, Optional

from git_commit_ai.config import GenerationConfig
from git_commit_ai.errors import (
    HostNotFoundError,
    KnownError,
    NoContentError,
    simplify_error_message,
)
from git_commit_ai.http_client import HttpRequestBuilder
from git_commit_ai.logging_config import (
    clear_generation_id,
    get_logger,
    log_ai_response,
    set_generation_id,
)
from git_commit_ai.models import BackendRoute, ChatRequest, ChoiceRecord, ServiceIdentity, StagedDiff
from git_commit_ai.prompt import build_prompt
from git_commit_ai.sanitizer import sanitize_messages

logger = get_logger(__name__)

# Model listing is only served by api.mistral.ai; it includes codestral models.
MISTRAL_MODELS_URL = "https://api.mistral.ai/v1/models"


@dataclass(frozen=True)
class AIServiceParams:
    """Inputs shared by every service for one generation session."""
    config: GenerationConfig
    staged_diff: StagedDiff


class AIService(ABC):
    """Base class for commit message generators backed by an LLM."""

    identity: ServiceIdentity

    @abstractmethod
    def generate_commit_messages(self) -> Iterator[ChoiceRecord]:
        """Stream candidate commit messages as choice records.

        Never raises: failures are emitted as one error record.
        """


def stream_choices(
    identity: ServiceIdentity,
    produce: Callable[[], List[str]],
) -> Iterator[ChoiceRecord]:
    """Run ``produce`` and yield its messages as choice records.

    ``produce`` runs to completion before anything is yielded, so the
    stream either carries every message or exactly one error record.

    Args:
        identity: Presentation identity of the service
        produce: Callable returning the sanitized messages

    Yields:
        One success record per message, or a single error record
    """
    set_generation_id()
    try:
        try:
            messages = produce()
        except Exception as e:
            logger.warning(
                f"Commit message generation failed: {identity.name}",
                extra={"service": identity.name, "error": str(e)},
            )
            simple_message = simplify_error_message(e)
            yield ChoiceRecord(
                name=identity.label(simple_message),
                value=simple_message,
                is_error=True,
                disabled=True,
            )
            return

        logger.info(
            f"Generated {len(messages)} commit messages: {identity.name}",
            extra={"service": identity.name, "count": len(messages)},
        )
        for message in messages:
            yield ChoiceRecord(name=identity.label(message), value=message)
    finally:
        clear_generation_id()


def generate_messages(
    params: AIServiceParams,
    service_name: str,
    complete: Callable[[str], str],
) -> List[str]:
    """Build the prompt, ask the backend and sanitize its answer.

    Args:
        params: Session inputs
        service_name: Name used when logging the exchange
        complete: Callable sending a prompt to the backend and returning
            the raw message content

    Returns:
        Distinct candidate messages, at most ``config.generate``

    Raises:
        KnownError: If the backend host cannot be resolved
    """
    config = params.config
    diff = params.staged_diff.diff
    prompt = build_prompt(
        config.locale,
        diff,
        config.generate,
        config.max_length,
        config.commit_type,
        config.prompt,
    )
    try:
        response = complete(prompt)
    except HostNotFoundError as e:
        raise KnownError(f"Error connecting to {e.hostname} ({e.syscall})") from e

    if config.logging:
        log_ai_response(service_name, diff, prompt, response)
    return sanitize_messages(response, config.commit_type, config.generate)


def extract_content(payload: Any) -> str:
    """Return the first choice's message content of a chat response.

    Raises:
        NoContentError: If there is no choice or the content is empty
    """
    choices = payload.get("choices") if isinstance(payload, dict) else None
    if not choices:
        raise NoContentError()
    choice = choices[0] if isinstance(choices, list) else None
    message = choice.get("message") if isinstance(choice, dict) else None
    content = message.get("content") if isinstance(message, dict) else None
    if not isinstance(content, str) or not content:
        raise NoContentError()
    return content


class ChatCompletionsAPI:
    """Client for Mistral-style chat-completion and model-listing endpoints."""

    def __init__(self, route: BackendRoute, timeout: float, proxy: Optional[str] = None):
        self.route = route
        self.timeout = timeout
        self.proxy = proxy

    def _request(self, method: str, url: str) -> HttpRequestBuilder:
        return HttpRequestBuilder(
            method, url, timeout=self.timeout, proxy=self.proxy
        ).set_headers({
            "Authorization": f"Bearer {self.route.api_key}",
            "content-type": "application/json",
        })

    def list_models(self) -> List[str]:
        """Return the identifiers of the models offered by the backend."""
        payload = self._request("GET", MISTRAL_MODELS_URL).execute()
        return [
            model["id"]
            for model in payload.get("data", [])
            if model.get("object") == "model"
        ]

    def create_chat_completion(self, request: ChatRequest) -> str:
        payload = (
            self._request("POST", f"{self.route.host}/v1/chat/completions")
            .set_body(request.to_body())
            .execute()
        )
        return extract_content(payload)
