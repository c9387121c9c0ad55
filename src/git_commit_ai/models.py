"""Data models for git-commit-ai."""

import random
from dataclasses import dataclass, field
from typing import Any, Dict, List

RANDOM_SEED_RANGE = (10, 1000)


@dataclass(frozen=True)
class StagedDiff:
    """Staged changes to summarize.

    Attributes:
        files: Paths of the staged files
        diff: Literal output of ``git diff --cached``
    """
    files: List[str] = field(default_factory=list)
    diff: str = ""


@dataclass(frozen=True)
class ChatRequest:
    """One chat-completion request sent to a backend.

    Attributes:
        model: Model identifier
        prompt: Built prompt, sent as the single user message
        temperature: Sampling temperature
        max_tokens: Token ceiling for the completion
        random_seed: Seed drawn per request to vary repeated calls
    """
    model: str
    prompt: str
    temperature: float
    max_tokens: int
    random_seed: int

    @classmethod
    def create(
        cls, model: str, prompt: str, temperature: float, max_tokens: int
    ) -> "ChatRequest":
        return cls(
            model=model,
            prompt=prompt,
            temperature=temperature,
            max_tokens=max_tokens,
            random_seed=random.randint(*RANDOM_SEED_RANGE),
        )

    def messages(self) -> List[Dict[str, str]]:
        return [{"role": "user", "content": self.prompt}]

    def to_body(self) -> Dict[str, Any]:
        """Render the request as a chat-completions JSON body."""
        return {
            "model": self.model,
            "messages": self.messages(),
            "temperature": self.temperature,
            "top_p": 1,
            "max_tokens": self.max_tokens,
            "stream": False,
            "safe_prompt": False,
            "random_seed": self.random_seed,
        }


@dataclass(frozen=True)
class ChoiceRecord:
    """A single entry of the choice stream shown to the user.

    Attributes:
        name: Display label
        value: Commit message, or the simplified error message
        is_error: Whether this record reports a failure
        disabled: Whether the entry can be selected
    """
    name: str
    value: str
    is_error: bool = False
    disabled: bool = False


@dataclass(frozen=True)
class ServiceIdentity:
    """Presentation identity of an AI service. Cosmetic only.

    Attributes:
        name: Short tag, e.g. "MistralAI"
        primary_color: Background colour of the tag
        secondary_color: Foreground colour of the tag
    """
    name: str
    primary_color: str
    secondary_color: str = "#fff"

    @property
    def tag(self) -> str:
        return f"[{self.name}]"

    def label(self, message: str) -> str:
        return f"{self.tag} {message}"


@dataclass(frozen=True)
class BackendRoute:
    """Endpoint and credentials chosen once when a service is built.

    Attributes:
        host: Base URL of the chat endpoint, without path
        api_key: Bearer token
        model: Model identifier
        identity: Presentation identity for this route
    """
    host: str
    api_key: str
    model: str
    identity: ServiceIdentity
