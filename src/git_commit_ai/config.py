"""Configuration management for git-commit-ai."""

import os
from dataclasses import dataclass, field
from typing import Optional, Tuple

from dotenv import load_dotenv


COMMIT_TYPES = ("", "conventional", "gitmoji")
SERVICE_NAMES = ("MISTRAL", "CODESTRAL", "OPENAI")


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ("true", "1", "yes")


def _env_optional(name: str) -> Optional[str]:
    return os.getenv(name) or None


@dataclass(frozen=True)
class GenerationConfig:
    """Settings shared by every AI service for one generation session.

    Attributes:
        locale: Language the commit messages are written in
        generate: Number of candidate messages to request
        commit_type: Message convention ("", "conventional" or "gitmoji")
        prompt: Optional user instructions appended to the built prompt
        max_length: Maximum commit subject length
        max_tokens: Token ceiling for the completion
        temperature: Sampling temperature
        timeout: Network timeout in seconds
        logging: Whether prompts and responses are logged
        mistral_key: API key for api.mistral.ai
        mistral_model: Model requested from Mistral AI
        codestral_key: API key for codestral.mistral.ai
        codestral_model: Model requested from Codestral
        openai_key: API key for OpenAI
        openai_model: Model requested from OpenAI
        openai_url: Optional base URL for OpenAI-compatible servers
        proxy: Optional outbound proxy URL
        ai_services: Names of the enabled backends, in display order
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """
    # Generation settings
    locale: str = "en"
    generate: int = 1
    commit_type: str = "conventional"
    prompt: Optional[str] = None
    max_length: int = 50
    max_tokens: int = 200
    temperature: float = 0.7
    timeout: float = 10.0
    logging: bool = False

    # Backend credentials and models
    mistral_key: Optional[str] = None
    mistral_model: str = "mistral-tiny"
    codestral_key: Optional[str] = None
    codestral_model: str = "codestral-latest"
    openai_key: Optional[str] = None
    openai_model: str = "gpt-4o-mini"
    openai_url: Optional[str] = None  # for OpenAI-compatible endpoints
    proxy: Optional[str] = None

    ai_services: Tuple[str, ...] = field(default=("MISTRAL",))

    # Logging settings
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, env_file: Optional[str] = None) -> "GenerationConfig":
        """Load configuration from environment variables.

        Args:
            env_file: Optional path to .env file to load

        Returns:
            GenerationConfig instance populated from environment variables
        """
        if env_file:
            load_dotenv(env_file)

        services = os.getenv("AI_SERVICES", "MISTRAL")
        config = cls(
            locale=os.getenv("LOCALE", "en"),
            generate=int(os.getenv("GENERATE", "1")),
            commit_type=os.getenv("COMMIT_TYPE", "conventional").lower(),
            prompt=_env_optional("PROMPT"),
            max_length=int(os.getenv("MAX_LENGTH", "50")),
            max_tokens=int(os.getenv("MAX_TOKENS", "200")),
            temperature=float(os.getenv("TEMPERATURE", "0.7")),
            timeout=float(os.getenv("TIMEOUT", "10")),
            logging=_env_bool("LOGGING", "false"),
            mistral_key=_env_optional("MISTRAL_KEY"),
            mistral_model=os.getenv("MISTRAL_MODEL", "mistral-tiny"),
            codestral_key=_env_optional("CODESTRAL_KEY"),
            codestral_model=os.getenv("CODESTRAL_MODEL", "codestral-latest"),
            openai_key=_env_optional("OPENAI_KEY"),
            openai_model=os.getenv("OPENAI_MODEL", "gpt-4o-mini"),
            openai_url=_env_optional("OPENAI_URL"),
            proxy=_env_optional("PROXY"),
            ai_services=tuple(
                s.strip().upper() for s in services.split(",") if s.strip()
            ),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )

        config.validate()

        return config

    def validate(self) -> None:
        """Validate configuration values.

        Raises:
            ValueError: If any configuration value is invalid
        """
        if self.generate < 1:
            raise ValueError(
                f"Invalid generate: {self.generate}. Must be at least 1"
            )

        if self.max_length < 1:
            raise ValueError(
                f"Invalid max_length: {self.max_length}. Must be at least 1"
            )

        if self.max_tokens < 1:
            raise ValueError(
                f"Invalid max_tokens: {self.max_tokens}. Must be at least 1"
            )

        if not 0 <= self.temperature <= 2:
            raise ValueError(
                f"Invalid temperature: {self.temperature}. "
                "Must be between 0 and 2"
            )

        if self.timeout <= 0:
            raise ValueError(
                f"Invalid timeout: {self.timeout}. Must be greater than 0"
            )

        if self.commit_type not in COMMIT_TYPES:
            raise ValueError(
                f"Invalid commit_type: {self.commit_type}. "
                f"Must be one of {COMMIT_TYPES}"
            )

        valid_log_levels = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
        if self.log_level not in valid_log_levels:
            raise ValueError(
                f"Invalid log_level: {self.log_level}. "
                f"Must be one of {valid_log_levels}"
            )

        for name in self.ai_services:
            if name not in SERVICE_NAMES:
                raise ValueError(
                    f"Invalid AI service: {name}. "
                    f"Must be one of {SERVICE_NAMES}"
                )
