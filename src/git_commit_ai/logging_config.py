"""Structured logging configuration for git-commit-ai.

This module provides structured logging with JSON format, generation ID
tracking, and prompt/response logging for AI service calls.
"""

import json
import logging
import sys
import uuid
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Any, Dict, Optional
from pathlib import Path


# Context variable for generation ID tracking
generation_id_var: ContextVar[Optional[str]] = ContextVar("generation_id", default=None)


class StructuredFormatter(logging.Formatter):
    """JSON formatter for structured logging.

    Formats log records as JSON with consistent fields including:
    - timestamp: ISO 8601 formatted timestamp
    - level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    - logger: Logger name
    - message: Log message
    - generation_id: Generation ID from context (if available)
    - Additional fields from extra parameter
    """

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON.

        Args:
            record: Log record to format

        Returns:
            JSON-formatted log string
        """
        log_entry: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        generation_id = generation_id_var.get()
        if generation_id:
            log_entry["generation_id"] = generation_id

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        # Skip standard LogRecord attributes
        skip_attrs = {
            "name", "msg", "args", "created", "filename", "funcName",
            "levelname", "levelno", "lineno", "module", "msecs",
            "message", "pathname", "process", "processName", "relativeCreated",
            "thread", "threadName", "exc_info", "exc_text", "stack_info",
            "taskName",
        }

        for key, value in record.__dict__.items():
            if key not in skip_attrs and not key.startswith("_"):
                log_entry[key] = value

        return json.dumps(log_entry, default=str)


class GenerationIDFilter(logging.Filter):
    """Filter that adds the current generation ID to log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        generation_id = generation_id_var.get()
        if generation_id:
            record.generation_id = generation_id
        return True


def setup_logging(
    log_level: str = "INFO",
    use_json: bool = True,
    log_file: Optional[str] = None,
    stream: str = "stdout"
) -> None:
    """Configure logging for the application.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        use_json: If True, use JSON formatter; otherwise use standard format
        log_file: Optional file path for logging output
        stream: Console stream, "stdout" or "stderr"
    """
    level = getattr(logging, log_level.upper())
    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(
        sys.stderr if stream == "stderr" else sys.stdout
    )
    console_handler.setLevel(level)

    if use_json:
        formatter = StructuredFormatter()
    else:
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )

    console_handler.setFormatter(formatter)
    console_handler.addFilter(GenerationIDFilter())
    root_logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        file_handler.addFilter(GenerationIDFilter())
        root_logger.addHandler(file_handler)


def set_generation_id(generation_id: Optional[str] = None) -> str:
    """Set generation ID in context.

    Args:
        generation_id: Generation ID to set, or None to generate a new one

    Returns:
        The generation ID that was set
    """
    if generation_id is None:
        generation_id = str(uuid.uuid4())
    generation_id_var.set(generation_id)
    return generation_id


def get_generation_id() -> Optional[str]:
    """Get current generation ID from context."""
    return generation_id_var.get()


def clear_generation_id() -> None:
    generation_id_var.set(None)


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for a specific component.

    Args:
        name: Logger name (typically module name)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)


# Prompt/response logger
ai_logger = get_logger("git_commit_ai.responses")


def log_ai_response(
    service: str,
    diff: str,
    prompt: str,
    response: str,
) -> None:
    """Log an AI service exchange with structured data.

    Args:
        service: Name of the AI service (MistralAI, Codestral, ...)
        diff: Staged diff sent to the model
        prompt: Full prompt sent to the model
        response: Raw model response text
    """
    log_data = {
        "service": service,
        "diff": diff,
        "prompt": prompt,
        "response": response,
    }
    ai_logger.info(f"AI response received: {service}", extra=log_data)
