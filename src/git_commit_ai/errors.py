"""Error taxonomy for AI services and helpers to present errors to users."""

import json
import re
import socket
from typing import Any, Dict, Optional, Type, TypeVar

E = TypeVar("E", bound=BaseException)

DEFAULT_ERROR_MESSAGE = "An error occurred"
UNKNOWN_ERROR_MESSAGE = "Unknown error"

_NEWLINES = re.compile(r"(\r\n|\n|\r)")
# Start of a JSON object or array embedded in a larger error string
_JSON_START = re.compile(r"[{\[]")


class AIServiceError(Exception):
    """Base class for failures raised while generating commit messages."""


class KnownError(AIServiceError):
    """An expected failure whose message is meant for the user as-is."""


class HostNotFoundError(AIServiceError):
    """DNS resolution failed for the backend host.

    Attributes:
        hostname: Host that could not be resolved
        syscall: Failing resolver call
        code: Error code, always ``ENOTFOUND``
    """

    code = "ENOTFOUND"

    def __init__(self, hostname: Optional[str], syscall: str = "getaddrinfo"):
        self.hostname = hostname
        self.syscall = syscall
        super().__init__(f"{syscall} {self.code} {hostname}")


class InvalidModelError(AIServiceError):
    """The configured model is not offered by the backend."""


class NoContentError(AIServiceError):
    """The backend answered without any usable message content."""

    def __init__(self, message: str = "No Content on response. Please open a Bug report"):
        super().__init__(message)


class BackendHTTPError(AIServiceError):
    """The backend answered with an HTTP error status.

    Attributes:
        status_code: HTTP status code
        body: Raw response body
    """

    def __init__(self, status_code: int, body: str = ""):
        self.status_code = status_code
        self.body = body
        message = f"Request failed with status code {status_code}"
        if body:
            message = f"{message}\n{body}"
        super().__init__(message)


class BackendTimeoutError(AIServiceError):
    """The backend did not answer within the configured timeout."""


def find_cause(error: BaseException, exc_type: Type[E]) -> Optional[E]:
    """Find an exception of ``exc_type`` wrapped anywhere inside ``error``.

    Follows ``__cause__``, ``__context__``, a ``reason`` attribute (urllib3)
    and exception arguments (requests).

    Args:
        error: Outermost exception
        exc_type: Exception type to look for

    Returns:
        The first matching exception, or None
    """
    seen = set()
    pending = [error]
    while pending:
        current = pending.pop(0)
        if id(current) in seen:
            continue
        seen.add(id(current))
        if isinstance(current, exc_type):
            return current
        candidates = [
            current.__cause__,
            current.__context__,
            getattr(current, "reason", None),
            *current.args,
        ]
        pending.extend(c for c in candidates if isinstance(c, BaseException))
    return None


def is_name_resolution_failure(error: BaseException) -> bool:
    return find_cause(error, socket.gaierror) is not None


def extract_error_payload(text: str) -> Dict[str, Any]:
    """Locate and parse JSON fragments embedded in an error message.

    Args:
        text: Raw error text, e.g. a status line followed by a response body

    Returns:
        The parsed objects merged into one dict, or a fallback payload
        carrying ``Unknown error`` when nothing parses
    """
    fallback = {"error": {"message": UNKNOWN_ERROR_MESSAGE}}
    payload: Dict[str, Any] = {}
    decoder = json.JSONDecoder()
    position = 0
    while True:
        match = _JSON_START.search(text, position)
        if match is None:
            break
        try:
            parsed, position = decoder.raw_decode(text, match.start())
        except ValueError:
            position = match.start() + 1
            continue
        if isinstance(parsed, dict):
            payload.update(parsed)
    return payload or fallback


def _payload_message(payload: Dict[str, Any]) -> str:
    error = payload.get("error")
    if isinstance(error, dict) and error.get("message"):
        return str(error["message"])
    if isinstance(error, str) and error:
        return error
    if payload.get("message"):
        return str(payload["message"])
    if payload.get("detail"):
        return str(payload["detail"])
    return UNKNOWN_ERROR_MESSAGE


def simplify_error_message(error: BaseException) -> str:
    """Build the one-line message shown in an error choice.

    Backend HTTP errors are refined with the message found in their
    response payload. All newline variants are removed.
    """
    message = str(error)
    if not message:
        return DEFAULT_ERROR_MESSAGE
    if isinstance(error, BackendHTTPError):
        headline = message.splitlines()[0]
        detail = _payload_message(extract_error_payload(error.body))
        message = f"{headline}: {detail}"
    return _NEWLINES.sub("", message)
