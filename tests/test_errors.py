"""Unit tests for error helpers."""

import socket
import time

import pytest

from git_commit_ai.errors import (
    BackendHTTPError,
    HostNotFoundError,
    KnownError,
    extract_error_payload,
    find_cause,
    is_name_resolution_failure,
    simplify_error_message,
)


class TestExtractErrorPayload:
    """Tests for extract_error_payload."""

    def test_finds_embedded_object(self):
        text = 'Request failed with status code 400\n{"error": {"message": "max_tokens is too large"}}'

        payload = extract_error_payload(text)

        assert payload == {"error": {"message": "max_tokens is too large"}}

    def test_merges_multiple_objects(self):
        text = 'first {"a": 1} then {"b": [1, 2]}'

        assert extract_error_payload(text) == {"a": 1, "b": [1, 2]}

    def test_fallback_when_no_structure(self):
        assert extract_error_payload("plain text") == {
            "error": {"message": "Unknown error"}
        }

    def test_fallback_when_structure_does_not_parse(self):
        """Test that malformed fragments never raise."""
        assert extract_error_payload('{"error": tru}') == {
            "error": {"message": "Unknown error"}
        }

    def test_unclosed_object_with_many_strings_returns_quickly(self):
        """Test that a truncated body full of quoted pieces is handled without backtracking."""
        body = "{" + '"a"' * 22

        started = time.monotonic()
        payload = extract_error_payload(body)

        assert time.monotonic() - started < 1.0
        assert payload == {"error": {"message": "Unknown error"}}

    def test_skips_broken_fragment_and_keeps_later_object(self):
        text = 'partial {"a": tru and then {"error": {"message": "quota"}}'

        assert extract_error_payload(text) == {"error": {"message": "quota"}}

    def test_ignores_top_level_arrays(self):
        assert extract_error_payload("[1, 2] {\"b\": 1}") == {"b": 1}


class TestSimplifyErrorMessage:
    """Tests for simplify_error_message."""

    @pytest.mark.parametrize("raw", [
        "line one\nline two",
        "line one\r\nline two",
        "line one\rline two",
    ])
    def test_strips_newline_variants(self, raw):
        assert simplify_error_message(RuntimeError(raw)) == "line oneline two"

    def test_default_for_empty_message(self):
        assert simplify_error_message(RuntimeError("")) == "An error occurred"

    def test_known_error_is_kept(self):
        error = KnownError("Error connecting to api.mistral.ai (getaddrinfo)")

        assert simplify_error_message(error) == "Error connecting to api.mistral.ai (getaddrinfo)"

    def test_http_error_uses_nested_error_message(self):
        error = BackendHTTPError(400, '{"error": {"message": "bad\\nrequest", "code": 400}}')

        assert simplify_error_message(error) == "Request failed with status code 400: badrequest"

    def test_http_error_uses_top_level_message(self):
        error = BackendHTTPError(401, '{"message": "Unauthorized", "request_id": "r1"}')

        assert simplify_error_message(error) == "Request failed with status code 401: Unauthorized"

    def test_http_error_with_string_error(self):
        error = BackendHTTPError(429, '{"error": "Rate limit exceeded"}')

        assert simplify_error_message(error) == "Request failed with status code 429: Rate limit exceeded"

    def test_http_error_without_body(self):
        assert simplify_error_message(BackendHTTPError(500)) == (
            "Request failed with status code 500: Unknown error"
        )

    def test_http_error_with_truncated_body_returns_quickly(self):
        error = BackendHTTPError(500, "{" + '"a"' * 22)

        started = time.monotonic()
        message = simplify_error_message(error)

        assert time.monotonic() - started < 1.0
        assert message == "Request failed with status code 500: Unknown error"


class TestFindCause:
    """Tests for locating wrapped exceptions."""

    def test_follows_cause_chain(self):
        root = socket.gaierror(-2, "Name or service not known")
        middle = OSError("connect failed")
        middle.__cause__ = root
        outer = RuntimeError("request failed")
        outer.__context__ = middle

        assert find_cause(outer, socket.gaierror) is root
        assert is_name_resolution_failure(outer)

    def test_follows_reason_and_args(self):
        root = socket.gaierror(-3, "Temporary failure in name resolution")

        class PoolError(Exception):
            def __init__(self, reason):
                super().__init__("max retries")
                self.reason = reason

        outer = RuntimeError(PoolError(root))

        assert find_cause(outer, socket.gaierror) is root

    def test_returns_none_when_absent(self):
        assert find_cause(RuntimeError("x"), socket.gaierror) is None
        assert not is_name_resolution_failure(RuntimeError("x"))

    def test_handles_cycles(self):
        first = RuntimeError("a")
        second = RuntimeError("b")
        first.__context__ = second
        second.__context__ = first

        assert find_cause(first, socket.gaierror) is None


class TestHostNotFoundError:

    def test_attributes(self):
        error = HostNotFoundError("api.mistral.ai")

        assert error.code == "ENOTFOUND"
        assert error.hostname == "api.mistral.ai"
        assert error.syscall == "getaddrinfo"
