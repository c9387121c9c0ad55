"""HTTP request builder used by the Mistral-family AI services."""

from typing import Any, Dict, Optional
from urllib.parse import urlparse

import requests

from git_commit_ai.errors import (
    BackendHTTPError,
    BackendTimeoutError,
    HostNotFoundError,
    is_name_resolution_failure,
)
from git_commit_ai.logging_config import get_logger

logger = get_logger(__name__)


class HttpRequestBuilder:
    """Fluent builder around a single JSON HTTP exchange.

    Example:
        payload = (
            HttpRequestBuilder("GET", "https://api.mistral.ai/v1/models", timeout=10)
            .set_headers({"Authorization": "Bearer ..."})
            .execute()
        )
    """

    def __init__(
        self,
        method: str,
        base_url: str,
        timeout: float,
        proxy: Optional[str] = None,
    ):
        self.method = method
        self.base_url = base_url
        self.timeout = timeout
        self.proxy = proxy
        self.headers: Dict[str, str] = {}
        self.body: Optional[Dict[str, Any]] = None

    def set_headers(self, headers: Dict[str, str]) -> "HttpRequestBuilder":
        self.headers.update(headers)
        return self

    def set_body(self, body: Dict[str, Any]) -> "HttpRequestBuilder":
        self.body = body
        return self

    def execute(self) -> Any:
        """Send the request and decode the JSON response body.

        Returns:
            Decoded JSON body

        Raises:
            HostNotFoundError: If the host name cannot be resolved
            BackendTimeoutError: If no answer arrives within the timeout
            BackendHTTPError: If the response status is 400 or above
        """
        proxies = None
        if self.proxy:
            proxies = {"http": self.proxy, "https": self.proxy}

        logger.debug(f"Sending request: {self.method} {self.base_url}")

        try:
            response = requests.request(
                self.method,
                self.base_url,
                headers=self.headers,
                json=self.body,
                timeout=self.timeout,
                proxies=proxies,
            )
        except requests.exceptions.Timeout as e:
            raise BackendTimeoutError(f"timeout of {self.timeout}s exceeded") from e
        except requests.exceptions.ConnectionError as e:
            if is_name_resolution_failure(e):
                raise HostNotFoundError(urlparse(self.base_url).hostname) from e
            raise

        if response.status_code >= 400:
            logger.debug(
                f"Request failed: {self.method} {self.base_url}",
                extra={"status_code": response.status_code},
            )
            raise BackendHTTPError(response.status_code, response.text)

        return response.json()
