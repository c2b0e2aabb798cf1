"""
HTTP Transport for GitAnalyzer.

Handles HTTP communication with the GitHub REST API and maps failures
onto typed exceptions. Requests are never retried.
"""

import time
from typing import Any

import httpx

from gitanalyzer.exceptions import (
    ConnectionFailedError,
    ResponseFormatError,
    error_for_status,
)
from gitanalyzer.logging import log_http_request, log_http_response

DEFAULT_BASE_URL = "https://api.github.com"
DEFAULT_TIMEOUT = 30.0
DEFAULT_USER_AGENT = "gitanalyzer/0.1"
GITHUB_ACCEPT = "application/vnd.github+json"


def build_headers(token: str | None, user_agent: str = DEFAULT_USER_AGENT) -> dict[str, str]:
    """
    Build the default request headers.

    The Authorization header is only present when a token is supplied;
    without one requests go out unauthenticated.
    """
    headers = {"Accept": GITHUB_ACCEPT, "User-Agent": user_agent}
    if token:
        headers["Authorization"] = f"Bearer {token}"
    return headers


def parse_response(response: httpx.Response) -> Any:
    """
    Turn a response into decoded JSON or raise a typed error.

    Returns None for 2xx responses without a body (GitHub answers 204 for
    the contributors of an empty repository).

    Raises:
        GitHubAPIError: On any non-2xx status
        ResponseFormatError: If a 2xx body is not valid JSON
    """
    if not 200 <= response.status_code < 300:
        raise error_for_status(response.status_code, response.text)

    if response.status_code == 204 or not response.content:
        return None

    try:
        return response.json()
    except ValueError as e:
        raise ResponseFormatError(f"Invalid JSON from {response.request.url}: {e}") from e


class HTTPTransport:
    """
    HTTP transport layer for GET requests against the GitHub REST API.

    Handles:
    - Optional bearer token authentication
    - Request/response debug logging with tokens masked
    - Error response parsing into typed exceptions
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        token: str | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        user_agent: str = DEFAULT_USER_AGENT,
    ) -> None:
        """
        Initialize HTTP transport.

        Args:
            base_url: Base URL for API requests (e.g., "https://api.github.com")
            token: Optional GitHub token sent as a bearer credential
            timeout: Request timeout in seconds
            user_agent: User-Agent header value
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.headers = build_headers(token, user_agent)

        self._client = httpx.Client(
            base_url=self.base_url,
            timeout=timeout,
            headers=self.headers,
        )

    def close(self) -> None:
        """Close the HTTP client."""
        self._client.close()

    def __enter__(self) -> "HTTPTransport":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        """
        Make a GET request.

        Args:
            path: API path (e.g., "/users/octocat")
            params: Query parameters

        Returns:
            Parsed JSON response, or None for an empty body

        Raises:
            GitAnalyzerError: On API or connection errors
        """
        log_http_request("GET", f"{self.base_url}{path}", self.headers, params)
        started = time.monotonic()

        try:
            response = self._client.request("GET", path, params=params)
        except httpx.RequestError as e:
            raise ConnectionFailedError(str(e)) from e

        log_http_response(
            response.status_code,
            f"{self.base_url}{path}",
            elapsed_ms=(time.monotonic() - started) * 1000,
            body=response.text,
        )
        return parse_response(response)
