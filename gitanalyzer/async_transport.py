"""
Async HTTP Transport for GitAnalyzer.

Handles async HTTP communication with the GitHub REST API using the httpx
async client. Error mapping is shared with the sync transport.
"""

import time
from typing import Any

import httpx

from gitanalyzer.exceptions import ConnectionFailedError
from gitanalyzer.logging import log_http_request, log_http_response
from gitanalyzer.transport import (
    DEFAULT_BASE_URL,
    DEFAULT_TIMEOUT,
    DEFAULT_USER_AGENT,
    build_headers,
    parse_response,
)


class AsyncHTTPTransport:
    """
    Async HTTP transport layer for GET requests against the GitHub REST API.

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
        Initialize async HTTP transport.

        Args:
            base_url: Base URL for API requests (e.g., "https://api.github.com")
            token: Optional GitHub token sent as a bearer credential
            timeout: Request timeout in seconds
            user_agent: User-Agent header value
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.headers = build_headers(token, user_agent)

        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout,
            headers=self.headers,
        )

    async def close(self) -> None:
        """Close the HTTP client."""
        await self._client.aclose()

    async def __aenter__(self) -> "AsyncHTTPTransport":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()

    async def get(self, path: str, params: dict[str, Any] | None = None) -> Any:
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
            response = await self._client.request("GET", path, params=params)
        except httpx.RequestError as e:
            raise ConnectionFailedError(str(e)) from e

        log_http_response(
            response.status_code,
            f"{self.base_url}{path}",
            elapsed_ms=(time.monotonic() - started) * 1000,
            body=response.text,
        )
        return parse_response(response)
