"""
GitAnalyzer async client.

Provides the async interface used by the explorer.
"""

from typing import Any

from gitanalyzer.async_clients import AsyncOrgsClient, AsyncReposClient, AsyncUsersClient
from gitanalyzer.async_transport import AsyncHTTPTransport
from gitanalyzer.client import settings_from_env
from gitanalyzer.transport import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, DEFAULT_USER_AGENT


class AsyncGitHubClient:
    """
    Async client for the GitHub REST API.

    Aggregates the async users, orgs and repos resource clients.
    Uses httpx for async HTTP operations.

    Example:
        ```python
        import asyncio
        from gitanalyzer import AsyncGitHubClient

        async def main():
            async with AsyncGitHubClient() as client:
                org = await client.orgs.get("python")
                repos = await client.orgs.list_repos("python")

        asyncio.run(main())
        ```
    """

    DEFAULT_BASE_URL = DEFAULT_BASE_URL
    DEFAULT_TIMEOUT = DEFAULT_TIMEOUT

    def __init__(
        self,
        token: str | None = None,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        user_agent: str = DEFAULT_USER_AGENT,
    ) -> None:
        """
        Initialize the async GitHub client.

        Args:
            token: Optional API token; requests are unauthenticated without one
            base_url: Base URL for API requests (default: https://api.github.com)
            timeout: Request timeout in seconds (default: 30.0)
            user_agent: User-Agent header value
        """
        self.base_url = base_url
        self.timeout = timeout

        self._transport = AsyncHTTPTransport(
            base_url=base_url,
            token=token,
            timeout=timeout,
            user_agent=user_agent,
        )

        self.users = AsyncUsersClient(self._transport)
        self.orgs = AsyncOrgsClient(self._transport)
        self.repos = AsyncReposClient(self._transport)

    @classmethod
    def from_env(cls) -> "AsyncGitHubClient":
        """
        Create an async client from environment variables.

        Raises:
            ConfigurationError: If an environment variable holds an invalid value
        """
        return cls(**settings_from_env())

    @property
    def transport(self) -> AsyncHTTPTransport:
        """Get the underlying async HTTP transport."""
        return self._transport

    async def close(self) -> None:
        """Close the client and release resources."""
        await self._transport.close()

    async def __aenter__(self) -> "AsyncGitHubClient":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()
