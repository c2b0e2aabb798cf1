"""
GitAnalyzer main client.

Provides the synchronous interface to the GitHub REST endpoints the
explorer consumes.
"""

import os
from typing import Any

from gitanalyzer.clients import OrgsClient, ReposClient, UsersClient
from gitanalyzer.exceptions import ConfigurationError
from gitanalyzer.transport import (
    DEFAULT_BASE_URL,
    DEFAULT_TIMEOUT,
    DEFAULT_USER_AGENT,
    HTTPTransport,
)

TOKEN_ENV_VAR = "GITHUB_TOKEN"
BASE_URL_ENV_VAR = "GITANALYZER_BASE_URL"
TIMEOUT_ENV_VAR = "GITANALYZER_TIMEOUT"


def settings_from_env() -> dict[str, Any]:
    """
    Read client settings from environment variables.

    Environment variables:
        GITHUB_TOKEN: API token (optional; unauthenticated when absent)
        GITANALYZER_BASE_URL: Base URL for API (optional, default: https://api.github.com)
        GITANALYZER_TIMEOUT: Request timeout in seconds (optional, default: 30)

    Raises:
        ConfigurationError: If GITANALYZER_TIMEOUT is not a positive number
    """
    token = os.environ.get(TOKEN_ENV_VAR, "").strip() or None
    base_url = os.environ.get(BASE_URL_ENV_VAR, DEFAULT_BASE_URL)
    raw_timeout = os.environ.get(TIMEOUT_ENV_VAR)

    timeout = DEFAULT_TIMEOUT
    if raw_timeout:
        try:
            timeout = float(raw_timeout)
        except ValueError:
            raise ConfigurationError(
                f"Invalid {TIMEOUT_ENV_VAR}: {raw_timeout!r}. Must be a number of seconds"
            ) from None
        if timeout <= 0:
            raise ConfigurationError(f"Invalid {TIMEOUT_ENV_VAR}: must be positive")

    return {"token": token, "base_url": base_url, "timeout": timeout}


class GitHubClient:
    """
    Client for the GitHub REST API.

    Aggregates the users, orgs and repos resource clients. The token is an
    explicit argument; use from_env() to opt into reading it from the
    environment.

    Example:
        ```python
        from gitanalyzer import GitHubClient

        with GitHubClient(token="ghp_...") as client:
            profile = client.users.get("octocat")
            repos = client.users.list_repos("octocat")
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
        Initialize the GitHub client.

        Args:
            token: Optional API token; requests are unauthenticated without one
            base_url: Base URL for API requests (default: https://api.github.com)
            timeout: Request timeout in seconds (default: 30.0)
            user_agent: User-Agent header value
        """
        self.base_url = base_url
        self.timeout = timeout

        self._transport = HTTPTransport(
            base_url=base_url,
            token=token,
            timeout=timeout,
            user_agent=user_agent,
        )

        self.users = UsersClient(self._transport)
        self.orgs = OrgsClient(self._transport)
        self.repos = ReposClient(self._transport)

    @classmethod
    def from_env(cls) -> "GitHubClient":
        """
        Create a client from environment variables.

        See settings_from_env() for the variables read.

        Raises:
            ConfigurationError: If an environment variable holds an invalid value
        """
        return cls(**settings_from_env())

    @property
    def transport(self) -> HTTPTransport:
        """Get the underlying HTTP transport (for advanced use cases)."""
        return self._transport

    def close(self) -> None:
        """Close the client and release resources."""
        self._transport.close()

    def __enter__(self) -> "GitHubClient":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()
