"""GitAnalyzer - explore a GitHub user's or organization's repositories."""

from gitanalyzer.async_client import AsyncGitHubClient
from gitanalyzer.client import GitHubClient
from gitanalyzer.debounce import Debouncer
from gitanalyzer.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ConfigurationError,
    ConnectionFailedError,
    GitAnalyzerError,
    GitHubAPIError,
    NotFoundError,
    ProfileResolutionError,
    RateLimitedError,
    ResponseFormatError,
    ServerError,
    ValidationError,
)
from gitanalyzer.explorer import Explorer, ExplorerState
from gitanalyzer.logging import configure_logging, get_logger
from gitanalyzer.transport import HTTPTransport

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Main Clients
    "GitHubClient",
    "AsyncGitHubClient",
    # Explorer
    "Explorer",
    "ExplorerState",
    "Debouncer",
    # Exceptions
    "GitAnalyzerError",
    "ConfigurationError",
    "GitHubAPIError",
    "AuthenticationError",
    "AuthorizationError",
    "NotFoundError",
    "RateLimitedError",
    "ValidationError",
    "ServerError",
    "ConnectionFailedError",
    "ResponseFormatError",
    "ProfileResolutionError",
    # Transport
    "HTTPTransport",
    # Logging
    "configure_logging",
    "get_logger",
]
