"""GitAnalyzer exception classes."""


class GitAnalyzerError(Exception):
    """Base exception for all GitAnalyzer errors."""

    def __init__(self, code: str, message: str) -> None:
        self.code = code
        self.message = message
        super().__init__(message)


class ConfigurationError(GitAnalyzerError):
    """Raised when client configuration is invalid."""

    def __init__(self, message: str) -> None:
        super().__init__("CONFIGURATION_ERROR", message)


class GitHubAPIError(GitAnalyzerError):
    """Raised when the GitHub API answers with a non-2xx status."""

    code = "GITHUB_API_ERROR"

    def __init__(self, status_code: int, body: str = "") -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(self.code, f"GitHub API error {status_code} {body}".rstrip())


class AuthenticationError(GitHubAPIError):
    """Raised on 401 (bad or expired token)."""

    code = "UNAUTHORIZED"


class AuthorizationError(GitHubAPIError):
    """Raised on 403."""

    code = "FORBIDDEN"


class NotFoundError(GitHubAPIError):
    """Raised when a user, organization or repository does not exist."""

    code = "NOT_FOUND"


class RateLimitedError(GitHubAPIError):
    """Raised on 429. Surfaced as-is; requests are never retried."""

    code = "RATE_LIMITED"


class ValidationError(GitHubAPIError):
    """Raised on other 4xx responses."""

    code = "VALIDATION_FAILED"


class ServerError(GitHubAPIError):
    """Raised on server errors (5xx)."""

    code = "SERVER_ERROR"


class ConnectionFailedError(GitAnalyzerError):
    """Raised when the request never produced a response."""

    def __init__(self, message: str) -> None:
        super().__init__("CONNECTION_ERROR", message)


class ResponseFormatError(GitAnalyzerError):
    """Raised when a 2xx response body is not the JSON we expect."""

    def __init__(self, message: str) -> None:
        super().__init__("RESPONSE_FORMAT_ERROR", message)


class ProfileResolutionError(GitAnalyzerError):
    """
    Raised when a name resolves neither as a user nor as an organization.

    Both failures are kept. The message is taken from the organization
    lookup, which is the one the explorer shows.
    """

    def __init__(self, name: str, user_error: Exception, org_error: Exception) -> None:
        self.name = name
        self.user_error = user_error
        self.org_error = org_error
        message = _message_of(org_error) or _message_of(user_error) or "Unknown error"
        super().__init__("PROFILE_NOT_RESOLVED", message)

    @property
    def errors(self) -> tuple[Exception, Exception]:
        """Both lookup failures as (user, organization)."""
        return self.user_error, self.org_error


def _message_of(error: Exception) -> str:
    if isinstance(error, GitAnalyzerError):
        return error.message
    return str(error)


def error_for_status(status_code: int, body: str = "") -> GitHubAPIError:
    """Map an HTTP status to the matching typed exception."""
    if status_code == 401:
        return AuthenticationError(status_code, body)
    elif status_code == 403:
        return AuthorizationError(status_code, body)
    elif status_code == 404:
        return NotFoundError(status_code, body)
    elif status_code == 429:
        return RateLimitedError(status_code, body)
    elif status_code >= 500:
        return ServerError(status_code, body)
    elif status_code >= 400:
        return ValidationError(status_code, body)
    return GitHubAPIError(status_code, body)
