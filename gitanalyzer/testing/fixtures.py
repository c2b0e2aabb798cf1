"""
Pytest fixtures for GitAnalyzer testing.

Provides common fixtures and factory helpers for tests that drive the
explorer or the clients.
"""

from datetime import datetime, timezone
from typing import Any, Generator

import pytest

from gitanalyzer.testing.mock import MockGitHubClient
from gitanalyzer.types.details import CommitSummary, Contributor
from gitanalyzer.types.profiles import AccountKind, Profile
from gitanalyzer.types.repos import RepositorySummary


# ============================================================================
# Factory helpers
# ============================================================================


def create_mock_profile(
    login: str = "test-user",
    kind: AccountKind = AccountKind.USER,
    **kwargs: Any,
) -> Profile:
    """
    Create a Profile with customizable fields.

    Args:
        login: Account login
        kind: USER or ORGANIZATION
        **kwargs: Additional fields to override

    Returns:
        Profile object
    """
    defaults: dict[str, Any] = {
        "name": None,
        "avatar_url": f"https://avatars.githubusercontent.com/{login}",
        "bio": None,
        "location": None,
        "followers": 0,
        "public_repos": 0,
        "html_url": f"https://github.com/{login}",
    }
    defaults.update(kwargs)
    return Profile(login=login, kind=kind, **defaults)


def create_mock_repository(
    id: int = 1,
    name: str = "test-repo",
    owner: str = "test-user",
    **kwargs: Any,
) -> RepositorySummary:
    """
    Create a RepositorySummary with customizable fields.

    Args:
        id: Repository ID
        name: Repository name
        owner: Owner login
        **kwargs: Additional fields to override

    Returns:
        RepositorySummary object
    """
    defaults: dict[str, Any] = {
        "full_name": f"{owner}/{name}",
        "description": None,
        "language": None,
        "stargazers_count": 0,
        "pushed_at": "2024-01-15T10:30:00Z",
        "size": 0,
        "html_url": f"https://github.com/{owner}/{name}",
    }
    defaults.update(kwargs)
    return RepositorySummary(id=id, name=name, owner=owner, **defaults)


def create_mock_commit(sha: str = "abc123", **kwargs: Any) -> CommitSummary:
    """Create a CommitSummary with customizable fields."""
    defaults: dict[str, Any] = {
        "message": "Initial commit",
        "author": "test-user",
        "date": datetime(2024, 1, 15, 10, 30, tzinfo=timezone.utc),
        "html_url": f"https://github.com/test-user/test-repo/commit/{sha}",
    }
    defaults.update(kwargs)
    return CommitSummary(sha=sha, **defaults)


# ============================================================================
# Mock Client Fixtures
# ============================================================================


@pytest.fixture
def mock_client() -> Generator[MockGitHubClient, None, None]:
    """
    Provide a MockGitHubClient for testing.

    Example:
        ```python
        def test_org_fallback(mock_client):
            mock_client.orgs.configure_get(response=create_mock_profile("acme"))
            ...
            assert mock_client.was_called("orgs.list_repos")
        ```
    """
    client = MockGitHubClient()
    yield client
    client.reset()


# ============================================================================
# Sample Data Fixtures
# ============================================================================


@pytest.fixture
def sample_user_profile() -> Profile:
    """Provide a sample user Profile."""
    return create_mock_profile(
        login="vercel",
        name="Vercel",
        bio="Develop. Preview. Ship.",
        location="San Francisco",
        followers=12000,
        public_repos=4,
    )


@pytest.fixture
def sample_org_profile() -> Profile:
    """Provide a sample organization Profile."""
    return create_mock_profile(
        login="acme-org",
        kind=AccountKind.ORGANIZATION,
        name="Acme",
        public_repos=2,
    )


@pytest.fixture
def sample_repositories() -> list[RepositorySummary]:
    """Provide a small, mixed-language repository set."""
    return [
        create_mock_repository(1, "next.js", "vercel", language="JavaScript",
                               stargazers_count=120000, size=900000,
                               pushed_at="2024-03-01T12:00:00Z"),
        create_mock_repository(2, "turbo", "vercel", language="Rust",
                               stargazers_count=25000, size=300000,
                               pushed_at="2024-02-01T12:00:00Z"),
        create_mock_repository(3, "swr", "vercel", language="TypeScript",
                               stargazers_count=30000, size=5000,
                               pushed_at="2024-01-01T12:00:00Z"),
        create_mock_repository(4, "hyper", "vercel", language="TypeScript",
                               stargazers_count=43000, size=20000,
                               pushed_at=None),
        create_mock_repository(5, "dotfiles", "vercel", language=None,
                               stargazers_count=3, size=10,
                               pushed_at="not-a-date"),
    ]


@pytest.fixture
def sample_contributors() -> list[Contributor]:
    """Provide sample contributors."""
    return [
        Contributor(login="alice", avatar_url=None, contributions=120, html_url=None),
        Contributor(login="bob", avatar_url=None, contributions=45, html_url=None),
    ]


@pytest.fixture
def sample_commits() -> list[CommitSummary]:
    """Provide sample commits."""
    return [
        create_mock_commit("c1", message="Fix router"),
        create_mock_commit("c2", message="", author="unknown", date=None),
    ]


@pytest.fixture
def mock_client_with_user(
    mock_client: MockGitHubClient,
    sample_user_profile: Profile,
    sample_repositories: list[RepositorySummary],
) -> MockGitHubClient:
    """Provide a MockGitHubClient where "vercel" resolves as a user."""
    mock_client.users.configure_get(response=sample_user_profile, username="vercel")
    mock_client.users.configure_list_repos(response=sample_repositories, username="vercel")
    return mock_client


__all__ = [
    # Fixtures (exported for documentation, actual fixtures are auto-discovered)
    "mock_client",
    "sample_user_profile",
    "sample_org_profile",
    "sample_repositories",
    "sample_contributors",
    "sample_commits",
    "mock_client_with_user",
    # Helper functions
    "create_mock_profile",
    "create_mock_repository",
    "create_mock_commit",
]
