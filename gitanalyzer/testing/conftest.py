"""
Pytest plugin for GitAnalyzer testing fixtures.

This module re-exports all fixtures from fixtures.py so they can be
automatically discovered by pytest.

To use these fixtures in your tests, add this to your conftest.py:

    pytest_plugins = ["gitanalyzer.testing.conftest"]
"""

# Re-export all fixtures for pytest auto-discovery
from gitanalyzer.testing.fixtures import (
    mock_client,
    mock_client_with_user,
    sample_commits,
    sample_contributors,
    sample_org_profile,
    sample_repositories,
    sample_user_profile,
)

__all__ = [
    "mock_client",
    "mock_client_with_user",
    "sample_user_profile",
    "sample_org_profile",
    "sample_repositories",
    "sample_contributors",
    "sample_commits",
]
