"""GitAnalyzer testing utilities.

Provides a mock client and fixtures for testing code that uses GitAnalyzer.
"""

from gitanalyzer.testing.fixtures import (
    create_mock_commit,
    create_mock_profile,
    create_mock_repository,
)
from gitanalyzer.testing.mock import MockCall, MockGitHubClient, MockResponse

__all__ = [
    # Mock client
    "MockGitHubClient",
    "MockCall",
    "MockResponse",
    # Helper functions
    "create_mock_profile",
    "create_mock_repository",
    "create_mock_commit",
]
