"""Repositories resource client."""

from typing import TYPE_CHECKING

from gitanalyzer.parsing import parse_commits, parse_contributors, parse_languages
from gitanalyzer.types.details import CommitSummary, Contributor

if TYPE_CHECKING:
    from gitanalyzer.transport import HTTPTransport

TOP_CONTRIBUTORS = 6
RECENT_COMMITS = 10


class ReposClient:
    """Client for per-repository detail endpoints."""

    def __init__(self, transport: "HTTPTransport") -> None:
        """
        Initialize the repos client.

        Args:
            transport: HTTP transport for making requests
        """
        self.transport = transport

    def languages(self, full_name: str) -> dict[str, int]:
        """
        Get the language breakdown of a repository.

        Args:
            full_name: "owner/name"

        Returns:
            Mapping of language name to bytes of code
        """
        return parse_languages(self.transport.get(f"/repos/{full_name}/languages"))

    def contributors(self, full_name: str, limit: int = TOP_CONTRIBUTORS) -> list[Contributor]:
        """Get the top contributors of a repository."""
        data = self.transport.get(
            f"/repos/{full_name}/contributors",
            params={"per_page": limit},
        )
        return parse_contributors(data)

    def commits(self, full_name: str, limit: int = RECENT_COMMITS) -> list[CommitSummary]:
        """Get the most recent commits on the default branch."""
        data = self.transport.get(
            f"/repos/{full_name}/commits",
            params={"per_page": limit},
        )
        return parse_commits(data)
