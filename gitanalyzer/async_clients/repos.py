"""Async Repositories resource client."""

from typing import TYPE_CHECKING

from gitanalyzer.parsing import parse_commits, parse_contributors, parse_languages
from gitanalyzer.types.details import CommitSummary, Contributor

if TYPE_CHECKING:
    from gitanalyzer.async_transport import AsyncHTTPTransport

TOP_CONTRIBUTORS = 6
RECENT_COMMITS = 10


class AsyncReposClient:
    """Async client for per-repository detail endpoints."""

    def __init__(self, transport: "AsyncHTTPTransport") -> None:
        """
        Initialize the async repos client.

        Args:
            transport: Async HTTP transport for making requests
        """
        self.transport = transport

    async def languages(self, full_name: str) -> dict[str, int]:
        """
        Get the language breakdown of a repository.

        Args:
            full_name: "owner/name"

        Returns:
            Mapping of language name to bytes of code
        """
        return parse_languages(await self.transport.get(f"/repos/{full_name}/languages"))

    async def contributors(self, full_name: str, limit: int = TOP_CONTRIBUTORS) -> list[Contributor]:
        """Get the top contributors of a repository."""
        data = await self.transport.get(
            f"/repos/{full_name}/contributors",
            params={"per_page": limit},
        )
        return parse_contributors(data)

    async def commits(self, full_name: str, limit: int = RECENT_COMMITS) -> list[CommitSummary]:
        """Get the most recent commits on the default branch."""
        data = await self.transport.get(
            f"/repos/{full_name}/commits",
            params={"per_page": limit},
        )
        return parse_commits(data)
