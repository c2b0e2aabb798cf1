"""Async Organizations resource client."""

from typing import TYPE_CHECKING
from urllib.parse import quote

from gitanalyzer.parsing import parse_profile, parse_repositories
from gitanalyzer.types.profiles import AccountKind, Profile
from gitanalyzer.types.repos import RepositorySummary

if TYPE_CHECKING:
    from gitanalyzer.async_transport import AsyncHTTPTransport

REPOS_PER_PAGE = 100


class AsyncOrgsClient:
    """Async client for organization accounts and their repositories."""

    def __init__(self, transport: "AsyncHTTPTransport") -> None:
        self.transport = transport

    async def get(self, org: str) -> Profile:
        """
        Get an organization's public profile.

        Raises:
            NotFoundError: If no such organization exists
        """
        data = await self.transport.get(f"/orgs/{quote(org, safe='')}")
        return parse_profile(data, AccountKind.ORGANIZATION)

    async def list_repos(self, org: str) -> list[RepositorySummary]:
        """List an organization's repositories (first 100), most recently pushed first."""
        data = await self.transport.get(
            f"/orgs/{quote(org, safe='')}/repos",
            params={"per_page": REPOS_PER_PAGE, "type": "all", "sort": "pushed"},
        )
        return parse_repositories(data)
