"""Async Users resource client."""

from typing import TYPE_CHECKING
from urllib.parse import quote

from gitanalyzer.parsing import parse_profile, parse_repositories
from gitanalyzer.types.profiles import AccountKind, Profile
from gitanalyzer.types.repos import RepositorySummary

if TYPE_CHECKING:
    from gitanalyzer.async_transport import AsyncHTTPTransport

REPOS_PER_PAGE = 100


class AsyncUsersClient:
    """Async client for user accounts and the repositories they own."""

    def __init__(self, transport: "AsyncHTTPTransport") -> None:
        """
        Initialize the async users client.

        Args:
            transport: Async HTTP transport for making requests
        """
        self.transport = transport

    async def get(self, username: str) -> Profile:
        """
        Get a user's public profile.

        Args:
            username: GitHub login

        Returns:
            Profile with kind USER

        Raises:
            NotFoundError: If no such user exists
        """
        data = await self.transport.get(f"/users/{quote(username, safe='')}")
        return parse_profile(data, AccountKind.USER)

    async def list_repos(self, username: str) -> list[RepositorySummary]:
        """
        List repositories owned by a user, most recently pushed first.

        Only the first page of 100 repositories is fetched.
        """
        data = await self.transport.get(
            f"/users/{quote(username, safe='')}/repos",
            params={"per_page": REPOS_PER_PAGE, "type": "owner", "sort": "pushed"},
        )
        return parse_repositories(data)
