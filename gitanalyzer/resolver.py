"""
Resolution of a free-text name into a profile and its repositories.

A name is tried as a user first and as an organization second. Both
failures are kept when neither works.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING

from gitanalyzer.exceptions import GitAnalyzerError, ProfileResolutionError
from gitanalyzer.logging import get_logger
from gitanalyzer.types.profiles import Profile
from gitanalyzer.types.repos import RepositorySummary

if TYPE_CHECKING:
    from gitanalyzer.async_client import AsyncGitHubClient

logger = get_logger("explorer")


@dataclass(frozen=True)
class Resolution:
    """A resolved account with its repository working set."""

    profile: Profile
    repositories: list[RepositorySummary]


class ProfileResolver:
    """Resolve names against the user endpoints, falling back to organizations."""

    def __init__(self, client: "AsyncGitHubClient") -> None:
        self.client = client

    async def resolve(self, name: str) -> Resolution:
        """
        Resolve a name to a user or, failing that, an organization.

        Step one fetches the user profile and the user's owned repositories.
        If either call fails, the same two calls are made against the
        organization endpoints.

        Raises:
            ProfileResolutionError: If both lookups fail. Carries both errors;
                its message is the organization lookup's.
        """
        try:
            return await self._resolve_user(name)
        except GitAnalyzerError as user_error:
            logger.info("user lookup for %r failed (%s); trying organization", name, user_error)
            try:
                return await self._resolve_org(name)
            except GitAnalyzerError as org_error:
                raise ProfileResolutionError(name, user_error, org_error) from org_error

    async def _resolve_user(self, name: str) -> Resolution:
        profile = await self.client.users.get(name)
        repos = await self.client.users.list_repos(name)
        return Resolution(profile=profile, repositories=repos)

    async def _resolve_org(self, name: str) -> Resolution:
        profile = await self.client.orgs.get(name)
        repos = await self.client.orgs.list_repos(name)
        return Resolution(profile=profile, repositories=repos)
