"""On-demand fetching of repository detail."""

from typing import TYPE_CHECKING

from gitanalyzer.types.details import RepositoryBundle

if TYPE_CHECKING:
    from gitanalyzer.async_client import AsyncGitHubClient


class DetailFetcher:
    """Fetch the languages, contributors and commits of one repository."""

    def __init__(self, client: "AsyncGitHubClient") -> None:
        self.client = client

    async def fetch(self, full_name: str) -> RepositoryBundle:
        """
        Fetch the detail bundle for "owner/name".

        Calls are made in order (languages, top 6 contributors, 10 most recent
        commits) and the first failure propagates; there is no partial result.

        Raises:
            GitAnalyzerError: On any failed call
        """
        languages = await self.client.repos.languages(full_name)
        contributors = await self.client.repos.contributors(full_name)
        commits = await self.client.repos.commits(full_name)
        return RepositoryBundle(
            languages=languages,
            contributors=contributors,
            commits=commits,
        )
