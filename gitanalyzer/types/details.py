"""Repository detail data models."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from gitanalyzer.types.repos import RepositorySummary


class DetailStatus(str, Enum):
    """Lifecycle of a detail panel."""

    LOADING = "loading"
    READY = "ready"
    ERROR = "error"


@dataclass(frozen=True)
class Contributor:
    """A top contributor of a repository."""

    login: str
    avatar_url: str | None
    contributions: int
    html_url: str | None


@dataclass(frozen=True)
class CommitSummary:
    """A recent commit reduced to what the detail panel shows."""

    sha: str
    message: str  # first line only, empty when the commit has none
    author: str
    date: datetime | None
    html_url: str | None


@dataclass(frozen=True)
class RepositoryBundle:
    """Languages, contributors and commits fetched together for one repository."""

    languages: dict[str, int]
    contributors: list[Contributor]
    commits: list[CommitSummary]


@dataclass(frozen=True)
class RepositoryDetail:
    """State of the detail panel for the selected repository."""

    repo: RepositorySummary
    status: DetailStatus
    languages: dict[str, int] = field(default_factory=dict)
    contributors: list[Contributor] = field(default_factory=list)
    commits: list[CommitSummary] = field(default_factory=list)
    error: str | None = None

    @classmethod
    def loading(cls, repo: RepositorySummary) -> "RepositoryDetail":
        return cls(repo=repo, status=DetailStatus.LOADING)

    @classmethod
    def ready(cls, repo: RepositorySummary, bundle: RepositoryBundle) -> "RepositoryDetail":
        return cls(
            repo=repo,
            status=DetailStatus.READY,
            languages=bundle.languages,
            contributors=bundle.contributors,
            commits=bundle.commits,
        )

    @classmethod
    def failed(cls, repo: RepositorySummary, message: str) -> "RepositoryDetail":
        return cls(repo=repo, status=DetailStatus.ERROR, error=message)

    @property
    def is_loading(self) -> bool:
        return self.status is DetailStatus.LOADING
