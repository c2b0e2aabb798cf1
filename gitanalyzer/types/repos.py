"""Repository listing data models."""

from dataclasses import dataclass

UNKNOWN_LANGUAGE = "Unknown"


@dataclass(frozen=True)
class RepositorySummary:
    """Lightweight projection of a repository's listing metadata."""

    id: int
    name: str
    full_name: str
    description: str | None
    language: str | None
    stargazers_count: int
    pushed_at: str | None  # raw ISO-8601 from the API, may be missing
    size: int
    html_url: str
    owner: str | None

    @property
    def language_or_unknown(self) -> str:
        return self.language or UNKNOWN_LANGUAGE


@dataclass(frozen=True)
class LanguageCount:
    """One entry of a language aggregate."""

    language: str
    count: int


@dataclass(frozen=True)
class RepositoryPage:
    """The visible slice of a filtered and sorted repository set."""

    items: list[RepositorySummary]
    page: int
    total_pages: int
    filtered_count: int
    total_count: int

    @property
    def has_previous(self) -> bool:
        return self.page > 1

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages
