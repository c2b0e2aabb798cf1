"""
Pure derivations over a fetched repository set.

Everything here is a deterministic function of its arguments: language
aggregation, filtering, sorting, pagination and the decorative trend line
drawn next to each repository. Inputs are never mutated.
"""

import math
from collections import Counter
from collections.abc import Sequence
from datetime import timezone

from gitanalyzer.parsing import parse_timestamp
from gitanalyzer.types.repos import LanguageCount, RepositoryPage, RepositorySummary
from gitanalyzer.types.view import ALL_LANGUAGES, PAGE_SIZE, SortKey, ViewState

QUICK_FILTER_LIMIT = 8
TREND_POINTS = 8

# Sorts below every parseable timestamp.
_EARLIEST = float("-inf")


def language_aggregate(repos: Sequence[RepositorySummary]) -> list[LanguageCount]:
    """
    Count repositories per primary language, most frequent first.

    Missing languages are counted under "Unknown". Equal counts keep the
    order in which the languages first appear.
    """
    counts = Counter(repo.language_or_unknown for repo in repos)
    return [LanguageCount(language, count) for language, count in counts.most_common()]


def top_languages(
    aggregate: Sequence[LanguageCount], limit: int = QUICK_FILTER_LIMIT
) -> list[LanguageCount]:
    """The head of the aggregate offered as quick filters."""
    return list(aggregate[:limit])


def filter_repositories(
    repos: Sequence[RepositorySummary], language: str = ALL_LANGUAGES
) -> list[RepositorySummary]:
    if language == ALL_LANGUAGES:
        return list(repos)
    return [repo for repo in repos if repo.language_or_unknown == language]


def pushed_at_key(repo: RepositorySummary) -> float:
    """Sort key for last-push time; missing or unparsable dates are earliest."""
    pushed = parse_timestamp(repo.pushed_at)
    if pushed is None:
        return _EARLIEST
    if pushed.tzinfo is None:
        pushed = pushed.replace(tzinfo=timezone.utc)
    return pushed.timestamp()


_SORT_KEYS = {
    SortKey.STARS: lambda repo: repo.stargazers_count,
    SortKey.UPDATED: pushed_at_key,
    SortKey.SIZE: lambda repo: repo.size,
}


def sort_repositories(
    repos: Sequence[RepositorySummary], key: SortKey = SortKey.STARS
) -> list[RepositorySummary]:
    """
    Return a new list sorted descending by the given key.

    The sort is stable: ties keep their input order.
    """
    return sorted(repos, key=_SORT_KEYS[SortKey(key)], reverse=True)


def total_pages(count: int, page_size: int = PAGE_SIZE) -> int:
    """Number of pages for count items; never less than 1."""
    return max(1, math.ceil(count / page_size))


def clamp_page(page: int, pages: int) -> int:
    return min(max(1, page), max(1, pages))


def paginate(
    repos: Sequence[RepositorySummary], page: int, page_size: int = PAGE_SIZE
) -> list[RepositorySummary]:
    """The 1-based page slice of repos."""
    start = (page - 1) * page_size
    return list(repos[start:start + page_size])


def derive_view(repos: Sequence[RepositorySummary], state: ViewState) -> RepositoryPage:
    """
    Filter, sort and paginate repos according to the view state.

    The requested page is clamped into the valid range, so a filter that
    shrinks the set never yields an out-of-range page.
    """
    filtered = sort_repositories(
        filter_repositories(repos, state.filter_language), state.sort_key
    )
    pages = total_pages(len(filtered), state.page_size)
    page = clamp_page(state.page, pages)
    return RepositoryPage(
        items=paginate(filtered, page, state.page_size),
        page=page,
        total_pages=pages,
        filtered_count=len(filtered),
        total_count=len(repos),
    )


def trend_values(stars: int, points: int = TREND_POINTS) -> list[int]:
    """
    Decorative sparkline values for a repository.

    Not historical data: round(|sin(i + stars)| * 10) for each index, so
    the line is reproducible from the star count alone.
    """
    return [math.floor(abs(math.sin(i + stars)) * 10 + 0.5) for i in range(points)]


def spark_path(values: Sequence[float], width: float = 200, height: float = 40) -> str:
    """
    SVG path data drawing values as a polyline in a width x height box.

    Returns an empty string for no values.
    """
    if not values:
        return ""

    top = max(*values, 1)
    bottom = min(*values, 0)
    step = width / max(len(values) - 1, 1)
    points = [
        f"{_fmt(i * step)},{_fmt(height - ((v - bottom) / (top - bottom + 1e-6)) * height)}"
        for i, v in enumerate(values)
    ]
    return "M" + " L ".join(points)


def _fmt(number: float) -> str:
    return f"{number:g}"


def format_pushed_at(value: str | None) -> str | None:
    """Calendar date of a push timestamp, or None when it is unusable."""
    pushed = parse_timestamp(value)
    if pushed is None:
        return None
    return pushed.strftime("%Y-%m-%d")

