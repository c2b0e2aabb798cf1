"""
Plain-text rendering of explorer state.

Each pane is rendered by its own function so callers can lay them out as
they like; render_explorer() stacks them in page order. Missing optional
fields render as placeholders.
"""

from typing import TYPE_CHECKING

from gitanalyzer.listing import format_pushed_at, spark_path, trend_values
from gitanalyzer.types.details import DetailStatus, RepositoryDetail
from gitanalyzer.types.profiles import Profile
from gitanalyzer.types.repos import LanguageCount, RepositoryPage, RepositorySummary
from gitanalyzer.types.view import ALL_LANGUAGES, SortKey

if TYPE_CHECKING:
    from gitanalyzer.explorer import Explorer

PLACEHOLDER = "—"
NO_MESSAGE = "No message"
SPARK_BARS = " ▁▂▃▄▅▆▇█"


def render_profile(profile: Profile) -> str:
    lines = [f"{profile.display_name} ({profile.login}, {profile.kind.value})"]
    if profile.bio:
        lines.append(f"  {profile.bio}")
    if profile.location:
        lines.append(f"  {profile.location}")
    lines.append(f"  Repos: {profile.public_repos}  Followers: {profile.followers}")
    return "\n".join(lines)


def render_language_filters(filters: list[LanguageCount], selected: str) -> str:
    """Quick filter controls: "All" followed by the most common languages."""
    controls = [_mark(ALL_LANGUAGES, selected == ALL_LANGUAGES)]
    controls.extend(
        _mark(f"{entry.language} ({entry.count})", entry.language == selected)
        for entry in filters
    )
    return "Languages: " + " ".join(controls)


def render_sort_selector(selected: SortKey) -> str:
    options = [_mark(key.label, key is selected) for key in SortKey]
    return "Sort: " + " ".join(options)


def _mark(label: str, active: bool) -> str:
    return f"[{label}]" if active else label


def sparkline(stars: int) -> str:
    """The decorative trend for a star count as unicode bars."""
    return "".join(SPARK_BARS[value * 8 // 10] for value in trend_values(stars))


def render_repository(repo: RepositorySummary, index: int | None = None) -> str:
    prefix = f"{index:>3}. " if index is not None else ""
    updated = format_pushed_at(repo.pushed_at) or PLACEHOLDER
    lines = [
        f"{prefix}{repo.name}  ★ {repo.stargazers_count}  {repo.language or PLACEHOLDER}",
        f"     {repo.description or ''}".rstrip(),
        f"     Updated {updated}  {sparkline(repo.stargazers_count)}  {repo.html_url}",
    ]
    return "\n".join(line for line in lines if line.strip())


def render_repository_page(page: RepositoryPage) -> str:
    header = (
        f"Repositories: {page.total_count} "
        f"(showing {page.filtered_count})  Page {page.page} / {page.total_pages}"
    )
    if not page.items:
        return f"{header}\n  No repositories."
    body = [render_repository(repo, i) for i, repo in enumerate(page.items, start=1)]
    return "\n".join([header, *body])


def render_detail(detail: RepositoryDetail) -> str:
    lines = [f"{detail.repo.name} ({detail.repo.full_name})"]

    if detail.status is DetailStatus.LOADING:
        lines.append("  Loading...")
        return "\n".join(lines)
    if detail.status is DetailStatus.ERROR:
        lines.append(f"  Error: {detail.error}")
        return "\n".join(lines)

    lines.append("  Top contributors:")
    for contributor in detail.contributors:
        lines.append(f"    {contributor.login} ({contributor.contributions} commits)")

    lines.append("  Recent commits:")
    for commit in detail.commits:
        when = commit.date.strftime("%Y-%m-%d %H:%M") if commit.date else PLACEHOLDER
        lines.append(f"    {commit.message or NO_MESSAGE}")
        lines.append(f"      {commit.author} • {when}  {commit.html_url or ''}".rstrip())

    lines.append("  Language breakdown:")
    for language, size in detail.languages.items():
        lines.append(f"    {language}: {size} bytes")
    return "\n".join(lines)


def render_explorer(explorer: "Explorer") -> str:
    """Render every visible pane of the explorer."""
    state = explorer.state
    sections = [f"Search: {state.query}"]

    if state.loading:
        sections.append("Loading...")
    if state.error:
        sections.append(f"Error: {state.error}")
    if state.profile:
        sections.append(render_profile(state.profile))
        sections.append(render_language_filters(explorer.quick_filters, state.view.filter_language))

    sections.append(render_sort_selector(state.view.sort_key))
    sections.append(render_repository_page(explorer.page))

    if state.detail:
        sections.append(render_detail(state.detail))
    return "\n\n".join(sections)


def render_svg_sparkline(stars: int, width: int = 200, height: int = 40) -> str:
    """The decorative trend as a standalone SVG element."""
    path = spark_path(trend_values(stars), width, height)
    return (
        f'<svg width="100%" height="60" viewBox="0 0 {width} {height}" '
        f'preserveAspectRatio="none"><path d="{path}" fill="none" '
        f'stroke="#8884d8" stroke-width="2" stroke-opacity="0.9" /></svg>'
    )
