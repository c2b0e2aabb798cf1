"""
Tests for the plain-text renderers.

Feature: gitanalyzer
"""

import asyncio
from datetime import datetime, timezone

from gitanalyzer.explorer import Explorer
from gitanalyzer.render import (
    NO_MESSAGE,
    PLACEHOLDER,
    render_detail,
    render_explorer,
    render_language_filters,
    render_repository,
    render_repository_page,
    render_sort_selector,
    render_svg_sparkline,
    sparkline,
)
from gitanalyzer.testing import MockGitHubClient, create_mock_commit, create_mock_repository
from gitanalyzer.types import (
    Contributor,
    LanguageCount,
    RepositoryBundle,
    RepositoryDetail,
    RepositoryPage,
    SortKey,
)


def test_repository_placeholders() -> None:
    repo = create_mock_repository(1, "bare", language=None, pushed_at=None, description=None)

    text = render_repository(repo, 1)

    assert text.startswith("  1. bare  ★ 0  " + PLACEHOLDER)
    assert f"Updated {PLACEHOLDER}" in text


def test_repository_with_fields() -> None:
    repo = create_mock_repository(
        1, "next.js", "vercel",
        language="JavaScript",
        description="The React Framework",
        stargazers_count=120000,
        pushed_at="2024-03-01T12:00:00Z",
    )

    text = render_repository(repo)

    assert "next.js  ★ 120000  JavaScript" in text
    assert "The React Framework" in text
    assert "Updated 2024-03-01" in text
    assert sparkline(120000) in text


def test_sparkline_has_one_bar_per_point() -> None:
    bars = sparkline(0)

    assert len(bars) == 8
    assert bars[0] == " "
    assert bars[5] == "█"


def test_empty_page() -> None:
    page = RepositoryPage(items=[], page=1, total_pages=1, filtered_count=0, total_count=3)

    assert render_repository_page(page) == (
        "Repositories: 3 (showing 0)  Page 1 / 1\n  No repositories."
    )


def test_filters_and_sort_mark_selection() -> None:
    filters = [LanguageCount("Go", 2), LanguageCount("Rust", 1)]

    assert render_language_filters(filters, "Go") == "Languages: All [Go (2)] Rust (1)"
    assert render_language_filters(filters, "All") == "Languages: [All] Go (2) Rust (1)"
    assert render_sort_selector(SortKey.UPDATED) == "Sort: Stars [Last updated] Size"


def test_detail_states() -> None:
    repo = create_mock_repository(1, "swr", "vercel")

    assert "Loading..." in render_detail(RepositoryDetail.loading(repo))
    assert "Error: boom" in render_detail(RepositoryDetail.failed(repo, "boom"))

    bundle = RepositoryBundle(
        languages={"TypeScript": 4096},
        contributors=[Contributor("alice", None, 12, None)],
        commits=[
            create_mock_commit(
                "c1",
                message="Fix cache",
                date=datetime(2024, 5, 6, 7, 8, tzinfo=timezone.utc),
            ),
            create_mock_commit("c2", message="", date=None),
        ],
    )
    text = render_detail(RepositoryDetail.ready(repo, bundle))

    assert "alice (12 commits)" in text
    assert "Fix cache" in text
    assert "2024-05-06 07:08" in text
    assert NO_MESSAGE in text
    assert "TypeScript: 4096 bytes" in text


def test_render_explorer(mock_client_with_user: MockGitHubClient, sample_repositories) -> None:
    explorer = Explorer(mock_client_with_user)

    async def scenario() -> None:
        explorer.start("vercel")
        await explorer.settle()
        await explorer.open_details(sample_repositories[0])

    asyncio.run(scenario())
    text = render_explorer(explorer)

    assert text.startswith("Search: vercel")
    assert "Vercel (vercel, user)" in text
    assert "Languages: [All] TypeScript (2)" in text
    assert "Repositories: 5 (showing 5)  Page 1 / 1" in text
    assert "next.js (vercel/next.js)" in text
    assert "Loading..." not in text


def test_render_explorer_error(mock_client: MockGitHubClient) -> None:
    explorer = Explorer(mock_client)

    asyncio.run(explorer.search("nobody"))

    text = render_explorer(explorer)
    assert "Error: GitHub API error 404" in text
    assert "No repositories." in text


def test_svg_sparkline() -> None:
    svg = render_svg_sparkline(42)

    assert svg.startswith('<svg width="100%" height="60" viewBox="0 0 200 40"')
    assert 'd="M0,' in svg
