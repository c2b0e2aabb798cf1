"""
Profile & repository explorer.

The Explorer is the single UI unit: it owns the query, the resolved profile
and repository set, the view state and the detail panel, and exposes the
derived repository page. All of it lives on one asyncio event loop.

Asynchronous sequences (profile resolution, detail fetches) can be
overtaken by newer ones. Each sequence takes a generation number when it
starts and only commits its result while that number is still current;
anything older is dropped.
"""

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from gitanalyzer.debounce import DEBOUNCE_DELAY, Debouncer
from gitanalyzer.detail import DetailFetcher
from gitanalyzer.exceptions import GitAnalyzerError, ProfileResolutionError
from gitanalyzer.listing import (
    QUICK_FILTER_LIMIT,
    clamp_page,
    derive_view,
    filter_repositories,
    language_aggregate,
    top_languages,
    total_pages,
)
from gitanalyzer.logging import log_explorer_event
from gitanalyzer.resolver import ProfileResolver
from gitanalyzer.types.details import RepositoryDetail
from gitanalyzer.types.profiles import Profile
from gitanalyzer.types.repos import LanguageCount, RepositoryPage, RepositorySummary
from gitanalyzer.types.view import ALL_LANGUAGES, PAGE_SIZE, SortKey, ViewState

if TYPE_CHECKING:
    from gitanalyzer.async_client import AsyncGitHubClient

DEFAULT_QUERY = "vercel"

Listener = Callable[["ExplorerState"], None]


@dataclass
class ExplorerState:
    """Everything the presentation layer renders."""

    query: str = ""
    loading: bool = False
    error: str | None = None
    resolution_error: ProfileResolutionError | None = None
    profile: Profile | None = None
    repositories: list[RepositorySummary] = field(default_factory=list)
    view: ViewState = field(default_factory=ViewState)
    detail: RepositoryDetail | None = None


class Explorer:
    """
    Search an account, browse its repositories and drill into one of them.

    Example:
        ```python
        async with AsyncGitHubClient(token=token) as client:
            explorer = Explorer(client)
            explorer.start("vercel")
            await explorer.settle()
            print(explorer.page.items)
        ```
    """

    def __init__(
        self,
        client: "AsyncGitHubClient",
        *,
        debounce_delay: float = DEBOUNCE_DELAY,
        page_size: int = PAGE_SIZE,
    ) -> None:
        """
        Args:
            client: Async GitHub client (or a compatible mock)
            debounce_delay: Idle time in seconds before a typed query is searched
            page_size: Repositories per page
        """
        self.client = client
        self.resolver = ProfileResolver(client)
        self.fetcher = DetailFetcher(client)
        self.debouncer = Debouncer(self.search, delay=debounce_delay)
        self.state = ExplorerState(view=ViewState(page_size=page_size))
        self._listeners: list[Listener] = []
        self._query_generation = 0
        self._detail_generation = 0

    # ------------------------------------------------------------------
    # Observation
    # ------------------------------------------------------------------

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """
        Call listener with the state after every change.

        Returns:
            A function that removes the listener
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self.state)

    # ------------------------------------------------------------------
    # Query input
    # ------------------------------------------------------------------

    def start(self, initial_query: str = DEFAULT_QUERY) -> None:
        """Set the initial query and search it at once unless it is empty."""
        self.state.query = initial_query
        self.debouncer.start(initial_query)
        self._notify()

    def set_query(self, value: str) -> None:
        """Record a keystroke; the search runs once input has been idle."""
        self.state.query = value
        self.debouncer.push(value)
        self._notify()

    def submit(self) -> None:
        """Trim the current query, as the search button does."""
        self.set_query(self.state.query.strip())

    async def settle(self) -> None:
        """Wait until every triggered search has finished."""
        await self.debouncer.drain()

    async def search(self, name: str) -> None:
        """
        Resolve name and replace the profile and repository set.

        Prior profile, repositories, detail and error are cleared and the page
        is reset before any request is made. Failures end up in state.error.
        """
        self._query_generation += 1
        generation = self._query_generation
        # Any detail fetch still in flight belongs to the previous account.
        self._detail_generation += 1

        self.state.loading = True
        self.state.error = None
        self.state.resolution_error = None
        self.state.profile = None
        self.state.repositories = []
        self.state.detail = None
        self.state.view.page = 1
        log_explorer_event("resolve_start", name=name, generation=generation)
        self._notify()

        try:
            resolution = await self.resolver.resolve(name)
        except ProfileResolutionError as e:
            if generation != self._query_generation:
                log_explorer_event("resolve_discarded", name=name, generation=generation)
                return
            self.state.error = e.message
            self.state.resolution_error = e
            log_explorer_event("resolve_failed", name=name, error=e.message)
        else:
            if generation != self._query_generation:
                log_explorer_event("resolve_discarded", name=name, generation=generation)
                return
            self.state.profile = resolution.profile
            self.state.repositories = resolution.repositories
            log_explorer_event(
                "resolve_done",
                name=name,
                kind=resolution.profile.kind.value,
                repositories=len(resolution.repositories),
            )
        finally:
            if generation == self._query_generation:
                self.state.loading = False
                self._notify()

    # ------------------------------------------------------------------
    # Detail panel
    # ------------------------------------------------------------------

    async def open_details(self, repo: RepositorySummary) -> None:
        """
        Show repo in the detail panel and fetch its detail.

        The panel shows a loading state at once. If another repository is
        selected before this fetch completes, this result is discarded.
        """
        self._detail_generation += 1
        generation = self._detail_generation

        self.state.detail = RepositoryDetail.loading(repo)
        log_explorer_event("detail_start", repo=repo.full_name, generation=generation)
        self._notify()

        try:
            bundle = await self.fetcher.fetch(repo.full_name)
        except GitAnalyzerError as e:
            if generation != self._detail_generation:
                log_explorer_event("detail_discarded", repo=repo.full_name, generation=generation)
                return
            self.state.detail = RepositoryDetail.failed(repo, e.message)
            log_explorer_event("detail_failed", repo=repo.full_name, error=e.message)
        else:
            if generation != self._detail_generation:
                log_explorer_event("detail_discarded", repo=repo.full_name, generation=generation)
                return
            self.state.detail = RepositoryDetail.ready(repo, bundle)
            log_explorer_event("detail_done", repo=repo.full_name)
        self._notify()

    def close_details(self) -> None:
        """Hide the detail panel; a fetch still in flight is discarded."""
        self._detail_generation += 1
        self.state.detail = None
        self._notify()

    # ------------------------------------------------------------------
    # View controls
    # ------------------------------------------------------------------

    def select_language(self, language: str = ALL_LANGUAGES) -> None:
        """
        Filter the list to one primary language ("All" clears the filter).

        The page is kept, clamped to the new page count.
        """
        self.state.view.filter_language = language
        self._clamp_page()
        self._notify()

    def set_sort(self, key: SortKey | str) -> None:
        """Order the list by stars, last update or size. The page is kept."""
        self.state.view.sort_key = SortKey(key)
        self._notify()

    def next_page(self) -> None:
        self.state.view.page = clamp_page(self.state.view.page + 1, self.total_pages)
        self._notify()

    def previous_page(self) -> None:
        self.state.view.page = clamp_page(self.state.view.page - 1, self.total_pages)
        self._notify()

    def _clamp_page(self) -> None:
        self.state.view.page = clamp_page(self.state.view.page, self.total_pages)

    # ------------------------------------------------------------------
    # Derived views
    # ------------------------------------------------------------------

    @property
    def languages(self) -> list[LanguageCount]:
        """Full language aggregate of the repository set."""
        return language_aggregate(self.state.repositories)

    @property
    def quick_filters(self) -> list[LanguageCount]:
        """The most common languages, offered next to the "All" control."""
        return top_languages(self.languages, QUICK_FILTER_LIMIT)

    @property
    def total_pages(self) -> int:
        filtered = filter_repositories(self.state.repositories, self.state.view.filter_language)
        return total_pages(len(filtered), self.state.view.page_size)

    @property
    def page(self) -> RepositoryPage:
        """The visible page of filtered, sorted repositories."""
        return derive_view(self.state.repositories, self.state.view)

    async def aclose(self) -> None:
        """Drop any pending keystroke and wait for running searches."""
        self.debouncer.cancel()
        await self.debouncer.drain()
