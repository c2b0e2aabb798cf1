"""View-state data models."""

from dataclasses import dataclass
from enum import Enum

ALL_LANGUAGES = "All"
PAGE_SIZE = 12


class SortKey(str, Enum):
    """Total orders offered by the sort selector."""

    STARS = "stars"
    UPDATED = "updated"
    SIZE = "size"

    @property
    def label(self) -> str:
        return _SORT_LABELS[self]


_SORT_LABELS = {
    SortKey.STARS: "Stars",
    SortKey.UPDATED: "Last updated",
    SortKey.SIZE: "Size",
}


@dataclass
class ViewState:
    """User-controlled view over the repository set, independent of fetched data."""

    filter_language: str = ALL_LANGUAGES
    sort_key: SortKey = SortKey.STARS
    page: int = 1
    page_size: int = PAGE_SIZE
