"""GitAnalyzer type definitions.

This module exports all data model types used by the package.
"""

from gitanalyzer.types.details import (
    CommitSummary,
    Contributor,
    DetailStatus,
    RepositoryBundle,
    RepositoryDetail,
)
from gitanalyzer.types.profiles import AccountKind, Profile
from gitanalyzer.types.repos import (
    UNKNOWN_LANGUAGE,
    LanguageCount,
    RepositoryPage,
    RepositorySummary,
)
from gitanalyzer.types.view import ALL_LANGUAGES, PAGE_SIZE, SortKey, ViewState

__all__ = [
    # Profile types
    "AccountKind",
    "Profile",
    # Repository listing types
    "RepositorySummary",
    "LanguageCount",
    "RepositoryPage",
    "UNKNOWN_LANGUAGE",
    # Detail types
    "Contributor",
    "CommitSummary",
    "RepositoryBundle",
    "RepositoryDetail",
    "DetailStatus",
    # View state
    "ViewState",
    "SortKey",
    "ALL_LANGUAGES",
    "PAGE_SIZE",
]
