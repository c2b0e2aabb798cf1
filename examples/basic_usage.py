#!/usr/bin/env python3
"""
Basic GitAnalyzer usage example.

This example exercises the offline parts of the package: the exception
hierarchy and the repository list derivations.
Run with: python examples/basic_usage.py
"""

from gitanalyzer import GitAnalyzerError, NotFoundError, ProfileResolutionError
from gitanalyzer.exceptions import error_for_status
from gitanalyzer.listing import (
    derive_view,
    language_aggregate,
    spark_path,
    top_languages,
    trend_values,
)
from gitanalyzer.testing import create_mock_repository
from gitanalyzer.types import SortKey, ViewState

print("=== GitAnalyzer Basic Usage Example ===\n")

# 1. Test exception hierarchy
print("1. Testing exception classes...")
error = error_for_status(404, '{"message":"Not Found"}')
assert isinstance(error, NotFoundError)
print(f"   404 maps to {type(error).__name__}: {error}")

user_error = error_for_status(404, "user missing")
org_error = error_for_status(404, "org missing")
try:
    raise ProfileResolutionError("nobody", user_error, org_error)
except GitAnalyzerError as e:
    print(f"   Caught {type(e).__name__}: {e.message}")
    print(f"   Both failures kept: {[str(err) for err in e.errors]}")

print("\n   OK: Exception classes working\n")

# 2. Language aggregate
print("2. Aggregating languages...")
repos = [
    create_mock_repository(i, f"repo-{i}", language=lang, stargazers_count=stars, size=size)
    for i, (lang, stars, size) in enumerate(
        [
            ("Python", 10, 500),
            ("Go", 250, 90),
            ("Python", 3, 12000),
            (None, 40, 7),
            ("Rust", 250, 300),
        ],
        start=1,
    )
]
aggregate = language_aggregate(repos)
for entry in top_languages(aggregate):
    print(f"   {entry.language}: {entry.count}")
assert aggregate[0].language == "Python"

print("\n   OK: Aggregate ordered by count\n")

# 3. Filter, sort, paginate
print("3. Deriving a page...")
for key in SortKey:
    page = derive_view(repos, ViewState(sort_key=key, page_size=2))
    names = [repo.name for repo in page.items]
    print(f"   {key.label:<13} page {page.page}/{page.total_pages}: {names}")

python_only = derive_view(repos, ViewState(filter_language="Python", page=9))
print(f"   Python filter, page 9 requested -> page {python_only.page} of {python_only.total_pages}")
assert python_only.page == 1

print("\n   OK: Views derived\n")

# 4. Decorative trend
print("4. Decorative trend...")
values = trend_values(250)
print(f"   values: {values}")
print(f"   path:   {spark_path(values)}")
assert trend_values(250) == values

print("\n=== All examples completed ===")
