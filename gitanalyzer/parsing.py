"""Conversion of GitHub REST payloads into GitAnalyzer data models.

Shared by the sync and async resource clients. Optional fields that are
absent or null become None (or 0 for counters); they are never an error.
"""

from datetime import datetime
from typing import Any

from gitanalyzer.exceptions import ResponseFormatError
from gitanalyzer.types.details import CommitSummary, Contributor
from gitanalyzer.types.profiles import AccountKind, Profile
from gitanalyzer.types.repos import RepositorySummary

UNKNOWN_AUTHOR = "unknown"


def parse_timestamp(value: Any) -> datetime | None:
    """Parse an ISO-8601 timestamp, returning None when it is missing or malformed."""
    if not isinstance(value, str) or not value:
        return None
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None


def parse_profile(data: Any, kind: AccountKind) -> Profile:
    """Build a Profile from a /users/{name} or /orgs/{name} payload."""
    if not isinstance(data, dict) or "login" not in data:
        raise ResponseFormatError(f"Unexpected {kind.value} payload")

    return Profile(
        login=data["login"],
        kind=kind,
        name=data.get("name"),
        avatar_url=data.get("avatar_url"),
        bio=data.get("bio") or data.get("description"),
        location=data.get("location"),
        followers=data.get("followers") or 0,
        public_repos=data.get("public_repos") or 0,
        html_url=data.get("html_url"),
    )


def parse_repository(data: dict[str, Any]) -> RepositorySummary:
    """Build a RepositorySummary from one entry of a repository listing."""
    owner = data.get("owner") or {}
    return RepositorySummary(
        id=data["id"],
        name=data["name"],
        full_name=data["full_name"],
        description=data.get("description"),
        language=data.get("language"),
        stargazers_count=data.get("stargazers_count") or 0,
        pushed_at=data.get("pushed_at"),
        size=data.get("size") or 0,
        html_url=data.get("html_url") or "",
        owner=owner.get("login"),
    )


def parse_repositories(data: Any) -> list[RepositorySummary]:
    """
    Build the repository working set from a listing payload.

    Repository ids are unique within the result; a repeated id keeps the
    first occurrence.
    """
    if data is None:
        return []
    if not isinstance(data, list):
        raise ResponseFormatError("Expected a list of repositories")

    seen: set[int] = set()
    repos: list[RepositorySummary] = []
    for item in data:
        try:
            repo = parse_repository(item)
        except (KeyError, TypeError, AttributeError, ValueError) as e:
            raise ResponseFormatError(f"Malformed repository entry: {e!r}") from e
        if repo.id in seen:
            continue
        seen.add(repo.id)
        repos.append(repo)
    return repos


def parse_languages(data: Any) -> dict[str, int]:
    """Language name to byte count, in the order GitHub returned them."""
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ResponseFormatError("Expected a language byte-count mapping")
    try:
        return {str(name): int(size) for name, size in data.items()}
    except (TypeError, ValueError) as e:
        raise ResponseFormatError(f"Malformed language byte count: {e!r}") from e


def parse_contributors(data: Any) -> list[Contributor]:
    if data is None:
        return []
    if not isinstance(data, list):
        raise ResponseFormatError("Expected a list of contributors")

    try:
        return [
            Contributor(
                login=item.get("login") or item.get("name") or UNKNOWN_AUTHOR,
                avatar_url=item.get("avatar_url"),
                contributions=item.get("contributions") or 0,
                html_url=item.get("html_url"),
            )
            for item in data
        ]
    except (TypeError, AttributeError) as e:
        raise ResponseFormatError(f"Malformed contributor entry: {e!r}") from e


def first_line(message: str | None) -> str:
    """First line of a commit message, or an empty string."""
    if not message:
        return ""
    return message.split("\n", 1)[0]


def parse_commits(data: Any) -> list[CommitSummary]:
    """
    Reduce a commit listing to summaries.

    The author is the linked GitHub login when there is one, otherwise the
    git author name, otherwise "unknown".
    """
    if data is None:
        return []
    if not isinstance(data, list):
        raise ResponseFormatError("Expected a list of commits")

    commits = []
    for item in data:
        try:
            commits.append(_parse_commit(item))
        except (TypeError, AttributeError) as e:
            raise ResponseFormatError(f"Malformed commit entry: {e!r}") from e
    return commits


def _parse_commit(item: dict[str, Any]) -> CommitSummary:
    commit = item.get("commit") or {}
    git_author = commit.get("author") or {}
    linked_author = item.get("author") or {}
    return CommitSummary(
        sha=item.get("sha", ""),
        message=first_line(commit.get("message")),
        author=linked_author.get("login") or git_author.get("name") or UNKNOWN_AUTHOR,
        date=parse_timestamp(git_author.get("date")),
        html_url=item.get("html_url"),
    )
