"""GitAnalyzer async resource clients."""

from gitanalyzer.async_clients.orgs import AsyncOrgsClient
from gitanalyzer.async_clients.repos import AsyncReposClient
from gitanalyzer.async_clients.users import AsyncUsersClient

__all__ = [
    "AsyncUsersClient",
    "AsyncOrgsClient",
    "AsyncReposClient",
]
