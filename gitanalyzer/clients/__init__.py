"""GitAnalyzer resource clients."""

from gitanalyzer.clients.orgs import OrgsClient
from gitanalyzer.clients.repos import ReposClient
from gitanalyzer.clients.users import UsersClient

__all__ = [
    "UsersClient",
    "OrgsClient",
    "ReposClient",
]
