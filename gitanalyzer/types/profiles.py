"""Account profile data models."""

from dataclasses import dataclass
from enum import Enum


class AccountKind(str, Enum):
    """Which endpoint family resolved a profile."""

    USER = "user"
    ORGANIZATION = "organization"


@dataclass(frozen=True)
class Profile:
    """Resolved metadata for a user or organization account."""

    login: str
    kind: AccountKind
    name: str | None
    avatar_url: str | None
    bio: str | None
    location: str | None
    followers: int
    public_repos: int
    html_url: str | None

    @property
    def display_name(self) -> str:
        """Display name, falling back to the login."""
        return self.name or self.login
