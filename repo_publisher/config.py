"""
Configuration model for repo-publisher.

The CLI constructs a Config instance and passes it down into the
publisher so behavior can be adjusted without relying on global state.
Defaults for the owner and host can also come from the environment.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Optional

from .errors import ConfigError

DEFAULT_OWNER = "octocat"
DEFAULT_HOST = "github.com"
DEFAULT_REMOTE = "origin"
DEFAULT_BRANCH = "main"

VISIBILITIES = ("public", "private")

OWNER_ENV = "REPO_PUBLISHER_OWNER"
HOST_ENV = "REPO_PUBLISHER_HOST"


def _default_owner() -> str:
    return os.environ.get(OWNER_ENV) or DEFAULT_OWNER


def _default_host() -> str:
    return os.environ.get(HOST_ENV) or DEFAULT_HOST


@dataclass(frozen=True)
class Config:
    """
    Top-level configuration for a repo-publisher run.

    repo_name defaults to the leaf name of path; the remote URL is
    always derived from host, owner and that name.
    """

    owner: str = field(default_factory=_default_owner)
    repo_name: Optional[str] = None
    visibility: str = "public"
    force: bool = False
    path: str = field(default_factory=os.getcwd)
    host: str = field(default_factory=_default_host)
    remote_name: str = DEFAULT_REMOTE
    branch: str = DEFAULT_BRANCH
    use_gh: bool = True
    verbosity: int = 0

    @property
    def resolved_repo_name(self) -> str:
        if self.repo_name:
            return self.repo_name
        return os.path.basename(os.path.abspath(self.path).rstrip(os.sep))

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.resolved_repo_name}"

    @property
    def web_url(self) -> str:
        return f"https://{self.host}/{self.full_name}"

    @property
    def remote_url(self) -> str:
        return f"{self.web_url}.git"

    def validate(self) -> None:
        """
        Raise ConfigError if the configuration cannot produce a valid run.
        """

        if not os.path.isdir(self.path):
            raise ConfigError(f"{self.path!r} is not a directory")
        if self.visibility not in VISIBILITIES:
            raise ConfigError(
                f"invalid visibility {self.visibility!r}; "
                f"expected one of: {', '.join(VISIBILITIES)}"
            )
        if not self.owner.strip():
            raise ConfigError("owner must not be empty")
        if not self.resolved_repo_name.strip():
            raise ConfigError(
                f"cannot derive a repository name from {self.path!r}; pass --repo-name"
            )
        if not self.branch.strip():
            raise ConfigError("branch name must not be empty")
