"""
Custom exception types used across repo-publisher.

The adapters raise these, the publisher catches the few it can recover
from, and the CLI turns everything else into a non-zero exit status.
"""

from __future__ import annotations


class RepoPublisherError(Exception):
    """Base class for all repo-publisher specific errors."""


class ConfigError(RepoPublisherError):
    """Raised when the run configuration is invalid."""


class ToolNotFoundError(RepoPublisherError):
    """Raised when a required executable is not available."""


class GitError(RepoPublisherError):
    """Raised when git operations fail."""


class PushError(GitError):
    """Raised when the final push fails and no fallback remains."""


class HostingCliError(RepoPublisherError):
    """Raised when a hosting CLI (gh) command fails."""
