"""
Git integration for repo-publisher.

This module is responsible for every interaction with the git CLI:
querying and initializing the repository, committing, naming the
branch, configuring remotes and pushing. Callers get either a plain
value back or a GitError carrying git's stderr.
"""

from __future__ import annotations

import logging
import os
import shutil
import subprocess
from typing import Optional

from .errors import GitError, PushError, ToolNotFoundError

LOG = logging.getLogger(__name__)

GIT = "git"


def _run_git(
    args: list[str],
    cwd: Optional[str] = None,
) -> subprocess.CompletedProcess[str]:
    """
    Run a git command and return the completed process.

    All git invocations go through this helper so that error handling
    and logging are centralized. A non-zero exit status raises GitError.
    """

    cmd = [GIT, *args]
    LOG.debug("Running git command: %s", " ".join(cmd))
    try:
        completed = subprocess.run(
            cmd,
            cwd=cwd,
            check=False,
            text=True,
            capture_output=True,
        )
    except OSError as exc:  # noqa: BLE001
        raise GitError(f"failed to execute git: {exc}") from exc

    if completed.returncode != 0:
        stderr = (completed.stderr or "").strip()
        LOG.debug("git stderr: %s", stderr)
        message = f"git command failed: {' '.join(cmd)}"
        if stderr:
            message = f"{message}: {stderr}"
        raise GitError(message)

    return completed


def ensure_git_available(cwd: Optional[str] = None) -> str:
    """
    Return the installed git version, or raise ToolNotFoundError.
    """

    if shutil.which(GIT) is None:
        raise ToolNotFoundError("git is not installed or not on PATH")
    try:
        version = _run_git(["--version"], cwd=cwd).stdout.strip()
    except GitError as exc:
        raise ToolNotFoundError(f"git is not usable: {exc}") from exc
    return version


def _normalize_path(path: str) -> str:
    return os.path.normcase(os.path.realpath(path))


def is_repository_root(cwd: str) -> bool:
    """
    Return True if cwd is the top level of a git work tree.

    A subdirectory of some enclosing repository does not count.
    """

    try:
        toplevel = _run_git(["rev-parse", "--show-toplevel"], cwd=cwd).stdout.strip()
    except GitError:
        return False
    return bool(toplevel) and _normalize_path(toplevel) == _normalize_path(cwd)


def init_repo(cwd: Optional[str] = None) -> None:
    _run_git(["init"], cwd=cwd)


def has_commits(cwd: Optional[str] = None) -> bool:
    """
    Return True if HEAD resolves to a commit.
    """

    try:
        _run_git(["rev-parse", "--verify", "--quiet", "HEAD"], cwd=cwd)
    except GitError:
        return False
    return True


def stage_all(cwd: Optional[str] = None) -> None:
    """
    Stage tracked and untracked files, honoring the ignore file.
    """

    _run_git(["add", "-A"], cwd=cwd)


def create_commit(message: str, cwd: Optional[str] = None) -> None:
    """
    Create a git commit with the given commit message.
    """

    _run_git(["commit", "-m", message], cwd=cwd)


def get_current_branch(cwd: Optional[str] = None) -> str:
    """
    Return the current branch name, or "" when HEAD is detached.
    """

    return _run_git(["branch", "--show-current"], cwd=cwd).stdout.strip()


def rename_branch(name: str, cwd: Optional[str] = None) -> None:
    """
    Rename the current branch to name.

    Fails if a branch called name already exists.
    """

    _run_git(["branch", "-m", name], cwd=cwd)


def branch_exists(name: str, cwd: Optional[str] = None) -> bool:
    try:
        _run_git(["rev-parse", "--verify", "--quiet", f"refs/heads/{name}"], cwd=cwd)
    except GitError:
        return False
    return True


def checkout_branch(name: str, cwd: Optional[str] = None) -> None:
    _run_git(["checkout", name], cwd=cwd)


def checkout_new_branch(name: str, cwd: Optional[str] = None) -> None:
    """
    Create branch name at HEAD and check it out.

    Fails if the branch already exists.
    """

    _run_git(["checkout", "-b", name], cwd=cwd)


def get_remote_url(name: str, cwd: Optional[str] = None) -> Optional[str]:
    """
    Return the URL of the named remote, or None if it is not configured.
    """

    try:
        return _run_git(["remote", "get-url", name], cwd=cwd).stdout.strip()
    except GitError:
        return None


def add_remote(name: str, url: str, cwd: Optional[str] = None) -> None:
    _run_git(["remote", "add", name, url], cwd=cwd)


def push_with_upstream(remote: str, branch: str, cwd: Optional[str] = None) -> None:
    """
    Push branch to remote and set it as the upstream.

    Raises PushError so callers can tell a failed push apart from other
    git failures.
    """

    try:
        _run_git(["push", "-u", remote, branch], cwd=cwd)
    except GitError as exc:
        raise PushError(str(exc)) from exc
