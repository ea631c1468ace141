"""
High-level orchestration for repo-publisher.

The publisher runs a fixed sequence of steps against one directory:
  - check that git is installed,
  - make sure the ignore file exists,
  - make sure the directory is a repository,
  - make sure at least one commit exists,
  - give the current branch the primary branch name, and
  - publish, through gh when it is logged in, otherwise by adding a
    remote and pushing with git.

Each setup step is idempotent, so running the publisher twice in the
same directory does not create extra commits or remotes.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from . import gh_adapter, git_adapter
from .config import Config
from .errors import GitError, HostingCliError, PushError
from .ignore_file import ensure_ignore_file

LOG = logging.getLogger(__name__)

INITIAL_COMMIT_MESSAGE = "Initial commit"
FALLBACK_COMMIT_MESSAGE = "chore: initial commit"


@dataclass
class PublishResult:
    """
    Outcome of the publish step.

    strategy is "gh" or "manual"; remote_added is only ever True for
    the manual strategy.
    """

    strategy: str
    url: str
    remote_added: bool = False


def publish_repository(config: Config) -> PublishResult:
    """
    Run the full setup-and-publish workflow for config.path.

    Raises ToolNotFoundError before touching the filesystem if git is
    missing, and PushError if the final push fails.
    """

    config.validate()
    cwd = config.path

    check_prerequisites(cwd)
    ensure_ignore_file(cwd, force=config.force)
    initialized = ensure_repository(cwd)
    committed = ensure_initial_commit(cwd)
    normalize_branch(config.branch, cwd, fresh=initialized or committed)

    if config.use_gh and git_adapter.get_remote_url(config.remote_name, cwd=cwd) is not None:
        LOG.info(
            "Remote %s already exists; skipping gh and pushing with git",
            config.remote_name,
        )
    elif config.use_gh:
        result = publish_with_gh(config)
        if result is not None:
            return result

    return publish_manually(config)


def check_prerequisites(cwd: Optional[str] = None) -> None:
    version = git_adapter.ensure_git_available(cwd=cwd)
    LOG.info("Found %s", version)


def ensure_repository(cwd: str) -> bool:
    """
    Initialize a repository in cwd unless one already exists.

    Returns True when a new repository was created.
    """

    if git_adapter.is_repository_root(cwd):
        LOG.info("Using existing git repository at %s", cwd)
        return False

    git_adapter.init_repo(cwd=cwd)
    LOG.info("Initialized new git repository at %s", cwd)
    return True


def ensure_initial_commit(cwd: str) -> bool:
    """
    Create an initial commit if the repository has none.

    A failed commit is retried once with a different message. If that
    fails too (for example, every file is ignored) the step logs a
    warning and returns False rather than failing the run.
    """

    if git_adapter.has_commits(cwd=cwd):
        LOG.info("Repository already has commits; skipping initial commit")
        return False

    git_adapter.stage_all(cwd=cwd)
    for message in (INITIAL_COMMIT_MESSAGE, FALLBACK_COMMIT_MESSAGE):
        try:
            git_adapter.create_commit(message, cwd=cwd)
        except GitError as exc:
            LOG.debug("Commit %r failed: %s", message, exc)
            continue
        LOG.info("Created initial commit: %s", message)
        return True

    LOG.warning("Could not create an initial commit (nothing to commit?); continuing")
    return False


def normalize_branch(branch: str, cwd: str, fresh: bool = False) -> bool:
    """
    Make sure the current branch is called branch.

    If branch already exists it is checked out and left where it is.
    Otherwise a detached HEAD gets a new branch and a differently named
    branch is renamed. Returns True when anything changed.
    """

    current = git_adapter.get_current_branch(cwd=cwd)
    if current == branch:
        LOG.info("Already on branch %s", branch)
        return False

    if git_adapter.branch_exists(branch, cwd=cwd):
        git_adapter.checkout_branch(branch, cwd=cwd)
        LOG.warning(
            "Branch %s already exists; switched to it from %s", branch, current or "detached HEAD"
        )
        return True

    if not current:
        git_adapter.checkout_new_branch(branch, cwd=cwd)
        LOG.info("Created branch %s from detached HEAD", branch)
        return True

    if not fresh:
        LOG.warning("Renaming existing branch %s to %s", current, branch)
    git_adapter.rename_branch(branch, cwd=cwd)
    LOG.info("Renamed branch %s to %s", current, branch)
    return True


def publish_with_gh(config: Config) -> Optional[PublishResult]:
    """
    Create and push the repository through gh.

    Returns None when gh is missing, not logged in, or fails, so the
    caller can fall back to the manual strategy.
    """

    if not gh_adapter.is_available():
        LOG.info("gh not found; adding the remote and pushing with git instead")
        return None

    if not gh_adapter.is_authenticated():
        LOG.warning(
            "gh is not authenticated; run 'gh auth login' to let it create "
            "repositories. Falling back to git push"
        )
        return None

    LOG.info("Creating %s repository %s with gh", config.visibility, config.full_name)
    try:
        url = gh_adapter.create_repo(
            config.full_name,
            visibility=config.visibility,
            source=config.path,
            remote=config.remote_name,
            push=True,
        )
    except HostingCliError as exc:
        LOG.warning("gh repo create failed (%s); falling back to git push", exc)
        return None

    url = url or config.web_url
    LOG.info("Published %s", url)
    return PublishResult(strategy="gh", url=url)


def publish_manually(config: Config) -> PublishResult:
    """
    Point the remote at the derived URL (if unset) and push the branch.

    An existing remote is never modified. Raises PushError with a hint
    when the push fails.
    """

    cwd = config.path
    remote = config.remote_name
    remote_added = False

    existing = git_adapter.get_remote_url(remote, cwd=cwd)
    if existing is None:
        git_adapter.add_remote(remote, config.remote_url, cwd=cwd)
        remote_added = True
        LOG.info("Added remote %s -> %s", remote, config.remote_url)
    elif existing != config.remote_url:
        LOG.info("Remote %s already points to %s; leaving it unchanged", remote, existing)
    else:
        LOG.info("Remote %s already configured", remote)

    push_target = existing or config.remote_url
    LOG.info("Pushing %s to %s", config.branch, remote)
    try:
        git_adapter.push_with_upstream(remote, config.branch, cwd=cwd)
    except PushError as exc:
        raise PushError(
            f"push to {push_target} failed; the repository may not exist yet. "
            f"Create {config.full_name} on {config.host} and re-run. ({exc})"
        ) from exc

    LOG.info("Pushed %s to %s", config.branch, push_target)
    return PublishResult(strategy="manual", url=push_target, remote_added=remote_added)
