"""
Hosting CLI integration for repo-publisher.

The GitHub CLI (gh) is optional. When it is installed and logged in it
can create the remote repository and push in a single call; otherwise
the publisher falls back to plain git.
"""

from __future__ import annotations

import logging
import shutil
import subprocess
from typing import Optional

from .errors import HostingCliError

LOG = logging.getLogger(__name__)

GH = "gh"


def _run_gh(
    args: list[str],
    cwd: Optional[str] = None,
) -> subprocess.CompletedProcess[str]:
    """
    Run a gh command and return the completed process.

    A non-zero exit status raises HostingCliError with gh's stderr.
    """

    cmd = [GH, *args]
    LOG.debug("Running gh command: %s", " ".join(cmd))
    try:
        completed = subprocess.run(
            cmd,
            cwd=cwd,
            check=False,
            text=True,
            capture_output=True,
        )
    except OSError as exc:  # noqa: BLE001
        raise HostingCliError(f"failed to execute gh: {exc}") from exc

    if completed.returncode != 0:
        stderr = (completed.stderr or "").strip()
        LOG.debug("gh stderr: %s", stderr)
        message = f"gh command failed: {' '.join(cmd)}"
        if stderr:
            message = f"{message}: {stderr}"
        raise HostingCliError(message)

    return completed


def is_available() -> bool:
    return shutil.which(GH) is not None


def is_authenticated() -> bool:
    """
    Return True if `gh auth status` reports a logged-in account.
    """

    try:
        _run_gh(["auth", "status"])
    except HostingCliError:
        return False
    return True


def create_repo(
    full_name: str,
    visibility: str,
    source: str,
    remote: str,
    push: bool = True,
) -> Optional[str]:
    """
    Create full_name on the hosting service from the local source directory.

    gh adds remote to the local repository and, when push is True, pushes
    the current branch. Returns the repository URL gh prints, if any.
    """

    args = [
        "repo",
        "create",
        full_name,
        f"--{visibility}",
        "--source",
        source,
        "--remote",
        remote,
    ]
    if push:
        args.append("--push")

    output = _run_gh(args, cwd=source).stdout
    for line in output.splitlines():
        line = line.strip()
        if line.startswith("https://"):
            return line
    return None
