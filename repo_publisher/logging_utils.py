"""
Logging helpers for repo-publisher.

Every workflow step reports a status line at INFO, so INFO is the
default level here; -q hides those lines and -v adds the git and gh
command lines.
"""

from __future__ import annotations

import logging


def configure_logging(verbosity: int) -> None:
    """
    Configure the root logger based on a verbosity count.

    verbosity < 0  -> WARNING
    verbosity == 0 -> INFO
    verbosity >= 1 -> DEBUG
    """

    if verbosity < 0:
        level = logging.WARNING
    elif verbosity == 0:
        level = logging.INFO
    else:
        level = logging.DEBUG

    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
    )
