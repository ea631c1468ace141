"""
Default .gitignore handling.

The default content is a fixed list of patterns; downstream tooling may
rely on it, so changes here are changes to the generated file.
"""

from __future__ import annotations

import logging
from pathlib import Path

LOG = logging.getLogger(__name__)

IGNORE_FILENAME = ".gitignore"

DEFAULT_IGNORE_PATTERNS = [
    "node_modules/",
    "dist/",
    ".vscode/",
    ".env",
    ".DS_Store",
    "package-lock.json",
    "npm-debug.log*",
    "coverage/",
]


def default_ignore_content() -> str:
    return "\n".join(DEFAULT_IGNORE_PATTERNS) + "\n"


def ensure_ignore_file(directory: str, force: bool = False) -> bool:
    """
    Write the default ignore file into directory if it is missing.

    An existing file is left untouched unless force is True. Returns
    True when the file was written.
    """

    path = Path(directory) / IGNORE_FILENAME
    if path.exists() and not force:
        LOG.info("%s already exists; leaving it unchanged", IGNORE_FILENAME)
        return False

    action = "Regenerating" if path.exists() else "Creating"
    LOG.info("%s %s", action, path)
    path.write_text(default_ignore_content(), encoding="utf-8")
    return True
