"""
Command-line interface for repo-publisher.

This module is responsible for argument parsing and delegating to the
workflow in the publisher module.
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from .config import DEFAULT_BRANCH, DEFAULT_REMOTE, VISIBILITIES, Config
from .errors import RepoPublisherError
from .logging_utils import configure_logging
from .publisher import publish_repository


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="repo-publisher",
        description=(
            "Initialize a git repository in the current directory (if needed), "
            "make an initial commit and publish it to a hosting service."
        ),
    )

    parser.add_argument(
        "--owner",
        help="Account or organization that owns the remote repository "
        "(default: $REPO_PUBLISHER_OWNER or a built-in default).",
    )
    parser.add_argument(
        "--repo-name",
        help="Repository name (default: name of the target directory).",
    )
    parser.add_argument(
        "--visibility",
        choices=VISIBILITIES,
        default="public",
        help="Visibility of the created repository (default: public).",
    )
    parser.add_argument(
        "--private",
        dest="visibility",
        action="store_const",
        const="private",
        help="Shorthand for --visibility private.",
    )
    parser.set_defaults(visibility="public")
    parser.add_argument(
        "-f",
        "--force",
        action="store_true",
        help="Overwrite an existing .gitignore with the default content.",
    )
    parser.add_argument(
        "-C",
        "--path",
        help="Directory to publish (default: current directory).",
    )
    parser.add_argument(
        "--host",
        help="Hosting service host used for the remote URL "
        "(default: $REPO_PUBLISHER_HOST or github.com).",
    )
    parser.add_argument(
        "--remote",
        dest="remote_name",
        default=DEFAULT_REMOTE,
        help=f"Name of the remote to add or reuse (default: {DEFAULT_REMOTE}).",
    )
    parser.add_argument(
        "--branch",
        default=DEFAULT_BRANCH,
        help=f"Primary branch name (default: {DEFAULT_BRANCH}).",
    )
    parser.add_argument(
        "--no-gh",
        dest="use_gh",
        action="store_false",
        help="Do not use the gh CLI; always add the remote and push with git.",
    )
    parser.set_defaults(use_gh=True)

    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase verbosity (can be specified multiple times).",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="count",
        default=0,
        help="Only report warnings and errors.",
    )

    return parser


def config_from_args(args: argparse.Namespace) -> Config:
    overrides = {}
    if args.owner is not None:
        overrides["owner"] = args.owner
    if args.path is not None:
        overrides["path"] = args.path
    if args.host is not None:
        overrides["host"] = args.host

    return Config(
        repo_name=args.repo_name,
        visibility=args.visibility,
        force=args.force,
        remote_name=args.remote_name,
        branch=args.branch,
        use_gh=args.use_gh,
        verbosity=args.verbose - args.quiet,
        **overrides,
    )


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_arg_parser()
    args = parser.parse_args(argv)

    config = config_from_args(args)
    configure_logging(verbosity=config.verbosity)

    try:
        publish_repository(config)
    except KeyboardInterrupt:
        # Graceful shutdown on Ctrl+C
        return 130
    except (RepoPublisherError, OSError) as exc:
        print(f"repo-publisher: error: {exc}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":  # pragma: no cover - manual invocation
    raise SystemExit(main())
