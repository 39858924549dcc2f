"""Command line interface for building project skeletons."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

from . import __version__
from .scaffold import build_skeleton


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="python-skeleton",
        description="Create a standardized Python project skeleton",
    )
    parser.add_argument(
        "project",
        metavar="PROJECT_NAME",
        help="Name of the root directory of the project. It must be Train-Case.",
    )
    parser.add_argument(
        "package",
        metavar="PKG_NAME",
        help="Name of the package. It must be snake_case.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Report every build step")
    parser.add_argument(
        "--doc",
        action="store_true",
        help="Create a `docs` directory for the documentation of the package",
    )
    parser.add_argument(
        "-d",
        "--directory",
        type=Path,
        default=None,
        help="Existing directory where the project is created (default: current directory)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _configure_logging(verbose: bool) -> None:
    # Failures reach the user only through the ERROR records of the build.
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    outcome = build_skeleton(
        args.project,
        args.package,
        verbose=args.verbose,
        include_docs=args.doc,
        base_dir=args.directory,
    )
    if outcome.ok:
        print(f"Your project is ready to work! ({outcome.root})")
        return 0

    print("Oops, check your inputs and try again.")
    return 1


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
