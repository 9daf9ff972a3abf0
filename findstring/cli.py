"""
findstring.cli
==============
Command-line entry point.

Usage
-----
    find-string [--insensitive] [--symbols] [--objc] [--all] PATH STRING...

Exit status is 0 when the scan completes (whether or not anything matched),
1 when the environment is unusable (missing directory or tool) or stdout is
closed early, and 2 on a usage error.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import Sequence

from findstring import __description__, __version__
from findstring.config import SearchOptions, ToolPaths
from findstring.report import write_report
from findstring.search import (
    FindStringError,
    check_directory,
    check_objc_tool,
    check_pe_tool,
    classify_tree,
    search,
)

logger = logging.getLogger(__name__)

EXIT_OK    = 0
EXIT_ERROR = 1


def _search_term(value: str) -> str:
    if not value:
        raise argparse.ArgumentTypeError("search strings must not be empty")
    return value


def _silence_stdout() -> None:
    """Point stdout at /dev/null so the final flush at exit can't fail again."""
    try:
        fd = sys.stdout.fileno()
    except (AttributeError, OSError):
        return
    devnull = os.open(os.devnull, os.O_WRONLY)
    os.dup2(devnull, fd)
    os.close(devnull)


def build_argparser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="find-string",
        description=__description__,
    )
    parser.add_argument("--insensitive", action="store_true",
                        help="Performs a case-insensitive search.")
    parser.add_argument("--symbols", action="store_true",
                        help="Also search in the symbols table.")
    parser.add_argument("--objc", action="store_true",
                        help="Also search in the Objective-C methods table.")
    parser.add_argument("--all", action="store_true",
                        help="Search every file, not only executables.")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Log progress and tool failures to stderr.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("path", metavar="PATH",
                        help="The directory to search.")
    parser.add_argument("strings", metavar="STRING", nargs="+", type=_search_term,
                        help="The strings to search for.")
    return parser


def run(options: SearchOptions, tools: ToolPaths) -> int:
    """Run one scan.  Raises :class:`FindStringError` if it can't start."""
    check_objc_tool(options, tools)
    check_directory(options.target_path)
    files = classify_tree(options)
    check_pe_tool(files, tools)
    write_report(search(files, options, tools))
    return EXIT_OK


def main(argv: Sequence[str] | None = None) -> int:
    args = build_argparser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )
    options = SearchOptions.from_args(args)
    try:
        return run(options, ToolPaths.from_environment())
    except FindStringError as exc:
        logger.error("%s", exc)
        return EXIT_ERROR
    except BrokenPipeError:
        # reader went away (e.g. piped into head)
        _silence_stdout()
        return EXIT_ERROR
