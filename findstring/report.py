"""
findstring.report
=================
Plain-text report output: the file path, then each matching line indented.
"""

from __future__ import annotations

import logging
import sys
from typing import Iterable, Iterator, TextIO

from findstring.search import FileMatch

logger = logging.getLogger(__name__)

INDENT = "    "


def iter_report_lines(match: FileMatch) -> Iterator[str]:
    """Yield the report lines for one matching file."""
    yield match.path
    for line in match.lines:
        yield f"{INDENT}{line}"


def write_report(matches: Iterable[FileMatch], out: TextIO | None = None) -> int:
    """Print each match as soon as it is found and return the file count."""
    out = out if out is not None else sys.stdout
    count = 0
    for match in matches:
        for text in iter_report_lines(match):
            print(text, file=out)
        out.flush()
        count += 1
    logger.info("%d matching files", count)
    return count
