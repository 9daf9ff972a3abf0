"""
findstring.search
=================
Scan orchestration: pre-flight checks, directory walk, and the per-file
classify → extract → match loop.

Public API
----------
check_objc_tool(options, tools)       — fail early if ``macho`` is needed but absent
check_directory(path)                 — fail early if the target isn't a directory
iter_files(root)                      → Iterator[str]
classify_tree(options)                → list[ClassifiedFile]
check_pe_tool(files, tools)           — fail if PE images were found without ``rpecli``
search(files, options, tools)         → Iterator[FileMatch]

The ``check_*`` functions raise :class:`FindStringError` subclasses.  Nothing
after them raises for a single bad file: it just doesn't show up.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Iterable, Iterator

from findstring.classify import ClassifiedFile, FileKind, classify
from findstring.config import INSTALL_HINTS, SearchOptions, ToolPaths
from findstring.extract import ExtractedLine, extract
from findstring.matcher import filter_lines

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------

class FindStringError(Exception):
    """Fatal problem with the environment; the scan cannot start."""


class ToolNotFoundError(FindStringError):
    def __init__(self, name: str, path: str) -> None:
        self.name = name
        self.path = path
        message = f"The {name} utility is not installed in {os.path.dirname(path) or path}"
        hint = INSTALL_HINTS.get(name)
        if hint:
            message += f"\nPlease run: {hint}"
        super().__init__(message)


class DirectoryNotFoundError(FindStringError):
    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Cannot enumerate directory {path}")


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------

@dataclass
class FileMatch:
    """A file with at least one matching line."""
    path:  str
    lines: list[ExtractedLine] = field(default_factory=list)


# ---------------------------------------------------------------------------
# Pre-flight
# ---------------------------------------------------------------------------

def check_objc_tool(options: SearchOptions, tools: ToolPaths) -> None:
    if options.include_objc_methods and not os.path.exists(tools.macho):
        raise ToolNotFoundError("macho", tools.macho)


def check_directory(path: str) -> None:
    if not os.path.isdir(path) or not os.access(path, os.R_OK | os.X_OK):
        raise DirectoryNotFoundError(path)


def check_pe_tool(files: Iterable[ClassifiedFile], tools: ToolPaths) -> None:
    if os.path.exists(tools.rpecli):
        return
    if any(f.kind == FileKind.WINDOWS_PE for f in files):
        raise ToolNotFoundError("rpecli", tools.rpecli)


# ---------------------------------------------------------------------------
# Enumeration
# ---------------------------------------------------------------------------

def _log_walk_error(exc: OSError) -> None:
    logger.warning("Skipping %s: %s", exc.filename, exc.strerror)


def iter_files(root: str) -> Iterator[str]:
    """
    Yield the absolute path of every regular file below *root*, depth first,
    in name order.
    """
    root = os.path.abspath(root)
    for dirpath, dirnames, filenames in os.walk(root, onerror=_log_walk_error):
        dirnames.sort()
        for name in sorted(filenames):
            path = os.path.join(dirpath, name)
            if os.path.isfile(path):
                yield path


def classify_tree(options: SearchOptions) -> list[ClassifiedFile]:
    """
    Classify every file under ``options.target_path``, dropping the ones that
    are neither native executables nor PE images.  With
    ``treat_all_as_executable`` every file is kept as a native executable.
    """
    files: list[ClassifiedFile] = []
    for path in iter_files(options.target_path):
        if options.treat_all_as_executable:
            kind = FileKind.NATIVE_EXECUTABLE
        else:
            kind = classify(path)
        if kind != FileKind.UNCLASSIFIED:
            files.append(ClassifiedFile(path, kind))
    logger.info("%d candidate files under %s", len(files), options.target_path)
    return files


# ---------------------------------------------------------------------------
# Scan
# ---------------------------------------------------------------------------

def search(
    files: Iterable[ClassifiedFile],
    options: SearchOptions,
    tools: ToolPaths,
) -> Iterator[FileMatch]:
    """Extract and match each file in turn, yielding the ones that hit."""
    for file in files:
        lines = filter_lines(extract(file, options, tools), options)
        if lines:
            yield FileMatch(file.path, lines)
