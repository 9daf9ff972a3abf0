"""
findstring.extract
==================
Text extraction from classified files, by way of the external tools.

Each category maps to one tool invocation per image format:

==============  =====================  ========================
Category        Native (Mach-O)        Windows PE
==============  =====================  ========================
strings         ``strings PATH``       ``rpecli strings PATH``
symbols         ``nm PATH``            ``rpecli export PATH``
objc methods    ``macho -m PATH``      (none)
==============  =====================  ========================

A tool that is missing, fails, or prints something that isn't UTF-8 simply
contributes no lines.  Extraction never raises for a single file.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Sequence

from findstring.classify import ClassifiedFile, FileKind
from findstring.config import SearchOptions, ToolPaths
from findstring.process import run_command

logger = logging.getLogger(__name__)


class Source(Enum):
    """Where an extracted line came from, in report order."""
    STRINGS      = "strings"
    SYMBOLS      = "symbols"
    OBJC_METHODS = "objc"


@dataclass(frozen=True, slots=True)
class ExtractedLine:
    """A single line of tool output, tagged with its category."""
    value:  str
    source: Source = Source.STRINGS

    def __str__(self) -> str:
        return self.value.strip()


def get_lines(command: str, arguments: Sequence[str]) -> list[str]:
    """Run *command* and return its stdout split into lines, or ``[]``."""
    result = run_command(command, arguments)
    if result is None:
        return []
    if not result.ok:
        logger.debug("%s exited with status %d", command, result.exit_code)
        return []
    try:
        text = result.stdout.decode("utf-8")
    except UnicodeDecodeError:
        logger.debug("%s produced non UTF-8 output", command)
        return []
    return text.splitlines()


def get_strings(file: ClassifiedFile, tools: ToolPaths) -> list[str]:
    if file.kind == FileKind.WINDOWS_PE:
        return get_lines(tools.rpecli, ["strings", file.path])
    return get_lines(tools.strings, [file.path])


def get_symbols(file: ClassifiedFile, tools: ToolPaths) -> list[str]:
    if file.kind == FileKind.WINDOWS_PE:
        return get_lines(tools.rpecli, ["export", file.path])
    return get_lines(tools.nm, [file.path])


def get_objc_methods(file: ClassifiedFile, tools: ToolPaths) -> list[str]:
    # PE images carry no Objective-C runtime metadata
    if file.kind == FileKind.WINDOWS_PE:
        return []
    return get_lines(tools.macho, ["-m", file.path])


def extract(
    file: ClassifiedFile,
    options: SearchOptions,
    tools: ToolPaths,
) -> list[ExtractedLine]:
    """
    Collect every candidate line for *file*: strings first, then symbols and
    Objective-C methods when *options* ask for them.  Within a category the
    tool's output order is kept.
    """
    if file.kind == FileKind.UNCLASSIFIED:
        return []

    lines = [ExtractedLine(s, Source.STRINGS) for s in get_strings(file, tools)]
    if options.include_symbols:
        lines.extend(ExtractedLine(s, Source.SYMBOLS) for s in get_symbols(file, tools))
    if options.include_objc_methods:
        lines.extend(ExtractedLine(s, Source.OBJC_METHODS) for s in get_objc_methods(file, tools))

    logger.debug("%s: %d candidate lines", file.path, len(lines))
    return lines
