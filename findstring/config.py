"""
findstring.config
=================
Run configuration: what to search for, and where the external tools live.

Tool locations
--------------
Each tool is looked up in this order:

1.  ``FINDSTRING_<TOOL>`` environment variable (used verbatim)
2.  The usual install location (``/usr/bin`` or Homebrew's ``/opt/homebrew/bin``)
3.  The first match on ``PATH``

If none of these exists the default location is kept, and the tool reports
as missing when it is needed.
"""

from __future__ import annotations

import argparse
import logging
import os
import shutil
from dataclasses import dataclass

logger = logging.getLogger(__name__)

# name -> (environment variable, default location)
_TOOL_DEFAULTS: dict[str, tuple[str, str]] = {
    "strings": ("FINDSTRING_STRINGS", "/usr/bin/strings"),
    "nm":      ("FINDSTRING_NM",      "/usr/bin/nm"),
    "macho":   ("FINDSTRING_MACHO",   "/opt/homebrew/bin/macho"),
    "rpecli":  ("FINDSTRING_RPECLI",  "/opt/homebrew/bin/rpecli"),
}

# Homebrew formulae for the tools that don't ship with the OS
INSTALL_HINTS: dict[str, str] = {
    "macho":  "brew install macmade/tap/macho",
    "rpecli": "brew install macmade/tap/rpecli",
}


@dataclass(frozen=True)
class SearchOptions:
    """Everything parsed from the command line.  Never mutated."""
    target_path:             str
    search_terms:            tuple[str, ...]
    case_insensitive:        bool = False
    include_symbols:         bool = False
    include_objc_methods:    bool = False
    treat_all_as_executable: bool = False

    def __post_init__(self) -> None:
        if not self.search_terms:
            raise ValueError("at least one search term is required")

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> SearchOptions:
        return cls(
            target_path=args.path,
            search_terms=tuple(args.strings),
            case_insensitive=args.insensitive,
            include_symbols=args.symbols,
            include_objc_methods=args.objc,
            treat_all_as_executable=args.all,
        )


def resolve_tool(name: str) -> str:
    """Return the location to use for the external tool *name*."""
    env_var, default = _TOOL_DEFAULTS[name]
    override = os.environ.get(env_var)
    if override:
        return override
    if os.path.exists(default):
        return default
    return shutil.which(name) or default


@dataclass(frozen=True)
class ToolPaths:
    """Resolved locations of the four external inspection tools."""
    strings: str = "/usr/bin/strings"
    nm:      str = "/usr/bin/nm"
    macho:   str = "/opt/homebrew/bin/macho"
    rpecli:  str = "/opt/homebrew/bin/rpecli"

    @classmethod
    def from_environment(cls) -> ToolPaths:
        tools = cls(**{name: resolve_tool(name) for name in _TOOL_DEFAULTS})
        logger.debug("Using tools: %s", tools)
        return tools
