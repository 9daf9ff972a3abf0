"""Shared fixtures: fake external tools and a scratch directory to scan."""

from __future__ import annotations

import pytest

from findstring.config import ToolPaths


@pytest.fixture
def make_tool(tmp_path):
    """Return a factory that writes an executable ``/bin/sh`` script."""
    bin_dir = tmp_path / "bin"
    bin_dir.mkdir()

    def _make(name: str, body: str) -> str:
        path = bin_dir / name
        path.write_text(f"#!/bin/sh\n{body}\n")
        path.chmod(0o755)
        return str(path)

    return _make


@pytest.fixture
def scan_dir(tmp_path):
    path = tmp_path / "scan"
    path.mkdir()
    return path


@pytest.fixture
def tools(make_tool) -> ToolPaths:
    """Fake tools that echo a tag followed by their arguments."""
    return ToolPaths(
        strings=make_tool("strings", 'echo "str $1"'),
        nm=make_tool("nm", 'echo "sym $1"'),
        macho=make_tool("macho", 'echo "objc $1 $2"'),
        rpecli=make_tool("rpecli", 'echo "pe $1 $2"'),
    )


@pytest.fixture
def tool_env(tools, monkeypatch) -> ToolPaths:
    """Point the ``FINDSTRING_*`` variables at the fake tools."""
    monkeypatch.setenv("FINDSTRING_STRINGS", tools.strings)
    monkeypatch.setenv("FINDSTRING_NM", tools.nm)
    monkeypatch.setenv("FINDSTRING_MACHO", tools.macho)
    monkeypatch.setenv("FINDSTRING_RPECLI", tools.rpecli)
    return tools
