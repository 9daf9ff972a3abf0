"""
findstring.matcher
==================
Substring matching of extracted lines against the search terms.
"""

from __future__ import annotations

from typing import Iterable, Sequence

from findstring.config import SearchOptions
from findstring.extract import ExtractedLine


def matches(line: str, search_terms: Sequence[str], case_insensitive: bool = False) -> bool:
    """
    Return True if *line* contains any of *search_terms*.

    Case-insensitive mode compares :meth:`str.casefold` forms, so it also
    folds non-ASCII text (``"Straße"`` matches ``"STRASSE"``).
    """
    if case_insensitive:
        folded = line.casefold()
        return any(term.casefold() in folded for term in search_terms)
    return any(term in line for term in search_terms)


def filter_lines(lines: Iterable[ExtractedLine], options: SearchOptions) -> list[ExtractedLine]:
    """Keep the lines that match *options*, in their original order."""
    return [
        line for line in lines
        if matches(line.value, options.search_terms, options.case_insensitive)
    ]
