"""
findstring.classify
===================
Decides whether a file is worth handing to the extraction tools.

A file is a native executable when the filesystem marks it executable or its
first four bytes carry a Mach-O / fat / dyld-cache magic.  Failing that, it is
a Windows PE image when it is named ``*.exe`` / ``*.dll`` or starts with the
DOS ``MZ`` stub.  Everything else is left alone.

Magic values are assembled little-endian from the leading bytes
(``b0 | b1 << 8 | ...``).  Both byte orders of each magic are listed so the
check does not depend on the endianness of the image.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from enum import Enum

logger = logging.getLogger(__name__)


class FileKind(Enum):
    NATIVE_EXECUTABLE = "native"
    WINDOWS_PE        = "pe"
    UNCLASSIFIED      = "unclassified"


@dataclass(frozen=True, slots=True)
class ClassifiedFile:
    path: str
    kind: FileKind


# ---------------------------------------------------------------------------
# Signatures
# ---------------------------------------------------------------------------

MACHO_SIGNATURES: frozenset[int] = frozenset({
    0xFEEDFACE,   # MH_MAGIC
    0xCEFAEDFE,   # MH_CIGAM
    0xFEEDFACF,   # MH_MAGIC_64
    0xCFFAEDFE,   # MH_CIGAM_64
    0xCAFEBABE,   # FAT_MAGIC
    0xBEBAFECA,   # FAT_CIGAM
    0x64796C64,   # "dyld" shared cache
    0x646C7964,
})

PE_SIGNATURES: frozenset[int] = frozenset({
    0x5A4D,       # "MZ"
    0x4D5A,       # "ZM"
})

PE_EXTENSIONS: frozenset[str] = frozenset({"exe", "dll"})


def _read_magic(path: str, size: int) -> int | None:
    """Return the first *size* bytes of *path* as a little-endian integer."""
    try:
        with open(path, "rb") as fh:
            head = fh.read(size)
    except OSError as exc:
        logger.debug("Cannot read %s: %s", path, exc)
        return None
    if len(head) < size:
        return None
    return int.from_bytes(head, "little")


def _extension(path: str) -> str:
    return os.path.splitext(path)[1][1:]


def is_native_executable(path: str) -> bool:
    """True for files with the executable bit set or a Mach-O magic."""
    if os.access(path, os.X_OK):
        return True
    return _read_magic(path, 4) in MACHO_SIGNATURES


def is_windows_pe(path: str) -> bool:
    """True for ``.exe`` / ``.dll`` files and files starting with ``MZ``."""
    if _extension(path) in PE_EXTENSIONS:
        return True
    return _read_magic(path, 2) in PE_SIGNATURES


def classify(path: str) -> FileKind:
    if is_native_executable(path):
        return FileKind.NATIVE_EXECUTABLE
    if is_windows_pe(path):
        return FileKind.WINDOWS_PE
    return FileKind.UNCLASSIFIED
