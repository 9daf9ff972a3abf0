"""
Tests for findstring.classify
=============================
Run with:  pytest tests/test_classify.py -v
"""

from __future__ import annotations

import pytest

from findstring.classify import (
    MACHO_SIGNATURES,
    FileKind,
    classify,
    is_native_executable,
    is_windows_pe,
)


def _write(path, data: bytes, mode: int = 0o644) -> str:
    path.write_bytes(data)
    path.chmod(mode)
    return str(path)


# ---------------------------------------------------------------------------
# Native executables
# ---------------------------------------------------------------------------

class TestNativeExecutable:
    def test_executable_bit_wins_regardless_of_content(self, tmp_path):
        path = _write(tmp_path / "script", b"just some text", mode=0o755)
        assert classify(path) == FileKind.NATIVE_EXECUTABLE

    @pytest.mark.parametrize("magic", sorted(MACHO_SIGNATURES), ids=hex)
    def test_magic_without_executable_bit(self, tmp_path, magic):
        path = _write(tmp_path / "image", magic.to_bytes(4, "little") + b"\x00" * 28)
        assert classify(path) == FileKind.NATIVE_EXECUTABLE

    def test_real_macho_64_header(self, tmp_path):
        # MH_MAGIC_64 as written by a little-endian linker
        path = _write(tmp_path / "libfoo.dylib", b"\xcf\xfa\xed\xfe\x0c\x00\x00\x01")
        assert is_native_executable(path)

    def test_signature_list_is_complete(self):
        assert MACHO_SIGNATURES == {
            0xFEEDFACE, 0xCEFAEDFE, 0xFEEDFACF, 0xCFFAEDFE,
            0xCAFEBABE, 0xBEBAFECA, 0x64796C64, 0x646C7964,
        }

    def test_too_short_for_magic(self, tmp_path):
        path = _write(tmp_path / "short", b"\xcf\xfa\xed")
        assert not is_native_executable(path)

    def test_native_takes_precedence_over_pe(self, tmp_path):
        path = _write(tmp_path / "tool.exe", b"MZ\x90\x00", mode=0o755)
        assert classify(path) == FileKind.NATIVE_EXECUTABLE


# ---------------------------------------------------------------------------
# Windows PE
# ---------------------------------------------------------------------------

class TestWindowsPE:
    @pytest.mark.parametrize("name", ["setup.exe", "helper.dll"])
    def test_extension(self, tmp_path, name):
        path = _write(tmp_path / name, b"not really a PE file")
        assert classify(path) == FileKind.WINDOWS_PE

    @pytest.mark.parametrize("head", [b"MZ", b"ZM"])
    def test_dos_stub_magic(self, tmp_path, head):
        path = _write(tmp_path / "payload.bin", head + b"\x90\x00\x03\x00")
        assert classify(path) == FileKind.WINDOWS_PE

    def test_extension_is_case_sensitive(self, tmp_path):
        path = _write(tmp_path / "SETUP.EXE", b"plain")
        assert not is_windows_pe(path)
        assert classify(path) == FileKind.UNCLASSIFIED

    def test_missing_file_still_matches_by_extension(self, tmp_path):
        assert classify(str(tmp_path / "gone.dll")) == FileKind.WINDOWS_PE

    def test_single_byte_file(self, tmp_path):
        path = _write(tmp_path / "m", b"M")
        assert not is_windows_pe(path)


# ---------------------------------------------------------------------------
# Unclassified
# ---------------------------------------------------------------------------

class TestUnclassified:
    def test_plain_text(self, tmp_path):
        path = _write(tmp_path / "notes.txt", b"hello world\n")
        assert classify(path) == FileKind.UNCLASSIFIED

    def test_empty_file(self, tmp_path):
        path = _write(tmp_path / "empty", b"")
        assert classify(path) == FileKind.UNCLASSIFIED

    def test_missing_file(self, tmp_path):
        assert classify(str(tmp_path / "gone")) == FileKind.UNCLASSIFIED

    def test_repeatable(self, tmp_path):
        path = _write(tmp_path / "image", b"\xce\xfa\xed\xfe")
        assert classify(path) == classify(path) == FileKind.NATIVE_EXECUTABLE
