"""Shared fixtures for building tar and tar.gz archives in tests."""

from __future__ import annotations

import gzip
import io
import os
import sys
import tarfile
from pathlib import Path
from typing import Callable, Dict, Optional

import pytest

# Ensure project root is on sys.path
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

BLOCK = 512


def _header(name: str, size: int = 0, size_field: Optional[bytes] = None) -> bytes:
    block = bytearray(BLOCK)
    encoded = name.encode("utf-8")
    block[0:len(encoded)] = encoded
    block[100:108] = b"0000644\0"
    block[108:116] = b"0001750\0"
    block[116:124] = b"0001750\0"
    if size_field is None:
        size_field = f"{size:011o}\0".encode("ascii")
    block[124:124 + len(size_field)] = size_field
    block[136:148] = b"14677130000\0"
    block[148:156] = b"        "
    block[156:157] = b"5" if name.endswith("/") else b"0"
    block[257:263] = b"ustar\0"
    block[263:265] = b"00"
    return bytes(block)


def _entry(name: str, data: bytes = b"", size_field: Optional[bytes] = None) -> bytes:
    """A raw header plus content plus padding, as a tar writer lays it out."""
    padding = -len(data) % BLOCK
    return _header(name, len(data), size_field) + data + b"\0" * padding


@pytest.fixture
def tar_header() -> Callable[..., bytes]:
    return _header


@pytest.fixture
def tar_entry() -> Callable[..., bytes]:
    return _entry


@pytest.fixture
def end_blocks() -> bytes:
    return b"\0" * (2 * BLOCK)


@pytest.fixture
def make_targz(tmp_path) -> Callable[..., Path]:
    """Write a ustar .tar.gz with the given entries; None marks a directory."""

    def build(entries: Dict[str, Optional[bytes]], name: str = "archive.tar.gz"):
        buffer = io.BytesIO()
        with tarfile.open(fileobj=buffer, mode="w", format=tarfile.USTAR_FORMAT) as tar:
            for entry_name, data in entries.items():
                info = tarfile.TarInfo(entry_name)
                if data is None:
                    info.type = tarfile.DIRTYPE
                    info.mode = 0o755
                    tar.addfile(info)
                else:
                    info.size = len(data)
                    tar.addfile(info, io.BytesIO(data))
        path = tmp_path / name
        path.write_bytes(gzip.compress(buffer.getvalue()))
        return path

    return build
