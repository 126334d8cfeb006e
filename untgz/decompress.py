"""Gzip decompression adapter.

The whole tar payload is decompressed into memory before parsing starts.
"""

from __future__ import annotations

import gzip
import io
import zlib
from pathlib import Path
from typing import Union

from .errors import DecompressionError, SourceNotFoundError
from .logging_config import get_logger


def decompress_bytes(data: bytes) -> io.BytesIO:
    """Decompress gzip data into a seekable in-memory stream."""
    try:
        payload = gzip.decompress(data)
    except (OSError, EOFError, zlib.error) as exc:
        raise DecompressionError(f"Invalid gzip data: {exc}") from exc
    return io.BytesIO(payload)


def open_archive(source: Union[str, Path]) -> io.BytesIO:
    """Read a `.tar.gz` file and return its decompressed tar bytes."""
    path = Path(source)
    if not path.is_file():
        raise SourceNotFoundError(f"Archive not found: {path}")
    try:
        data = path.read_bytes()
    except OSError as exc:
        raise SourceNotFoundError(f"Cannot read archive {path}: {exc}") from exc

    try:
        stream = decompress_bytes(data)
    except DecompressionError as exc:
        raise DecompressionError(f"{path}: {exc}") from exc
    get_logger(__name__).debug(
        "Decompressed %s: %d -> %d bytes", path, len(data), stream.getbuffer().nbytes
    )
    return stream
