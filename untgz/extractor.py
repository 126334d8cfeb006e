"""
Tar extraction for untgz.

Walks an uncompressed ustar byte stream entry by entry:
* parse a 512-byte header
* create the entry's parent directories (or the directory itself)
* copy the entry's content verbatim
* skip block-alignment padding up to the next header

Entries are processed strictly in archive order; any failure aborts the walk
and leaves what was already written on disk.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import BinaryIO, Iterator, List, Optional, Union

from .constants import BLOCK_SIZE
from .errors import ExtractionIOError, TruncatedArchiveError, UnsafeEntryPathError
from .header import TarHeader, padding_for
from .logging_config import get_logger

PathLike = Union[str, "os.PathLike[str]"]


@dataclass
class ExtractionSummary:
    """What a successful extraction wrote."""

    output_dir: Path
    files: List[str] = field(default_factory=list)
    directories: List[str] = field(default_factory=list)

    @property
    def entry_count(self) -> int:
        return len(self.files) + len(self.directories)


class ArchiveCursor:
    """Forward-only reader that tracks its own position in the tar stream.

    Skips are read-and-discard so the stream never has to support seeking.
    """

    def __init__(self, stream: BinaryIO):
        self._stream = stream
        self.position = 0

    def read(self, size: int) -> bytes:
        """Read up to `size` bytes; fewer only at end of stream."""
        chunks = []
        remaining = size
        while remaining > 0:
            chunk = self._stream.read(remaining)
            if not chunk:
                break
            chunks.append(chunk)
            remaining -= len(chunk)
        data = b"".join(chunks)
        self.position += len(data)
        return data

    def read_exact(self, size: int, what: str) -> bytes:
        data = self.read(size)
        if len(data) != size:
            raise TruncatedArchiveError(
                f"Archive ends inside {what}: expected {size} bytes, got {len(data)}"
            )
        return data

    def skip(self, size: int) -> int:
        """Discard up to `size` bytes and return how many were skipped."""
        return len(self.read(size))

    def next_header(self) -> Optional[TarHeader]:
        offset = self.position
        block = self.read(BLOCK_SIZE)
        if not block:
            return None
        return TarHeader.parse(block, offset)

    def align(self) -> None:
        self.skip(padding_for(self.position))


def iter_headers(stream: BinaryIO) -> Iterator[TarHeader]:
    """Yield every header in the stream without touching the filesystem."""
    cursor = ArchiveCursor(stream)
    while True:
        header = cursor.next_header()
        if header is None:
            return
        if not header.is_directory:
            skipped = cursor.skip(header.size)
            if skipped != header.size:
                raise TruncatedArchiveError(
                    f"Archive ends inside the content of {header.name!r}: "
                    f"expected {header.size} bytes, got {skipped}"
                )
        cursor.align()
        yield header


def resolve_target(output_dir: Path, name: str, allow_unsafe_paths: bool = False) -> Path:
    """Join an entry name onto the output root, rejecting escapes unless allowed.

    Absolute names are joined under the root like relative ones; only `..`
    segments can leave it.
    """
    target = output_dir / name.lstrip("/")
    if allow_unsafe_paths:
        return target
    root = output_dir.resolve()
    resolved = target.resolve()
    if resolved != root and root not in resolved.parents:
        raise UnsafeEntryPathError(name)
    return target


def _materialize(header: TarHeader, target: Path, cursor: ArchiveCursor) -> None:
    if header.is_directory:
        try:
            target.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise ExtractionIOError(f"Cannot create directory {target}: {exc}") from exc
        return

    data = cursor.read_exact(header.size, f"the content of {header.name!r}")
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        with open(target, "wb") as out_file:
            out_file.write(data)
    except OSError as exc:
        raise ExtractionIOError(f"Cannot write {target}: {exc}") from exc


def extract(
    stream: BinaryIO,
    output_dir: PathLike,
    *,
    allow_unsafe_paths: bool = False,
) -> ExtractionSummary:
    """Extract every entry of an uncompressed tar stream into `output_dir`.

    Existing files are overwritten. Directories named by file paths are created
    even when the archive has no explicit entry for them.

    Raises:
        TarParseError: a header's size field is not octal text
        TruncatedArchiveError: the stream ends inside a header or content
        UnsafeEntryPathError: an entry escapes `output_dir`
        ExtractionIOError: a directory or file cannot be written
    """
    log = get_logger(__name__)
    root = Path(output_dir)
    summary = ExtractionSummary(output_dir=root)
    cursor = ArchiveCursor(stream)

    while True:
        header = cursor.next_header()
        if header is None:
            break

        target = resolve_target(root, header.name, allow_unsafe_paths)
        log.debug("Extracting %s (%d bytes) to %s", header.name, header.size, target)
        _materialize(header, target, cursor)
        if header.is_directory:
            summary.directories.append(header.name)
        else:
            summary.files.append(header.name)

        cursor.align()

    log.info(
        "Extracted %d files and %d directories into %s",
        len(summary.files), len(summary.directories), root,
    )
    return summary
