"""ustar header record.

Only the `name` and `size` fields are interpreted; the rest of the 512-byte
block (mode, uid, gid, mtime, checksum, typeflag, linkname, magic, version,
uname, gname, devmajor/devminor, prefix) is carried along untouched.
"""

from __future__ import annotations

import re
import string
from dataclasses import dataclass
from typing import Optional, Tuple

from .constants import BLOCK_SIZE, DIRECTORY_SUFFIX, NAME_FIELD, SIZE_FIELD
from .errors import TarParseError, TruncatedArchiveError

_TRIM_CHARS = "\0" + string.whitespace
_OCTAL_RE = re.compile(r"[0-7]+")


def read_field(block: bytes, field: Tuple[int, int]) -> bytes:
    """Slice a fixed-offset field out of a header block."""
    start, length = field
    return block[start:start + length]


def parse_name(raw: bytes, offset: int = 0) -> str:
    """Decode a null-terminated name field, trimming trailing whitespace.

    Anything after the first NUL is padding or leftover bytes and is ignored.
    """
    raw = raw.split(b"\0", 1)[0]
    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise TarParseError(f"Entry name is not valid text: {raw!r}", offset) from exc
    return text.rstrip(_TRIM_CHARS)


def parse_octal(raw: bytes, offset: int = 0) -> int:
    """Parse an ASCII octal number padded with NULs or spaces."""
    text = raw.decode("ascii", errors="replace").strip(_TRIM_CHARS)
    if not _OCTAL_RE.fullmatch(text):
        raise TarParseError(f"Invalid octal size field: {raw!r}", offset)
    return int(text, 8)


@dataclass(frozen=True)
class TarHeader:
    """The interpreted part of one 512-byte ustar header."""

    name: str
    size: int
    offset: int = 0

    @property
    def is_directory(self) -> bool:
        return self.name.endswith(DIRECTORY_SUFFIX)

    @property
    def data_offset(self) -> int:
        return self.offset + BLOCK_SIZE

    @classmethod
    def parse(cls, block: bytes, offset: int = 0) -> Optional["TarHeader"]:
        """Parse a header block.

        Returns None for the end-of-archive sentinel, i.e. a block whose name
        field is empty or blank. The sentinel may be shorter than a full block;
        any other short block means the archive was cut off.
        """
        name = parse_name(read_field(block, NAME_FIELD), offset)
        if not name.strip():
            return None
        if len(block) < BLOCK_SIZE:
            raise TruncatedArchiveError(
                f"Archive ends inside the header of {name!r}: "
                f"got {len(block)} of {BLOCK_SIZE} bytes at offset {offset}"
            )
        size = parse_octal(read_field(block, SIZE_FIELD), offset)
        return cls(name=name, size=size, offset=offset)


def padding_for(position: int) -> int:
    """Bytes needed to advance `position` to the next block boundary."""
    padding = BLOCK_SIZE - (position % BLOCK_SIZE)
    if padding == BLOCK_SIZE:
        return 0
    return padding
