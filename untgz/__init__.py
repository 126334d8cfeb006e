"""untgz - extract gzip-compressed ustar archives.

Public helpers exported here:
* `extract_archive` / `extract_archives` for `.tar.gz` files on disk
* `extract` for an already decompressed tar stream
* `iter_headers` for listing entries without writing anything

The CLI (`untgz`) is a thin wrapper around the same functions.
"""

from .api import BatchResult, extract_archive, extract_archives
from .config import ExtractSettings
from .decompress import decompress_bytes, open_archive
from .errors import (
    DecompressionError,
    ExtractionIOError,
    SourceNotFoundError,
    TarParseError,
    TruncatedArchiveError,
    UnsafeEntryPathError,
    UntgzError,
)
from .extractor import ExtractionSummary, extract, iter_headers
from .header import TarHeader
from .logging_config import configure_logging

__version__ = "1.0.0"

__all__ = [
    "__version__",
    "BatchResult",
    "ExtractSettings",
    "ExtractionSummary",
    "TarHeader",
    "configure_logging",
    "decompress_bytes",
    "extract",
    "extract_archive",
    "extract_archives",
    "iter_headers",
    "open_archive",
    "DecompressionError",
    "ExtractionIOError",
    "SourceNotFoundError",
    "TarParseError",
    "TruncatedArchiveError",
    "UnsafeEntryPathError",
    "UntgzError",
]
