"""
Custom exception classes for untgz.
"""


class UntgzError(Exception):
    """Base exception class for untgz errors."""
    pass


class SourceNotFoundError(UntgzError):
    """Raised when the archive path does not exist or cannot be read."""
    pass


class DecompressionError(UntgzError):
    """Raised when the archive is not valid gzip data."""
    pass


class TarParseError(UntgzError):
    """Raised when a tar header field cannot be decoded."""

    def __init__(self, message: str, offset: int = 0):
        self.offset = offset
        super().__init__(f"{message} (header at offset {offset})")


class ExtractionIOError(UntgzError):
    """Raised when an entry cannot be materialized on disk."""
    pass


class TruncatedArchiveError(ExtractionIOError):
    """Raised when the tar stream ends inside a header or content region."""
    pass


class UnsafeEntryPathError(UntgzError):
    """Raised when an entry name would be written outside the output root."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unsafe tar member path detected: {name!r}")
