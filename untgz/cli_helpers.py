"""Shared CLI helpers for untgz commands."""

import sys
from typing import Optional

from untgz.constants import ExitCodes
from untgz.errors import (
    DecompressionError,
    ExtractionIOError,
    SourceNotFoundError,
    TarParseError,
    UnsafeEntryPathError,
)


def exit_with_error(message: str, exit_code: int) -> None:
    """Print an error message and exit with the specified code."""
    print(f"Error: {message}", file=sys.stderr)
    sys.exit(exit_code)


def map_exception_to_exit_code(exc: Exception) -> Optional[int]:
    """Translate known exceptions to untgz exit codes."""
    if isinstance(exc, SourceNotFoundError):
        return ExitCodes.SOURCE_NOT_FOUND
    if isinstance(exc, DecompressionError):
        return ExitCodes.DECOMPRESSION_FAILED
    if isinstance(exc, TarParseError):
        return ExitCodes.PARSE_ERROR
    if isinstance(exc, ExtractionIOError):
        return ExitCodes.IO_ERROR
    if isinstance(exc, UnsafeEntryPathError):
        return ExitCodes.UNSAFE_PATH
    return None


def fail(exc: Exception) -> None:
    """Exit with the message and exit code matching `exc`."""
    exit_code = map_exception_to_exit_code(exc)
    if exit_code is None:
        exit_with_error(f"Unexpected failure: {exc}", ExitCodes.UNEXPECTED_ERROR)
    exit_with_error(str(exc), exit_code)
