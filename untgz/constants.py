"""
Constants and exit codes for untgz.
"""

# ustar block layout
BLOCK_SIZE = 512
NAME_FIELD = (0, 100)
SIZE_FIELD = (124, 12)

DIRECTORY_SUFFIX = "/"


class ExitCodes:
    """Exit codes for different error conditions."""
    OK = 0
    SOURCE_NOT_FOUND = 1
    DECOMPRESSION_FAILED = 2
    PARSE_ERROR = 3
    IO_ERROR = 4
    UNSAFE_PATH = 5
    UNEXPECTED_ERROR = 6
