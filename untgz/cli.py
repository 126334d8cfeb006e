"""
Command Line Interface for untgz.

Provides CLI commands for extracting and listing .tar.gz archives.
"""

import argparse
import sys
from typing import List, Optional

from .cli_commands import COMMANDS
from .config import ExtractSettings
from .constants import ExitCodes
from .logging_config import configure_logging, get_logger


def create_parser() -> argparse.ArgumentParser:
    """Create the main argument parser."""
    parser = argparse.ArgumentParser(
        prog='untgz',
        description='Extract gzip-compressed ustar archives'
    )
    parser.add_argument('-v', '--verbose', action='store_true', help='Log every extracted entry')
    parser.add_argument('--log-level', help='Log level (default: $UNTGZ_LOG_LEVEL or INFO)')

    subparsers = parser.add_subparsers(dest='command', help='Available commands')
    for command in COMMANDS:
        command.add_parser(subparsers)

    return parser


def main(args: Optional[List[str]] = None) -> None:
    """
    Main entry point for the CLI.

    Args:
        args: Command line arguments (uses sys.argv if None)
    """
    parser = create_parser()

    if args is None:
        args = sys.argv[1:]

    if not args:
        parser.print_help()
        sys.exit(ExitCodes.OK)

    parsed_args = parser.parse_args(args)
    settings = ExtractSettings.from_env()
    if parsed_args.verbose:
        settings.log_level = "DEBUG"
    elif parsed_args.log_level:
        settings.log_level = parsed_args.log_level.upper()
    parsed_args.settings = settings

    configure_logging(settings.log_level)
    get_logger(__name__).debug("Resolved settings: %s", settings)

    if hasattr(parsed_args, 'func'):
        parsed_args.func(parsed_args)
    else:
        parser.print_help()
        sys.exit(ExitCodes.OK)


if __name__ == '__main__':
    main()
