"""Listing command handling for the untgz CLI."""

from untgz.cli_helpers import fail
from untgz.decompress import open_archive
from untgz.errors import UntgzError
from untgz.extractor import iter_headers


class ListCommand:
    """Prints the entries of an archive without extracting it."""

    @staticmethod
    def add_parser(subparsers) -> None:
        """Add list command parser to subparsers."""
        parser = subparsers.add_parser('list', help='List the entries of a .tar.gz archive')
        parser.add_argument('source', metavar='SOURCE', help='Archive to list')
        parser.set_defaults(func=ListCommand.execute)

    @staticmethod
    def execute(args) -> None:
        """Execute the list command."""
        try:
            with open_archive(args.source) as stream:
                for header in iter_headers(stream):
                    print(f"{header.size:>12}  {header.name}")
        except UntgzError as exc:
            fail(exc)
