"""Extraction command handling for the untgz CLI."""

from untgz.api import extract_archives
from untgz.cli_helpers import fail
from untgz.config import ExtractSettings
from untgz.errors import UntgzError


class ExtractCommand:
    """Extracts one or more archives into a shared output directory."""

    @staticmethod
    def add_parser(subparsers) -> None:
        """Add extract command parser to subparsers."""
        parser = subparsers.add_parser('extract', help='Extract .tar.gz archives')
        parser.add_argument('sources', nargs='+', metavar='SOURCE', help='Archive(s) to extract')
        parser.add_argument('-o', '--output', required=True, help='Output directory')
        parser.add_argument('--keep-going', action='store_true', default=None,
                            help='Continue with the next archive when one fails')
        parser.add_argument('--allow-unsafe-paths', action='store_true', default=None,
                            help='Write entries even if they resolve outside the output directory')
        parser.set_defaults(func=ExtractCommand.execute)

    @staticmethod
    def execute(args) -> None:
        """Execute the extract command."""
        settings = getattr(args, "settings", None)
        if not isinstance(settings, ExtractSettings):
            settings = ExtractSettings.from_env()
        if args.allow_unsafe_paths is not None:
            settings.allow_unsafe_paths = args.allow_unsafe_paths

        try:
            result = extract_archives(
                args.sources, args.output, keep_going=args.keep_going, settings=settings
            )
        except UntgzError as exc:
            fail(exc)
            return

        for source, summary in result.succeeded:
            print(f"{source}: {len(summary.files)} files, {len(summary.directories)} directories")
        if not result.ok:
            # Batch ran to the end; report the first failure's exit code.
            fail(result.failed[0][1])
