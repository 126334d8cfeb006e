"""
Programmatic entry points for untgz.

`extract_archive` handles one `.tar.gz` file; `extract_archives` applies it to
several sources sharing one output directory.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional, Tuple, Union

from .config import ExtractSettings
from .decompress import open_archive
from .errors import UntgzError
from .extractor import ExtractionSummary, extract
from .logging_config import get_logger

Source = Union[str, Path]


@dataclass
class BatchResult:
    """Per-archive outcome of a batch run, in the order the sources were given."""

    succeeded: List[Tuple[Path, ExtractionSummary]] = field(default_factory=list)
    failed: List[Tuple[Path, UntgzError]] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failed


def extract_archive(
    source: Source,
    output_dir: Source,
    settings: Optional[ExtractSettings] = None,
) -> ExtractionSummary:
    """Decompress `source` and extract it into `output_dir`."""
    settings = settings or ExtractSettings.from_env()
    log = get_logger(__name__)
    log.info("Extracting %s into %s", source, output_dir)
    stream = open_archive(source)
    with stream:
        return extract(stream, output_dir, allow_unsafe_paths=settings.allow_unsafe_paths)


def extract_archives(
    sources: Iterable[Source],
    output_dir: Source,
    *,
    keep_going: Optional[bool] = None,
    settings: Optional[ExtractSettings] = None,
) -> BatchResult:
    """Extract each source in turn.

    Without `keep_going` the first failure propagates. With it, failures are
    logged and collected so the remaining archives still run.
    """
    settings = settings or ExtractSettings.from_env()
    if keep_going is None:
        keep_going = settings.keep_going
    log = get_logger(__name__)
    result = BatchResult()

    for source in sources:
        path = Path(source)
        try:
            result.succeeded.append((path, extract_archive(path, output_dir, settings)))
        except UntgzError as exc:
            if not keep_going:
                raise
            log.error("Skipping %s: %s", path, exc)
            result.failed.append((path, exc))

    return result
