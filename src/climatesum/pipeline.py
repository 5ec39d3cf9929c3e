"""Driver that reads observation files and folds them into a store."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Tuple, Union
import logging

from .config import AnalyzerConfig
from .errors import FileOpenError, ParseError
from .io.parser import iter_observations
from .runtime.store import AccumulatorStore

logger = logging.getLogger(__name__)


@dataclass
class RunSummary:
    """Outcome of one analysis run: the store plus its diagnostics."""
    store: AccumulatorStore
    files_read: List[str] = field(default_factory=list)
    files_failed: List[Tuple[str, str]] = field(default_factory=list)
    records: int = 0
    malformed: int = 0

    @property
    def ok(self) -> bool:
        return not self.files_failed and self.malformed == 0


def analyze_stream(
    lines: Iterable[str],
    store: AccumulatorStore,
    source: str = "<stream>",
    invalid_numbers: str = "skip",
) -> Tuple[int, int]:
    """Fold every well-formed line into the store.

    Args:
        lines: Raw TDV lines
        store: Store to update in place
        source: Name used in diagnostics
        invalid_numbers: "skip" or "zero", see parse_line

    Returns:
        (records folded, malformed lines skipped)
    """
    records = 0
    malformed = 0
    for lineno, result in iter_observations(lines, invalid_numbers):
        if isinstance(result, ParseError):
            malformed += 1
            logger.debug(f"{source}:{lineno}: skipped malformed line ({result})")
            continue
        store.fold(result)
        records += 1
    if malformed:
        logger.warning(f"{source}: skipped {malformed} malformed line(s)")
    return records, malformed


def analyze_files(
    paths: Sequence[Union[str, Path]],
    config: Optional[AnalyzerConfig] = None,
    store: Optional[AccumulatorStore] = None,
) -> RunSummary:
    """Read each file in order and fold its observations into one store.

    Unreadable files are logged and skipped, unless config.missing_files is
    "halt", in which case FileOpenError is raised.

    Raises:
        FileOpenError: A file could not be opened and missing_files is "halt"
        CapacityExceededError: More regions than config.max_regions
    """
    config = config or AnalyzerConfig()
    if store is None:
        store = AccumulatorStore(max_regions=config.max_regions)
    summary = RunSummary(store=store)

    for path in paths:
        name = str(path)
        logger.info(f"Opening file: {name}")
        try:
            fh = open(path, "r", encoding=config.encoding, errors="replace")
        except OSError as e:
            reason = e.strerror or str(e)
            if config.missing_files == "halt":
                raise FileOpenError(name, reason) from e
            logger.error(f"Cannot open {name}: {reason}; skipping")
            summary.files_failed.append((name, reason))
            continue

        with fh:
            records, malformed = analyze_stream(
                fh, store, source=name, invalid_numbers=config.invalid_numbers
            )
        summary.files_read.append(name)
        summary.records += records
        summary.malformed += malformed
        logger.debug(f"{name}: {records} records")

    return summary
