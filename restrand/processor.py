"""
Record stream processing: resolve each read's orientation and flip it if needed.

Both modes share one per-record lifecycle (read, resolve, decide, emit) and
one transform; they differ only in how the current orientation is resolved:

- FASTA mode looks the read up in an OrientationTable.
- FASTQ mode reads the 'orientation:' tag from the read's own header.

Records are processed strictly one at a time. The only state carried across
records is the read-only table and the run counters.

Author: Kevin R. Roy
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Iterable, Iterator, Optional, TextIO, Tuple, Union

from .config import ReorientConfig
from .io.fasta import FastaRecord, read_fasta, write_fasta_record
from .io.fastq import FastqRecord, read_fastq, write_fastq_record
from .io.files import open_input, open_output
from .orientation import Orientation
from .table import OrientationTable, load_orientation_table
from .tags import extract_orientation, rewrite_orientation
from .utils.sequence import reverse_complement, reverse_quality

logger = logging.getLogger(__name__)


class Action(Enum):
    """What to do with a record once its orientation is resolved."""
    KEEP = "keep"
    FLIP = "flip"
    DROP = "drop"


def decide_action(
    current: Optional[Orientation],
    target: Orientation,
    drop_missing: bool = False,
) -> Action:
    """
    Decide how to emit a record.

    Args:
        current: Resolved orientation of the record, or None if unresolved
        target: Orientation the output must be in
        drop_missing: Drop unresolved records instead of keeping them

    Returns:
        Action.KEEP, Action.FLIP or Action.DROP
    """
    if current is None:
        return Action.DROP if drop_missing else Action.KEEP
    if current is target:
        return Action.KEEP
    return Action.FLIP


@dataclass
class ReorientStats:
    """Counters for a single re-orientation run."""
    mode: str
    processed: int = 0
    flipped: int = 0
    kept: int = 0
    missing: int = 0  # FASTA: read absent from the table
    dropped: int = 0
    untagged: int = 0  # FASTQ: no usable orientation tag
    drop_missing: bool = False
    line_width: Optional[int] = None

    def summary(self) -> str:
        """One-line run report."""
        if self.mode == 'fasta':
            policy = "dropped" if self.drop_missing else "kept"
            return (
                f"processed={self.processed} flipped={self.flipped} "
                f"missing_in_table={self.missing} ({policy} mode) | wrap={self.line_width} cols"
            )
        return (
            f"processed={self.processed} flipped={self.flipped} "
            f"untagged={self.untagged}"
        )


class OrientationResolver(ABC):
    """Resolves the current orientation of a record."""

    @abstractmethod
    def resolve(self, record) -> Optional[Orientation]:
        """Return the orientation of record, or None if it cannot be determined."""


class TableResolver(OrientationResolver):
    """Resolve orientation by looking the read ID up in an OrientationTable."""

    def __init__(self, table: OrientationTable):
        self.table = table

    def resolve(self, record) -> Optional[Orientation]:
        return self.table.lookup(record.id)


class HeaderTagResolver(OrientationResolver):
    """Resolve orientation from an 'orientation:' tag in the header description.

    The read ID is never searched, so an ID that happens to contain
    'orientation:' does not count as a tag.
    """

    def resolve(self, record) -> Optional[Orientation]:
        return extract_orientation(record.description)


class FastaReorienter:
    """
    Re-orient FASTA reads to a target orientation using an orientation table.

    Reads whose table orientation differs from the target are
    reverse-complemented and get config.flipped_suffix appended to their
    header. Reads absent from the table are passed through unchanged, or
    dropped when config.drop_missing is set.

    Example:
        >>> table = OrientationTable.from_rows([("r1", "-")])
        >>> reorienter = FastaReorienter(table, ReorientConfig(flipped_suffix="/rc"))
        >>> with open("in.fa") as fin, open("out.fa", "w") as fout:
        ...     stats = reorienter.run(fin, fout)
    """

    def __init__(self, table: OrientationTable, config: Optional[ReorientConfig] = None):
        self.config = config or ReorientConfig()
        self.resolver = TableResolver(table)
        self.stats = ReorientStats(
            mode='fasta',
            drop_missing=self.config.drop_missing,
            line_width=self.config.line_width,
        )

    def process(self, records: Iterable[FastaRecord]) -> Iterator[Tuple[FastaRecord, str]]:
        """
        Re-orient a stream of FASTA records.

        Yields:
            (record, header_suffix) for every record to emit. The suffix is
            empty unless the record was flipped.
        """
        target = self.config.target_orientation

        for record in records:
            self.stats.processed += 1

            current = self.resolver.resolve(record)
            if current is None:
                self.stats.missing += 1
                logger.debug(f"Read '{record.id}' not in orientation table")

            action = decide_action(current, target, self.config.drop_missing)

            if action is Action.DROP:
                self.stats.dropped += 1
                continue

            if action is Action.FLIP:
                self.stats.flipped += 1
                flipped = FastaRecord(
                    id=record.id,
                    description=record.description,
                    sequence=reverse_complement(record.sequence),
                )
                yield flipped, self.config.flipped_suffix
            else:
                self.stats.kept += 1
                yield record, ""

    def run(self, in_handle: TextIO, out_handle: TextIO) -> ReorientStats:
        """Stream FASTA from in_handle to out_handle, returning run counters."""
        for record, suffix in self.process(read_fasta(in_handle)):
            write_fasta_record(out_handle, record, self.config.line_width, suffix)
        return self.stats


class FastqReorienter:
    """
    Normalize FASTQ reads to the forward orientation using header tags.

    Reads tagged 'orientation:-' (or a reverse synonym) are
    reverse-complemented, their quality string is reversed and the tag is
    rewritten to 'orientation:+', so the tag always describes the emitted
    read. Forward-tagged and untagged reads are written back verbatim.
    """

    target = Orientation.FORWARD

    def __init__(self, config: Optional[ReorientConfig] = None):
        self.config = config or ReorientConfig()
        self.resolver = HeaderTagResolver()
        self.stats = ReorientStats(mode='fastq')

    def flip(self, record: FastqRecord) -> FastqRecord:
        """Return the reverse complement of a tagged read with its tag rewritten."""
        header = rewrite_orientation(
            record.header, self.target, record.description_start
        ) + self.config.flipped_suffix

        # A separator repeating the header must keep matching it
        separator = record.separator
        if separator and separator == record.header:
            separator = header

        return FastqRecord(
            header=header,
            sequence=reverse_complement(record.sequence),
            quality=reverse_quality(record.quality),
            separator=separator,
            newline=record.newline,
        )

    def process(self, records: Iterable[FastqRecord]) -> Iterator[FastqRecord]:
        """Re-orient a stream of FASTQ records, yielding every record."""
        for record in records:
            self.stats.processed += 1

            current = self.resolver.resolve(record)
            if current is None:
                self.stats.untagged += 1
                logger.debug(f"Read '{record.id}' has no usable orientation tag")

            action = decide_action(current, self.target)

            if action is Action.FLIP:
                self.stats.flipped += 1
                yield self.flip(record)
            else:
                self.stats.kept += 1
                yield record

    def run(self, in_handle: TextIO, out_handle: TextIO) -> ReorientStats:
        """Stream FASTQ from in_handle to out_handle, returning run counters."""
        for record in self.process(read_fastq(in_handle)):
            write_fastq_record(out_handle, record)
        return self.stats


def reorient_fasta(
    fasta_path: Union[str, Path],
    table_path: Union[str, Path],
    output_path: Optional[Union[str, Path]] = None,
    config: Optional[ReorientConfig] = None,
) -> ReorientStats:
    """
    Re-orient a FASTA file using an orientation table.

    The table is loaded in full before the first read is processed.

    Args:
        fasta_path: Input FASTA (.gz supported); '-' for stdin
        table_path: Tab-delimited orientation table (.gz supported)
        output_path: Output FASTA (.gz supported); None or '-' for stdout
        config: Run configuration (defaults to ReorientConfig())

    Returns:
        ReorientStats for the run
    """
    config = config or ReorientConfig()

    table = load_orientation_table(
        table_path,
        id_column=config.id_column,
        orientation_column=config.orientation_column,
        on_duplicate=config.on_duplicate,
    )

    reorienter = FastaReorienter(table, config)
    with open_input(fasta_path) as fin, open_output(output_path) as fout:
        stats = reorienter.run(fin, fout)

    logger.info(stats.summary())
    return stats


def reorient_fastq(
    fastq_path: Union[str, Path],
    output_path: Optional[Union[str, Path]] = None,
    config: Optional[ReorientConfig] = None,
) -> ReorientStats:
    """
    Normalize a FASTQ file to the forward orientation using header tags.

    Args:
        fastq_path: Input FASTQ (.gz supported); '-' for stdin
        output_path: Output FASTQ (.gz supported); None or '-' for stdout
        config: Run configuration (only flipped_suffix applies)

    Returns:
        ReorientStats for the run
    """
    reorienter = FastqReorienter(config)
    with open_input(fastq_path) as fin, open_output(output_path) as fout:
        stats = reorienter.run(fin, fout)

    logger.info(stats.summary())
    return stats
