"""
Streaming FASTQ reader and writer.

FASTQ is a text-based format for storing nucleotide sequences
along with quality scores. Each record consists of 4 lines:
1. Header line starting with '@' followed by sequence ID
2. Sequence line
3. '+' line (optionally followed by the header again)
4. Quality line (ASCII-encoded Phred scores)

Records keep their raw header and separator text so that reads which are not
re-oriented are written back exactly as they were read. Multi-line (wrapped)
FASTQ is not supported.

Author: Kevin R. Roy
"""

from dataclasses import dataclass
from typing import Iterator, Optional, TextIO

from ..errors import MalformedRecordError


@dataclass
class FastqRecord:
    """
    A single FASTQ record.

    Attributes:
        header: Header line without the leading '@'
        sequence: The nucleotide sequence
        quality: Quality string, one character per base
        separator: Text following '+' on the separator line (usually empty)
        newline: Line terminator the record was read with
    """
    header: str
    sequence: str
    quality: str
    separator: str = ""
    newline: str = "\n"

    def __len__(self) -> int:
        return len(self.sequence)

    @property
    def id(self) -> str:
        """Read identifier (first word of the header)."""
        parts = self.header.split(None, 1)
        return parts[0] if parts else ""

    @property
    def description(self) -> str:
        """Header text after the identifier."""
        parts = self.header.split(None, 1)
        return parts[1] if len(parts) > 1 else ""

    @property
    def description_start(self) -> int:
        """Offset in header just past the identifier."""
        read_id = self.id
        return self.header.find(read_id) + len(read_id)

    def __str__(self) -> str:
        nl = self.newline
        return f"@{self.header}{nl}{self.sequence}{nl}+{self.separator}{nl}{self.quality}"


def read_fastq(handle: TextIO) -> Iterator[FastqRecord]:
    """
    Read FASTQ records from an open text stream.

    Blank lines between records are skipped. Open the stream with
    newline='' to keep CRLF terminators; they are recorded per record and
    written back by write_fastq_record().

    Args:
        handle: Text stream positioned at the start of the FASTQ data

    Yields:
        FastqRecord objects, in file order

    Raises:
        MalformedRecordError: If a header does not start with '@', the
            separator does not start with '+', the stream ends mid-record,
            or the quality length differs from the sequence length
    """
    line_number = 0
    record_number = 0
    newline = "\n"

    def next_line() -> Optional[str]:
        nonlocal line_number, newline
        line = handle.readline()
        if not line:
            return None
        line_number += 1
        stripped = line.rstrip('\r\n')
        if len(stripped) < len(line):
            newline = line[len(stripped):]
        return stripped

    while True:
        header = next_line()
        if header is None:
            break
        if not header.strip():
            continue
        record_newline = newline

        record_number += 1
        if not header.startswith('@'):
            raise MalformedRecordError(
                f"Invalid FASTQ header (expected '@'): {header!r}",
                record_number=record_number,
                line_number=line_number,
            )

        sequence = next_line()
        separator = next_line()
        quality = next_line()

        if quality is None:
            raise MalformedRecordError(
                "FASTQ stream ended in the middle of a record",
                record_number=record_number,
                line_number=line_number,
            )

        if not separator.startswith('+'):
            raise MalformedRecordError(
                f"Invalid FASTQ separator line (expected '+'): {separator!r}",
                record_number=record_number,
                line_number=line_number - 1,
            )

        if len(quality) != len(sequence):
            raise MalformedRecordError(
                f"Quality length ({len(quality)}) does not match sequence length ({len(sequence)}) "
                f"for read '{header[1:]}'",
                record_number=record_number,
                line_number=line_number,
            )

        yield FastqRecord(
            header=header[1:],
            sequence=sequence,
            quality=quality,
            separator=separator[1:],
            newline=record_newline,
        )


def write_fastq_record(handle: TextIO, record: FastqRecord) -> None:
    """Write one FASTQ record as four unwrapped lines."""
    handle.write(str(record) + record.newline)
