"""
Streaming FASTA reader and writer.

Records are yielded one at a time so arbitrarily large read sets can be
re-oriented in constant memory. Output sequences are wrapped at a fixed width.

Author: Kevin R. Roy
"""

from dataclasses import dataclass
from typing import Iterator, List, Optional, TextIO

from ..errors import MalformedRecordError

# Conventional FASTA wrap width
FASTA_WRAP_WIDTH = 60


@dataclass
class FastaRecord:
    """
    A single FASTA record.

    Attributes:
        id: Sequence identifier (first word after '>')
        description: Remainder of the header line after the identifier
        sequence: The sequence, case and symbols preserved
    """
    id: str
    description: str
    sequence: str

    def __len__(self) -> int:
        return len(self.sequence)

    @property
    def header(self) -> str:
        """Header text without the leading '>'."""
        if self.description:
            return f"{self.id} {self.description}"
        return self.id


def _parse_header(line: str, line_number: int, record_number: int) -> FastaRecord:
    parts = line[1:].strip().split(None, 1)
    if not parts:
        raise MalformedRecordError(
            "FASTA header has no identifier",
            record_number=record_number,
            line_number=line_number,
        )
    description = parts[1] if len(parts) > 1 else ""
    return FastaRecord(id=parts[0], description=description, sequence="")


def read_fasta(handle: TextIO) -> Iterator[FastaRecord]:
    """
    Read FASTA records from an open text stream.

    Sequence lines are concatenated with line endings and surrounding
    whitespace removed; blank lines are ignored.

    Args:
        handle: Text stream positioned at the start of the FASTA data

    Yields:
        FastaRecord objects, in file order

    Raises:
        MalformedRecordError: If sequence data appears before the first
            header or a header has no identifier
    """
    current: Optional[FastaRecord] = None
    chunks: List[str] = []
    record_number = 0

    for line_number, line in enumerate(handle, start=1):
        line = line.strip()
        if not line:
            continue

        if line.startswith('>'):
            if current is not None:
                current.sequence = ''.join(chunks)
                yield current
            record_number += 1
            current = _parse_header(line, line_number, record_number)
            chunks = []
        elif current is None:
            raise MalformedRecordError(
                "FASTA data found before the first '>' header",
                line_number=line_number,
            )
        else:
            chunks.append(line)

    if current is not None:
        current.sequence = ''.join(chunks)
        yield current


def wrap_sequence(sequence: str, line_width: int = FASTA_WRAP_WIDTH) -> List[str]:
    """Split a sequence into lines of exactly line_width (the last may be shorter)."""
    return [sequence[i:i + line_width] for i in range(0, len(sequence), line_width)]


def write_fasta_record(
    handle: TextIO,
    record: FastaRecord,
    line_width: int = FASTA_WRAP_WIDTH,
    suffix: str = "",
) -> None:
    """
    Write one FASTA record with wrapped sequence lines.

    Args:
        handle: Output text stream
        record: Record to write
        line_width: Characters per sequence line
        suffix: Text appended to the header line (e.g. '/rc' on flipped reads)
    """
    handle.write(f">{record.header}{suffix}\n")
    for line in wrap_sequence(record.sequence, line_width):
        handle.write(f"{line}\n")
