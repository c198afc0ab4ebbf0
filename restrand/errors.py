"""
Exception types raised by restrand.

Fatal conditions (malformed tables, malformed records) abort a run; per-record
conditions such as an unrecognized header tag are logged instead of raised.

Author: Kevin R. Roy
"""

from typing import Optional


class RestrandError(Exception):
    """Base class for all restrand errors."""
    pass


class InvalidOrientationError(RestrandError, ValueError):
    """An orientation token does not normalize to forward or reverse."""

    def __init__(
        self,
        value,
        row: Optional[int] = None,
        read_id: Optional[str] = None,
    ):
        self.value = value
        self.row = row
        self.read_id = read_id

        message = f"Unrecognized orientation value {value!r}"
        if read_id is not None:
            message += f" for read '{read_id}'"
        if row is not None:
            message += f" (table row {row})"
        super().__init__(message)


class MalformedRecordError(RestrandError, ValueError):
    """A FASTA/FASTQ record violates the structure of its format."""

    def __init__(
        self,
        message: str,
        record_number: Optional[int] = None,
        line_number: Optional[int] = None,
    ):
        self.record_number = record_number
        self.line_number = line_number

        context = []
        if record_number is not None:
            context.append(f"record {record_number}")
        if line_number is not None:
            context.append(f"line {line_number}")
        if context:
            message = f"{message} ({', '.join(context)})"
        super().__init__(message)


class DuplicateIdentifierError(RestrandError, ValueError):
    """The same read identifier appears more than once in the orientation table."""

    def __init__(self, read_id: str, first_row: int, row: int):
        self.read_id = read_id
        self.first_row = first_row
        self.row = row
        super().__init__(
            f"Duplicate read '{read_id}' in orientation table "
            f"(rows {first_row} and {row})"
        )


class TableFormatError(RestrandError, ValueError):
    """The orientation table is missing columns or has unusable rows."""
    pass
