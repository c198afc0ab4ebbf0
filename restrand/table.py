"""
Per-read orientation table.

The table maps read identifiers to the orientation each read is currently in.
It is loaded once from a tab-delimited file before any reads are processed and
is read-only afterwards.

Author: Kevin R. Roy
"""

import csv
import logging
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, Optional, Tuple, Union

import pandas as pd

from .errors import DuplicateIdentifierError, InvalidOrientationError, TableFormatError
from .orientation import Orientation, normalize_orientation

logger = logging.getLogger(__name__)

DEFAULT_ID_COLUMN = 'ReadName'
DEFAULT_ORIENTATION_COLUMN = 'orientation'

# How repeated read identifiers are handled
DUPLICATE_POLICIES = ('error', 'last', 'first')


class OrientationTable(Mapping):
    """Immutable mapping of read identifier -> Orientation.

    Use lookup() when an absent read is an expected outcome; it returns None
    instead of raising KeyError.
    """

    def __init__(self, orientations: Optional[Dict[str, Orientation]] = None):
        self._orientations = MappingProxyType(dict(orientations or {}))

    def __getitem__(self, read_id: str) -> Orientation:
        return self._orientations[read_id]

    def __iter__(self) -> Iterator[str]:
        return iter(self._orientations)

    def __len__(self) -> int:
        return len(self._orientations)

    def __repr__(self) -> str:
        return f"OrientationTable(n_reads={len(self)})"

    def lookup(self, read_id: str) -> Optional[Orientation]:
        """Return the orientation of a read, or None if the read is not in the table."""
        return self._orientations.get(read_id)

    def count(self, orientation: Orientation) -> int:
        """Number of reads annotated with the given orientation."""
        return sum(1 for o in self._orientations.values() if o is orientation)

    @classmethod
    def from_rows(
        cls,
        rows: Iterable[Tuple[str, str]],
        on_duplicate: str = 'error',
        first_row: int = 1,
    ) -> 'OrientationTable':
        """
        Build a table from (read_id, raw_orientation) pairs.

        Args:
            rows: Iterable of (read_id, raw orientation token)
            on_duplicate: 'error' to reject repeated read ids, 'last' to keep
                the last occurrence, 'first' to keep the first
            first_row: Number reported for the first row in error messages

        Returns:
            OrientationTable

        Raises:
            InvalidOrientationError: If any orientation token is not recognized
            DuplicateIdentifierError: If a read id repeats and on_duplicate='error'
            TableFormatError: If a read id is empty
        """
        if on_duplicate not in DUPLICATE_POLICIES:
            raise ValueError(
                f"on_duplicate must be one of {', '.join(DUPLICATE_POLICIES)}, got '{on_duplicate}'"
            )

        orientations: Dict[str, Orientation] = {}
        seen_rows: Dict[str, int] = {}

        for row_number, (read_id, raw) in enumerate(rows, start=first_row):
            if not read_id:
                raise TableFormatError(f"Empty read identifier in orientation table (table row {row_number})")

            try:
                orientation = normalize_orientation(raw)
            except InvalidOrientationError:
                raise InvalidOrientationError(raw, row=row_number, read_id=read_id) from None

            if read_id in seen_rows:
                if on_duplicate == 'error':
                    raise DuplicateIdentifierError(read_id, seen_rows[read_id], row_number)
                logger.warning(
                    f"Read '{read_id}' repeated in orientation table (rows {seen_rows[read_id]} "
                    f"and {row_number}); keeping the {on_duplicate} occurrence"
                )
                if on_duplicate == 'first':
                    continue
            else:
                seen_rows[read_id] = row_number

            orientations[read_id] = orientation

        return cls(orientations)


def load_orientation_table(
    path: Union[str, Path],
    id_column: str = DEFAULT_ID_COLUMN,
    orientation_column: str = DEFAULT_ORIENTATION_COLUMN,
    on_duplicate: str = 'error',
) -> OrientationTable:
    """
    Load an orientation table from a tab-delimited file.

    Required columns (names configurable):
    - ReadName: Read identifier, matched exactly against FASTA record IDs
    - orientation: '+' for cDNA, '-' for rc(cDNA), or any accepted synonym

    Additional columns are ignored. Gzip-compressed tables (.gz) are read
    transparently.

    Args:
        path: Path to the table
        id_column: Name of the read ID column
        orientation_column: Name of the orientation column
        on_duplicate: Policy for repeated read IDs ('error', 'last', 'first')

    Returns:
        OrientationTable

    Raises:
        TableFormatError: If the file is empty or a required column is missing
        InvalidOrientationError: If any row has an unrecognized orientation
        DuplicateIdentifierError: If a read repeats and on_duplicate='error'
    """
    try:
        df = pd.read_csv(
            path,
            sep='\t',
            dtype=str,
            keep_default_na=False,
            quoting=csv.QUOTE_NONE,
        )
    except pd.errors.EmptyDataError:
        raise TableFormatError(f"Orientation table is empty: {path}") from None

    # Short rows leave NaN in the trailing columns
    df = df.fillna('')

    # Validate required columns
    for column in (id_column, orientation_column):
        if column not in df.columns:
            raise TableFormatError(
                f"Column '{column}' not found in orientation table {path} "
                f"(available: {', '.join(map(str, df.columns))})"
            )

    rows = zip(df[id_column], df[orientation_column])
    table = OrientationTable.from_rows(rows, on_duplicate=on_duplicate)

    logger.info(
        f"Loaded orientations for {len(table)} reads from {path} "
        f"({table.count(Orientation.FORWARD)} '+', {table.count(Orientation.REVERSE)} '-')"
    )
    return table
