"""
restrand - re-orient sequencing reads to a constant strand.

Author: Kevin R. Roy
"""

__version__ = "0.1.0"
__author__ = "Kevin R. Roy"

from .config import ReorientConfig
from .errors import (
    DuplicateIdentifierError,
    InvalidOrientationError,
    MalformedRecordError,
    RestrandError,
    TableFormatError,
)
from .orientation import Orientation, normalize_orientation
from .processor import (
    FastaReorienter,
    FastqReorienter,
    ReorientStats,
    reorient_fasta,
    reorient_fastq,
)
from .table import OrientationTable, load_orientation_table

__all__ = [
    "Orientation",
    "normalize_orientation",
    "OrientationTable",
    "load_orientation_table",
    "ReorientConfig",
    "FastaReorienter",
    "FastqReorienter",
    "ReorientStats",
    "reorient_fasta",
    "reorient_fastq",
    "RestrandError",
    "InvalidOrientationError",
    "MalformedRecordError",
    "DuplicateIdentifierError",
    "TableFormatError",
]
