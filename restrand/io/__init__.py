"""
I/O modules for restrand.

Author: Kevin R. Roy
"""

from .fasta import (
    FASTA_WRAP_WIDTH,
    FastaRecord,
    read_fasta,
    wrap_sequence,
    write_fasta_record,
)
from .fastq import (
    FastqRecord,
    read_fastq,
    write_fastq_record,
)
from .files import open_input, open_output

__all__ = [
    'FastaRecord',
    'read_fasta',
    'write_fasta_record',
    'wrap_sequence',
    'FASTA_WRAP_WIDTH',
    'FastqRecord',
    'read_fastq',
    'write_fastq_record',
    'open_input',
    'open_output',
]
