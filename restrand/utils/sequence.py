"""
Sequence manipulation utilities.

Provides the strand-flipping operations applied to reads: reverse complement
of the bases and positional reversal of the quality string.

Author: Kevin R. Roy
"""

from typing import Dict

# Watson-Crick and IUPAC ambiguity complements, both cases
DNA_COMPLEMENT: Dict[str, str] = {
    'A': 'T', 'T': 'A', 'G': 'C', 'C': 'G', 'N': 'N',
    'R': 'Y', 'Y': 'R', 'S': 'S', 'W': 'W',
    'K': 'M', 'M': 'K', 'B': 'V', 'V': 'B',
    'D': 'H', 'H': 'D',
}
DNA_COMPLEMENT.update({k.lower(): v.lower() for k, v in list(DNA_COMPLEMENT.items())})

_COMPLEMENT_TABLE = str.maketrans(DNA_COMPLEMENT)


def complement(seq: str) -> str:
    """Return the complement of a DNA sequence without reversing it.

    Symbols outside the IUPAC alphabet (gaps, '*', digits) are kept as-is.
    """
    return seq.translate(_COMPLEMENT_TABLE)


def reverse_complement(seq: str) -> str:
    """Return reverse complement of DNA sequence.

    Case is preserved per base and IUPAC ambiguity codes map to their
    complements (R<->Y, K<->M, B<->V, D<->H; S, W and N map to themselves).
    Unrecognized symbols (including U) are carried through unchanged but
    still reversed.
    """
    return complement(seq)[::-1]


def reverse_quality(quality: str) -> str:
    """Reverse a quality string so it stays aligned with a reverse-complemented read."""
    return quality[::-1]
