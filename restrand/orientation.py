"""
Read orientation model and synonym normalization.

A read is either on the canonical (cDNA) strand or on its reverse complement.
Orientation tables and header tags spell these states in several ways; every
spelling goes through normalize_orientation() so synonyms are defined once.

Author: Kevin R. Roy
"""

from enum import Enum

from .errors import InvalidOrientationError


class Orientation(Enum):
    """Strand of a read relative to the canonical (cDNA) orientation."""
    FORWARD = "+"
    REVERSE = "-"

    def __str__(self) -> str:
        return self.value

    @property
    def symbol(self) -> str:
        """Single-character form used in tables and header tags."""
        return self.value

    @classmethod
    def parse(cls, value) -> 'Orientation':
        """Parse an Orientation or any accepted spelling of one."""
        if isinstance(value, cls):
            return value
        # YAML reads unquoted 1/0 as integers
        if isinstance(value, int) and not isinstance(value, bool):
            value = str(value)
        return normalize_orientation(value)


# Accepted spellings, compared case-insensitively
FORWARD_TOKENS = frozenset({'+', 'plus', 'fwd', '1'})
REVERSE_TOKENS = frozenset({'-', 'minus', 'rev', '0', 'rc'})


def normalize_orientation(raw: str) -> Orientation:
    """
    Normalize an orientation token to an Orientation.

    Args:
        raw: Token such as '+', 'minus', 'FWD' or 'rc'

    Returns:
        Orientation.FORWARD or Orientation.REVERSE

    Raises:
        InvalidOrientationError: If the token is not an accepted spelling

    Examples:
        >>> normalize_orientation('rc')
        <Orientation.REVERSE: '-'>
        >>> normalize_orientation('FWD')
        <Orientation.FORWARD: '+'>
    """
    if not isinstance(raw, str):
        raise InvalidOrientationError(raw)

    token = raw.strip().lower()
    if token in FORWARD_TOKENS:
        return Orientation.FORWARD
    if token in REVERSE_TOKENS:
        return Orientation.REVERSE
    raise InvalidOrientationError(raw)
