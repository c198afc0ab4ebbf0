"""
Orientation tags embedded in read headers.

Some basecalling and demultiplexing tools annotate reads with a header field
such as ``orientation:+`` or ``orientation:-``. This module finds that field,
normalizes it and rewrites it after a read has been flipped.

Author: Kevin R. Roy
"""

import logging
import re
from dataclasses import dataclass
from typing import Optional

from .errors import InvalidOrientationError
from .orientation import Orientation, normalize_orientation

logger = logging.getLogger(__name__)

TAG_PREFIX = "orientation:"
TAG_PATTERN = re.compile(re.escape(TAG_PREFIX) + r'(\S*)')


@dataclass(frozen=True)
class OrientationTag:
    """An orientation marker located in a header.

    Attributes:
        token: Raw text following 'orientation:' (may be empty)
        start: Offset of the token in the header
        end: Offset just past the token
    """
    token: str
    start: int
    end: int


def find_orientation_tag(header: str, start: int = 0) -> Optional[OrientationTag]:
    """Locate the first 'orientation:' marker at or after start, if any."""
    match = TAG_PATTERN.search(header, start)
    if match is None:
        return None
    return OrientationTag(token=match.group(1), start=match.start(1), end=match.end(1))


def extract_orientation(header: str) -> Optional[Orientation]:
    """
    Extract the orientation encoded in a header.

    Args:
        header: Header text (with or without the leading '@' or '>')

    Returns:
        The tagged Orientation, or None if the header has no marker or the
        marker carries an unrecognized token. The latter is logged as a
        warning; it does not stop the run.
    """
    tag = find_orientation_tag(header)
    if tag is None:
        return None

    try:
        return normalize_orientation(tag.token)
    except InvalidOrientationError:
        logger.warning(
            f"Unrecognized orientation tag '{TAG_PREFIX}{tag.token}' in header "
            f"'{header}'; passing record through unchanged"
        )
        return None


def rewrite_orientation(header: str, orientation: Orientation, start: int = 0) -> str:
    """Replace the token of the first orientation marker with orientation's symbol.

    Every other character of the header is left untouched. Headers without a
    marker are returned as-is. Only the text from offset start onwards is
    searched, so a read ID can be skipped.
    """
    tag = find_orientation_tag(header, start)
    if tag is None:
        return header
    return header[:tag.start] + orientation.symbol + header[tag.end:]
