"""
Opening of read and table streams.

Paths ending in .gz are (de)compressed transparently; '-' stands for
stdin/stdout so restrand can sit in a shell pipeline.

Author: Kevin R. Roy
"""

import contextlib
import gzip
import sys
from pathlib import Path
from typing import Optional, TextIO, Union

STDIO_PATH = '-'


def _is_gzip(path: Union[str, Path]) -> bool:
    return str(path).endswith('.gz')


def open_input(path: Union[str, Path]) -> TextIO:
    """Open a text input stream, usable as a context manager.

    Line terminators are passed through untranslated (newline='') so CRLF
    records can be written back unchanged. Stdin is expected to be plain
    text; pipe gzip input through zcat.
    """
    if str(path) == STDIO_PATH:
        return contextlib.nullcontext(sys.stdin)

    open_func = gzip.open if _is_gzip(path) else open
    return open_func(path, 'rt', newline='')


def open_output(path: Optional[Union[str, Path]] = None) -> TextIO:
    """Open a text output stream (stdout when path is None or '-')."""
    if path is None or str(path) == STDIO_PATH:
        return contextlib.nullcontext(sys.stdout)

    out_func = gzip.open if _is_gzip(path) else open
    return out_func(path, 'wt', newline='')
