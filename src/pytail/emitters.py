"""
emitters.py: Copy the tail of a file to an output sink.

Line mode scans forward from the beginning, since line lengths vary.
Byte mode seeks straight to the start offset.
"""

import logging
import shutil
from typing import Optional

from .extent import CHUNK_SIZE
from .resolver import resolve_start


def emit_lines_from(file, start: Optional[int], out):
    """
    Write every line from zero-based line `start` to EOF, verbatim.

    `file` must be a binary file positioned at its first byte. Nothing is
    written when start is None.

    Raises:
        OSError: If reading or writing fails
    """
    if start is None:
        return

    # skip `start` newlines in fixed-size chunks
    remaining = start
    while remaining:
        chunk = file.read(CHUNK_SIZE)
        if not chunk:
            return
        newlines = chunk.count(b"\n")
        if newlines < remaining:
            remaining -= newlines
            continue

        pos = 0
        while remaining:
            pos = chunk.index(b"\n", pos) + 1
            remaining -= 1
        if pos < len(chunk):
            out.write(chunk[pos:])

    shutil.copyfileobj(file, out)


def emit_bytes_from(file, start: Optional[int], out):
    """
    Seek to byte offset `start` and write the rest of the file, verbatim.

    Nothing is written and no seek is done when start is None.

    Raises:
        OSError: If seeking, reading or writing fails
    """
    if start is None:
        return

    file.seek(start)
    shutil.copyfileobj(file, out)


def print_lines(file, specifier, total_lines: int, out):
    start = resolve_start(specifier, total_lines)
    logging.debug(f"{specifier} over {total_lines} lines starts at {start}")
    emit_lines_from(file, start, out)


def print_bytes(file, specifier, total_bytes: int, out):
    start = resolve_start(specifier, total_bytes)
    logging.debug(f"{specifier} over {total_bytes} bytes starts at {start}")
    emit_bytes_from(file, start, out)
