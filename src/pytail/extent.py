"""
extent.py: Count the lines and bytes of a file in one forward pass.
"""

import logging
from typing import NamedTuple

CHUNK_SIZE = 64 * 1024


class Extent(NamedTuple):
    lines: int
    bytes: int


def extent_of(file) -> Extent:
    """
    Count lines and bytes from the current position of a binary file to EOF.

    A line ends at a newline byte or at end of file, so a trailing run
    without a newline still counts as one line.

    Raises:
        OSError: If the file cannot be read
    """
    lines = 0
    total = 0
    last = b""
    while True:
        chunk = file.read(CHUNK_SIZE)
        if not chunk:
            break
        lines += chunk.count(b"\n")
        total += len(chunk)
        last = chunk[-1:]

    if total and last != b"\n":
        lines += 1

    logging.debug(f"Extent: {lines} lines, {total} bytes")
    return Extent(lines, total)


def extent_of_path(path) -> Extent:
    with open(path, "rb") as f:
        return extent_of(f)
