"""
resolver.py: Map an offset specifier and a total count to a start index.
"""

from typing import Optional

from .specifier import FromStart, Signed


def resolve_start(specifier, total: int) -> Optional[int]:
    """
    Return the zero-based index where output begins, or None for no output.

    The same rule applies to lines and bytes:
      FromStart  -> 0 if total > 0
      Signed(0)  -> None
      Signed(n)  -> n - 1 for 0 < n <= total, None past the end
      Signed(-n) -> total - n, clamped to 0

    An empty input never has a start.
    """
    if isinstance(specifier, FromStart):
        return 0 if total > 0 else None

    if not isinstance(specifier, Signed):
        raise TypeError(f"Unknown specifier: {specifier!r}")

    n = specifier.value
    if n == 0 or total == 0:
        return None
    if n > 0:
        return None if n > total else n - 1
    return max(total + n, 0)
