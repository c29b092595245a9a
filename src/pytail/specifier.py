"""
specifier.py: Parse line and byte counts into offset specifiers.

Count forms (classic tail):
  5    - last 5 elements (a bare count means "from the end")
  -5   - last 5 elements
  +5   - start at element 5 and print through the end
  +0   - the whole file
  0    - nothing
"""

import re
from dataclasses import dataclass

from .errors import InvalidSpecifierError

SPECIFIER_PATTERN = re.compile(r"([+-])?([0-9]+)")

I64_MIN = -(2 ** 63)
I64_MAX = 2 ** 63 - 1


@dataclass(frozen=True)
class FromStart:
    """The "+0" form: start at the first element, if there is one."""


@dataclass(frozen=True)
class Signed:
    """A signed count.

    value > 0: start at the value-th element (1-indexed).
    value < 0: the last abs(value) elements.
    value == 0: nothing.
    """

    value: int


def parse_specifier(text: str, pattern=SPECIFIER_PATTERN):
    """
    Parse a count such as "3", "+3", "-3" or "+0".

    A missing sign means "-". The sign is applied to the digit text before
    conversion, so the most negative 64-bit value parses without overflow.

    Args:
        text: The count as given on the command line
        pattern: Compiled pattern with groups (sign, digits)

    Returns:
        FromStart for "+0" (and "+00", ...), otherwise Signed(value)

    Raises:
        InvalidSpecifierError: If text is not a sign and digits, or the value
            does not fit in a signed 64-bit integer
    """
    match = pattern.fullmatch(text)
    if not match:
        raise InvalidSpecifierError(text)

    sign, digits = match.group(1) or "-", match.group(2)
    try:
        value = int(sign + digits)
    except ValueError:
        # more digits than int() will convert
        raise InvalidSpecifierError(text) from None
    if not I64_MIN <= value <= I64_MAX:
        raise InvalidSpecifierError(text)

    if sign == "+" and value == 0:
        return FromStart()
    return Signed(value)
