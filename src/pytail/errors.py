"""
errors.py: Exception types raised by pytail.
"""


class TailError(Exception):
    """Base class for pytail errors."""


class InvalidSpecifierError(TailError, ValueError):
    """Raised when a line or byte count is not a valid number."""

    def __init__(self, text):
        super().__init__(f"invalid count: {text!r}")
        self.text = text


class OutputError(TailError):
    """Raised when the output sink cannot be written.

    Kept apart from OSError so a dead sink is not mistaken for an
    unreadable input file. The original error is `error` and __cause__.
    """

    def __init__(self, error: OSError):
        super().__init__(error.strerror or str(error))
        self.error = error
