"""pytail: print the last part of files."""

from .version import __version__
