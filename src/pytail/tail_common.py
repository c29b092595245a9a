"""
tail_common.py: Shared library for the pytail toolchain.

This module consolidates reusable pieces for:
- Configuration management (validated TailConfig built from parsed arguments).
- User interface interactions (console error output, logging).
"""

import enum
import logging
import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple, Union

from colorama import Fore, Style, just_fix_windows_console

from .errors import InvalidSpecifierError
from .specifier import FromStart, Signed, parse_specifier

just_fix_windows_console()

PROG_NAME = "pytail"
DEFAULT_COUNT = "10"
LOG_LEVEL_ENV = "PYTAIL_LOG_LEVEL"


# =============================================================================
# CONSOLE OUTPUT
# =============================================================================

def _supports_color(stream) -> bool:
    """Check if a stream is a terminal that can show colour."""
    return hasattr(stream, "isatty") and stream.isatty()


def print_error(message: str):
    """Print an error line to stderr, in red when stderr is a terminal."""
    if _supports_color(sys.stderr):
        print(f"{Fore.RED}{message}{Style.RESET_ALL}", file=sys.stderr)
    else:
        print(message, file=sys.stderr)


# =============================================================================
# CONFIGURATION
# =============================================================================

class Mode(enum.Enum):
    LINES = "lines"
    BYTES = "bytes"


@dataclass(frozen=True)
class TailConfig:
    """Validated options for one pytail invocation."""

    files: Tuple[str, ...]
    mode: Mode
    specifier: Union[FromStart, Signed]
    quiet: bool = False
    log_level: str = "WARNING"
    outfile: Optional[str] = None

    @property
    def show_headers(self) -> bool:
        return len(self.files) > 1 and not self.quiet


def get_config(args, parser=None) -> TailConfig:
    """
    Build a TailConfig from parsed command line arguments.

    The count for the selected mode is parsed here, so a bad count is
    reported before any file is opened.

    Args:
        args: argparse.Namespace with files, lines, bytes, quiet, debug, outfile
        parser: Optional ArgumentParser; when given, a bad count is reported
            through parser.error() (exit status 2)

    Returns:
        TailConfig

    Raises:
        InvalidSpecifierError: If the count is malformed and no parser was given
    """
    if args.bytes is not None:
        mode, text = Mode.BYTES, args.bytes
    else:
        mode, text = Mode.LINES, args.lines

    try:
        specifier = parse_specifier(text)
    except InvalidSpecifierError:
        if parser is None:
            raise
        parser.error(f"illegal {'byte' if mode is Mode.BYTES else 'line'} count -- {text}")

    if getattr(args, "debug", False):
        log_level = "DEBUG"
    else:
        log_level = os.environ.get(LOG_LEVEL_ENV, "WARNING")

    return TailConfig(
        files=tuple(args.files),
        mode=mode,
        specifier=specifier,
        quiet=args.quiet,
        log_level=log_level,
        outfile=getattr(args, "outfile", None),
    )


# =============================================================================
# LOGGING
# =============================================================================

def setup_logging(config: TailConfig):
    """Configures Python's logging module.

    Console records go to stderr; stdout carries file data only.
    """
    log_level_str = (config.log_level or "WARNING").upper()
    log_file_path = config.outfile

    numeric_level = getattr(logging, log_level_str, None)
    if not isinstance(numeric_level, int):
        raise ValueError(f'Invalid log level: {log_level_str}')

    log_format = '%(asctime)s - %(levelname)s - %(message)s'

    handlers = [logging.StreamHandler(sys.stderr)]
    if log_file_path:
        Path(log_file_path).parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file_path))

    logging.basicConfig(level=numeric_level, format=log_format, handlers=handlers, force=True)
    logging.debug(f"Logging setup with level {log_level_str}.")
