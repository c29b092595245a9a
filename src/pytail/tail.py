"""
tail.py: Display the last part of one or more files.

Mimics Unix 'tail' command:
  pytail <file>             - Show last 10 lines
  pytail -n 20 <file>       - Show last 20 lines
  pytail -n +20 <file>      - Show from line 20 to the end
  pytail -c 100 <file>      - Show last 100 bytes
  pytail -q <file> <file>   - Several files, no headers
"""

import argparse
import logging
import os
import sys

from .emitters import print_bytes, print_lines
from .errors import OutputError
from .extent import extent_of
from .tail_common import (
    DEFAULT_COUNT,
    PROG_NAME,
    Mode,
    TailConfig,
    get_config,
    print_error,
    setup_logging,
)
from .version import __version__


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG_NAME,
        description="Display the last part of a file.",
        epilog="""
Examples:
  pytail notes.txt              # last 10 lines
  pytail -n 3 a.txt b.txt       # last 3 lines of each, with headers
  pytail -n +5 notes.txt        # from line 5 to the end
  pytail -n +0 notes.txt        # the whole file
  pytail -c -64 data.bin        # last 64 bytes

Notes:
  - A count without a sign counts from the end of the file.
  - -n and -c cannot be used together.
""",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument('--version', '-V', action='version', version=f'{PROG_NAME} {__version__}')

    parser.add_argument("files", nargs="+", metavar="FILE", help="Input file(s)")

    counts = parser.add_mutually_exclusive_group()
    counts.add_argument("-n", "--lines", default=DEFAULT_COUNT, metavar="NUM",
                        help=f"Number of lines (default: {DEFAULT_COUNT})")
    counts.add_argument("-c", "--bytes", metavar="NUM",
                        help="Number of bytes")

    parser.add_argument("-q", "--quiet", action="store_true",
                        help="Never print headers giving file names")
    parser.add_argument("--debug", action="store_true", help="Enable debug output")
    parser.add_argument("-O", "--outfile", help="Also write log records to this file")
    return parser


class OutputSink:
    """Binary writer that raises OutputError when the wrapped sink fails."""

    def __init__(self, raw):
        self.raw = raw

    def write(self, data):
        try:
            return self.raw.write(data)
        except OSError as e:
            raise OutputError(e) from e

    def flush(self):
        try:
            self.raw.flush()
        except OSError as e:
            raise OutputError(e) from e


def _silence_stdout():
    """Point fd 1 at devnull so the interpreter's final flush cannot fail again."""
    try:
        fd = sys.stdout.fileno()
    except (AttributeError, OSError):
        return
    devnull = os.open(os.devnull, os.O_WRONLY)
    os.dup2(devnull, fd)
    os.close(devnull)


def write_header(out, filename: str, first: bool):
    """Write '==> name <==', preceded by a blank line unless it is the first."""
    prefix = b"" if first else b"\n"
    out.write(prefix + b"==> " + os.fsencode(filename) + b" <==\n")


def tail_file(file, config: TailConfig, out):
    """Print the requested tail of an open binary file."""
    extent = extent_of(file)
    file.seek(0)
    if config.mode is Mode.BYTES:
        print_bytes(file, config.specifier, extent.bytes, out)
    else:
        print_lines(file, config.specifier, extent.lines, out)


def run(config: TailConfig, out) -> int:
    """
    Process every file in order. A file that cannot be opened or read is
    reported on stderr and skipped. A failing sink stops the run with
    OutputError.

    Returns:
        Number of files that failed
    """
    if not isinstance(out, OutputSink):
        out = OutputSink(out)
    failures = 0
    first_header = True

    for filename in config.files:
        try:
            f = open(filename, "rb")
        except OSError as e:
            print_error(f"{PROG_NAME}: cannot open '{filename}' for reading: {e.strerror or e}")
            logging.debug(f"open failed for {filename}: {e!r}")
            failures += 1
            continue

        with f:
            if config.show_headers:
                write_header(out, filename, first_header)
                first_header = False
            try:
                tail_file(f, config, out)
            except OSError as e:
                print_error(f"{PROG_NAME}: error reading '{filename}': {e.strerror or e}")
                logging.debug(f"read failed for {filename}: {e!r}")
                failures += 1
        out.flush()

    return failures


def main(args_list=None):
    if args_list is None:
        args_list = sys.argv[1:]

    parser = build_parser()
    args = parser.parse_args(args_list)
    config = get_config(args, parser)
    try:
        setup_logging(config)
    except (ValueError, OSError) as e:
        parser.error(f"cannot set up logging: {e}")
    logging.debug(f"Config: {config}")

    try:
        failures = run(config, sys.stdout.buffer)
    except KeyboardInterrupt:
        print("\nInterrupted by user", file=sys.stderr)
        return 130
    except OutputError as e:
        if isinstance(e.error, BrokenPipeError):
            _silence_stdout()
        else:
            print_error(f"{PROG_NAME}: error writing output: {e}")
        return 1

    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
