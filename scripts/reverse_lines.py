"""Read a file backward and report how long it took.

Usage:
    python -m scripts.reverse_lines PATH [--print-reversed]
"""

import argparse
import time
from pathlib import Path

from revlines import ReverseReadError, ReversedFileReader
from revlines.log_setup import setup_logger


def drain(path: Path, print_reversed: bool) -> int:
    """Read every line of *path* in reverse; return how many were read."""
    count = 0
    with ReversedFileReader(path) as reader:
        for line in reader:
            count += 1
            if print_reversed:
                print(line)
    return count


def main(argv: list[str] | None = None):
    parser = argparse.ArgumentParser(description="Read a text file last line first")
    parser.add_argument("path", type=Path, help="Text file to read")
    parser.add_argument("--print-reversed", action="store_true",
                        help="Print each line in reversed order")
    args = parser.parse_args(argv)

    logger = setup_logger("revlines")

    if not args.path.is_file():
        print(f"Error: {args.path} is not a readable file")
        raise SystemExit(1)

    print(f"Reading {args.path}")
    print(f"Print each line in reversed order: {args.print_reversed}")

    start = time.perf_counter()
    try:
        count = drain(args.path, args.print_reversed)
    except (OSError, ReverseReadError) as exc:
        logger.error("Failed reading %s: %s", args.path, exc)
        raise SystemExit(1)
    elapsed_ms = (time.perf_counter() - start) * 1000

    logger.debug("Read %d lines", count)
    print(f"execution time: {elapsed_ms:.0f}ms")


if __name__ == "__main__":
    main()
