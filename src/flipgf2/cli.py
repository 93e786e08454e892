"""
flipgf2 command line.

Usage:
  flipgf2 <size> [-v]

Prints the number of configurations of the size x size neighbor-flip
puzzle reachable from all-off, plus the storage allocation count.

Author: Carmen Esteban
"""

import sys

from flipgf2.report import format_report, solveable_states

USAGE = "usage: flipgf2 <size> [-v|--verbose]"


def parse_size(text):
    """Parse a grid size; accepts 0x/0o/0b prefixes. Raises ValueError."""
    size = int(text, 0)
    if size < 1:
        raise ValueError(f"size must be >= 1, got {size}")
    return size


def main(argv=None):
    if argv is None:
        argv = sys.argv[1:]

    verbose = False
    args = []
    for a in argv:
        if a in ("-v", "--verbose"):
            verbose = True
        else:
            args.append(a)

    if not args:
        print(USAGE)
        return 0

    try:
        size = parse_size(args[0])
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        print(USAGE, file=sys.stderr)
        return 2

    result = solveable_states(size, verbose=verbose)
    print(format_report(size, result["rank"], result["dim"]))
    print(f"calls to malloc: {result['alloc_count']}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
