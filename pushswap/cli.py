"""Command line entry point: print the moves that sort the given numbers."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from pushswap.parsing import InputError, parse_arguments
from pushswap.sorting import solve


def main(argv: Sequence[str] | None = None) -> int:
    """Validate the numbers, write one move per line and return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args or not args[0]:
        sys.stdout.write("\n")
        return 0
    try:
        values = parse_arguments(args)
    except InputError as error:
        sys.stderr.write(error.message)
        return error.exit_code
    for op in solve(values):
        sys.stdout.write(op + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())