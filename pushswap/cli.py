"""Command line entry point: print the instructions that sort the arguments."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from pushswap.parsing import InputError, parse_arguments
from pushswap.sorting import solve

__all__ = ["main"]


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Validate the arguments, print one instruction per line, return the exit code."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 0
    try:
        values = parse_arguments(args)
    except InputError:
        sys.stderr.write("Error\n")
        return 1
    moves = solve(values)
    if moves:
        sys.stdout.write("".join(f"{move}\n" for move in moves))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())