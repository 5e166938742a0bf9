"""Command line entry: print the operations that sort the given numbers."""

from __future__ import annotations

import sys
from typing import Sequence

from .sort import solve


def parse_number(text: str) -> int:
    """Parse one command-line argument as an integer."""
    return int(text.strip())


def main(argv: Sequence[str] | None = None) -> int:
    """Print one operation per line; return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 0
    try:
        numbers = [parse_number(arg) for arg in args]
        operations = solve(numbers)
    except ValueError:
        print("Error", file=sys.stderr)
        return 1
    for op in operations:
        print(op)
    return 0


if __name__ == "__main__":
    sys.exit(main())