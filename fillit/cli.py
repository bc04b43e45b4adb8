"""Command line entry point."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import Optional

from fillit.solver import solve
from fillit.tetromino import InvalidInputError, read_tetrominoes

USAGE = "Need one file with tetriminos as argument"
ERROR = "error"


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Solve the tetromino file named on the command line and print the board."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print(USAGE)
        return 0
    try:
        pieces = read_tetrominoes(args[0])
    except InvalidInputError:
        print(ERROR)
        return 0
    print(solve(pieces).render())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())