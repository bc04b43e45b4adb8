"""Backtracking search for the smallest square holding all pieces."""

from __future__ import annotations

import itertools
import math
from collections.abc import Iterable, Iterator, Sequence

from fillit.tetromino import Tetromino


class Board:
    """A square board on which lettered pieces are placed."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("board size must not be negative")
        self.size = size
        self._cells: dict[tuple[int, int], str] = {}

    @staticmethod
    def _squares(piece: Tetromino, row: int, col: int) -> Iterator[tuple[int, int]]:
        return ((row + dr, col + dc) for dr, dc in piece.cells)

    def fits(self, piece: Tetromino, row: int, col: int) -> bool:
        """Tell whether ``piece`` can go with its corner at ``(row, col)``."""
        return all(
            0 <= r < self.size and 0 <= c < self.size and (r, c) not in self._cells
            for r, c in self._squares(piece, row, col)
        )

    def place(self, piece: Tetromino, row: int, col: int) -> None:
        """Put ``piece`` on the board with its corner at ``(row, col)``."""
        for square in self._squares(piece, row, col):
            self._cells[square] = piece.letter

    def remove(self, piece: Tetromino, row: int, col: int) -> None:
        """Clear the squares ``piece`` covers at ``(row, col)``."""
        for square in self._squares(piece, row, col):
            self._cells.pop(square, None)

    def render(self) -> str:
        """Return the board as lines of letters, with '.' for empty squares."""
        return "\n".join(
            "".join(self._cells.get((row, col), ".") for col in range(self.size))
            for row in range(self.size)
        )


def minimal_size(count: int) -> int:
    """Return the smallest side whose square has room for ``count`` pieces."""
    area = count * 4
    side = math.isqrt(area)
    return side if side * side >= area else side + 1


def _fill(board: Board, pieces: Sequence[Tetromino], index: int) -> bool:
    if index == len(pieces):
        return True
    piece = pieces[index]
    for row, col in itertools.product(range(board.size), repeat=2):
        if board.fits(piece, row, col):
            board.place(piece, row, col)
            if _fill(board, pieces, index + 1):
                return True
            board.remove(piece, row, col)
    return False


def solve(pieces: Iterable[Tetromino]) -> Board:
    """Place every piece, in order, on the smallest square board possible."""
    ordered = list(pieces)
    size = minimal_size(len(ordered))
    while True:
        board = Board(size)
        if _fill(board, ordered, 0):
            return board
        size += 1