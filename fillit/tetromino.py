"""Reading and validating tetromino descriptions."""

from __future__ import annotations

import os
import string
from dataclasses import dataclass
from typing import Union

LETTERS = string.ascii_uppercase
BLOCK_SIZE = 20
ROW_WIDTH = 5
MAX_PIECES = 26
_EXPECTED_DOTS = 12
_EXPECTED_NEWLINES = 4
_VALID_CONTACTS = (6, 8)


class InvalidInputError(ValueError):
    """Raised when the tetromino input is malformed."""


@dataclass(frozen=True)
class Tetromino:
    """A tetromino labelled with a letter, its cells shifted to the top-left."""

    letter: str
    cells: tuple[tuple[int, int], ...]

    @classmethod
    def from_block(cls, block: str, index: int) -> "Tetromino":
        """Build the piece at position ``index`` from a 20-character block."""
        if not 0 <= index < len(LETTERS):
            raise InvalidInputError(f"piece index {index} out of range")
        if len(block) != BLOCK_SIZE:
            raise InvalidInputError(
                f"block must be {BLOCK_SIZE} characters, got {len(block)}"
            )

        dots = 0
        newlines = 0
        hashes: list[tuple[int, int]] = []
        for position, char in enumerate(block):
            row, col = divmod(position, ROW_WIDTH)
            if char == "\n":
                if col != ROW_WIDTH - 1:
                    raise InvalidInputError(f"unexpected newline at {position}")
                newlines += 1
            elif char == ".":
                dots += 1
            elif char == "#":
                hashes.append((row, col))
            else:
                raise InvalidInputError(f"unexpected character {char!r}")

        occupied = set(hashes)
        contacts = sum(
            (row + dr, col + dc) in occupied
            for row, col in hashes
            for dr, dc in ((0, -1), (0, 1), (-1, 0), (1, 0))
        )
        if (
            dots != _EXPECTED_DOTS
            or contacts not in _VALID_CONTACTS
            or newlines != _EXPECTED_NEWLINES
        ):
            raise InvalidInputError("block does not describe a tetromino")

        top = min(row for row, _ in hashes)
        left = min(col for _, col in hashes)
        cells = tuple((row - top, col - left) for row, col in hashes)
        return cls(LETTERS[index], cells)


def parse_tetrominoes(text: str) -> list[Tetromino]:
    """Parse blocks of 20 characters, each followed by one separator."""
    pieces: list[Tetromino] = []
    position = 0
    while True:
        if len(pieces) >= MAX_PIECES or len(text) - position < BLOCK_SIZE:
            raise InvalidInputError("missing or excess tetromino data")
        block = text[position:position + BLOCK_SIZE]
        pieces.append(Tetromino.from_block(block, len(pieces)))
        position += BLOCK_SIZE
        if position >= len(text):
            return pieces
        position += 1


def read_tetrominoes(path: Union[str, "os.PathLike[str]"]) -> list[Tetromino]:
    """Read and parse the tetromino file at ``path``."""
    try:
        with open(path, "rb") as handle:
            data = handle.read()
    except OSError as exc:
        raise InvalidInputError(f"cannot read {path}") from exc
    return parse_tetrominoes(data.decode("latin-1"))