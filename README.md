# fillit

`fillit` reads a file of up to 26 tetrominoes, arranges them in the
smallest square that holds them all and prints the result.

## Installation

```
pip install .
```

## Usage

```
fillit pieces.txt
```

The same command can be started as `python -m fillit.cli pieces.txt`.

The input file holds one or more pieces. Each piece is four lines of four
characters, `.` for an empty cell and `#` for a filled one, each line ending
in a newline. Pieces are separated by a single empty line, and there is
nothing after the last piece:

```
....
##..
.#..
.#..

....
####
....
....
```

A piece must have exactly four `#` cells that form one connected
tetromino. Pieces are labelled `A`, `B`, `C`, … in the order they appear in
the file. The program prints the solved square, using `.` for empty cells.
For the file above:

```
AA..
.A..
.A..
BBBB
```

If the file cannot be read, is malformed, holds more than 26 pieces, or a
piece is not a valid tetromino, the program prints `error`. Run with
anything other than exactly one argument, it prints
`Need one file with tetriminos as argument`. The exit status is 0 in every
case.

The search starts with the smallest square whose area is at least four
cells per piece, then grows the square one row and column at a time.
Within each size it places the pieces in input order, each at the first
position where it fits, reading top to bottom and left to right, and
backtracks when a later piece cannot be placed.

## Library use

```python
from fillit.tetromino import read_tetrominoes
from fillit.solver import solve

pieces = read_tetrominoes("pieces.txt")
board = solve(pieces)
print(board.render())
```

- `fillit.tetromino.parse_tetrominoes(text)` parses the file contents and
  `read_tetrominoes(path)` reads and parses a file; both return a list of
  `Tetromino` objects (a `letter` and the `cells` it covers, shifted to the
  top-left) and raise `InvalidInputError`, a `ValueError`, on bad input.
  `Tetromino.from_block(block, index)` builds one piece from a
  20-character block.
- `fillit.solver.solve(pieces)` returns a `Board`. A `Board(size)` offers
  `fits(piece, row, col)`, `place(piece, row, col)`,
  `remove(piece, row, col)` and `render()`, which returns the rows joined
  by newlines without a trailing newline. `minimal_size(count)` gives the
  side of the first square tried for `count` pieces.
- `fillit.cli.main(argv=None)` runs the command and returns its exit status.

The package also includes small helpers:

- `fillit.chars`: `is_alnum`, `is_alpha`, `is_ascii`, `is_digit`,
  `is_print`, `to_lower`, `to_upper` for ASCII characters given as a
  one-character string or a code.
- `fillit.numeric`: `atoi`, `itoa`, `number_length`.
- `fillit.putio`: `put_char`, `put_str`, `put_endl`, `put_nbr`, writing to a
  file descriptor (standard output by default).
- `fillit.memory`: `memalloc`, `bzero`, `memset`, `memcpy`, `memmove`,
  `memccpy`, `memchr`, `memcmp` on `bytearray` and `memoryview` buffers.
- `fillit.linkedlist`: `Node` and `LinkedList` with `push_front`, `append`,
  `pop_front`, `clear`, `for_each`, `map`, iteration and `len`.
- `fillit.text_search`: `length`, `find_char`, `rfind_char`, `find`,
  `find_bounded`, `compare`, `compare_n`, `equal`, `equal_n`,
  `for_each_char`, `for_each_char_indexed`, `map_chars`,
  `map_chars_indexed`.
- `fillit.text_build`: `concat`, `concat_n`, `concat_bounded`, `copy_n`,
  `join`, `substring`, `trim`, `split`, `new_string`, `clear`.

## Tests

```
pip install ".[test]"
pytest
```