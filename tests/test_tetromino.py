import pytest

from fillit.tetromino import (
    InvalidInputError,
    Tetromino,
    parse_tetrominoes,
    read_tetrominoes,
)

SQUARE = "##..\n##..\n....\n....\n"
SQUARE_SHIFTED = "....\n....\n..##\n..##\n"
LINE = "####\n....\n....\n....\n"
T_PIECE = ".#..\n###.\n....\n....\n"
S_PIECE = "....\n.##.\n##..\n....\n"
L_PIECE = "#...\n#...\n##..\n....\n"


def test_square_cells_are_normalised():
    piece = Tetromino.from_block(SQUARE, 0)
    assert set(piece.cells) == {(0, 0), (0, 1), (1, 0), (1, 1)}
    assert piece.letter == "A"


def test_shifted_block_gives_same_cells():
    assert (
        Tetromino.from_block(SQUARE_SHIFTED, 0).cells
        == Tetromino.from_block(SQUARE, 0).cells
    )


@pytest.mark.parametrize("block", [SQUARE, LINE, T_PIECE, S_PIECE, L_PIECE])
def test_valid_shapes_have_four_cells_at_origin(block):
    piece = Tetromino.from_block(block, 2)
    assert len(piece.cells) == 4
    assert min(r for r, _ in piece.cells) == 0
    assert min(c for _, c in piece.cells) == 0


def test_last_letter():
    assert Tetromino.from_block(SQUARE, 25).letter == "Z"


def test_index_out_of_range():
    with pytest.raises(InvalidInputError):
        Tetromino.from_block(SQUARE, 26)


@pytest.mark.parametrize(
    "block",
    [
        "##..\n....\n..##\n....\n",
        "#...\n.#..\n..#.\n...#\n",
        "##..\n##..\n#...\n....\n",
        "##..\n#...\n....\n....\n",
        "##..\n##..\n....\n...x\n",
        "##..\n##.\n.....\n....\n",
        "##..\n##..\n....\n....",
    ],
)
def test_invalid_blocks(block):
    with pytest.raises(InvalidInputError):
        Tetromino.from_block(block, 0)


def test_parse_assigns_letters_in_order():
    pieces = parse_tetrominoes(SQUARE + "\n" + LINE + "\n" + T_PIECE)
    assert [p.letter for p in pieces] == ["A", "B", "C"]
    assert pieces[1] == Tetromino.from_block(LINE, 1)


def test_parse_any_separator_is_consumed():
    pieces = parse_tetrominoes(SQUARE + "X" + LINE)
    assert len(pieces) == 2


def test_parse_trailing_newline_is_error():
    with pytest.raises(InvalidInputError):
        parse_tetrominoes(SQUARE + "\n")


def test_parse_empty_is_error():
    with pytest.raises(InvalidInputError):
        parse_tetrominoes("")


def test_parse_twenty_six_pieces_allowed():
    pieces = parse_tetrominoes("\n".join([SQUARE] * 26))
    assert len(pieces) == 26
    assert pieces[-1].letter == "Z"


def test_parse_twenty_seven_pieces_rejected():
    with pytest.raises(InvalidInputError):
        parse_tetrominoes("\n".join([SQUARE] * 27))


def test_read_from_file(tmp_path):
    path = tmp_path / "pieces.txt"
    path.write_bytes((SQUARE + "\n" + S_PIECE).encode())
    assert read_tetrominoes(path) == parse_tetrominoes(SQUARE + "\n" + S_PIECE)


def test_read_missing_file(tmp_path):
    with pytest.raises(InvalidInputError):
        read_tetrominoes(tmp_path / "absent.txt")