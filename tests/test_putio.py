import os

import pytest

from fillit.putio import put_char, put_endl, put_nbr, put_str


@pytest.fixture
def pipe():
    read_fd, write_fd = os.pipe()
    yield read_fd, write_fd
    os.close(read_fd)
    try:
        os.close(write_fd)
    except OSError:
        pass


def _drain(pipe):
    read_fd, write_fd = pipe
    os.close(write_fd)
    chunks = []
    while chunk := os.read(read_fd, 4096):
        chunks.append(chunk)
    return b"".join(chunks)


def test_put_char(pipe):
    put_char("x", pipe[1])
    assert _drain(pipe) == b"x"


def test_put_char_rejects_strings(pipe):
    with pytest.raises(ValueError):
        put_char("xy", pipe[1])


def test_put_str(pipe):
    put_str("hello world", pipe[1])
    assert _drain(pipe) == b"hello world"


def test_put_str_none_writes_nothing(pipe):
    put_str(None, pipe[1])
    assert _drain(pipe) == b""


def test_put_endl(pipe):
    put_endl("line", pipe[1])
    assert _drain(pipe) == b"line\n"


def test_put_endl_none_writes_newline(pipe):
    put_endl(None, pipe[1])
    assert _drain(pipe) == b"\n"


@pytest.mark.parametrize("n", [0, 5, -5, 1234, 2147483647, -2147483648])
def test_put_nbr(pipe, n):
    put_nbr(n, pipe[1])
    assert _drain(pipe) == str(n).encode()


def test_sequence_of_writes(pipe):
    put_str("a", pipe[1])
    put_nbr(-3, pipe[1])
    put_char("b", pipe[1])
    put_endl("c", pipe[1])
    assert _drain(pipe) == b"a-3bc\n"


def test_default_is_stdout(capfd):
    put_endl("out")
    put_nbr(9)
    captured = capfd.readouterr()
    assert captured.out == "out\n9"