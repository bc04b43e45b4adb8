import pytest

from fillit.numeric import atoi, itoa, number_length


@pytest.mark.parametrize("n", [0, 7, -7, 42, -42, 2147483647, -2147483648])
def test_atoi_itoa_round_trip(n):
    assert atoi(itoa(n)) == n


def test_atoi_skips_leading_whitespace():
    assert atoi(" \t\n\v\r\f-42") == -42


def test_atoi_plus_sign():
    assert atoi("+17") == 17


def test_atoi_stops_at_non_digit():
    assert atoi("123abc456") == 123


@pytest.mark.parametrize("text", ["", "abc", "- 5", "+-5", "--5", "   "])
def test_atoi_without_number_is_zero(text):
    assert atoi(text) == 0


def test_atoi_whitespace_after_digits_stops():
    assert atoi("12 34") == 12


def test_atoi_wraps_to_32_bits():
    assert atoi("2147483648") == -2147483648


@pytest.mark.parametrize("n", [1, 9, 10, 99, 100, -1, -10, -2147483648, 2147483647])
def test_number_length_matches_text(n):
    assert number_length(n) == len(itoa(n))


def test_number_length_of_zero():
    assert number_length(0) == 1


def test_itoa_negative_has_sign():
    assert itoa(-5).startswith("-")
    assert itoa(-5)[1:] == itoa(5)