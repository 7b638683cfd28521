import pytest

from raycube.textutil import (
    atoi,
    count_commas,
    skip_spaces,
    split_lines,
    split_words,
)


@pytest.mark.parametrize("value", [0, 7, 42, 255, 1000, -17, -255, 2147483647])
def test_atoi_round_trip(value):
    assert atoi(str(value)) == value


def test_atoi_skips_whitespace_and_plus():
    assert atoi(" \t\n+255") == 255
    assert atoi("  -12") == -12


def test_atoi_stops_at_non_digit():
    assert atoi("12,34") == 12
    assert atoi("220 ") == 220


def test_atoi_no_digits_is_zero():
    assert atoi("abc") == 0
    assert atoi("") == 0
    assert atoi("-") == 0


def test_atoi_overflow_limits():
    assert atoi("99999999999999999999") == -1
    assert atoi("-99999999999999999999") == 0


def test_split_words_drops_empty():
    assert split_words(",,220,100,,0,", ",") == ["220", "100", "0"]


def test_split_words_invariant():
    text = "a,b,,c,"
    parts = split_words(text, ",")
    assert "".join(parts) == text.replace(",", "")
    assert all(parts)


def test_split_lines_keeps_blank_lines():
    assert split_lines("NO ./a\n\n111", "\n") == ["NO ./a", " ", "111"]


def test_split_lines_single_separator_drops():
    assert split_lines("a\nb\n", "\n") == ["a", "b"]


def test_split_lines_run_count_invariant():
    for count in range(1, 6):
        tokens = split_lines("x" + "\n" * count + "y", "\n")
        assert tokens[0] == "x"
        assert tokens[-1] == "y"
        assert len(tokens) == count + 1


def test_split_lines_empty():
    assert split_lines("", "\n") == []


def test_split_lines_rejects_long_separator():
    with pytest.raises(ValueError):
        split_lines("a", "ab")


def test_skip_spaces():
    assert skip_spaces("   NO", 0) == 3
    assert skip_spaces("NO   x", 2) == 5
    assert skip_spaces("    ", 0) == len("    ")


def test_count_commas():
    assert count_commas("220,100,0") == 2
    assert count_commas("220,,0") == -1
    assert count_commas("220") == 0