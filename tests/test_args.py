import pytest
from hypothesis import given
from hypothesis import strategies as st

from pushswap.args import (
    ERROR_MSG,
    MAX_INT,
    MIN_INT,
    ArgumentError,
    atoi,
    has_blank_argument,
    parse_arguments,
    split_arguments,
    validate_tokens,
)


def test_atoi_plain_and_signed():
    assert atoi("42") == 42
    assert atoi("+5") == 5
    assert atoi("  -17abc") == -17


def test_atoi_no_digits():
    assert atoi("") == 0
    assert atoi("abc") == 0


def test_atoi_wraps_like_int32():
    assert atoi("2147483648") == MIN_INT
    assert atoi("-2147483648") == MIN_INT
    assert atoi("2147483647") == MAX_INT


@given(st.integers(MIN_INT, MAX_INT))
def test_atoi_round_trips_int32(number):
    assert atoi(str(number)) == number


def test_has_blank_argument():
    assert has_blank_argument(["1", "   "])
    assert has_blank_argument([""])
    assert not has_blank_argument(["1 2", "3"])
    assert not has_blank_argument(["\t"])


def test_split_arguments():
    assert split_arguments(["1 2", "3"]) == ["1", "2", "3"]
    assert split_arguments(["  4   5 "]) == ["4", "5"]


@pytest.mark.parametrize(
    "tokens",
    [
        ["1", "2", "1"],
        ["abc"],
        ["1-"],
        ["2147483648"],
        ["-2147483649"],
        ["-00000000001"],
        [""],
        ["\t"],
    ],
)
def test_validate_tokens_rejects(tokens):
    with pytest.raises(ArgumentError):
        validate_tokens(tokens)


def test_validate_tokens_accepts_textually_distinct():
    assert validate_tokens(["1", "01", "+1", "-"]) is None
    assert parse_arguments(["1", "01", "+1", "-"]) == [1, 1, 1, 0]


def test_parse_arguments_empty():
    assert parse_arguments([]) == []


def test_parse_arguments_mixed_forms():
    assert parse_arguments(["3 1", "2"]) == [3, 1, 2]
    assert parse_arguments(["2147483647", "-2147483648"]) == [MAX_INT, MIN_INT]


def test_parse_arguments_error_message():
    with pytest.raises(ArgumentError) as info:
        parse_arguments(["1", " "])
    assert str(info.value) == ERROR_MSG


def test_parse_arguments_duplicate():
    with pytest.raises(ArgumentError):
        parse_arguments(["5", "5"])


def test_argument_error_is_value_error():
    with pytest.raises(ValueError):
        parse_arguments(["x"])


@given(st.lists(st.integers(MIN_INT, MAX_INT), unique=True, min_size=1, max_size=30))
def test_parse_arguments_round_trip(numbers):
    assert parse_arguments([" ".join(map(str, numbers))]) == numbers
    assert parse_arguments([str(n) for n in numbers]) == numbers