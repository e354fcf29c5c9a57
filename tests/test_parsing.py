import pytest

from pushswap.parsing import (
    InputError,
    is_whitespace,
    parse_arguments,
    parse_int,
    split_arguments,
)


@pytest.mark.parametrize("ch", [" ", "\t", "\v", "\f"])
def test_is_whitespace_true(ch):
    assert is_whitespace(ch) is True


@pytest.mark.parametrize("ch", ["\n", "\r", "1", "-", "a"])
def test_is_whitespace_false(ch):
    assert is_whitespace(ch) is False


@pytest.mark.parametrize(
    "token, expected",
    [
        ("42", 42),
        ("-42", -42),
        ("+42", 42),
        ("--42", 42),
        ("+-42", -42),
        ("-0", 0),
        ("0007", 7),
        ("2147483647", 2147483647),
        ("-2147483648", -2147483648),
    ],
)
def test_parse_int_values(token, expected):
    assert parse_int(token) == expected


@pytest.mark.parametrize(
    "token",
    ["", "-", "+", "abc", "12a", "1-2", "2147483648", "-2147483649", "99999999999", "12\n"],
)
def test_parse_int_rejects(token):
    with pytest.raises(InputError):
        parse_int(token)


def test_parse_int_stops_at_whitespace():
    assert parse_int("12 junk") == 12


def test_input_error_is_value_error():
    with pytest.raises(ValueError):
        parse_int("x")


def test_split_arguments_multiple_numbers():
    assert split_arguments("3 -1\t2") == [3, -1, 2]


def test_split_arguments_surrounding_whitespace():
    assert split_arguments("  5  6 ") == [5, 6]


def test_split_arguments_whitespace_only_is_error():
    with pytest.raises(InputError):
        split_arguments("   ")


def test_split_arguments_bad_token_is_error():
    with pytest.raises(InputError):
        split_arguments("1 two 3")


def test_parse_arguments_builds_stack_a():
    stacks = parse_arguments(["-43 2", "-51", "233 444"])
    assert list(stacks.a) == [-43, 2, -51, 233, 444]
    assert list(stacks.b) == []


def test_parse_arguments_duplicate_across_arguments():
    with pytest.raises(InputError):
        parse_arguments(["1 2", "2"])


def test_parse_arguments_empty_argument():
    with pytest.raises(InputError):
        parse_arguments(["1", ""])


def test_parse_arguments_round_trip():
    numbers = [10, -7, 0, 2147483647, -2147483648]
    stacks = parse_arguments([" ".join(str(n) for n in numbers)])
    assert list(stacks.a) == numbers


def test_parse_arguments_no_arguments_gives_empty_stacks():
    stacks = parse_arguments([])
    assert list(stacks.a) == []
    assert stacks.is_sorted()