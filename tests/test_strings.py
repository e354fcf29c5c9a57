import pytest

from pushswap.libft.strings import (
    atoi,
    itoa,
    split,
    strchr,
    strjoin,
    strlcat,
    strlcpy,
    strmapi,
    strncmp,
    strnstr,
    strrchr,
    striteri,
    strtrim,
    substr,
)


@pytest.mark.parametrize("value", [0, 7, -7, 123, -456, 2147483647, -2147483648])
def test_itoa_atoi_round_trip(value):
    assert atoi(itoa(value)) == value


def test_itoa_int_min_literal():
    assert itoa(-2147483648) == "-2147483648"


def test_itoa_rejects_non_int():
    with pytest.raises(TypeError):
        itoa("12")


def test_atoi_skips_whitespace_and_sign():
    assert atoi(" \t\n\v\f\r-42abc") == -42
    assert atoi("+15") == 15


def test_atoi_single_sign_only():
    assert atoi("--5") == 0
    assert atoi("abc") == 0


def test_split_drops_empty_pieces():
    assert split("  hello  world ", " ") == ["hello", "world"]
    assert split("", " ") == []
    assert split("abc", " ") == ["abc"]


def test_split_rejects_long_separator():
    with pytest.raises(ValueError):
        split("a,b", ",,")


def test_strchr_and_strrchr():
    assert strchr("banana", "a") == 1
    assert strrchr("banana", "a") == 5
    assert strchr("banana", "z") is None
    assert strrchr("banana", "z") is None


def test_strchr_nul_finds_end():
    assert strchr("abc", "\0") == len("abc")
    assert strrchr("abc", "\0") == len("abc")


def test_strncmp_equal_and_ordering():
    assert strncmp("abc", "abc", 3) == 0
    assert strncmp("abcd", "abcz", 3) == 0
    assert strncmp("abc", "abd", 3) < 0
    assert strncmp("abd", "abc", 3) > 0
    assert strncmp("ab", "abc", 3) < 0
    assert strncmp("x", "y", 0) == 0


def test_strncmp_antisymmetric():
    assert strncmp("ra\n", "rb\n", 4) == -strncmp("rb\n", "ra\n", 4)


def test_strnstr_within_length():
    haystack = "lorem ipsum"
    assert strnstr(haystack, "ipsum", len(haystack)) == haystack.index("ipsum")
    assert strnstr(haystack, "ipsum", len(haystack) - 1) is None
    assert strnstr(haystack, "", 0) == 0
    assert strnstr(haystack, "lorem", 100) == 0


def test_strtrim():
    assert strtrim("xxhixx", "x") == "hi"
    assert strtrim("xxxx", "x") == ""
    assert strtrim("  keep  ", "") == "  keep  "
    assert strtrim("", "x") == ""


def test_substr():
    assert substr("hello", 1, 3) == "ell"
    assert substr("hello", 2, 100) == "llo"
    assert substr("hello", 10, 2) == ""
    with pytest.raises(ValueError):
        substr("hello", -1, 2)


def test_strjoin():
    assert strjoin("push", "swap") == "pushswap"


def test_strmapi_preserves_length():
    result = strmapi("abc", lambda i, c: c.upper())
    assert result == "ABC"
    assert len(strmapi("hello", lambda i, c: c)) == len("hello")


def test_striteri_in_place():
    chars = list("abcd")
    striteri(chars, lambda i, c: c.upper() if i % 2 == 0 else None)
    assert chars == ["A", "b", "C", "d"]


def test_strlcpy():
    assert strlcpy("old", "hello", 0) == ("old", len("hello"))
    assert strlcpy("", "hello", 3) == ("he", len("hello"))
    assert strlcpy("", "hi", 10) == ("hi", len("hi"))


def test_strlcat():
    assert strlcat("ab", "cd", 10) == ("abcd", 4)
    assert strlcat("ab", "cdef", 4) == ("abc", 6)
    assert strlcat("abcd", "ef", 3) == ("abcd", len("ef") + 3)
    assert strlcat("ab", "cd", 0) == ("ab", len("cd"))


def test_strlcat_result_fits_buffer():
    for size in range(1, 12):
        result, _ = strlcat("abc", "defgh", size)
        assert len(result) <= max(size - 1, len("abc"))
        assert result.startswith("abc")