import pytest

from ftkit.text import atoi, itoa, split, strjoin, strtrim, substr


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42),
        ("-42", -42),
        ("+7", 7),
        ("  \t\n-123abc", -123),
        ("abc", 0),
        ("", 0),
        ("--5", 0),
    ],
)
def test_atoi_cases(text, expected):
    assert atoi(text) == expected


def test_atoi_int_limits():
    assert atoi("2147483647") == 2147483647
    assert atoi("-2147483648") == -2147483648


def test_atoi_wraps_past_int_range():
    assert atoi("2147483648") == -2147483648


@pytest.mark.parametrize("n", [0, 1, -1, 9, 10, -10, 2147483647, -2147483648])
def test_itoa_atoi_round_trip(n):
    assert atoi(itoa(n)) == n


def test_itoa_values():
    assert itoa(-2147483648) == "-2147483648"
    assert itoa(0) == "0"


def test_itoa_rejects_non_int():
    with pytest.raises(TypeError):
        itoa("12")


def test_split_drops_empty_pieces():
    assert split("  hello  world ", " ") == ["hello", "world"]


def test_split_no_words():
    assert split("", ",") == []
    assert split(",,,", ",") == []


def test_split_join_round_trip():
    words = ["alpha", "beta", "gamma"]
    assert split(",".join(words), ",") == words


def test_split_rejects_long_separator():
    with pytest.raises(ValueError):
        split("a,b", ",,")


def test_strjoin():
    first, second = "push", "_swap"
    joined = strjoin(first, second)
    assert joined.startswith(first) and joined.endswith(second)
    assert len(joined) == len(first) + len(second)


def test_strjoin_rejects_none():
    with pytest.raises(TypeError):
        strjoin(None, "x")


def test_strtrim_both_ends():
    assert strtrim("xxhelloxyx", "xy") == "hello"


def test_strtrim_everything_and_nothing():
    assert strtrim("aaaa", "a") == ""
    assert strtrim("keep", "") == "keep"


def test_strtrim_leaves_inner_chars():
    assert strtrim("  a b  ", " ") == "a b"


def test_substr_within_and_clipped():
    s = "abcdef"
    assert substr(s, 1, 3) == s[1:4]
    assert substr(s, 4, 100) == s[4:]


def test_substr_start_past_end():
    assert substr("abc", 3, 2) == ""
    assert substr("abc", 10, 1) == ""


def test_substr_rejects_negative():
    with pytest.raises(ValueError):
        substr("abc", -1, 2)