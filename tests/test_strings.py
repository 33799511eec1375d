import pytest

from ftkit.strings import strchr, strdup, strlen, strncmp, strnstr, strrchr


@pytest.mark.parametrize("s", ["", "a", "hello world", "tab\there"])
def test_strlen_matches_len(s):
    assert strlen(s) == len(s)


def test_strlen_rejects_none():
    with pytest.raises(TypeError):
        strlen(None)


@pytest.mark.parametrize("s, c", [("hello", "l"), ("banana", "a"), ("xyz", "x")])
def test_strchr_finds_first(s, c):
    index = strchr(s, c)
    assert s[index] == c
    assert c not in s[:index]


def test_strchr_missing_returns_none():
    assert strchr("hello", "z") is None


def test_strchr_nul_returns_length():
    assert strchr("hello", "\0") == len("hello")


def test_strchr_accepts_integer_code():
    assert strchr("hello", ord("e")) == strchr("hello", "e")


@pytest.mark.parametrize("s, c", [("hello", "l"), ("banana", "a"), ("xyz", "z")])
def test_strrchr_finds_last(s, c):
    index = strrchr(s, c)
    assert s[index] == c
    assert c not in s[index + 1:]


def test_strrchr_missing_and_nul():
    assert strrchr("abc", "q") is None
    assert strrchr("abc", 0) == len("abc")


def test_strchr_rejects_long_char():
    with pytest.raises(ValueError):
        strchr("abc", "ab")


def test_strncmp_equal_and_prefix():
    assert strncmp("abc", "abc", 3) == 0
    assert strncmp("abcdef", "abcxyz", 3) == 0
    assert strncmp("abc", "xyz", 0) == 0


def test_strncmp_sign():
    assert strncmp("abd", "abc", 3) > 0
    assert strncmp("abc", "abd", 3) < 0


def test_strncmp_difference_of_codes():
    assert strncmp("a", "b", 1) == ord("a") - ord("b")


def test_strncmp_shorter_string_compares_less():
    assert strncmp("ab", "abc", 5) == -ord("c")
    assert strncmp("abc", "ab", 5) == ord("c")


def test_strncmp_negative_n():
    with pytest.raises(ValueError):
        strncmp("a", "b", -1)


def test_strnstr_found_within_limit():
    haystack = "foo bar baz"
    index = strnstr(haystack, "bar", len(haystack))
    assert haystack[index:index + 3] == "bar"


def test_strnstr_needle_past_limit():
    haystack = "foo bar baz"
    assert strnstr(haystack, "bar", haystack.index("bar") + 2) is None
    assert strnstr(haystack, "bar", haystack.index("bar") + 3) == haystack.index("bar")


def test_strnstr_empty_needle():
    assert strnstr("anything", "", 0) == 0


def test_strnstr_not_found():
    assert strnstr("abc", "d", 3) is None


def test_strdup_equal_copy():
    original = "copy me"
    assert strdup(original) == original
    assert strdup("") == ""


def test_strdup_rejects_none():
    with pytest.raises(TypeError):
        strdup(None)