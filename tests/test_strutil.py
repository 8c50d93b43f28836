import pytest
from hypothesis import given
from hypothesis import strategies as st

from pushswap.strutil import (
    atoi,
    atol,
    itoa,
    split,
    strchr,
    striteri,
    strjoin,
    strlcat,
    strlcpy,
    strmapi,
    strncmp,
    strnstr,
    strrchr,
    strtrim,
    substr,
)

_text = st.text(alphabet=st.characters(min_codepoint=1, max_codepoint=127))
_letters = st.text(alphabet="ab ", max_size=30)


@given(_text, st.sampled_from("abc xyz"))
def test_strchr_agrees_with_find(s, c):
    expected = s.find(c)
    assert strchr(s, c) == (expected if expected >= 0 else None)


@given(_text)
def test_strchr_nul_finds_end(s):
    assert strchr(s, "\0") == len(s)
    assert strchr(s, 0) == len(s)


def test_strchr_accepts_integer_code():
    assert strchr("hello", ord("l")) == "hello".index("l")


def test_strchr_rejects_long_needle():
    with pytest.raises(ValueError):
        strchr("hello", "ll")


@given(_text, st.sampled_from("abc xyz"))
def test_strrchr_agrees_with_rfind(s, c):
    expected = s.rfind(c)
    assert strrchr(s, c) == (expected if expected >= 0 else None)


def test_strrchr_nul_finds_end():
    assert strrchr("hello", "\0") == len("hello")


def test_strncmp_equal_prefix_within_limit():
    assert strncmp("abc", "abd", 2) == 0


def test_strncmp_reports_first_difference():
    assert strncmp("abc", "abd", 3) == ord("c") - ord("d")


def test_strncmp_shorter_string_compares_as_nul():
    assert strncmp("ab", "abc", 5) == -ord("c")
    assert strncmp("abc", "ab", 5) == ord("c")


@given(_text, _text, st.integers(min_value=0, max_value=40))
def test_strncmp_sign_matches_prefix_ordering(a, b, n):
    result = strncmp(a, b, n)
    pa, pb = a[:n], b[:n]
    assert (result > 0) == (pa > pb)
    assert (result < 0) == (pa < pb)


def test_strncmp_negative_length():
    with pytest.raises(ValueError):
        strncmp("a", "b", -1)


def test_strnstr_finds_needle_in_range():
    hay = "hello world"
    assert strnstr(hay, "world", len(hay)) == hay.index("world")


def test_strnstr_needle_past_limit():
    hay = "hello world"
    assert strnstr(hay, "world", hay.index("world") + 2) is None


def test_strnstr_empty_needle():
    assert strnstr("anything", "", 0) == 0


@given(_letters, st.text(alphabet="ab", min_size=1, max_size=3))
def test_strnstr_full_length_agrees_with_find(hay, needle):
    expected = hay.find(needle)
    assert strnstr(hay, needle, len(hay)) == (expected if expected >= 0 else None)


def test_strlcpy_truncates_and_reports_length():
    assert strlcpy("hello", 3) == ("hello"[:2], len("hello"))


def test_strlcpy_zero_size():
    assert strlcpy("hello", 0) == ("", len("hello"))


@given(_text, st.integers(min_value=1, max_value=50))
def test_strlcpy_fits_buffer(src, size):
    copied, length = strlcpy(src, size)
    assert length == len(src)
    assert len(copied) <= size - 1
    assert src.startswith(copied)


def test_strlcat_appends_when_room():
    assert strlcat("ab", "cd", 10) == ("ab" + "cd", len("abcd"))


def test_strlcat_truncates():
    assert strlcat("ab", "cdef", 4) == ("ab" + "cdef"[:1], len("ab") + len("cdef"))


def test_strlcat_full_destination():
    assert strlcat("abcd", "ef", 2) == ("abcd", 2 + len("ef"))


def test_substr_basic_and_past_end():
    assert substr("hello", 1, 3) == "hello"[1:4]
    assert substr("hello", 10, 3) == ""
    assert substr("hello", 3, 100) == "hello"[3:]


def test_substr_negative_start():
    with pytest.raises(ValueError):
        substr("hello", -1, 2)


@given(_text, _text)
def test_strjoin_concatenates(a, b):
    joined = strjoin(a, b)
    assert joined[: len(a)] == a
    assert joined[len(a):] == b


@given(_letters, st.text(alphabet="a ", max_size=2))
def test_strtrim_removes_edges(s, charset):
    trimmed = strtrim(s, charset)
    assert trimmed in s
    if trimmed:
        assert trimmed[0] not in charset
        assert trimmed[-1] not in charset


def test_strtrim_example():
    assert strtrim("  xx hi xx  ", " x") == "hi"


@given(_letters)
def test_split_drops_empty_words(s):
    words = split(s, " ")
    assert words == s.split()
    assert all(words)


def test_split_nul_separator():
    assert split("a b", "\0") == ["a b"]
    assert split("", "\0") == []


def test_strmapi_passes_index():
    assert strmapi("abc", lambda i, ch: ch.upper() if i % 2 == 0 else ch) == "AbC"


def test_striteri_modifies_in_place():
    chars = list("abc")
    seen = []

    def visit(index, ch):
        seen.append(index)
        return ch.upper() if index == 1 else None

    assert striteri(chars, visit) is None
    assert chars == ["a", "B", "c"]
    assert seen == [0, 1, 2]


def test_itoa_extremes():
    assert itoa(-2147483648) == "-2147483648"
    assert itoa(2147483647) == "2147483647"


def test_itoa_rejects_out_of_range():
    with pytest.raises(OverflowError):
        itoa(2**31)


@given(st.integers(min_value=-(2**31), max_value=2**31 - 1))
def test_itoa_atoi_round_trip(n):
    assert atoi(itoa(n)) == n


def test_atoi_skips_whitespace_and_stops_at_junk():
    assert atoi(" \t\n-42abc") == -42
    assert atoi("+7") == 7
    assert atoi("abc") == 0
    assert atoi("--5") == 0


def test_atoi_wraps_to_32_bits():
    assert atoi("2147483648") == -2147483648
    assert atoi("-2147483648") == -2147483648


@given(st.integers(min_value=-(2**63), max_value=2**63 - 1))
def test_atol_round_trip(n):
    assert atol(str(n)) == n


def test_atol_wraps_to_64_bits():
    assert atol(str(2**63)) == -(2**63)
    assert atol("  +2147483648") == 2**31