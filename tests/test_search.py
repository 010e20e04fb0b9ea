import pytest

from pixelkit.search import (
    compare,
    compare_n,
    equal,
    equal_n,
    find_char,
    find_sub,
    find_sub_n,
    rfind_char,
)


def test_find_char_first_occurrence():
    s = "hello"
    idx = find_char(s, "l")
    assert s[idx] == "l"
    assert "l" not in s[:idx]


def test_find_char_missing():
    assert find_char("hello", "z") is None


def test_find_char_terminator():
    assert find_char("abc", "\0") == len("abc")


def test_find_char_accepts_code_point():
    assert find_char("abc", ord("b")) == find_char("abc", "b")


def test_find_char_rejects_long_string():
    with pytest.raises(ValueError):
        find_char("abc", "ab")


def test_rfind_char_last_occurrence():
    s = "hello world"
    idx = rfind_char(s, "o")
    assert s[idx] == "o"
    assert "o" not in s[idx + 1 :]


def test_rfind_char_missing_and_terminator():
    assert rfind_char("abc", "x") is None
    assert rfind_char("abc", "\0") == len("abc")


def test_find_sub_first_match():
    hay = "say hello, hello there"
    idx = find_sub(hay, "hello")
    assert idx == 4


def test_find_sub_edge_cases():
    assert find_sub("abc", "") == 0
    assert find_sub("", "") is None
    assert find_sub("", "a") is None
    assert find_sub("abc", "abcd") is None


def test_find_sub_n_respects_limit():
    hay = "foo bar baz"
    assert find_sub_n(hay, "bar", 7) == find_sub(hay, "bar")
    assert find_sub_n(hay, "bar", 6) is None
    assert find_sub_n(hay, "", 0) == 0


def test_find_sub_n_negative_length():
    with pytest.raises(ValueError):
        find_sub_n("abc", "a", -1)


def test_compare_equal_and_antisymmetric():
    assert compare("same", "same") == 0
    assert compare("abc", "abd") < 0
    assert compare("abd", "abc") == -compare("abc", "abd")


def test_compare_prefix_uses_terminator():
    assert compare("abc", "ab") == ord("c")
    assert compare("ab", "abc") == -ord("c")


def test_compare_non_ascii_is_unsigned():
    assert compare("\u00e9", "a") > 0


def test_compare_rejects_none():
    with pytest.raises(TypeError):
        compare(None, "a")


def test_compare_n():
    assert compare_n("abc", "xyz", 0) == 0
    assert compare_n("abcX", "abcY", 3) == 0
    assert compare_n("abcX", "abcY", 4) == compare("abcX", "abcY")
    with pytest.raises(ValueError):
        compare_n("a", "b", -1)


def test_equal():
    assert equal("", "") is True
    assert equal("abc", "abc") is True
    assert equal("abc", "abC") is False


def test_equal_n():
    assert equal_n("abcdef", "abcxyz", 3) is True
    assert equal_n("abcdef", "abcxyz", 4) is False