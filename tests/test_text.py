import pytest

from fractscope.text import (
    bounded_concat,
    bounded_copy,
    compare_bytes,
    compare_n,
    find_bounded,
    find_byte,
    find_char,
    join,
    rfind_char,
    split,
    substr,
    trim,
)


def test_split_words():
    assert split("  hello  world ", " ") == ["hello", "world"]


@pytest.mark.parametrize("text", ["a,b,c", ",,x,,y,", "single", "", ",,,"])
def test_split_invariants(text):
    pieces = split(text, ",")
    assert all(piece and "," not in piece for piece in pieces)
    assert "".join(pieces) == text.replace(",", "")


def test_split_only_separators_is_empty():
    assert split(",,,", ",") == []


def test_split_rejects_long_separator():
    with pytest.raises(ValueError):
        split("abc", "ab")


def test_trim_both_ends():
    assert trim("xxhixx", "x") == "hi"


def test_trim_empty_text():
    assert trim("", "x") == ""


def test_trim_empty_set_keeps_text():
    assert trim("hello", "") == "hello"


def test_trim_all_members():
    assert trim("xxx", "x") == ""


def test_trim_keeps_first_two_when_rest_trimmed():
    assert trim("ax", "x") == "ax"


def test_trim_single_character_kept():
    assert trim("x", "x") == "x"


@pytest.mark.parametrize("text", ["  abc  ", "abc", " a b ", "\tab\t"])
def test_trim_result_is_substring(text):
    result = trim(text, " \t")
    assert result in text
    assert result == result.strip(" \t") or len(result) <= 2


def test_substr_past_end():
    assert substr("hello", 10, 2) == ""


def test_substr_long_length_clamps():
    assert substr("hello", 0, 100) == "hello"


@pytest.mark.parametrize("cut", [0, 1, 3, 5])
def test_substr_pieces_rebuild(cut):
    text = "hello"
    assert substr(text, 0, cut) + substr(text, cut, len(text)) == text


def test_substr_negative_start():
    with pytest.raises(ValueError):
        substr("hello", -1, 2)


def test_find_bounded_empty_needle():
    assert find_bounded("abc", "", 0) == 0


def test_find_bounded_found():
    haystack = "lorem ipsum dolor sit amet"
    needle = "dolor"
    index = find_bounded(haystack, needle, len(haystack))
    assert haystack[index:index + len(needle)] == needle


def test_find_bounded_outside_bound():
    haystack = "lorem ipsum dolor sit amet"
    index = find_bounded(haystack, "dolor", len(haystack))
    assert find_bounded(haystack, "dolor", index + 4) == -1
    assert find_bounded(haystack, "dolor", index + 5) == index


def test_find_bounded_missing():
    assert find_bounded("abc", "zz", 3) == -1


def test_compare_n_equal_and_zero():
    assert compare_n("abc", "abc", 3) == 0
    assert compare_n("abc", "xyz", 0) == 0


def test_compare_n_difference():
    assert compare_n("abc", "abd", 3) == ord("c") - ord("d")
    assert compare_n("abc", "abd", 2) == 0


def test_compare_n_prefix():
    assert compare_n("ab", "abc", 5) == -ord("c")


@pytest.mark.parametrize("a,b", [("abc", "abd"), ("a", "abc"), ("zz", "za")])
def test_compare_n_antisymmetric(a, b):
    assert compare_n(a, b, 4) == -compare_n(b, a, 4)


def test_compare_bytes_unsigned():
    assert compare_bytes(b"\xff", b"\x00", 1) == 0xFF


def test_compare_bytes_bounds():
    assert compare_bytes(b"\x00\x01", b"\x00\x02", 1) == 0
    assert compare_bytes(b"\x00\x01", b"\x00\x02", 2) < 0


def test_compare_bytes_too_long():
    with pytest.raises(ValueError):
        compare_bytes(b"ab", b"abc", 3)


def test_find_byte_first_occurrence():
    data = b"hello"
    index = find_byte(data, ord("l"), len(data))
    assert data[index] == ord("l")
    assert ord("l") not in data[:index]


def test_find_byte_bound_and_wrap():
    assert find_byte(b"hello", ord("o"), 4) == -1
    assert find_byte(b"hello", 0x100 + ord("e"), 5) == find_byte(b"hello", ord("e"), 5)


def test_find_byte_too_long():
    with pytest.raises(ValueError):
        find_byte(b"ab", 0, 3)


def test_find_char_nul_gives_length():
    assert find_char("hello", "\0") == len("hello")
    assert rfind_char("hello", "\0") == len("hello")


def test_find_and_rfind_char():
    text = "banana"
    first = find_char(text, "a")
    last = rfind_char(text, "a")
    assert text[first] == "a" and "a" not in text[:first]
    assert text[last] == "a" and "a" not in text[last + 1:]
    assert find_char(text, "z") == -1
    assert rfind_char(text, "z") == -1


def test_find_char_rejects_string():
    with pytest.raises(ValueError):
        find_char("abc", "ab")


def test_join():
    assert join("ab", "cd") == "abcd"
    assert join("", "") == ""


def test_bounded_copy_zero_size():
    assert bounded_copy("hello", 0) == ("", len("hello"))


@pytest.mark.parametrize("size", [1, 2, 3, 6, 10])
def test_bounded_copy_invariants(size):
    src = "hello"
    text, total = bounded_copy(src, size)
    assert total == len(src)
    assert src.startswith(text)
    assert len(text) == min(len(src), size - 1)


def test_bounded_concat_fits():
    assert bounded_concat("ab", "cd", 10) == ("abcd", 4)


def test_bounded_concat_small_size():
    assert bounded_concat("abc", "de", 2) == ("abc", 2 + len("de"))


def test_bounded_concat_size_equals_dst():
    assert bounded_concat("abc", "de", 3) == ("abc", len("abc") + len("de"))


def test_bounded_concat_truncates():
    assert bounded_concat("abc", "defg", 5) == ("abcd", len("abcdefg"))


def test_bounded_concat_negative_size():
    with pytest.raises(ValueError):
        bounded_concat("a", "b", -1)