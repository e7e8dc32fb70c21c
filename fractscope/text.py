"""String and byte helpers: splitting, trimming, searching, bounded copies."""

from __future__ import annotations

from collections.abc import Sequence

_NUL = "\0"


def _single_char(ch: str) -> str:
    if not isinstance(ch, str) or len(ch) != 1:
        raise ValueError(f"expected a single character, got {ch!r}")
    return ch


def _non_negative(value: int, what: str) -> int:
    if value < 0:
        raise ValueError(f"{what} must not be negative, got {value}")
    return value


def split(text: str, sep: str) -> list[str]:
    """Split text on a separator character, dropping empty pieces."""
    _single_char(sep)
    return [piece for piece in text.split(sep) if piece]


def trim(text: str, chars: str) -> str:
    """Remove characters found in chars from both ends of text.

    The scan from the right never looks at the first character: when every
    character after it belongs to chars, the first two characters are kept.
    A single character is therefore never removed.
    """
    if not text:
        return ""
    members = set(chars)
    last = len(text) - 1
    start = next((i for i, ch in enumerate(text) if ch not in members), last)
    end = next((i for i in range(last, 0, -1) if text[i] not in members), 1)
    if start > end:
        return ""
    return text[start:end + 1]


def substr(text: str, start: int, length: int) -> str:
    """Return at most length characters of text beginning at start.

    A start at or past the end gives an empty string.
    """
    _non_negative(start, "start")
    _non_negative(length, "length")
    if start >= len(text):
        return ""
    return text[start:start + length]


def find_bounded(haystack: str, needle: str, length: int) -> int:
    """Index of needle inside the first length characters of haystack, or -1.

    An empty needle is found at index 0.
    """
    _non_negative(length, "length")
    if not needle:
        return 0
    return haystack[:length].find(needle)


def _code_at(text: str, index: int) -> int:
    return ord(text[index]) if index < len(text) else 0


def compare_n(s1: str, s2: str, n: int) -> int:
    """Compare at most n characters of two strings.

    Returns the difference of the first differing character codes, a
    character past the end of a string counting as 0; 0 when they agree.
    """
    _non_negative(n, "n")
    for index in range(n):
        a = _code_at(s1, index)
        b = _code_at(s2, index)
        if a != b or a == 0:
            return a - b
    return 0


def compare_bytes(b1: bytes, b2: bytes, n: int) -> int:
    """Compare the first n bytes of two buffers as unsigned values."""
    _non_negative(n, "n")
    if n > len(b1) or n > len(b2):
        raise ValueError(f"cannot compare {n} bytes of shorter buffers")
    for a, b in zip(b1[:n], b2[:n]):
        if a != b:
            return a - b
    return 0


def find_byte(data: bytes, value: int, n: int) -> int:
    """Index of the first byte equal to value & 0xFF in the first n bytes, or -1."""
    _non_negative(n, "n")
    if n > len(data):
        raise ValueError(f"cannot search {n} bytes of a {len(data)}-byte buffer")
    return data.find(value & 0xFF, 0, n)


def find_char(text: str, ch: str) -> int:
    """Index of the first occurrence of ch, or -1.

    Searching for the NUL character gives the length of text.
    """
    if _single_char(ch) == _NUL:
        return len(text)
    return text.find(ch)


def rfind_char(text: str, ch: str) -> int:
    """Index of the last occurrence of ch, or -1.

    Searching for the NUL character gives the length of text.
    """
    if _single_char(ch) == _NUL:
        return len(text)
    return text.rfind(ch)


def join(first: str, second: str) -> str:
    """Concatenate two strings."""
    return first + second


def bounded_copy(src: str, size: int) -> tuple[str, int]:
    """Copy src into a buffer of size characters, terminator included.

    Returns the text that fits and the full length of src, so a returned
    length of size or more means the copy was cut short.
    """
    _non_negative(size, "size")
    if size == 0:
        return "", len(src)
    return src[:size - 1], len(src)


def bounded_concat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append src to dst in a buffer of size characters, terminator included.

    Returns the resulting text and the length the full result would have.
    When size is smaller than dst, dst is left alone and the length
    reported is size plus the length of src.
    """
    _non_negative(size, "size")
    dst_len = len(dst)
    if size < dst_len or (size == 0 and not dst):
        return dst, size + len(src)
    room = max(0, size - 1 - dst_len)
    return dst + src[:room], dst_len + len(src)


def _join_all(parts: Sequence[str]) -> str:
    return "".join(parts)