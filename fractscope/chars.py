"""Character classification, integer parsing and formatting helpers."""

from __future__ import annotations

import sys
from typing import TextIO, Union

Char = Union[str, int]

_WHITESPACE = " \f\n\r\t\v"
_INT_BITS = 32


def _code(c: Char) -> int:
    """Return the code point of a one-character string, or the int itself."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected a character or an int, got {type(c).__name__}")
    return c


def _wrap_int32(value: int) -> int:
    """Reduce a value to the range of a signed 32-bit integer."""
    mask = (1 << _INT_BITS) - 1
    value &= mask
    if value >= 1 << (_INT_BITS - 1):
        value -= 1 << _INT_BITS
    return value


def is_alpha(c: Char) -> bool:
    """True for ASCII letters."""
    code = _code(c)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def is_digit(c: Char) -> bool:
    """True for the ASCII digits 0-9."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: Char) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: Char) -> bool:
    """True for code points 0 to 127."""
    return 0 <= _code(c) <= 127


def is_print(c: Char) -> bool:
    """True for printable ASCII, space through tilde."""
    return 32 <= _code(c) <= 126


def to_upper(c: Char) -> Char:
    """Upper-case an ASCII lower-case letter; other values pass through."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        code = code - ord("a") + ord("A")
    return chr(code) if isinstance(c, str) else code


def to_lower(c: Char) -> Char:
    """Lower-case an ASCII upper-case letter; other values pass through."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        code = code - ord("A") + ord("a")
    return chr(code) if isinstance(c, str) else code


def atoi(text: str) -> int:
    """Parse a leading decimal integer.

    Leading whitespace is skipped, one optional sign is accepted, and digits
    are read until the first non-digit. Text without digits gives 0. The
    result wraps to a signed 32-bit integer.
    """
    stripped = text.lstrip(_WHITESPACE)
    sign = 1
    if stripped[:1] in ("-", "+"):
        if stripped[0] == "-":
            sign = -1
        stripped = stripped[1:]
    number = 0
    for ch in stripped:
        if not is_digit(ch):
            break
        number = number * 10 + (ord(ch) - ord("0"))
    return _wrap_int32(number * sign)


def itoa(n: int) -> str:
    """Format a signed 32-bit integer as decimal text."""
    if _wrap_int32(n) != n:
        raise OverflowError(f"{n} does not fit in a signed 32-bit integer")
    return str(n)


def put_number(n: int, stream: TextIO | None = None) -> None:
    """Write a signed 32-bit integer in decimal to a text stream."""
    (stream if stream is not None else sys.stdout).write(itoa(n))


def put_line(text: str, stream: TextIO | None = None) -> None:
    """Write text followed by a newline to a text stream."""
    out = stream if stream is not None else sys.stdout
    out.write(text)
    out.write("\n")