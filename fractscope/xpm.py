"""Reading images in the XPM text format."""

from __future__ import annotations

import os
import re
from collections.abc import Iterable, Iterator

from fractscope.chars import atoi
from fractscope.colors import lookup_color
from fractscope.image import Image

_WORD_SPLIT = re.compile(r"[ \t]+")
_HEX_DIGITS = re.compile(r"[0-9a-fA-F]+")
_QUOTED = re.compile(r'"([^"]*)"')
_NAME_LIMIT = 63
_TRANSPARENT = 0xFF000000


class XpmError(ValueError):
    """Raised for XPM data that cannot be read."""


def words(text: str) -> list[str]:
    """Split text into words separated by spaces and tabs."""
    return [word for word in _WORD_SPLIT.split(text) if word]


def _find_unquoted(text: str, token: str) -> int:
    """Index of the first token lying outside double quotes, or -1."""
    quoted = False
    for index, ch in enumerate(text):
        if ch == '"':
            quoted = not quoted
        if not quoted and text.startswith(token, index):
            return index
    return -1


def _blank(text: str, begin: int, stop: int) -> str:
    return text[:begin] + " " * (stop - begin) + text[stop:]


def strip_comments(text: str) -> str:
    """Replace block and line comments outside strings with spaces.

    The result has the same length as the input.
    """
    while (begin := _find_unquoted(text, "/*")) != -1:
        end = text.find("*/", begin + 2)
        text = _blank(text, begin, len(text) if end == -1 else end + 2)
    while (begin := _find_unquoted(text, "//")) != -1:
        end = text.find("\n", begin + 2)
        text = _blank(text, begin, len(text) if end == -1 else end + 1)
    return text


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value >= 1 << 31 else value


def text_to_rgb(name: str, end: str | None = None) -> int:
    """Turn a colour specification into a 0xRRGGBB value.

    "#" introduces hexadecimal digits. Otherwise the name, joined by a space
    to the following word when there is one, is looked up in the colour
    table; "None" gives -1 and unknown names give 0.
    """
    if name.startswith("#"):
        match = _HEX_DIGITS.match(name, 1)
        return _to_int32(int(match.group(), 16)) if match else 0
    if end is not None:
        name = f"{name} {end}"[:_NAME_LIMIT]
    try:
        return lookup_color(name)
    except KeyError:
        return 0


def _next_line(rows: Iterator[str], what: str) -> str:
    try:
        return next(rows)
    except StopIteration:
        raise XpmError(f"XPM data ends before the {what} line") from None


def _read_palette(rows: Iterator[str], ncolors: int, cpp: int) -> dict[str, int]:
    palette: dict[str, int] = {}
    later_wins = cpp <= 2
    for _ in range(ncolors):
        line = _next_line(rows, "colour")
        key = line[:cpp]
        tokens = words(line[cpp:])
        try:
            index = tokens.index("c")
        except ValueError:
            raise XpmError(f"colour line without a 'c' entry: {line!r}") from None
        if index + 1 >= len(tokens):
            raise XpmError(f"colour line without a colour value: {line!r}")
        following = tokens[index + 2] if index + 2 < len(tokens) else None
        rgb = text_to_rgb(tokens[index + 1], following)
        if later_wins:
            palette[key] = rgb
        else:
            palette.setdefault(key, rgb)
    return palette


def parse_xpm(lines: Iterable[str]) -> Image:
    """Build an image from the strings of an XPM file, header first."""
    rows = iter(lines)
    header = words(_next_line(rows, "header"))
    if len(header) < 4:
        raise XpmError(f"XPM header needs four values, got {header!r}")
    width, height, ncolors, cpp = (atoi(field) for field in header[:4])
    if min(width, height, ncolors, cpp) <= 0:
        raise XpmError(f"XPM header values must be positive, got {header[:4]!r}")

    palette = _read_palette(rows, ncolors, cpp)
    image = Image(width, height)
    for y in range(height):
        line = _next_line(rows, "pixel")
        if len(line) < width * cpp:
            raise XpmError(f"pixel row {y} is shorter than {width} pixels")
        for x in range(width):
            color = palette.get(line[x * cpp:(x + 1) * cpp], 0)
            image.put_pixel(x, y, _TRANSPARENT if color == -1 else color)
    return image


def load_xpm(path: str | os.PathLike[str]) -> Image:
    """Read an XPM file from disk."""
    with open(path, encoding="latin-1") as handle:
        text = strip_comments(handle.read())
    return parse_xpm(_QUOTED.findall(text))