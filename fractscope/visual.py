"""Pixel value conversion for displays with fewer than 24 bits of colour depth."""

from __future__ import annotations

from typing import NamedTuple


class ChannelShifts(NamedTuple):
    """Position and width of each colour channel inside a pixel value."""

    red_shift: int
    red_bits: int
    green_shift: int
    green_bits: int
    blue_shift: int
    blue_bits: int


def _scan_mask(mask: int, channel: str) -> tuple[int, int]:
    """Return the (shift, bit count) of a contiguous channel mask."""
    if mask <= 0:
        raise ValueError(f"{channel} mask must be a positive bit mask, got {mask:#x}")
    shift = 0
    while not mask & 1:
        mask >>= 1
        shift += 1
    bits = 0
    while mask & 1:
        mask >>= 1
        bits += 1
    return shift, bits


def mask_shifts(red_mask: int, green_mask: int, blue_mask: int) -> ChannelShifts:
    """Work out where each channel sits from the visual's channel masks.

    Raises ValueError for a mask with no bits set.
    """
    red = _scan_mask(red_mask, "red")
    green = _scan_mask(green_mask, "green")
    blue = _scan_mask(blue_mask, "blue")
    return ChannelShifts(*red, *green, *blue)


def _scale(value: int, bits: int) -> int:
    """Reduce a 16-bit channel value to the given number of bits."""
    if bits <= 16:
        return value >> (16 - bits)
    return value << (bits - 16)


def convert_color(color: int, depth: int, shifts: ChannelShifts) -> int:
    """Turn a 0xRRGGBB colour into a pixel value for a display of this depth.

    Displays of 24 bits or more take the colour unchanged.
    """
    if depth >= 24:
        return color
    red = (color >> 8) & 0xFF00
    green = color & 0xFF00
    blue = (color << 8) & 0xFF00
    return (
        (_scale(red, shifts.red_bits) << shifts.red_shift)
        + (_scale(green, shifts.green_bits) << shifts.green_shift)
        + (_scale(blue, shifts.blue_bits) << shifts.blue_shift)
    )