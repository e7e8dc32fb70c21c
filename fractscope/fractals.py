"""Escape-time fractals: Mandelbrot, Julia and the magnet set."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

from fractscope.image import Image

WIDTH = 1000
HEIGHT = 1000
MAX_ITER = 100
INSIDE_COLOR = 0x000000
_ESCAPE_RADIUS_SQUARED = 4


class Fractal(Enum):
    """The fractals that can be drawn."""

    MANDELBROT = "mandelbrot"
    JULIA = "julia"
    MAGNET = "magnet"


@dataclass
class View:
    """What is drawn and which part of the plane the window shows."""

    fractal: Fractal
    c_julia: tuple[float, float] = (0.0, 0.0)
    zoom: float = 4.0
    offset_x: float = 0.0
    offset_y: float = 0.0
    width: int = WIDTH
    height: int = HEIGHT

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"view size must be positive, got {self.width}x{self.height}"
            )


def get_color(i: int) -> int:
    """Colour, as 0xRRGGBB, for a point that escaped after i iterations."""
    red = int(math.sin(0.2 * i) * 127 + 128)
    green = int(math.sin(0.2 * i + 2) * 127 + 128)
    blue = int(math.sin(0.2 * i + 4) * 127 + 128)
    return (red << 16) | (green << 8) | blue


def pixel_to_complex(x: int, y: int, view: View) -> tuple[float, float]:
    """Map a window pixel to a point of the complex plane."""
    real = (x - view.width // 2) * view.zoom / view.width + view.offset_x
    imag = (y - view.height // 2) * view.zoom / view.height + view.offset_y
    return real, imag


def _escaped(z_real: float, z_imag: float) -> bool:
    return not z_real * z_real + z_imag * z_imag < _ESCAPE_RADIUS_SQUARED


def julia_escape(z_real: float, z_imag: float, c_real: float, c_imag: float) -> int:
    """Iterations of z -> z*z + c before |z| reaches 2, at most MAX_ITER."""
    for i in range(MAX_ITER):
        if _escaped(z_real, z_imag):
            return i
        z_real, z_imag = (
            z_real * z_real - z_imag * z_imag + c_real,
            2 * z_real * z_imag + c_imag,
        )
    return MAX_ITER


def mandelbrot_escape(c_real: float, c_imag: float) -> int:
    """Iterations of z -> z*z + c from z = 0 before |z| reaches 2."""
    return julia_escape(0.0, 0.0, c_real, c_imag)


def magnet_step(
    z_real: float, z_imag: float, c_real: float, c_imag: float
) -> tuple[float, float]:
    """One step of z -> ((z*z + c - 1) / (2z + c - 2)) ** 2.

    Raises ZeroDivisionError when 2z + c - 2 is zero.
    """
    denom_real = 2 * z_real + c_real - 2
    denom_imag = 2 * z_imag + c_imag
    global_denom = denom_real * denom_real + denom_imag * denom_imag
    numer_real = z_real * z_real - z_imag * z_imag + c_real - 1
    numer_imag = 2 * z_real * z_imag + c_imag
    q_real = (numer_real * denom_real + numer_imag * denom_imag) / global_denom
    q_imag = (numer_imag * denom_real - numer_real * denom_imag) / global_denom
    return q_real * q_real - q_imag * q_imag, 2 * q_real * q_imag


def magnet_escape(c_real: float, c_imag: float) -> int:
    """Iterations of the magnet map from z = 0 before |z| reaches 2.

    Iteration stops early where the map's denominator vanishes.
    """
    z_real = z_imag = 0.0
    for i in range(MAX_ITER):
        if _escaped(z_real, z_imag):
            return i
        if 2 * z_real + c_real - 2 == 0 and 2 * z_imag + c_imag == 0:
            return i
        try:
            z_real, z_imag = magnet_step(z_real, z_imag, c_real, c_imag)
        except ZeroDivisionError:
            # The denominator underflowed to zero: the point counts as escaped.
            return min(i + 1, MAX_ITER)
    return MAX_ITER


def _escape_at(view: View, x: int, y: int) -> int:
    real, imag = pixel_to_complex(x, y, view)
    if view.fractal is Fractal.MANDELBROT:
        return mandelbrot_escape(real, imag)
    if view.fractal is Fractal.MAGNET:
        return magnet_escape(real, imag)
    return julia_escape(real, imag, *view.c_julia)


def render(view: View, image: Image) -> None:
    """Draw the view's fractal into an image of the view's size."""
    if (image.width, image.height) != (view.width, view.height):
        raise ValueError(
            f"image is {image.width}x{image.height}, "
            f"view is {view.width}x{view.height}"
        )
    for y in range(view.height):
        for x in range(view.width):
            count = _escape_at(view, x, y)
            color = INSIDE_COLOR if count == MAX_ITER else get_color(count)
            image.put_pixel(x, y, color)