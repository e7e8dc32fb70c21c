"""Command-line entry point: parse arguments and show a fractal window."""

from __future__ import annotations

import math
import sys
from collections.abc import Sequence

import pygame

from fractscope.chars import atoi, is_digit, put_line
from fractscope.events import DOWN, ESC, LEFT, RIGHT, UP, handle_key, handle_mouse
from fractscope.fractals import Fractal, View, render
from fractscope.image import Image

_TITLE = "fract-ol"
_USAGE_LINES = (
    "Usage:",
    "\t-> fractscope [mandelbrot]",
    "\t-> fractscope [julia] [c_real] [c_imaginary]",
    "\t-> fractscope [magnet]",
)
_MAX_FLOAT_EXPONENT = 308

_KEYS = {
    pygame.K_ESCAPE: ESC,
    pygame.K_UP: UP,
    pygame.K_DOWN: DOWN,
    pygame.K_LEFT: LEFT,
    pygame.K_RIGHT: RIGHT,
}


def check_double(text: str) -> bool:
    """True when text is an optional sign, digits and at most one inner dot."""
    seen_dot = False
    start = 1 if text[:1] in ("-", "+") else 0
    for index, ch in enumerate(text[start:], start):
        if is_digit(ch):
            continue
        if ch == "." and index > 0 and not seen_dot:
            seen_dot = True
            continue
        return False
    return True


def to_double(text: str) -> float:
    """Convert text accepted by check_double to a float."""
    sign = -1 if text[:1] == "-" else 1
    integer_part = float(atoi(text))
    dot = text.find(".")
    if dot == -1:
        return integer_part
    decimals = text[dot + 1:]
    if len(decimals) > _MAX_FLOAT_EXPONENT:
        decimal_part = 0.0
    else:
        decimal_part = atoi(decimals) / math.pow(10, len(decimals))
    if integer_part == 0 and sign == -1:
        return -(integer_part + decimal_part)
    return integer_part + sign * decimal_part


def parse_args(argv: Sequence[str]) -> View:
    """Build the starting view from the command-line arguments.

    Raises ValueError with the usage text when the arguments are not valid.
    """
    args = list(argv)
    if args == [Fractal.MANDELBROT.value]:
        return View(Fractal.MANDELBROT)
    if args == [Fractal.MAGNET.value]:
        return View(Fractal.MAGNET)
    if (
        len(args) == 3
        and args[0] == Fractal.JULIA.value
        and check_double(args[1])
        and check_double(args[2])
    ):
        return View(Fractal.JULIA, c_julia=(to_double(args[1]), to_double(args[2])))
    raise ValueError("\n".join(_USAGE_LINES))


def _to_surface(image: Image) -> pygame.Surface:
    data = image.to_bytes()
    rgb = bytearray(image.width * image.height * 3)
    # Pixels are stored little-endian as 0x00RRGGBB: bytes B, G, R, 0.
    rgb[0::3] = data[2::4]
    rgb[1::3] = data[1::4]
    rgb[2::3] = data[0::4]
    return pygame.image.frombuffer(bytes(rgb), (image.width, image.height), "RGB")


def _draw(view: View, image: Image, screen: pygame.Surface) -> None:
    render(view, image)
    screen.fill((0, 0, 0))
    screen.blit(_to_surface(image), (0, 0))
    pygame.display.flip()


def run(view: View) -> View:
    """Show the view in a window until it is closed; return the final view."""
    pygame.init()
    try:
        screen = pygame.display.set_mode((view.width, view.height))
        pygame.display.set_caption(_TITLE)
        image = Image(view.width, view.height)
        _draw(view, image, screen)
        while True:
            event = pygame.event.wait()
            if event.type == pygame.QUIT:
                break
            if event.type == pygame.KEYUP:
                if not handle_key(view, _KEYS.get(event.key, event.key)):
                    break
            elif event.type == pygame.MOUSEBUTTONDOWN:
                handle_mouse(view, event.button, *event.pos)
            else:
                continue
            _draw(view, image, screen)
    finally:
        pygame.quit()
    return view


def main(argv: Sequence[str] | None = None) -> int:
    """Run the viewer; returns the process exit status."""
    args = sys.argv[1:] if argv is None else argv
    try:
        view = parse_args(args)
    except ValueError as error:
        for line in str(error).splitlines():
            put_line(line, sys.stderr)
        return 1
    run(view)
    return 0