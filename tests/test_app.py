from unittest.mock import patch

import pygame
import pytest

from fractscope.app import check_double, main, parse_args, run, to_double
from fractscope.fractals import Fractal, View


@pytest.mark.parametrize(
    "text", ["1.5", "-0.25", "+3", "42", "0.", "-.5", "+", ""]
)
def test_check_double_accepts(text):
    assert check_double(text) is True


@pytest.mark.parametrize("text", [".5", "1.2.3", "abc", "1e5", "--1", "1-", " 1"])
def test_check_double_rejects(text):
    assert check_double(text) is False


@pytest.mark.parametrize(
    "text, value",
    [
        ("1.5", 1.5),
        ("-0.8", -0.8),
        ("-1.5", -1.5),
        ("3", 3.0),
        ("0.285", 0.285),
        ("+2.25", 2.25),
        ("-0", 0.0),
    ],
)
def test_to_double(text, value):
    assert to_double(text) == pytest.approx(value)


def test_to_double_negative_below_one_keeps_sign():
    assert to_double("-0.01") < 0


def test_parse_mandelbrot():
    view = parse_args(["mandelbrot"])
    assert view.fractal is Fractal.MANDELBROT
    assert (view.zoom, view.offset_x, view.offset_y) == (4.0, 0.0, 0.0)


def test_parse_magnet():
    assert parse_args(["magnet"]).fractal is Fractal.MAGNET


def test_parse_julia():
    view = parse_args(["julia", "-0.8", "0.156"])
    assert view.fractal is Fractal.JULIA
    assert view.c_julia == pytest.approx((-0.8, 0.156))


@pytest.mark.parametrize(
    "argv",
    [
        [],
        ["julia"],
        ["julia", "1"],
        ["julia", "x", "1"],
        ["mandelbrot", "extra"],
        ["Mandelbrot"],
        ["mandel"],
        ["magnet", "1", "2"],
    ],
)
def test_parse_rejects(argv):
    with pytest.raises(ValueError, match="Usage:"):
        parse_args(argv)


def test_main_prints_usage_on_error(capsys):
    assert main(["nope"]) == 1
    err = capsys.readouterr().err
    assert err.startswith("Usage:\n")
    assert "[julia] [c_real] [c_imaginary]" in err


def test_run_applies_key_then_quits(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    events = [
        pygame.event.Event(pygame.KEYUP, key=pygame.K_RIGHT),
        pygame.event.Event(pygame.QUIT),
    ]
    view = View(Fractal.MANDELBROT, width=8, height=8)
    with patch("pygame.event.wait", side_effect=events) as wait:
        result = run(view)
    assert wait.call_count == 2
    assert result.offset_x > 0
    assert result.offset_y == 0.0


def test_run_escape_ends_loop(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    events = [pygame.event.Event(pygame.KEYUP, key=pygame.K_ESCAPE)]
    view = View(Fractal.JULIA, c_julia=(-0.8, 0.156), width=6, height=6)
    with patch("pygame.event.wait", side_effect=events) as wait:
        result = run(view)
    assert wait.call_count == 1
    assert (result.offset_x, result.offset_y) == (0.0, 0.0)


def test_run_mouse_wheel_zooms(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    events = [
        pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=5, pos=(3, 3)),
        pygame.event.Event(pygame.QUIT),
    ]
    view = View(Fractal.MAGNET, width=6, height=6)
    with patch("pygame.event.wait", side_effect=events):
        result = run(view)
    assert result.zoom == pytest.approx(4.0 / 1.1)