import pytest

from fractscope.events import (
    DOWN,
    ESC,
    LEFT,
    MOUSE_DOWN,
    MOUSE_UP,
    RIGHT,
    UP,
    handle_key,
    handle_mouse,
)
from fractscope.fractals import Fractal, View, pixel_to_complex


def make_view():
    return View(Fractal.MANDELBROT, width=200, height=100)


def test_escape_asks_to_quit():
    view = make_view()
    assert handle_key(view, ESC) is False
    assert (view.offset_x, view.offset_y) == (0.0, 0.0)


@pytest.mark.parametrize("key", [UP, DOWN, LEFT, RIGHT, ord("a")])
def test_other_keys_keep_running(key):
    assert handle_key(make_view(), key) is True


def test_up_moves_view_up():
    view = make_view()
    handle_key(view, UP)
    assert view.offset_y < 0
    assert view.offset_x == 0.0


def test_right_moves_view_right():
    view = make_view()
    handle_key(view, RIGHT)
    assert view.offset_x > 0
    assert view.offset_y == 0.0


def test_opposite_keys_cancel():
    view = make_view()
    handle_key(view, UP)
    handle_key(view, DOWN)
    handle_key(view, LEFT)
    handle_key(view, RIGHT)
    assert view.offset_x == pytest.approx(0.0)
    assert view.offset_y == pytest.approx(0.0)


def test_pan_step_scales_with_zoom():
    near = make_view()
    far = make_view()
    far.zoom = near.zoom * 2
    handle_key(near, RIGHT)
    handle_key(far, RIGHT)
    assert far.offset_x == pytest.approx(2 * near.offset_x)


def test_unknown_key_changes_nothing():
    view = make_view()
    handle_key(view, ord("q"))
    assert view == make_view()


def test_wheel_up_grows_zoom():
    view = make_view()
    handle_mouse(view, MOUSE_UP, 100, 50)
    assert view.zoom == pytest.approx(4.0 * 1.1)


def test_wheel_down_shrinks_zoom():
    view = make_view()
    handle_mouse(view, MOUSE_DOWN, 100, 50)
    assert view.zoom == pytest.approx(4.0 / 1.1)


@pytest.mark.parametrize("button", [MOUSE_UP, MOUSE_DOWN])
def test_point_under_pointer_stays_fixed(button):
    view = make_view()
    before = pixel_to_complex(30, 80, view)
    handle_mouse(view, button, 30, 80)
    after = pixel_to_complex(30, 80, view)
    assert after == pytest.approx(before)


def test_zoom_in_then_out_restores_zoom():
    view = make_view()
    handle_mouse(view, MOUSE_UP, 10, 10)
    handle_mouse(view, MOUSE_DOWN, 10, 10)
    assert view.zoom == pytest.approx(4.0)


def test_other_button_keeps_zoom():
    view = make_view()
    handle_mouse(view, 1, 40, 40)
    assert view.zoom == 4.0
    assert view.offset_x == pytest.approx(0.0)