"""Keyboard and mouse handling that moves and zooms a view."""

from __future__ import annotations

from fractscope.fractals import View

ESC = 65307
UP = 65362
DOWN = 65364
LEFT = 65361
RIGHT = 65363
MOUSE_UP = 4
MOUSE_DOWN = 5

_PAN_STEP = 0.3
_ZOOM_FACTOR = 1.1


def handle_key(view: View, key: int) -> bool:
    """Apply a key release to the view.

    Arrow keys pan by a step proportional to the zoom. Returns False when
    the key asks to quit, True when the view should be drawn again.
    """
    if key == ESC:
        return False
    step = _PAN_STEP * view.zoom
    if key == UP:
        view.offset_y -= step
    elif key == DOWN:
        view.offset_y += step
    elif key == LEFT:
        view.offset_x -= step
    elif key == RIGHT:
        view.offset_x += step
    return True


def handle_mouse(view: View, button: int, x: int, y: int) -> None:
    """Zoom around the pointer for the wheel buttons.

    The point of the plane under the pointer stays where it is.
    """
    dx = x - view.width // 2
    dy = y - view.height // 2
    mouse_x = dx * view.zoom / view.width + view.offset_x
    mouse_y = dy * view.zoom / view.height + view.offset_y
    if button == MOUSE_UP:
        view.zoom *= _ZOOM_FACTOR
    elif button == MOUSE_DOWN:
        view.zoom /= _ZOOM_FACTOR
    view.offset_x = mouse_x - dx * view.zoom / view.width
    view.offset_y = mouse_y - dy * view.zoom / view.height