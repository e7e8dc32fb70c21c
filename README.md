# fractscope

An interactive fractal explorer. It draws the Mandelbrot set, Julia sets
and the magnet fractal in a 1000×1000 window (using pygame), and lets you
pan and zoom around them.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install .[test]
pytest
```

## Running

```
fractscope mandelbrot
fractscope magnet
fractscope julia <c_real> <c_imaginary>
```

For a Julia set, give the real and imaginary parts of the constant `c` as
plain decimals. They may have a leading sign, digits and at most one dot
that is not the first character, for example:

```
fractscope julia -0.8 0.156
```

If the arguments are not valid, the command prints a usage message to
standard error and exits with status 1. When the window is closed it
exits with status 0.

## Controls

| Input              | Effect                                       |
|--------------------|----------------------------------------------|
| Arrow keys         | Pan by 0.3 of the current view span          |
| Mouse wheel up     | Widen the view (zoom out) by a factor of 1.1 |
| Mouse wheel down   | Narrow the view (zoom in) by a factor of 1.1 |
| Esc / close window | Quit                                         |

Zooming keeps the point under the mouse pointer fixed. The picture is
computed pixel by pixel in Python after every change, so each redraw
takes a noticeable moment.

## Using it as a library

- `fractscope.fractals`: `Fractal` (an enum of `MANDELBROT`, `JULIA`,
  `MAGNET`), the `View` dataclass (fractal, Julia constant, zoom, offsets,
  size), `pixel_to_complex`, `mandelbrot_escape`, `julia_escape`,
  `magnet_step`, `magnet_escape`, `get_color` and `render`. Each point is
  iterated at most 100 times; points that never escape are drawn black,
  others get a sine-based colour from `get_color`.
- `fractscope.events`: `handle_key(view, key)` pans the view and returns
  `False` for the Esc key code; `handle_mouse(view, button, x, y)` zooms
  around the pointer for wheel buttons 4 and 5.
- `fractscope.image`: `Image(width, height, bits_per_pixel=32,
  big_endian=False)`, a pixel buffer with rows padded to 32 bits, with
  `put_pixel`, `get_pixel` and `to_bytes`. Out-of-range pixels raise
  `IndexError`.
- `fractscope.xpm`: `load_xpm(path)` reads an XPM file (comments are
  removed and the quoted strings taken as lines) and `parse_xpm(lines)`
  builds an `Image` from the lines themselves. Malformed data raises
  `XpmError`. The helpers `words`, `strip_comments` and `text_to_rgb` are
  public too; the colour `None` becomes `0xFF000000` in the image.
- `fractscope.colors.lookup_color(name)` maps X11 colour names, ignoring
  ASCII case, to `0xRRGGBB` values (`"none"` gives -1; unknown names raise
  `KeyError`).
- `fractscope.visual`: `mask_shifts` and `convert_color` turn `0xRRGGBB`
  colours into pixel values for displays of less than 24 bits of depth.
- `fractscope.chars`: ASCII classification (`is_alpha`, `is_digit`,
  `is_alnum`, `is_ascii`, `is_print`), `to_upper`, `to_lower`, `atoi`
  (32-bit wrapping), `itoa`, `put_number` and `put_line`.
- `fractscope.text`: `split`, `trim`, `substr`, `find_bounded`,
  `compare_n`, `compare_bytes`, `find_byte`, `find_char`, `rfind_char`,
  `join`, `bounded_copy` and `bounded_concat`.
- `fractscope.app`: `check_double`, `to_double`, `parse_args` (raises
  `ValueError` carrying the usage text), `run(view)` for the window loop
  and `main(argv=None)` behind the `fractscope` command.

## What it does not do

The command only shows the three fractals. It cannot save a picture, and
XPM images read by `fractscope.xpm` are returned as `Image` buffers only;
nothing in the package displays or writes them. There is no drawing of
text or single pixels into the window beyond the rendered fractal.