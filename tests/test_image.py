import pytest

from fractscope.image import Image

IM1 = 42
IM3 = 242


def _map_color(x, y, w, h):
    return (x * 255) // w + ((((w - x) * 255) // w) << 16) + (((y * 255) // h) << 8)


@pytest.mark.parametrize("big_endian", [False, True])
def test_fill_color_map_reads_back(big_endian):
    image = Image(IM1, IM1, 32, big_endian)
    for y in range(IM1):
        for x in range(IM1):
            image.put_pixel(x, y, _map_color(x, y, IM1, IM1))
    for y in range(IM1):
        for x in range(IM1):
            assert image.get_pixel(x, y) == _map_color(x, y, IM1, IM1)


def test_size_line_for_test_images():
    assert Image(IM1, IM1, 32).size_line == IM1 * 4
    assert Image(IM3, IM3, 32).size_line == IM3 * 4


def test_buffer_length():
    image = Image(IM1, IM1, 32)
    assert len(image.to_bytes()) == image.size_line * IM1


def test_rows_are_padded_to_32_bits():
    image = Image(3, 2, 24)
    assert image.size_line % 4 == 0
    assert image.size_line >= 3 * 3


def test_byte_layout_little_endian():
    image = Image(2, 2, 32, big_endian=False)
    image.put_pixel(1, 1, 0x112233)
    offset = image.size_line + 4
    assert image.to_bytes()[offset:offset + 4] == b"\x33\x22\x11\x00"


def test_byte_layout_big_endian():
    image = Image(2, 2, 32, big_endian=True)
    image.put_pixel(0, 0, 0x112233)
    assert image.to_bytes()[:4] == b"\x00\x11\x22\x33"


def test_pixel_truncated_to_pixel_size():
    image = Image(1, 1, 16)
    image.put_pixel(0, 0, 0xABCDEF)
    assert image.get_pixel(0, 0) == 0xCDEF


def test_negative_colour_wraps_unsigned():
    image = Image(1, 1, 32)
    image.put_pixel(0, 0, -1)
    assert image.get_pixel(0, 0) == 0xFFFFFFFF


def test_new_image_is_black():
    image = Image(4, 3)
    assert set(image.to_bytes()) == {0}


@pytest.mark.parametrize("x,y", [(-1, 0), (0, -1), (4, 0), (0, 3)])
def test_out_of_bounds(x, y):
    image = Image(4, 3)
    with pytest.raises(IndexError):
        image.put_pixel(x, y, 0)
    with pytest.raises(IndexError):
        image.get_pixel(x, y)


@pytest.mark.parametrize("args", [(0, 1), (1, 0), (-2, 3)])
def test_bad_size(args):
    with pytest.raises(ValueError):
        Image(*args)


@pytest.mark.parametrize("bpp", [0, 12, -8])
def test_bad_depth(bpp):
    with pytest.raises(ValueError):
        Image(2, 2, bpp)