"""An in-memory pixel buffer laid out like a ZPixmap image."""

from __future__ import annotations

_PAD_BITS = 32


class Image:
    """A width by height pixel buffer with rows padded to 32 bits."""

    def __init__(
        self,
        width: int,
        height: int,
        bits_per_pixel: int = 32,
        big_endian: bool = False,
    ) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"image size must be positive, got {width}x{height}")
        if bits_per_pixel <= 0 or bits_per_pixel % 8:
            raise ValueError(
                f"bits per pixel must be a positive multiple of 8, got {bits_per_pixel}"
            )
        self.width = width
        self.height = height
        self.bits_per_pixel = bits_per_pixel
        self.big_endian = big_endian
        row_bits = width * bits_per_pixel
        self.size_line = (row_bits + _PAD_BITS - 1) // _PAD_BITS * (_PAD_BITS // 8)
        self._data = bytearray(self.size_line * height)

    @property
    def bytes_per_pixel(self) -> int:
        return self.bits_per_pixel // 8

    @property
    def _byteorder(self) -> str:
        return "big" if self.big_endian else "little"

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(
                f"pixel ({x}, {y}) outside {self.width}x{self.height} image"
            )
        return y * self.size_line + x * self.bytes_per_pixel

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Store a pixel value, keeping as many low bytes as a pixel holds."""
        size = self.bytes_per_pixel
        offset = self._offset(x, y)
        value = color & ((1 << (8 * size)) - 1)
        self._data[offset:offset + size] = value.to_bytes(size, self._byteorder)

    def get_pixel(self, x: int, y: int) -> int:
        """Read a pixel value back as an unsigned integer."""
        size = self.bytes_per_pixel
        offset = self._offset(x, y)
        return int.from_bytes(self._data[offset:offset + size], self._byteorder)

    def to_bytes(self) -> bytes:
        """Return a copy of the raw buffer, row padding included."""
        return bytes(self._data)