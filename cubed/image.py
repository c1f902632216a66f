"""In-memory 32-bit frame buffer that the renderer draws into."""

from __future__ import annotations

BYTES_PER_PIXEL = 4


class Image:
    """A width x height image stored as little-endian 32-bit pixels (B, G, R, pad)."""

    bits_per_pixel = BYTES_PER_PIXEL * 8
    endian = 0

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"image size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.line_length = width * BYTES_PER_PIXEL
        self.data = bytearray(self.line_length * height)

    def __repr__(self) -> str:
        return f"Image({self.width}, {self.height})"

    def _contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def _offset(self, x: int, y: int) -> int:
        return y * self.line_length + x * BYTES_PER_PIXEL

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Write a 0xRRGGBB color; coordinates outside the image are ignored."""
        x, y = int(x), int(y)
        if not self._contains(x, y):
            return
        offset = self._offset(x, y)
        self.data[offset] = color & 0xFF
        self.data[offset + 1] = (color >> 8) & 0xFF
        self.data[offset + 2] = (color >> 16) & 0xFF

    def get_pixel(self, x: int, y: int) -> int:
        """Return the 0xRRGGBB color at (x, y)."""
        if not self._contains(x, y):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        offset = self._offset(x, y)
        blue, green, red = self.data[offset:offset + 3]
        return (red << 16) | (green << 8) | blue

    def clear(self, color: int = 0) -> None:
        """Fill every pixel with one color."""
        pixel = bytes((color & 0xFF, (color >> 8) & 0xFF, (color >> 16) & 0xFF, 0))
        self.data[:] = pixel * (self.width * self.height)

    def to_rgb_bytes(self) -> bytes:
        """Return the pixels as packed R, G, B bytes, row by row."""
        rgb = bytearray(self.width * self.height * 3)
        rgb[0::3] = self.data[2::BYTES_PER_PIXEL]
        rgb[1::3] = self.data[1::BYTES_PER_PIXEL]
        rgb[2::3] = self.data[0::BYTES_PER_PIXEL]
        return bytes(rgb)