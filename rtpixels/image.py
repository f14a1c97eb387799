"""In-memory images with a raw pixel buffer."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

_BITMAP_PAD = 32
_SUPPORTED_BPP = (8, 16, 24, 32)


class ImageType(enum.IntEnum):
    """How an image's pixels are stored."""

    XIMAGE = 1
    SHM = 2
    SHM_PIXMAP = 3


@dataclass(eq=False)
class Image:
    """A width x height image whose rows are ``size_line`` bytes apart.

    ``byte_order`` is 0 for least significant byte first, 1 for most
    significant byte first.
    """

    width: int
    height: int
    bits_per_pixel: int
    size_line: int
    byte_order: int
    data: bytearray = field(repr=False)
    type: ImageType = ImageType.XIMAGE

    @classmethod
    def create(
        cls, width: int, height: int, bits_per_pixel: int, byte_order: int
    ) -> Image:
        """Create a zero-filled image; rows are padded to 32 bits."""
        if width <= 0 or height <= 0:
            raise ValueError(f"invalid image size {width}x{height}")
        if bits_per_pixel not in _SUPPORTED_BPP:
            raise ValueError(f"unsupported bits per pixel: {bits_per_pixel}")
        if byte_order not in (0, 1):
            raise ValueError(f"byte order must be 0 or 1, got {byte_order}")
        row_bits = width * bits_per_pixel
        size_line = (row_bits + _BITMAP_PAD - 1) // _BITMAP_PAD * (_BITMAP_PAD // 8)
        return cls(
            width=width,
            height=height,
            bits_per_pixel=bits_per_pixel,
            size_line=size_line,
            byte_order=byte_order,
            data=bytearray(size_line * height),
        )

    @property
    def bytes_per_pixel(self) -> int:
        return self.bits_per_pixel // 8

    def data_addr(self) -> tuple[bytearray, int, int, int]:
        """Return (buffer, bits per pixel, size of a line, byte order).

        The buffer is the image's own; writing to it changes the image.
        """
        return self.data, self.bits_per_pixel, self.size_line, self.byte_order

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height}")
        return y * self.size_line + x * self.bytes_per_pixel

    @property
    def _endian(self) -> str:
        return "big" if self.byte_order else "little"

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Store the low bytes of ``color`` at (x, y) in the image's byte order."""
        opp = self.bytes_per_pixel
        start = self._offset(x, y)
        value = color & ((1 << (8 * opp)) - 1)
        self.data[start:start + opp] = value.to_bytes(opp, self._endian)

    def get_pixel(self, x: int, y: int) -> int:
        """Return the pixel value stored at (x, y)."""
        opp = self.bytes_per_pixel
        start = self._offset(x, y)
        return int.from_bytes(self.data[start:start + opp], self._endian)