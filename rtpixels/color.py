"""Conversion of 0xRRGGBB colours to pixel values of a TrueColor visual."""

from __future__ import annotations

from dataclasses import dataclass


def _mask_layout(mask: int) -> tuple[int, int]:
    """Return (shift, bit count) of a contiguous channel mask."""
    if mask <= 0:
        raise ValueError(f"channel mask must be positive, got {mask:#x}")
    shift = 0
    while not mask & 1:
        mask >>= 1
        shift += 1
    bits = 0
    while mask & 1:
        mask >>= 1
        bits += 1
    return shift, bits


def _scale(value16: int, bits: int) -> int:
    """Reduce a 16-bit channel value to ``bits`` bits."""
    if bits <= 16:
        return value16 >> (16 - bits)
    return value16 << (bits - 16)


@dataclass(frozen=True)
class ColorFormat:
    """Pixel layout of a visual: depth and per-channel shift and width."""

    depth: int
    red_shift: int
    red_bits: int
    green_shift: int
    green_bits: int
    blue_shift: int
    blue_bits: int

    @classmethod
    def from_masks(
        cls, depth: int, red_mask: int, green_mask: int, blue_mask: int
    ) -> ColorFormat:
        """Build a format from the channel masks of a TrueColor visual."""
        red_shift, red_bits = _mask_layout(red_mask)
        green_shift, green_bits = _mask_layout(green_mask)
        blue_shift, blue_bits = _mask_layout(blue_mask)
        return cls(
            depth=depth,
            red_shift=red_shift,
            red_bits=red_bits,
            green_shift=green_shift,
            green_bits=green_bits,
            blue_shift=blue_shift,
            blue_bits=blue_bits,
        )

    def pixel_value(self, color: int) -> int:
        """Return the pixel value that shows ``color`` in this format.

        Depths of 24 bits and more take the colour unchanged.
        """
        if self.depth >= 24:
            return color
        red = (color >> 8) & 0xFF00
        green = color & 0xFF00
        blue = (color << 8) & 0xFF00
        return (
            (_scale(red, self.red_bits) << self.red_shift)
            + (_scale(green, self.green_bits) << self.green_shift)
            + (_scale(blue, self.blue_bits) << self.blue_shift)
        )