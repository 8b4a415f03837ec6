"""In-memory 32-bit images and pixel colour conversion."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import ClassVar


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value & 0x80000000 else value


@dataclass
class Image:
    """A width x height image of 32-bit pixels, stored row by row.

    A new image is filled with zeros. Pixel values are kept as signed
    32-bit integers, so 0xFF000000 reads back as a negative number.
    """

    width: int
    height: int
    pixels: list[int] = field(default_factory=list, repr=False)

    bits_per_pixel: ClassVar[int] = 32

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"invalid image size {self.width}x{self.height}")
        count = self.width * self.height
        if not self.pixels:
            self.pixels = [0] * count
        elif len(self.pixels) != count:
            raise ValueError("pixel data does not match the image size")
        else:
            self.pixels = [_to_int32(p) for p in self.pixels]

    @property
    def size_line(self) -> int:
        """Bytes in one row of the image."""
        return self.width * (self.bits_per_pixel // 8)

    @property
    def endian(self) -> int:
        """0 for little-endian pixel storage, 1 for big-endian."""
        return 1 if sys.byteorder == "big" else 0

    def _index(self, x: int, y: int) -> int:
        index = y * (self.size_line // 4) + x
        if not 0 <= index < len(self.pixels):
            raise IndexError(f"pixel ({x}, {y}) is outside the image")
        return index

    def set_pixel(self, x: int, y: int, color: int) -> None:
        """Store a colour at (x, y)."""
        self.pixels[self._index(x, y)] = _to_int32(color)

    def get_pixel(self, x: int, y: int) -> int:
        """Return the colour stored at (x, y)."""
        return self.pixels[self._index(x, y)]

    def blit(self, source: Image, x: int, y: int) -> None:
        """Copy another image onto this one with its top-left corner at (x, y).

        Parts falling outside this image are clipped.
        """
        x0 = max(x, 0)
        x1 = min(x + source.width, self.width)
        if x0 >= x1:
            return
        for row in range(max(y, 0), min(y + source.height, self.height)):
            src_start = (row - y) * source.width + (x0 - x)
            dst_start = row * self.width + x0
            self.pixels[dst_start:dst_start + (x1 - x0)] = source.pixels[
                src_start:src_start + (x1 - x0)
            ]


def mask_shifts(red_mask: int, green_mask: int, blue_mask: int) -> tuple[int, ...]:
    """Return (shift, bits) for each of the red, green and blue masks, flattened."""
    result: list[int] = []
    for mask in (red_mask, green_mask, blue_mask):
        if mask <= 0:
            raise ValueError(f"invalid colour mask: {mask:#x}")
        shift = 0
        while not mask & 1:
            mask >>= 1
            shift += 1
        bits = 0
        while mask & 1:
            mask >>= 1
            bits += 1
        result.extend((shift, bits))
    return tuple(result)


def good_color(color: int, depth: int, decrgb: tuple[int, ...]) -> int:
    """Convert a 0xRRGGBB colour to a pixel value for a visual of the given depth.

    Depths of 24 bits and more use the colour as it is; shallower visuals
    pack it with the shifts from mask_shifts.
    """
    if depth >= 24:
        return color
    red = (color >> 8) & 0xFF00
    green = color & 0xFF00
    blue = (color << 8) & 0xFF00
    return (
        ((red >> (16 - decrgb[1])) << decrgb[0])
        + ((green >> (16 - decrgb[3])) << decrgb[2])
        + ((blue >> (16 - decrgb[5])) << decrgb[4])
    )