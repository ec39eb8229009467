"""Colour palettes stored in the game's packed pixel formats."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from enum import IntEnum
from typing import Callable


class PaletteError(Exception):
    """Raised when palette data cannot be decoded."""


class PixelFormat(IntEnum):
    """Pixel formats a palette may be stored in, by their on-disk tags."""

    ARGB8888 = 0x8888
    ARGB4444 = 0x4444
    ARGB1555 = 0x5515
    RGB565 = 0x6505

    @property
    def entry_size(self) -> int:
        return 4 if self is PixelFormat.ARGB8888 else 2


@dataclass(frozen=True)
class Palette:
    """A list of colours, each a 32-bit value whose little-endian bytes are R, G, B, A."""

    colors: tuple[int, ...]

    def color(self, index: int) -> int:
        """Return the colour at ``index``, or 0 (transparent) when out of range."""
        if 0 <= index < len(self.colors):
            return self.colors[index]
        return 0

    def __len__(self) -> int:
        return len(self.colors)


def _from_argb8888(c: int) -> int:
    return c


def _from_argb4444(c: int) -> int:
    return (
        (c & 0xF000) << 16
        | (c & 0xF000) << 12
        | (c & 0x0F00) << 12
        | (c & 0x0F00) << 8
        | (c & 0x00F0) << 8
        | (c & 0x00F0) << 4
        | (c & 0x000F) << 4
        | (c & 0x000F)
    )


def _from_argb1555(c: int) -> int:
    if not c & 0x8000:
        return 0
    return 0xFF000000 | (c & 0x7C00) << 9 | (c & 0x3E0) << 6 | (c & 0x1F) << 3


def _from_rgb565(c: int) -> int:
    if c == 0xF81F:
        return 0
    return 0xFF000000 | (c & 0xF800) << 8 | (c & 0x7E0) << 5 | (c & 0x1F) << 3


_CONVERTERS: dict[PixelFormat, tuple[str, Callable[[int], int]]] = {
    PixelFormat.ARGB8888: ("<I", _from_argb8888),
    PixelFormat.ARGB4444: ("<H", _from_argb4444),
    PixelFormat.ARGB1555: ("<H", _from_argb1555),
    PixelFormat.RGB565: ("<H", _from_rgb565),
}


def _swap_red_blue(argb: int) -> int:
    """Turn 0xAARRGGBB into 0xAABBGGRR so the little-endian bytes read R, G, B, A."""
    return (argb & 0xFF00FF00) | (argb & 0xFF) << 16 | (argb >> 16) & 0xFF


def load_palettes(
    data: bytes, pixel_format: int, total_palettes: int, total_pixels: int
) -> list[Palette]:
    """Decode ``total_palettes`` consecutive palettes of ``total_pixels`` colours each."""
    if total_palettes <= 0 or total_pixels <= 0:
        raise PaletteError("palette and colour counts must be positive")
    try:
        fmt = PixelFormat(pixel_format)
    except ValueError:
        raise PaletteError(f"unknown pixel format 0x{pixel_format:04X}") from None

    needed = total_palettes * total_pixels * fmt.entry_size
    if len(data) < needed:
        raise PaletteError(f"palette data holds {len(data)} bytes, {needed} needed")

    layout, convert = _CONVERTERS[fmt]
    colors = [
        _swap_red_blue(convert(value))
        for (value,) in struct.iter_unpack(layout, bytes(data[:needed]))
    ]
    return [
        Palette(tuple(colors[start:start + total_pixels]))
        for start in range(0, len(colors), total_pixels)
    ]