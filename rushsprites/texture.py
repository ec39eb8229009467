"""Decoding of palette-indexed texture data into pixel images."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from enum import IntEnum
from itertools import islice
from typing import Iterator, Optional

from .palette import Palette


class TextureError(Exception):
    """Raised when texture data cannot be decoded."""


class DecodeType(IntEnum):
    """Encodings of texture data, by their on-disk tags."""

    RLE_127 = 0x27F1
    NIBBLES = 0x1600
    TWO_BIT = 0x0400
    ONE_BIT = 0x0200
    BYTES = 0x5602
    RLE_256 = 0x56F2


@dataclass(frozen=True)
class Texture:
    """A decoded image: row-major 32-bit colours whose little-endian bytes are R, G, B, A."""

    width: int
    height: int
    pixels: tuple[int, ...]

    def pixel(self, x: int, y: int) -> int:
        return self.pixels[y * self.width + x]

    def rgba_bytes(self) -> bytes:
        """Return the pixels as packed RGBA bytes, four per pixel."""
        return struct.pack(f"<{len(self.pixels)}I", *self.pixels)


def _next_byte(stream: Iterator[int]) -> int:
    try:
        return next(stream)
    except StopIteration:
        raise TextureError("texture data ends inside a run") from None


def _packed(data: bytes, palette: Palette, bits: int) -> Iterator[int]:
    mask = (1 << bits) - 1
    shifts = range(8 - bits, -1, -bits)
    for byte in data:
        for shift in shifts:
            yield palette.color((byte >> shift) & mask)


def _rle_127(data: bytes, palette: Palette) -> Iterator[int]:
    stream = iter(data)
    for value in stream:
        if value < 127:
            yield palette.color(value)
            continue
        color = palette.color(_next_byte(stream))
        for _ in range(value - 128):
            yield color


def _rle_256(data: bytes, palette: Palette) -> Iterator[int]:
    stream = iter(data)
    for value in stream:
        if value < 127:
            color = palette.color(_next_byte(stream))
            for _ in range(value):
                yield color
            continue
        for _ in range(value - 128):
            yield palette.color(_next_byte(stream))


def _colors(data: bytes, decode_type: DecodeType, palette: Palette) -> Iterator[int]:
    if decode_type is DecodeType.RLE_127:
        return _rle_127(data, palette)
    if decode_type is DecodeType.NIBBLES:
        return _packed(data, palette, 4)
    if decode_type is DecodeType.TWO_BIT:
        return _packed(data, palette, 2)
    if decode_type is DecodeType.ONE_BIT:
        return _packed(data, palette, 1)
    if decode_type is DecodeType.BYTES:
        return (palette.color(value) for value in data)
    return _rle_256(data, palette)


def decode_texture(
    data: bytes,
    decode_type: int,
    palette: Optional[Palette],
    width: int,
    height: int,
    scale: int = 1,
) -> Texture:
    """Decode ``data`` into a ``width`` x ``height`` texture, optionally upscaled.

    Colours beyond the image size are dropped; missing ones stay transparent.
    A ``scale`` above 1 enlarges the image by pixel repetition.
    """
    if palette is None or width <= 0 or height <= 0:
        raise TextureError("a palette and a positive size are required")
    try:
        kind = DecodeType(decode_type)
    except ValueError:
        raise TextureError(f"unknown decode type 0x{decode_type:04X}") from None

    total = width * height
    pixels = list(islice(_colors(bytes(data), kind, palette), total))
    pixels.extend([0] * (total - len(pixels)))

    if scale > 1:
        scaled: list[int] = []
        for start in range(0, total, width):
            row = [p for p in pixels[start:start + width] for _ in range(scale)]
            for _ in range(scale):
                scaled.extend(row)
        return Texture(width * scale, height * scale, tuple(scaled))
    return Texture(width, height, tuple(pixels))