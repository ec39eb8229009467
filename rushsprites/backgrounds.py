"""The built-in background tiles drawn behind animations."""

from __future__ import annotations

from dataclasses import dataclass

from .palette import PixelFormat, load_palettes
from .texture import DecodeType, Texture, decode_texture

TILE_SIZE = 24


@dataclass(frozen=True)
class Background:
    """One 24x24 background tile: an ARGB1555 palette and 4-bit pixel data."""

    name: str
    total_color: int
    palette_data: bytes
    decode_data: bytes


BACKGROUNDS: tuple[Background, ...] = (
    Background(
        "angkor",
        0xB,
        bytes.fromhex("06 89 e5 95 65 89 a6 a2 48 89 a5 91 47 af 46 9e aa 8d a7 91 0c 92"),
        bytes.fromhex(
            "40 02 22 22 22 00 00 00 04 41 20 00"
            "02 25 51 11 11 20 00 04 25 52 00 00"
            "22 55 11 32 05 55 55 55 55 10 00 44"
            "25 22 00 13 10 22 22 22 01 73 00 44"
            "25 00 00 17 30 00 00 00 00 17 04 00"
            "25 00 00 01 70 00 44 40 40 01 00 40"
            "25 20 00 00 10 00 22 11 11 11 20 00"
            "05 13 12 00 02 21 11 33 66 33 12 00"
            "02 11 13 33 33 33 33 33 31 11 11 20"
            "00 22 11 11 11 11 11 44 00 00 21 20"
            "01 10 00 00 00 00 00 44 00 00 02 22"
            "03 10 00 48 00 00 0a 00 04 40 00 22"
            "03 00 00 48 40 00 a1 00 48 a8 00 22"
            "00 00 00 04 84 01 31 00 48 8a 02 22"
            "00 00 00 00 08 43 10 00 04 44 05 22"
            "00 21 33 33 31 11 20 00 00 00 11 20"
            "01 36 66 66 66 66 61 22 22 21 71 04"
            "23 61 20 73 10 17 36 66 63 33 10 04"
            "13 12 00 87 31 00 01 11 11 12 00 44"
            "23 10 04 81 13 00 00 00 00 00 40 40"
            "21 10 00 00 40 00 00 00 99 98 08 40"
            "22 13 22 22 22 40 04 91 73 31 90 80"
            "02 21 33 11 91 17 77 71 92 23 90 48"
            "00 02 21 33 77 71 99 99 20 21 10 04"
        ),
    ),
    Background(
        "bavaria",
        0x9,
        bytes.fromhex("05 80 c8 98 87 90 0a a1 6b ad 00 80 2e c6 21 88 d1 da"),
        bytes.fromhex(
            "00 00 00 00 00 00 00 00 00 00 00 07"
            "00 00 00 00 00 02 86 66 66 68 80 27"
            "00 01 11 11 11 02 64 44 44 44 62 17"
            "00 01 33 33 31 02 64 44 43 44 62 17"
            "00 01 33 33 31 02 64 44 33 34 62 27"
            "00 00 00 00 00 00 11 11 11 11 10 07"
            "00 00 00 00 00 00 00 00 00 05 55 57"
            "02 88 66 66 66 80 22 22 22 20 55 57"
            "02 66 44 44 44 60 21 11 11 20 55 57"
            "02 64 44 44 44 60 21 11 11 20 55 57"
            "02 64 44 44 44 60 55 55 55 55 00 27"
            "00 11 11 11 11 10 00 00 00 00 00 17"
            "00 00 05 55 55 55 44 44 44 44 40 17"
            "55 55 52 11 11 25 33 33 33 33 30 27"
            "55 55 52 11 11 20 33 13 33 33 10 07"
            "55 55 52 22 22 20 33 31 33 31 10 07"
            "00 00 00 00 00 00 55 55 55 55 50 07"
            "02 44 44 44 44 42 00 02 22 22 20 07"
            "02 33 33 33 33 32 00 21 11 11 12 07"
            "02 33 33 33 33 32 00 21 11 11 12 07"
            "02 33 33 33 31 12 00 21 11 11 12 07"
            "00 22 22 22 22 20 00 02 22 22 20 07"
            "00 00 00 00 00 00 00 00 00 00 00 07"
            "00 00 00 00 00 00 00 00 00 00 00 07"
        ),
    ),
    Background(
        "siberia",
        0x7,
        bytes.fromhex("67 94 8a a0 30 ad ed a8 b4 c5 72 b9 f7 d1"),
        bytes.fromhex(
            "23 10 00 00 00 12 22 22 22 22 22 22"
            "52 23 10 00 01 26 45 56 64 45 54 44"
            "23 10 00 00 01 22 21 14 22 11 22 22"
            "00 00 00 00 00 31 10 15 22 10 12 10"
            "00 00 00 00 00 00 00 03 12 00 02 10"
            "00 00 00 00 00 00 00 00 12 00 02 10"
            "01 22 22 22 22 22 21 00 12 00 02 10"
            "12 64 55 66 64 45 44 10 13 00 02 10"
            "12 52 33 65 53 35 22 10 13 00 03 10"
            "01 21 03 42 21 11 21 00 11 00 03 10"
            "00 21 03 41 20 11 20 00 11 00 00 00"
            "00 21 03 51 20 11 30 00 00 00 00 00"
            "00 21 03 51 30 12 22 22 22 22 22 10"
            "00 31 03 20 11 54 46 66 66 64 46 51"
            "00 11 03 20 11 22 25 56 66 54 24 21"
            "00 00 00 30 10 11 10 16 54 34 34 11"
            "00 00 00 10 10 01 10 16 24 34 12 10"
            "00 00 00 00 10 01 10 14 35 12 02 10"
            "00 00 00 00 00 01 10 15 32 02 03 10"
            "01 22 22 22 22 22 21 02 33 03 01 00"
            "12 64 55 66 45 25 44 12 31 01 01 01"
            "12 52 11 52 21 12 22 13 00 01 00 00"
            "01 11 01 52 21 01 11 00 00 00 00 00"
            "00 00 00 30 00 00 00 00 00 00 00 00"
        ),
    ),
)


def background_texture(index: int, scale: int = 1) -> Texture:
    """Decode built-in background ``index`` into a 24x24 tile enlarged by ``scale``."""
    if not 0 <= index < len(BACKGROUNDS):
        raise IndexError(f"background index {index} out of range")
    bg = BACKGROUNDS[index]
    palette = load_palettes(bg.palette_data, PixelFormat.ARGB1555, 1, bg.total_color)[0]
    return decode_texture(
        bg.decode_data, DecodeType.NIBBLES, palette, TILE_SIZE, TILE_SIZE, scale
    )