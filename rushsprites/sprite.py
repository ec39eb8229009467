"""Sprite chunks: texture data, tile layouts, animation tables and palettes."""

from __future__ import annotations

import struct
from dataclasses import dataclass

from .chunk import Chunk, ChunkError
from .palette import Palette, PaletteError, PixelFormat, load_palettes
from .texture import Texture, decode_texture

_MAGIC = bytes((0xDF, 0x03, 0x01, 0x01, 0x01, 0x01))
_POS_INFO = struct.Struct("<HH")


class SpriteError(Exception):
    """Raised when a sprite chunk is malformed or a lookup is out of range."""


@dataclass(frozen=True)
class Dimension:
    """Size of one texture in unscaled pixels."""

    width: int
    height: int


@dataclass(frozen=True)
class TilePos:
    """Placement of one texture inside a composed frame, already scaled."""

    texture_index: int
    x: int
    y: int
    transform: int


@dataclass(frozen=True)
class PosInfo:
    """A run of ``count`` entries starting at ``offset`` in another table."""

    count: int
    offset: int


@dataclass(frozen=True)
class Sprite:
    """Everything a sprite chunk holds, with texture data left encoded."""

    scale: int
    dimensions: tuple[Dimension, ...]
    tile_pos: tuple[TilePos, ...]
    tile_pos_info: tuple[PosInfo, ...]
    animation_info: tuple[PosInfo, ...]
    palettes: tuple[Palette, ...]
    decode_type: int
    texture_data: tuple[bytes, ...]

    @property
    def texture_count(self) -> int:
        return len(self.texture_data)

    @property
    def palette_count(self) -> int:
        return len(self.palettes)

    def texture(self, texture_index: int, palette_index: int) -> Texture:
        """Decode texture ``texture_index`` with palette ``palette_index``."""
        if not 0 <= texture_index < len(self.texture_data):
            raise SpriteError(f"texture index {texture_index} out of range")
        if not 0 <= palette_index < len(self.palettes):
            raise SpriteError(f"palette index {palette_index} out of range")
        dim = self.dimensions[texture_index]
        return decode_texture(
            self.texture_data[texture_index],
            self.decode_type,
            self.palettes[palette_index],
            dim.width,
            dim.height,
            self.scale,
        )


def _read_pos_infos(chunk: Chunk, count: int) -> tuple[PosInfo, ...]:
    infos = []
    for _ in range(count):
        first, second = _POS_INFO.unpack(chunk.read_bytes(_POS_INFO.size))
        infos.append(PosInfo(first & 0xFF, second))
    return tuple(infos)


def _read_tile_pos(chunk: Chunk, count: int, scale: int) -> tuple[TilePos, ...]:
    tiles = []
    for _ in range(count):
        tex_index, x, y, transform = struct.unpack("<BbbB", chunk.read_bytes(4))
        tiles.append(TilePos(tex_index, x * scale, y * scale, transform))
    return tuple(tiles)


def _read_sprite(chunk: Chunk, scale: int) -> Sprite:
    if chunk.read_bytes(len(_MAGIC)) != _MAGIC:
        raise SpriteError("sprite chunk has a wrong magic header")

    total_textures = chunk.read_u16()
    if not total_textures:
        raise SpriteError("sprite chunk holds no textures")
    dimensions = []
    for _ in range(total_textures):
        dim = chunk.read_u16()
        dimensions.append(Dimension(dim & 0xFF, dim >> 8))

    tile_pos = _read_tile_pos(chunk, chunk.read_u16(), scale)

    total_tile_pos_info = chunk.read_u16()
    tile_pos_info = _read_pos_infos(chunk, total_tile_pos_info)
    if total_tile_pos_info:
        chunk.skip(total_tile_pos_info * 4)

    unknown = chunk.read_u16()
    if unknown:
        chunk.skip(unknown * 5)

    animation_info = _read_pos_infos(chunk, chunk.read_u16())

    palette_type = chunk.read_u16()
    total_palettes = chunk.read_u8()
    total_pixels = chunk.read_u8()
    entry_size = 4 if palette_type == PixelFormat.ARGB8888 else 2
    palette_data = chunk.read_bytes(total_palettes * total_pixels * entry_size)
    palettes = load_palettes(palette_data, palette_type, total_palettes, total_pixels)

    decode_type = chunk.read_u16()
    texture_data = tuple(chunk.read_bytes(chunk.read_u16()) for _ in range(total_textures))

    return Sprite(
        scale=scale,
        dimensions=tuple(dimensions),
        tile_pos=tile_pos,
        tile_pos_info=tile_pos_info,
        animation_info=animation_info,
        palettes=tuple(palettes),
        decode_type=decode_type,
        texture_data=texture_data,
    )


def load_sprite(chunk: Chunk, scale: int = 1) -> Sprite:
    """Parse a sprite from ``chunk`` starting at its read position.

    A ``scale`` below 1 is treated as 1; tile offsets are multiplied by it and
    textures decoded from the sprite are enlarged by it.
    """
    scale = max(scale, 1)
    try:
        return _read_sprite(chunk, scale)
    except ChunkError as exc:
        raise SpriteError(f"sprite chunk is truncated: {exc}") from exc
    except PaletteError as exc:
        raise SpriteError(f"sprite palette is invalid: {exc}") from exc