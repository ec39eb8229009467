"""Writing RGBA images as PNG files."""

from __future__ import annotations

import os
import struct
import zlib
from pathlib import Path
from typing import Union

PathLike = Union[str, "os.PathLike[str]"]

SIGNATURE = b"\x89PNG\r\n\x1a\n"
_COMPRESSION_LEVEL = 8


def _png_chunk(tag: bytes, payload: bytes) -> bytes:
    return (
        struct.pack(">I", len(payload))
        + tag
        + payload
        + struct.pack(">I", zlib.crc32(tag + payload))
    )


def encode_png(width: int, height: int, rgba: bytes) -> bytes:
    """Encode ``width`` x ``height`` packed RGBA pixels as an 8-bit RGBA PNG."""
    if width <= 0 or height <= 0:
        raise ValueError("image size must be positive")
    stride = width * 4
    rgba = bytes(rgba)
    if len(rgba) != stride * height:
        raise ValueError(f"expected {stride * height} bytes of RGBA data, got {len(rgba)}")

    scanlines = b"".join(
        b"\x00" + rgba[start:start + stride] for start in range(0, len(rgba), stride)
    )
    header = struct.pack(">IIBBBBB", width, height, 8, 6, 0, 0, 0)
    return (
        SIGNATURE
        + _png_chunk(b"IHDR", header)
        + _png_chunk(b"IDAT", zlib.compress(scanlines, _COMPRESSION_LEVEL))
        + _png_chunk(b"IEND", b"")
    )


def save_png(filename: PathLike, width: int, height: int, rgba: bytes) -> None:
    """Write packed RGBA pixels to ``filename`` as a PNG file."""
    Path(filename).write_bytes(encode_png(width, height, rgba))