"""Chunk container files and a cursor for reading one chunk's bytes."""

from __future__ import annotations

import os
import struct
from pathlib import Path
from typing import Union

PathLike = Union[str, "os.PathLike[str]"]

_TABLE_ENTRY = struct.Struct("<II")


class ChunkError(Exception):
    """Raised when a chunk file is malformed or a read runs past the chunk."""


class Chunk:
    """The bytes of one chunk with a read position."""

    def __init__(self, data: bytes) -> None:
        self._data = bytes(data)
        self.position = 0

    @property
    def data(self) -> bytes:
        return self._data

    @property
    def remaining(self) -> int:
        return len(self._data) - self.position

    def __len__(self) -> int:
        return len(self._data)

    def _take(self, count: int) -> bytes:
        if self.position + count > len(self._data):
            raise ChunkError(
                f"read of {count} bytes at offset {self.position} "
                f"runs past the end of a {len(self._data)}-byte chunk"
            )
        start = self.position
        self.position += count
        return self._data[start:self.position]

    def read_u8(self) -> int:
        """Read one unsigned byte."""
        return self._take(1)[0]

    def read_u16(self) -> int:
        """Read a little-endian unsigned 16-bit value."""
        return int.from_bytes(self._take(2), "little")

    def read_bytes(self, count: int) -> bytes:
        """Read ``count`` bytes; ``count`` must be positive."""
        if count <= 0:
            raise ChunkError("byte count must be positive")
        return self._take(count)

    def skip(self, count: int) -> None:
        """Advance the read position by ``count`` bytes; ``count`` must be positive."""
        if count <= 0:
            raise ChunkError("skip count must be positive")
        self._take(count)

    def rewind(self) -> None:
        """Move the read position back to the start."""
        self.position = 0

    def save(self, filename: PathLike) -> None:
        """Write the chunk's raw bytes to ``filename``."""
        if not self._data:
            raise ChunkError("cannot save an empty chunk")
        Path(filename).write_bytes(self._data)


def load_chunk(filename: PathLike, index: int) -> Chunk:
    """Load chunk ``index`` from a chunk container file.

    The file starts with a chunk count byte, then one (offset, size) pair of
    little-endian 32-bit values per chunk; offsets are relative to the end of
    that table.
    """
    if index < 0:
        raise ChunkError("chunk index must not be negative")
    with open(filename, "rb") as fp:
        head = fp.read(1)
        if not head or head[0] == 0:
            raise ChunkError("file holds no chunks")
        total = head[0]
        if index >= total:
            raise ChunkError(f"chunk index {index} out of range (file holds {total})")
        table = fp.read(_TABLE_ENTRY.size * total)
        if len(table) != _TABLE_ENTRY.size * total:
            raise ChunkError("chunk table is truncated")
        entries = list(_TABLE_ENTRY.iter_unpack(table))
        offset, size = entries[index]
        fp.seek(offset, os.SEEK_CUR)
        payload = fp.read(size)
    if size == 0 or len(payload) != size:
        raise ChunkError(f"chunk {index} data is missing or truncated")
    return Chunk(payload)