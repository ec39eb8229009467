"""Packing files into a chunk container."""

from __future__ import annotations

import os
import shutil
import struct
import sys
from pathlib import Path
from typing import Iterable, Optional, Sequence, Union

PathLike = Union[str, "os.PathLike[str]"]

HELP = (
    "Usage: packer [OUT_FILE] [IN_FILES]\n\n"
    "A tool to pack file(s) into DiamondRush chunk file\n"
)

_ENTRY = struct.Struct("<II")
MAX_CHUNKS = 255


def pack(out_path: PathLike, in_paths: Iterable[PathLike]) -> None:
    """Write ``in_paths`` into ``out_path`` as one chunk each, in order.

    The container holds a count byte, an (offset, size) table of little-endian
    32-bit values with offsets counted from the end of the table, then the data.
    """
    paths = [Path(p) for p in in_paths]
    if not paths:
        raise ValueError("at least one input file is required")
    if len(paths) > MAX_CHUNKS:
        raise ValueError(f"at most {MAX_CHUNKS} files can be packed")
    sizes = [path.stat().st_size for path in paths]

    with open(out_path, "wb") as out:
        out.write(bytes((len(paths),)))
        offset = 0
        for size in sizes:
            out.write(_ENTRY.pack(offset, size))
            offset += size
        for path in paths:
            with path.open("rb") as src:
                shutil.copyfileobj(src, out)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command line entry: ``packer OUT_FILE IN_FILE...``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 2:
        sys.stderr.write(HELP)
        return 1
    try:
        pack(args[0], args[1:])
    except (OSError, ValueError) as exc:
        print(f"Failed to pack files: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())