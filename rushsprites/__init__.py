"""Read, pack and play sprite animations from Diamond Rush chunk files."""

__version__ = "1.0.0"
__all__ = [
    "backgrounds",
    "chunk",
    "graphic",
    "packer",
    "palette",
    "player",
    "png",
    "sprite",
    "texture",
]