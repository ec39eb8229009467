"""A window with an off-screen canvas that textures are drawn onto."""

from __future__ import annotations

import os
from enum import IntEnum
from typing import Union

import pygame

from .png import save_png

PathLike = Union[str, "os.PathLike[str]"]

_to_bytes = getattr(pygame.image, "tobytes", None) or pygame.image.tostring


class Transform(IntEnum):
    """How a texture is flipped or rotated when drawn; only the low two bits count."""

    NONE = 0
    MIRROR = 1
    MIRROR_ROT180 = 2
    ROT180 = 3

    @property
    def flips(self) -> tuple[bool, bool]:
        """Horizontal and vertical flips that produce this transform."""
        if self is Transform.MIRROR:
            return True, False
        if self is Transform.MIRROR_ROT180:
            return False, True
        if self is Transform.ROT180:
            return True, True
        return False, False


class Graphic:
    """A hidden window and a canvas; only one may be open at a time."""

    _active = False

    def __init__(self, title: str, width: int, height: int) -> None:
        if Graphic._active:
            raise RuntimeError("a graphic window is already open")
        if width <= 0 or height <= 0:
            raise ValueError("window size must be positive")
        pygame.display.init()
        try:
            pygame.display.set_caption(title)
            self._window = pygame.display.set_mode((width, height), pygame.HIDDEN)
        except pygame.error:
            pygame.display.quit()
            raise
        self.title = title
        self.width = width
        self.height = height
        self._canvas = pygame.Surface((width, height))
        self._closed = False
        Graphic._active = True

    def __enter__(self) -> "Graphic":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _check_open(self) -> None:
        if self._closed:
            raise RuntimeError("graphic window is closed")

    def create_texture(self, pixels: bytes, width: int, height: int) -> pygame.Surface:
        """Make a drawable texture from packed RGBA bytes."""
        self._check_open()
        if width <= 0 or height <= 0:
            raise ValueError("texture size must be positive")
        data = bytes(pixels)
        if len(data) != width * height * 4:
            raise ValueError(
                f"expected {width * height * 4} bytes of RGBA data, got {len(data)}"
            )
        return pygame.image.frombuffer(data, (width, height), "RGBA").copy()

    def draw(
        self, texture: pygame.Surface, x: int, y: int, transform: int = Transform.NONE
    ) -> None:
        """Blend ``texture`` onto the canvas at ``(x, y)``, transformed."""
        self._check_open()
        flip_x, flip_y = Transform(transform & 0x3).flips
        if flip_x or flip_y:
            texture = pygame.transform.flip(texture, flip_x, flip_y)
        self._canvas.blit(texture, (x, y))

    def present(self) -> None:
        """Copy the canvas to the window."""
        self._check_open()
        self._window.blit(self._canvas, (0, 0))
        pygame.display.flip()

    def show(self) -> None:
        """Make the window visible."""
        self._check_open()
        self._window = pygame.display.set_mode((self.width, self.height), pygame.SHOWN)

    def screenshot(self, filename: PathLike) -> None:
        """Save the canvas as a PNG file."""
        self._check_open()
        rgba = _to_bytes(self._canvas, "RGBA")
        save_png(filename, self.width, self.height, rgba)

    def close(self) -> None:
        """Close the window; closing twice does nothing."""
        if self._closed:
            return
        self._closed = True
        pygame.display.quit()
        Graphic._active = False