"""The animation player: shows or dumps the frames of a sprite chunk."""

from __future__ import annotations

import re
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence

import pygame

from .backgrounds import TILE_SIZE, background_texture
from .chunk import ChunkError, load_chunk
from .graphic import Graphic, Transform
from .sprite import SpriteError, load_sprite
from .texture import TextureError

PROG = "animation_player"
WINDOW_TITLE = "DiamondRush Animation Player"
GRID = 11
ANIMATION_CELL = 5

HELP = (
    "DiamondRush Animation Player v1.0\n\n"
    "Usage: animation_player [-d] [-f FPS] [-s SCALE] [-b BG_INDEX] "
    "[-c CHUNK_INDEX] [-p PALETTE_INDEX] [FILE]\n\n"
    "Play animations from DiamondRush's file\n\n"
    "  -d                Dump all animation frames\n"
    "  -f FPS            Set player FPS\n"
    "  -s SCALE          Rescale the image\n"
    "  -b BG_INDEX       Set background index (default: 0)\n"
    "  -c CHUNK_INDEX    Specify the chunk to extract\n"
    "  -p PALETTE_INDEX  Specify the palette to be used\n"
)


class OptionsError(Exception):
    """Raised when the command line cannot be used."""


@dataclass
class Options:
    """Settings for one run of the player."""

    scale: int = 3
    bg_index: int = 0
    dump_frames: bool = False
    chunk_index: int = -1
    palette_index: int = 0
    fps: int = 8
    animation_src: Optional[str] = None


def _atoi(text: str) -> int:
    match = re.match(r"\s*([+-]?\d+)", text)
    return int(match.group(1)) if match else 0


def _invalid(name: str) -> None:
    print(f"Info: Invalid {name}, using default setting.", file=sys.stderr)


def parse_options(argv: Sequence[str]) -> Options:
    """Parse command-line arguments (without the program name) into Options."""
    opts = Options()
    args = iter(argv)
    for arg in args:
        if len(arg) != 2 or not arg.startswith("-"):
            opts.animation_src = arg
            continue
        flag = arg[1]
        if flag == "d":
            opts.dump_frames = True
            continue
        if flag not in "sbcpf":
            raise OptionsError(f"{PROG}: invalid option -- {flag}")
        try:
            value = _atoi(next(args))
        except StopIteration:
            raise OptionsError(f"{PROG}: option requires an argument -- {flag}") from None
        if flag == "s":
            if 0 < value <= 5:
                opts.scale = value
            else:
                _invalid("scale")
        elif flag == "b":
            if 0 <= value < 3:
                opts.bg_index = value
            else:
                _invalid("background")
        elif flag == "c":
            if value < 0:
                raise OptionsError("Error: Invalid chunk index")
            opts.chunk_index = value
        elif flag == "p":
            if value >= 0:
                opts.palette_index = value
            else:
                _invalid("palette_index")
        else:
            if 0 < value <= 60:
                opts.fps = value
            else:
                _invalid("fps")

    if opts.chunk_index < 0:
        raise OptionsError("Error: No chunk index to be used.")
    if not opts.animation_src:
        raise OptionsError("Error: No file to be used.")
    return opts


class Player:
    """Loads a sprite chunk and draws its frames over a tiled background."""

    def __init__(self, options: Options) -> None:
        if not options.animation_src:
            raise ValueError("no animation file given")
        self.options = options
        self.scale = options.scale
        side = TILE_SIZE * GRID * self.scale
        self.graphic = Graphic(WINDOW_TITLE, side, side)
        try:
            chunk = load_chunk(options.animation_src, options.chunk_index)
            self.sprite = load_sprite(chunk, self.scale)
            bg = background_texture(options.bg_index, self.scale)
            self._background = self.graphic.create_texture(
                bg.rgba_bytes(), bg.width, bg.height
            )
            self._textures = []
            for index in range(self.sprite.texture_count):
                tex = self.sprite.texture(index, options.palette_index)
                self._textures.append(
                    self.graphic.create_texture(tex.rgba_bytes(), tex.width, tex.height)
                )
            self.single_image = not self.sprite.tile_pos_info
            if self.frame_count() == 0:
                raise SpriteError("No images found in file.")
        except BaseException:
            self.graphic.close()
            raise

    def __enter__(self) -> "Player":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def frame_count(self) -> int:
        """Number of frames: composed frames, or textures when there are none."""
        if self.single_image:
            return self.sprite.texture_count
        return len(self.sprite.tile_pos_info)

    def _draw_background(self) -> None:
        step = TILE_SIZE * self.scale
        for y in range(GRID):
            for x in range(GRID):
                self.graphic.draw(self._background, x * step, y * step, Transform.NONE)

    def _draw_animation(self, index: int) -> None:
        origin = TILE_SIZE * ANIMATION_CELL * self.scale
        if self.single_image:
            self.graphic.draw(self._textures[index], origin, origin, Transform.NONE)
            return
        infos = self.sprite.tile_pos_info
        if not 0 <= index < len(infos):
            return
        info = infos[index]
        for tile in self.sprite.tile_pos[info.offset:info.offset + info.count]:
            self.graphic.draw(
                self._textures[tile.texture_index],
                origin + tile.x,
                origin + tile.y,
                tile.transform,
            )

    def draw_frame(self, index: int) -> None:
        """Draw background and frame ``index``, then show them."""
        self._draw_background()
        self._draw_animation(index)
        self.graphic.present()

    def dump_frames(self, directory: str = "save") -> list[Path]:
        """Save every frame as ``frames_dump_NNN.png`` in ``directory``."""
        folder = Path(directory)
        folder.mkdir(parents=True, exist_ok=True)
        saved = []
        for index in range(self.frame_count()):
            path = folder / f"frames_dump_{index + 1:03d}.png"
            self.draw_frame(index)
            try:
                self.graphic.screenshot(path)
            except OSError as exc:
                print(f"{path}: {exc}", file=sys.stderr)
                continue
            print(f"Info: [{path}] saved", file=sys.stderr)
            saved.append(path)
        return saved

    def run(self) -> int:
        """Play frames in a loop until the window is closed; return the frames shown."""
        self.graphic.show()
        total = self.frame_count()
        frame_time = 1000 // self.options.fps
        frame = 0
        shown = 0
        while True:
            begin = pygame.time.get_ticks()
            if any(event.type == pygame.QUIT for event in pygame.event.get()):
                return shown
            self.draw_frame(frame)
            shown += 1
            delay = frame_time - (pygame.time.get_ticks() - begin)
            if delay > 0:
                pygame.time.delay(delay)
            frame = (frame + 1) % total

    def close(self) -> None:
        """Release the window."""
        self.graphic.close()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command-line entry point."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        options = parse_options(args)
    except OptionsError as exc:
        print(exc, file=sys.stderr)
        sys.stderr.write(HELP)
        return 1
    try:
        player = Player(options)
    except pygame.error as exc:
        print(f"Failed to init graphic: {exc}", file=sys.stderr)
        return 1
    except (ChunkError, SpriteError, TextureError, OSError, IndexError) as exc:
        print(f"Failed to load resources: {exc}", file=sys.stderr)
        return 1
    with player:
        if player.single_image:
            print("Info: Player will display single image.", file=sys.stderr)
        if options.dump_frames:
            player.dump_frames()
        else:
            player.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())