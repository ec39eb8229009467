# rushsprites

Tools for the sprite animations stored in Diamond Rush chunk files:

- read one chunk out of a packed chunk file,
- decode its palettes, textures, tile positions and frame layouts,
- play the animation in a window over a tiled background, or dump every
  frame to PNG files,
- pack loose files into a chunk file.

## Installation

```
pip install .
```

This also installs `pygame`, which provides the player window. Textures,
palettes, chunks, PNG writing and packing do not need a display.

## Playing an animation

```
animation-player [-d] [-f FPS] [-s SCALE] [-b BG_INDEX] [-c CHUNK_INDEX] [-p PALETTE_INDEX] FILE
```

| Option             | Meaning                                          | Default |
|--------------------|--------------------------------------------------|---------|
| `-d`               | Dump all frames to PNG files instead of playing  | off     |
| `-f FPS`           | Frames per second (1 to 60)                      | 8       |
| `-s SCALE`         | Scale factor for the image (1 to 5)              | 3       |
| `-b BG_INDEX`      | Background tile: 0 Angkor, 1 Bavaria, 2 Siberia  | 0       |
| `-c CHUNK_INDEX`   | Chunk to load from `FILE` (required, 0 or more)  |         |
| `-p PALETTE_INDEX` | Palette of the sprite to use                     | 0       |

An out-of-range value for `-f`, `-s`, `-b` or `-p` keeps the default and
prints a note on standard error. A missing or negative chunk index, a missing
file name, an unknown option or an option without its value prints the usage
text and exits with status 1.

The window is 11 x 11 background tiles of 24 pixels, times the scale; frames
are drawn from the sixth tile in each direction. When the sprite has no frame
layout, the player shows its textures one after another. Playing loops until
the window is closed.

With `-d`, frames are written as `save/frames_dump_001.png`,
`save/frames_dump_002.png`, and so on; the `save` directory is created if
needed.

The same command can be started as `python -m rushsprites.player`.

## Packing files into a chunk file

```
packer OUT_FILE IN_FILE [IN_FILE ...]
```

The output starts with one byte holding the number of files (at most 255),
followed by a little-endian 32-bit offset and size for each file, with offsets
counted from the end of that table, then the files' contents one after
another. Fewer than two arguments prints the usage text; both failures exit
with status 1.

## Using the library

```python
from rushsprites.chunk import load_chunk
from rushsprites.sprite import load_sprite
from rushsprites.png import save_png

chunk = load_chunk("data.bin", 3)
sprite = load_sprite(chunk, 2)
texture = sprite.texture(0, 0)
save_png("texture.png", texture.width, texture.height, texture.rgba_bytes())
```

Building blocks:

- `rushsprites.chunk`: `load_chunk(filename, index)` returns a `Chunk` with
  `read_u8`, `read_u16` (little-endian), `read_bytes`, `skip`, `rewind` and
  `save`.
- `rushsprites.palette`: `load_palettes(data, pixel_format, total_palettes,
  total_pixels)` decodes the `PixelFormat` values 0x8888, 0x4444, 0x5515 and
  0x6505 into `Palette` objects; `Palette.color(index)` returns 0 for an index
  out of range.
- `rushsprites.texture`: `decode_texture(data, decode_type, palette, width,
  height, scale)` decodes every `DecodeType` into a `Texture`, enlarging it by
  pixel repetition when `scale` is above 1.
- `rushsprites.sprite`: `load_sprite(chunk, scale)` returns a `Sprite` with its
  `dimensions`, `tile_pos`, `tile_pos_info`, `animation_info` and `palettes`;
  `Sprite.texture(texture_index, palette_index)` decodes one texture.
- `rushsprites.backgrounds`: `background_texture(index, scale)` builds one of
  the three built-in background tiles listed in `BACKGROUNDS`.
- `rushsprites.png`: `encode_png(width, height, rgba)` and `save_png(filename,
  width, height, rgba)` write 8-bit RGBA PNG images.
- `rushsprites.packer`: `pack(out_path, in_paths)` writes a chunk file.
- `rushsprites.graphic` and `rushsprites.player`: the `Graphic` window and
  the `Player` behind `animation-player`, with `parse_options(argv)` returning
  `Options`.

Errors are raised as `ChunkError`, `PaletteError`, `TextureError`,
`SpriteError` and `OptionsError`.

## What it does not do

The player only shows the frame layouts (`tile_pos_info`); the
`animation_info` table is read but not played as sequences. There is no tool
to take a chunk file apart again or to write sprite chunks; only whole files
can be packed.