import pytest

from rushsprites.backgrounds import BACKGROUNDS, background_texture
from rushsprites.palette import load_palettes


def _palette(index):
    bg = BACKGROUNDS[index]
    return load_palettes(bg.palette_data, 0x5515, 1, bg.total_color)[0]


@pytest.mark.parametrize("index", [0, 1, 2])
def test_tile_is_fully_drawn_from_palette(index):
    tex = background_texture(index, 1)
    palette = _palette(index)
    assert (tex.width, tex.height) == (24, 24)
    assert len(tex.pixels) == 24 * 24
    assert set(tex.pixels) <= set(palette.colors)


def test_first_pixel_uses_high_nibble():
    tex = background_texture(0, 1)
    assert tex.pixel(0, 0) == _palette(0).color(4)
    assert tex.pixel(1, 0) == _palette(0).color(0)


@pytest.mark.parametrize("index", [0, 1, 2])
def test_scaled_tile_repeats_pixels(index):
    small = background_texture(index, 1)
    big = background_texture(index, 3)
    assert (big.width, big.height) == (72, 72)
    for x, y in [(0, 0), (5, 7), (23, 23), (11, 2)]:
        assert big.pixel(x * 3 + 2, y * 3 + 1) == small.pixel(x, y)


@pytest.mark.parametrize("index", [-1, 3])
def test_out_of_range_index(index):
    with pytest.raises(IndexError):
        background_texture(index, 1)