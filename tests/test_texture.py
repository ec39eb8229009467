import pytest

from rushsprites.palette import Palette, load_palettes
from rushsprites.texture import DecodeType, TextureError, decode_texture

P = Palette((0x11111111, 0x22222222, 0x33333333, 0x44444444))
C0, C1, C2, C3 = P.colors


def test_nibbles():
    tex = decode_texture(bytes([0x12, 0x30]), DecodeType.NIBBLES, P, 4, 1)
    assert tex.pixels == (C1, C2, C3, C0)


def test_two_bit():
    tex = decode_texture(bytes([0b00011011]), 0x0400, P, 4, 1)
    assert tex.pixels == (C0, C1, C2, C3)


def test_one_bit():
    tex = decode_texture(bytes([0b10000001]), 0x0200, P, 8, 1)
    assert tex.pixels == (C1,) + (C0,) * 6 + (C1,)


def test_bytes():
    tex = decode_texture(bytes([3, 2, 1, 0]), 0x5602, P, 2, 2)
    assert tex.pixels == (C3, C2, C1, C0)
    assert tex.pixel(0, 1) == C1


def test_out_of_palette_index_is_transparent():
    tex = decode_texture(bytes([9]), 0x5602, P, 1, 1)
    assert tex.pixels == (0,)


def test_rle_127():
    tex = decode_texture(bytes([2, 128 + 3, 1]), 0x27F1, P, 2, 2)
    assert tex.pixels == (C2, C1, C1, C1)


def test_rle_127_marker_127_consumes_next_byte():
    tex = decode_texture(bytes([127, 3, 1]), 0x27F1, P, 1, 1)
    assert tex.pixels == (C1,)


def test_rle_256():
    tex = decode_texture(bytes([3, 1, 128 + 2, 0, 2]), 0x56F2, P, 5, 1)
    assert tex.pixels == (C1, C1, C1, C0, C2)


def test_truncated_run():
    with pytest.raises(TextureError):
        decode_texture(bytes([128 + 2]), 0x27F1, P, 4, 1)
    with pytest.raises(TextureError):
        decode_texture(bytes([128 + 3, 1]), 0x56F2, P, 4, 1)


def test_overflow_is_dropped():
    tex = decode_texture(bytes(range(4)) * 4, 0x5602, P, 2, 1)
    assert tex.pixels == (C0, C1)


def test_short_data_is_padded():
    tex = decode_texture(bytes([1]), 0x5602, P, 3, 1)
    assert tex.pixels == (C1, 0, 0)


def test_scale_repeats_pixels():
    base = decode_texture(bytes([0, 1, 2, 3, 1, 0]), 0x5602, P, 3, 2)
    tex = decode_texture(bytes([0, 1, 2, 3, 1, 0]), 0x5602, P, 3, 2, 2)
    assert (tex.width, tex.height) == (6, 4)
    assert len(tex.pixels) == 24
    for y in range(tex.height):
        for x in range(tex.width):
            assert tex.pixel(x, y) == base.pixel(x // 2, y // 2)


@pytest.mark.parametrize("scale", [0, 1, -3])
def test_small_scale_means_unscaled(scale):
    tex = decode_texture(bytes([1, 2]), 0x5602, P, 2, 1, scale)
    assert (tex.width, tex.height, tex.pixels) == (2, 1, (C1, C2))


def test_rgba_bytes_follow_palette():
    b, g, r, a = 0x40, 0x50, 0x60, 0x70
    (palette,) = load_palettes(bytes([b, g, r, a]), 0x8888, 1, 1)
    tex = decode_texture(bytes([0, 0]), 0x5602, palette, 2, 1)
    assert tex.rgba_bytes() == bytes([r, g, b, a]) * 2


def test_invalid_decode_type():
    with pytest.raises(TextureError):
        decode_texture(bytes([0]), 0x1234, P, 1, 1)


@pytest.mark.parametrize("width, height", [(0, 1), (1, 0), (-2, 3)])
def test_invalid_size(width, height):
    with pytest.raises(TextureError):
        decode_texture(bytes([0]), 0x5602, P, width, height)


def test_missing_palette():
    with pytest.raises(TextureError):
        decode_texture(bytes([0]), 0x5602, None, 1, 1)