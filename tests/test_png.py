import struct
import zlib

import pytest

from rushsprites.png import encode_png, save_png


def _chunks(data):
    pos = 8
    while pos < len(data):
        (length,) = struct.unpack(">I", data[pos:pos + 4])
        tag = data[pos + 4:pos + 8]
        payload = data[pos + 8:pos + 8 + length]
        (crc,) = struct.unpack(">I", data[pos + 8 + length:pos + 12 + length])
        yield tag, payload, crc
        pos += 12 + length


RGBA = bytes(range(2 * 3 * 4))


def test_signature_and_chunk_order():
    data = encode_png(2, 3, RGBA)
    assert data[:8] == b"\x89PNG\r\n\x1a\n"
    assert [tag for tag, _, _ in _chunks(data)] == [b"IHDR", b"IDAT", b"IEND"]


def test_header_fields():
    tag, payload, _ = next(_chunks(encode_png(2, 3, RGBA)))
    assert tag == b"IHDR"
    assert struct.unpack(">IIBBBBB", payload) == (2, 3, 8, 6, 0, 0, 0)


def test_crcs_are_valid():
    for tag, payload, crc in _chunks(encode_png(2, 3, RGBA)):
        assert zlib.crc32(tag + payload) == crc


def test_pixel_data_round_trip():
    idat = b"".join(p for tag, p, _ in _chunks(encode_png(2, 3, RGBA)) if tag == b"IDAT")
    raw = zlib.decompress(idat)
    stride = 2 * 4 + 1
    rows = [raw[i:i + stride] for i in range(0, len(raw), stride)]
    assert len(rows) == 3
    assert all(row[0] == 0 for row in rows)
    assert b"".join(row[1:] for row in rows) == RGBA


@pytest.mark.parametrize("width, height, rgba", [(2, 3, b"\x00" * 23), (0, 1, b""), (1, -1, b"")])
def test_invalid_input(width, height, rgba):
    with pytest.raises(ValueError):
        encode_png(width, height, rgba)


def test_save_writes_encoded_bytes(tmp_path):
    path = tmp_path / "frame.png"
    save_png(path, 2, 3, RGBA)
    assert path.read_bytes() == encode_png(2, 3, RGBA)


def test_save_to_missing_directory_raises(tmp_path):
    with pytest.raises(OSError):
        save_png(tmp_path / "missing" / "frame.png", 2, 3, RGBA)