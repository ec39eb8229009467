import struct

import pytest

from rushsprites.chunk import load_chunk
from rushsprites.packer import main, pack


@pytest.fixture
def inputs(tmp_path):
    first = tmp_path / "a.bin"
    second = tmp_path / "b.bin"
    first.write_bytes(b"abc")
    second.write_bytes(b"hello")
    return first, second


def test_header_layout(tmp_path, inputs):
    out = tmp_path / "out.bin"
    pack(out, inputs)
    data = out.read_bytes()
    assert data[0] == 2
    assert struct.unpack("<IIII", data[1:17]) == (0, 3, 3, 5)
    assert data[17:] == b"abchello"


def test_round_trip_through_chunk_loader(tmp_path, inputs):
    out = tmp_path / "out.bin"
    pack(out, inputs)
    for index, path in enumerate(inputs):
        assert load_chunk(out, index).data == path.read_bytes()


def test_missing_input_raises(tmp_path, inputs):
    with pytest.raises(FileNotFoundError):
        pack(tmp_path / "out.bin", [inputs[0], tmp_path / "missing.bin"])


def test_no_inputs_raises(tmp_path):
    with pytest.raises(ValueError):
        pack(tmp_path / "out.bin", [])


def test_main_without_enough_arguments(capsys):
    assert main([]) == 1
    assert "Usage: packer" in capsys.readouterr().err


def test_main_packs_files(tmp_path, inputs):
    out = tmp_path / "out.bin"
    assert main([str(out), str(inputs[1])]) == 0
    assert load_chunk(out, 0).data == b"hello"


def test_main_reports_missing_input(tmp_path, capsys):
    assert main([str(tmp_path / "out.bin"), str(tmp_path / "missing.bin")]) == 1
    assert "Failed" in capsys.readouterr().err