"""Tests for the cursor reader."""

import pytest

from spr_files import CursorReader, TruncatedDataError


def test_reads_little_endian_values():
    reader = CursorReader(bytes([0x34, 0x12, 0x78, 0x56, 0x34, 0x12, 0xFE, 0xFF, 0xFF, 0xFF, 0xAB]))

    assert reader.read_u16() == 0x1234
    assert reader.read_u32() == 0x12345678
    assert reader.read_i32() == -2
    assert reader.read_byte() == 0xAB
    assert reader.tell() == 11


def test_save_and_restore_position():
    reader = CursorReader(bytes(range(16)))
    reader.skip(4)
    saved = reader.tell()

    reader.seek(12)
    assert reader.read_byte() == 12

    reader.seek(saved)
    assert reader.read_byte() == 4


def test_seek_to_end_is_allowed():
    reader = CursorReader(bytes(8))
    reader.seek(8)
    assert reader.tell() == 8


def test_seek_past_end_raises():
    reader = CursorReader(bytes(8))
    with pytest.raises(TruncatedDataError):
        reader.seek(9)
    with pytest.raises(TruncatedDataError):
        reader.seek(-1)


def test_read_past_end_raises_and_keeps_position():
    reader = CursorReader(bytes(6))
    reader.seek(4)
    with pytest.raises(TruncatedDataError):
        reader.read_u32()
    assert reader.tell() == 4


def test_truncated_error_is_an_eof_error():
    reader = CursorReader(b"")
    with pytest.raises(EOFError):
        reader.read_byte()


def test_from_file(tmp_path):
    path = tmp_path / "data.bin"
    path.write_bytes(b"\x01\x00")
    assert CursorReader.from_file(path).read_u16() == 1
