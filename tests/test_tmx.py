"""Tests for TMX texture reading and palette expansion."""

import numpy as np
import pytest

from spr_files import (
    BoundsError,
    CursorReader,
    DirectPixels,
    FormatError,
    IndexedPixels,
    PixelFormat,
    Texture,
    expand_indexed,
    read_tmx,
)
from spr_files.tmx import untile_palette
from spr_builder import build_tmx, numbered_texture


def test_psmct32_scales_alpha():
    raw = bytes([10, 20, 30, 0x80, 1, 2, 3, 0x40, 0, 0, 0, 0, 9, 9, 9, 0xFF])
    texture = read_tmx(CursorReader(build_tmx(2, 2, PixelFormat.PSMCT32, raw)))

    assert isinstance(texture.source, DirectPixels)
    assert texture.pixel_data().tolist() == [
        [10, 20, 30, 255],
        [1, 2, 3, 127],
        [0, 0, 0, 0],
        [9, 9, 9, 255],
    ]
    assert texture.palette.shape == (0, 4)
    assert texture.index_data.size == 0


def test_header_fields_and_name():
    data = numbered_texture(4, 2, comment="font_main")
    texture = read_tmx(CursorReader(data))

    assert (texture.width, texture.height) == (4, 2)
    assert texture.pixel_format == PixelFormat.PSMCT32
    assert texture.name == "font_main"
    assert texture.end_offset == len(data)
    assert texture.image().shape == (2, 4, 4)


def test_psmt4_low_nibble_first():
    palette = np.zeros((16, 4), dtype=np.uint8)
    palette[:, 0] = np.arange(16) * 10
    palette[:, 3] = 0x80
    pixels = bytes([0x21, 0x43])

    texture = read_tmx(
        CursorReader(build_tmx(2, 2, PixelFormat.PSMT4, pixels, palette=palette))
    )

    assert isinstance(texture.source, IndexedPixels)
    assert texture.index_data.tolist() == [1, 2, 3, 4]
    assert texture.pixel_data()[:, 0].tolist() == [10, 20, 30, 40]


def test_psmt8_palette_is_untiled():
    palette = np.zeros((256, 4), dtype=np.uint8)
    palette[:, 0] = np.arange(256)
    palette[:, 3] = 0x80
    pixels = bytes([8, 16, 31, 200])

    texture = read_tmx(
        CursorReader(build_tmx(2, 2, PixelFormat.PSMT8, pixels, palette=palette))
    )

    assert texture.palette[:, 0].tolist() == list(range(256))
    assert texture.pixel_data()[:, 0].tolist() == [8, 16, 31, 200]


def test_untile_palette_swaps_middle_blocks():
    order = untile_palette(np.arange(32))
    assert order[8:16].tolist() == list(range(16, 24))
    assert order[16:24].tolist() == list(range(8, 16))
    assert order[:8].tolist() == list(range(8))


def test_psmct16_bits():
    values = np.array([0x801F, 0x03E0], dtype="<u2")
    texture = read_tmx(CursorReader(build_tmx(2, 1, PixelFormat.PSMCT16, values.tobytes())))

    assert texture.pixel_data().tolist() == [[248, 0, 0, 255], [0, 248, 0, 0]]


def test_end_offset_skips_trailing_data():
    data = build_tmx(1, 1, PixelFormat.PSMCT32, bytes(4), trailing=bytes(12))
    reader = CursorReader(data + bytes(8))

    read_tmx(reader)

    assert reader.tell() == len(data)


def test_bad_magic():
    data = bytearray(numbered_texture(1, 1))
    data[8] = 0
    with pytest.raises(FormatError):
        read_tmx(CursorReader(bytes(data)))


def test_unsupported_pixel_format():
    with pytest.raises(FormatError):
        read_tmx(CursorReader(build_tmx(1, 1, 0x1B, bytes(1))))


def test_indexed_texture_without_palette():
    with pytest.raises(FormatError):
        read_tmx(CursorReader(build_tmx(1, 1, PixelFormat.PSMT8, bytes(1))))


def test_expand_indexed_maps_through_palette():
    palette = np.array([[1, 1, 1, 1], [2, 2, 2, 2], [3, 3, 3, 3]], dtype=np.uint8)
    indices = np.array([2, 0, 1, 2, 2], dtype=np.uint8)

    expanded = expand_indexed(indices, palette)

    assert len(expanded) == len(indices)
    for i, index in enumerate(indices):
        assert expanded[i].tolist() == palette[index].tolist()


def test_expand_indexed_rejects_index_past_palette():
    palette = np.zeros((2, 4), dtype=np.uint8)
    with pytest.raises(BoundsError):
        expand_indexed(np.array([0, 2], dtype=np.uint8), palette)


def test_pixel_data_is_read_only():
    texture = Texture(
        width=1,
        height=1,
        pixel_format=PixelFormat.PSMCT32,
        source=DirectPixels(colors=np.array([[1, 2, 3, 4]], dtype=np.uint8)),
    )
    pixels = texture.pixel_data()

    assert pixels is texture.pixel_data()
    with pytest.raises(ValueError):
        pixels[0, 0] = 9


def test_first_of_several_palettes_is_used():
    first = np.zeros((16, 4), dtype=np.uint8)
    first[:, 0] = np.arange(16) * 10
    first[:, 3] = 0x80
    second = np.full((16, 4), 200, dtype=np.uint8)
    pixels = bytes([0x21, 0x43])
    data = build_tmx(
        2, 2, PixelFormat.PSMT4, pixels, palette=first, extra_palettes=[second.tobytes()]
    )
    reader = CursorReader(data)

    texture = read_tmx(reader)

    assert len(texture.palette) == 16
    assert texture.pixel_data()[:, 0].tolist() == [10, 20, 30, 40]
    assert texture.index_data.tolist() == [1, 2, 3, 4]
    assert reader.tell() == len(data)


def test_psmct24_is_opaque():
    raw = bytes([1, 2, 3, 200, 100, 50])
    texture = read_tmx(CursorReader(build_tmx(2, 1, PixelFormat.PSMCT24, raw)))

    assert texture.pixel_data().tolist() == [[1, 2, 3, 255], [200, 100, 50, 255]]


def test_psmct16s_matches_psmct16():
    values = np.array([0x801F, 0xFC00, 0x0000], dtype="<u2")
    texture = read_tmx(CursorReader(build_tmx(3, 1, PixelFormat.PSMCT16S, values.tobytes())))

    assert texture.pixel_data().tolist() == [
        [248, 0, 0, 255],
        [0, 0, 248, 255],
        [0, 0, 0, 0],
    ]


def test_psmct16_palette():
    entries = np.zeros(16, dtype="<u2")
    entries[1] = 0x801F
    entries[2] = 0x83E0
    entries[3] = 0x7C00
    texture = read_tmx(
        CursorReader(
            build_tmx(
                3,
                1,
                PixelFormat.PSMT4,
                bytes([0x21, 0x03]),
                palette=entries.tobytes(),
                palette_format=PixelFormat.PSMCT16,
            )
        )
    )

    assert texture.palette.shape == (16, 4)
    assert texture.pixel_data().tolist() == [
        [248, 0, 0, 255],
        [0, 248, 0, 255],
        [0, 0, 248, 0],
    ]
