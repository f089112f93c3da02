"""Tests for sprite bounds annotation."""

import numpy as np

from spr_files import (
    BOUNDS_COLOR,
    CursorReader,
    SpriteRecord,
    annotate,
    annotate_all,
    decode,
)
from spr_builder import SpriteSpec, build_spr, numbered_texture

RED = list(BOUNDS_COLOR)


def _blank(width: int, height: int) -> np.ndarray:
    image = np.zeros((height, width, 4), dtype=np.uint8)
    image[:, :, 3] = 255
    return image


def _outlined(image: np.ndarray) -> np.ndarray:
    return np.all(image == np.array(BOUNDS_COLOR, dtype=np.uint8), axis=2)


def test_outline_is_one_pixel_wide():
    record = SpriteRecord(x=1, y=1, width=4, height=3, texture_index=0)

    result = annotate(_blank(8, 8), [record])

    mask = _outlined(result)
    expected = np.zeros((8, 8), dtype=bool)
    expected[1, 1:5] = True
    expected[3, 1:5] = True
    expected[1:4, 1] = True
    expected[1:4, 4] = True
    assert np.array_equal(mask, expected)


def test_input_image_is_not_mutated():
    image = _blank(4, 4)
    before = image.copy()

    result = annotate(image, [SpriteRecord(x=0, y=0, width=4, height=4, texture_index=0)])

    assert np.array_equal(image, before)
    assert result is not image
    assert _outlined(result).any()


def test_dummy_records_are_not_drawn():
    records = [
        SpriteRecord(x=0, y=0, width=0, height=3, texture_index=0),
        SpriteRecord(x=1, y=1, width=-2, height=2, texture_index=0),
    ]

    result = annotate(_blank(4, 4), records)

    assert not _outlined(result).any()


def test_single_pixel_rectangle():
    result = annotate(_blank(4, 4), [SpriteRecord(x=2, y=1, width=1, height=1, texture_index=0)])

    mask = _outlined(result)
    assert mask[1, 2]
    assert mask.sum() == 1


def test_one_pixel_tall_rectangle_is_a_line():
    result = annotate(_blank(6, 4), [SpriteRecord(x=1, y=2, width=4, height=1, texture_index=0)])

    mask = _outlined(result)
    assert mask[2, 1:5].all()
    assert mask.sum() == 4


def test_outline_keeps_texture_pixels_inside():
    image = _blank(5, 5)
    image[2, 2] = [10, 20, 30, 255]

    result = annotate(image, [SpriteRecord(x=0, y=0, width=5, height=5, texture_index=0)])

    assert result[2, 2].tolist() == [10, 20, 30, 255]


def test_annotate_all_groups_records_by_texture():
    data = build_spr(
        [numbered_texture(4, 4), numbered_texture(6, 6)],
        [SpriteSpec(1, 0, 0, 2, 2), SpriteSpec(1, 3, 3, 6, 6), SpriteSpec(0, 0, 0, 0, 0)],
    )
    spr = decode(CursorReader(data))

    sequential = annotate_all(spr, parallel=False)
    concurrent = annotate_all(spr)

    assert [img.shape for img in sequential] == [(4, 4, 4), (6, 6, 4)]
    assert not _outlined(sequential[0]).any()
    assert _outlined(sequential[1])[0, 0]
    assert _outlined(sequential[1])[5, 5]
    for seq, par in zip(sequential, concurrent):
        assert np.array_equal(seq, par)


def test_one_pixel_tall_rectangle_leaves_next_row_alone():
    result = annotate(_blank(6, 4), [SpriteRecord(x=1, y=1, width=3, height=1, texture_index=0)])

    mask = _outlined(result)
    assert mask[1].tolist() == [False, True, True, True, False, False]
    assert not mask[2].any()
    assert not mask[0].any()


def test_one_pixel_wide_rectangle_leaves_next_column_alone():
    result = annotate(_blank(4, 6), [SpriteRecord(x=2, y=1, width=1, height=3, texture_index=0)])

    mask = _outlined(result)
    assert mask[1:4, 2].all()
    assert not mask[:, 3].any()
    assert mask.sum() == 3


def test_outline_is_clipped_to_image():
    result = annotate(_blank(4, 4), [SpriteRecord(x=-1, y=2, width=3, height=5, texture_index=0)])

    mask = _outlined(result)
    expected = np.zeros((4, 4), dtype=bool)
    expected[2, 0:2] = True
    expected[2:4, 1] = True
    assert np.array_equal(mask, expected)
