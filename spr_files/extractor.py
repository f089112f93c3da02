"""
Sprite sub-rectangle extraction.

Texture pixel buffers are read-only once expanded and every sprite gets its
own output buffer, so records can be extracted in any order or concurrently.
"""

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import List, Optional, Sequence, Union

import numpy as np

from .errors import BoundsError, SprError, TextureIndexError
from .sprite import DUMMY, SprFile, SpriteRecord, _Dummy


def extract_sprite(
    texture_pixels: np.ndarray, texture_width: int, record: SpriteRecord
) -> Union[np.ndarray, _Dummy]:
    """Copy a record's rectangle out of a flat ``(n, 4)`` texture buffer.

    Rows are addressed through the flat buffer, so a rectangle wider than
    the space left in a row continues on the next row.

    Returns:
        ``(height, width, 4)`` array, or ``DUMMY`` for empty records

    Raises:
        BoundsError: If any source pixel lies outside ``texture_pixels``
    """
    if record.is_dummy():
        return DUMMY

    rows = (record.y + np.arange(record.height, dtype=np.int64)) * texture_width
    cols = record.x + np.arange(record.width, dtype=np.int64)
    source_index = rows[:, None] + cols[None, :]

    if source_index[0, 0] < 0 or source_index[-1, -1] >= len(texture_pixels):
        raise BoundsError(
            f"Sprite rectangle ({record.x}, {record.y}) {record.width}x{record.height} "
            f"reads outside texture buffer of {len(texture_pixels)} pixels"
        )

    return texture_pixels[source_index]


@dataclass
class ExtractionResult:
    """Outcome of extracting one sprite."""

    index: int
    record: SpriteRecord
    pixels: Optional[np.ndarray] = None
    error: Optional[SprError] = None

    @property
    def is_dummy(self) -> bool:
        return self.pixels is None


def texture_pixel_buffers(spr: SprFile) -> List[np.ndarray]:
    """Expand every texture once so extraction never repeats palette lookups."""
    return [texture.pixel_data() for texture in spr.textures]


def extract_record(
    spr: SprFile, buffers: Sequence[np.ndarray], index: int
) -> ExtractionResult:
    """Extract sprite ``index``, capturing bounds and reference errors."""
    record = spr.sprites[index]
    result = ExtractionResult(index=index, record=record)

    if record.is_dummy():
        return result

    try:
        if not 0 <= record.texture_index < len(buffers):
            raise TextureIndexError(
                f"Sprite {index} references texture {record.texture_index}, "
                f"container has {len(buffers)}"
            )
        width = spr.textures[record.texture_index].width
        result.pixels = extract_sprite(buffers[record.texture_index], width, record)
    except BoundsError as e:
        result.error = e

    return result


def extract_all(
    spr: SprFile,
    buffers: Optional[Sequence[np.ndarray]] = None,
    max_workers: Optional[int] = None,
    parallel: bool = True,
) -> List[ExtractionResult]:
    """Extract every sprite of ``spr``, in sprite index order.

    A failing record is reported in its own result and does not affect
    the others.
    """
    if buffers is None:
        buffers = texture_pixel_buffers(spr)

    indices = range(len(spr.sprites))

    if not parallel:
        return [extract_record(spr, buffers, i) for i in indices]

    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        return list(executor.map(lambda i: extract_record(spr, buffers, i), indices))
