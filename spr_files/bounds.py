"""
Sprite bounds annotation: outlines every sprite rectangle on its texture.
"""

from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, List, Optional, Tuple

import numpy as np

from .constants import BOUNDS_COLOR
from .sprite import SprFile, SpriteRecord


def _clipped_span(start: int, end: int, limit: int) -> slice:
    """Slice covering ``start..end`` inclusive, clipped to ``0..limit-1``."""
    return slice(min(max(start, 0), limit), min(max(end + 1, 0), limit))


def annotate(
    texture_image: np.ndarray,
    records: Iterable[SpriteRecord],
    color: Tuple[int, int, int, int] = BOUNDS_COLOR,
) -> np.ndarray:
    """Draw a 1-pixel outline for each non-dummy record on a copy of the image.

    Each edge stays on the record's own rows and columns, so 1-pixel tall or
    wide records give a single line. Edges outside the image are clipped.

    Args:
        texture_image: ``(height, width, 4)`` RGBA raster, left untouched
        records: Sprite records referencing this texture

    Returns:
        New ``(height, width, 4)`` array with the outlines drawn
    """
    image = np.array(texture_image, dtype=np.uint8, copy=True)
    image_height, image_width = image.shape[:2]
    outline = np.array(color, dtype=np.uint8)

    for record in records:
        if record.is_dummy():
            continue

        left, top = record.x, record.y
        right = left + record.width - 1
        bottom = top + record.height - 1
        cols = _clipped_span(left, right, image_width)
        rows = _clipped_span(top, bottom, image_height)

        # Top, bottom
        for y in (top, bottom):
            if 0 <= y < image_height:
                image[y, cols] = outline
        # Left, right
        for x in (left, right):
            if 0 <= x < image_width:
                image[rows, x] = outline

    return image


def annotate_all(
    spr: SprFile, max_workers: Optional[int] = None, parallel: bool = True
) -> List[np.ndarray]:
    """Annotated raster for every texture, in texture order."""

    def _annotate(texture_index: int) -> np.ndarray:
        texture = spr.textures[texture_index]
        return annotate(texture.image(), spr.sprites_for_texture(texture_index))

    indices = range(len(spr.textures))

    if not parallel:
        return [_annotate(i) for i in indices]

    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        return list(executor.map(_annotate, indices))
