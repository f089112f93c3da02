"""
Texture data structures.

A texture's pixels come from exactly one source: either index bytes looked up
in a palette, or direct RGBA colors. Colors are ``np.uint8`` arrays of shape
``(n, 4)`` in R, G, B, A order.
"""

from dataclasses import dataclass, field
from typing import Union

import numpy as np

from .errors import BoundsError


def _empty_colors() -> np.ndarray:
    return np.zeros((0, 4), dtype=np.uint8)


def _empty_indices() -> np.ndarray:
    return np.zeros(0, dtype=np.uint8)


@dataclass(frozen=True)
class IndexedPixels:
    """Index bytes plus the palette they point into."""

    index_data: np.ndarray
    palette: np.ndarray


@dataclass(frozen=True)
class DirectPixels:
    """Direct per-pixel RGBA colors."""

    colors: np.ndarray


PixelSource = Union[IndexedPixels, DirectPixels]


def expand_indexed(index_data: np.ndarray, palette: np.ndarray) -> np.ndarray:
    """Resolve every index through the palette.

    Raises:
        BoundsError: If any index is not smaller than the palette length
    """
    if index_data.size == 0:
        return _empty_colors()

    max_index = int(index_data.max())
    if max_index >= len(palette):
        raise BoundsError(
            f"Palette index {max_index} out of range for palette of {len(palette)} colors"
        )

    return palette[index_data]


@dataclass
class Texture:
    """Decoded embedded texture."""

    width: int
    height: int
    pixel_format: int
    source: PixelSource
    mipmap_count: int = 0
    name: str = ""
    end_offset: int = 0
    _expanded: np.ndarray = field(default=None, init=False, repr=False, compare=False)

    @property
    def palette(self) -> np.ndarray:
        if isinstance(self.source, IndexedPixels):
            return self.source.palette
        return _empty_colors()

    @property
    def index_data(self) -> np.ndarray:
        if isinstance(self.source, IndexedPixels):
            return self.source.index_data
        return _empty_indices()

    @property
    def raw_pixel_data(self) -> np.ndarray:
        if isinstance(self.source, DirectPixels):
            return self.source.colors
        return _empty_colors()

    def pixel_data(self) -> np.ndarray:
        """Expanded ``(width * height, 4)`` colors, computed once and read-only."""
        if self._expanded is None:
            if isinstance(self.source, IndexedPixels):
                pixels = expand_indexed(self.source.index_data, self.source.palette)
            else:
                pixels = np.array(self.source.colors, dtype=np.uint8)
            pixels.setflags(write=False)
            self._expanded = pixels
        return self._expanded

    def image(self) -> np.ndarray:
        """Expanded colors as a ``(height, width, 4)`` raster."""
        return self.pixel_data().reshape(self.height, self.width, 4)
