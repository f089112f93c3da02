"""
Image export functions for sprites and textures.
"""

import numpy as np
from pathlib import Path
from PIL import Image


def save_rgba_png(pixels: np.ndarray, img_path: Path) -> None:
    """Save a ``(height, width, 4)`` RGBA array as a PNG file."""
    img = Image.fromarray(np.ascontiguousarray(pixels, dtype=np.uint8))
    img.save(img_path, "PNG")


def write_dummy_file(dummy_path: Path) -> None:
    """Write the empty marker file that stands in for a dummy sprite."""
    dummy_path.touch()


def sprite_file_stem(index: int, digits: int, prefix: str) -> str:
    return f"{prefix}{index:0{digits}d}"
