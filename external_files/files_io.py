"""
Wrapper functions for writing all external files (sprite images, textures, and manifest).
"""

from pathlib import Path
from typing import List

import numpy as np

from data import (
    digit_count,
    MANIFEST_FILE,
    SPRITE_FILE_PREFIX,
    DUMMY_SUFFIX,
    BOUNDS_SUFFIX,
)
from spr_files.extractor import ExtractionResult
from spr_files.sprite import SprFile
from .images import save_rgba_png, write_dummy_file, sprite_file_stem
from .manifest import write_manifest


def texture_file_names(spr: SprFile) -> List[str]:
    """File stem for every texture, taken from its embedded name.

    Unnamed textures fall back to their index; repeated names get the index appended.
    """
    digits = digit_count(len(spr.textures))
    names = []
    seen = set()

    for i, texture in enumerate(spr.textures):
        name = texture.name.strip().replace("/", "_").replace("\\", "_")
        if not name:
            name = f"texture{i:0{digits}d}"
        if name in seen:
            name = f"{name}_{i:0{digits}d}"
        seen.add(name)
        names.append(name)

    return names


def write_sprite_files(
    spr: SprFile, results: List[ExtractionResult], output_dir: Path
) -> List[str]:
    """Write one PNG or dummy marker per sprite plus the manifest.

    Args:
        spr: Decoded SPR container
        results: Extraction results, one per sprite in index order
        output_dir: Output directory path

    Returns:
        Written file names in sprite order
    """
    output_dir.mkdir(parents=True, exist_ok=True)
    digits = digit_count(len(spr.sprites))
    file_names = []

    for result in results:
        stem = sprite_file_stem(result.index, digits, SPRITE_FILE_PREFIX)
        if result.pixels is not None:
            file_name = f"{stem}.png"
            save_rgba_png(result.pixels, output_dir / file_name)
        else:
            file_name = f"{stem}{DUMMY_SUFFIX}"
            write_dummy_file(output_dir / file_name)
        file_names.append(file_name)

    write_manifest(spr, results, file_names, output_dir / MANIFEST_FILE)

    return file_names


def write_bounds_files(
    spr: SprFile, annotated: List[np.ndarray], output_dir: Path
) -> List[str]:
    """Write each texture and its annotated bounds variant as PNG files.

    Returns:
        Texture file stems in texture order
    """
    output_dir.mkdir(parents=True, exist_ok=True)
    names = texture_file_names(spr)

    for texture, bounds_image, name in zip(spr.textures, annotated, names):
        save_rgba_png(texture.image(), output_dir / f"{name}.png")
        save_rgba_png(bounds_image, output_dir / f"{name}{BOUNDS_SUFFIX}.png")

    return names
