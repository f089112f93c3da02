"""
Manifest describing every sprite written during an extraction.
"""

from pathlib import Path
from typing import Any, Dict, List

import numpy as np
import xxhash

from data import write_json_file, CURRENT_VERSION
from spr_files.extractor import ExtractionResult
from spr_files.sprite import SprFile


def pixel_digest(pixels: np.ndarray) -> str:
    """xxh3-64 digest of a sprite's RGBA bytes."""
    return xxhash.xxh3_64(np.ascontiguousarray(pixels).tobytes()).hexdigest()


def _result_status(result: ExtractionResult) -> str:
    if result.error is not None:
        return "invalid"
    if result.is_dummy:
        return "dummy"
    return "ok"


def build_manifest(
    spr: SprFile, results: List[ExtractionResult], file_names: List[str]
) -> Dict[str, Any]:
    sprites = []
    for result, file_name in zip(results, file_names):
        record = result.record
        entry = {
            "index": result.index,
            "file": file_name,
            "status": _result_status(result),
            "texture_index": record.texture_index,
            "position": [record.x, record.y],
            "size": [record.width, record.height],
            "translate": [record.x_translate, record.y_translate],
            "corner_colors": [list(color) for color in record.corner_colors],
        }
        if result.pixels is not None:
            entry["digest"] = pixel_digest(result.pixels)
        if result.error is not None:
            entry["error"] = str(result.error)
        sprites.append(entry)

    return {
        "version": CURRENT_VERSION,
        "translation_mode": spr.translation_mode,
        "textures": [
            {
                "index": i,
                "name": texture.name,
                "width": texture.width,
                "height": texture.height,
            }
            for i, texture in enumerate(spr.textures)
        ],
        "sprites": sprites,
    }


def write_manifest(
    spr: SprFile,
    results: List[ExtractionResult],
    file_names: List[str],
    output_path: Path,
) -> None:
    write_json_file(output_path, build_manifest(spr, results, file_names))
