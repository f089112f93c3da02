"""
External files utility module for writing sprite images, textures, and manifests.
"""

from .files_io import (
    texture_file_names,
    write_sprite_files,
    write_bounds_files,
)
from .manifest import build_manifest, pixel_digest

__all__ = [
    "texture_file_names",
    "write_sprite_files",
    "write_bounds_files",
    "build_manifest",
    "pixel_digest",
]
