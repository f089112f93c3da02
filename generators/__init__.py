"""
SPR extraction generators module

This module provides functions for turning SPR containers into sprite and texture images
"""

from .spr_transform import (
    load_spr,
    extract_spr_sprites,
    extract_spr_bounds,
    spr_extract_main,
    spr_extract_process_single,
    spr_extract_process_multiple,
)

__all__ = [
    "load_spr",
    "extract_spr_sprites",
    "extract_spr_bounds",
    "spr_extract_main",
    "spr_extract_process_single",
    "spr_extract_process_multiple",
]
