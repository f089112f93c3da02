"""
SPR files module for decoding SPR sprite atlas containers and extracting sprites.
"""

from .reader import CursorReader
from .errors import (
    SprError,
    FormatError,
    BoundsError,
    TextureIndexError,
    TruncatedDataError,
)
from .texture import (
    Texture,
    IndexedPixels,
    DirectPixels,
    expand_indexed,
)
from .tmx import read_tmx, TmxHeader
from .sprite import (
    SprFile,
    SpriteRecord,
    DUMMY,
)
from .spr_parser import SPRParser, decode, clamp_dimension
from .extractor import (
    ExtractionResult,
    extract_sprite,
    extract_record,
    extract_all,
    texture_pixel_buffers,
)
from .bounds import annotate, annotate_all
from .constants import (
    SprFormat,
    TranslationMode,
    Tmx,
    PixelFormat,
    BOUNDS_COLOR,
)

__all__ = [
    # Reader
    "CursorReader",
    # Errors
    "SprError",
    "FormatError",
    "BoundsError",
    "TextureIndexError",
    "TruncatedDataError",
    # Textures
    "Texture",
    "IndexedPixels",
    "DirectPixels",
    "expand_indexed",
    "read_tmx",
    "TmxHeader",
    # Sprite classes
    "SprFile",
    "SpriteRecord",
    "DUMMY",
    # Parsing
    "SPRParser",
    "decode",
    "clamp_dimension",
    # Extraction
    "ExtractionResult",
    "extract_sprite",
    "extract_record",
    "extract_all",
    "texture_pixel_buffers",
    # Bounds
    "annotate",
    "annotate_all",
    # Constants
    "SprFormat",
    "TranslationMode",
    "Tmx",
    "PixelFormat",
    "BOUNDS_COLOR",
]
