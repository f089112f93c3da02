"""
Core configuration, constants, and utils
"""

from .config import (
    DEBUG,
    CURRENT_VERSION,
    DEFAULT_MAX_WORKERS,
)

from .utils import (
    read_uint32,
    read_uint16,
    read_uint8,
    read_int32,
    write_uint32,
    write_uint16,
    write_uint8,
    write_int32,
    read_file_to_bytes,
    write_json_file,
    validate_path_exists_and_is_dir,
    digit_count,
)

from .constants import (
    SEPARATOR_LINE_LENGTH,
    MANIFEST_FILE,
    SPRITE_FILE_PREFIX,
    DUMMY_SUFFIX,
    BOUNDS_SUFFIX,
)

__all__ = [
    # Config
    "DEBUG",
    "CURRENT_VERSION",
    "DEFAULT_MAX_WORKERS",
    # Utils
    "read_uint32",
    "read_uint16",
    "read_uint8",
    "read_int32",
    "write_uint32",
    "write_uint16",
    "write_uint8",
    "write_int32",
    "read_file_to_bytes",
    "write_json_file",
    "validate_path_exists_and_is_dir",
    "digit_count",
    # Constants
    "SEPARATOR_LINE_LENGTH",
    "MANIFEST_FILE",
    "SPRITE_FILE_PREFIX",
    "DUMMY_SUFFIX",
    "BOUNDS_SUFFIX",
]
