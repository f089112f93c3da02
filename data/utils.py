import json
import struct
from pathlib import Path
from typing import Any, Dict


def read_uint32(data: bytes, offset: int, little_endian: bool = True) -> int:
    fmt = "<I" if little_endian else ">I"
    return struct.unpack_from(fmt, data, offset)[0]


def read_uint16(data: bytes, offset: int, little_endian: bool = True) -> int:
    fmt = "<H" if little_endian else ">H"
    return struct.unpack_from(fmt, data, offset)[0]


def read_uint8(data: bytes, offset: int) -> int:
    return data[offset]


def read_int32(data: bytes, offset: int, little_endian: bool = True) -> int:
    fmt = "<i" if little_endian else ">i"
    return struct.unpack_from(fmt, data, offset)[0]


def write_uint32(value: int, little_endian: bool = True) -> bytes:
    fmt = "<I" if little_endian else ">I"
    return struct.pack(fmt, value)


def write_uint16(value: int, little_endian: bool = True) -> bytes:
    fmt = "<H" if little_endian else ">H"
    return struct.pack(fmt, value)


def write_uint8(value: int) -> bytes:
    return struct.pack("B", value)


def write_int32(value: int, little_endian: bool = True) -> bytes:
    fmt = "<i" if little_endian else ">i"
    return struct.pack(fmt, value)


def read_file_to_bytes(filepath: Path) -> bytes:
    with open(filepath, "rb") as f:
        return f.read()


def write_json_file(filepath: Path, data: Dict[str, Any], indent: int = 4) -> None:
    with open(filepath, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=indent, ensure_ascii=False)


def validate_path_exists_and_is_dir(path: Path, path_description: str = "Path") -> bool:
    if not path.exists():
        print(f"[ERROR] {path_description} does not exist: {path}\n")
        return False

    if not path.is_dir():
        print(f"[ERROR] Path is not a directory: {path}\n")
        return False

    return True


def digit_count(count: int) -> int:
    """Zero-padding width that keeps lexical and numeric file order in sync."""
    return len(str(count))
