"""
Position-addressable little-endian reader over an in-memory byte buffer.
"""

from pathlib import Path
from typing import Union

from data import (
    read_file_to_bytes,
    read_uint32,
    read_uint16,
    read_uint8,
    read_int32,
)
from .errors import TruncatedDataError


class CursorReader:
    """Cursor over a fixed byte buffer.

    Table scans jump away to decode an embedded record and resume afterwards,
    so the position is a plain value that can be read with ``tell()`` and
    restored with ``seek()``. One reader must not be shared between two
    decodes running at the same time.
    """

    def __init__(self, data: Union[bytes, bytearray, memoryview], position: int = 0):
        self.data = bytes(data)
        self.pos = 0
        self.seek(position)

    @classmethod
    def from_file(cls, filepath: Path) -> "CursorReader":
        return cls(read_file_to_bytes(filepath))

    def __len__(self) -> int:
        return len(self.data)

    def tell(self) -> int:
        return self.pos

    def seek(self, position: int) -> None:
        """Move to an absolute position. The end of the buffer is a valid position."""
        if position < 0 or position > len(self.data):
            raise TruncatedDataError(
                f"Seek to 0x{position:X} outside source of {len(self.data)} bytes"
            )
        self.pos = position

    def skip(self, count: int) -> None:
        self.seek(self.pos + count)

    def _take(self, size: int) -> int:
        start = self.pos
        if start + size > len(self.data):
            raise TruncatedDataError(
                f"Read of {size} byte(s) at 0x{start:X} past end of source "
                f"({len(self.data)} bytes)"
            )
        self.pos += size
        return start

    def read_byte(self) -> int:
        return read_uint8(self.data, self._take(1))

    def read_u16(self) -> int:
        return read_uint16(self.data, self._take(2))

    def read_u32(self) -> int:
        return read_uint32(self.data, self._take(4))

    def read_i32(self) -> int:
        return read_int32(self.data, self._take(4))

    def read_bytes(self, count: int) -> bytes:
        start = self._take(count)
        return self.data[start : start + count]
