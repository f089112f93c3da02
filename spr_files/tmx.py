"""
TMX texture reading.

TMX is the PlayStation 2 texture container embedded in SPR files. Only the
parts needed to produce RGBA pixels are decoded: header, first palette, and
the base mipmap level.
"""

import numpy as np

from data import DEBUG
from .constants import Tmx, PixelFormat
from .errors import FormatError
from .reader import CursorReader
from .texture import Texture, IndexedPixels, DirectPixels


class TmxHeader:
    """TMX header structure (64 bytes)."""

    def __init__(self):
        self.file_id = 0
        self.user_id = 0
        self.file_size = 0
        self.magic = 0
        self.palette_count = 0
        self.palette_format = 0
        self.width = 0
        self.height = 0
        self.pixel_format = 0
        self.mipmap_count = 0
        self.mip_kl = 0
        self.wrap_modes = 0
        self.user_texture_id = 0
        self.user_clut_id = 0
        self.user_comment = ""

    @classmethod
    def read_from_reader(cls, reader: CursorReader) -> "TmxHeader":
        """Read TMX header at the reader's current position."""
        header = cls()
        header.file_id = reader.read_u16()
        header.user_id = reader.read_u16()
        header.file_size = reader.read_u32()
        header.magic = reader.read_u32()
        if header.magic != Tmx.MAGIC:
            raise FormatError(f"Invalid TMX magic 0x{header.magic:08X}")
        reader.skip(4)
        header.palette_count = reader.read_byte()
        header.palette_format = reader.read_byte()
        header.width = reader.read_u16()
        header.height = reader.read_u16()
        header.pixel_format = reader.read_byte()
        header.mipmap_count = reader.read_byte()
        header.mip_kl = reader.read_u16()
        reader.skip(1)
        header.wrap_modes = reader.read_byte()
        header.user_texture_id = reader.read_u32()
        header.user_clut_id = reader.read_u32()
        comment = reader.read_bytes(Tmx.USER_COMMENT_LEN)
        header.user_comment = comment.split(b"\x00", 1)[0].decode("ascii", errors="replace")
        return header


def _scale_alpha(alpha: np.ndarray) -> np.ndarray:
    """Map PS2 alpha (0..0x80) onto 0..255."""
    scaled = alpha.astype(np.uint16) * 255 // Tmx.ALPHA_MAX
    return np.minimum(scaled, 255).astype(np.uint8)


def decode_colors(raw: bytes, color_format: int) -> np.ndarray:
    """Decode direct colors stored in one of the PSMCT formats to RGBA."""
    if color_format == PixelFormat.PSMCT32:
        colors = np.frombuffer(raw, dtype=np.uint8).reshape(-1, 4).copy()
        colors[:, 3] = _scale_alpha(colors[:, 3])
        return colors

    if color_format == PixelFormat.PSMCT24:
        rgb = np.frombuffer(raw, dtype=np.uint8).reshape(-1, 3)
        colors = np.full((len(rgb), 4), 255, dtype=np.uint8)
        colors[:, :3] = rgb
        return colors

    if color_format in (PixelFormat.PSMCT16, PixelFormat.PSMCT16S):
        values = np.frombuffer(raw, dtype="<u2")
        colors = np.empty((len(values), 4), dtype=np.uint8)
        colors[:, 0] = (values & 0x1F) << 3
        colors[:, 1] = ((values >> 5) & 0x1F) << 3
        colors[:, 2] = ((values >> 10) & 0x1F) << 3
        colors[:, 3] = np.where(values & 0x8000, 255, 0)
        return colors

    raise FormatError(f"Unsupported TMX color format 0x{color_format:02X}")


def untile_palette(palette: np.ndarray) -> np.ndarray:
    """Undo the PS2 CLUT layout of a 256-color palette.

    Within every block of 32 entries, entries 8..15 and 16..23 swap places.
    """
    order = np.arange(len(palette))
    tiled = (order & 0xE7) | ((order & 0x10) >> 1) | ((order & 0x08) << 1)
    return palette[tiled]


def _read_palette(reader: CursorReader, header: TmxHeader) -> np.ndarray:
    color_count = PixelFormat.PALETTE_SIZES[header.pixel_format]
    bytes_per_color = PixelFormat.BYTES_PER_COLOR.get(header.palette_format)
    if bytes_per_color is None:
        raise FormatError(f"Unsupported TMX palette format 0x{header.palette_format:02X}")

    palette_len = color_count * bytes_per_color
    palette = decode_colors(reader.read_bytes(palette_len), header.palette_format)
    # Only the first palette is used
    reader.skip(palette_len * (header.palette_count - 1))

    if color_count == 256:
        palette = untile_palette(palette)
    return palette


def _read_indices(reader: CursorReader, header: TmxHeader) -> np.ndarray:
    pixel_count = header.width * header.height

    if header.pixel_format == PixelFormat.PSMT8:
        return np.frombuffer(reader.read_bytes(pixel_count), dtype=np.uint8).copy()

    # PSMT4: two pixels per byte, low nibble first
    packed = np.frombuffer(reader.read_bytes((pixel_count + 1) // 2), dtype=np.uint8)
    low = packed & 0x0F
    high = (packed >> 4) & 0x0F
    return np.stack([low, high], axis=1).flatten()[:pixel_count]


def read_tmx(reader: CursorReader) -> Texture:
    """Read a TMX texture at the reader's current position.

    On return the reader sits at the end of the texture, as given by the
    header's file size, so the caller can use it as an end-of-data cursor.
    """
    start = reader.tell()
    header = TmxHeader.read_from_reader(reader)
    pixel_count = header.width * header.height

    if header.pixel_format in PixelFormat.INDEXED:
        if header.palette_count == 0:
            raise FormatError(
                f"Indexed TMX texture '{header.user_comment}' has no palette"
            )
        palette = _read_palette(reader, header)
        source = IndexedPixels(index_data=_read_indices(reader, header), palette=palette)
    elif header.pixel_format in PixelFormat.BYTES_PER_COLOR:
        raw_len = pixel_count * PixelFormat.BYTES_PER_COLOR[header.pixel_format]
        source = DirectPixels(colors=decode_colors(reader.read_bytes(raw_len), header.pixel_format))
    else:
        raise FormatError(f"Unsupported TMX pixel format 0x{header.pixel_format:02X}")

    # Skips mipmap levels and any padding
    reader.seek(max(start + header.file_size, reader.tell()))

    if DEBUG:
        print(
            f"[DEBUG] TMX '{header.user_comment}' at 0x{start:X}: "
            f"{header.width}x{header.height} "
            f"{PixelFormat.NAMES.get(header.pixel_format, header.pixel_format)}"
        )

    return Texture(
        width=header.width,
        height=header.height,
        pixel_format=header.pixel_format,
        source=source,
        mipmap_count=header.mipmap_count,
        name=header.user_comment,
        end_offset=reader.tell(),
    )
