"""
SPR container parser for reading .spr sprite atlas files.
"""

from typing import Callable, Optional, Tuple

from data import DEBUG
from .constants import SprFormat, TranslationMode
from .errors import FormatError
from .reader import CursorReader
from .sprite import SprFile, SpriteRecord, Color
from .texture import Texture
from .tmx import read_tmx

TextureDecoder = Callable[[CursorReader], Texture]


class SprHeader:
    """SPR header structure."""

    def __init__(self):
        self.magic = 0
        self.texture_count = 0
        self.sprite_count = 0
        self.texture_table_offset = 0
        self.sprite_table_offset = 0

    @classmethod
    def read_from_reader(cls, reader: CursorReader) -> "SprHeader":
        """Read SPR header at the reader's current position."""
        header = cls()
        reader.skip(SprFormat.HEADER_RESERVED_BEFORE_MAGIC)
        header.magic = reader.read_u32()
        if header.magic != SprFormat.MAGIC:
            raise FormatError(
                f"Not a proper SPR file: magic 0x{header.magic:08X}, "
                f"expected 0x{SprFormat.MAGIC:08X}"
            )
        reader.skip(SprFormat.HEADER_RESERVED_AFTER_MAGIC)
        header.texture_count = reader.read_u16()
        header.sprite_count = reader.read_u16()
        header.texture_table_offset = reader.read_u32()
        header.sprite_table_offset = reader.read_u32()
        return header


class SpriteDescriptor:
    """Raw per-sprite descriptor fields, before translation and clamping."""

    def __init__(self):
        self.texture_index = 0
        self.x_translate = 0
        self.y_translate = 0
        self.x1 = 0
        self.y1 = 0
        self.x2 = 0
        self.y2 = 0
        self.colors: Tuple[Color, ...] = ()

    @classmethod
    def read_from_reader(cls, reader: CursorReader, offset: int) -> "SpriteDescriptor":
        """Read the descriptor starting at absolute ``offset``."""
        desc = cls()
        reader.seek(offset + SprFormat.DESC_RESERVED_HEAD)
        desc.texture_index = reader.read_i32()
        reader.skip(SprFormat.DESC_RESERVED_AFTER_TEXTURE_INDEX)
        desc.x_translate = reader.read_i32()
        desc.y_translate = reader.read_i32()
        reader.skip(SprFormat.DESC_RESERVED_AFTER_TRANSLATE)
        desc.x1 = reader.read_i32()
        desc.y1 = reader.read_i32()
        desc.x2 = reader.read_i32()
        desc.y2 = reader.read_i32()
        desc.colors = tuple(
            tuple(reader.read_byte() for _ in range(4))
            for _ in range(SprFormat.CORNER_COLOR_COUNT)
        )
        return desc


def clamp_dimension(size: int, limit: int) -> int:
    """Replace a size larger than its texture's bound with the bound."""
    if size > limit:
        return limit
    return size


class SPRParser:
    """Parser for SPR sprite containers."""

    def __init__(
        self,
        reader: CursorReader,
        translation_mode: str = TranslationMode.SKIP,
        texture_decoder: Optional[TextureDecoder] = None,
    ):
        if translation_mode not in TranslationMode.ALL:
            raise ValueError(f"Unknown translation mode: {translation_mode}")

        self.reader = reader
        self.translation_mode = translation_mode
        self.texture_decoder = texture_decoder or read_tmx
        self.header: Optional[SprHeader] = None
        self.largest_offset = 0

    def parse(self) -> SprFile:
        """Decode the container starting at the reader's current position.

        The reader is left at the end of the container data.
        """
        file_start = self.reader.tell()
        self.header = SprHeader.read_from_reader(self.reader)
        self.largest_offset = self.reader.tell()

        spr = SprFile(
            texture_count=self.header.texture_count,
            sprite_count=self.header.sprite_count,
            texture_table_offset=self.header.texture_table_offset,
            sprite_table_offset=self.header.sprite_table_offset,
            file_start=file_start,
            translation_mode=self.translation_mode,
        )

        if DEBUG:
            print(
                f"[DEBUG] SPR at 0x{file_start:X}: {spr.texture_count} texture(s), "
                f"{spr.sprite_count} sprite(s)"
            )

        self._read_textures(spr)
        self._read_sprites(spr)

        self.reader.seek(self.largest_offset)
        spr.end_offset = self.largest_offset
        return spr

    def _read_table_entry(self) -> int:
        """Read one table entry and return the absolute offset it points at."""
        self.reader.skip(SprFormat.TABLE_ENTRY_ID_LEN)
        return self.reader.read_u32()

    def _read_textures(self, spr: SprFile) -> None:
        self.reader.seek(spr.file_start + spr.texture_table_offset)

        for _ in range(spr.texture_count):
            offset = self._read_table_entry()
            resume = self.reader.tell()

            self.reader.seek(offset)
            spr.textures.append(self.texture_decoder(self.reader))
            self.largest_offset = max(self.largest_offset, self.reader.tell())

            self.reader.seek(resume)

    def _read_sprites(self, spr: SprFile) -> None:
        self.reader.seek(spr.file_start + spr.sprite_table_offset)

        for _ in range(spr.sprite_count):
            offset = self._read_table_entry()
            resume = self.reader.tell()

            desc = SpriteDescriptor.read_from_reader(self.reader, offset)
            spr.sprites.append(self._build_record(spr, desc, offset))
            self.largest_offset = max(
                self.largest_offset, self.reader.tell() + SprFormat.DESC_TRAILING_LEN
            )

            self.reader.seek(resume)

    def _build_record(
        self, spr: SprFile, desc: SpriteDescriptor, offset: int
    ) -> SpriteRecord:
        x1, y1, x2, y2 = desc.x1, desc.y1, desc.x2, desc.y2
        if self.translation_mode == TranslationMode.APPLY:
            x1 += desc.x_translate
            x2 += desc.x_translate
            y1 += desc.y_translate
            y2 += desc.y_translate

        width = x2 - x1
        height = y2 - y1

        # Some unused sprites have bounds larger than their texture
        if 0 <= desc.texture_index < len(spr.textures):
            texture = spr.textures[desc.texture_index]
            width = clamp_dimension(width, texture.width)
            height = clamp_dimension(height, texture.height)

        return SpriteRecord(
            x=x1,
            y=y1,
            width=width,
            height=height,
            texture_index=desc.texture_index,
            corner_colors=desc.colors,
            x_translate=desc.x_translate,
            y_translate=desc.y_translate,
            descriptor_offset=offset,
        )


def decode(
    reader: CursorReader,
    translation_mode: str = TranslationMode.SKIP,
    texture_decoder: Optional[TextureDecoder] = None,
) -> SprFile:
    """Decode one SPR container from ``reader``.

    Raises:
        FormatError: If the magic does not match or a texture is malformed
        TruncatedDataError: If any table or record lies outside the source
    """
    return SPRParser(reader, translation_mode, texture_decoder).parse()
