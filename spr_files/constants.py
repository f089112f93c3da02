"""
SPR and TMX file format constants.
"""


class SprFormat:
    # "SPR0" read as a little-endian uint32
    MAGIC = 0x30525053
    HEADER_RESERVED_BEFORE_MAGIC = 8
    HEADER_RESERVED_AFTER_MAGIC = 8
    TABLE_ENTRY_ID_LEN = 4

    # Sprite descriptor layout
    DESC_RESERVED_HEAD = 20
    DESC_RESERVED_AFTER_TEXTURE_INDEX = 44
    DESC_RESERVED_AFTER_TRANSLATE = 8
    DESC_TRAILING_LEN = 28
    CORNER_COLOR_COUNT = 4


class TranslationMode:
    """Whether a descriptor's translate offset is added to its rectangle."""

    SKIP = "skip"
    APPLY = "apply"

    ALL = (SKIP, APPLY)


class Tmx:
    MAGIC = 0x30584D54  # "TMX0"
    HEADER_LEN = 64
    USER_COMMENT_LEN = 28
    ALPHA_MAX = 0x80


class PixelFormat:
    PSMCT32 = 0x00
    PSMCT24 = 0x01
    PSMCT16 = 0x02
    PSMCT16S = 0x0A
    PSMT8 = 0x13
    PSMT4 = 0x14

    NAMES = {
        PSMCT32: "PSMCT32",
        PSMCT24: "PSMCT24",
        PSMCT16: "PSMCT16",
        PSMCT16S: "PSMCT16S",
        PSMT8: "PSMT8",
        PSMT4: "PSMT4",
    }

    INDEXED = (PSMT8, PSMT4)
    PALETTE_SIZES = {PSMT8: 256, PSMT4: 16}
    BYTES_PER_COLOR = {PSMCT32: 4, PSMCT24: 3, PSMCT16: 2, PSMCT16S: 2}


# Outline color used when drawing sprite bounds (RGBA)
BOUNDS_COLOR = (255, 0, 0, 255)
