"""
Exceptions raised while decoding SPR containers and extracting sprites.
"""


class SprError(Exception):
    """Base class for every SPR decoding error."""


class FormatError(SprError, ValueError):
    """Bad magic or a structurally invalid header."""


class BoundsError(SprError, IndexError):
    """A palette index or sprite rectangle points outside its buffer."""


class TextureIndexError(BoundsError):
    """A sprite record references a texture the container does not have."""


class TruncatedDataError(SprError, EOFError):
    """A read or seek went past the end of the byte source."""
