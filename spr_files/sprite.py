"""
Sprite data structures for representing decoded SPR containers.
"""

from dataclasses import dataclass, field
from typing import List, Tuple

from .constants import TranslationMode
from .texture import Texture

Color = Tuple[int, int, int, int]


class _Dummy:
    """Marker returned for sprites that carry no pixel data."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "DUMMY"

    def __bool__(self) -> bool:
        return False


DUMMY = _Dummy()


@dataclass(frozen=True)
class SpriteRecord:
    """Sub-rectangle of one texture plus four tint colors.

    ``texture_index`` is an index into ``SprFile.textures`` and is not checked
    at parse time.
    """

    x: int
    y: int
    width: int
    height: int
    texture_index: int
    corner_colors: Tuple[Color, Color, Color, Color] = ((0, 0, 0, 0),) * 4
    x_translate: int = 0
    y_translate: int = 0
    descriptor_offset: int = 0

    @property
    def position(self) -> Tuple[int, int]:
        return self.x, self.y

    @property
    def size(self) -> Tuple[int, int]:
        return self.width, self.height

    def is_dummy(self) -> bool:
        return self.width <= 0 or self.height <= 0


@dataclass
class SprFile:
    """Decoded SPR container."""

    texture_count: int = 0
    sprite_count: int = 0
    texture_table_offset: int = 0
    sprite_table_offset: int = 0
    file_start: int = 0
    end_offset: int = 0
    translation_mode: str = TranslationMode.SKIP
    textures: List[Texture] = field(default_factory=list)
    sprites: List[SpriteRecord] = field(default_factory=list)

    def sprites_for_texture(self, texture_index: int) -> List[SpriteRecord]:
        return [s for s in self.sprites if s.texture_index == texture_index]

    def used_sprites(self) -> List[SpriteRecord]:
        """Sprites that are not dummies."""
        return [s for s in self.sprites if not s.is_dummy()]
