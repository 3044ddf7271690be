from enum import Enum
from typing import Any


class _EnumBase:
    """Enum base class with member helpers"""

    @classmethod
    def get_member_values(cls: type[Enum]) -> list[Any]:
        return [item.value for item in cls.__members__.values()]


class StrEnum(_EnumBase, str, Enum):
    """String enum"""


class DataBaseType(StrEnum):
    """Database type"""

    mysql = 'mysql'
    postgresql = 'postgresql'
    sqlite = 'sqlite'


class SlideType(StrEnum):
    """Role of a slide within the deck narrative"""

    TITLE = 'TITLE'
    INTRO = 'INTRO'
    CONTENT = 'CONTENT'
    CONCLUSION = 'CONCLUSION'
    NEXT_STEPS = 'NEXT_STEPS'


class SlideLayout(StrEnum):
    """Visual layout of a slide"""

    TEXT_ONLY = 'TEXT_ONLY'
    TITLE_COVER = 'TITLE_COVER'
    TITLE_ONLY = 'TITLE_ONLY'
    TEXT_IMAGE_LEFT = 'TEXT_IMAGE_LEFT'
    TEXT_IMAGE_RIGHT = 'TEXT_IMAGE_RIGHT'
    IMAGE_FULL = 'IMAGE_FULL'
    BULLETS_IMAGE = 'BULLETS_IMAGE'
    TWO_COLUMN = 'TWO_COLUMN'
    IMAGE_BACKGROUND = 'IMAGE_BACKGROUND'
    TIMELINE = 'TIMELINE'
    QUOTE_LARGE = 'QUOTE_LARGE'
    STATISTICS_GRID = 'STATISTICS_GRID'
    IMAGE_OVERLAY = 'IMAGE_OVERLAY'
    SPLIT_CONTENT = 'SPLIT_CONTENT'
    COMPARISON = 'COMPARISON'


# Layouts that render an image next to (or behind) the text
IMAGE_LAYOUTS: frozenset[SlideLayout] = frozenset({
    SlideLayout.TEXT_IMAGE_LEFT,
    SlideLayout.TEXT_IMAGE_RIGHT,
    SlideLayout.IMAGE_FULL,
    SlideLayout.BULLETS_IMAGE,
    SlideLayout.IMAGE_BACKGROUND,
    SlideLayout.IMAGE_OVERLAY,
    SlideLayout.SPLIT_CONTENT,
    SlideLayout.COMPARISON,
})


class TextAlign(StrEnum):
    """Text alignment override"""

    LEFT = 'LEFT'
    CENTER = 'CENTER'
    RIGHT = 'RIGHT'


class KeepMode(StrEnum):
    """Follow-up after a regeneration preview"""

    regenerated = 'regenerated'
    both = 'both'
