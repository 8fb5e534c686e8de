from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class BorderPart(Enum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"
    TOP_LEFT = "top_left"
    TOP_RIGHT = "top_right"
    BOTTOM_LEFT = "bottom_left"
    BOTTOM_RIGHT = "bottom_right"


class ArrowDirection(Enum):
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"

    @property
    def is_horizontal(self) -> bool:
        return self in (ArrowDirection.LEFT, ArrowDirection.RIGHT)


@dataclass(frozen=True)
class BorderGlyphs:
    horizontal: str
    vertical: str
    top_left: str
    top_right: str
    bottom_left: str
    bottom_right: str

    def for_part(self, part: BorderPart) -> str:
        return getattr(self, part.value)


@dataclass(frozen=True)
class ArrowBodyGlyphs:
    horizontal: str
    vertical: str

    def for_direction(self, direction: ArrowDirection) -> str:
        return self.horizontal if direction.is_horizontal else self.vertical


@dataclass(frozen=True)
class ArrowHeadGlyphs:
    left: str
    right: str
    up: str
    down: str

    def for_direction(self, direction: ArrowDirection) -> str:
        return getattr(self, direction.value)


class BorderKind(str, Enum):
    BOX = "box"
    ROUNDED = "rounded"

    def glyph(self, part: BorderPart) -> str:
        return BORDER_GLYPHS[self].for_part(part)


class ArrowBody(str, Enum):
    BASIC = "basic"

    def glyph(self, direction: ArrowDirection) -> str:
        return ARROW_BODY_GLYPHS[self].for_direction(direction)


class ArrowHead(str, Enum):
    BASIC = "basic"

    def glyph(self, direction: ArrowDirection) -> str:
        return ARROW_HEAD_GLYPHS[self].for_direction(direction)


BORDER_GLYPHS: dict[BorderKind, BorderGlyphs] = {
    BorderKind.BOX: BorderGlyphs(
        horizontal="-",
        vertical="|",
        top_left="+",
        top_right="+",
        bottom_left="+",
        bottom_right="+",
    ),
    BorderKind.ROUNDED: BorderGlyphs(
        horizontal="─",
        vertical="│",
        top_left="╭",
        top_right="╮",
        bottom_left="╰",
        bottom_right="╯",
    ),
}
ARROW_BODY_GLYPHS: dict[ArrowBody, ArrowBodyGlyphs] = {
    ArrowBody.BASIC: ArrowBodyGlyphs(horizontal="-", vertical="|"),
}
ARROW_HEAD_GLYPHS: dict[ArrowHead, ArrowHeadGlyphs] = {
    ArrowHead.BASIC: ArrowHeadGlyphs(left="<", right=">", up="^", down="v"),
}


def arrow_body_for(_token: str) -> ArrowBody:
    # Every shaft token ("-", "--", "==") draws the basic line for now.
    return ArrowBody.BASIC


def arrow_head_for(_token: str) -> ArrowHead:
    return ArrowHead.BASIC
