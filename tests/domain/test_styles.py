from __future__ import annotations

import pytest

from domain.styles import (
    ArrowBody,
    ArrowDirection,
    ArrowHead,
    BorderKind,
    BorderPart,
    arrow_body_for,
    arrow_head_for,
)


def test_box_border_glyphs() -> None:
    assert BorderKind.BOX.glyph(BorderPart.HORIZONTAL) == "-"
    assert BorderKind.BOX.glyph(BorderPart.VERTICAL) == "|"
    for corner in (
        BorderPart.TOP_LEFT,
        BorderPart.TOP_RIGHT,
        BorderPart.BOTTOM_LEFT,
        BorderPart.BOTTOM_RIGHT,
    ):
        assert BorderKind.BOX.glyph(corner) == "+"


def test_rounded_border_uses_box_drawing_corners() -> None:
    assert BorderKind.ROUNDED.glyph(BorderPart.TOP_LEFT) == "╭"
    assert BorderKind.ROUNDED.glyph(BorderPart.BOTTOM_RIGHT) == "╯"


@pytest.mark.parametrize(
    ("direction", "body", "head"),
    [
        (ArrowDirection.LEFT, "-", "<"),
        (ArrowDirection.RIGHT, "-", ">"),
        (ArrowDirection.UP, "|", "^"),
        (ArrowDirection.DOWN, "|", "v"),
    ],
)
def test_basic_arrow_glyphs(direction: ArrowDirection, body: str, head: str) -> None:
    assert ArrowBody.BASIC.glyph(direction) == body
    assert ArrowHead.BASIC.glyph(direction) == head


@pytest.mark.parametrize("token", ["->", "-->", "==>", "-<", "~"])
def test_every_token_maps_to_basic_style(token: str) -> None:
    assert arrow_body_for(token) is ArrowBody.BASIC
    assert arrow_head_for(token) is ArrowHead.BASIC
