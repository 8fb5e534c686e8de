from __future__ import annotations

from dataclasses import dataclass, field

from domain.models import LABEL_OFFSET, Arrow, Diagram, NodePlacement, Point
from domain.styles import ArrowDirection, BorderPart

BLANK = " "


def segment_direction(start: Point, end: Point) -> ArrowDirection | None:
    dx = end.x - start.x
    dy = end.y - start.y
    if dy == 0:
        if dx < 0:
            return ArrowDirection.LEFT
        if dx > 0:
            return ArrowDirection.RIGHT
        return None
    return ArrowDirection.UP if dy < 0 else ArrowDirection.DOWN


def head_direction(arrow: Arrow) -> ArrowDirection:
    # Only the last segment counts; a collapsed one points right.
    return segment_direction(arrow.middle, arrow.end) or ArrowDirection.RIGHT


@dataclass
class Canvas:
    """Sparse character grid; a later write to the same cell replaces the earlier one."""

    cells: dict[Point, str] = field(default_factory=dict)

    def put(self, point: Point, char: str) -> None:
        self.cells[point] = char

    def paint_node(self, node: NodePlacement) -> None:
        origin = node.anchor
        last_x = node.width - 1
        last_y = node.height - 1
        border = node.border

        self.put(origin, border.glyph(BorderPart.TOP_LEFT))
        self.put(origin.shifted(dx=last_x), border.glyph(BorderPart.TOP_RIGHT))
        self.put(origin.shifted(dy=last_y), border.glyph(BorderPart.BOTTOM_LEFT))
        self.put(origin.shifted(dx=last_x, dy=last_y), border.glyph(BorderPart.BOTTOM_RIGHT))
        for x in range(1, last_x):
            self.put(origin.shifted(dx=x), border.glyph(BorderPart.HORIZONTAL))
            self.put(origin.shifted(dx=x, dy=last_y), border.glyph(BorderPart.HORIZONTAL))
        for y in range(1, last_y):
            self.put(origin.shifted(dy=y), border.glyph(BorderPart.VERTICAL))
            self.put(origin.shifted(dx=last_x, dy=y), border.glyph(BorderPart.VERTICAL))
        for idx, char in enumerate(node.label):
            self.put(origin.shifted(dx=LABEL_OFFSET + idx, dy=1), char)

    def paint_arrow(self, arrow: Arrow) -> None:
        self._paint_segment(arrow, arrow.start, arrow.middle)
        self._paint_segment(arrow, arrow.middle, arrow.end)
        self.put(arrow.end, arrow.head.glyph(head_direction(arrow)))

    def _paint_segment(self, arrow: Arrow, start: Point, end: Point) -> None:
        dx = end.x - start.x
        if dx != 0:
            direction = ArrowDirection.LEFT if dx < 0 else ArrowDirection.RIGHT
            xs = range(end.x + 1, start.x + 1) if dx < 0 else range(start.x, end.x)
            for x in xs:
                self.put(Point(x, start.y), arrow.body.glyph(direction))
        dy = end.y - start.y
        if dy != 0:
            direction = ArrowDirection.UP if dy < 0 else ArrowDirection.DOWN
            ys = range(end.y + 1, start.y + 1) if dy < 0 else range(start.y, end.y)
            for y in ys:
                self.put(Point(end.x, y), arrow.body.glyph(direction))

    def to_text(self) -> str:
        if not self.cells:
            return ""
        max_x = max(point.x for point in self.cells)
        max_y = max(point.y for point in self.cells)
        rows = [
            "".join(self.cells.get(Point(x, y), BLANK) for x in range(max_x + 1))
            for y in range(max_y + 1)
        ]
        return "".join(f"{row}\n" for row in rows)


def compose(diagram: Diagram) -> str:
    canvas = Canvas()
    # Boxes first so arrow cells win where they overlap a border.
    for node in diagram.nodes:
        canvas.paint_node(node)
    for arrow in diagram.arrows:
        canvas.paint_arrow(arrow)
    return canvas.to_text()
