from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from enum import Enum

from domain.errors import DiagramInvariantError
from domain.models import Arrow, NodeApproximation, NodePlacement, Point, Relation
from domain.styles import BorderKind, arrow_body_for, arrow_head_for

logger = logging.getLogger(__name__)


class Side(Enum):
    TOP = "top"
    BOTTOM = "bottom"
    LEFT = "left"
    RIGHT = "right"


class Heading(Enum):
    """Where the second point lies relative to the first one."""

    RIGHT_DOWN = "right_down"
    LEFT_UP = "left_up"
    LEFT_DOWN = "left_down"
    RIGHT_UP = "right_up"
    DOWN = "down"
    UP = "up"
    RIGHT = "right"
    LEFT = "left"


# (side of the source node, side of the target node)
SIDES_BY_HEADING: dict[Heading, tuple[Side, Side]] = {
    Heading.RIGHT_DOWN: (Side.BOTTOM, Side.LEFT),
    Heading.LEFT_UP: (Side.LEFT, Side.BOTTOM),
    Heading.LEFT_DOWN: (Side.BOTTOM, Side.RIGHT),
    Heading.RIGHT_UP: (Side.RIGHT, Side.BOTTOM),
    Heading.DOWN: (Side.BOTTOM, Side.TOP),
    Heading.UP: (Side.TOP, Side.BOTTOM),
    Heading.RIGHT: (Side.RIGHT, Side.LEFT),
    Heading.LEFT: (Side.LEFT, Side.RIGHT),
}

# Top and bottom start under the label, left and right skip the corner row.
FIRST_SLOT: dict[Side, int] = {
    Side.TOP: 2,
    Side.BOTTOM: 2,
    Side.LEFT: 1,
    Side.RIGHT: 1,
}


def classify(first: Point, second: Point) -> Heading | None:
    if first.x < second.x and first.y < second.y:
        return Heading.RIGHT_DOWN
    if first.x > second.x and first.y > second.y:
        return Heading.LEFT_UP
    if first.x > second.x and first.y < second.y:
        return Heading.LEFT_DOWN
    if first.x < second.x and first.y > second.y:
        return Heading.RIGHT_UP
    if first.x == second.x and first.y < second.y:
        return Heading.DOWN
    if first.x == second.x and first.y > second.y:
        return Heading.UP
    if first.x < second.x and first.y == second.y:
        return Heading.RIGHT
    if first.x > second.x and first.y == second.y:
        return Heading.LEFT
    return None


def elbow_point(start: Point, end: Point, heading: Heading) -> Point:
    if heading in (Heading.RIGHT_DOWN, Heading.LEFT_DOWN):
        return Point(start.x, end.y)
    if heading in (Heading.LEFT_UP, Heading.RIGHT_UP):
        return Point(end.x, start.y)
    if heading is Heading.DOWN:
        return Point(start.x, start.y + 1)
    if heading is Heading.UP:
        return Point(start.x, end.y + 1)
    if heading is Heading.RIGHT:
        return Point(start.x + 1, start.y)
    return Point(end.x + 1, start.y)


class AnchorSlots:
    """Hands out attachment cells around one box, spreading arrows along each side."""

    def __init__(self, node: NodePlacement) -> None:
        self.node = node
        self._next_offset = dict(FIRST_SLOT)

    def take(self, side: Side) -> Point:
        offset = self._take_offset(side)
        anchor = self.node.anchor
        if side is Side.TOP:
            return Point(anchor.x + offset, anchor.y - 1)
        if side is Side.BOTTOM:
            return Point(anchor.x + offset, anchor.y + self.node.height)
        if side is Side.LEFT:
            return Point(anchor.x - 1, anchor.y + offset)
        return Point(anchor.x + self.node.width, anchor.y + offset)

    def _take_offset(self, side: Side) -> int:
        offset = self._next_offset[side]
        if side in (Side.LEFT, Side.RIGHT):
            self._next_offset[side] = (offset + 1) % self.node.height
        else:
            # Top and bottom keep moving right, past the box edge when crowded.
            self._next_offset[side] = offset + 1
        return offset


def place_nodes(
    approximations: Iterable[NodeApproximation],
    horizontal_stretch: int = 4,
    border: BorderKind = BorderKind.BOX,
) -> list[NodePlacement]:
    return [
        NodePlacement(
            label=approximation.name,
            anchor=Point(approximation.position.x * horizontal_stretch, approximation.position.y),
            border=border,
        )
        for approximation in approximations
    ]


class ArrowRouter:
    def __init__(
        self, nodes: Sequence[NodePlacement], merge_reverse_relations: bool = True
    ) -> None:
        self.merge_reverse_relations = merge_reverse_relations
        self._slots = {node.label: AnchorSlots(node) for node in nodes}
        self._routed_pairs: set[tuple[str, str]] = set()

    def route_all(self, relations: Iterable[Relation]) -> list[Arrow]:
        arrows: list[Arrow] = []
        seen: set[Arrow] = set()
        for relation in relations:
            arrow = self.route(relation)
            if arrow is None or arrow in seen:
                continue
            seen.add(arrow)
            arrows.append(arrow)
        return arrows

    def route(self, relation: Relation) -> Arrow | None:
        source = self._slots_for(relation.source)
        target = self._slots_for(relation.target)
        if relation.is_self_relation:
            logger.debug("Skipping self relation %s", relation.to_line())
            return None
        if self._already_routed(relation):
            logger.debug("Skipping repeated relation %s", relation.to_line())
            return None

        heading = classify(source.node.anchor, target.node.anchor)
        if heading is None:
            logger.debug("Skipping relation between overlapping boxes %s", relation.to_line())
            return None
        self._routed_pairs.add((relation.source, relation.target))

        source_side, target_side = SIDES_BY_HEADING[heading]
        start = source.take(source_side)
        end = target.take(target_side)
        path_heading = classify(start, end)
        if path_heading is None:
            return None
        return Arrow(
            start=start,
            middle=elbow_point(start, end, path_heading),
            end=end,
            body=arrow_body_for(relation.arrow),
            head=arrow_head_for(relation.arrow),
        )

    def _already_routed(self, relation: Relation) -> bool:
        if (relation.source, relation.target) in self._routed_pairs:
            return True
        return self.merge_reverse_relations and (
            (relation.target, relation.source) in self._routed_pairs
        )

    def _slots_for(self, name: str) -> AnchorSlots:
        slots = self._slots.get(name)
        if slots is None:
            msg = f"No laid out node named {name!r} for routing"
            raise DiagramInvariantError(msg)
        return slots


def route_arrows(
    nodes: Sequence[NodePlacement],
    relations: Iterable[Relation],
    merge_reverse_relations: bool = True,
) -> list[Arrow]:
    return ArrowRouter(nodes, merge_reverse_relations).route_all(relations)
