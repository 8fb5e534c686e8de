from __future__ import annotations

from dataclasses import dataclass
from typing import List, Set

from pydantic import BaseModel, ConfigDict, Field

from domain.styles import ArrowBody, ArrowHead, BorderKind

REVERSAL_MARKER = "<"
BOX_HEIGHT = 3
# Two border columns plus one blank column on each side of the label.
BOX_PADDING = 4
LABEL_OFFSET = 2


class Relation(BaseModel):
    model_config = ConfigDict(frozen=True)

    source: str
    arrow: str
    target: str

    @classmethod
    def from_parts(cls, left: str, arrow: str, right: str) -> Relation:
        if arrow.startswith(REVERSAL_MARKER):
            return cls(source=right, arrow=arrow[::-1], target=left)
        return cls(source=left, arrow=arrow, target=right)

    @property
    def is_self_relation(self) -> bool:
        return self.source == self.target

    def to_line(self) -> str:
        return " ".join(_quote_part(part) for part in (self.source, self.arrow, self.target))


class RelationDocument(BaseModel):
    relations: List[Relation] = Field(default_factory=list)

    def node_names(self) -> List[str]:
        seen: Set[str] = set()
        names: List[str] = []
        for relation in self.relations:
            for name in (relation.source, relation.target):
                if name in seen:
                    continue
                seen.add(name)
                names.append(name)
        return names

    def to_text(self) -> str:
        return "".join(f"{relation.to_line()}\n" for relation in self.relations)


def _quote_part(part: str) -> str:
    if " " in part or not part:
        return f'"{part}"'
    return part


@dataclass(frozen=True)
class Point:
    x: int
    y: int

    def shifted(self, dx: int = 0, dy: int = 0) -> Point:
        return Point(self.x + dx, self.y + dy)


@dataclass(frozen=True)
class NodeApproximation:
    name: str
    position: Point


@dataclass(frozen=True)
class NodePlacement:
    label: str
    anchor: Point
    border: BorderKind = BorderKind.BOX

    @property
    def width(self) -> int:
        return len(self.label) + BOX_PADDING

    @property
    def height(self) -> int:
        return BOX_HEIGHT


@dataclass(frozen=True)
class Arrow:
    start: Point
    middle: Point
    end: Point
    body: ArrowBody = ArrowBody.BASIC
    head: ArrowHead = ArrowHead.BASIC


@dataclass(frozen=True)
class Diagram:
    nodes: List[NodePlacement]
    arrows: List[Arrow]
