from __future__ import annotations

from collections.abc import Mapping

from domain.models import NodeApproximation, Point
from domain.services.relation_graph import RelationGraph


class StaticLayoutEngine:
    """Layout engine stand-in returning fixed grid positions by node name."""

    def __init__(self, positions: Mapping[str, tuple[int, int]]) -> None:
        self.positions = dict(positions)

    def place(self, graph: RelationGraph) -> list[NodeApproximation]:
        return [
            NodeApproximation(name=name, position=Point(*self.positions[name]))
            for name in graph.node_names
        ]
