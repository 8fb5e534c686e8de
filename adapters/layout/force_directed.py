from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import List, Tuple

from domain.models import NodeApproximation, Point
from domain.ports.layout import LayoutEngine
from domain.services.relation_graph import RelationGraph

logger = logging.getLogger(__name__)

Vector = Tuple[float, float]


@dataclass(frozen=True)
class ForceDirectedConfig:
    iterations: int = 100
    attraction_strength: float = 1.0
    repulsion_strength: float = 1.0
    seed_columns: int = 3
    seed_spacing: float = 5.0
    # Edge length at which the logarithmic pull is zero.
    rest_length: float = 5.0
    idle_nudge: Vector = (0.1, 0.1)


class ForceDirectedLayoutEngine(LayoutEngine):
    def __init__(self, config: ForceDirectedConfig | None = None) -> None:
        self.config = config or ForceDirectedConfig()

    def place(self, graph: RelationGraph) -> List[NodeApproximation]:
        positions = self.seed_positions(len(graph))
        for _ in range(self.config.iterations):
            positions = self.step(graph, positions)
        approximations = self.approximate(graph.node_names, positions)
        logger.debug(
            "Placed %d nodes with %d edges after %d iterations",
            len(graph),
            len(graph.edges),
            self.config.iterations,
        )
        return approximations

    def seed_positions(self, count: int) -> List[Vector]:
        columns = self.config.seed_columns
        spacing = self.config.seed_spacing
        return [((idx % columns) * spacing, (idx // columns) * spacing) for idx in range(count)]

    def step(self, graph: RelationGraph, positions: List[Vector]) -> List[Vector]:
        # Every force is computed from the positions of the previous step.
        forces = [self._force_on(graph, node_id, positions) for node_id in range(len(positions))]
        moved: List[Vector] = []
        for (x, y), (fx, fy) in zip(positions, forces):
            if fx == 0.0 and fy == 0.0:
                fx, fy = self.config.idle_nudge
            moved.append((x + fx, y + fy))
        return moved

    def _force_on(self, graph: RelationGraph, node_id: int, positions: List[Vector]) -> Vector:
        fx, fy = 0.0, 0.0
        x, y = positions[node_id]
        for edge in graph.edges_of(node_id):
            other_x, other_y = positions[edge.other(node_id)]
            dx, dy = other_x - x, other_y - y
            distance = math.sqrt(dx**2 + dy**2)
            if distance == 0.0:
                continue
            magnitude = self.config.attraction_strength * math.log10(
                distance / self.config.rest_length
            )
            fx += magnitude * dx
            fy += magnitude * dy
        for other_id, (other_x, other_y) in enumerate(positions):
            if other_id == node_id:
                continue
            dx, dy = x - other_x, y - other_y
            distance = math.sqrt(dx**2 + dy**2)
            if distance == 0.0:
                continue
            magnitude = self.config.repulsion_strength / distance**2
            fx += magnitude * dx
            fy += magnitude * dy
        return fx, fy

    def approximate(self, names: List[str], positions: List[Vector]) -> List[NodeApproximation]:
        if not positions:
            return []
        offset_x = -round_half_away(min(x for x, _ in positions))
        offset_y = -round_half_away(min(y for _, y in positions))
        return [
            NodeApproximation(
                name=name,
                position=Point(round_half_away(x) + offset_x, round_half_away(y) + offset_y),
            )
            for name, (x, y) in zip(names, positions)
        ]


def round_half_away(value: float) -> int:
    """Round to the nearest integer, ties away from zero (Python's round() ties to even)."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))
