from __future__ import annotations

from typing import Protocol

from domain.models import NodeApproximation
from domain.services.relation_graph import RelationGraph


class LayoutEngine(Protocol):
    def place(self, graph: RelationGraph) -> list[NodeApproximation]:
        ...
