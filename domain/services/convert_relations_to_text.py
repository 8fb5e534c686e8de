from __future__ import annotations

import logging
from dataclasses import dataclass

from domain.models import Diagram, RelationDocument
from domain.ports.layout import LayoutEngine
from domain.services.canvas import compose
from domain.services.parse_relations import parse_relations
from domain.services.relation_graph import RelationGraph
from domain.services.route_arrows import place_nodes, route_arrows
from domain.styles import BorderKind

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RenderConfig:
    # Layout columns are narrow compared to boxes, so x is stretched before routing.
    horizontal_stretch: int = 4
    merge_reverse_relations: bool = True
    border_kind: BorderKind = BorderKind.BOX


class RelationsToTextConverter:
    def __init__(self, layout_engine: LayoutEngine, config: RenderConfig | None = None) -> None:
        self.layout_engine = layout_engine
        self.config = config or RenderConfig()

    def build_diagram(self, document: RelationDocument) -> Diagram:
        graph = RelationGraph.from_relations(document.relations)
        approximations = self.layout_engine.place(graph)
        nodes = place_nodes(
            approximations,
            horizontal_stretch=self.config.horizontal_stretch,
            border=self.config.border_kind,
        )
        arrows = route_arrows(
            nodes,
            document.relations,
            merge_reverse_relations=self.config.merge_reverse_relations,
        )
        logger.debug(
            "Built diagram with %d boxes and %d arrows from %d relations",
            len(nodes),
            len(arrows),
            len(document.relations),
        )
        return Diagram(nodes=nodes, arrows=arrows)

    def convert(self, document: RelationDocument) -> str:
        return compose(self.build_diagram(document))

    def render_text(self, text: str) -> str:
        return self.convert(parse_relations(text))
