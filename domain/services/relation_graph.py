from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from domain.errors import DiagramInvariantError
from domain.models import Relation


@dataclass(frozen=True)
class GraphEdge:
    first_id: int
    second_id: int

    def touches(self, node_id: int) -> bool:
        return node_id in (self.first_id, self.second_id)

    def other(self, node_id: int) -> int:
        return self.second_id if self.first_id == node_id else self.first_id


class RelationGraph:
    """Undirected adjacency of named nodes, the input of a layout run.

    Nodes live in an append-only registry; their id is the insertion index.
    Edges reference nodes by id and are unique per unordered pair.
    """

    def __init__(self) -> None:
        self._names: list[str] = []
        self._ids: dict[str, int] = {}
        self._edges: list[GraphEdge] = []
        self._edge_keys: set[frozenset[int]] = set()

    @classmethod
    def from_relations(cls, relations: Iterable[Relation]) -> RelationGraph:
        graph = cls()
        for relation in relations:
            graph.add_node(relation.source)
            graph.add_node(relation.target)
            graph.add_edge(relation.source, relation.target)
        return graph

    def add_node(self, name: str) -> int:
        existing = self._ids.get(name)
        if existing is not None:
            return existing
        node_id = len(self._names)
        self._names.append(name)
        self._ids[name] = node_id
        return node_id

    def add_edge(self, first: str, second: str) -> None:
        if first == second:
            return
        first_id = self.node_id(first)
        second_id = self.node_id(second)
        key = frozenset((first_id, second_id))
        if key in self._edge_keys:
            return
        self._edge_keys.add(key)
        self._edges.append(GraphEdge(first_id, second_id))

    def node_id(self, name: str) -> int:
        try:
            return self._ids[name]
        except KeyError as exc:
            msg = f"Node {name!r} was not added to the graph"
            raise DiagramInvariantError(msg) from exc

    def node_name(self, node_id: int) -> str:
        return self._names[node_id]

    @property
    def node_names(self) -> list[str]:
        return list(self._names)

    @property
    def edges(self) -> list[GraphEdge]:
        return list(self._edges)

    def edges_of(self, node_id: int) -> Iterator[GraphEdge]:
        return (edge for edge in self._edges if edge.touches(node_id))

    def degree(self, name: str) -> int:
        node_id = self.node_id(name)
        return sum(1 for _ in self.edges_of(node_id))

    def __len__(self) -> int:
        return len(self._names)

    def __contains__(self, name: object) -> bool:
        return name in self._ids
