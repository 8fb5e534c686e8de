from __future__ import annotations

import pytest

from domain.errors import DiagramInvariantError
from domain.models import Relation
from domain.services.relation_graph import GraphEdge, RelationGraph


def test_add_node_is_idempotent() -> None:
    graph = RelationGraph()
    first = graph.add_node("A")
    second = graph.add_node("A")
    graph.add_node("B")

    assert first == second == 0
    assert len(graph) == 2
    assert graph.node_names == ["A", "B"]


def test_self_loops_and_duplicate_edges_are_ignored() -> None:
    graph = RelationGraph()
    for name in ("A", "B", "C"):
        graph.add_node(name)
    graph.add_edge("A", "B")
    graph.add_edge("A", "B")
    graph.add_edge("B", "A")
    graph.add_edge("A", "A")
    graph.add_edge("B", "C")

    assert graph.edges == [GraphEdge(0, 1), GraphEdge(1, 2)]
    assert graph.degree("A") == 1
    assert graph.degree("B") == 2


def test_edge_to_unknown_node_is_an_invariant_violation() -> None:
    graph = RelationGraph()
    graph.add_node("A")

    with pytest.raises(DiagramInvariantError):
        graph.add_edge("A", "missing")


def test_from_relations_registers_nodes_in_first_seen_order() -> None:
    relations = [
        Relation(source="B", arrow="->", target="A"),
        Relation(source="A", arrow="->", target="C"),
        Relation(source="C", arrow="->", target="C"),
    ]
    graph = RelationGraph.from_relations(relations)

    assert graph.node_names == ["B", "A", "C"]
    assert len(graph.edges) == 2
    assert "C" in graph
    assert "D" not in graph


def test_edges_of_returns_neighbours_by_id() -> None:
    graph = RelationGraph.from_relations(
        [
            Relation(source="A", arrow="->", target="B"),
            Relation(source="C", arrow="->", target="A"),
        ]
    )
    a_id = graph.node_id("A")

    neighbours = [graph.node_name(edge.other(a_id)) for edge in graph.edges_of(a_id)]
    assert neighbours == ["B", "C"]
