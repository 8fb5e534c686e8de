from __future__ import annotations

import pytest

from domain.errors import RelationParseError
from domain.models import Relation, RelationDocument
from domain.services.parse_relations import (
    parse_relation_line,
    parse_relations,
    split_respecting_quotes,
)


def test_split_keeps_quoted_labels_together() -> None:
    assert split_respecting_quotes('"Web UI" -> "Order Service"') == [
        "Web UI",
        "->",
        "Order Service",
    ]


def test_split_counts_every_single_space() -> None:
    assert split_respecting_quotes("A  -> B") == ["A", "", "->", "B"]


def test_parse_relation_line_keeps_direction() -> None:
    relation = parse_relation_line("A -> B")

    assert relation == Relation(source="A", arrow="->", target="B")


def test_reversal_marker_swaps_source_and_target() -> None:
    relation = parse_relation_line("A <- B")

    assert relation.source == "B"
    assert relation.target == "A"
    assert relation.arrow == "-<"


def test_parse_relations_reads_lines_in_order() -> None:
    document = parse_relations("A -> B\nB -> C\nC -> A\n")

    assert [(rel.source, rel.target) for rel in document.relations] == [
        ("A", "B"),
        ("B", "C"),
        ("C", "A"),
    ]
    assert document.node_names() == ["A", "B", "C"]


def test_parse_relations_accepts_crlf_line_endings() -> None:
    document = parse_relations("A -> B\r\nB -> C\r\n")

    assert len(document.relations) == 2
    assert document.relations[1] == Relation(source="B", arrow="->", target="C")


@pytest.mark.parametrize("blank", ["", "   "])
def test_blank_line_is_malformed(blank: str) -> None:
    with pytest.raises(RelationParseError) as excinfo:
        parse_relations(f"A -> B\n{blank}\nB -> C")

    assert excinfo.value.line == blank


def test_only_newline_splits_lines() -> None:
    with pytest.raises(RelationParseError) as excinfo:
        parse_relations("A -> B\x0cB -> C")

    assert excinfo.value.line == "A -> B\x0cB -> C"


def test_malformed_line_reports_exact_line() -> None:
    with pytest.raises(RelationParseError) as excinfo:
        parse_relations("A -> B\nA -> -> B\nC -> D")

    assert excinfo.value.line == "A -> -> B"
    assert str(excinfo.value) == "Cannot understand this line: A -> -> B"


def test_parse_stops_at_first_malformed_line() -> None:
    with pytest.raises(RelationParseError) as excinfo:
        parse_relations("A -> B -> C\nD E\n")

    assert str(excinfo.value) == "Cannot understand this line: A -> B -> C"


@pytest.mark.parametrize("line", ["A", "A ->", "A -> B C", '"A -> B'])
def test_lines_without_three_parts_are_rejected(line: str) -> None:
    with pytest.raises(RelationParseError):
        parse_relation_line(line)


def test_empty_text_gives_empty_document() -> None:
    assert parse_relations("") == RelationDocument(relations=[])


def test_document_text_reparses_to_same_relations() -> None:
    document = parse_relations('"Web UI" -> Gateway\nGateway <- Billing\n')

    assert document.to_text() == '"Web UI" -> Gateway\nBilling -< Gateway\n'
    assert parse_relations(document.to_text()) == document
