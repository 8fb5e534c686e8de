from __future__ import annotations

from collections.abc import Iterable

from domain.errors import RelationParseError
from domain.models import Relation, RelationDocument

QUOTE = '"'
SEPARATOR = " "
RELATION_PARTS = 3


def split_respecting_quotes(line: str) -> list[str]:
    parts: list[str] = []
    current: list[str] = []
    in_quotes = False
    for char in line:
        if char == SEPARATOR and not in_quotes:
            parts.append("".join(current))
            current = []
        elif char == QUOTE:
            in_quotes = not in_quotes
        else:
            current.append(char)
    parts.append("".join(current))
    return parts


def parse_relation_line(line: str) -> Relation:
    parts = split_respecting_quotes(line)
    if len(parts) != RELATION_PARTS:
        raise RelationParseError(line)
    left, arrow, right = parts
    return Relation.from_parts(left, arrow, right)


def iter_relation_lines(text: str) -> Iterable[str]:
    lines = text.split("\n")
    # A terminating newline does not open another line.
    if lines[-1] == "":
        lines.pop()
    for line in lines:
        yield line.removesuffix("\r")


def parse_relations(text: str) -> RelationDocument:
    """Parse one relation per line, stopping at the first line that is not a triple."""
    relations = [parse_relation_line(line) for line in iter_relation_lines(text)]
    return RelationDocument(relations=relations)
