from __future__ import annotations


class RelationParseError(ValueError):
    """Raised for a relation line that does not split into source, arrow and target."""

    def __init__(self, line: str) -> None:
        self.line = line
        super().__init__(f"Cannot understand this line: {line}")


class DiagramInvariantError(RuntimeError):
    """Pipeline stages disagree on the node set.

    Never raised for bad user input; seeing it means the graph, layout and
    routing stages were wired with different relation lists.
    """
