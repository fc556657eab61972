"""Graphviz DOT serialization of colored relation tuples."""

from __future__ import annotations

from typing import Iterable

from ketodot.tuples.models import RelationTuple
from ketodot.tuples.subjects import subject_display

HEADER = "digraph {\n"
FOOTER = "}\n"


def quote(value: str) -> str:
    """Escape ``value`` for use inside a double-quoted DOT literal."""
    escaped = value.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n")
    return f'"{escaped}"'


def edge_line(item: RelationTuple) -> str:
    source = quote(item.node)
    target = quote(subject_display(item.subject))
    return f"  {source} -> {target} [ label={quote(item.relation)}, color={quote(item.color)}];\n"


def to_dot(tuples: Iterable[RelationTuple]) -> str:
    parts = [HEADER]
    parts.extend(edge_line(item) for item in tuples)
    parts.append(FOOTER)
    return "".join(parts)
