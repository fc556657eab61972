"""Relation tuple grammar: ``namespace:object#relation@subject``."""

from __future__ import annotations

from ketodot.errors import MissingSeparator

from .models import RelationTuple
from .subjects import parse_subject


def _split_once(
    text: str,
    separator: str,
    *,
    line: str,
    line_number: int | None,
    source: str | None,
) -> tuple[str, str]:
    head, found, tail = text.partition(separator)
    if not found:
        raise MissingSeparator(separator, line=line, line_number=line_number, source=source)
    return head, tail


def _strip_parentheses(text: str) -> str:
    if len(text) >= 2 and text.startswith("(") and text.endswith(")"):
        return text[1:-1]
    return text


def parse_tuple(line: str, line_number: int | None = None, source: str | None = None) -> RelationTuple:
    """Decode one trimmed, non-comment line into a :class:`RelationTuple`.

    The subject may be wrapped in a single pair of parentheses. A subject that
    contains ``#`` is read as an indirect set, anything else as an identifier.
    """
    context = {"line": line, "line_number": line_number, "source": source}
    namespace, rest = _split_once(line, ":", **context)
    obj, rest = _split_once(rest, "#", **context)
    relation, raw_subject = _split_once(rest, "@", **context)
    subject = parse_subject(_strip_parentheses(raw_subject), **context)
    return RelationTuple(namespace=namespace, object=obj, relation=relation, subject=subject)
