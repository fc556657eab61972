"""Subject model: opaque identifiers and indirect subject sets."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from ketodot.errors import MalformedIndirectSet


@dataclass(frozen=True)
class Identifier:
    value: str


@dataclass(frozen=True)
class IndirectSet:
    """Every subject holding ``relation`` on ``object`` within ``namespace``."""

    namespace: str
    object: str
    relation: str


Subject = Union[Identifier, IndirectSet]


def parse_subject(
    text: str,
    *,
    line: str | None = None,
    line_number: int | None = None,
    source: str | None = None,
) -> Subject:
    if "#" not in text:
        return Identifier(text)
    parts = text.split("#")
    if len(parts) != 2:
        raise MalformedIndirectSet(text, line=line or text, line_number=line_number, source=source)
    inner = parts[0].split(":")
    if len(inner) != 2:
        raise MalformedIndirectSet(text, line=line or text, line_number=line_number, source=source)
    return IndirectSet(namespace=inner[0], object=inner[1], relation=parts[1])


def subject_display(subject: Subject) -> str:
    # The relation is left out so every set on one object collapses onto one node.
    if isinstance(subject, IndirectSet):
        return f"{subject.namespace}:{subject.object}"
    return subject.value


def subject_key(subject: Subject) -> str:
    if isinstance(subject, IndirectSet):
        return f"{subject.namespace}:{subject.object}#{subject.relation}"
    return ""


def subject_to_string(subject: Subject) -> str:
    """Render the subject back into tuple syntax."""
    if isinstance(subject, IndirectSet):
        return f"({subject_key(subject)})"
    return subject.value


def subjects_equal(left: object, right: object) -> bool:
    if isinstance(left, Identifier) and isinstance(right, Identifier):
        return left.value == right.value
    if isinstance(left, IndirectSet) and isinstance(right, IndirectSet):
        return (
            left.namespace == right.namespace
            and left.object == right.object
            and left.relation == right.relation
        )
    return False
