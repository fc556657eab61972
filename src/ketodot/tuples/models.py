"""Relation tuple model."""

from __future__ import annotations

from dataclasses import dataclass

from .subjects import Subject, subject_key, subject_to_string


@dataclass
class RelationTuple:
    namespace: str
    object: str
    relation: str
    subject: Subject
    color: str = ""

    @property
    def left_key(self) -> str:
        return f"{self.namespace}:{self.object}#{self.relation}"

    @property
    def right_key(self) -> str:
        """Key of the subject set this tuple points at, or ``""`` for identifiers."""
        return subject_key(self.subject)

    @property
    def node(self) -> str:
        return f"{self.namespace}:{self.object}"

    def __str__(self) -> str:
        return f"{self.left_key}@{subject_to_string(self.subject)}"
