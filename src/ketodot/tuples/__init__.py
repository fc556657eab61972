"""Relation tuple model, grammar and reader."""

from .models import RelationTuple
from .parser import parse_tuple
from .reader import read_sources, read_tuples
from .subjects import Identifier, IndirectSet, Subject, parse_subject, subject_display, subjects_equal

__all__ = [
    "Identifier",
    "IndirectSet",
    "RelationTuple",
    "Subject",
    "parse_subject",
    "parse_tuple",
    "read_sources",
    "read_tuples",
    "subject_display",
    "subjects_equal",
]
