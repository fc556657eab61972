"""ketodot: draw Ory Keto relation tuples as a colored Graphviz graph."""

from .errors import (
    ConfigError,
    KetodotError,
    MalformedIndirectSet,
    MissingSeparator,
    PaletteExhausted,
    RenderError,
    SourceReadError,
    TupleParseError,
)
from .graph import Palette, assign_colors, to_dot
from .tuples import Identifier, IndirectSet, RelationTuple, parse_tuple, read_tuples

__all__ = [
    "ConfigError",
    "Identifier",
    "IndirectSet",
    "KetodotError",
    "MalformedIndirectSet",
    "MissingSeparator",
    "Palette",
    "PaletteExhausted",
    "RelationTuple",
    "RenderError",
    "SourceReadError",
    "TupleParseError",
    "assign_colors",
    "parse_tuple",
    "read_tuples",
    "to_dot",
]
