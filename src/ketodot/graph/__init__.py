"""Color assignment, DOT serialization and output."""

from .coloring import DEFAULT_PALETTE, ColorAssigner, ColorGroup, Palette, assign_colors
from .dot import quote, to_dot
from .render import OUTPUT_FORMATS, write_output

__all__ = [
    "DEFAULT_PALETTE",
    "OUTPUT_FORMATS",
    "ColorAssigner",
    "ColorGroup",
    "Palette",
    "assign_colors",
    "quote",
    "to_dot",
    "write_output",
]
