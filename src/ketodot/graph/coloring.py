"""Color assignment: one color per connected permission chain.

Two tuples are linked when they share a left key (same permission node) or
when one tuple's subject set points at the other's left key. Every tuple of a
linked component ends up with the color of its group.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, Sequence

from ketodot.errors import PaletteExhausted
from ketodot.tuples.models import RelationTuple

logger = logging.getLogger("ketodot.graph.coloring")

DEFAULT_PALETTE: tuple[str, ...] = (
    "blue3",
    "aqua",
    "aquamarine4",
    "blueviolet",
    "chocolate4",
    "darkgoldenrod",
    "darkgreen",
    "darkorange",
    "deeppink",
    "green",
    "indigo",
    "midnightblue",
    "sienna4",
    "tomato1",
)


class Palette:
    """Finite stack of color names; new components take from the end."""

    def __init__(self, colors: Iterable[str] | None = None) -> None:
        self._colors = list(DEFAULT_PALETTE if colors is None else colors)

    def pop(self) -> str | None:
        if not self._colors:
            return None
        return self._colors.pop()

    def give_back(self, color: str) -> None:
        self._colors.append(color)

    def __len__(self) -> int:
        return len(self._colors)


@dataclass
class ColorGroup:
    color: str
    members: list[RelationTuple] = field(default_factory=list)

    def add(self, item: RelationTuple) -> None:
        item.color = self.color
        self.members.append(item)


class ColorAssigner:
    """Single-use coloring pass owning its palette and key map."""

    def __init__(self, palette: Palette) -> None:
        self.palette = palette
        self._groups: dict[str, ColorGroup] = {}
        self._live: list[ColorGroup] = []

    def run(self, tuples: Sequence[RelationTuple]) -> list[RelationTuple]:
        try:
            self._assign(tuples)
        except PaletteExhausted:
            for item in tuples:
                item.color = ""
            raise
        logger.debug("ketodot colored %d tuples into %d groups", len(tuples), len(self._live))
        return list(tuples)

    def _assign(self, tuples: Sequence[RelationTuple]) -> None:
        for item in tuples:
            group = self._groups.get(item.left_key)
            if group is None:
                group = self._new_group()
                self._groups[item.left_key] = group
            group.add(item)

            right = item.right_key
            if not right:
                continue
            other = self._groups.get(right)
            if other is None:
                self._groups[right] = group
            elif other is not group:
                self._absorb(group, other)

    def groups(self) -> list[ColorGroup]:
        return list(self._live)

    def _new_group(self) -> ColorGroup:
        color = self.palette.pop()
        if color is None:
            raise PaletteExhausted(len(self._live) + 1)
        group = ColorGroup(color=color)
        self._live.append(group)
        return group

    def _absorb(self, survivor: ColorGroup, absorbed: ColorGroup) -> None:
        for member in absorbed.members:
            self._groups[member.left_key] = survivor
            if member.right_key:
                self._groups[member.right_key] = survivor
            survivor.add(member)
        self.palette.give_back(absorbed.color)
        self._live.remove(absorbed)
        absorbed.color = ""
        absorbed.members = []


def assign_colors(
    tuples: Sequence[RelationTuple],
    palette: Palette | Iterable[str] | None = None,
) -> list[RelationTuple]:
    """Color ``tuples`` in place and return them.

    A fresh :class:`Palette` is built for every call unless one is passed in.
    Raises :class:`PaletteExhausted` when a new component finds no color left;
    every tuple color is cleared again before the error propagates.
    """
    if not isinstance(palette, Palette):
        palette = Palette(palette)
    return ColorAssigner(palette).run(tuples)
