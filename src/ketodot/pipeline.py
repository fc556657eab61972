"""One ketodot run: read, color, serialize, output."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Sequence, TextIO

from .graph.coloring import Palette, assign_colors
from .graph.dot import to_dot
from .graph.render import DOT_FORMAT, write_output
from .tuples.reader import read_sources, read_tuples

logger = logging.getLogger("ketodot.pipeline")


def render_text(text: str, palette: Iterable[str] | None = None, source: str | None = None) -> str:
    """Convert tuple text straight to DOT text."""
    tuples = read_tuples(text, source=source)
    return to_dot(assign_colors(tuples, Palette(palette)))


@dataclass(frozen=True)
class PipelineResult:
    tuple_count: int
    group_count: int
    dot: str


@dataclass
class Pipeline:
    sources: Sequence[str]
    palette: Sequence[str] | None = None
    output_format: str = DOT_FORMAT
    output_path: str | None = None
    stdin: TextIO | None = None
    stdout: TextIO | None = None

    def run_once(self) -> PipelineResult:
        # A new palette per run; colors never leak between runs.
        tuples = read_sources(self.sources, stdin=self.stdin)
        assign_colors(tuples, Palette(self.palette))
        dot = to_dot(tuples)
        write_output(dot, self.output_format, self.output_path, stdout=self.stdout)
        result = PipelineResult(
            tuple_count=len(tuples),
            group_count=len({item.color for item in tuples}),
            dot=dot,
        )
        logger.info(
            "ketodot run complete: tuples=%d groups=%d sources=%s",
            result.tuple_count,
            result.group_count,
            ",".join(self.sources),
        )
        return result
