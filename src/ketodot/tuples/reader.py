"""Read relation tuples from text, files or stdin."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Iterable, TextIO

from ketodot.errors import SourceReadError

from .models import RelationTuple
from .parser import parse_tuple

logger = logging.getLogger("ketodot.tuples.reader")

STDIN = "-"
COMMENT_PREFIX = "//"


def read_tuples(text: str, source: str | None = None) -> list[RelationTuple]:
    """Parse every tuple line of ``text``.

    Lines are trimmed; blank lines and ``//`` comments are skipped. The first
    bad line aborts the read and no partial list is returned.
    """
    tuples: list[RelationTuple] = []
    for index, raw in enumerate(text.split("\n"), start=1):
        row = raw.strip()
        if not row or row.startswith(COMMENT_PREFIX):
            continue
        tuples.append(parse_tuple(row, line_number=index, source=source))
    return tuples


def read_source(name: str, stdin: TextIO | None = None) -> list[RelationTuple]:
    if name == STDIN:
        stream = stdin if stdin is not None else sys.stdin
        return read_tuples(stream.read(), source="stdin")
    try:
        text = Path(name).read_text(encoding="utf-8")
    except OSError as exc:
        raise SourceReadError(name, exc.strerror or str(exc)) from exc
    return read_tuples(text, source=name)


def read_sources(names: Iterable[str], stdin: TextIO | None = None) -> list[RelationTuple]:
    """Concatenate the tuples of every source in argument order."""
    tuples: list[RelationTuple] = []
    for name in names:
        batch = read_source(name, stdin=stdin)
        logger.debug("ketodot read %d tuples from %s", len(batch), name)
        tuples.extend(batch)
    return tuples
