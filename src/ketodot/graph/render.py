"""Output stage: print DOT text or render it to an image through Graphviz."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TextIO

import graphviz

from ketodot.errors import ConfigError, RenderError

logger = logging.getLogger("ketodot.graph.render")

DOT_FORMAT = "dot"
IMAGE_FORMATS = ("png", "svg", "jpg")
OUTPUT_FORMATS = (DOT_FORMAT,) + IMAGE_FORMATS


def check_output(fmt: str, path: str | None) -> None:
    if fmt not in OUTPUT_FORMATS:
        logger.warning("ketodot invalid format given: %s", fmt)
        raise ConfigError(f"unknown output format {fmt!r}; expected one of {', '.join(OUTPUT_FORMATS)}")
    if fmt != DOT_FORMAT and not path:
        raise ConfigError("cannot output an image to stdout; please provide an output file")


def render_image(dot: str, fmt: str) -> bytes:
    try:
        return graphviz.Source(dot).pipe(format=fmt)
    except graphviz.ExecutableNotFound as exc:
        raise RenderError(f"graphviz executable not found: {exc}") from exc
    except graphviz.CalledProcessError as exc:
        raise RenderError(f"graphviz failed to render {fmt}: {exc}") from exc


def write_output(dot: str, fmt: str = DOT_FORMAT, path: str | None = None, stdout: TextIO | None = None) -> None:
    check_output(fmt, path)
    if fmt == DOT_FORMAT and not path:
        (stdout or sys.stdout).write(dot)
        return
    try:
        if fmt == DOT_FORMAT:
            Path(path).write_text(dot, encoding="utf-8")
        else:
            Path(path).write_bytes(render_image(dot, fmt))
    except OSError as exc:
        raise RenderError(f"could not write {fmt} output to {path}: {exc.strerror or exc}") from exc
    logger.info("ketodot wrote %s output to %s", fmt, path)
