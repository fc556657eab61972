from __future__ import annotations

import io
from pathlib import Path

import pytest

from ketodot.errors import MissingSeparator, PaletteExhausted
from ketodot.pipeline import Pipeline, render_text

TUPLES = """// sample
docs:readme#viewer@(groups:eng#member)
groups:eng#member@alice
docs:readme#owner@bob
"""


def test_render_text() -> None:
    dot = render_text(TUPLES, palette=["red", "green"])
    assert dot == (
        "digraph {\n"
        '  "docs:readme" -> "groups:eng" [ label="viewer", color="green"];\n'
        '  "groups:eng" -> "alice" [ label="member", color="green"];\n'
        '  "docs:readme" -> "bob" [ label="owner", color="red"];\n'
        "}\n"
    )


def test_repeated_runs_are_identical(tmp_path: Path) -> None:
    source = tmp_path / "acl.keto"
    source.write_text(TUPLES, encoding="utf-8")
    stdout = io.StringIO()
    pipeline = Pipeline(sources=[str(source)], palette=["red", "green"], stdout=stdout)
    first = pipeline.run_once()
    second = pipeline.run_once()
    assert first == second
    assert first.tuple_count == 3
    assert first.group_count == 2
    assert stdout.getvalue() == first.dot * 2


def test_pipeline_writes_dot_file(tmp_path: Path) -> None:
    source = tmp_path / "acl.keto"
    source.write_text(TUPLES, encoding="utf-8")
    target = tmp_path / "out" / "graph.dot"
    target.parent.mkdir()
    result = Pipeline(sources=[str(source)], output_path=str(target)).run_once()
    assert target.read_text(encoding="utf-8") == result.dot


def test_parse_error_stops_run_before_output() -> None:
    stdout = io.StringIO()
    pipeline = Pipeline(sources=["-"], stdin=io.StringIO("docs:readme#owner@bob\nbad\n"), stdout=stdout)
    with pytest.raises(MissingSeparator):
        pipeline.run_once()
    assert stdout.getvalue() == ""


def test_palette_exhaustion_stops_run_before_output() -> None:
    stdout = io.StringIO()
    pipeline = Pipeline(sources=["-"], palette=["red"], stdin=io.StringIO("a:o#r@x\nb:o#r@y\n"), stdout=stdout)
    with pytest.raises(PaletteExhausted):
        pipeline.run_once()
    assert stdout.getvalue() == ""
